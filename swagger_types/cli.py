"""
Command-line interface for swagger-types.

Reads a Swagger document from a file or URL and prints the generated
type aliases, or writes them to a file.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    ConfigError,
    GeneratorConfig,
    RegistryError,
    generate_code,
    get_generator,
    list_all_language_info,
    load_config,
)
from .codegen.registry import (
    get_registry,
    is_language_supported,
    list_supported_languages,
)
from .logging_config import configure_logging, get_logger
from .utils import JSONLoaderError, load_source

logger = get_logger(__name__)

# Status and errors go to stderr so stdout carries only generated code
console = Console(stderr=True)

SYNTAX_LEXERS = {"flow": "javascript", "typescript": "typescript"}


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="swagger-types",
        description="Generate type alias declarations from Swagger definitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  swagger-types -p ../swagger.json
  swagger-types -p http://petstore.swagger.io/v2/swagger.json
  swagger-types -p swagger.json -t firstCaseLower -c -o types.js.flow
  swagger-types -p swagger.json --language typescript -o api.d.ts
        """.strip(),
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    # Input
    parser.add_argument(
        "-p",
        "--path",
        metavar="PATH",
        help="Path or URL of the swagger json file",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30,
        help="Request timeout in seconds for URLs (default: 30)",
    )
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Do not verify TLS certificates when fetching a URL",
    )

    # Naming
    naming_group = parser.add_argument_group("naming")
    naming_group.add_argument(
        "-t",
        "--transform-property",
        "--transformProperty",
        dest="transform_property",
        choices=["normal", "firstCaseLower"],
        help="Transform property names (default: normal)",
    )
    naming_group.add_argument(
        "-c",
        "--change-type-case",
        "--changeTypeCase",
        dest="change_type_case",
        action="store_true",
        default=None,
        help="Convert definition names to PascalCase",
    )

    # Output
    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "-l",
        "--language",
        default="flow",
        help="Target language (default: flow; use --list-languages to see options)",
    )
    output_group.add_argument(
        "-o", "--output", metavar="FILE", help="Output file (default: stdout)"
    )
    output_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file"
    )
    output_group.add_argument(
        "--header", help="Replace the first line of the generated file"
    )
    output_group.add_argument(
        "--add-comments",
        action="store_true",
        default=None,
        help="Emit definition descriptions as comments",
    )
    output_group.add_argument(
        "--array-style",
        choices=["generic", "shorthand"],
        help="Array spelling for TypeScript: Array<T> or T[]",
    )
    output_group.add_argument(
        "--pretty",
        action="store_true",
        help="Print syntax-highlighted output instead of plain text",
    )

    # Information
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported target languages and exit",
    )
    info_group.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )
    info_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the command line tool.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.list_languages:
        return _list_languages()

    if not args.path:
        parser.error("the following arguments are required: -p/--path")

    try:
        return _run(args)
    except (CLIError, ConfigError, RegistryError, JSONLoaderError, FileNotFoundError) as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        logger.debug("Run aborted", exc_info=True)
        return 1


def _run(args: argparse.Namespace) -> int:
    """Load, generate and output."""
    language = args.language.lower()
    if not is_language_supported(language):
        raise CLIError(
            f"Unsupported language '{language}'. "
            f"Supported languages: {', '.join(list_supported_languages())}"
        )

    # Aliases share the defaults of their primary language
    language = get_registry().resolve_language(language)
    config = _build_config(args, language)
    generator = get_generator(language, config)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        load_task = progress.add_task("[cyan]Loading swagger document...", total=None)
        source, document = load_source(
            args.path, timeout=args.timeout, verify=not args.insecure
        )
        progress.remove_task(load_task)

        gen_task = progress.add_task(
            f"[green]Generating {generator.language_name} types...", total=None
        )
        result = generate_code(generator, document)
        progress.remove_task(gen_task)

    logger.info("Processed %s", source)

    if not result.success:
        console.print(
            f"[red]✗ Code generation failed:[/red] {escape(str(result.exception))}"
        )
        return 1

    _write_output(result.code, generator.language_name, args)

    if args.verbose and result.metadata:
        _show_metadata(result.metadata)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {escape(warning)}")

    return 0


def _build_config(args: argparse.Namespace, language: str) -> GeneratorConfig:
    """Build configuration from defaults, the config file and CLI arguments."""
    overrides: dict[str, Any] = {}

    if args.transform_property is not None:
        overrides["transform_property"] = args.transform_property

    if args.change_type_case is not None:
        overrides["change_type_case"] = args.change_type_case

    if args.header is not None:
        overrides["header"] = args.header

    if args.add_comments is not None:
        overrides["add_comments"] = args.add_comments

    if args.output:
        overrides["output_file"] = args.output

    config = load_config(language, custom_config=overrides, config_file=args.config)

    if args.array_style:
        if language != "typescript":
            raise CLIError(
                f"--array-style only applies to typescript, not {language}"
            )
        config.custom["array_style"] = args.array_style

    return config


def _write_output(code: str, language: str, args: argparse.Namespace) -> None:
    """Write generated code to the output file or stdout."""
    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(code, encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Failed to write to {output_path}: {e}") from e
        console.print(
            f"[green]✓[/green] Generated {language} types saved to "
            f"[cyan]{escape(str(output_path))}[/cyan]"
        )
        return

    if args.pretty:
        out = Console()
        out.print(Syntax(code, SYNTAX_LEXERS.get(language, "javascript"), theme="monokai"))
        return

    sys.stdout.write(code)
    sys.stdout.flush()


def _show_metadata(metadata: dict[str, Any]) -> None:
    """Print the generation metadata table."""
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )

    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in metadata.items():
        if isinstance(value, list):
            value = ", ".join(map(str, value))
        metadata_table.add_row(key.replace("_", " ").title(), escape(str(value)))

    console.print()
    console.print(metadata_table)


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Header", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(
            lang_name, info["file_extension"], escape(info["header"]), aliases
        )

    console.print()
    console.print(table)
    console.print(
        Panel(
            "[bold]Usage:[/bold] swagger-types -p [dim]swagger.json[/dim] "
            "--language [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0
