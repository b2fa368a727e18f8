"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with the filters the type alias templates rely on.
"""

from pathlib import Path
from typing import Dict, Any, Optional

from jinja2 import DictLoader, Environment, FileSystemLoader, StrictUndefined

from .naming import quote_property_name


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
        """
        self.template_dir = template_dir
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            loader = DictLoader({})

        # Generated code must keep characters like < and > intact
        self._env = Environment(
            loader=loader,
            autoescape=False,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

        self._env.filters["quote_key"] = quote_property_name
        self._env.filters["comment"] = self._comment_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {e}"
            ) from e

    def _comment_filter(self, value: str, style: str = "//") -> str:
        """Add comment markers to each line."""
        lines = str(value).strip().split("\n")
        return "\n".join(f"{style} {line.rstrip()}".rstrip() for line in lines)


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, optionally backed by a template directory."""
    return TemplateEngine(template_dir)
