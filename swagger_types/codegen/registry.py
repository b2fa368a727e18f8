"""
Registry of the target languages a document can be converted to.

Maps language names and their aliases to generator classes and builds
configured generator instances.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from .core.config import ConfigError, GeneratorConfig, load_config
from .core.errors import GeneratorError
from .core.generator import CodeGenerator

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path, None]


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Language name and alias lookup for generator classes."""

    def __init__(self):
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
    ):
        """
        Register a generator class under a language name.

        Args:
            language: Primary language name (e.g. 'flow')
            generator_class: CodeGenerator subclass
            aliases: Alternative names accepted on the command line

        Raises:
            RegistryError: If the class is not a generator or an alias is taken
        """
        if not isinstance(generator_class, type) or not issubclass(
            generator_class, CodeGenerator
        ):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        primary = language.lower()
        self._generators[primary] = generator_class

        for alias in aliases or []:
            key = alias.lower()
            if key == primary:
                continue
            if key in self._generators:
                raise RegistryError(f"Alias '{alias}' is already a language name")
            owner = self._aliases.get(key)
            if owner is not None and owner != primary:
                raise RegistryError(f"Alias '{alias}' already points to '{owner}'")
            self._aliases[key] = primary

    def resolve_language(self, language: str) -> str:
        """
        Map a language name or alias to its primary name.

        Raises:
            RegistryError: If nothing is registered under that name
        """
        key = language.lower()
        if key in self._generators:
            return key
        if key in self._aliases:
            return self._aliases[key]

        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def create_generator(
        self, language: str, config: ConfigSource = None
    ) -> CodeGenerator:
        """
        Build a configured generator.

        Args:
            language: Language name or alias
            config: GeneratorConfig, override dict, config file path, or None
                for the language defaults

        Raises:
            RegistryError: If the language is unknown or the config is invalid
        """
        primary = self.resolve_language(language)

        try:
            if isinstance(config, GeneratorConfig):
                final_config = config
            elif isinstance(config, (str, Path)):
                final_config = load_config(primary, config_file=config)
            elif isinstance(config, dict) or config is None:
                final_config = load_config(primary, custom_config=config)
            else:
                raise RegistryError(f"Invalid config type: {type(config)}")

            return self._generators[primary](final_config)

        except (ConfigError, GeneratorError) as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

    def list_languages(self) -> List[str]:
        return sorted(self._generators)

    def aliases_of(self, language: str) -> List[str]:
        primary = language.lower()
        return sorted(a for a, target in self._aliases.items() if target == primary)

    def is_supported(self, language: str) -> bool:
        key = language.lower()
        return key in self._generators or key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """Describe a language for ``--list-languages``."""
        primary = self.resolve_language(language)
        generator = self.create_generator(primary)

        return {
            "name": generator.language_name,
            "class": type(generator).__name__,
            "file_extension": generator.file_extension,
            "header": generator.default_header,
            "aliases": self.aliases_of(primary),
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Return the shared registry, registering the built-in targets on first use."""
    global _global_registry
    if _global_registry is None:
        from .languages.flow import FlowGenerator
        from .languages.typescript import TypeScriptGenerator

        registry = GeneratorRegistry()
        registry.register("flow", FlowGenerator, aliases=["flowtype"])
        registry.register("typescript", TypeScriptGenerator, aliases=["ts"])
        _global_registry = registry
    return _global_registry


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    """Build a generator from the shared registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Describe every registered language, keyed by primary name."""
    return {language: get_language_info(language) for language in list_supported_languages()}
