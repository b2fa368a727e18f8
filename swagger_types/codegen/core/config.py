"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Dict, Any, Optional, Union

from .naming import NameResolver, PropertyNamePolicy
from ...logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    output_file: Optional[str] = None
    header: Optional[str] = None  # None uses the language's header

    # Code style settings
    indent_size: int = 4
    use_tabs: bool = True

    # Naming settings
    transform_property: str = "normal"  # normal, firstCaseLower
    change_type_case: bool = False

    # Type handling
    type_overrides: Dict[str, str] = field(default_factory=dict)

    # Additional metadata
    add_comments: bool = False

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent(self) -> str:
        return "\t" if self.use_tabs else " " * self.indent_size

    def name_resolver(self) -> NameResolver:
        """Build the name resolver described by the naming settings."""
        if self.transform_property not in VALID_PROPERTY_TRANSFORMS:
            raise ConfigError(
                f"Invalid transform_property: {self.transform_property} "
                f"(expected one of: {', '.join(sorted(VALID_PROPERTY_TRANSFORMS))})"
            )
        return NameResolver.from_options(
            change_type_case=bool(self.change_type_case),
            transform_property=self.transform_property,
        )


VALID_PROPERTY_TRANSFORMS = {p.value for p in PropertyNamePolicy}

# Option spellings accepted from config files written for the Node tool
CONFIG_ALIASES = {
    "transformProperty": "transform_property",
    "changeTypeCase": "change_type_case",
    "typeOverrides": "type_overrides",
    "addComments": "add_comments",
}


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["flow"] = {
            "use_tabs": True,
            "transform_property": "normal",
            "change_type_case": False,
        }

        self._configs["typescript"] = {
            "use_tabs": False,
            "indent_size": 2,
            "transform_property": "normal",
            "change_type_case": False,
        }

    def get_config(
        self,
        language: Optional[str] = None,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        # Start with defaults
        base_config = dict(self._configs.get((language or "").lower(), {}))

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        # Apply custom overrides
        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            key = CONFIG_ALIASES.get(key, key)
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Add custom fields to the custom dict
        if custom_args:
            existing_custom = config_args.get("custom", {})
            if not isinstance(existing_custom, dict):
                raise ConfigError("Invalid configuration: custom must be an object")
            existing_custom = dict(existing_custom)
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        config = GeneratorConfig(**config_args)

        problems = self.validate_config(config)
        if problems:
            raise ConfigError(f"Invalid configuration: {'; '.join(problems)}")

        return config

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> list[str]:
        """Get list of languages with default settings."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings/errors
        """
        warnings = []

        transform = config.transform_property
        if not isinstance(transform, str) or transform not in VALID_PROPERTY_TRANSFORMS:
            warnings.append(f"Invalid transform_property: {config.transform_property}")

        for flag in ("change_type_case", "use_tabs", "add_comments"):
            value = getattr(config, flag)
            if not isinstance(value, bool):
                warnings.append(f"Invalid {flag}: {value!r}")

        indent_size = config.indent_size
        if isinstance(indent_size, bool) or not isinstance(indent_size, int) or indent_size < 0:
            warnings.append(f"Invalid indent_size: {config.indent_size!r}")

        if config.header is not None and not isinstance(config.header, str):
            warnings.append(f"Invalid header: {config.header!r}")
        elif config.header is not None and "\n" in config.header:
            warnings.append("Header should be a single line")

        if not isinstance(config.type_overrides, dict):
            warnings.append("type_overrides must be an object")
        elif not all(
            isinstance(k, str) and isinstance(v, str)
            for k, v in config.type_overrides.items()
        ):
            warnings.append("type_overrides must map primitive names to strings")

        if not isinstance(config.custom, dict):
            warnings.append("custom must be an object")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: Optional[str] = None,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)

