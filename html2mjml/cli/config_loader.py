"""YAML configuration loading and validation.

Configuration file structure:
    parser: html.parser          # or lxml
    options:
      validate_output: false
      preserve_class_names: true
      inline_styles: true
      wrap_content: true
      show_warnings: true
      validate_passthrough: false
    mappings:
      section:
        mjml_tag: mj-section
      aside:
        mjml_tag: mj-text
        attributes:
          font-size: 12px
        warning: Sidebars are flattened into text
"""

from typing import Any, Dict

import yaml

from ..errors import ConfigError, FilesystemError, InvalidMappingError
from ..element_mapping import normalize_mapping
from ..models import ConversionOptions
from .models import CLI_DEFAULT_OPTIONS, ConverterConfig


class ConfigLoader:
    """Handles configuration file loading and validation."""

    ALLOWED_TOP_LEVEL_FIELDS = {'options', 'mappings', 'parser'}

    ALLOWED_PARSERS = {'html.parser', 'lxml'}

    BOOLEAN_OPTIONS = {
        'validate_output',
        'preserve_class_names',
        'inline_styles',
        'wrap_content',
        'show_warnings',
        'validate_passthrough',
    }

    MAPPING_FIELDS = {
        'mjml_tag',
        'attributes',
        'self_closing',
        'special',
        'inline_element',
        'children_container',
        'warning',
    }

    @classmethod
    def load(cls, config_path: str) -> ConverterConfig:
        """Load and parse configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            ConverterConfig object with parsed configuration

        Raises:
            FilesystemError: If file cannot be read
            ConfigError: If configuration is invalid or malformed
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise FilesystemError(config_path, 'read', 'Configuration file not found')
        except PermissionError:
            raise FilesystemError(config_path, 'read', 'Permission denied')
        except OSError as e:
            raise FilesystemError(config_path, 'read', str(e))

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")

        if config_dict is None:
            return ConverterConfig()

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return cls.parse(config_dict)

    @classmethod
    def parse(cls, config_dict: Dict[str, Any]) -> ConverterConfig:
        """Validate a configuration dictionary.

        Raises:
            ConfigError: If a field is unknown or has the wrong type
        """
        unknown = set(config_dict) - cls.ALLOWED_TOP_LEVEL_FIELDS
        if unknown:
            raise ConfigError(f"Unknown fields: {', '.join(sorted(unknown))}")

        parser = config_dict.get('parser', 'html.parser')
        if parser not in cls.ALLOWED_PARSERS:
            raise ConfigError(
                f"Must be one of {', '.join(sorted(cls.ALLOWED_PARSERS))}, got {parser!r}",
                'parser',
            )

        return ConverterConfig(
            options=cls._parse_options(config_dict.get('options') or {}),
            mappings=cls._parse_mappings(config_dict.get('mappings') or {}),
            parser=parser,
        )

    @classmethod
    def _parse_options(cls, options: Any) -> ConversionOptions:
        if not isinstance(options, dict):
            raise ConfigError("Must be a dictionary", 'options')

        for name, value in options.items():
            if name not in cls.BOOLEAN_OPTIONS:
                raise ConfigError(f"Unknown option '{name}'", 'options')
            if not isinstance(value, bool):
                raise ConfigError(
                    f"Must be a boolean, got {type(value).__name__}",
                    f'options.{name}',
                )

        return ConversionOptions.merged(options, base=CLI_DEFAULT_OPTIONS)

    @classmethod
    def _parse_mappings(cls, mappings: Any) -> Dict[str, Dict[str, Any]]:
        if not isinstance(mappings, dict):
            raise ConfigError("Must be a dictionary", 'mappings')

        parsed: Dict[str, Dict[str, Any]] = {}
        for tag_name, mapping in mappings.items():
            field_name = f'mappings.{tag_name}'
            if not isinstance(mapping, dict):
                raise ConfigError("Must be a dictionary", field_name)

            unknown = set(mapping) - cls.MAPPING_FIELDS
            if unknown:
                raise ConfigError(f"Unknown fields: {', '.join(sorted(unknown))}", field_name)

            try:
                normalize_mapping(tag_name, mapping)
            except InvalidMappingError as e:
                raise ConfigError(e.reason, field_name) from e

            parsed[str(tag_name)] = dict(mapping)

        return parsed
