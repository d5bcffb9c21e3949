"""Conversion options data model."""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Optional

from ..errors import ConfigError

# camelCase spellings accepted for callers porting option objects as-is
_OPTION_ALIASES = {
    'validateOutput': 'validate_output',
    'preserveClassNames': 'preserve_class_names',
    'inlineStyles': 'inline_styles',
    'customElementMappings': 'custom_element_mappings',
    'wrapContent': 'wrap_content',
    'showWarnings': 'show_warnings',
    'validatePassthrough': 'validate_passthrough',
}


@dataclass(frozen=True)
class ConversionOptions:
    """Immutable snapshot of the options for a single conversion call.

    Attributes:
        validate_output: Compile the MJML and return rendered HTML instead
            of MJML text (falls back to MJML when the compiler fails)
        preserve_class_names: Copy the source class attribute to css-class
        inline_styles: Resolve inline styles and <style> class rules
        custom_element_mappings: Extra tag mappings applied for this call only
        wrap_content: Synthesize html/body around bare fragments
        show_warnings: Log collected warnings at WARNING level
        validate_passthrough: Also validate input that is already MJML
    """
    validate_output: bool = True
    preserve_class_names: bool = False
    inline_styles: bool = True
    custom_element_mappings: Mapping[str, Any] = field(default_factory=dict)
    wrap_content: bool = True
    show_warnings: bool = True
    validate_passthrough: bool = False

    @classmethod
    def merged(
        cls,
        overrides: Optional[Mapping[str, Any]] = None,
        base: Optional['ConversionOptions'] = None,
    ) -> 'ConversionOptions':
        """Merge a mapping of overrides over the defaults (or ``base``).

        Args:
            overrides: Option values keyed by snake_case or camelCase name
            base: Options to start from instead of the defaults

        Returns:
            New ConversionOptions instance

        Raises:
            ConfigError: If an override names an unknown option
        """
        base = base or cls()
        if not overrides:
            return base

        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in overrides.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ConfigError(f"Unknown conversion option '{key}'", key)
            if name == 'custom_element_mappings' and value is None:
                value = {}
            values[name] = value

        return replace(base, **values)
