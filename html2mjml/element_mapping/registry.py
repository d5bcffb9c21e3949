"""Registry resolving HTML tag names to element mappings.

The registry is an explicit object: each converter holds one, and tests can
build isolated instances. ``default_registry`` backs the module-level
``register_mapping`` entry point and is shared process-wide; registering
into it is expected at configuration time, not under concurrent use.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from ..errors import InvalidMappingError
from .default_mappings import DEFAULT_ELEMENT_MAPPINGS, DEFAULT_KEY
from .models import ElementMapping, Rewrite, identity_transform

logger = logging.getLogger(__name__)


# camelCase spellings accepted for mapping definitions
_FIELD_ALIASES = {
    'mjmlTag': 'mjml_tag',
    'attributeTransform': 'transform',
    'selfClosing': 'self_closing',
    'inlineElement': 'inline_element',
    'childrenContainer': 'children_container',
}


def _static_attributes_transform(static: Mapping[str, str]):
    def transform(attrs):
        return Rewrite({**attrs, **static})
    return transform


def normalize_mapping(tag_name: Any, mapping: Any) -> ElementMapping:
    """Validate a mapping and fill in defaults for its optional fields.

    Accepts an ElementMapping or a plain mapping with ``mjml_tag`` (or
    ``mjmlTag``) and optional ``transform``, ``attributes`` (static values
    layered on top), ``self_closing``, ``special``, ``inline_element``,
    ``children_container`` and ``warning`` keys.

    Args:
        tag_name: Source tag name the mapping is registered for
        mapping: Mapping definition

    Returns:
        Normalized ElementMapping

    Raises:
        InvalidMappingError: If the tag name or the target tag is missing
    """
    if not isinstance(tag_name, str) or not tag_name.strip():
        raise InvalidMappingError(tag_name, "element name must be a non-empty string")

    if isinstance(mapping, ElementMapping):
        fields: Dict[str, Any] = {
            'mjml_tag': mapping.mjml_tag,
            'transform': mapping.attribute_transform,
            'self_closing': mapping.self_closing,
            'special': mapping.special,
            'inline_element': mapping.inline_element,
            'children_container': mapping.children_container,
            'warning': mapping.warning,
        }
    elif isinstance(mapping, Mapping):
        fields = dict(mapping)
        for alias, name in _FIELD_ALIASES.items():
            if alias in fields and name not in fields:
                fields[name] = fields.pop(alias)
    else:
        raise InvalidMappingError(tag_name, "mapping must be an ElementMapping or a mapping")

    mjml_tag = fields.get('mjml_tag')
    if not isinstance(mjml_tag, str) or not mjml_tag.strip():
        raise InvalidMappingError(tag_name, "mapping must define a non-empty mjml_tag")

    transform = fields.get('transform') or fields.get('attribute_transform')
    static = fields.get('attributes')
    if transform is not None and not callable(transform):
        raise InvalidMappingError(tag_name, "transform must be callable")
    if static:
        if transform is not None:
            raise InvalidMappingError(tag_name, "use either transform or attributes, not both")
        if not isinstance(static, Mapping):
            raise InvalidMappingError(tag_name, "attributes must be a mapping")
        transform = _static_attributes_transform(
            {str(key): str(value) for key, value in static.items()}
        )

    return ElementMapping(
        mjml_tag=mjml_tag.strip(),
        attribute_transform=transform or identity_transform,
        self_closing=bool(fields.get('self_closing')),
        special=bool(fields.get('special')),
        inline_element=bool(fields.get('inline_element')),
        children_container=fields.get('children_container') or None,
        warning=fields.get('warning') or None,
    )


class MappingRegistry:
    """Resolves tag names against custom, then default mappings.

    Lookups are case-insensitive and never fail: unknown tags resolve to the
    DEFAULT (``mj-text``) entry.
    """

    def __init__(
        self,
        defaults: Optional[Mapping[str, ElementMapping]] = None,
        custom: Optional[Mapping[str, ElementMapping]] = None,
    ):
        """Initialize registry.

        Args:
            defaults: Default table (DEFAULT_ELEMENT_MAPPINGS if omitted)
            custom: Already-normalized custom entries keyed by lower-case tag
        """
        self._defaults = dict(defaults if defaults is not None else DEFAULT_ELEMENT_MAPPINGS)
        self._custom: Dict[str, ElementMapping] = dict(custom or {})

    def lookup(self, tag_name: str) -> ElementMapping:
        """Return the mapping for a tag name."""
        key = tag_name.lower()
        mapping = self._custom.get(key) or self._defaults.get(key)
        if mapping is None:
            return self._defaults.get(DEFAULT_KEY) or DEFAULT_ELEMENT_MAPPINGS[DEFAULT_KEY]
        return mapping

    def register(self, tag_name: str, mapping: Any) -> bool:
        """Register a custom mapping, overwriting any previous entry.

        Raises:
            InvalidMappingError: If the tag name or mapping is invalid
        """
        normalized = normalize_mapping(tag_name, mapping)
        key = tag_name.strip().lower()
        if key in self._custom:
            logger.debug(f"Overwriting custom mapping for <{key}>")
        self._custom[key] = normalized
        logger.debug(f"Registered mapping <{key}> -> <{normalized.mjml_tag}>")
        return True

    def with_overrides(self, mappings: Optional[Mapping[str, Any]]) -> 'MappingRegistry':
        """Return a copy with extra custom mappings; this registry is unchanged."""
        if not mappings:
            return self
        overlay = MappingRegistry(self._defaults, self._custom)
        for tag_name, mapping in mappings.items():
            overlay.register(tag_name, mapping)
        return overlay

    def reset(self) -> None:
        """Drop all custom mappings."""
        self._custom.clear()


default_registry = MappingRegistry()


def register_mapping(tag_name: str, mapping: Any) -> bool:
    """Register a mapping in the process-wide default registry.

    The registration is visible to every later conversion that uses the
    default registry, until it is overwritten.

    Raises:
        InvalidMappingError: If the tag name or mapping is invalid
    """
    return default_registry.register(tag_name, mapping)
