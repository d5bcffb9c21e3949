"""HTML element to MJML component mappings."""

from .default_mappings import DEFAULT_ELEMENT_MAPPINGS, DEFAULT_KEY, FORM_WARNING, INPUT_WARNING
from .models import ElementMapping, Retarget, Rewrite, TransformResult, identity_transform
from .registry import MappingRegistry, default_registry, normalize_mapping, register_mapping

__all__ = [
    'DEFAULT_ELEMENT_MAPPINGS',
    'DEFAULT_KEY',
    'FORM_WARNING',
    'INPUT_WARNING',
    'ElementMapping',
    'MappingRegistry',
    'Retarget',
    'Rewrite',
    'TransformResult',
    'default_registry',
    'identity_transform',
    'normalize_mapping',
    'register_mapping',
]
