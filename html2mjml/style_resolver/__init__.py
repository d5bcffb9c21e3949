"""CSS to MJML attribute resolution."""

from .css_properties import CSS_TO_MJML_ATTRIBUTES, mjml_attribute_for
from .style_resolver import StyleMap, StyleResolver, merge_style_maps

__all__ = [
    'CSS_TO_MJML_ATTRIBUTES',
    'StyleMap',
    'StyleResolver',
    'merge_style_maps',
    'mjml_attribute_for',
]
