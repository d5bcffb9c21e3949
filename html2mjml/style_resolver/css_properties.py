"""Translation table from CSS property names to MJML attribute names.

Properties outside this table are dropped silently during resolution.
"""

from typing import Dict, Optional

CSS_TO_MJML_ATTRIBUTES: Dict[str, str] = {
    # Text styling
    'color': 'color',
    'font-family': 'font-family',
    'font-size': 'font-size',
    'font-style': 'font-style',
    'font-weight': 'font-weight',
    'line-height': 'line-height',
    'letter-spacing': 'letter-spacing',
    'text-align': 'align',
    'text-decoration': 'text-decoration',
    'text-transform': 'text-transform',

    # Spacing
    'padding': 'padding',
    'padding-top': 'padding-top',
    'padding-right': 'padding-right',
    'padding-bottom': 'padding-bottom',
    'padding-left': 'padding-left',
    'margin': 'margin',
    'margin-top': 'margin-top',
    'margin-right': 'margin-right',
    'margin-bottom': 'margin-bottom',
    'margin-left': 'margin-left',

    # Layout
    'width': 'width',
    'height': 'height',
    'max-width': 'max-width',
    'background-color': 'background-color',
    'background': 'background',
    'border': 'border',
    'border-radius': 'border-radius',
    'border-top': 'border-top',
    'border-right': 'border-right',
    'border-bottom': 'border-bottom',
    'border-left': 'border-left',

    # Section/column container properties
    'direction': 'direction',
    'vertical-align': 'vertical-align',
}


def mjml_attribute_for(css_property: str) -> Optional[str]:
    """Return the MJML attribute name for a CSS property, or None."""
    return CSS_TO_MJML_ATTRIBUTES.get(css_property.strip().lower())
