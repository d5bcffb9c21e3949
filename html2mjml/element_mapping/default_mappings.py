"""Default mapping of HTML elements to MJML components."""

from typing import Dict

from .models import ElementMapping, Retarget, Rewrite

DEFAULT_KEY = 'DEFAULT'

FORM_WARNING = "Forms are not fully supported in email. Converting to visual representation only."
INPUT_WARNING = "Input elements are not supported in email. Converting to visual representation only."

# Heading font sizes, h1 through h6
HEADING_FONT_SIZES = {
    'h1': '28px',
    'h2': '24px',
    'h3': '20px',
    'h4': '18px',
    'h5': '16px',
    'h6': '14px',
}


def _heading_transform(font_size: str):
    def transform(attrs):
        return Rewrite({**attrs, 'font-size': font_size, 'font-weight': 'bold'})
    return transform


def _div_transform(attrs):
    class_value = attrs.get('class', '')
    if 'column' in class_value or 'col' in class_value:
        return Retarget('mj-column', attrs)
    return Rewrite(attrs)


def _is_button_link(attrs) -> bool:
    class_value = attrs.get('class', '')
    if 'button' in class_value or 'btn' in class_value:
        return True
    style = attrs.get('style', '')
    return 'background' in style or 'padding' in style


def _anchor_transform(attrs):
    if _is_button_link(attrs):
        return Rewrite(attrs)
    # Plain links become text; href is kept on the text block
    return Retarget('mj-text', attrs)


def _image_transform(attrs):
    image_attrs = {
        key: attrs[key]
        for key in ('src', 'alt', 'width', 'height')
        if attrs.get(key) is not None
    }
    if attrs.get('responsive') == 'true':
        image_attrs['fluid'] = 'true'
    return Rewrite(image_attrs)


def _spacer_transform(attrs):
    return Rewrite({'height': '20px', **attrs})


def _input_transform(attrs):
    return Rewrite({**attrs, 'css-class': 'form-input-simulation'})


DEFAULT_ELEMENT_MAPPINGS: Dict[str, ElementMapping] = {
    # Structure elements
    'html': ElementMapping('mjml'),
    'head': ElementMapping('mj-head'),
    'title': ElementMapping('mj-title'),
    'body': ElementMapping('mj-body'),
    'style': ElementMapping('mj-style'),

    # Content elements
    'div': ElementMapping('mj-section', attribute_transform=_div_transform),
    'p': ElementMapping('mj-text'),
    **{
        tag: ElementMapping('mj-text', attribute_transform=_heading_transform(size))
        for tag, size in HEADING_FONT_SIZES.items()
    },
    'span': ElementMapping('mj-text', inline_element=True),
    'a': ElementMapping('mj-button', attribute_transform=_anchor_transform),
    'img': ElementMapping('mj-image', attribute_transform=_image_transform, self_closing=True),
    'table': ElementMapping('mj-table', special=True),
    'button': ElementMapping('mj-button'),
    'hr': ElementMapping('mj-divider', self_closing=True),
    'br': ElementMapping('mj-spacer', attribute_transform=_spacer_transform, self_closing=True),
    'ul': ElementMapping('mj-text', special=True),
    'ol': ElementMapping('mj-text', special=True),
    'li': ElementMapping('mj-text', inline_element=True, special=True),

    # Form elements become visually similar components
    'form': ElementMapping('mj-section', warning=FORM_WARNING),
    'input': ElementMapping('mj-text', attribute_transform=_input_transform, warning=INPUT_WARNING),

    # Fallback for unknown elements
    DEFAULT_KEY: ElementMapping('mj-text'),
}
