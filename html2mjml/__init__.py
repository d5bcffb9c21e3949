"""html2mjml: convert HTML documents into MJML email markup.

Typical use:

    >>> from html2mjml import convert
    >>> convert("<h1>Hi</h1>", validate_output=False)
    '<mjml><mj-body><mj-text font-size="28px" font-weight="bold">Hi</mj-text></mj-body></mjml>'
"""

from .converter import HtmlToMjmlConverter, convert_html_to_mjml
from .element_mapping import (
    ElementMapping,
    MappingRegistry,
    Retarget,
    Rewrite,
    default_registry,
    register_mapping,
)
from .errors import (
    CompilerError,
    CompilerUnavailableError,
    ConfigError,
    FilesystemError,
    Html2MjmlError,
    InvalidMappingError,
    MalformedInputError,
    StyleParseError,
)
from .models import ConversionOptions, ConversionResult, ConversionWarning

convert = convert_html_to_mjml

__all__ = [
    'CompilerError',
    'CompilerUnavailableError',
    'ConfigError',
    'ConversionOptions',
    'ConversionResult',
    'ConversionWarning',
    'ElementMapping',
    'FilesystemError',
    'Html2MjmlError',
    'HtmlToMjmlConverter',
    'InvalidMappingError',
    'MalformedInputError',
    'MappingRegistry',
    'Retarget',
    'Rewrite',
    'StyleParseError',
    'convert',
    'convert_html_to_mjml',
    'default_registry',
    'register_mapping',
]
