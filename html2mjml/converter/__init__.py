"""HTML to MJML tree conversion."""

from .html_converter import HtmlToMjmlConverter, convert_html_to_mjml, get_default_converter
from .html_parser import BeautifulSoupParser, HtmlParser, NodeKind
from .tree_transformer import LIST_BULLET, TreeTransformer

__all__ = [
    'BeautifulSoupParser',
    'HtmlParser',
    'HtmlToMjmlConverter',
    'LIST_BULLET',
    'NodeKind',
    'TreeTransformer',
    'convert_html_to_mjml',
    'get_default_converter',
]
