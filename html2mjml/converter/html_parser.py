"""HTML parser collaborator used by the converter.

The converter never touches a parsing library directly. It works through
the ``HtmlParser`` interface (parse, traverse, mutate, serialize), and
``BeautifulSoupParser`` is the implementation shipped with the package.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol

from bs4 import BeautifulSoup, Comment, NavigableString, ParserRejectedMarkup, Tag
from bs4.element import PreformattedString

from ..errors import MalformedInputError

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    """Kinds of nodes the transformer distinguishes."""
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    OTHER = "other"


class HtmlParser(Protocol):
    """Capabilities the converter needs from an HTML parsing library."""

    def parse(self, text: str) -> Any: ...

    def node_kind(self, node: Any) -> NodeKind: ...

    def tag_name(self, node: Any) -> str: ...

    def attributes(self, node: Any) -> Dict[str, str]: ...

    def children(self, node: Any) -> List[Any]: ...

    def text(self, node: Any) -> str: ...

    def find(self, root: Any, name: str) -> Optional[Any]: ...

    def find_all(self, root: Any, name: str) -> List[Any]: ...

    def create_element(self, document: Any, name: str) -> Any: ...

    def append(self, parent: Any, child: Any) -> None: ...

    def detach(self, node: Any) -> Any: ...

    def serialize(self, node: Any) -> str: ...


class BeautifulSoupParser:
    """HtmlParser backed by BeautifulSoup.

    Defaults to Python's built-in ``html.parser`` tree builder, which keeps
    fragments as fragments (no implicit html/body) and accepts MJML tags
    such as ``<mj-image />``. Pass ``features="lxml"`` for the lxml builder.
    """

    def __init__(self, features: str = "html.parser"):
        """Initialize BeautifulSoupParser.

        Args:
            features: BeautifulSoup tree builder name
        """
        self.features = features

    def parse(self, text: str) -> BeautifulSoup:
        """Parse HTML text into a document.

        Raises:
            MalformedInputError: If the input is not text or the tree builder
                rejects it
            FeatureNotFound: If the configured tree builder is not installed
        """
        if not isinstance(text, str):
            raise MalformedInputError(f"expected str, got {type(text).__name__}")
        try:
            # Keep every attribute (class included) as a single string
            return BeautifulSoup(text, self.features, multi_valued_attributes=None)
        except ParserRejectedMarkup as e:
            raise MalformedInputError(str(e)) from e

    def node_kind(self, node: Any) -> NodeKind:
        if isinstance(node, Tag):
            return NodeKind.ELEMENT
        if isinstance(node, Comment):
            return NodeKind.COMMENT
        # Doctype, CDATA, declarations and processing instructions
        if isinstance(node, PreformattedString):
            return NodeKind.OTHER
        if isinstance(node, NavigableString):
            return NodeKind.TEXT
        return NodeKind.OTHER

    def tag_name(self, node: Tag) -> str:
        return node.name.lower()

    def attributes(self, node: Tag) -> Dict[str, str]:
        attrs: Dict[str, str] = {}
        for name, value in node.attrs.items():
            if isinstance(value, (list, tuple)):
                value = " ".join(value)
            attrs[name] = "" if value is None else str(value)
        return attrs

    def children(self, node: Any) -> List[Any]:
        return list(node.contents) if isinstance(node, Tag) else []

    def text(self, node: Any) -> str:
        if isinstance(node, Tag):
            # Concatenate text descendants; <style> content counts as text here
            return "".join(
                str(child) for child in node.descendants
                if isinstance(child, NavigableString)
                and not isinstance(child, PreformattedString)
            )
        return str(node)

    def find(self, root: Any, name: str) -> Optional[Tag]:
        return root.find(name)

    def find_all(self, root: Any, name: str) -> List[Tag]:
        return list(root.find_all(name))

    def create_element(self, document: BeautifulSoup, name: str) -> Tag:
        return document.new_tag(name)

    def append(self, parent: Tag, child: Any) -> None:
        parent.append(child)

    def detach(self, node: Any) -> Any:
        return node.extract()

    def serialize(self, node: Any) -> str:
        return str(node)
