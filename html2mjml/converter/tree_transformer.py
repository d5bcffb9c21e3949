"""Recursive HTML to MJML tree transformer.

Walks a parsed document depth-first and emits MJML markup text. Each
element is resolved through the mapping registry, its attributes are built
from class styles, inline styles and the mapping's attribute transform, and
its children are transformed before the element itself is emitted.
"""

import logging
from typing import Any, Dict, List, Optional

from ..element_mapping import ElementMapping, MappingRegistry, Retarget
from ..models import ConversionOptions, ConversionWarning
from ..style_resolver import StyleMap, StyleResolver
from .html_parser import HtmlParser, NodeKind
from .markup import (
    element,
    is_mjml_component,
    needs_column_wrapper,
    needs_section_wrapper,
    self_closing_tag,
)

logger = logging.getLogger(__name__)

LIST_BULLET = "• "

# Source attributes consumed by style resolution, never emitted as-is
_STYLE_SOURCE_ATTRIBUTES = ("style", "class")


class TreeTransformer:
    """Transforms parsed HTML nodes into MJML markup.

    A transformer holds the per-call state of one conversion: the style map,
    the options snapshot and the warnings list it appends to.

    Attributes:
        parser: HtmlParser used to inspect nodes
        registry: MappingRegistry resolving tag names
        style_map: Class style map built from the document's <style> blocks
        options: ConversionOptions snapshot
        warnings: Ordered list receiving ConversionWarning entries
    """

    def __init__(
        self,
        parser: HtmlParser,
        registry: MappingRegistry,
        style_map: Optional[StyleMap] = None,
        options: Optional[ConversionOptions] = None,
        warnings: Optional[List[ConversionWarning]] = None,
        style_resolver: Optional[StyleResolver] = None,
    ):
        self.parser = parser
        self.registry = registry
        self.style_map = style_map or {}
        self.options = options or ConversionOptions()
        self.warnings = warnings if warnings is not None else []
        self.style_resolver = style_resolver or StyleResolver()

    def transform(self, node: Any, parent_tag: Optional[str] = None) -> str:
        """Transform a node and its subtree into MJML text.

        A node transformed with ``parent_tag=None`` is the root of this
        traversal; column-level output at the root is wrapped in a
        synthesized mj-column/mj-section.

        Args:
            node: Parsed node (element, text or comment)
            parent_tag: Source tag name of the parent element in the walk

        Returns:
            MJML markup for the subtree
        """
        if node is None:
            return ""

        kind = self.parser.node_kind(node)
        if kind is NodeKind.TEXT:
            return self.parser.text(node)
        if kind is NodeKind.COMMENT:
            return f"<!-- {self.parser.text(node)} -->"
        if kind is not NodeKind.ELEMENT:
            return ""

        tag_name = self.parser.tag_name(node)
        if is_mjml_component(tag_name):
            return self._transform_mjml_component(node, tag_name)

        mapping = self.registry.lookup(tag_name)
        if mapping.warning:
            self.warnings.append(ConversionWarning(mapping.warning, element=tag_name))

        mjml_tag, attributes = self._resolve_attributes(node, mapping)
        children = self._transform_children(node, tag_name)

        if mapping.special:
            output = self._emit_special(tag_name, mjml_tag, attributes, children, parent_tag)
        elif mapping.self_closing or not children.strip():
            output = self_closing_tag(mjml_tag, attributes)
        else:
            output = element(mjml_tag, attributes, children)

        if parent_tag is None:
            output = self._repair_structure(mjml_tag, output)
        return output

    def _transform_children(self, node: Any, tag_name: str) -> str:
        return "".join(
            self.transform(child, parent_tag=tag_name)
            for child in self.parser.children(node)
        )

    def _transform_mjml_component(self, node: Any, tag_name: str) -> str:
        """Emit an existing mj-* element with its attributes untouched."""
        attributes = self.parser.attributes(node)
        children = self._transform_children(node, tag_name)
        if children.strip():
            return element(tag_name, attributes, children)
        return self_closing_tag(tag_name, attributes)

    def _resolve_attributes(self, node: Any, mapping: ElementMapping):
        """Build the MJML tag and attribute set for an element.

        Class styles are layered first and inline styles on top, so inline
        declarations win. ``css-class`` is added when class names are
        preserved. The mapping transform then receives the source attributes
        merged with the resolved ones and has the final word.

        Returns:
            Tuple of (mjml_tag, attributes)
        """
        source = self.parser.attributes(node)
        class_value = source.get("class")
        resolved: Dict[str, str] = {}

        if self.options.inline_styles:
            if class_value:
                resolved = self.style_resolver.apply_class_styles(
                    resolved, class_value, self.style_map
                )
            if source.get("style"):
                resolved.update(self.style_resolver.resolve_inline_style(source["style"]))

        if self.options.preserve_class_names and class_value:
            resolved["css-class"] = class_value

        result = mapping.apply({**source, **resolved})
        mjml_tag = result.mjml_tag if isinstance(result, Retarget) else mapping.mjml_tag

        attributes = {
            name: value
            for name, value in result.attributes.items()
            if name not in _STYLE_SOURCE_ATTRIBUTES and value is not None
        }
        return mjml_tag, attributes

    def _emit_special(
        self,
        tag_name: str,
        mjml_tag: str,
        attributes: Dict[str, str],
        children: str,
        parent_tag: Optional[str],
    ) -> str:
        """Emit tables and lists.

        Tables and lists wrap their transformed children unchanged. List
        items get a bullet prefix under ``ul`` and nothing under ``ol``;
        ordered lists are not numbered.
        """
        if tag_name == "li" and parent_tag == "ul":
            children = LIST_BULLET + children
        return element(mjml_tag, attributes, children)

    @staticmethod
    def _repair_structure(mjml_tag: str, output: str) -> str:
        """Wrap root-level output so it obeys MJML nesting rules."""
        if needs_column_wrapper(mjml_tag):
            output = f"<mj-column>{output}</mj-column>"
            return f"<mj-section>{output}</mj-section>"
        if needs_section_wrapper(mjml_tag):
            return f"<mj-section>{output}</mj-section>"
        return output
