"""HTML to MJML conversion orchestrator.

This module provides HtmlToMjmlConverter, which runs one conversion call:
parse the input, fold its <style> blocks into a class style map, normalize
the document root, transform the tree into MJML and optionally render it
through the MJML compiler.
"""

import logging
from typing import Any, List, Mapping, Optional

from ..element_mapping import MappingRegistry, default_registry
from ..models import ConversionOptions, ConversionResult, ConversionWarning
from ..renderer import MjmlCompiler, MjmlPythonCompiler, RendererBridge
from ..style_resolver import StyleMap, StyleResolver
from .html_parser import BeautifulSoupParser, HtmlParser, NodeKind
from .tree_transformer import TreeTransformer

logger = logging.getLogger(__name__)


class HtmlToMjmlConverter:
    """Converts HTML documents to MJML.

    The converter is stateless between calls apart from its registry, which
    is shared with every call made through it.

    Example:
        >>> converter = HtmlToMjmlConverter()
        >>> converter.convert("<p>Hello</p>", validate_output=False)
        '<mjml><mj-body><mj-text>Hello</mj-text></mj-body></mjml>'
    """

    def __init__(
        self,
        registry: Optional[MappingRegistry] = None,
        parser: Optional[HtmlParser] = None,
        compiler: Optional[MjmlCompiler] = None,
        style_resolver: Optional[StyleResolver] = None,
    ):
        """Initialize HtmlToMjmlConverter.

        Args:
            registry: Mapping registry (a fresh MappingRegistry if omitted)
            parser: HTML parser collaborator (BeautifulSoupParser if omitted)
            compiler: MJML compiler used when output validation is requested;
                None means rendering is not configured
            style_resolver: CSS resolver (StyleResolver if omitted)
        """
        self.registry = registry if registry is not None else MappingRegistry()
        self.parser = parser or BeautifulSoupParser()
        self.renderer = RendererBridge(compiler)
        self.style_resolver = style_resolver or StyleResolver()

    def convert(
        self,
        html: str,
        options: Optional[Mapping[str, Any]] = None,
        **overrides: Any,
    ) -> str:
        """Convert HTML to MJML, or to rendered HTML when validating.

        With ``validate_output`` enabled (the default) the return value is the
        compiler's rendered HTML; if the compiler is missing or fails, the MJML
        text is returned instead.

        Args:
            html: HTML document or fragment
            options: ConversionOptions or mapping of option overrides
            **overrides: Option overrides as keyword arguments

        Returns:
            MJML text, or rendered HTML

        Raises:
            MalformedInputError: If the input cannot be parsed
        """
        return self.convert_with_result(html, options, **overrides).output

    def convert_with_result(
        self,
        html: str,
        options: Optional[Mapping[str, Any]] = None,
        **overrides: Any,
    ) -> ConversionResult:
        """Convert HTML and return MJML, rendered HTML and warnings.

        Raises:
            MalformedInputError: If the input cannot be parsed
        """
        opts = self._merge_options(options, overrides)
        warnings: List[ConversionWarning] = []

        document = self.parser.parse(html)

        if self.parser.find(document, "mjml") is not None:
            logger.debug("Input already contains an <mjml> root, passing through")
            result = ConversionResult(
                mjml=self.parser.serialize(document).strip(),
                warnings=warnings,
                passthrough=True,
            )
            if opts.validate_output and opts.validate_passthrough:
                self._render(result, warnings)
            self._emit_warnings(warnings, opts)
            return result

        style_map: StyleMap = {}
        if opts.inline_styles:
            css_blocks = [
                self.parser.text(style_el)
                for style_el in self.parser.find_all(document, "style")
            ]
            style_map = self.style_resolver.build_style_map(css_blocks, warnings)

        if opts.wrap_content:
            self._normalize_root(document)

        registry = self.registry.with_overrides(opts.custom_element_mappings)
        transformer = TreeTransformer(
            self.parser,
            registry,
            style_map=style_map,
            options=opts,
            warnings=warnings,
            style_resolver=self.style_resolver,
        )

        root = self.parser.find(document, "html")
        if root is None:
            root = self.parser.find(document, "body")
        if root is not None:
            mjml = transformer.transform(root)
        else:
            mjml = "".join(
                transformer.transform(node) for node in self.parser.children(document)
            )

        result = ConversionResult(mjml=mjml.strip(), warnings=warnings)
        if opts.validate_output:
            self._render(result, warnings)

        self._emit_warnings(warnings, opts)
        return result

    def _merge_options(self, options, overrides) -> ConversionOptions:
        if isinstance(options, ConversionOptions):
            return ConversionOptions.merged(overrides, base=options)
        merged = dict(options or {})
        merged.update(overrides)
        return ConversionOptions.merged(merged)

    def _normalize_root(self, document: Any) -> None:
        """Ensure the document has an html root element.

        An existing body (and head) is moved under a new html element.
        Without a body, html and body are created and every top-level node
        is moved into the new body, except a top-level <head>, which is kept,
        and top-level <style> blocks, which go to that head (or a new one).
        """
        parser = self.parser
        if parser.find(document, "html") is not None:
            return

        html_el = parser.create_element(document, "html")
        body_el = parser.find(document, "body")
        if body_el is not None:
            head_el = parser.find(document, "head")
            if head_el is not None:
                parser.detach(head_el)
                parser.append(html_el, head_el)
            parser.detach(body_el)
            parser.append(html_el, body_el)
            parser.append(document, html_el)
            logger.debug("Wrapped existing <body> in a synthesized <html>")
            return

        head_el = next(
            (node for node in parser.children(document) if self._is_element(node, "head")),
            None,
        )
        if head_el is not None:
            parser.detach(head_el)

        body_el = parser.create_element(document, "body")
        for node in parser.children(document):
            parser.detach(node)
            if self._is_element(node, "style"):
                if head_el is None:
                    head_el = parser.create_element(document, "head")
                parser.append(head_el, node)
            else:
                parser.append(body_el, node)

        if head_el is not None:
            parser.append(html_el, head_el)
        parser.append(html_el, body_el)
        parser.append(document, html_el)
        logger.debug("Wrapped fragment in a synthesized <html><body>")

    def _is_element(self, node: Any, name: str) -> bool:
        return self.parser.node_kind(node) is NodeKind.ELEMENT and self.parser.tag_name(node) == name

    def _render(self, result: ConversionResult, warnings: List[ConversionWarning]) -> None:
        outcome = self.renderer.render(result.mjml, warnings)
        if outcome.rendered:
            result.html = outcome.output

    @staticmethod
    def _emit_warnings(warnings: List[ConversionWarning], opts: ConversionOptions) -> None:
        if not opts.show_warnings:
            return
        for warning in warnings:
            logger.warning(warning.format())


_default_converter: Optional[HtmlToMjmlConverter] = None


def get_default_converter() -> HtmlToMjmlConverter:
    """Return the shared converter bound to the process-wide registry."""
    global _default_converter
    if _default_converter is None:
        _default_converter = HtmlToMjmlConverter(
            registry=default_registry,
            compiler=MjmlPythonCompiler(),
        )
    return _default_converter


def convert_html_to_mjml(
    html: str,
    options: Optional[Mapping[str, Any]] = None,
    **overrides: Any,
) -> str:
    """Convert HTML using the shared converter.

    Mappings registered with ``register_mapping`` apply to this call.

    Raises:
        MalformedInputError: If the input cannot be parsed
    """
    return get_default_converter().convert(html, options, **overrides)
