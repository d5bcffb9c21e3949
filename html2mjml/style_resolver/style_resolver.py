"""Style resolver for converting CSS styles to MJML attributes.

This module resolves inline ``style="..."`` declarations and ``<style>``
block rules into flat MJML attribute sets. Only single class selectors
(``.name``) contribute to the class style map; every other selector is
ignored without error.

Both paths copy declaration values exactly as written. Style blocks are
split with the cssutils tokenizer, whose tokens keep their source text, and
each declaration then goes through the same resolution as an inline style.
"""

import logging
import re
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from cssutils.tokenize2 import Tokenizer

from ..errors import StyleParseError
from ..models import ConversionWarning
from .css_properties import mjml_attribute_for

logger = logging.getLogger(__name__)

StyleMap = Dict[str, Dict[str, str]]

# A lone class selector: no combinators, pseudo-classes or attribute selectors
_CLASS_SELECTOR_RE = re.compile(r'^\.(-?[_a-zA-Z][_a-zA-Z0-9-]*)$')

# Tokens that never contribute to selectors or declarations
_IGNORED_TOKENS = ('COMMENT', 'CDO', 'CDC', 'EOF')

Token = Tuple[str, str]


def merge_style_maps(target: StyleMap, source: Mapping[str, Mapping[str, str]]) -> StyleMap:
    """Layer ``source`` onto ``target`` per class, per attribute (in place)."""
    for class_name, attributes in source.items():
        target.setdefault(class_name, {}).update(attributes)
    return target


def _is_char(token: Token, char: str) -> bool:
    return token[0] == 'CHAR' and token[1] == char


def _split_rule_blocks(tokens: Iterable[Token]) -> Iterator[Tuple[str, List[Token]]]:
    """Yield ``(selector_text, body_tokens)`` for each top-level rule.

    At-rules (``@media``, ``@import``, ``@font-face`` ...) are skipped with
    their blocks. A block left open at the end of the sheet is closed there.
    """
    depth = 0
    in_at_rule = False
    prelude: List[str] = []
    body: List[Token] = []

    for token in tokens:
        if token[0] in _IGNORED_TOKENS:
            continue

        if depth == 0:
            if _is_char(token, '{'):
                depth = 1
                body = []
            elif _is_char(token, ';') and in_at_rule:
                in_at_rule = False
                prelude = []
            elif _is_char(token, '}'):
                prelude = []
            else:
                if not in_at_rule and not ''.join(prelude).strip() and token[1].startswith('@'):
                    in_at_rule = True
                prelude.append(token[1])
            continue

        if _is_char(token, '{'):
            depth += 1
        elif _is_char(token, '}'):
            depth -= 1
            if depth == 0:
                if not in_at_rule:
                    yield ''.join(prelude), body
                in_at_rule = False
                prelude = []
                continue
        body.append(token)

    if depth > 0 and not in_at_rule:
        yield ''.join(prelude), body


def _split_declarations(body: Iterable[Token]) -> Iterator[str]:
    """Yield the source text of each ``;``-separated declaration."""
    parens = 0
    current: List[str] = []
    for token in body:
        if token[0] == 'FUNCTION' or _is_char(token, '('):
            parens += 1
        elif _is_char(token, ')') and parens:
            parens -= 1

        if _is_char(token, ';') and not parens:
            yield ''.join(current)
            current = []
        else:
            current.append(token[1])
    if current:
        yield ''.join(current)


def _class_names(selector_text: str) -> List[str]:
    names = []
    for selector in selector_text.split(','):
        match = _CLASS_SELECTOR_RE.match(selector.strip())
        if match:
            names.append(match.group(1))
    return names


class StyleResolver:
    """Resolves CSS declarations into MJML attributes.

    A declaration the resolver cannot use (unknown property, vendor hack,
    missing value) is skipped on its own; it never costs the other
    declarations or rules of its block.
    """

    def __init__(self):
        self._tokenizer = Tokenizer()

    def resolve_inline_style(self, style_text: Optional[str]) -> Dict[str, str]:
        """Convert an inline style attribute into MJML attributes.

        Declarations are split on ``;`` and then on the first ``:`` so values
        such as ``url(http://...)`` survive intact. Malformed declarations
        are skipped individually.

        Args:
            style_text: Raw value of a style attribute

        Returns:
            Dict of MJML attribute name to unchanged CSS value
        """
        attributes: Dict[str, str] = {}
        if not style_text:
            return attributes

        for declaration in style_text.split(';'):
            self._resolve_declaration(declaration, attributes)

        return attributes

    @staticmethod
    def _resolve_declaration(declaration: str, attributes: Dict[str, str]) -> None:
        prop, sep, value = declaration.partition(':')
        prop = prop.strip()
        value = value.strip()
        if not sep or not prop or not value:
            return
        mjml_attribute = mjml_attribute_for(prop)
        if mjml_attribute:
            attributes[mjml_attribute] = value

    def parse_style_block(self, css_text: str) -> StyleMap:
        """Parse a ``<style>`` block into a class style map.

        Args:
            css_text: Stylesheet text

        Returns:
            StyleMap of class name to MJML attributes

        Raises:
            StyleParseError: If the stylesheet cannot be tokenized
        """
        style_map: StyleMap = {}
        if not css_text or not css_text.strip():
            return style_map

        try:
            tokens = [
                (token[0], token[1])
                for token in self._tokenizer.tokenize(css_text, fullsheet=True)
            ]
        except Exception as e:
            raise StyleParseError(f"Error parsing CSS: {e}") from e

        for selector_text, body in _split_rule_blocks(tokens):
            class_names = _class_names(selector_text)
            if not class_names:
                continue

            attributes: Dict[str, str] = {}
            for declaration in _split_declarations(body):
                self._resolve_declaration(declaration, attributes)

            for class_name in class_names:
                style_map.setdefault(class_name, {}).update(attributes)

        return style_map

    def resolve_style_block(
        self,
        css_text: str,
        warnings: Optional[List[ConversionWarning]] = None,
    ) -> StyleMap:
        """Parse a ``<style>`` block, degrading to an empty map on failure.

        Args:
            css_text: Stylesheet text
            warnings: Optional list that receives a warning on parse failure

        Returns:
            StyleMap (empty when the block could not be parsed)
        """
        try:
            return self.parse_style_block(css_text)
        except StyleParseError as e:
            logger.warning(str(e))
            if warnings is not None:
                warnings.append(
                    ConversionWarning(f"{e}. Styles from this block were ignored.", element='style')
                )
            return {}

    def build_style_map(
        self,
        css_blocks: Iterable[str],
        warnings: Optional[List[ConversionWarning]] = None,
    ) -> StyleMap:
        """Fold several ``<style>`` blocks, in document order, into one map."""
        style_map: StyleMap = {}
        for css_text in css_blocks:
            merge_style_maps(style_map, self.resolve_style_block(css_text, warnings))
        logger.debug(f"Resolved class styles for {len(style_map)} class(es)")
        return style_map

    @staticmethod
    def apply_class_styles(
        base_attrs: Mapping[str, str],
        class_value: Optional[str],
        style_map: Mapping[str, Mapping[str, str]],
    ) -> Dict[str, str]:
        """Layer class-derived attributes onto ``base_attrs``.

        Classes apply in the order they appear in the attribute, so the last
        class wins on conflict. Unknown classes are ignored.

        Args:
            base_attrs: Attributes to start from (not modified)
            class_value: Raw class attribute value
            style_map: Class style map

        Returns:
            New dict with class styles applied
        """
        attributes = dict(base_attrs)
        if not class_value or not style_map:
            return attributes

        for class_name in class_value.split():
            if class_name in style_map:
                attributes.update(style_map[class_name])

        return attributes
