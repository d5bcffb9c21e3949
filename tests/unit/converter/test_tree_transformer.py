"""Unit tests for converter.tree_transformer module."""

import pytest

from html2mjml.converter import TreeTransformer
from html2mjml.element_mapping import FORM_WARNING, INPUT_WARNING
from html2mjml.models import ConversionOptions


@pytest.fixture
def make_transformer(parser, registry):
    """Build a TreeTransformer with optional style map and options."""
    def _make(style_map=None, **options):
        return TreeTransformer(
            parser,
            registry,
            style_map=style_map or {},
            options=ConversionOptions(**options),
            warnings=[],
        )
    return _make


def transform_first(parser, transformer, html, parent_tag="body"):
    """Transform the first top-level element of ``html``."""
    document = parser.parse(html)
    node = next(n for n in parser.children(document) if getattr(n, "name", None))
    return transformer.transform(node, parent_tag=parent_tag)


class TestNodeKinds:
    """Text, comment and other node handling."""

    def test_text_is_emitted_raw(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), "<p>Fish &amp; Chips</p>")

        assert output == "<mj-text>Fish & Chips</mj-text>"

    def test_comment_is_wrapped(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), "<p>Hi<!--note--></p>")

        assert output == "<mj-text>Hi<!-- note --></mj-text>"

    def test_doctype_is_dropped(self, parser, make_transformer):
        transformer = make_transformer()
        document = parser.parse("<!DOCTYPE html>")

        assert transformer.transform(parser.children(document)[0]) == ""

    def test_none_node_is_empty(self, make_transformer):
        assert make_transformer().transform(None) == ""


class TestElementEmission:
    """Mapping lookup, self-closing rules and attributes."""

    def test_paragraph(self, parser, make_transformer):
        assert transform_first(parser, make_transformer(), "<p>Hello</p>") == "<mj-text>Hello</mj-text>"

    def test_empty_element_is_self_closing(self, parser, make_transformer):
        assert transform_first(parser, make_transformer(), "<p>  </p>") == "<mj-text />"

    def test_unknown_tag_uses_default_mapping(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), "<article>Body</article>")

        assert output == "<mj-text>Body</mj-text>"

    def test_self_closing_mapping(self, parser, make_transformer):
        assert transform_first(parser, make_transformer(), "<hr>") == "<mj-divider />"

    def test_unmapped_attributes_pass_through(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), '<p id="intro">Hi</p>')

        assert output == '<mj-text id="intro">Hi</mj-text>'

    def test_raw_style_and_class_are_never_emitted(self, parser, make_transformer):
        output = transform_first(
            parser, make_transformer(), '<p class="x" style="display: none; color: red">Hi</p>'
        )

        assert output == '<mj-text color="red">Hi</mj-text>'

    def test_image_attributes(self, parser, make_transformer):
        output = transform_first(
            parser,
            make_transformer(),
            '<img src="a.png" alt="A" class="x" style="padding: 4px" responsive="true">',
        )

        assert output == '<mj-image src="a.png" alt="A" fluid="true" />'

    def test_spacer_height_from_inline_style(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), '<br style="height: 40px">')

        assert output == '<mj-spacer height="40px" />'

    def test_spacer_default_height(self, parser, make_transformer):
        assert transform_first(parser, make_transformer(), "<br>") == '<mj-spacer height="20px" />'


class TestStyleLayering:
    """Class styles, inline styles and css-class preservation."""

    STYLE_MAP = {
        'a': {'color': 'blue', 'padding': '4px'},
        'b': {'font-size': '12px'},
    }

    def test_inline_style_wins_over_class(self, parser, make_transformer):
        transformer = make_transformer(style_map=self.STYLE_MAP)

        output = transform_first(parser, transformer, '<p class="a b" style="color:red">x</p>')

        assert 'color="red"' in output
        assert 'color="blue"' not in output
        assert 'padding="4px"' in output
        assert 'font-size="12px"' in output

    def test_heading_size_wins_over_inline_style(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), '<h1 style="font-size: 10px">Title</h1>')

        assert output == '<mj-text font-size="28px" font-weight="bold">Title</mj-text>'

    def test_inline_styles_disabled(self, parser, make_transformer):
        transformer = make_transformer(style_map=self.STYLE_MAP, inline_styles=False)

        output = transform_first(parser, transformer, '<p class="a" style="color:red">x</p>')

        assert output == "<mj-text>x</mj-text>"

    def test_preserve_class_names(self, parser, make_transformer):
        transformer = make_transformer(preserve_class_names=True)

        output = transform_first(parser, transformer, '<p class="lead intro">x</p>')

        assert output == '<mj-text css-class="lead intro">x</mj-text>'


class TestMappingBranches:
    """div and a retargeting."""

    def test_column_div(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), '<div class="column-wrapper">x</div>')

        assert output == "<mj-column>x</mj-column>"

    def test_section_div(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), '<div class="hero">x</div>')

        assert output == "<mj-section>x</mj-section>"

    def test_button_link(self, parser, make_transformer):
        transformer = make_transformer(style_map={'btn': {'background-color': '#007bff'}})

        output = transform_first(parser, transformer, '<a href="https://x.test" class="btn">Go</a>')

        assert output == '<mj-button href="https://x.test" background-color="#007bff">Go</mj-button>'

    def test_plain_link_becomes_text(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), '<a href="https://x.test/u">Unsubscribe</a>')

        assert output == '<mj-text href="https://x.test/u">Unsubscribe</mj-text>'


class TestSpecialElements:
    """Tables and lists."""

    def test_unordered_list_items_get_bullets(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), "<ul><li>One</li><li>Two</li></ul>")

        assert output == "<mj-text><mj-text>• One</mj-text><mj-text>• Two</mj-text></mj-text>"

    def test_ordered_list_items_are_not_numbered(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), "<ol><li>One</li></ol>")

        assert output == "<mj-text><mj-text>One</mj-text></mj-text>"

    def test_table_wraps_children(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), '<table width="100%"><tr><td>A</td></tr></table>')

        assert output.startswith('<mj-table width="100%">')
        assert output.endswith("</mj-table>")
        assert "A" in output

    def test_empty_special_element_is_not_self_closing(self, parser, make_transformer):
        assert transform_first(parser, make_transformer(), "<ul></ul>") == "<mj-text></mj-text>"


class TestMjmlPassThrough:
    """Elements that already are MJML components."""

    def test_attributes_are_copied_verbatim(self, parser, make_transformer):
        output = transform_first(
            parser, make_transformer(), '<mj-button href="#" style="x">Go</mj-button>'
        )

        assert output == '<mj-button href="#" style="x">Go</mj-button>'

    def test_empty_component_is_self_closing(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), '<mj-divider border-width="1px"></mj-divider>')

        assert output == '<mj-divider border-width="1px" />'

    def test_children_are_transformed(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), "<mj-column><p>Hi</p></mj-column>")

        assert output == "<mj-column><mj-text>Hi</mj-text></mj-column>"

    def test_root_component_is_not_repaired(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), "<mj-text>Hi</mj-text>", parent_tag=None)

        assert output == "<mj-text>Hi</mj-text>"


class TestStructuralRepair:
    """Root-level output gets section/column wrappers."""

    def test_lone_paragraph_gets_column_and_section(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), "<p>Hi</p>", parent_tag=None)

        assert output == "<mj-section><mj-column><mj-text>Hi</mj-text></mj-column></mj-section>"

    def test_root_self_closing_component_is_wrapped(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), "<hr>", parent_tag=None)

        assert output == "<mj-section><mj-column><mj-divider /></mj-column></mj-section>"

    def test_root_column_gets_section(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), '<div class="col">x</div>', parent_tag=None)

        assert output == "<mj-section><mj-column>x</mj-column></mj-section>"

    def test_root_section_is_left_alone(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), "<div>x</div>", parent_tag=None)

        assert output == "<mj-section>x</mj-section>"

    def test_nested_content_is_not_wrapped(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), "<div><p>Hi</p></div>", parent_tag=None)

        assert output == "<mj-section><mj-text>Hi</mj-text></mj-section>"


class TestWarnings:
    """Mapping warnings are collected in document order."""

    def test_form_and_input_warnings(self, parser, make_transformer):
        transformer = make_transformer()

        transform_first(parser, transformer, '<form><input type="email"><input></form>')

        assert [w.message for w in transformer.warnings] == [FORM_WARNING, INPUT_WARNING, INPUT_WARNING]
        assert [w.element for w in transformer.warnings] == ["form", "input", "input"]

    def test_input_is_visual_substitute(self, parser, make_transformer):
        output = transform_first(parser, make_transformer(), '<input type="email" name="e">')

        assert output == '<mj-text type="email" name="e" css-class="form-input-simulation" />'


class TestCustomMappings:
    """Registry changes are reflected in the output."""

    def test_custom_target(self, parser, registry, make_transformer):
        registry.register("div", {"mjml_tag": "mj-wrapper"})

        output = transform_first(parser, make_transformer(), "<div>x</div>")

        assert output == "<mj-wrapper>x</mj-wrapper>"

    def test_custom_self_closing_and_warning(self, parser, registry, make_transformer):
        registry.register("video", {"mjml_tag": "mj-image", "self_closing": True, "warning": "No video"})
        transformer = make_transformer()

        output = transform_first(parser, transformer, '<video src="v.png">fallback</video>')

        assert output == '<mj-image src="v.png" />'
        assert transformer.warnings[0].message == "No video"
        assert transformer.warnings[0].element == "video"
