"""Unit tests for converter.markup module."""

import pytest

from html2mjml.converter.markup import (
    attributes_to_string,
    element,
    escape_attribute_value,
    is_mjml_component,
    needs_column_wrapper,
    needs_section_wrapper,
    open_tag,
    self_closing_tag,
)


class TestEscaping:
    """Test cases for escaping helpers."""

    def test_escape_attribute_value(self):
        assert escape_attribute_value('a & "b" <c> \'d\'') == "a &amp; &quot;b&quot; &lt;c&gt; &#39;d&#39;"


class TestTags:
    """Test cases for tag rendering."""

    def test_attributes_to_string_skips_none(self):
        assert attributes_to_string({'a': '1', 'b': None, 'c': ''}) == 'a="1" c=""'

    def test_attributes_to_string_empty(self):
        assert attributes_to_string({}) == ""
        assert attributes_to_string(None) == ""

    def test_open_tag(self):
        assert open_tag("mj-text") == "<mj-text>"
        assert open_tag("mj-text", {'color': 'red'}) == '<mj-text color="red">'

    def test_self_closing_tag(self):
        assert self_closing_tag("mj-divider") == "<mj-divider />"
        assert self_closing_tag("mj-image", {'src': 'a.png'}) == '<mj-image src="a.png" />'

    def test_element(self):
        assert element("mj-text", {'align': 'center'}, "Hi") == '<mj-text align="center">Hi</mj-text>'


class TestPredicates:
    """Test cases for structural predicates."""

    @pytest.mark.parametrize("tag", [
        "mj-text", "mj-image", "mj-button", "mj-divider",
        "mj-spacer", "mj-table", "mj-social", "mj-navbar",
    ])
    def test_column_children(self, tag):
        assert needs_column_wrapper(tag)
        assert not needs_section_wrapper(tag)

    @pytest.mark.parametrize("tag", ["mj-column", "mj-group"])
    def test_section_children(self, tag):
        assert needs_section_wrapper(tag)
        assert not needs_column_wrapper(tag)

    @pytest.mark.parametrize("tag", ["mjml", "mj-body", "mj-section", "mj-head"])
    def test_no_wrapper_needed(self, tag):
        assert not needs_column_wrapper(tag)
        assert not needs_section_wrapper(tag)

    def test_is_mjml_component(self):
        assert is_mjml_component("mj-text")
        assert is_mjml_component("MJ-Button")
        assert not is_mjml_component("mjml")
        assert not is_mjml_component("p")
