"""Unit tests for models.conversion_result module."""

from html2mjml.models import ConversionResult, ConversionWarning


class TestConversionWarning:
    """Test ConversionWarning formatting."""

    def test_message_only(self):
        assert ConversionWarning("Heads up").format() == "[html2mjml] WARNING: Heads up"

    def test_with_element(self):
        warning = ConversionWarning("Forms are not fully supported", element="form")

        assert warning.format() == "[html2mjml] WARNING: Forms are not fully supported (Element: form)"

    def test_with_element_and_line(self):
        warning = ConversionWarning("MJML validation error: bad", element="mj-text", line=7)

        assert str(warning) == "[html2mjml] WARNING: MJML validation error: bad (Element: mj-text) at line 7"


class TestConversionResult:
    """Test ConversionResult.output selection."""

    def test_output_is_mjml_without_html(self):
        result = ConversionResult(mjml="<mjml></mjml>")

        assert result.output == "<mjml></mjml>"
        assert result.warnings == []
        assert result.passthrough is False

    def test_output_prefers_rendered_html(self):
        result = ConversionResult(mjml="<mjml></mjml>", html="<html></html>")

        assert result.output == "<html></html>"

    def test_empty_html_still_counts_as_rendered(self):
        result = ConversionResult(mjml="<mjml></mjml>", html="")

        assert result.output == ""
