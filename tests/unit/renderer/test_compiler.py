"""Unit tests for renderer.compiler module."""

import sys
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from html2mjml.errors import CompilerUnavailableError
from html2mjml.renderer import CompileError, MjmlPythonCompiler
from html2mjml.renderer.compiler import _to_compile_error


@pytest.fixture
def fake_mjml_module():
    """Install a stand-in ``mjml`` module exposing mjml_to_html."""
    module = MagicMock()
    with patch.dict(sys.modules, {"mjml": module}), \
            patch.object(MjmlPythonCompiler, "is_available", return_value=True):
        yield module


class TestToCompileError:
    """Test cases for normalizing compiler diagnostics."""

    def test_dict_diagnostic(self):
        error = _to_compile_error({"message": "bad", "line": 4, "tagName": "mj-text"})

        assert error == CompileError("bad", line=4, tag_name="mj-text")

    def test_formatted_message_fallback(self):
        error = _to_compile_error({"formattedMessage": "Line 1: bad"})

        assert error.message == "Line 1: bad"

    def test_plain_value(self):
        assert _to_compile_error("oops") == CompileError("oops")

    def test_compile_error_passes_through(self):
        original = CompileError("x", line=1)

        assert _to_compile_error(original) is original


class TestMjmlPythonCompiler:
    """Test cases for MjmlPythonCompiler."""

    def test_unavailable_when_module_missing(self):
        with patch("html2mjml.renderer.compiler.importlib.util.find_spec", return_value=None) as find_spec:
            compiler = MjmlPythonCompiler()

            assert compiler.is_available() is False
            with pytest.raises(CompilerUnavailableError):
                compiler.compile("<mjml></mjml>")

        find_spec.assert_called_with("mjml")

    def test_compile_with_dict_result(self, fake_mjml_module):
        fake_mjml_module.mjml_to_html.return_value = {
            "html": "<html></html>",
            "errors": [{"message": "bad attribute", "line": 2}],
        }

        result = MjmlPythonCompiler().compile("<mjml></mjml>")

        assert result.html == "<html></html>"
        assert result.errors == [CompileError("bad attribute", line=2)]
        source = fake_mjml_module.mjml_to_html.call_args.args[0]
        assert source.read() == "<mjml></mjml>"

    def test_compile_with_attribute_result(self, fake_mjml_module):
        fake_mjml_module.mjml_to_html.return_value = SimpleNamespace(html="<html>x</html>", errors=None)

        result = MjmlPythonCompiler().compile("<mjml></mjml>")

        assert result.html == "<html>x</html>"
        assert result.errors == []

    def test_compile_errors_propagate(self, fake_mjml_module):
        fake_mjml_module.mjml_to_html.side_effect = ValueError("broken")

        with pytest.raises(ValueError):
            MjmlPythonCompiler().compile("<mjml></mjml>")
