"""MJML compiler collaborator.

``MjmlCompiler`` is the interface the renderer bridge consumes.
``MjmlPythonCompiler`` adapts the ``mjml`` package (mjml-python), which is
an optional dependency installed with the ``render`` extra.
"""

import importlib.util
import logging
from dataclasses import dataclass, field
from io import StringIO
from typing import Any, List, Optional, Protocol

from ..errors import CompilerUnavailableError

logger = logging.getLogger(__name__)


@dataclass
class CompileError:
    """Single diagnostic reported by the compiler."""
    message: str
    line: Optional[int] = None
    tag_name: Optional[str] = None


@dataclass
class CompileResult:
    """Rendered HTML plus the diagnostics reported while compiling."""
    html: str
    errors: List[CompileError] = field(default_factory=list)


class MjmlCompiler(Protocol):
    """Compiles MJML markup into HTML."""

    def is_available(self) -> bool: ...

    def compile(self, mjml_text: str, validation_level: str = "soft") -> CompileResult: ...


def _to_compile_error(raw: Any) -> CompileError:
    if isinstance(raw, CompileError):
        return raw
    if isinstance(raw, dict):
        return CompileError(
            message=str(raw.get('message') or raw.get('formattedMessage') or raw),
            line=raw.get('line'),
            tag_name=raw.get('tagName'),
        )
    return CompileError(message=str(raw))


class MjmlPythonCompiler:
    """MjmlCompiler backed by the ``mjml`` Python package.

    mjml-python has no validation levels; it always renders and reports what
    it could not handle in ``errors``, which matches soft validation.
    """

    module_name = "mjml"

    def is_available(self) -> bool:
        """Check whether the mjml package can be imported."""
        return importlib.util.find_spec(self.module_name) is not None

    def compile(self, mjml_text: str, validation_level: str = "soft") -> CompileResult:
        """Render MJML markup to HTML.

        Raises:
            CompilerUnavailableError: If the mjml package is not installed
        """
        if not self.is_available():
            raise CompilerUnavailableError(self.module_name)

        from mjml import mjml_to_html

        logger.debug(f"Compiling {len(mjml_text)} characters of MJML ({validation_level})")
        result = mjml_to_html(StringIO(mjml_text))
        html = result['html'] if isinstance(result, dict) else result.html
        raw_errors = (result.get('errors') if isinstance(result, dict) else getattr(result, 'errors', None)) or []
        return CompileResult(html=html, errors=[_to_compile_error(e) for e in raw_errors])
