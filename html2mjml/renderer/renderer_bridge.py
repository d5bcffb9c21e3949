"""Bridge between assembled MJML text and the MJML compiler.

Compilation is soft: compiler diagnostics become warnings, and a missing
or failing compiler falls back to returning the MJML text unrendered.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..models import ConversionWarning
from .compiler import MjmlCompiler

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "MJML validation skipped: MJML compiler not available"


@dataclass
class RenderOutcome:
    """Outcome of a render attempt.

    Attributes:
        output: Rendered HTML, or the MJML text when rendering fell back
        rendered: True when ``output`` is compiler HTML
    """
    output: str
    rendered: bool


class RendererBridge:
    """Hands MJML text to the compiler and collects its diagnostics."""

    def __init__(self, compiler: Optional[MjmlCompiler] = None):
        """Initialize RendererBridge.

        Args:
            compiler: MJML compiler, or None when rendering is not configured
        """
        self.compiler = compiler

    def render(self, mjml_text: str, warnings: List[ConversionWarning]) -> RenderOutcome:
        """Compile MJML text with soft validation.

        Args:
            mjml_text: Assembled MJML markup
            warnings: List receiving diagnostics and fallback warnings

        Returns:
            RenderOutcome with rendered HTML, or the raw MJML on fallback
        """
        if self.compiler is None or not self.compiler.is_available():
            logger.debug("No MJML compiler available, returning MJML unrendered")
            warnings.append(ConversionWarning(UNAVAILABLE_MESSAGE))
            return RenderOutcome(output=mjml_text, rendered=False)

        try:
            result = self.compiler.compile(mjml_text, validation_level="soft")
        except Exception as e:
            logger.debug("MJML compiler raised, returning MJML unrendered", exc_info=True)
            warnings.append(ConversionWarning(f"MJML processing error: {e}"))
            return RenderOutcome(output=mjml_text, rendered=False)

        for error in result.errors:
            warnings.append(
                ConversionWarning(
                    f"MJML validation error: {error.message}",
                    element=error.tag_name,
                    line=error.line,
                )
            )

        return RenderOutcome(output=result.html, rendered=True)
