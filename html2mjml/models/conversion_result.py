"""Conversion result and warning data models."""

from dataclasses import dataclass, field
from typing import List, Optional

WARNING_PREFIX = "[html2mjml] WARNING:"


@dataclass
class ConversionWarning:
    """Advisory diagnostic collected during a conversion call.

    Attributes:
        message: Human-readable description
        element: Source tag name the warning relates to (optional)
        line: Line number reported by the MJML compiler (optional)
    """
    message: str
    element: Optional[str] = None
    line: Optional[int] = None

    def format(self) -> str:
        """Render the warning for an operator-visible channel."""
        text = f"{WARNING_PREFIX} {self.message}"
        if self.element:
            text += f" (Element: {self.element})"
        if self.line:
            text += f" at line {self.line}"
        return text

    def __str__(self) -> str:
        return self.format()


@dataclass
class ConversionResult:
    """Result of an HTML to MJML conversion.

    Attributes:
        mjml: Assembled MJML markup (or the serialized input on pass-through)
        html: Rendered HTML when validation succeeded, else None
        warnings: Ordered warnings collected during the call
        passthrough: True when the input already was an MJML document
    """
    mjml: str
    html: Optional[str] = None
    warnings: List[ConversionWarning] = field(default_factory=list)
    passthrough: bool = False

    @property
    def output(self) -> str:
        """Return rendered HTML when available, otherwise the MJML text."""
        return self.html if self.html is not None else self.mjml
