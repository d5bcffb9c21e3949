"""Command-line interface for html2mjml.

Provides the ``html2mjml`` command which converts an HTML file (or stdin)
into MJML, optionally rendering it to email HTML.
"""

from .config_loader import ConfigLoader
from .models import ConverterConfig, ExitCode
from .output import OutputHandler

__all__ = [
    'ConfigLoader',
    'ConverterConfig',
    'ExitCode',
    'OutputHandler',
]
