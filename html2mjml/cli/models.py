"""Data models for CLI operations."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict

from ..models import ConversionOptions

# The command line prints MJML unless rendering is asked for
CLI_DEFAULT_OPTIONS = ConversionOptions(validate_output=False)


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Conversion completed
    - GENERAL_ERROR (1): Unexpected failure or unreadable/unwritable file
    - MALFORMED_INPUT (2): Input HTML could not be parsed
    - CONFIG_ERROR (3): Configuration file or mapping is invalid
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    MALFORMED_INPUT = 2
    CONFIG_ERROR = 3


@dataclass
class ConverterConfig:
    """Settings loaded from a YAML configuration file.

    Attributes:
        options: Conversion options (defaults for anything not configured)
        mappings: Custom element mappings keyed by source tag name
        parser: BeautifulSoup tree builder name
    """
    options: ConversionOptions = field(default_factory=lambda: CLI_DEFAULT_OPTIONS)
    mappings: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    parser: str = "html.parser"
