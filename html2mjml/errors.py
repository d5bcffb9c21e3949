"""Typed exception hierarchy for html2mjml errors.

This module defines all custom exceptions used by the converter.
All exceptions inherit from Html2MjmlError base class for easy catching and
include descriptive messages with context to help with debugging.

Only MalformedInputError and InvalidMappingError escape a conversion or
registration call. The remaining kinds are recovered internally and surface
as ConversionWarning entries instead.
"""

from typing import Optional


class Html2MjmlError(Exception):
    """Base exception for all html2mjml errors.

    Use this to catch any application-level error from the converter.
    """
    pass


class MalformedInputError(Html2MjmlError):
    """Raised when the input HTML cannot be parsed into a document."""

    def __init__(self, reason: str):
        super().__init__(f"Malformed HTML input: {reason}")
        self.reason = reason


class InvalidMappingError(Html2MjmlError):
    """Raised when an element mapping registration is rejected."""

    def __init__(self, tag_name: object, reason: str):
        super().__init__(f"Invalid mapping for element {tag_name!r}: {reason}")
        self.tag_name = tag_name
        self.reason = reason


class StyleParseError(Html2MjmlError):
    """Raised when a <style> block cannot be parsed."""

    def __init__(self, message: str):
        super().__init__(message)


class CompilerError(Html2MjmlError):
    """Raised when the MJML compiler fails to compile markup."""

    def __init__(self, message: str):
        super().__init__(message)


class CompilerUnavailableError(CompilerError):
    """Raised when the MJML compiler is not installed or not configured."""

    def __init__(self, compiler_name: str = "mjml"):
        super().__init__(f"MJML compiler '{compiler_name}' is not available")
        self.compiler_name = compiler_name


class ConfigError(Html2MjmlError):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message


class FilesystemError(Html2MjmlError):
    """Raised when filesystem operations fail (read, write, permissions, etc)."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Filesystem operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason
