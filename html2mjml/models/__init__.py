"""Data models for conversion options, warnings and results."""

from .conversion_options import ConversionOptions
from .conversion_result import ConversionResult, ConversionWarning

__all__ = ['ConversionOptions', 'ConversionResult', 'ConversionWarning']
