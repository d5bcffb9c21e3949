"""Root pytest configuration for all tests.

This conftest applies to all test types (unit, integration).
"""

import pytest

from html2mjml.converter import BeautifulSoupParser, HtmlToMjmlConverter
from html2mjml.element_mapping import MappingRegistry, default_registry


@pytest.fixture(autouse=True)
def reset_default_registry():
    """Drop mappings registered into the process-wide registry by a test."""
    yield
    default_registry.reset()


@pytest.fixture
def registry():
    """Create an isolated MappingRegistry."""
    return MappingRegistry()


@pytest.fixture
def parser():
    """Create BeautifulSoupParser instance."""
    return BeautifulSoupParser()


@pytest.fixture
def converter(registry):
    """Create HtmlToMjmlConverter without a compiler."""
    return HtmlToMjmlConverter(registry=registry)
