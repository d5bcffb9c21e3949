"""Markup helpers for emitting MJML text."""

from typing import Mapping, Optional

MJML_PREFIX = "mj-"

# Components that must be direct children of mj-column
COLUMN_CHILDREN = frozenset([
    "mj-text",
    "mj-image",
    "mj-button",
    "mj-divider",
    "mj-spacer",
    "mj-table",
    "mj-social",
    "mj-navbar",
])

# Components that must be direct children of mj-section
SECTION_CHILDREN = frozenset(["mj-column", "mj-group"])


def escape_attribute_value(value: str) -> str:
    """Escape special characters in an attribute value."""
    return (
        str(value)
        .replace("&", "&amp;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def attributes_to_string(attributes: Optional[Mapping[str, Optional[str]]]) -> str:
    """Render attributes as ``name="value"`` pairs, skipping None values."""
    if not attributes:
        return ""
    return " ".join(
        f'{name}="{escape_attribute_value(value)}"'
        for name, value in attributes.items()
        if value is not None
    )


def open_tag(tag: str, attributes: Optional[Mapping[str, Optional[str]]] = None) -> str:
    attrs = attributes_to_string(attributes)
    return f"<{tag} {attrs}>" if attrs else f"<{tag}>"


def self_closing_tag(tag: str, attributes: Optional[Mapping[str, Optional[str]]] = None) -> str:
    attrs = attributes_to_string(attributes)
    return f"<{tag} {attrs} />" if attrs else f"<{tag} />"


def element(tag: str, attributes: Optional[Mapping[str, Optional[str]]], content: str) -> str:
    """Render a full open/close element around already-rendered content."""
    return f"{open_tag(tag, attributes)}{content}</{tag}>"


def is_mjml_component(tag_name: str) -> bool:
    """Check whether a tag name is already an MJML component."""
    return tag_name.lower().startswith(MJML_PREFIX)


def needs_column_wrapper(mjml_tag: str) -> bool:
    return mjml_tag in COLUMN_CHILDREN


def needs_section_wrapper(mjml_tag: str) -> bool:
    return mjml_tag in SECTION_CHILDREN
