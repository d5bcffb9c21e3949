"""Data models for element mappings.

An attribute transform returns a tagged result: ``Rewrite`` replaces the
attribute set, ``Retarget`` replaces both the MJML tag and the attribute set.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Union


@dataclass(frozen=True)
class Rewrite:
    """Transform outcome that keeps the mapped tag."""
    attributes: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Retarget:
    """Transform outcome that overrides the mapped tag."""
    mjml_tag: str
    attributes: Dict[str, str] = field(default_factory=dict)


TransformResult = Union[Rewrite, Retarget]
AttributeTransform = Callable[[Dict[str, str]], Union[TransformResult, Dict[str, str]]]


def identity_transform(attrs: Dict[str, str]) -> TransformResult:
    """Return the attributes unchanged."""
    return Rewrite(dict(attrs))


@dataclass(frozen=True)
class ElementMapping:
    """Mapping from an HTML element to an MJML component.

    Attributes:
        mjml_tag: Target MJML tag name
        attribute_transform: Function rewriting the merged attribute set
        self_closing: Always emit a self-closing tag
        special: Emission is delegated to the special-element handler
        inline_element: Element is inline in the source document
        children_container: Optional container tag for children
        warning: Advisory warning recorded whenever the mapping is used
    """
    mjml_tag: str
    attribute_transform: Optional[AttributeTransform] = None
    self_closing: bool = False
    special: bool = False
    inline_element: bool = False
    children_container: Optional[str] = None
    warning: Optional[str] = None

    def apply(self, attrs: Dict[str, str]) -> TransformResult:
        """Run the attribute transform and normalize its result.

        Plain dicts returned by user transforms are treated as ``Rewrite``.

        Args:
            attrs: Merged source and style-derived attributes

        Returns:
            Rewrite or Retarget
        """
        transform = self.attribute_transform or identity_transform
        result = transform(dict(attrs))
        if isinstance(result, (Rewrite, Retarget)):
            return result
        if isinstance(result, dict):
            return Rewrite(result)
        raise TypeError(
            f"Attribute transform for {self.mjml_tag} returned "
            f"{type(result).__name__}, expected Rewrite, Retarget or dict"
        )
