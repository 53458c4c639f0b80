"""Data model for canvas elements, frames and safe-zone profiles."""

from creative_compliance.dsl.schema import (
    DEFAULT_ELEMENT_HEIGHT,
    BoundingBox,
    CanvasElement,
    CanvasFrame,
    ComplianceIssue,
    CreativeFormat,
    ElementKind,
    ImageElement,
    IssueKind,
    MutableFlags,
    SafeZoneProfile,
    ShapeElement,
    TextElement,
    parse_elements,
)

__all__ = [
    "DEFAULT_ELEMENT_HEIGHT",
    "BoundingBox",
    "CanvasElement",
    "CanvasFrame",
    "ComplianceIssue",
    "CreativeFormat",
    "ElementKind",
    "ImageElement",
    "IssueKind",
    "MutableFlags",
    "SafeZoneProfile",
    "ShapeElement",
    "TextElement",
    "parse_elements",
]
