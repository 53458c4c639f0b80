"""Geometry primitives for safe-zone membership and overflow."""

from dataclasses import dataclass

from creative_compliance.dsl.schema import (
    BoundingBox,
    CanvasFrame,
    ElementKind,
    SafeZoneProfile,
)

# Images covering at least this share of the frame on both axes are backgrounds
FULL_BLEED_RATIO = 0.9

# Tolerance for edge comparisons, absorbs float error left by a translation
EDGE_TOLERANCE = 1e-6


@dataclass(frozen=True)
class OverflowDelta:
    """Translation that brings a box inside the safe rectangle."""

    dx: float = 0.0
    dy: float = 0.0

    @property
    def is_zero(self) -> bool:
        return self.dx == 0 and self.dy == 0


def is_within_safe_zone(box: BoundingBox, frame: CanvasFrame, profile: SafeZoneProfile) -> bool:
    """Check if a box lies fully inside the safe rectangle.

    Args:
        box: Element bounding box.
        frame: Target artboard.
        profile: Safe-zone margins.

    Returns:
        True if the box is fully contained.
    """
    safe_left, safe_top, safe_right, safe_bottom = profile.safe_rect(frame)
    return (
        box.left >= safe_left - EDGE_TOLERANCE
        and box.top >= safe_top - EDGE_TOLERANCE
        and box.right <= safe_right + EDGE_TOLERANCE
        and box.bottom <= safe_bottom + EDGE_TOLERANCE
    )


def _axis_delta(start: float, end: float, lower: float, upper: float) -> float:
    # Larger than the allowed span: translation alone cannot satisfy it
    if end - start > upper - lower + EDGE_TOLERANCE:
        return 0.0
    if start < lower - EDGE_TOLERANCE:
        return lower - start
    if end > upper + EDGE_TOLERANCE:
        return upper - end
    return 0.0


def overflow_delta(box: BoundingBox, frame: CanvasFrame, profile: SafeZoneProfile) -> OverflowDelta:
    """Compute the minimal translation into the safe rectangle.

    Each axis is resolved independently. An axis already satisfied, or one
    on which the box is larger than the safe rectangle, gets a zero delta.

    Args:
        box: Element bounding box.
        frame: Target artboard.
        profile: Safe-zone margins.

    Returns:
        OverflowDelta with per-axis translation.
    """
    safe_left, safe_top, safe_right, safe_bottom = profile.safe_rect(frame)
    return OverflowDelta(
        dx=_axis_delta(box.left, box.right, safe_left, safe_right),
        dy=_axis_delta(box.top, box.bottom, safe_top, safe_bottom),
    )


def is_full_bleed(element, frame: CanvasFrame) -> bool:
    """True for images covering most of the frame on both axes."""
    if element.kind != ElementKind.IMAGE.value:
        return False
    box = element.bounding_box
    return box.width >= frame.width * FULL_BLEED_RATIO and box.height >= frame.height * FULL_BLEED_RATIO


def is_safe_zone_exempt(element, frame: CanvasFrame) -> bool:
    """Background images are never checked against or nudged into safe zones."""
    return is_full_bleed(element, frame)


def boxes_overlap(box1: BoundingBox, box2: BoundingBox) -> bool:
    """Check if two bounding boxes overlap.

    Args:
        box1: First bounding box.
        box2: Second bounding box.

    Returns:
        True if they overlap (touching edges do not count).
    """
    return (
        box1.left < box2.right
        and box1.right > box2.left
        and box1.top < box2.bottom
        and box1.bottom > box2.top
    )
