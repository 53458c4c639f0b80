"""Safe-zone auto-correction and positioning helpers."""

import logging
from typing import Iterable, Literal

from creative_compliance.constraints.geometry import is_safe_zone_exempt, overflow_delta
from creative_compliance.constraints.typography import clamp_font_size
from creative_compliance.dsl.schema import CanvasFrame, SafeZoneProfile

logger = logging.getLogger(__name__)

# Distance of top/bottom anchored text from the safe boundary
TEXT_EDGE_OFFSET = 60


def make_draggable(element) -> None:
    """Leave an element selectable and movable by the end user."""
    flags = element.mutable_flags
    flags.selectable = True
    flags.movable = True


def make_all_draggable(elements: Iterable) -> None:
    """Make every element on a canvas draggable."""
    for element in elements:
        make_draggable(element)


def correct_overflow(element, frame: CanvasFrame, profile: SafeZoneProfile) -> bool:
    """Nudge an element back inside the safe rectangle.

    Only the position changes. Full-bleed backgrounds are exempt, and an
    axis on which the element is larger than the safe area is left alone.

    Args:
        element: Canvas element to correct in place.
        frame: Target artboard.
        profile: Safe-zone margins.

    Returns:
        True if the element was moved.
    """
    if is_safe_zone_exempt(element, frame):
        return False

    delta = overflow_delta(element.bounding_box, frame, profile)
    if delta.is_zero:
        return False

    logger.debug("Moving %s by (%.1f, %.1f) into %s safe zone", element.id, delta.dx, delta.dy, profile.format_id)
    element.bounding_box = element.bounding_box.translated(delta.dx, delta.dy)
    make_draggable(element)
    return True


def center_horizontally(element, frame: CanvasFrame) -> bool:
    """Center an element horizontally on the frame; returns True if it moved."""
    box = element.bounding_box
    centered = box.centered_at(frame.width / 2, box.center_y)
    make_draggable(element)
    if centered == box:
        return False
    element.bounding_box = centered
    return True


def center_on_canvas(element, frame: CanvasFrame) -> None:
    """Place an element at the exact center of the frame."""
    element.bounding_box = element.bounding_box.centered_at(frame.width / 2, frame.height / 2)
    make_draggable(element)


def position_text_centered(
    element,
    frame: CanvasFrame,
    profile: SafeZoneProfile,
    vertical_position: Literal["top", "center", "bottom"] = "center",
) -> None:
    """Center text horizontally at a safe-zone aware vertical anchor.

    The anchor is the element's center: ``top`` sits TEXT_EDGE_OFFSET below
    the top margin, ``bottom`` the same distance above the bottom margin.
    """
    clamp_font_size(element)

    if vertical_position == "top":
        center_y = profile.top + TEXT_EDGE_OFFSET
    elif vertical_position == "bottom":
        center_y = frame.height - profile.bottom - TEXT_EDGE_OFFSET
    else:
        center_y = frame.height / 2

    element.bounding_box = element.bounding_box.centered_at(frame.width / 2, center_y)
    make_draggable(element)
