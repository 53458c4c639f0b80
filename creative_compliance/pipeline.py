"""
pipeline.py — Entry point for placing AI-generated elements.

Every element coming from a generator (copywriting, emotion-to-design,
campaign sets, multiverse variants) goes through the same steps before it
reaches the renderer:

1. clamp_font_size
2. center-stack placement
3. correct_overflow
4. draggable flags
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence, Tuple

from creative_compliance.constraints.formats import get_frame, get_safe_zone
from creative_compliance.constraints.safe_zone import correct_overflow, make_draggable
from creative_compliance.constraints.stacking import Placement, StackingSession, stacking_session
from creative_compliance.constraints.typography import clamp_font_size
from creative_compliance.dsl.schema import CanvasFrame, ComplianceIssue, SafeZoneProfile, parse_elements

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Outcome of placing one batch of generated elements."""

    elements: List[Any] = field(default_factory=list)
    placements: List[Placement] = field(default_factory=list)
    clamped_ids: List[str] = field(default_factory=list)
    corrected_ids: List[str] = field(default_factory=list)
    overflow_issues: List[ComplianceIssue] = field(default_factory=list)

    @property
    def wrapped(self) -> bool:
        """True if the stack ran out of room and restarted at the top."""
        return any(p.wrapped for p in self.placements)


def place_ai_element(
    session: StackingSession, element, spacing: Optional[float] = None
) -> Tuple[Placement, bool, bool]:
    """Run one element through clamp, placement, correction and flags.

    Returns:
        Tuple of (placement, font size clamped, overflow corrected).
    """
    clamped = clamp_font_size(element)
    placement = session.place_next(element, spacing=spacing)
    corrected = correct_overflow(element, session.frame, session.profile)
    if corrected:
        # Keep the recorded anchor on the corrected box
        box = element.bounding_box
        placement = replace(placement, left=box.center_x, top=box.center_y)
        session.placements[-1] = placement
    make_draggable(element)
    if clamped or corrected:
        logger.debug("Placed %s (clamped=%s, corrected=%s)", element.id, clamped, corrected)
    return placement, clamped, corrected


def place_ai_elements(
    elements: Sequence,
    frame: CanvasFrame,
    profile: SafeZoneProfile,
    spacing: Optional[float] = None,
) -> ImportResult:
    """Place a batch of generated elements in a fresh stacking session.

    Args:
        elements: Elements in the order they should stack.
        frame: Target artboard.
        profile: Safe-zone margins.
        spacing: Vertical gap between elements (default from settings).

    Returns:
        ImportResult listing placements and any corrections.
    """
    result = ImportResult(elements=list(elements))

    with stacking_session(frame, profile) as session:
        for element in result.elements:
            placement, clamped, corrected = place_ai_element(session, element, spacing=spacing)
            result.placements.append(placement)
            if clamped:
                result.clamped_ids.append(element.id)
            if corrected:
                result.corrected_ids.append(element.id)
        result.overflow_issues = list(session.overflow_issues)

    logger.info(
        "Imported %d element(s) into %s: %d clamped, %d corrected, %d wrap(s)",
        len(result.elements),
        profile.format_id,
        len(result.clamped_ids),
        len(result.corrected_ids),
        len(result.overflow_issues),
    )
    return result


def import_ai_payload(
    payload: List[Dict[str, Any]],
    format_id: str,
    spacing: Optional[float] = None,
) -> ImportResult:
    """Validate raw generator output and place it on a format's artboard.

    Args:
        payload: Element dictionaries as produced by a generator.
        format_id: Target platform/format id.
        spacing: Vertical gap between elements.

    Returns:
        ImportResult with typed, placed elements.

    Raises:
        pydantic.ValidationError: If the payload is malformed.
    """
    elements = parse_elements(payload)
    return place_ai_elements(elements, get_frame(format_id), get_safe_zone(format_id), spacing=spacing)
