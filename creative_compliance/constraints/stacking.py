"""
stacking.py — Center-stack layout engine.

Places elements horizontally centered and stacked top to bottom in
insertion order. The stacking cursor lives on a StackingSession, so each
layout pass owns its own cursor; a session must not be shared between
concurrent passes.

Session lifecycle:
    IDLE --begin()--> STACKING --end()--> IDLE
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from creative_compliance.config import get_settings
from creative_compliance.constraints.safe_zone import make_draggable
from creative_compliance.constraints.typography import clamp_font_size
from creative_compliance.dsl.schema import (
    DEFAULT_ELEMENT_HEIGHT,
    CanvasFrame,
    ComplianceIssue,
    IssueKind,
    SafeZoneProfile,
)

logger = logging.getLogger(__name__)

STACK_OVERFLOW_SEVERITY = 2


class StackingSessionError(RuntimeError):
    """Raised when placing an element without an active stacking session."""


class SessionState(str, Enum):
    """Layout engine states."""

    IDLE = "idle"
    STACKING = "stacking"


@dataclass(frozen=True)
class Placement:
    """Where an element was placed.

    ``left``/``top`` are center-origin anchor coordinates: the element's
    bounding box is centered on them.
    """

    element_id: str
    left: float
    top: float
    height: float
    next_y: float
    wrapped: bool = False


class StackingSession:
    """Stateful center-stack placement for one artboard.

    Args:
        frame: Target artboard.
        profile: Safe-zone margins.
        margin: Gap between the top safe boundary and the first element.
    """

    def __init__(
        self,
        frame: CanvasFrame,
        profile: SafeZoneProfile,
        margin: Optional[float] = None,
    ) -> None:
        self.frame = frame
        self.profile = profile
        self.margin = get_settings().stack_margin if margin is None else margin
        self.state = SessionState.IDLE
        self.next_y = self.start_y
        self.placements: List[Placement] = []
        self.overflow_issues: List[ComplianceIssue] = []

    @property
    def start_y(self) -> float:
        """Cursor position at session start and after a wrap."""
        return self.profile.top + self.margin

    @property
    def limit_y(self) -> float:
        """Bottom safe boundary."""
        return self.frame.height - self.profile.bottom

    @property
    def is_active(self) -> bool:
        return self.state == SessionState.STACKING

    def begin(self) -> "StackingSession":
        """Reset the cursor and start stacking."""
        self.state = SessionState.STACKING
        self.next_y = self.start_y
        self.placements = []
        self.overflow_issues = []
        return self

    def end(self) -> None:
        """Stop stacking; further placements raise until begin() is called."""
        self.state = SessionState.IDLE

    def place_next(self, element, spacing: Optional[float] = None) -> Placement:
        """Clamp, center and stack one element.

        When the element would cross the bottom safe boundary the cursor
        wraps back to the top. Earlier elements may then be overlapped, so
        the wrap is logged, recorded as a stack_overflow issue and reported
        on the returned Placement. The first placement of a batch never
        wraps; an element taller than the safe area starts at the top anyway.

        Args:
            element: Canvas element to place in place.
            spacing: Vertical gap after the element.

        Returns:
            Placement describing the anchor and cursor.

        Raises:
            StackingSessionError: If the session is not active.
        """
        if not self.is_active:
            raise StackingSessionError(
                f"Cannot place {element.id!r}: no active stacking session; call begin_stacking_session() first"
            )
        if spacing is None:
            spacing = get_settings().stack_spacing

        clamp_font_size(element)

        height = element.bounding_box.height or DEFAULT_ELEMENT_HEIGHT

        wrapped = False
        # The first placement of a batch never wraps
        if self.next_y + height > self.limit_y and self.placements:
            logger.warning(
                "Stack overflow placing %s at y=%.1f (limit %.1f), wrapping to top",
                element.id, self.next_y, self.limit_y,
            )
            self.next_y = self.start_y
            wrapped = True
            self.overflow_issues.append(
                ComplianceIssue(
                    kind=IssueKind.STACK_OVERFLOW,
                    severity=STACK_OVERFLOW_SEVERITY,
                    target_element_id=element.id,
                    message=f"Element {element.id} restarted the stack at the top and may overlap earlier elements",
                )
            )

        anchor_x = self.frame.width / 2
        anchor_y = self.next_y + height / 2
        box = element.bounding_box
        if box.height != height:
            box = box.model_copy(update={"height": height})
        element.bounding_box = box.centered_at(anchor_x, anchor_y)
        make_draggable(element)

        self.next_y += height + spacing

        placement = Placement(
            element_id=element.id,
            left=anchor_x,
            top=anchor_y,
            height=height,
            next_y=self.next_y,
            wrapped=wrapped,
        )
        self.placements.append(placement)
        return placement


def begin_stacking_session(
    frame: CanvasFrame,
    profile: SafeZoneProfile,
    margin: Optional[float] = None,
) -> StackingSession:
    """Start a new stacking session for one placement batch."""
    return StackingSession(frame, profile, margin=margin).begin()


def place_next(
    session: Optional[StackingSession],
    element,
    spacing: Optional[float] = None,
) -> Placement:
    """Place an element with a session from begin_stacking_session()."""
    if session is None:
        raise StackingSessionError(
            f"Cannot place {element.id!r}: no active stacking session; call begin_stacking_session() first"
        )
    return session.place_next(element, spacing=spacing)


@contextmanager
def stacking_session(
    frame: CanvasFrame,
    profile: SafeZoneProfile,
    margin: Optional[float] = None,
) -> Iterator[StackingSession]:
    """Scoped stacking session that is ended when the block exits."""
    session = begin_stacking_session(frame, profile, margin=margin)
    try:
        yield session
    finally:
        session.end()
