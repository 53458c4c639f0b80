"""Compliance aggregator: scan a canvas, score it and apply fixes."""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Optional, Sequence

from creative_compliance.config import get_settings
from creative_compliance.constraints.contrast import (
    contrast_ratio,
    minimum_contrast_for,
    parse_color,
    repair_contrast,
)
from creative_compliance.constraints.copy_rules import check_copy_rules
from creative_compliance.constraints.formats import get_format, get_safe_zone
from creative_compliance.constraints.geometry import is_safe_zone_exempt, is_within_safe_zone
from creative_compliance.constraints.safe_zone import (
    center_horizontally,
    correct_overflow,
    make_draggable,
)
from creative_compliance.constraints.typography import clamp_font_size
from creative_compliance.dsl.schema import (
    CanvasFrame,
    ComplianceIssue,
    IssueKind,
    SafeZoneProfile,
)

logger = logging.getLogger(__name__)

SAFE_ZONE_SEVERITY = 4
CONTRAST_SEVERITY = 5

# Per-element penalty cap, equal to the top of the severity scale
MAX_ELEMENT_PENALTY = 10


@dataclass
class ComplianceReport:
    """Result of a compliance scan."""

    score: int  # 0-100
    issues: list[ComplianceIssue] = field(default_factory=list)
    element_count: int = 0

    @property
    def is_compliant(self) -> bool:
        return not self.issues

    def issues_for(self, element_id: str) -> list[ComplianceIssue]:
        """Issues targeting one element."""
        return [i for i in self.issues if i.target_element_id == element_id]

    def issues_of_kind(self, kind: IssueKind) -> list[ComplianceIssue]:
        """Issues of one kind."""
        return [i for i in self.issues if i.kind == kind]

    def flagged_ids(self, kind: IssueKind) -> set[str]:
        """Ids of elements carrying an issue of the given kind."""
        return {i.target_element_id for i in self.issues if i.kind == kind}


def calculate_score(issues: Sequence[ComplianceIssue], element_count: int) -> int:
    """Calculate the compliance score.

    Each element's penalty is the sum of the severities of its issues,
    capped at MAX_ELEMENT_PENALTY. The score is
    ``round(100 - 100 * total_penalty / (MAX_ELEMENT_PENALTY * element_count))``
    clamped to 0-100; a canvas without elements scores 100.

    Args:
        issues: Issues found on the canvas.
        element_count: Number of elements scanned.

    Returns:
        Integer score from 0-100.
    """
    if element_count <= 0:
        return 100

    penalties: dict[str, int] = defaultdict(int)
    for issue in issues:
        penalties[issue.target_element_id] += issue.severity

    total = sum(min(MAX_ELEMENT_PENALTY, p) for p in penalties.values())
    score = round(100 - 100 * total / (MAX_ELEMENT_PENALTY * element_count))
    return max(0, min(100, score))


def check_safe_zones(
    elements: Sequence, frame: CanvasFrame, profile: SafeZoneProfile
) -> list[ComplianceIssue]:
    """Flag non-exempt elements outside the safe rectangle."""
    issues = []
    for element in elements:
        if is_safe_zone_exempt(element, frame):
            continue
        if not is_within_safe_zone(element.bounding_box, frame, profile):
            issues.append(
                ComplianceIssue(
                    kind=IssueKind.SAFE_ZONE_VIOLATION,
                    severity=SAFE_ZONE_SEVERITY,
                    target_element_id=element.id,
                    message=f"Element {element.id} extends into the {profile.format_id} safe zone and may be obscured",
                )
            )
    return issues


def check_contrast(elements: Sequence, background_color: str) -> list[ComplianceIssue]:
    """Flag text elements below the WCAG AA minimum for their size."""
    issues = []
    for element in elements:
        if not element.is_text:
            continue
        ratio = contrast_ratio(element.fill_color, background_color)
        minimum = minimum_contrast_for(element.font_size)
        if ratio < minimum:
            issues.append(
                ComplianceIssue(
                    kind=IssueKind.CONTRAST_VIOLATION,
                    severity=CONTRAST_SEVERITY,
                    target_element_id=element.id,
                    message=f"Text {element.id} contrast {ratio:.2f}:1 is below {minimum}:1 (WCAG AA)",
                )
            )
    return issues


def scan_compliance(
    elements: Sequence,
    frame: CanvasFrame,
    profile: SafeZoneProfile,
    background_color: Optional[str] = None,
    *,
    format_id: Optional[str] = None,
    copy_checks: bool = False,
) -> ComplianceReport:
    """Scan a canvas for compliance issues.

    Args:
        elements: Canvas elements.
        frame: Target artboard.
        profile: Safe-zone margins.
        background_color: Canvas background (default from settings).
        format_id: Format for copy checks (defaults to the profile's).
        copy_checks: Also run the advisory copy and brand rules.

    Returns:
        ComplianceReport with score and issues.
    """
    background_color = background_color or get_settings().background_color

    issues: list[ComplianceIssue] = []
    issues.extend(check_safe_zones(elements, frame, profile))
    issues.extend(check_contrast(elements, background_color))
    if copy_checks:
        issues.extend(check_copy_rules(elements, frame, format_id or profile.format_id))

    score = calculate_score(issues, len(elements))
    logger.debug("Scanned %d element(s): %d issue(s), score %d", len(elements), len(issues), score)
    return ComplianceReport(score=score, issues=issues, element_count=len(elements))


def fix_safe_zone_violations(
    elements: Sequence, frame: CanvasFrame, profile: SafeZoneProfile
) -> int:
    """Nudge every flagged element back into the safe zone."""
    flagged = {i.target_element_id for i in check_safe_zones(elements, frame, profile)}
    return sum(1 for e in elements if e.id in flagged and correct_overflow(e, frame, profile))


def fix_contrast_issues(elements: Sequence, background_color: str) -> int:
    """Repair the color of every text element below its contrast minimum."""
    flagged = {i.target_element_id for i in check_contrast(elements, background_color)}
    fixed = 0
    for element in elements:
        if element.id not in flagged:
            continue
        new_color = repair_contrast(
            element.fill_color, background_color, minimum_contrast_for(element.font_size)
        )
        if parse_color(new_color).rgb != parse_color(element.fill_color).rgb:
            element.fill_color = new_color
            make_draggable(element)
            fixed += 1
    return fixed


def auto_fix_all(
    elements: Sequence,
    frame: CanvasFrame,
    profile: SafeZoneProfile,
    background_color: Optional[str] = None,
) -> int:
    """Apply every automatic fix and re-scan.

    Elements that remain non-compliant (oversized geometry, contrast
    search that did not converge) stay flagged and are logged.

    Returns:
        Number of fixes applied; 0 on an already compliant canvas.
    """
    background_color = background_color or get_settings().background_color

    fixed = fix_safe_zone_violations(elements, frame, profile)
    fixed += fix_contrast_issues(elements, background_color)

    remaining = scan_compliance(elements, frame, profile, background_color)
    if remaining.issues:
        logger.warning(
            "%d issue(s) remain after auto-fix: %s",
            len(remaining.issues),
            ", ".join(sorted({i.target_element_id for i in remaining.issues})),
        )
    if fixed:
        logger.info("Auto-fixed %d issue%s", fixed, "s" if fixed > 1 else "")
    else:
        logger.info("No issues to fix")
    return fixed


def enforce_all_constraints(
    elements: Sequence,
    frame: CanvasFrame,
    profile: SafeZoneProfile,
    center: bool = True,
) -> int:
    """Clamp, optionally center, and correct every element on a canvas.

    Every element is left draggable. Centering is not counted as a fix.

    Returns:
        Number of font clamps plus overflow corrections.
    """
    fixed = 0
    for element in elements:
        if clamp_font_size(element):
            fixed += 1
        if center:
            center_horizontally(element, frame)
        if correct_overflow(element, frame, profile):
            fixed += 1
        make_draggable(element)

    if fixed:
        logger.info("Enforced constraints: %d fix(es)", fixed)
    return fixed


class ComplianceEngine:
    """Compliance checks bound to one artboard format.

    Args:
        format_id: Platform/format id; unknown ids fall back to the default.
        frame: Artboard override (defaults to the format's size).
        background_color: Canvas background (default from settings).
        copy_checks: Include advisory copy and brand rules in scans.
    """

    def __init__(
        self,
        format_id: Optional[str] = None,
        frame: Optional[CanvasFrame] = None,
        background_color: Optional[str] = None,
        copy_checks: bool = False,
    ) -> None:
        self.format_id = format_id or get_settings().default_format
        self.profile = get_safe_zone(self.format_id)
        self.frame = frame or get_format(self.format_id).frame
        self.background_color = background_color or get_settings().background_color
        self.copy_checks = copy_checks

    def scan(self, elements: Sequence) -> ComplianceReport:
        """Scan elements against this format."""
        return scan_compliance(
            elements,
            self.frame,
            self.profile,
            self.background_color,
            format_id=self.format_id,
            copy_checks=self.copy_checks,
        )

    def auto_fix(self, elements: Sequence) -> int:
        """Apply all automatic fixes."""
        return auto_fix_all(elements, self.frame, self.profile, self.background_color)

    def enforce(self, elements: Sequence, center: bool = True) -> int:
        """Enforce typography and safe-zone constraints on every element."""
        return enforce_all_constraints(elements, self.frame, self.profile, center=center)
