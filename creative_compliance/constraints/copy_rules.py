"""
copy_rules.py — Advisory copy and brand checks.

Regex screening of ad copy, logo placement heuristics and total text
length limits. These checks only report; nothing here edits the canvas.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from creative_compliance.constraints.formats import DEFAULT_FORMAT_ID
from creative_compliance.dsl.schema import CanvasFrame, ComplianceIssue, ElementKind, IssueKind

PROHIBITED_COPY_SEVERITY = 6
LOGO_PLACEMENT_SEVERITY = 3
TEXT_LIMIT_SEVERITY = 3


@dataclass(frozen=True)
class CopyPattern:
    """A restricted copy pattern and why it is restricted."""

    pattern: re.Pattern
    reason: str


PROHIBITED_PATTERNS: List[CopyPattern] = [
    CopyPattern(re.compile(r"\b(\d{1,2}|one|two|three|four|five)\s*%\s*off\b", re.I), "Discount percentage claims require approval"),
    CopyPattern(re.compile(r"\blimited\s*(time\s*)?(offer|deal|sale)\b", re.I), "Limited time claims may be misleading"),
    CopyPattern(re.compile(r"\bfree\s+(gift|shipping|delivery)\b", re.I), "'Free' claims require disclosure"),
    CopyPattern(re.compile(r"\b(best|cheapest|lowest)\s*(price|deal|offer)\b", re.I), "Superlative claims require substantiation"),
    CopyPattern(re.compile(r"\bguarantee[d]?\b", re.I), "Guarantee claims need terms"),
    CopyPattern(re.compile(r"\bsave\s+\$?\d+", re.I), "Savings claims require verification"),
    CopyPattern(re.compile(r"\bact\s+now\b", re.I), "Urgency tactics may be restricted"),
    CopyPattern(re.compile(r"\bwhile\s+(supplies|stocks?)\s+(last|available)\b", re.I), "Scarcity claims need verification"),
    CopyPattern(re.compile(r"\bno\s+(purchase|obligation)\s*(necessary|required)?\b", re.I), "Contest terms need disclosure"),
]


@dataclass(frozen=True)
class LogoRule:
    """Allowed logo corners and area share (of the frame) for a format."""

    zones: tuple
    max_size: float
    min_size: float


LOGO_RULES: Dict[str, LogoRule] = {
    "instagram-feed": LogoRule(zones=("top-right", "bottom-right"), max_size=0.15, min_size=0.05),
    "instagram-story": LogoRule(zones=("top-right",), max_size=0.12, min_size=0.04),
    "facebook-feed": LogoRule(zones=("top-right", "top-left"), max_size=0.18, min_size=0.06),
    "instore-banner": LogoRule(zones=("top-right", "top-left", "bottom-right"), max_size=0.20, min_size=0.08),
    "instore-poster": LogoRule(zones=("top-right", "top-left", "bottom-right"), max_size=0.20, min_size=0.08),
}

INSTAGRAM_CHAR_LIMIT = 125
DEFAULT_CHAR_LIMIT = 280

# Corner bands as a share of the frame
_CORNER_BAND = 0.3
_LOGO_MAX_WIDTH = 0.25


def check_prohibited_copy(elements: Sequence) -> List[ComplianceIssue]:
    """Flag text elements whose copy matches a restricted pattern."""
    issues = []
    for element in elements:
        if not element.is_text:
            continue
        reasons = [p.reason for p in PROHIBITED_PATTERNS if p.pattern.search(element.text_content)]
        if reasons:
            issues.append(
                ComplianceIssue(
                    kind=IssueKind.PROHIBITED_COPY,
                    severity=PROHIBITED_COPY_SEVERITY,
                    target_element_id=element.id,
                    message=f'"{element.text_content[:30]}" - {"; ".join(reasons)}',
                )
            )
    return issues


def _corner_of(box, frame: CanvasFrame) -> Optional[str]:
    low_x, high_x = frame.width * _CORNER_BAND, frame.width * (1 - _CORNER_BAND)
    low_y, high_y = frame.height * _CORNER_BAND, frame.height * (1 - _CORNER_BAND)

    horizontal = "left" if box.left < low_x else "right" if box.left > high_x else None
    vertical = "top" if box.top < low_y else "bottom" if box.top > high_y else None
    if horizontal and vertical:
        return f"{vertical}-{horizontal}"
    return None


def find_logo_candidates(elements: Sequence, frame: CanvasFrame) -> List:
    """Small images sitting in a frame corner are treated as logos."""
    return [
        element
        for element in elements
        if element.kind == ElementKind.IMAGE.value
        and _corner_of(element.bounding_box, frame) is not None
        and element.bounding_box.width < frame.width * _LOGO_MAX_WIDTH
    ]


def check_logo_placement(elements: Sequence, frame: CanvasFrame, format_id: str) -> List[ComplianceIssue]:
    """Check the first logo candidate against the format's logo rule.

    A canvas without a logo candidate yields no issue.
    """
    logos = find_logo_candidates(elements, frame)
    if not logos:
        return []

    rule = LOGO_RULES.get(format_id, LOGO_RULES[DEFAULT_FORMAT_ID])
    logo = logos[0]
    box = logo.bounding_box
    size_ratio = (box.width * box.height) / (frame.width * frame.height)

    problems = []
    if size_ratio > rule.max_size:
        problems.append(f"Logo is too large ({round(size_ratio * 100)}% of canvas, max {round(rule.max_size * 100)}%)")
    elif size_ratio < rule.min_size:
        problems.append(f"Logo may be too small for visibility ({round(size_ratio * 100)}% of canvas)")

    if _corner_of(box, frame) not in rule.zones:
        problems.append(f"Logo position should be: {' or '.join(rule.zones)}")

    if not problems:
        return []
    return [
        ComplianceIssue(
            kind=IssueKind.LOGO_PLACEMENT,
            severity=LOGO_PLACEMENT_SEVERITY,
            target_element_id=logo.id,
            message="; ".join(problems),
        )
    ]


def char_limit_for(format_id: str) -> int:
    """Recommended total character count for a format."""
    return INSTAGRAM_CHAR_LIMIT if "instagram" in format_id else DEFAULT_CHAR_LIMIT


def check_text_limits(elements: Sequence, format_id: str) -> List[ComplianceIssue]:
    """Flag canvases whose total copy exceeds the format's limit.

    The issue targets the longest text element.
    """
    texts = [element for element in elements if element.is_text]
    total = sum(len(t.text_content) for t in texts)
    limit = char_limit_for(format_id)
    if total <= limit:
        return []

    longest = max(texts, key=lambda t: len(t.text_content))
    return [
        ComplianceIssue(
            kind=IssueKind.TEXT_LIMIT,
            severity=TEXT_LIMIT_SEVERITY,
            target_element_id=longest.id,
            message=f"Text exceeds recommended limit ({total}/{limit} chars)",
        )
    ]


def check_copy_rules(elements: Sequence, frame: CanvasFrame, format_id: str) -> List[ComplianceIssue]:
    """Run every advisory copy and brand check."""
    return (
        check_prohibited_copy(elements)
        + check_logo_placement(elements, frame, format_id)
        + check_text_limits(elements, format_id)
    )
