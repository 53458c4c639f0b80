"""Constraint engine module - safe zones, typography, contrast and layout."""

from creative_compliance.constraints.contrast import (
    ContrastRepair,
    ParsedColor,
    contrast_ratio,
    get_contrast_text_color,
    minimum_contrast_for,
    parse_color,
    relative_luminance,
    repair_contrast,
    repair_contrast_detailed,
)
from creative_compliance.constraints.copy_rules import (
    check_copy_rules,
    check_logo_placement,
    check_prohibited_copy,
    check_text_limits,
)
from creative_compliance.constraints.engine import (
    ComplianceEngine,
    ComplianceReport,
    auto_fix_all,
    calculate_score,
    enforce_all_constraints,
    scan_compliance,
)
from creative_compliance.constraints.formats import (
    CREATIVE_FORMATS,
    DEFAULT_FORMAT_ID,
    SAFE_ZONES,
    get_format,
    get_frame,
    get_safe_zone,
    list_formats,
)
from creative_compliance.constraints.geometry import (
    OverflowDelta,
    is_full_bleed,
    is_safe_zone_exempt,
    is_within_safe_zone,
    overflow_delta,
)
from creative_compliance.constraints.safe_zone import (
    center_horizontally,
    center_on_canvas,
    correct_overflow,
    make_all_draggable,
    make_draggable,
    position_text_centered,
)
from creative_compliance.constraints.stacking import (
    Placement,
    SessionState,
    StackingSession,
    StackingSessionError,
    begin_stacking_session,
    place_next,
    stacking_session,
)
from creative_compliance.constraints.typography import (
    MAX_FONT_SIZE,
    TYPOGRAPHY_SCALE,
    clamp_all_font_sizes,
    clamp_font_size,
    get_font_size_for_role,
)

__all__ = [
    # Engine
    "ComplianceEngine",
    "ComplianceReport",
    "auto_fix_all",
    "calculate_score",
    "enforce_all_constraints",
    "scan_compliance",
    # Formats
    "CREATIVE_FORMATS",
    "DEFAULT_FORMAT_ID",
    "SAFE_ZONES",
    "get_format",
    "get_frame",
    "get_safe_zone",
    "list_formats",
    # Copy rules
    "check_copy_rules",
    "check_logo_placement",
    "check_prohibited_copy",
    "check_text_limits",
    # Geometry
    "OverflowDelta",
    "is_full_bleed",
    "is_safe_zone_exempt",
    "is_within_safe_zone",
    "overflow_delta",
    # Contrast
    "ContrastRepair",
    "ParsedColor",
    "contrast_ratio",
    "get_contrast_text_color",
    "minimum_contrast_for",
    "parse_color",
    "relative_luminance",
    "repair_contrast",
    "repair_contrast_detailed",
    # Typography
    "MAX_FONT_SIZE",
    "TYPOGRAPHY_SCALE",
    "clamp_all_font_sizes",
    "clamp_font_size",
    "get_font_size_for_role",
    # Safe zones
    "center_horizontally",
    "center_on_canvas",
    "correct_overflow",
    "make_all_draggable",
    "make_draggable",
    "position_text_centered",
    # Stacking
    "Placement",
    "SessionState",
    "StackingSession",
    "StackingSessionError",
    "begin_stacking_session",
    "place_next",
    "stacking_session",
]
