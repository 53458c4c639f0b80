"""Creative compliance and layout constraint engine."""

from creative_compliance.constraints import (
    ComplianceEngine,
    ComplianceReport,
    auto_fix_all,
    begin_stacking_session,
    get_safe_zone,
    scan_compliance,
    stacking_session,
)
from creative_compliance.pipeline import ImportResult, import_ai_payload, place_ai_elements

__version__ = "0.1.0"

__all__ = [
    "ComplianceEngine",
    "ComplianceReport",
    "ImportResult",
    "auto_fix_all",
    "begin_stacking_session",
    "get_safe_zone",
    "import_ai_payload",
    "place_ai_elements",
    "scan_compliance",
    "stacking_session",
]
