"""
formats.py — Artboard formats and platform safe-zone profiles.

Static lookup tables keyed by format id. Unknown ids resolve to the default
format, and the fallback is logged and flagged on the returned profile.
"""

import logging
from typing import Dict, List

from creative_compliance.config import get_settings
from creative_compliance.dsl.schema import CanvasFrame, CreativeFormat, SafeZoneProfile

logger = logging.getLogger(__name__)

DEFAULT_FORMAT_ID = "instagram-feed"


# =============================================================================
# FORMAT TABLE
# =============================================================================

CREATIVE_FORMATS: Dict[str, CreativeFormat] = {
    f.id: f
    for f in [
        CreativeFormat(id="instagram-feed", name="Instagram Feed", width=1080, height=1080, platform="Instagram"),
        CreativeFormat(id="instagram-story", name="Instagram Story", width=1080, height=1920, platform="Instagram"),
        CreativeFormat(id="facebook-feed", name="Facebook Feed", width=1200, height=628, platform="Facebook"),
        CreativeFormat(id="facebook-cover", name="Facebook Cover", width=1640, height=624, platform="Facebook"),
        CreativeFormat(id="linkedin-feed", name="LinkedIn Feed", width=1200, height=627, platform="LinkedIn"),
        CreativeFormat(id="instore-banner", name="In-Store Banner", width=1920, height=1080, platform="Retail"),
        CreativeFormat(id="instore-poster", name="In-Store Poster", width=1080, height=1920, platform="Retail"),
    ]
}


# Margins in pixels: (top, bottom, left, right)
_SAFE_ZONE_MARGINS: Dict[str, tuple] = {
    "instagram-feed": (40, 40, 40, 40),
    "instagram-story": (120, 180, 40, 40),
    "facebook-feed": (30, 30, 30, 30),
    "facebook-cover": (20, 20, 20, 20),
    "linkedin-feed": (30, 30, 30, 30),
    "instore-banner": (50, 50, 80, 80),
    "instore-poster": (60, 60, 60, 60),
}

SAFE_ZONES: Dict[str, SafeZoneProfile] = {
    format_id: SafeZoneProfile(format_id=format_id, top=top, bottom=bottom, left=left, right=right)
    for format_id, (top, bottom, left, right) in _SAFE_ZONE_MARGINS.items()
}


# =============================================================================
# LOOKUP
# =============================================================================

def _default_format_id() -> str:
    configured = get_settings().default_format
    if configured in SAFE_ZONES:
        return configured
    logger.warning("Configured default format %r is unknown, using %r", configured, DEFAULT_FORMAT_ID)
    return DEFAULT_FORMAT_ID


def get_safe_zone(format_id: str) -> SafeZoneProfile:
    """
    Look up the safe-zone profile for a format.

    Args:
        format_id: Platform/format id such as "instagram-story"

    Returns:
        The matching profile, or the default format's profile with
        ``is_fallback=True`` when the id is unknown.
    """
    profile = SAFE_ZONES.get(format_id)
    if profile is not None:
        return profile

    default_id = _default_format_id()
    logger.warning("Unknown format id %r, falling back to %r safe zones", format_id, default_id)
    return SAFE_ZONES[default_id].model_copy(update={"is_fallback": True})


def get_format(format_id: str) -> CreativeFormat:
    """Look up an artboard format, falling back to the default format."""
    fmt = CREATIVE_FORMATS.get(format_id)
    if fmt is not None:
        return fmt

    default_id = _default_format_id()
    logger.warning("Unknown format id %r, falling back to %r artboard", format_id, default_id)
    return CREATIVE_FORMATS[default_id]


def get_frame(format_id: str) -> CanvasFrame:
    """Canvas frame for a format id."""
    return get_format(format_id).frame


def list_formats() -> List[str]:
    """Return all known format ids."""
    return list(CREATIVE_FORMATS.keys())
