"""Typography constraints: the absolute font-size ceiling and role scale."""

import logging
from typing import Iterable

from creative_compliance.dsl.schema import BoundingBox

logger = logging.getLogger(__name__)

# Hard limit for every text element the engine touches
MAX_FONT_SIZE = 18

# Sizes by text role, all at or below MAX_FONT_SIZE
TYPOGRAPHY_SCALE = {
    "headline": 18,
    "subheadline": 16,
    "body": 14,
    "caption": 12,
}


def get_font_size_for_role(role: str) -> int:
    """Font size for a text role; unknown roles get the body size."""
    size = TYPOGRAPHY_SCALE.get(role)
    if size is None:
        logger.warning("Unknown text role %r, using body size", role)
        return TYPOGRAPHY_SCALE["body"]
    return size


def clamp_font_size(element, max_size: float = MAX_FONT_SIZE) -> bool:
    """Enforce the font-size ceiling on a text element.

    The bounding box is scaled by the same factor about its top-left
    corner, since rendered text shrinks with its size.

    Args:
        element: Any canvas element; non-text elements are left untouched.
        max_size: Ceiling in pixels.

    Returns:
        True if the font size was clamped.
    """
    if not element.is_text or element.font_size <= max_size:
        return False

    factor = max_size / element.font_size
    box = element.bounding_box
    logger.debug("Clamping %s font size %s -> %s", element.id, element.font_size, max_size)

    element.font_size = max_size
    element.bounding_box = BoundingBox(
        left=box.left,
        top=box.top,
        width=box.width * factor,
        height=box.height * factor,
    )
    return True


def clamp_all_font_sizes(elements: Iterable, max_size: float = MAX_FONT_SIZE) -> int:
    """Clamp every text element on a canvas; returns how many changed."""
    clamped = sum(1 for element in elements if clamp_font_size(element, max_size))
    if clamped:
        logger.info("Clamped font size on %d text element(s)", clamped)
    return clamped
