"""
contrast.py — WCAG-style luminance, contrast ratio and contrast repair.

Provides:
- Color parsing for hex and rgb() strings with an explicit validity flag
- Relative luminance and contrast ratio
- Font-size dependent minimum contrast
- Iterative channel-stepping repair of text colors
"""

import logging
import re
from dataclasses import dataclass
from typing import Tuple

from creative_compliance.config import get_settings

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

BLACK: RGB = (0, 0, 0)

# WCAG AA thresholds
LARGE_TEXT_MIN_SIZE = 18
LARGE_TEXT_MIN_CONTRAST = 3.0
NORMAL_TEXT_MIN_CONTRAST = 4.5

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")
_RGB_RE = re.compile(r"^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)")


# =============================================================================
# COLOR PARSING
# =============================================================================

@dataclass(frozen=True)
class ParsedColor:
    """Result of parsing a color string.

    ``valid`` is False when the input could not be parsed; ``rgb`` then
    holds black so that callers who ignore the flag keep the reference
    behaviour.
    """

    rgb: RGB
    valid: bool
    source: str

    @property
    def hex(self) -> str:
        return rgb_to_hex(*self.rgb)


def parse_color(value: str) -> ParsedColor:
    """Parse a ``#RRGGBB``, ``#RGB`` or ``rgb(r, g, b)`` color string."""
    text = (value or "").strip()

    match = _HEX_RE.match(text)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return ParsedColor(
            rgb=tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4)),
            valid=True,
            source=value,
        )

    match = _RGB_RE.match(text.lower())
    if match:
        return ParsedColor(
            rgb=tuple(min(255, int(c)) for c in match.groups()),
            valid=True,
            source=value,
        )

    logger.warning("Unparseable color %r, treating it as black", value)
    return ParsedColor(rgb=BLACK, valid=False, source=value)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB values to hex color string."""
    return f"#{r:02X}{g:02X}{b:02X}"


# =============================================================================
# LUMINANCE & CONTRAST
# =============================================================================

def relative_luminance(rgb: RGB) -> float:
    """Calculate relative luminance of an sRGB color (0-1)."""

    def linearize(c):
        c = c / 255.0
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = rgb
    return 0.2126 * linearize(r) + 0.7152 * linearize(g) + 0.0722 * linearize(b)


def get_luminance(color: str) -> float:
    """Relative luminance of a color string."""
    return relative_luminance(parse_color(color).rgb)


def _ratio(l1: float, l2: float) -> float:
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def contrast_ratio(color_a: str, color_b: str) -> float:
    """
    Contrast ratio between two colors, from 1.0 (identical) to 21.0.

    Unparseable colors are measured as black.
    """
    return _ratio(get_luminance(color_a), get_luminance(color_b))


def minimum_contrast_for(font_size: float) -> float:
    """Minimum ratio for a font size: large text needs 3:1, normal text 4.5:1."""
    if font_size >= LARGE_TEXT_MIN_SIZE:
        return LARGE_TEXT_MIN_CONTRAST
    return NORMAL_TEXT_MIN_CONTRAST


def get_contrast_text_color(background: str) -> str:
    """Return black or white text color based on background luminance."""
    return "#FFFFFF" if get_luminance(background) < 0.5 else "#000000"


# =============================================================================
# CONTRAST REPAIR
# =============================================================================

@dataclass(frozen=True)
class ContrastRepair:
    """Outcome of a contrast repair search."""

    color: str
    ratio: float
    iterations: int
    converged: bool


def repair_contrast_detailed(
    text_color: str,
    background_color: str,
    min_ratio: float,
    step: int | None = None,
    max_iterations: int | None = None,
) -> ContrastRepair:
    """
    Step the text color away from the background until it is legible.

    All three channels move by ``step`` per iteration: darker on a light
    background (luminance > 0.5), lighter otherwise. The search stops as
    soon as ``min_ratio`` is met or after ``max_iterations``; in the latter
    case the last color reached is returned with ``converged=False``.

    Args:
        text_color: Current text color
        background_color: Canvas background color
        min_ratio: Contrast ratio to reach
        step: Channel step per iteration (default from settings)
        max_iterations: Iteration cap (default from settings)

    Returns:
        ContrastRepair with the resulting color and ratio
    """
    settings = get_settings()
    step = settings.contrast_step if step is None else step
    max_iterations = settings.contrast_max_iterations if max_iterations is None else max_iterations

    bg_luminance = relative_luminance(parse_color(background_color).rgb)
    direction = -step if bg_luminance > 0.5 else step

    r, g, b = parse_color(text_color).rgb
    ratio = _ratio(relative_luminance((r, g, b)), bg_luminance)
    iterations = 0

    while ratio < min_ratio and iterations < max_iterations:
        r, g, b = (max(0, min(255, c + direction)) for c in (r, g, b))
        ratio = _ratio(relative_luminance((r, g, b)), bg_luminance)
        iterations += 1

    converged = ratio >= min_ratio
    if not converged:
        logger.warning(
            "Contrast repair for %s on %s stopped at %.2f:1 (needed %.2f:1)",
            text_color, background_color, ratio, min_ratio,
        )

    return ContrastRepair(
        color=rgb_to_hex(r, g, b),
        ratio=ratio,
        iterations=iterations,
        converged=converged,
    )


def repair_contrast(text_color: str, background_color: str, min_ratio: float) -> str:
    """Return a text color meeting ``min_ratio`` against the background, best effort."""
    return repair_contrast_detailed(text_color, background_color, min_ratio).color
