"""Pytest configuration and fixtures."""

import pytest

from creative_compliance.config import get_settings
from creative_compliance.dsl.schema import (
    BoundingBox,
    CanvasFrame,
    ImageElement,
    SafeZoneProfile,
    ShapeElement,
    TextElement,
)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def square_frame() -> CanvasFrame:
    """A 1080x1080 Instagram feed artboard."""
    return CanvasFrame(width=1080, height=1080)


@pytest.fixture
def uniform_profile() -> SafeZoneProfile:
    """40px margins on every edge."""
    return SafeZoneProfile(format_id="instagram-feed", top=40, bottom=40, left=40, right=40)


@pytest.fixture
def headline() -> TextElement:
    """Legible headline inside the safe zone."""
    return TextElement(
        id="headline",
        bounding_box=BoundingBox(left=240, top=200, width=600, height=60),
        font_size=18,
        font_family="Inter",
        fill_color="#111111",
        text_content="Fresh summer range",
    )


@pytest.fixture
def product_shot() -> ImageElement:
    """Packshot inside the safe zone."""
    return ImageElement(
        id="packshot",
        bounding_box=BoundingBox(left=340, top=400, width=400, height=400),
        src="packshot.png",
    )


@pytest.fixture
def compliant_canvas(headline: TextElement, product_shot: ImageElement) -> list:
    """Canvas with no violations on a white background."""
    badge = ShapeElement(
        id="badge",
        bounding_box=BoundingBox(left=100, top=900, width=120, height=60),
        fill_color="#22C55E",
    )
    return [headline, product_shot, badge]


@pytest.fixture
def make_text():
    """Factory for text elements with a 400px wide box."""

    def _make(element_id: str, height: float = 60, font_size: float = 16, **kwargs) -> TextElement:
        box = kwargs.pop("bounding_box", None) or BoundingBox(left=0, top=0, width=400, height=height)
        return TextElement(id=element_id, bounding_box=box, font_size=font_size, **kwargs)

    return _make


@pytest.fixture
def story_frame() -> CanvasFrame:
    """A 1080x1920 Instagram story artboard."""
    return CanvasFrame(width=1080, height=1920)


@pytest.fixture
def story_profile() -> SafeZoneProfile:
    """Instagram story margins; the safe area is 40..1040 x 120..1740."""
    return SafeZoneProfile(format_id="instagram-story", top=120, bottom=180, left=40, right=40)


@pytest.fixture
def fractional_overflow_boxes() -> dict:
    """Boxes with fractional geometry crossing each safe-zone edge of the story profile."""
    return {
        "left": BoundingBox(left=12.345678901, top=500.1, width=333.333333333, height=77.7777777),
        "top": BoundingBox(left=300.3, top=100.98765432, width=111.11111, height=222.22222),
        "right": BoundingBox(left=900.123456789, top=600.5, width=172.7693152606491, height=50.05),
        "bottom": BoundingBox(
            left=222.76567157160707,
            top=1627.9895874281747,
            width=172.7693152606491,
            height=511.19215581798403,
        ),
    }
