"""
test_contrast.py — Tests for the color and contrast model.

Tests:
- Color parsing and the explicit black fallback
- Luminance and contrast ratio properties
- Size-dependent contrast minimums
- Contrast repair convergence and documented non-convergence
"""

import itertools
import logging

import pytest

from creative_compliance.constraints.contrast import (
    contrast_ratio,
    get_contrast_text_color,
    get_luminance,
    minimum_contrast_for,
    parse_color,
    relative_luminance,
    repair_contrast,
    repair_contrast_detailed,
    rgb_to_hex,
)

SAMPLE_COLORS = ["#000000", "#FFFFFF", "#0078D4", "#ED8924", "#266156", "#777777", "#F4F4F4", "#1A1A2E"]


class TestParseColor:
    """Tests for parse_color."""

    def test_hex(self) -> None:
        """Test six-digit hex."""
        parsed = parse_color("#0078D4")
        assert parsed.valid
        assert parsed.rgb == (0, 120, 212)

    def test_short_hex(self) -> None:
        """Test three-digit hex expands."""
        assert parse_color("#fff").rgb == (255, 255, 255)

    def test_rgb_function(self) -> None:
        """Test rgb() and rgba() notation."""
        assert parse_color("rgb(255, 0, 10)").rgb == (255, 0, 10)
        assert parse_color("rgba(1,2,3,0.5)").rgb == (1, 2, 3)

    @pytest.mark.parametrize("bad", ["red", "", "#12345", "hsl(0, 100%, 50%)"])
    def test_unparseable_defaults_to_black(self, bad: str, caplog) -> None:
        """Test the fallback is black, flagged invalid and logged."""
        with caplog.at_level(logging.WARNING, logger="creative_compliance"):
            parsed = parse_color(bad)
        assert parsed.rgb == (0, 0, 0)
        assert parsed.valid is False
        assert "Unparseable color" in caplog.text

    def test_black_is_distinguishable_from_failure(self) -> None:
        """Test computed black and failed parse differ."""
        assert parse_color("#000000").valid is True
        assert parse_color("black").valid is False

    def test_rgb_to_hex(self) -> None:
        """Test hex formatting is uppercase and zero padded."""
        assert rgb_to_hex(0, 10, 255) == "#000AFF"
        assert parse_color("#abcdef").hex == "#ABCDEF"


class TestContrastRatio:
    """Tests for luminance and contrast ratio."""

    def test_luminance_extremes(self) -> None:
        """Test black and white luminance."""
        assert relative_luminance((0, 0, 0)) == 0.0
        assert relative_luminance((255, 255, 255)) == pytest.approx(1.0)
        assert get_luminance("#FFFFFF") == pytest.approx(1.0)

    def test_black_on_white(self) -> None:
        """Test the maximum ratio."""
        assert contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21.0)

    def test_known_pair(self) -> None:
        """Test a mid-gray against white."""
        assert contrast_ratio("#777777", "#FFFFFF") == pytest.approx(4.48, abs=0.01)

    def test_symmetric(self) -> None:
        """Test contrast_ratio(a, b) == contrast_ratio(b, a)."""
        for a, b in itertools.combinations(SAMPLE_COLORS, 2):
            assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_identity(self) -> None:
        """Test a color against itself is 1:1."""
        for color in SAMPLE_COLORS:
            assert contrast_ratio(color, color) == 1.0

    def test_at_least_one(self) -> None:
        """Test ratios are never below 1."""
        for a, b in itertools.product(SAMPLE_COLORS, repeat=2):
            assert contrast_ratio(a, b) >= 1.0

    def test_rgb_and_hex_agree(self) -> None:
        """Test both notations measure the same."""
        assert contrast_ratio("rgb(0, 120, 212)", "#FFFFFF") == contrast_ratio("#0078D4", "#FFFFFF")

    def test_unparseable_measured_as_black(self) -> None:
        """Test bad colors measure like black."""
        assert contrast_ratio("not-a-color", "#FFFFFF") == contrast_ratio("#000000", "#FFFFFF")


class TestMinimumContrast:
    """Tests for minimum_contrast_for."""

    @pytest.mark.parametrize(
        "font_size, expected",
        [(12, 4.5), (17.9, 4.5), (18, 3.0), (24, 3.0)],
    )
    def test_thresholds(self, font_size: float, expected: float) -> None:
        """Test large text threshold at 18px."""
        assert minimum_contrast_for(font_size) == expected

    def test_contrast_text_color(self) -> None:
        """Test black-or-white pick."""
        assert get_contrast_text_color("#FFFFFF") == "#000000"
        assert get_contrast_text_color("#1A1A2E") == "#FFFFFF"


class TestRepairContrast:
    """Tests for repair_contrast."""

    def test_white_on_white(self) -> None:
        """Test white text on white is darkened until legible."""
        repaired = repair_contrast("#FFFFFF", "#FFFFFF", 4.5)
        assert repaired != "#FFFFFF"
        assert contrast_ratio(repaired, "#FFFFFF") >= 4.5

    def test_already_compliant_is_unchanged(self) -> None:
        """Test no steps are taken when the ratio is already met."""
        result = repair_contrast_detailed("#000000", "#FFFFFF", 4.5)
        assert result.color == "#000000"
        assert result.iterations == 0
        assert result.converged

    def test_lightens_on_dark_background(self) -> None:
        """Test text is lightened on a dark background."""
        result = repair_contrast_detailed("#333333", "#1A1A2E", 4.5)
        assert result.converged
        assert get_luminance(result.color) > get_luminance("#333333")

    def test_darkens_on_light_background(self) -> None:
        """Test text is darkened on a light background."""
        result = repair_contrast_detailed("#BBBBBB", "#F4F4F4", 4.5)
        assert result.converged
        assert get_luminance(result.color) < get_luminance("#BBBBBB")

    def test_converges_for_realistic_pairs(self) -> None:
        """Test convergence over a spread of text colors on light and dark backgrounds."""
        for background in ["#FFFFFF", "#F4F4F4", "#000000", "#1A1A2E"]:
            for text in SAMPLE_COLORS:
                for minimum in (3.0, 4.5):
                    repaired = repair_contrast(text, background, minimum)
                    assert contrast_ratio(repaired, background) >= minimum, (text, background, minimum)

    def test_stops_as_soon_as_ratio_met(self) -> None:
        """Test the search stops at the first compliant step."""
        result = repair_contrast_detailed("#FFFFFF", "#FFFFFF", 4.5)
        previous = [max(0, 255 - 10 * (result.iterations - 1))] * 3
        assert contrast_ratio(rgb_to_hex(*previous), "#FFFFFF") < 4.5

    def test_mid_gray_does_not_converge(self, caplog) -> None:
        """Test the documented non-convergence for gray on mid-gray.

        #777777 is just below 0.5 luminance, so text is lightened, and even
        white only reaches about 4.48:1.
        """
        with caplog.at_level(logging.WARNING, logger="creative_compliance"):
            result = repair_contrast_detailed("#777777", "#777777", 4.5)
        assert result.converged is False
        assert result.color == "#FFFFFF"
        assert result.ratio < 4.5
        assert "stopped at" in caplog.text

    def test_iteration_cap(self) -> None:
        """Test the search never exceeds the iteration cap."""
        result = repair_contrast_detailed("#777777", "#777777", 4.5, max_iterations=3)
        assert result.iterations == 3
        assert result.color == "#959595"

    def test_step_from_settings(self, monkeypatch) -> None:
        """Test the channel step is configurable."""
        monkeypatch.setenv("CREATIVE_CONTRAST_STEP", "20")
        from creative_compliance.config import get_settings

        get_settings.cache_clear()
        result = repair_contrast_detailed("#FFFFFF", "#FFFFFF", 1.5, max_iterations=1)
        assert result.color == "#EBEBEB"
