"""Unit tests for text measurement and alignment."""

from unittest.mock import MagicMock

import pytest

from glyphpath.core import measure, resolve_origin
from glyphpath.domain import PLACEHOLDER_METRICS, Glyph, TextAlign, TextBaseline, TextMetrics
from glyphpath.exceptions import FontParseError
from glyphpath.fonts import FontResource


def _fake_resource(advances: list[int], upm: int = 2048, ascender: int = 1900, descender: int = -500):
    """A LOADED-looking resource whose font is a stand-in for ParsedFont."""
    font = MagicMock()
    font.units_per_em = upm
    font.ascender = ascender
    font.descender = descender
    font.string_to_glyphs.return_value = [
        Glyph(name=f"g{i}", unicode=None, advance_width=adv) for i, adv in enumerate(advances)
    ]
    resource = MagicMock(spec=FontResource)
    resource.family = "Fake"
    resource.font = font
    return resource


class TestMeasure:
    """Tests for measure()."""

    def test_sums_advances_and_scales(self):
        resource = _fake_resource([1024, 512], upm=2048, ascender=1536, descender=-512)
        metrics = measure(resource, "xy", 16)

        assert metrics.width == pytest.approx((1024 + 512) / 2048 * 16)
        assert metrics.em_height_ascent == pytest.approx(12.0)
        assert metrics.em_height_descent == pytest.approx(-4.0)
        resource.font.string_to_glyphs.assert_called_once_with("xy")

    def test_no_resource_gives_placeholder(self):
        assert measure(None, "Hello", 16) == PLACEHOLDER_METRICS

    def test_unloaded_resource_gives_placeholder(self, ttf_bytes):
        resource = FontResource(ttf_bytes, "Later")
        assert measure(resource, "AB", 16) == TextMetrics(10, 8, 2)

    def test_failed_resource_gives_placeholder(self):
        resource = FontResource(b"junk", "Broken")
        with pytest.raises(FontParseError):
            resource.load_sync()
        assert measure(resource, "AB", 16) == PLACEHOLDER_METRICS

    def test_two_glyphs_from_font_tables(self, registry):
        """Width of 'AB' is (advance(A) + advance(B)) / upm * size."""
        metrics = measure(registry.resolve("Test Sans"), "AB", 16)
        assert metrics.width == pytest.approx((600 + 650) / 1000 * 16)
        assert metrics.em_height_ascent == pytest.approx(800 / 1000 * 16)
        assert metrics.em_height_descent == pytest.approx(-200 / 1000 * 16)

    def test_empty_text(self, registry):
        resource = registry.resolve("Test Sans")
        small = measure(resource, "", 10)
        large = measure(resource, "", 30)

        assert small.width == 0
        assert large.width == 0
        assert large.em_height_ascent == pytest.approx(3 * small.em_height_ascent)
        assert large.em_height_descent == pytest.approx(3 * small.em_height_descent)

    @pytest.mark.parametrize("text", ["A", "AB O", "OOOO", "Z?"])
    @pytest.mark.parametrize("size", [1, 12.5, 72])
    def test_linear_in_size(self, registry, text, size):
        resource = registry.resolve("Test Sans")
        assert measure(resource, text, 2 * size).width == pytest.approx(
            2 * measure(resource, text, size).width
        )

    def test_ascent_descent_ignore_text(self, registry):
        resource = registry.resolve("Test Sans")
        a = measure(resource, "A", 20)
        b = measure(resource, "OOO", 20)
        assert a.em_height_ascent == b.em_height_ascent
        assert a.em_height_descent == b.em_height_descent


class TestResolveOrigin:
    """Tests for resolve_origin()."""

    METRICS = TextMetrics(width=40.0, em_height_ascent=12.0, em_height_descent=-4.0)

    @pytest.mark.parametrize("align", [TextAlign.START, TextAlign.LEFT, "start", "left"])
    def test_start_left_unchanged(self, align):
        assert resolve_origin(100, 50, self.METRICS, align) == (100, 50)

    @pytest.mark.parametrize("align", [TextAlign.END, TextAlign.RIGHT, "right"])
    def test_end_right(self, align):
        x, _ = resolve_origin(100, 50, self.METRICS, align)
        assert x == 100 - 40.0

    def test_center(self):
        x, _ = resolve_origin(100, 50, self.METRICS, TextAlign.CENTER)
        assert x == 100 - 40.0 / 2

    def test_alphabetic_default(self):
        assert resolve_origin(0, 50, self.METRICS) == (0, 50)

    def test_top(self):
        _, y = resolve_origin(0, 50, self.METRICS, v_align=TextBaseline.TOP)
        assert y == 62.0

    def test_middle(self):
        _, y = resolve_origin(0, 50, self.METRICS, v_align="middle")
        assert y == 50 + (12.0 - 4.0) / 2

    def test_bottom(self):
        _, y = resolve_origin(0, 50, self.METRICS, v_align=TextBaseline.BOTTOM)
        assert y == 46.0

    def test_combined(self):
        assert resolve_origin(10, 10, self.METRICS, "center", "top") == (-10.0, 22.0)

    def test_unknown_modes_leave_anchor_unchanged(self):
        assert resolve_origin(7, 9, self.METRICS, "justify") == (7, 9)
        assert resolve_origin(7, 9, self.METRICS, v_align="hanging") == (7, 9)
        assert resolve_origin(7, 9, self.METRICS, "justify", "hanging") == (7, 9)

    def test_unknown_mode_only_affects_its_axis(self):
        assert resolve_origin(100, 50, self.METRICS, "center", "hanging") == (80.0, 50)
        assert resolve_origin(100, 50, self.METRICS, "justify", "top") == (100, 62.0)
