#
# Copyright (C) 2026 Stylecolor Developers — LGPL-3.0-or-later
#

"""Unit tests for stylecolor.colorlib conversions."""

from __future__ import annotations

import pytest

from stylecolor.colorlib import (
    Color,
    hsl_to_hex,
    hsl_to_rgb,
    husl_to_hex,
    husl_to_rgb,
    parse_rgb,
    rgb_to_hsl,
    rgb_to_husl,
)

# ─────────────────────────────────────────────────────────────────────────────
# Standard conversions
# ─────────────────────────────────────────────────────────────────────────────


class TestStandard:
    """Tests for the ColorAide backed HSL conversions."""

    @pytest.mark.parametrize(
        "hsl,expected",
        [
            ((0, 1, 0.5), (255, 0, 0)),
            ((120, 1, 0.5), (0, 255, 0)),
            ((240, 1, 0.5), (0, 0, 255)),
            ((0, 0, 1), (255, 255, 255)),
            ((0, 0, 0), (0, 0, 0)),
        ],
    )
    def test_hsl_to_rgb(self, hsl, expected):
        assert hsl_to_rgb(*hsl) == pytest.approx(expected, abs=1e-6)

    @pytest.mark.parametrize(
        "hsl,expected",
        [
            ((0, 1, 0.5), "#ff0000"),
            ((60, 1, 0.5), "#ffff00"),
            ((180, 1, 0.5), "#00ffff"),
            ((0, 0, 0), "#000000"),
        ],
    )
    def test_hsl_to_hex(self, hsl, expected):
        assert hsl_to_hex(*hsl) == expected

    def test_rgb_to_hsl(self):
        assert rgb_to_hsl(255, 0, 0) == pytest.approx((0, 1, 0.5), abs=1e-9)
        assert rgb_to_hsl(0, 0, 255) == pytest.approx((240, 1, 0.5), abs=1e-9)

    def test_rgb_to_hsl_achromatic_hue(self):
        """Grays have no hue, reported as zero."""
        h, s, l = rgb_to_hsl(128, 128, 128)
        assert h == 0
        assert s == pytest.approx(0, abs=1e-9)
        assert l == pytest.approx(128 / 255, abs=1e-9)

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("#3366ff", (51, 102, 255)),
            ("#000000", (0, 0, 0)),
            ("rgba(51, 102, 255, 0.5)", (51, 102, 255)),
            ("rgb(10, 20, 30)", (10, 20, 30)),
        ],
    )
    def test_parse_rgb(self, text, expected):
        assert parse_rgb(text) == expected

    def test_parse_rgb_returns_ints(self):
        assert all(isinstance(c, int) for c in parse_rgb("#3366ff"))

    def test_color_factories(self):
        color = Color.NewFromRgb(255, 0, 0)
        assert color.html == "#ff0000"
        assert Color.NewFromHsl(0, 1, 0.5).rgb == pytest.approx((255, 0, 0), abs=1e-6)


# ─────────────────────────────────────────────────────────────────────────────
# Perceptual conversions
# ─────────────────────────────────────────────────────────────────────────────


class TestPerceptual:
    """Tests for the hsluv backed HUSL conversions."""

    def test_rgb_to_husl_red(self):
        assert rgb_to_husl(1, 0, 0) == pytest.approx((12.17705, 100, 53.23712), abs=1e-3)

    def test_husl_to_rgb_scale(self):
        """RGB output is on the 0-255 scale."""
        assert husl_to_rgb(0, 0, 100) == pytest.approx((255, 255, 255), abs=1e-3)
        assert husl_to_rgb(0, 0, 0) == pytest.approx((0, 0, 0), abs=1e-3)

    def test_round_trip(self):
        h, s, l = rgb_to_husl(0.2, 0.4, 1.0)
        assert husl_to_rgb(h, s, l) == pytest.approx((51, 102, 255), abs=1e-6)

    @pytest.mark.parametrize(
        "husl,expected",
        [
            ((0, 0, 0), "#000000"),
            ((0, 0, 100), "#ffffff"),
            ((12.17705063, 100, 53.23711560), "#ff0000"),
        ],
    )
    def test_husl_to_hex(self, husl, expected):
        assert husl_to_hex(*husl) == expected
