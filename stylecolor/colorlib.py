#
# Copyright (C) 2026 Stylecolor Developers — LGPL-3.0-or-later
#
"""
Color space conversions used by stylecolor.Color.

Standard HSL, RGB and hex conversions are delegated to ColorAide,
perceptual (HUSL) conversions to the reference hsluv implementation.
RGB channels crossing this module are on the 0-255 scale unless noted.
"""

import math

from coloraide import Color as _BaseColor
from hsluv import hsluv_to_hex, hsluv_to_rgb, rgb_to_hsluv

from stylecolor.util import round_half_up


class Color(_BaseColor):
    """ColorAide color with HSL and 8-bit RGB helpers."""

    @classmethod
    def NewFromHsl(cls, h: float, s: float, l: float) -> "Color":
        """Create color from HSL (h: 0-360, s/l: 0-1)."""
        return cls("hsl", [h, s, l])

    @classmethod
    def NewFromRgb(cls, r: float, g: float, b: float) -> "Color":
        """Create color from RGB floats (0-255 range)."""
        return cls("srgb", [r / 255.0, g / 255.0, b / 255.0])

    @property
    def rgb(self) -> tuple:
        """Get RGB as float tuple (0-255)."""
        srgb = self.convert("srgb")
        return (srgb["red"] * 255.0, srgb["green"] * 255.0, srgb["blue"] * 255.0)

    @property
    def hsl(self) -> tuple:
        """Get HSL tuple (h: 0-360, s/l: 0-1)."""
        hsl = self.convert("hsl")
        h = hsl["hue"]
        if math.isnan(h):
            h = 0.0
        return (h, hsl["saturation"], hsl["lightness"])

    @property
    def html(self) -> str:
        """Get HTML hex color string."""
        return self.convert("srgb").to_string(hex=True)


def hsl_to_rgb(h: float, s: float, l: float) -> tuple:
    return Color.NewFromHsl(h, s, l).rgb


def hsl_to_hex(h: float, s: float, l: float) -> str:
    return Color.NewFromHsl(h, s, l).html


def rgb_to_hsl(r: float, g: float, b: float) -> tuple:
    """
    Convert 0-255 RGB channels to HSL. Achromatic colors
    have no hue, which is reported as zero.
    """
    return Color.NewFromRgb(r, g, b).hsl


def parse_rgb(text: str) -> tuple:
    """
    Parse a hex or rgb()/rgba() string into integer RGB channels.

    :param text: The color string
    :return: Tuple of RGB ints (0-255)
    """
    return tuple(round_half_up(c) for c in Color(text).rgb)


def husl_to_rgb(h: float, s: float, l: float) -> tuple:
    """
    Convert HUSL to RGB

    :param h: hue (0-360)
    :param s: saturation (0-100)
    :param l: lightness (0-100)
    :return: Tuple of RGB floats (0-255)
    """
    return tuple(c * 255.0 for c in hsluv_to_rgb([h, s, l]))


def husl_to_hex(h: float, s: float, l: float) -> str:
    return hsluv_to_hex([h, s, l])


def rgb_to_husl(r: float, g: float, b: float) -> tuple:
    """
    Convert RGB to HUSL

    :param r: red (0-1)
    :param g: green (0-1)
    :param b: blue (0-1)
    :return: Tuple of (hue 0-360, saturation 0-100, lightness 0-100)
    """
    return tuple(rgb_to_hsluv([r, g, b]))
