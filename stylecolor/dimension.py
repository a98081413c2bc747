#
# Copyright (C) 2026 Stylecolor Developers — LGPL-3.0-or-later
#
"""
Scalar values for style expressions.
"""

from stylecolor.color import Color, Hsl
from stylecolor.util import clamp, format_number


class Dimension(object):
    """
    A number with an optional unit, such as 10, 2px or 50%
    """
    __slots__ = ('value', 'unit')

    kind = 'float'


    def __init__(self, value, unit: str=None):
        self.value = float(value)
        self.unit = unit


    def evaluate(self, env=None) -> 'Dimension':
        return self


    def to_color(self) -> Color:
        """
        Convert this number to a gray with every RGB channel
        set to the value (0-255).

        :return: The gray color
        """
        return Color(Hsl(0.0, 0.0, clamp(self.value, 0.0, 255.0) / 255.0))


    def to_string(self) -> str:
        return format_number(self.value) + (self.unit or '')


    def __eq__(self, other):
        if not isinstance(other, Dimension):
            return NotImplemented
        return self.value == other.value and self.unit == other.unit


    def __hash__(self):
        return hash((self.value, self.unit))


    def __str__(self):
        return self.to_string()


    def __repr__(self):
        return 'Dimension(%s, %r)' % (format_number(self.value), self.unit)
