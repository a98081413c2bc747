#
# Copyright (C) 2026 Stylecolor Developers — LGPL-3.0-or-later
#

# pylint: disable=invalid-name
"""
Color values for style expressions.

A Color holds a hue/saturation/lightness triple plus alpha, either in
standard HSL or in the perceptually uniform HUSL space. Arithmetic
between colors happens per RGB channel so channels never spill onto
each other.
"""

from numbers import Real
from typing import NamedTuple, Optional, Protocol, Union, runtime_checkable

from frozendict import frozendict

from stylecolor import colorlib
from stylecolor.config import DEFAULTS
from stylecolor.log import Log, LOG_TRACE
from stylecolor.operate import operate
from stylecolor.util import clamp, format_number, round_decimal, round_half_up


_LOG = Log.get('stylecolor.color')


class Hsl(NamedTuple):
    """
    Standard HSL components (h: 0-360, s/l: 0-1)
    """
    h: float
    s: float
    l: float


class Husl(NamedTuple):
    """
    Perceptual HUSL components (h: 0-360, s/l: 0-1)

    Saturation and lightness are fractions of the native 0-100 scale.
    """
    h: float
    s: float
    l: float


Components = Union[Hsl, Husl]


class ColorError(Exception):
    """
    Base class for errors raised by color operations
    """


class ColorlessOperationError(ColorError, ValueError):
    """
    Raised when operating on a color with no components
    """


class NotColorCoercibleError(ColorError, TypeError):
    """
    Raised when a value cannot be converted to a color
    """


@runtime_checkable
class ColorLike(Protocol):
    """
    Any value which may take part in color arithmetic
    """
    def to_color(self) -> 'Color':
        ...


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class Color(object):
    """
    A single color value

    Instances are immutable, every conversion or operation returns
    a new Color.
    """
    __slots__ = ('_components', '_alpha')

    kind = 'color'


    def __init__(self, components=None, alpha=None, perceptual=None):
        """
        Create a color. Out of range components are clamped, invalid
        arguments silently fall back to their defaults.

        :param components: Sequence of at least three numbers (h, s, l)
        :param alpha: Opacity, 1.0 if not a number
        :param perceptual: True if the components are HUSL
        """
        if not isinstance(perceptual, bool):
            perceptual = isinstance(components, Husl)

        value = None
        if isinstance(components, (list, tuple)) and len(components) >= 3 \
                and all(_is_number(c) for c in components[:3]):
            h, s, l = components[:3]
            space = Husl if perceptual else Hsl
            value = space(float(clamp(h, 0, 360)), float(clamp(s, 0, 1)),
                          float(clamp(l, 0, 1)))

        object.__setattr__(self, '_components', value)
        object.__setattr__(self, '_alpha', float(alpha) if _is_number(alpha) else 1.0)


    def __setattr__(self, name, value):
        raise AttributeError("Color is immutable; cannot assign to %s" % name)


    @property
    def components(self) -> Optional[Components]:
        """
        The Hsl or Husl components, or None for no color
        """
        return self._components


    @property
    def alpha(self) -> float:
        return self._alpha


    @property
    def perceptual(self) -> bool:
        return isinstance(self._components, Husl)


    def evaluate(self, env=None) -> 'Color':
        """
        Colors are terminal values and evaluate to themselves
        """
        return self


    def to_color(self) -> 'Color':
        return self


    def is_perceptual(self) -> bool:
        return self.perceptual


    def _rgb(self) -> tuple:
        h, s, l = self._components
        if self.perceptual:
            return colorlib.husl_to_rgb(h, s * 100, l * 100)
        return colorlib.hsl_to_rgb(h, s, l)


    def to_string(self, settings=None) -> str:
        """
        Render the color for style sheet output

        Translucent colors are written as rgba(), opaque ones as hex.

        :param settings: Settings supplying the alpha precision
        :return: The color as text, empty if there is no color
        """
        if self._components is None:
            return ''

        if self._alpha < 1.0:
            if settings is None:
                settings = DEFAULTS
            precision = settings.get('alpha_precision', DEFAULTS.alpha_precision)

            fields = ['%d' % round_half_up(c) for c in self._rgb()]
            fields.append(format_number(round_decimal(self._alpha, precision)))
            return 'rgba(%s)' % ', '.join(fields)

        h, s, l = self._components
        if self.perceptual:
            return colorlib.husl_to_hex(h, s * 100, l * 100)
        return colorlib.hsl_to_hex(h, s, l)


    def to_perceptual(self) -> 'Color':
        """
        Convert this color to the HUSL space

        There is no direct mapping between HSL and HUSL, RGB is
        the intermediate space.

        :return: The perceptual color
        """
        if self.perceptual or self._components is None:
            return self

        r, g, b = colorlib.hsl_to_rgb(*self._components)
        h, s, l = colorlib.rgb_to_husl(r / 255.0, g / 255.0, b / 255.0)

        _LOG.log(LOG_TRACE, 'to_perceptual: %s -> %s', self._components, (h, s, l))
        return Color(Husl(h, s / 100.0, l / 100.0), self._alpha, True)


    def to_standard(self) -> 'Color':
        """
        Convert this color to the standard HSL space, through RGB

        :return: The standard color
        """
        if not self.perceptual:
            return self

        h, s, l = self._components
        rgb = colorlib.husl_to_rgb(h, s * 100, l * 100)
        hsl = colorlib.rgb_to_hsl(*rgb)

        _LOG.log(LOG_TRACE, 'to_standard: %s -> %s', self._components, hsl)
        return Color(Hsl(*hsl), self._alpha, False)


    def operate(self, op: str, other) -> 'Color':
        """
        Combine this color with another value, channel by channel

        Both operands are rendered and parsed back to RGB, the operator
        is applied to each normalized channel on its own. The result
        keeps the alpha and color space of this color.

        :param op: Arithmetic operator, one of + - * / %
        :param other: A Color or any value providing to_color()
        :return: The resulting color
        """
        if not isinstance(other, Color):
            if not isinstance(other, ColorLike):
                raise NotColorCoercibleError('Value is not color-coercible: %r' % (other,))
            other = other.to_color()

        if self._components is None or other.components is None:
            raise ColorlessOperationError('Cannot operate on a color with no components')

        rgb1 = [c / 255.0 for c in colorlib.parse_rgb(self.to_string())]
        rgb2 = [c / 255.0 for c in colorlib.parse_rgb(other.to_string())]

        result = [operate(op, rgb1[c], rgb2[c]) for c in range(3)]

        if self.perceptual:
            h, s, l = colorlib.rgb_to_husl(*result)
            components = Husl(h, s / 100.0, l / 100.0)
        else:
            components = Hsl(*colorlib.rgb_to_hsl(*[c * 255.0 for c in result]))

        _LOG.debug('operate: %s %s %s -> %s', rgb1, op, rgb2, result)
        return Color(components, self._alpha, self.perceptual)


    def get_components(self) -> Optional[frozendict]:
        """
        Get the components of this color as a mapping

        :return: Mapping of h, s, l, a and perceptual, None if there is no color
        """
        if self._components is None:
            return None

        h, s, l = self._components
        return frozendict(h=h or 0, s=s, l=l, a=self._alpha, perceptual=self.perceptual)


    def __add__(self, other):
        return self.operate('+', other)

    def __sub__(self, other):
        return self.operate('-', other)

    def __mul__(self, other):
        return self.operate('*', other)

    def __truediv__(self, other):
        return self.operate('/', other)

    def __mod__(self, other):
        return self.operate('%', other)


    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return type(self._components) is type(other.components) \
                and self._components == other.components \
                and self._alpha == other.alpha


    def __hash__(self):
        return hash((type(self._components), self._components, self._alpha))


    def __str__(self):
        return self.to_string()


    def __repr__(self):
        if self._components is None:
            return 'Color(None, alpha=%s)' % format_number(self._alpha)
        return 'Color(%r, alpha=%s)' % (self._components, format_number(self._alpha))
