#
# Copyright (C) 2026 Stylecolor Developers — LGPL-3.0-or-later
#

# pylint: disable=invalid-name
"""
Various helper functions that are used across the library.
"""
import math


def clamp(value, min_, max_):
    """
    Constrain a value to the specified range

    :param value: Input value
    :param min_: Range minimum
    :param max_: Range maximum

    :return: The constrained value
    """
    return max(min_, min(value, max_))


def round_half_up(value) -> int:
    """
    Round to the nearest integer, with halves going towards
    positive infinity. Python's round() would round halves to even.
    """
    return int(math.floor(value + 0.5))


def _shift(value, places: int) -> float:
    # compose the exponent in text so the decimal digits survive intact
    mantissa, _, exponent = repr(float(value)).partition('e')
    return float('%se%d' % (mantissa, int(exponent or 0) + places))


def round_decimal(value, decimals: int) -> float:
    """
    Round a value to the given number of decimal places.

    The value is shifted by composing an exponential string instead of
    multiplying by a power of ten, which avoids binary artifacts such as
    1.005 * 100 == 100.49999999999999.

    :param value: The number to round
    :param decimals: Number of decimal places to keep

    :return: The rounded value
    """
    if math.isnan(value) or math.isinf(value):
        return value
    return _shift(round_half_up(_shift(value, decimals)), -decimals)


def format_number(value) -> str:
    """
    Format a number for output in style sheets. Integral values
    are written without a decimal point.
    """
    if isinstance(value, float) and value.is_integer():
        return '%d' % value
    return str(value)
