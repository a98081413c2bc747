#
# Copyright (C) 2026 Stylecolor Developers — LGPL-3.0-or-later
#
"""
Scalar arithmetic for style expressions.
"""
import operator


OPERATORS = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': operator.truediv,
    '%': operator.mod,
}


def operate(op: str, a, b):
    """
    Apply a binary arithmetic operator to two scalars

    :param op: One of the operators in OPERATORS
    :param a: Left operand
    :param b: Right operand

    :return: The result of the operation
    """
    if op not in OPERATORS:
        raise ValueError("Invalid operator: %s. Valid operators: %s" % (op, list(OPERATORS)))

    return OPERATORS[op](a, b)
