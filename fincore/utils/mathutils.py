"""Scalar numeric helpers shared by the curve, solver and pricing modules."""

from __future__ import annotations

import math
import sys

NAN: float = math.nan
EPSILON: float = sys.float_info.epsilon
INFINITY: float = math.inf
# Half the mantissa digits: 2**-26 for float64.
SQRT_EPSILON: float = math.ldexp(1.0, -(sys.float_info.mant_dig // 2))


def is_nan(x: float) -> bool:
    """Return True if x is not a number.

    Uses self-inequality so it also works for numpy scalars.
    """
    return x != x


def sign(x: float) -> int:
    """Return -1, 0 or 1 according to the sign of x (NaN maps to 0)."""
    if x > 0:
        return 1
    if x < 0:
        return -1
    return 0


def same_sign(x: float, y: float) -> bool:
    return sign(x) == sign(y)


def fabs(x: float) -> float:
    return x if x >= 0 else -x


def bracket(x: float, x0: float, a: float = -INFINITY, b: float = INFINITY) -> float:
    """
    Move a proposed iterate back into [a, b].

    When x falls outside the bracket it is replaced by the midpoint of the
    last in-bracket guess x0 and the violated end point.

    Parameters
    ----------
    x : float
        Proposed next iterate
    x0 : float
        Last guess, which must lie strictly inside (a, b)
    a, b : float
        Bracket end points

    Returns
    -------
    float
        The bracketed iterate, or NaN if the bracket is degenerate
        (a >= b, or x0 not strictly inside)
    """
    if a >= b or a >= x0 or x0 >= b:
        return NAN

    if x < a:
        return (x0 + a) / 2
    if x > b:
        return (x0 + b) / 2

    return x
