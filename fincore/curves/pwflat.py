"""
Piecewise flat right-continuous forward curve evaluation.

A curve is the points (t[i], f[i]) with t strictly increasing and an
extrapolated rate _f used past the last point:

           { f[i] if t[i-1] < u <= t[i]
    f(u) = { _f   if u > t[n-1]
           { NaN  if u < 0

so that f(t[i]) == f[i]. The discount is D(u) = exp(-int_0^u f(s) ds) and
the spot rate r(u) = (1/u) int_0^u f(s) ds is the average forward.

The functions take plain sequences so that owning and borrowing curve
objects share one implementation. None of them raise; undefined values are
returned as NaN.
"""

from __future__ import annotations

import math
from bisect import bisect_left
from typing import Sequence

from fincore.utils.mathutils import INFINITY, NAN, is_nan


def forward(u: float, t: Sequence[float], f: Sequence[float], _f: float = NAN) -> float:
    """Forward rate at time u."""
    if u < 0 or is_nan(u):
        return NAN
    n = len(t)
    if n == 0:
        return _f

    # smallest i with u <= t[i]
    i = bisect_left(t, u)

    return _f if i == n else f[i]


def integral(u: float, t: Sequence[float], f: Sequence[float], _f: float = NAN) -> float:
    """Integral of the forward curve from 0 to u."""
    if u < 0 or is_nan(u):
        return NAN
    if u == 0:
        return 0.0
    n = len(t)
    if n == 0:
        return u * _f

    total = 0.0
    t_ = 0.0
    i = 0
    while i < n and t[i] <= u:
        total += f[i] * (t[i] - t_)
        t_ = t[i]
        i += 1
    if u > t_:
        total += (_f if i == n else f[i]) * (u - t_)

    return total


def discount(u: float, t: Sequence[float], f: Sequence[float], _f: float = NAN) -> float:
    """Discount factor D(u) = exp(-integral(u))."""
    try:
        return math.exp(-integral(u, t, f, _f))
    except OverflowError:
        return INFINITY


def spot(u: float, t: Sequence[float], f: Sequence[float], _f: float = NAN) -> float:
    """Continuously compounded spot rate, the average forward over [0, u]."""
    if u < 0 or is_nan(u):
        return NAN
    if len(t) == 0:
        return _f

    return f[0] if u <= t[0] else integral(u, t, f, _f) / u
