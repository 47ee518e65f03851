"""Present value and rate sensitivities of cash flow instruments.

All functions are reductions over the instrument's cash flows, each term a
single discount factor lookup on the curve.
"""

from __future__ import annotations

from fincore.curves.base import BaseCurve, ForwardCurve
from fincore.instruments.cashflows import Instrument


def present_value(instrument: Instrument, curve: ForwardCurve) -> float:
    """Sum of cash flow amounts times discount factors.

    Args:
        instrument: Cash flows to value
        curve: Any curve providing ``discount(u)``

    Returns:
        Present value; NaN if the curve is undefined at a cash flow time
    """
    return sum(c * curve.discount(u) for u, c in instrument)


def duration(instrument: Instrument, curve: ForwardCurve) -> float:
    """Time-weighted present value, sum of u * c * D(u).

    This is minus the derivative of present value under a parallel shift of
    the forward curve.
    """
    return sum(u * c * curve.discount(u) for u, c in instrument)


def extrapolation_sensitivity(instrument: Instrument, curve: BaseCurve) -> float:
    """Derivative of present value with respect to the curve's extrapolated rate.

    Only cash flows past the last curve time depend on the extrapolated rate:
    d/df c * D(u) = -(u - t_last) * c * D(u) for u > t_last.

    Args:
        instrument: Cash flows to value
        curve: Curve providing ``back()`` and ``discount(u)``
    """
    t_last, _ = curve.back()
    return -sum(
        (u - t_last) * c * curve.discount(u) for u, c in instrument if u > t_last
    )
