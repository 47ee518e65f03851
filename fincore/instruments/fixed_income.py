"""
Standard fixed income instruments as cash flow sequences.

Each constructor returns an :class:`Instrument` whose present value is zero
when the curve reprices the quoted rate or price.
"""

from __future__ import annotations

import math
from typing import List, Union

from fincore.schema.enums import Frequency
from fincore.utils.errors import InvalidArgumentError

from .cashflows import CashFlow, Instrument


def _check_maturity(u: float) -> None:
    if not u > 0:
        raise InvalidArgumentError(f"Maturity must be positive: {u}")


def _payments_per_year(frequency: Union[Frequency, int]) -> int:
    n = frequency.value if isinstance(frequency, Frequency) else int(frequency)
    if n <= 0:
        raise InvalidArgumentError(f"Payment frequency must be positive: {frequency}")
    return n


def zero_coupon_bond(u: float, price: float) -> Instrument:
    """Pay price today, receive 1 at maturity u."""
    _check_maturity(u)
    return Instrument(((0.0, -price), (u, 1.0)))


def cash_deposit(u: float, rate: float) -> Instrument:
    """Deposit 1 today, receive exp(rate * u) at maturity u.

    The rate is continuously compounded.
    """
    _check_maturity(u)
    return Instrument(((0.0, -1.0), (u, math.exp(rate * u))))


def forward_rate_agreement(u: float, v: float, rate: float) -> Instrument:
    """Pay 1 at u, receive exp(rate * (v - u)) at v."""
    if not u >= 0:
        raise InvalidArgumentError(f"Start time must be non-negative: {u}")
    if not v > u:
        raise InvalidArgumentError(f"End time must be after start time: {v} <= {u}")
    return Instrument(((u, -1.0), (v, math.exp(rate * (v - u)))))


def swap_payment_times(u: float, frequency: Union[Frequency, int] = Frequency.ANNUALLY) -> List[float]:
    """Coupon payment times of a swap with maturity u.

    Periods run every 1/n years from 0; the last period is moved to end at u.
    """
    _check_maturity(u)
    n = _payments_per_year(frequency)
    size = int(n * u) + 1
    du = 1.0 / n
    times = [du * i for i in range(1, size)]
    if times:
        times[-1] = u
    else:
        times.append(u)
    return times


def interest_rate_swap(
    u: float, coupon: float, frequency: Union[Frequency, int] = Frequency.ANNUALLY
) -> Instrument:
    """Par swap as a bond: pay 1 at 0, receive coupon/n each period and 1 + coupon/n at u."""
    n = _payments_per_year(frequency)
    times = swap_payment_times(u, frequency)
    payment = coupon / n
    flows: List[CashFlow] = [(0.0, -1.0)]
    flows.extend((t, payment) for t in times[:-1])
    flows.append((times[-1], 1.0 + payment))
    return Instrument.from_flows(flows)
