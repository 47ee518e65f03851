"""Par rate calculation for interest rate swaps.

The par coupon is the rate that makes :func:`interest_rate_swap` worth zero
on a given curve, commonly used to generate bootstrap inputs from a known
curve or to mark a swap to market.
"""

from typing import Union

from fincore.curves.base import ForwardCurve
from fincore.instruments.fixed_income import swap_payment_times
from fincore.schema.enums import Frequency


def par_swap_rate(
    curve: ForwardCurve,
    u: float,
    frequency: Union[Frequency, int] = Frequency.ANNUALLY,
) -> float:
    """Calculate the par coupon of a swap with maturity u.

    The swap pays 1 at time 0 and receives coupon/n at each payment time plus
    1 at maturity, so the par coupon is:
        c = n * (1 - D(u)) / sum_j D(t_j)

    Args:
        curve: Curve providing ``discount(u)``
        u: Swap maturity in years
        frequency: Payments per year

    Returns:
        Par coupon as a decimal (e.g., 0.0250 for 2.50%)

    Raises:
        InvalidArgumentError: If the maturity or frequency is not positive
    """
    times = swap_payment_times(u, frequency)
    n = frequency.value if isinstance(frequency, Frequency) else int(frequency)
    annuity = sum(curve.discount(t) for t in times) / n
    return (1.0 - curve.discount(times[-1])) / annuity
