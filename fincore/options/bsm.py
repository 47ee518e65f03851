"""Black-Scholes-Merton put pricing expressed through the Black model.

A stock with spot s0, constant rate r and volatility sigma has forward
f = s0 * exp(r t) at expiry t, so BSM values are discounted Black values.
"""

from __future__ import annotations

import math
from typing import Tuple

from fincore.utils.errors import DomainError

from . import black


def black_bsm(r: float, s0: float, sigma: float, t: float) -> Tuple[float, float, float]:
    """
    Convert BSM parameters to Black parameters.

    Returns:
        Tuple of (discount, forward, total_volatility) = (exp(-r t), s0 / D, sigma sqrt(t))

    Raises:
        DomainError: If s0, sigma or t is not positive
    """
    if not (s0 > 0 and sigma > 0 and t > 0):
        raise DomainError(f"BSM parameters must be positive (s0={s0}, sigma={sigma}, t={t})")
    D = math.exp(-r * t)
    return D, s0 / D, sigma * math.sqrt(t)


def bsm_put_value(r: float, s0: float, sigma: float, t: float, k: float) -> float:
    D, f, s = black_bsm(r, s0, sigma, t)
    return D * black.put_value(f, s, k)


def bsm_put_delta(r: float, s0: float, sigma: float, t: float, k: float) -> float:
    """Derivative with respect to spot; the discount cancels df/ds0."""
    _, f, s = black_bsm(r, s0, sigma, t)
    return black.put_delta(f, s, k)


def bsm_put_gamma(r: float, s0: float, sigma: float, t: float, k: float) -> float:
    D, f, s = black_bsm(r, s0, sigma, t)
    return black.put_gamma(f, s, k) / D


def bsm_put_vega(r: float, s0: float, sigma: float, t: float, k: float) -> float:
    """Derivative with respect to sigma (not total volatility)."""
    D, f, s = black_bsm(r, s0, sigma, t)
    return D * black.put_vega(f, s, k) * math.sqrt(t)


def bsm_implied_vol(
    r: float,
    s0: float,
    p: float,
    t: float,
    k: float,
    sigma: float = 0.2,
    tolerance: float = 1e-8,
    iterations: int = 100,
) -> float:
    """
    Implied BSM volatility of a put with spot price p.

    Raises:
        DomainError: If s0, sigma or t is not positive, or p is outside the
            no-arbitrage bounds
        ConvergenceError: If the underlying Black solve fails
    """
    D, f, s = black_bsm(r, s0, sigma, t)
    sqrt_t = math.sqrt(t)
    return black.implied_vol(f, p / D, k, s, tolerance, iterations) / sqrt_t
