"""Black model put pricing on the forward measure.

The forward at expiry is F = f * exp(s * Z - s**2 / 2) with Z standard normal,
where s = sigma * sqrt(t) is the total volatility. All values are forward
(undiscounted) values.
"""

from __future__ import annotations

import logging
import math

from fincore.utils.errors import ConvergenceError, DomainError
from fincore.utils.mathutils import SQRT_EPSILON, fabs

from .normal import normal_cdf, normal_pdf

logger = logging.getLogger(__name__)


def moneyness(f: float, s: float, k: float) -> float:
    """
    Standardized moneyness z = (ln(k/f) + s**2/2) / s.

    The put is in the money at expiry exactly when Z < z.

    Raises:
        DomainError: If f, s or k is not positive
    """
    if not (f > 0 and s > 0 and k > 0):
        raise DomainError(f"Black parameters must be positive (f={f}, s={s}, k={k})")
    return (math.log(k / f) + s * s / 2) / s


def put_value(f: float, s: float, k: float) -> float:
    """Black put value E[max(k - F, 0)]."""
    z = moneyness(f, s, k)
    return k * normal_cdf(z) - f * normal_cdf(z - s)


def put_delta(f: float, s: float, k: float) -> float:
    """Derivative of the put value with respect to the forward."""
    z = moneyness(f, s, k)
    return -normal_cdf(z - s)


def put_gamma(f: float, s: float, k: float) -> float:
    """Second derivative of the put value with respect to the forward."""
    z = moneyness(f, s, k)
    return normal_pdf(z - s) / (f * s)


def put_vega(f: float, s: float, k: float) -> float:
    """Derivative of the put value with respect to the total volatility s."""
    z = moneyness(f, s, k)
    return f * normal_pdf(z - s)


def call_value(f: float, s: float, k: float) -> float:
    """Black call value from put-call parity, c = p + f - k."""
    return put_value(f, s, k) + f - k


def implied_vol(
    f: float,
    p: float,
    k: float,
    s: float = 0.2,
    tolerance: float = 1e-8,
    iterations: int = 100,
) -> float:
    """
    Solve put_value(f, s, k) = p for the total volatility s.

    Newton's method on s starting from the given guess. A step that would
    make s non-positive halves s instead.

    Args:
        f: Forward
        p: Forward put price
        k: Strike
        s: Initial volatility guess
        tolerance: Absolute tolerance on the volatility step
        iterations: Maximum number of Newton steps

    Returns:
        Implied total volatility

    Raises:
        DomainError: If the price is outside the no-arbitrage bounds
            max(k - f, 0) < p < k, or f, k or s is not positive
        ConvergenceError: If the iteration budget is exhausted or the
            solution does not reprice p to within SQRT_EPSILON
            times its time value
    """
    if not (f > 0 and k > 0 and s > 0):
        raise DomainError(f"Black parameters must be positive (f={f}, s={s}, k={k})")
    if not (max(k - f, 0.0) < p < k):
        raise DomainError(
            f"Put price {p} is outside the no-arbitrage bounds ({max(k - f, 0.0)}, {k})"
        )

    converged = False
    for i in range(iterations):
        vega = put_vega(f, s, k)
        if not vega > 0:
            logger.debug("implied_vol: vega vanished at s=%s", s)
            break
        ds = (put_value(f, s, k) - p) / vega
        s_next = s - ds
        if s_next <= 0:
            s_next = s / 2
        logger.debug("implied_vol iter %s: s=%s ds=%s", i + 1, s_next, ds)
        step = fabs(s_next - s)
        s = s_next
        if step < tolerance:
            converged = True
            break

    if not converged:
        logger.warning("implied_vol did not converge after %s iterations (s=%s)", iterations, s)
        raise ConvergenceError(
            f"Implied volatility did not converge in {iterations} iterations "
            f"(f={f}, p={p}, k={k}, last s={s})"
        )

    # tolerance scales with the time value
    time_value = p - max(k - f, 0.0)
    residual = put_value(f, s, k) - p
    if fabs(residual) > SQRT_EPSILON * time_value:
        raise ConvergenceError(
            f"Implied volatility s={s} reprices with residual {residual} "
            f"(f={f}, p={p}, k={k})"
        )
    return s
