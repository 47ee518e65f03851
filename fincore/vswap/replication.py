"""Variance swap replication with a static option strip and a futures hedge.

The realised variance of a price path X_j over [0, dt] is replicated by

    sum_j (dX_j/X_j)**2 = g(X_n) + sum_j (2/X_j - 2/z) dX_j

with the static payoff g(x) = -2 ln(x/x0) + 2 (x - x0)/z. The static leg is
approximated by the piecewise linear interpolant of g on a strike grid, which
is a forward position plus puts below the separator z and calls above it.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

import numpy as np

from fincore.utils.errors import DomainError, ValidationError, check_same_length
from fincore.utils.mathutils import NAN, is_nan

logger = logging.getLogger(__name__)


def static_payoff(x0: float, z: float, x: float) -> float:
    """Payoff -2 ln(x/x0) + 2 (x - x0)/z held to expiry."""
    return -2.0 * math.log(x / x0) + 2.0 * (x - x0) / z


def dynamic_hedge(x: float, z: float) -> float:
    """Futures position 2/x - 2/z held over a period starting at price x."""
    return 2.0 / x - 2.0 / z


def realized_variance(prices: Sequence[float], dt: float) -> float:
    """Annualized sum of squared simple returns along a price path."""
    x = np.asarray(prices, dtype=float)
    returns = np.diff(x) / x[:-1]
    return float(np.sum(returns * returns)) / dt


def difference_quotient(k: Sequence[float], f: Sequence[float]) -> np.ndarray:
    """First difference quotients (f[i+1] - f[i]) / (k[i+1] - k[i])."""
    check_same_length(("k", k), ("f", f))
    k = np.asarray(k, dtype=float)
    f = np.asarray(f, dtype=float)
    return np.diff(f) / np.diff(k)


def _quoted(xs: Sequence[float]) -> list:
    return [x for x in xs if not (is_nan(x) or x == 0)]


def is_increasing(xs: Sequence[float]) -> bool:
    """True if the quoted entries never decrease. NaN and zero entries are ignored."""
    q = _quoted(xs)
    return all(a <= b for a, b in zip(q, q[1:]))


def is_decreasing(xs: Sequence[float]) -> bool:
    """True if the quoted entries never increase. NaN and zero entries are ignored."""
    q = _quoted(xs)
    return all(a >= b for a, b in zip(q, q[1:]))


def _weights(x0: float, z: float, k: np.ndarray) -> np.ndarray:
    g = np.array([static_payoff(x0, z, x) for x in k])
    dq = np.diff(g) / np.diff(k)
    w = np.full(len(k), NAN)
    w[1:-1] = np.diff(dq)
    return w


def _weight_problem(x0: float, z: float, k: np.ndarray) -> Optional[str]:
    """Describe why weights cannot be built on k, or None if they can."""
    if not (x0 > 0 and z > 0):
        return "domain"
    if len(k) < 3:
        return f"at least three strikes are required, got {len(k)}"
    if not np.all(k > 0):
        return "strikes must be positive"
    if not np.all(np.diff(k) > 0):
        return "strikes must be strictly increasing"
    w = _weights(x0, z, k)[1:-1]
    if not np.all(w > 0):
        return "interior weights must be positive"
    if not np.all(np.diff(w) < 0):
        return "interior weights must be strictly decreasing"
    return None


def vswap_weights(x0: float, z: float, k: Sequence[float]) -> np.ndarray:
    """
    Option strip weights replicating the static payoff on strikes k.

    The weight at an interior strike is the change in slope of the piecewise
    linear interpolant of the static payoff there. End points carry no option
    and are NaN.

    Parameters
    ----------
    x0 : float
        Initial underlying price
    z : float
        Put/call separator
    k : sequence of float
        Strictly increasing positive strikes, at least three

    Returns
    -------
    numpy.ndarray
        Weights of the same length as k

    Raises
    ------
    DomainError
        If x0 or z is not positive
    ValidationError
        If the strikes or the resulting weights fail the checks above
    """
    k = np.asarray(k, dtype=float)
    problem = _weight_problem(x0, z, k)
    if problem == "domain":
        raise DomainError(f"x0 and z must be positive (x0={x0}, z={z})")
    if problem is not None:
        raise ValidationError(problem)
    return _weights(x0, z, k)


def par_variance(
    dt: float,
    x0: float,
    z: float,
    k: Sequence[float],
    p: Sequence[float],
    c: Sequence[float],
) -> float:
    """
    Par variance from forward put and call prices on a strike strip.

    Puts are used at interior strikes below z and calls at interior strikes at
    or above z. Unquoted (NaN or zero) prices are skipped.

    Args:
        dt: Variance swap tenor in years
        x0: Initial underlying price, also the forward
        z: Put/call separator, in (k[0], k[n-2]]
        k: Strictly increasing strikes
        p: Forward put prices
        c: Forward call prices

    Returns:
        Annualized par variance, or NaN if the quotes or strikes are not
        usable

    Raises:
        ShapeMismatchError: If k, p and c differ in length
    """
    n = check_same_length(("k", k), ("p", p), ("c", c))
    k = np.asarray(k, dtype=float)
    p = np.asarray(p, dtype=float)
    c = np.asarray(c, dtype=float)

    if not is_increasing(p):
        logger.debug("par_variance: puts are not non-decreasing in strike")
        return NAN
    if not is_decreasing(c):
        logger.debug("par_variance: calls are not non-increasing in strike")
        return NAN
    problem = _weight_problem(x0, z, k)
    if problem is not None:
        logger.debug("par_variance: %s", problem)
        return NAN
    if not z > k[0]:
        return NAN

    i = 1
    while k[i] < z:
        i += 1
        if i == n - 1:
            return NAN

    g = np.array([static_payoff(x0, z, x) for x in k])
    m = (g[i] - g[i - 1]) / (k[i] - k[i - 1])
    total = g[i - 1] + m * (z - k[i - 1]) + m * (x0 - z)

    w = _weights(x0, z, k)
    for j in range(1, n - 1):
        price = p[j] if k[j] < z else c[j]
        if is_nan(price) or price == 0:
            continue
        total += w[j] * price

    return float(total) / dt
