"""Root-finding utilities (secant and Newton with NaN-on-failure)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import logging

from .mathutils import INFINITY, NAN, SQRT_EPSILON, bracket, fabs, is_nan, same_sign

logger = logging.getLogger(__name__)

Func = Callable[[float], float]


@dataclass
class RootResult:
    root: float
    residual: float
    iterations: int
    converged: bool
    method: str


def _failed(residual: float, iterations: int, method: str) -> RootResult:
    return RootResult(NAN, residual, iterations, False, method)


@dataclass
class Secant:
    """Derivative-free secant method seeded with two guesses.

    Once the residuals at the two guesses have opposite signs the pair is
    kept as a bracket: a new point replaces the end point whose residual has
    the same sign. Otherwise the window slides forward.

    Parameters
    ----------
    x0, x1:
        Initial guesses.
    tolerance:
        Absolute tolerance for the function value.
    iterations:
        Maximum number of function evaluations after the seeds.
    """

    x0: float
    x1: float
    tolerance: float = SQRT_EPSILON
    iterations: int = 100

    @staticmethod
    def next(x0: float, y0: float, x1: float, y1: float) -> float:
        return (x0 * y1 - x1 * y0) / (y1 - y0)

    def solve(self, func: Func) -> RootResult:
        """Find a root of func. The root is NaN if the method did not converge."""
        x0, x1 = float(self.x0), float(self.x1)
        y0, y1 = func(x0), func(x1)
        bracketed = not same_sign(y0, y1)
        n = 0

        while is_nan(y1) or fabs(y1) > self.tolerance:
            if n >= self.iterations:
                logger.debug("Secant exhausted %s iterations: x=%s y=%s", n, x1, y1)
                return _failed(y1, n, "secant")
            if is_nan(y0) or is_nan(y1) or y1 == y0:
                logger.debug("Secant step undefined at iter %s: y0=%s y1=%s", n, y0, y1)
                return _failed(y1, n, "secant")
            n += 1
            x = self.next(x0, y0, x1, y1)
            y = func(x)
            logger.debug("Secant iter %s: x=%s y=%s bracketed=%s", n, x, y, bracketed)
            if bracketed and same_sign(y, y1):
                x1, y1 = x, y
            else:
                x0, y0 = x1, y1
                x1, y1 = x, y
                bracketed = not same_sign(y0, y1)

        return RootResult(x1, y1, n, True, "secant")


@dataclass
class Newton:
    """Newton-Raphson iteration kept inside an optional domain [a, b].

    Parameters
    ----------
    x0:
        Starting point for Newton iterations.
    tolerance:
        Absolute tolerance for the function value.
    iterations:
        Maximum number of Newton steps.
    """

    x0: float
    tolerance: float = SQRT_EPSILON
    iterations: int = 100

    @staticmethod
    def next(x: float, y: float, dy: float) -> float:
        return x - y / dy

    def solve(
        self, func: Func, deriv: Func, a: float = -INFINITY, b: float = INFINITY
    ) -> RootResult:
        """Find a root of func in [a, b] using its derivative deriv."""
        x = float(self.x0)
        y = func(x)
        n = 0

        while is_nan(y) or fabs(y) > self.tolerance:
            if n >= self.iterations or is_nan(y):
                logger.debug("Newton failed after %s iterations: x=%s y=%s", n, x, y)
                return _failed(y, n, "newton")
            dy = deriv(x)
            if dy == 0.0 or is_nan(dy):
                logger.debug("Zero derivative; aborting Newton at iter %s", n)
                return _failed(y, n, "newton")
            n += 1
            x = bracket(self.next(x, y, dy), x, a, b)
            if is_nan(x):
                logger.debug("Degenerate bracket [%s, %s] at iter %s", a, b, n)
                return _failed(y, n, "newton")
            y = func(x)
            logger.debug("Newton iter %s: x=%s y=%s deriv=%s", n, x, y, dy)

        return RootResult(x, y, n, True, "newton")
