"""Numerical engine for piecewise flat forward curve bootstrapping."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from fincore.curves.base import BaseCurve
from fincore.curves.curve import Curve, extrapolate
from fincore.instruments.cashflows import Instrument
from fincore.schema.enums import BootstrapMethod
from fincore.utils.errors import ConvergenceError
from fincore.utils.mathutils import is_nan
from fincore.utils.rootfinding import Newton, RootResult, Secant
from fincore.valuation.pv import extrapolation_sensitivity, present_value

from .base import BootstrapConfig, InstrumentProcessor
from .results import BootstrapResult

logger = logging.getLogger(__name__)


def solve_pillar(
    instrument: Instrument,
    curve: BaseCurve,
    config: Optional[BootstrapConfig] = None,
    index: int = 0,
) -> Tuple[float, float, RootResult]:
    """Solve for the forward rate that prices an instrument to zero.

    The rate is applied past the end of ``curve`` up to the instrument's last
    cash flow. The curve itself is not modified.

    Args:
        instrument: Instrument with zero present value at the solved rate
        curve: Curve built so far
        config: Solver settings
        index: Position of the instrument in the input, for messages

    Returns:
        Tuple of (maturity, forward_rate, root_result)

    Raises:
        InvalidInputError: If the instrument is empty or does not extend the curve
        ConvergenceError: If the root finder does not converge
    """
    config = config or BootstrapConfig()
    t_last, f_last = curve.back()
    InstrumentProcessor.validate_instrument(instrument, t_last, index)
    u_last, _ = instrument.back()

    seed = f_last
    if len(curve) == 0 and config.initial_rate is not None:
        seed = config.initial_rate

    def pv(rate: float) -> float:
        return present_value(instrument, extrapolate(curve, rate))

    if config.method == BootstrapMethod.NEWTON:
        def dpv(rate: float) -> float:
            return extrapolation_sensitivity(instrument, extrapolate(curve, rate))

        result = Newton(seed, config.tolerance, config.max_iterations).solve(pv, dpv)
    else:
        solver = Secant(seed, seed + config.seed_step, config.tolerance, config.max_iterations)
        result = solver.solve(pv)

    if is_nan(result.root):
        logger.warning(
            "Bootstrap failed for instrument %s after %s iterations (residual %s)",
            index,
            result.iterations,
            result.residual,
        )
        raise ConvergenceError(
            f"Instrument {index}: {result.method} did not converge to a forward rate "
            f"for maturity {u_last} after {result.iterations} iterations "
            f"(residual {result.residual})"
        )

    logger.debug(
        "Pillar %s: u=%s f=%s in %s iterations (%s)",
        index,
        u_last,
        result.root,
        result.iterations,
        result.method,
    )
    return u_last, result.root, result


class BootstrapEngine:
    """Extends a curve by one pillar per instrument."""

    def __init__(self, curve: Optional[BaseCurve] = None, config: Optional[BootstrapConfig] = None):
        self.config = config or BootstrapConfig()
        if curve is None:
            self._curve = Curve()
        else:
            self._curve = Curve(curve.time, curve.rate, curve.extrapolation)
        self._results: List[BootstrapResult] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def bootstrap_instrument(self, instrument: Instrument) -> Tuple[float, float]:
        """Bootstrap a single instrument and append its pillar."""
        index = len(self._results)
        u, f, result = solve_pillar(instrument, self._curve, self.config, index)
        self._curve.push_back(u, f)
        self._results.append(self._result_entry(index, u, f, result))
        if self.config.verbose:
            logger.info("   Pillar %s: t=%.6f forward=%.8f", index, u, f)
        return u, f

    def bootstrap(self, instruments: Iterable[Instrument]) -> Curve:
        """Bootstrap instruments in the given order and return the curve."""
        instruments = list(instruments)
        InstrumentProcessor.check_maturity_order(instruments)
        for instrument in instruments:
            self.bootstrap_instrument(instrument)
        return self.get_curve()

    def get_curve(self) -> Curve:
        return self._curve.copy()

    def get_results(self) -> List[BootstrapResult]:
        return list(self._results)

    def results_frame(self) -> pd.DataFrame:
        """Solved pillars as a table, one row per instrument."""
        columns = [
            "index",
            "maturity",
            "forward_rate",
            "discount_factor",
            "spot_rate",
            "iterations",
            "method",
        ]
        return pd.DataFrame(
            [[getattr(r, c) for c in columns] for r in self._results], columns=columns
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _result_entry(self, index: int, u: float, f: float, result: RootResult) -> BootstrapResult:
        return BootstrapResult(
            index=index,
            maturity=u,
            forward_rate=f,
            discount_factor=self._curve.discount(u),
            spot_rate=self._curve.spot(u),
            iterations=result.iterations,
            method=result.method,
        )


def bootstrap(
    instruments: Iterable[Instrument],
    curve: Optional[BaseCurve] = None,
    config: Optional[BootstrapConfig] = None,
) -> Curve:
    """
    Bootstrap a piecewise flat forward curve from zero-value instruments.

    Args:
        instruments: Instruments ordered by increasing final maturity
        curve: Optional starting curve; it is copied, never modified
        config: Bootstrap configuration

    Returns:
        Curve with one new point per instrument

    Raises:
        InvalidInputError: If an instrument is empty or does not extend the curve
        ConvergenceError: If any pillar fails to solve; no partial curve is returned
    """
    return BootstrapEngine(curve, config).bootstrap(instruments)
