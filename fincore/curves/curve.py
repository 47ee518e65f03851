"""
Owning and borrowing piecewise flat forward curves.
"""
import logging
from typing import Sequence

from fincore.utils.errors import InvalidArgumentError
from fincore.utils.mathutils import NAN, is_nan

from .base import BaseCurve, validate_points

logger = logging.getLogger(__name__)


class CurveView(BaseCurve):
    """
    Read-only curve over time and rate sequences owned by the caller.

    The sequences are referenced, not copied, so a view must not outlive
    them and sees any points later appended to them.
    """

    def __init__(self,
                 times: Sequence[float],
                 rates: Sequence[float],
                 extrapolation: float = NAN,
                 check: bool = True):
        """
        Initialize curve view.

        Args:
            times: Curve times in years, strictly increasing
            rates: Forward rate on the segment ending at each time
            extrapolation: Forward rate past the last time
            check: Validate the points (skipped for internally built views)
        """
        if check:
            validate_points(times, rates)
        self._times = times
        self._rates = rates
        self._extrapolation = float(extrapolation)


class Curve(BaseCurve):
    """
    Value-type piecewise flat forward curve.

    Owns copies of its points. The only mutations are appending a later
    point with :meth:`push_back` and rebinding :attr:`extrapolation`.
    """

    def __init__(self,
                 times: Sequence[float] = (),
                 rates: Sequence[float] = (),
                 extrapolation: float = NAN):
        """
        Initialize curve.

        Args:
            times: Curve times in years, strictly increasing and positive
            rates: Forward rate on the segment ending at each time
            extrapolation: Forward rate past the last time (NaN if undefined)

        Raises:
            ShapeMismatchError: If times and rates differ in length
            InvalidArgumentError: If times are not strictly increasing
        """
        validate_points(times, rates)
        self._times = [float(t) for t in times]
        self._rates = [float(f) for f in rates]
        self._extrapolation = float(extrapolation)

    @classmethod
    def constant(cls, rate: float) -> 'Curve':
        """Empty curve with a constant forward rate everywhere."""
        return cls(extrapolation=rate)

    @property
    def extrapolation(self) -> float:
        return self._extrapolation

    @extrapolation.setter
    def extrapolation(self, value: float) -> None:
        self._extrapolation = float(value)

    def push_back(self, t: float, f: float) -> 'Curve':
        """
        Extend the curve by the point (t, f).

        Args:
            t: New last time, strictly after the current last time
            f: Forward rate on the new segment

        Returns:
            This curve

        Raises:
            InvalidArgumentError: If t is not after the last time
        """
        t_last, _ = self.back()
        if not t > t_last:
            raise InvalidArgumentError(f"Time must be increasing: {t} <= {t_last}")
        self._times.append(float(t))
        self._rates.append(float(f))
        logger.debug("Curve extended to t=%s f=%s (%s points)", t, f, len(self._times))

        return self

    def view(self) -> CurveView:
        """Borrowing view of this curve's current points."""
        return CurveView(self._times, self._rates, self._extrapolation, check=False)

    def copy(self) -> 'Curve':
        return Curve(self._times, self._rates, self._extrapolation)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        e, oe = self._extrapolation, other._extrapolation
        same_extrapolation = (is_nan(e) and is_nan(oe)) or e == oe
        return self._times == other._times and self._rates == other._rates and same_extrapolation

    __hash__ = None


def extrapolate(curve: BaseCurve, extrapolation: float) -> CurveView:
    """
    Curve view sharing the points of curve with a new extrapolated rate.

    Used to probe candidate forward rates past the end of a curve without
    touching its storage.
    """
    return CurveView(curve.time, curve.rate, extrapolation, check=False)
