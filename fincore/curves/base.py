"""
Base curve classes and protocols for piecewise flat forward curves.
"""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence, Tuple

import numpy as np
import pandas as pd

from fincore.utils.errors import InvalidArgumentError, check_same_length

from . import pwflat


class ForwardCurve(Protocol):
    """Protocol defining the interface for all forward curves."""

    def forward(self, u: float) -> float:
        """Get instantaneous forward rate at time u."""
        ...

    def discount(self, u: float) -> float:
        """Get discount factor at time u."""
        ...

    def spot(self, u: float) -> float:
        """Get continuously compounded spot rate at time u."""
        ...


def validate_points(times: Sequence[float], rates: Sequence[float]) -> int:
    """Check that times and rates describe a valid curve and return the point count.

    Raises:
        ShapeMismatchError: If times and rates differ in length
        InvalidArgumentError: If times are not strictly increasing from a positive first time
    """
    n = check_same_length(("times", times), ("rates", rates))
    previous = 0.0
    for i in range(n):
        if not times[i] > previous:
            raise InvalidArgumentError(
                f"Curve times must be strictly increasing and positive: "
                f"t[{i}]={times[i]} after {previous}"
            )
        previous = times[i]
    return n


class BaseCurve:
    """Evaluation interface shared by owning and borrowing curves.

    Subclasses set ``_times``, ``_rates`` and ``_extrapolation``; all queries
    go through the free functions in :mod:`fincore.curves.pwflat`.
    """

    _times: Sequence[float]
    _rates: Sequence[float]
    _extrapolation: float

    def __len__(self) -> int:
        return len(self._times)

    @property
    def size(self) -> int:
        """Number of points on the curve."""
        return len(self._times)

    @property
    def time(self) -> Sequence[float]:
        return self._times

    @property
    def rate(self) -> Sequence[float]:
        return self._rates

    @property
    def extrapolation(self) -> float:
        """Forward rate used past the last point (NaN if undefined)."""
        return self._extrapolation

    def back(self) -> Tuple[float, float]:
        """Last point on the curve, or the origin (0, 0) if the curve is empty."""
        if len(self._times) == 0:
            return 0.0, 0.0
        return self._times[-1], self._rates[-1]

    def forward(self, u: float) -> float:
        return pwflat.forward(u, self._times, self._rates, self._extrapolation)

    def __call__(self, u: float) -> float:
        return self.forward(u)

    def integral(self, u: float) -> float:
        return pwflat.integral(u, self._times, self._rates, self._extrapolation)

    def discount(self, u: float) -> float:
        return pwflat.discount(u, self._times, self._rates, self._extrapolation)

    def spot(self, u: float) -> float:
        return pwflat.spot(u, self._times, self._rates, self._extrapolation)

    def discount_many(self, times: Iterable[float]) -> np.ndarray:
        """Discount factors at multiple times."""
        return np.array([self.discount(u) for u in times], dtype=float)

    def to_frame(self) -> pd.DataFrame:
        """Tabulate the curve points with discount factors and spot rates."""
        times = list(self._times)
        return pd.DataFrame(
            {
                "time": times,
                "forward": list(self._rates),
                "discount": [self.discount(u) for u in times],
                "spot": [self.spot(u) for u in times],
            }
        )

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({len(self)} points, extrapolation={self._extrapolation})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(times={list(self._times)}, "
            f"rates={list(self._rates)}, extrapolation={self._extrapolation})"
        )
