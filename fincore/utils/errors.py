"""Exception hierarchy for fincore.

Every failure raised by the library carries an :class:`ErrorKind` tag so a
front end can map it to its own error display without inspecting messages.
Pure numeric queries (curve evaluation, root finding) do not raise; they
signal trouble in-band with NaN.
"""

from __future__ import annotations

from typing import Sized, Tuple

from fincore.schema.enums import ErrorKind


class FincoreError(Exception):
    """Base class for all library errors."""

    kind: ErrorKind

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}" if self.message else self.kind.value


class DomainError(FincoreError, ValueError):
    """Raised when a price, vol, strike or time is outside its domain."""

    kind = ErrorKind.DOMAIN


class InvalidArgumentError(FincoreError, ValueError):
    """Raised when a constructor or mutator precondition is violated."""

    kind = ErrorKind.INVALID_ARGUMENT


class InvalidInputError(FincoreError, ValueError):
    """Raised when an instrument cannot be bootstrapped onto a curve."""

    kind = ErrorKind.INVALID_INPUT


class ShapeMismatchError(FincoreError, ValueError):
    """Raised when parallel input arrays have different lengths."""

    kind = ErrorKind.SHAPE_MISMATCH


class ConvergenceError(FincoreError, RuntimeError):
    """Raised when a solver result is required but the solver did not converge."""

    kind = ErrorKind.CONVERGENCE


class ValidationError(FincoreError, ValueError):
    """Raised when a derived quantity fails a sanity check."""

    kind = ErrorKind.VALIDATION


def check_same_length(*named: Tuple[str, Sized]) -> int:
    """Return the common length of the named sequences.

    Raises
    ------
    ShapeMismatchError
        If the sequences do not all have the same length
    """
    lengths = {name: len(values) for name, values in named}
    if len(set(lengths.values())) > 1:
        detail = ", ".join(f"{name}={n}" for name, n in lengths.items())
        raise ShapeMismatchError(f"Parallel arrays must have the same length ({detail})")
    return next(iter(lengths.values()), 0)
