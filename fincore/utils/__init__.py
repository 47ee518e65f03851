"""Numeric kernel, error types and root finders."""

from .errors import (
    ConvergenceError,
    DomainError,
    FincoreError,
    InvalidArgumentError,
    InvalidInputError,
    ShapeMismatchError,
    ValidationError,
)
from .mathutils import (
    EPSILON,
    INFINITY,
    NAN,
    SQRT_EPSILON,
    bracket,
    fabs,
    is_nan,
    same_sign,
    sign,
)
from .rootfinding import Newton, RootResult, Secant

__all__ = [
    # Errors
    "FincoreError",
    "DomainError",
    "InvalidArgumentError",
    "InvalidInputError",
    "ShapeMismatchError",
    "ConvergenceError",
    "ValidationError",
    # Numeric kernel
    "NAN",
    "EPSILON",
    "INFINITY",
    "SQRT_EPSILON",
    "is_nan",
    "sign",
    "same_sign",
    "fabs",
    "bracket",
    # Root finding
    "Secant",
    "Newton",
    "RootResult",
]
