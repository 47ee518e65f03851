"""
Core enumeration types for the fincore numerics library.
"""

from enum import Enum


class Frequency(Enum):
    """Payments per year."""

    ANNUALLY = 1
    SEMIANNUALLY = 2
    QUARTERLY = 4
    MONTHLY = 12


class BootstrapMethod(Enum):
    """Root finder used to solve each bootstrap pillar."""

    SECANT = "SECANT"
    NEWTON = "NEWTON"


class ErrorKind(Enum):
    """Failure categories surfaced to callers."""

    DOMAIN = "DOMAIN"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_INPUT = "INVALID_INPUT"
    SHAPE_MISMATCH = "SHAPE_MISMATCH"
    CONVERGENCE = "CONVERGENCE"
    VALIDATION = "VALIDATION"
