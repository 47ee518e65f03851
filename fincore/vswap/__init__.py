"""Variance swap replication."""

from .replication import (
    difference_quotient,
    dynamic_hedge,
    is_decreasing,
    is_increasing,
    par_variance,
    realized_variance,
    static_payoff,
    vswap_weights,
)

__all__ = [
    "static_payoff",
    "dynamic_hedge",
    "realized_variance",
    "difference_quotient",
    "is_increasing",
    "is_decreasing",
    "vswap_weights",
    "par_variance",
]
