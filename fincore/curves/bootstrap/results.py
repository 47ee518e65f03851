"""Result dataclasses for the bootstrapping stack."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BootstrapResult:
    """Single pillar solved during the bootstrap."""

    index: int
    maturity: float
    forward_rate: float
    discount_factor: float
    spot_rate: float
    iterations: int
    method: str
