"""Bootstrap framework for piecewise flat forward curves."""

from .base import BootstrapConfig, InstrumentProcessor
from .engine import BootstrapEngine, bootstrap, solve_pillar
from .results import BootstrapResult

__all__ = [
    # Configuration
    "BootstrapConfig",
    "InstrumentProcessor",
    # Engine
    "BootstrapEngine",
    "BootstrapResult",
    "bootstrap",
    "solve_pillar",
]
