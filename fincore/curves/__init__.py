"""
Curves package - piecewise flat forward curves and their construction.

Main APIs:
---------
    - Curve: owning curve, extended by push_back
    - CurveView: read-only curve over borrowed arrays
    - extrapolate: view of a curve with a new extrapolated rate
    - bootstrap: build a curve from zero-value instruments
"""

# Evaluation and curve types
from . import pwflat
from .base import BaseCurve, ForwardCurve
from .curve import Curve, CurveView, extrapolate

# Bootstrap
from .bootstrap import (
    BootstrapConfig,
    BootstrapEngine,
    BootstrapResult,
    bootstrap,
    solve_pillar,
)

__all__ = [
    # Curves
    "BaseCurve",
    "ForwardCurve",
    "Curve",
    "CurveView",
    "extrapolate",
    "pwflat",
    # Bootstrap
    "BootstrapConfig",
    "BootstrapEngine",
    "BootstrapResult",
    "bootstrap",
    "solve_pillar",
]
