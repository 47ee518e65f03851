"""
fincore - piecewise flat forward curves, bootstrapping and option analytics.

Main APIs:
---------
    - Curve / CurveView: piecewise flat forward curves
    - Instrument and constructors: zero coupon bonds, deposits, FRAs, swaps
    - present_value / duration: instrument valuation on a curve
    - bootstrap: fit a curve to zero-value instruments
    - Black and BSM put pricing with implied volatility
    - Variance swap replication weights and par variance
"""

__version__ = "0.1.0"

from .curves import (
    BootstrapConfig,
    BootstrapEngine,
    BootstrapResult,
    Curve,
    CurveView,
    bootstrap,
    extrapolate,
)
from .instruments import (
    Instrument,
    cash_deposit,
    forward_rate_agreement,
    interest_rate_swap,
    zero_coupon_bond,
)
from .options import (
    black_bsm,
    bsm_implied_vol,
    bsm_put_delta,
    bsm_put_gamma,
    bsm_put_value,
    bsm_put_vega,
    call_value,
    implied_vol,
    moneyness,
    put_delta,
    put_gamma,
    put_value,
    put_vega,
)
from .schema import BootstrapMethod, ErrorKind, Frequency
from .utils import (
    ConvergenceError,
    DomainError,
    FincoreError,
    InvalidArgumentError,
    InvalidInputError,
    Newton,
    RootResult,
    Secant,
    ShapeMismatchError,
    ValidationError,
)
from .valuation import duration, extrapolation_sensitivity, par_swap_rate, present_value
from .vswap import par_variance, vswap_weights

__all__ = [
    "__version__",
    # Curves
    "Curve",
    "CurveView",
    "extrapolate",
    "bootstrap",
    "BootstrapConfig",
    "BootstrapEngine",
    "BootstrapResult",
    # Instruments
    "Instrument",
    "zero_coupon_bond",
    "cash_deposit",
    "forward_rate_agreement",
    "interest_rate_swap",
    # Valuation
    "present_value",
    "duration",
    "extrapolation_sensitivity",
    "par_swap_rate",
    # Options
    "moneyness",
    "put_value",
    "put_delta",
    "put_gamma",
    "put_vega",
    "call_value",
    "implied_vol",
    "black_bsm",
    "bsm_put_value",
    "bsm_put_delta",
    "bsm_put_gamma",
    "bsm_put_vega",
    "bsm_implied_vol",
    # Variance swaps
    "vswap_weights",
    "par_variance",
    # Enums
    "Frequency",
    "BootstrapMethod",
    "ErrorKind",
    # Errors and solvers
    "FincoreError",
    "DomainError",
    "InvalidArgumentError",
    "InvalidInputError",
    "ShapeMismatchError",
    "ConvergenceError",
    "ValidationError",
    "Secant",
    "Newton",
    "RootResult",
]
