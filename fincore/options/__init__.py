"""Black and Black-Scholes-Merton put pricing."""

from .black import (
    call_value,
    implied_vol,
    moneyness,
    put_delta,
    put_gamma,
    put_value,
    put_vega,
)
from .bsm import (
    black_bsm,
    bsm_implied_vol,
    bsm_put_delta,
    bsm_put_gamma,
    bsm_put_value,
    bsm_put_vega,
)
from .normal import normal_cdf, normal_pdf

__all__ = [
    # Normal distribution
    "normal_cdf",
    "normal_pdf",
    # Black
    "moneyness",
    "put_value",
    "put_delta",
    "put_gamma",
    "put_vega",
    "call_value",
    "implied_vol",
    # BSM
    "black_bsm",
    "bsm_put_value",
    "bsm_put_delta",
    "bsm_put_gamma",
    "bsm_put_vega",
    "bsm_implied_vol",
]
