"""Cash flow instruments."""

from .cashflows import CashFlow, Instrument
from .fixed_income import (
    cash_deposit,
    forward_rate_agreement,
    interest_rate_swap,
    swap_payment_times,
    zero_coupon_bond,
)

__all__ = [
    "CashFlow",
    "Instrument",
    "zero_coupon_bond",
    "cash_deposit",
    "forward_rate_agreement",
    "interest_rate_swap",
    "swap_payment_times",
]
