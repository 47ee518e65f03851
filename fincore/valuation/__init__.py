"""Instrument valuation against piecewise flat forward curves.

This package provides:
- Present value and duration of cash flow instruments
- Sensitivity of present value to a curve's extrapolated rate
- Par swap rates
"""

from .par_rate import par_swap_rate
from .pv import duration, extrapolation_sensitivity, present_value

__all__ = [
    "present_value",
    "duration",
    "extrapolation_sensitivity",
    "par_swap_rate",
]
