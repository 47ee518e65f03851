"""Standard normal distribution functions."""

import math

_SQRT2 = math.sqrt(2.0)
_SQRT2PI = math.sqrt(2.0 * math.pi)


def normal_cdf(z: float) -> float:
    return 0.5 * (1.0 + math.erf(z / _SQRT2))


def normal_pdf(z: float) -> float:
    return math.exp(-z * z / 2.0) / _SQRT2PI
