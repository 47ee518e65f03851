import math

from fincore.utils.mathutils import (
    EPSILON,
    NAN,
    SQRT_EPSILON,
    bracket,
    fabs,
    is_nan,
    same_sign,
    sign,
)


def test_constants():
    assert is_nan(NAN)
    assert 1 + EPSILON != 1
    assert SQRT_EPSILON == 2.0 ** -26


def test_sign_and_same_sign():
    assert sign(-2) == -1
    assert sign(0) == 0
    assert sign(2) == 1
    assert same_sign(-2, -3)
    assert same_sign(0, 0)
    assert not same_sign(2, -3)


def test_fabs():
    assert fabs(-1) == 1
    assert fabs(0) == 0
    assert fabs(1.5) == 1.5


def test_bracket_inside():
    assert bracket(1, 1) == 1
    assert bracket(2, 1) == 2
    assert bracket(3, 2.5, 2, 4) == 3


def test_bracket_outside():
    assert bracket(1, 3, 2, 4) == 2.5
    assert bracket(5, 3, 2, 4) == 3.5


def test_bracket_degenerate():
    assert is_nan(bracket(1, 1, 2, 2))
    assert is_nan(bracket(1, 2, 2, 4))
    assert is_nan(bracket(1, 5, 2, 4))
    assert math.isnan(bracket(1, 0, 1, 0))
