import math

import pytest

from fincore.utils.rootfinding import Newton, Secant


def _square_minus_four(x):
    return x * x - 4


def _twice(x):
    return 2 * x


def test_secant_finds_root():
    result = Secant(0, 1).solve(_square_minus_four)
    assert result.converged
    assert result.method == "secant"
    assert result.root == pytest.approx(2, abs=1e-6)
    assert abs(result.residual) <= Secant(0, 1).tolerance


def test_secant_budget_exhausted():
    result = Secant(0, 1, iterations=1).solve(_square_minus_four)
    assert not result.converged
    assert math.isnan(result.root)


def test_secant_flat_function_fails():
    result = Secant(0, 1).solve(lambda x: 1.0)
    assert not result.converged
    assert math.isnan(result.root)


def test_secant_nan_residual_fails():
    result = Secant(0, 1).solve(lambda x: math.nan)
    assert math.isnan(result.root)


def test_secant_linear_one_step():
    result = Secant(0, 1).solve(lambda x: 3 * x - 6)
    assert result.root == pytest.approx(2)
    assert result.iterations == 1


def test_newton_finds_root():
    result = Newton(1).solve(_square_minus_four, _twice)
    assert result.converged
    assert result.method == "newton"
    assert result.root == pytest.approx(2, abs=1e-6)


def test_newton_budget_exhausted():
    result = Newton(1, iterations=1).solve(_square_minus_four, _twice)
    assert not result.converged
    assert math.isnan(result.root)


def test_newton_zero_derivative_fails():
    result = Newton(0).solve(_square_minus_four, _twice)
    assert math.isnan(result.root)


def test_newton_stays_in_bracket():
    # from 1 the raw step lands at 2.5, outside [0, 2.2]
    result = Newton(1).solve(_square_minus_four, _twice, 0, 2.2)
    assert result.converged
    assert result.root == pytest.approx(2, abs=1e-6)


def test_newton_degenerate_bracket_fails():
    result = Newton(1).solve(_square_minus_four, _twice, 2, 3)
    assert math.isnan(result.root)
