import math

import pytest

from fincore.options import (
    call_value,
    implied_vol,
    moneyness,
    normal_cdf,
    normal_pdf,
    put_delta,
    put_gamma,
    put_value,
    put_vega,
)
from fincore.utils.errors import ConvergenceError, DomainError


def test_normal():
    assert normal_cdf(0) == .5
    assert normal_cdf(1.96) == pytest.approx(.9750021048517795)
    assert normal_pdf(0) == 1 / math.sqrt(2 * math.pi)
    assert normal_cdf(-1) + normal_cdf(1) == pytest.approx(1)


def test_moneyness():
    assert moneyness(100, .1, 100) == 0.05000000000000001
    for f, s, k in [(0, .1, 100), (100, 0, 100), (100, .1, 0), (-1, .1, 100)]:
        with pytest.raises(DomainError):
            moneyness(f, s, k)


def test_put_value_and_delta():
    assert put_value(100, .1, 100) == pytest.approx(3.9877611676744920, abs=1e-12)
    assert put_delta(100, .1, 100) == pytest.approx(-0.48006119416162754, abs=1e-12)


def test_put_value_bounds():
    for k in [80, 100, 120]:
        p = put_value(100, .2, k)
        assert max(k - 100, 0) < p < k


def test_greeks_match_finite_differences():
    f, s, k, h = 100, .2, 105, 1e-4
    dp = (put_value(f + h, s, k) - put_value(f - h, s, k)) / (2 * h)
    assert put_delta(f, s, k) == pytest.approx(dp, rel=1e-6)
    dd = (put_delta(f + h, s, k) - put_delta(f - h, s, k)) / (2 * h)
    assert put_gamma(f, s, k) == pytest.approx(dd, rel=1e-6)
    dv = (put_value(f, s + h, k) - put_value(f, s - h, k)) / (2 * h)
    assert put_vega(f, s, k) == pytest.approx(dv, rel=1e-6)


def test_put_call_parity():
    assert call_value(100, .2, 90) - put_value(100, .2, 90) == pytest.approx(10)


def test_matches_quantlib():
    ql = pytest.importorskip("QuantLib")
    for k in [80, 100, 125]:
        for s in [.05, .2, .5]:
            expected = ql.blackFormula(ql.Option.Put, k, 100.0, s)
            assert put_value(100, s, k) == pytest.approx(expected, rel=1e-10)


def test_implied_vol_round_trip():
    f = 100
    for k in [90, 100, 110]:
        for s in [.05, .1, .15, .2]:
            p = put_value(f, s, k)
            assert implied_vol(f, p, k) == pytest.approx(s, abs=1e-7)


def test_implied_vol_price_bounds():
    with pytest.raises(DomainError):
        implied_vol(100, 10, 110)
    with pytest.raises(DomainError):
        implied_vol(100, 0, 90)
    with pytest.raises(DomainError):
        implied_vol(100, 100, 100)
    with pytest.raises(DomainError):
        implied_vol(100, 4, 100, s=0)


def test_implied_vol_budget_exhausted():
    p = put_value(100, .1, 100)
    with pytest.raises(ConvergenceError):
        implied_vol(100, p, 100, s=.5, iterations=1)


def test_implied_vol_checks_tiny_prices_relative_to_time_value():
    p = put_value(100, .05, 70)
    assert 0 < p < 1e-10
    with pytest.raises(ConvergenceError):
        implied_vol(100, p, 70)


def test_implied_vol_in_the_money_put():
    p = put_value(100, .3, 130)
    assert implied_vol(100, p, 130) == pytest.approx(.3, abs=1e-7)
