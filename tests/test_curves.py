import math

import pytest

from fincore.curves import Curve, CurveView, extrapolate, pwflat
from fincore.utils.errors import InvalidArgumentError, ShapeMismatchError

T = [1, 2, 3]
F = [.1, .2, .3]


def _curve(extrapolation=math.nan):
    return Curve(T, F, extrapolation)


def test_forward():
    assert math.isnan(pwflat.forward(0, [], []))
    assert pwflat.forward(0, [], [], .5) == .5
    assert pwflat.forward(0, T, F) == .1
    assert pwflat.forward(1, T, F) == .1
    assert pwflat.forward(1.1, T, F) == .2
    assert pwflat.forward(2, T, F) == .2
    assert pwflat.forward(3, T, F) == .3
    assert math.isnan(pwflat.forward(3.1, T, F))
    assert pwflat.forward(3.1, T, F, .4) == .4
    assert math.isnan(pwflat.forward(-1, T, F))


def test_integral():
    assert pwflat.integral(0, T, F) == 0
    assert pwflat.integral(1, T, F) == .1
    assert pwflat.integral(1.5, T, F) == .2
    assert pwflat.integral(2, T, F) == .1 + .2
    assert pwflat.integral(3, T, F) == .1 + .2 + .3
    assert math.isnan(pwflat.integral(3.5, T, F))
    assert pwflat.integral(4, T, F, .4) == pytest.approx(1.0)
    assert math.isnan(pwflat.integral(-1, T, F))


def test_discount_and_spot():
    assert pwflat.discount(0, T, F) == 1
    assert pwflat.discount(2, T, F) == math.exp(-(.1 + .2))
    assert pwflat.spot(0, T, F) == .1
    assert pwflat.spot(0.5, T, F) == .1
    assert pwflat.spot(2, T, F) == pytest.approx(.15)
    assert math.isnan(pwflat.spot(-0.5, T, F))
    assert pwflat.spot(7, [], [], .03) == .03


def test_discount_overflow():
    assert pwflat.discount(1, [], [], -1e308) == math.inf


def test_curve_queries_match_free_functions():
    curve = _curve(.4)
    for u in [0, .5, 1, 1.5, 2, 2.5, 3, 4]:
        assert curve.forward(u) == pwflat.forward(u, T, F, .4)
        assert curve(u) == curve.forward(u)
        assert curve.discount(u) == pwflat.discount(u, T, F, .4)
        assert curve.spot(u) == pwflat.spot(u, T, F, .4)


def test_curve_construction_checks():
    with pytest.raises(ShapeMismatchError):
        Curve([1, 2], [.1])
    with pytest.raises(InvalidArgumentError):
        Curve([2, 1], [.1, .2])
    with pytest.raises(InvalidArgumentError):
        Curve([0, 1], [.1, .2])
    with pytest.raises(InvalidArgumentError):
        CurveView([1, 1], [.1, .2])


def test_push_back():
    curve = Curve()
    assert curve.size == 0
    assert curve.back() == (0.0, 0.0)
    assert curve.push_back(1, .1).push_back(2, .2) is curve
    assert curve.back() == (2, .2)
    assert len(curve) == 2
    with pytest.raises(InvalidArgumentError):
        curve.push_back(2, .3)
    with pytest.raises(InvalidArgumentError):
        Curve().push_back(0, .1)


def test_curve_copies_points():
    times, rates = list(T), list(F)
    curve = Curve(times, rates)
    times.append(4)
    rates.append(.4)
    assert len(curve) == 3


def test_view_borrows_points():
    times, rates = list(T), list(F)
    view = CurveView(times, rates)
    times.append(4)
    rates.append(.4)
    assert view.forward(4) == .4


def test_extrapolate_does_not_modify_curve():
    curve = _curve()
    probe = extrapolate(curve, .5)
    assert probe.forward(10) == .5
    assert probe.discount(2) == curve.discount(2)
    assert math.isnan(curve.forward(10))
    assert curve == _curve()


def test_extrapolation_setter_and_constant():
    curve = _curve()
    curve.extrapolation = .05
    assert curve.forward(5) == .05
    flat = Curve.constant(.03)
    assert flat.discount(2) == pytest.approx(math.exp(-.06))


def test_equality_and_copy():
    curve = _curve()
    other = curve.copy()
    assert other == curve
    other.push_back(4, .4)
    assert other != curve
    assert len(curve) == 3


def test_to_frame_and_discount_many():
    curve = _curve()
    frame = curve.to_frame()
    assert list(frame.columns) == ["time", "forward", "discount", "spot"]
    assert len(frame) == 3
    assert frame["discount"].iloc[1] == pytest.approx(math.exp(-.3))
    dfs = curve.discount_many([0, 1, 2])
    assert dfs[0] == 1
    assert dfs[2] == pytest.approx(math.exp(-.3))


def test_discount_is_exp_of_minus_integral():
    for curve in [_curve(.4), Curve.constant(.03), Curve([.5, 4], [-.01, .02], .025)]:
        for u in [0, .25, .5, 1, 1.5, 2, 3, 3.5, 4, 7.5, 30]:
            assert curve.discount(u) == math.exp(-curve.integral(u))


def test_queries_are_repeatable():
    curve = _curve(.4)
    for u in [0, .5, 1, 2.5, 3, 10]:
        first = (curve.forward(u), curve.integral(u), curve.discount(u), curve.spot(u))
        second = (curve.forward(u), curve.integral(u), curve.discount(u), curve.spot(u))
        assert first == second
    assert curve == _curve(.4)
