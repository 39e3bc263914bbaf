import math

import pytest

from linhvm.mathpkg import (
    get_math_constant,
    get_math_constants,
    get_math_function,
    get_math_functions,
)
from linhvm.values import UInt

ALL_FUNCTIONS = [
    "abs", "ceil", "floor", "round", "trunc", "sin", "cos", "tan", "asin",
    "acos", "atan", "radians", "sinh", "cosh", "tanh", "asinh", "acosh",
    "atanh", "sqrt", "cbrt", "exp", "expm1", "log", "log1p", "log10", "log2",
]


def fn(name):
    return get_math_function(name)


def test_constants_values():
    assert get_math_constant("pi") == 3.141592653589793
    assert get_math_constant("e") == 2.718281828459045
    assert get_math_constant("tau") == 6.283185307179586
    assert get_math_constant("phi") == 1.618033988749895


def test_unknown_constant_is_zero():
    assert get_math_constant("nope") == 0.0


def test_constant_names():
    assert sorted(get_math_constants()) == sorted(["pi", "e", "tau", "phi"])


def test_function_names():
    assert sorted(get_math_functions()) == sorted(ALL_FUNCTIONS)


def test_unknown_function_is_none():
    assert get_math_function("pow") is None


@pytest.mark.parametrize("name", ALL_FUNCTIONS)
def test_non_numeric_gives_none(name):
    assert fn(name)("text") is None
    assert fn(name)(None) is None
    assert fn(name)(True) is None


def test_abs_variants():
    assert fn("abs")(-5) == 5
    assert fn("abs")(-2.5) == 2.5
    result = fn("abs")(UInt(7))
    assert isinstance(result, UInt) and result == 7


@pytest.mark.parametrize("name", ["ceil", "floor", "round", "trunc"])
@pytest.mark.parametrize("value", [7, -3, UInt(9)])
def test_rounding_passes_integers_through(name, value):
    result = fn(name)(value)
    assert result == value
    assert type(result) is type(value)


@pytest.mark.parametrize("value", [-2.7, -0.5, 0.3, 1.5, 10.0])
def test_floor_ceil_bracket(value):
    lower = fn("floor")(value)
    upper = fn("ceil")(value)
    assert lower <= value <= upper
    assert upper - lower <= 1.0
    assert isinstance(lower, float) and isinstance(upper, float)


def test_round_half_away_from_zero():
    assert fn("round")(2.5) == 3.0
    assert fn("round")(-2.5) == -3.0


def test_trunc_toward_zero():
    assert fn("trunc")(-2.7) == -2.0


def test_asin_acos_out_of_range():
    for name in ("asin", "acos"):
        assert fn(name)(1.5) is None
        assert fn(name)(-2) is None
        assert fn(name)(UInt(2)) is None


def test_asin_sin_round_trip():
    assert math.isclose(fn("sin")(fn("asin")(0.5)), 0.5)


def test_pythagorean_identity():
    for x in (0.3, 1, UInt(2)):
        s = fn("sin")(x)
        c = fn("cos")(x)
        assert math.isclose(s * s + c * c, 1.0)


def test_sqrt_negative_is_none():
    assert fn("sqrt")(-1) is None
    assert fn("sqrt")(-0.25) is None


def test_sqrt_round_trip():
    for x in (16, 2.0, UInt(81)):
        root = fn("sqrt")(x)
        assert math.isclose(root * root, float(x))


@pytest.mark.parametrize("name", ["log", "log10", "log2"])
def test_logs_reject_non_positive(name):
    assert fn(name)(0) is None
    assert fn(name)(-3) is None
    assert fn(name)(0.0) is None
    assert fn(name)(UInt(0)) is None


def test_log1p_rejects_minus_one():
    assert fn("log1p")(-1) is None
    assert fn("log1p")(-1.5) is None


def test_exp_log_round_trip():
    for x in (0.5, 3, UInt(10)):
        assert math.isclose(fn("exp")(fn("log")(x)), float(x))
        assert math.isclose(fn("expm1")(fn("log1p")(x)), float(x))


def test_log_bases_consistent():
    assert math.isclose(10 ** fn("log10")(1000), 1000.0)
    assert math.isclose(2 ** fn("log2")(64), 64.0)


def test_radians_matches_constants():
    assert math.isclose(fn("radians")(180), get_math_constant("pi"))
    assert math.isclose(fn("radians")(UInt(360)), get_math_constant("tau"))


def test_cbrt_round_trip_and_sign():
    root = fn("cbrt")(27)
    assert math.isclose(root ** 3, 27.0)
    assert fn("cbrt")(-8.0) < 0
    assert math.isclose(fn("cbrt")(-8.0) ** 3, -8.0)


def test_overflow_gives_infinity():
    assert fn("exp")(1000) == math.inf
    assert fn("cosh")(1000.0) == math.inf
    assert fn("sinh")(-1000) == -math.inf


def test_hyperbolic_inverses():
    for x in (0.5, 2, UInt(3)):
        assert math.isclose(fn("asinh")(fn("sinh")(x)), float(x))
        assert math.isclose(fn("acosh")(fn("cosh")(x)), float(x))
    assert math.isclose(fn("atanh")(fn("tanh")(0.5)), 0.5)


def test_atanh_edges_and_acosh_domain():
    assert fn("atanh")(1) == math.inf
    assert fn("atanh")(-1.0) == -math.inf
    assert math.isnan(fn("atanh")(2.0))
    assert math.isnan(fn("acosh")(0.5))


def test_tanh_bounded():
    for x in (-50, -1.0, 0, 1.0, UInt(50)):
        assert -1.0 <= fn("tanh")(x) <= 1.0


def test_atan_tan_round_trip():
    assert math.isclose(fn("tan")(fn("atan")(0.75)), 0.75)