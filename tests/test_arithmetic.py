import math

import numpy as np
import pytest

from marcort import arithmetic


@pytest.mark.parametrize("value", [3, 2.5, np.float32(1.5)])
def test_abs_is_symmetric(value):
    assert arithmetic.abs_value(-value) == value
    assert arithmetic.abs_value(value) == value


def test_abs_keeps_single_precision():
    result = arithmetic.abs_value(np.float32(-1.5))
    assert result == np.float32(1.5)
    assert np.asarray(result).dtype == np.dtype(np.float32)


def test_abs_of_booleans_is_identity():
    assert arithmetic.abs_value(True) is True
    assert arithmetic.abs_value(False) is False


@pytest.mark.parametrize("value", [7, -7, 0])
def test_rounding_of_integers_is_identity(value):
    assert arithmetic.ceil(value) == value
    assert arithmetic.floor(value) == value
    assert arithmetic.integer(value) == value


@pytest.mark.parametrize("value", [2.5, -2.5, 0.25, -0.75])
def test_floor_and_ceil_bracket_value(value):
    low = arithmetic.floor(value)
    high = arithmetic.ceil(value)
    assert low <= value <= high
    assert high - low == 1.0
    assert low == math.trunc(low)
    assert isinstance(low, float)
    assert arithmetic.integer(value) == low


def test_floor_keeps_single_precision():
    result = arithmetic.floor(np.float32(2.5))
    assert isinstance(result, np.float32)
    assert result <= np.float32(2.5)


@pytest.mark.parametrize("x, y", [(7, 2), (-7, 2), (7, -2), (-7, -2), (6, 3)])
def test_integer_div_and_rem_identity(x, y):
    q = arithmetic.div(x, y)
    r = arithmetic.rem(x, y)
    assert q * y + r == x
    assert abs(r) < abs(y)
    assert r == 0 or (r > 0) == (x > 0)
    assert abs(q) * abs(y) <= abs(x)


def test_div_truncates_toward_zero():
    assert arithmetic.div(-7, 2) == -3


@pytest.mark.parametrize("x, y", [(7.5, 2.0), (-7.5, 2.0), (7.5, -2.0)])
def test_real_div_and_rem_identity(x, y):
    q = arithmetic.div(x, y)
    r = arithmetic.rem(x, y)
    assert q == math.trunc(q)
    assert q * y + r == pytest.approx(x)
    assert r == 0 or (r > 0) == (x > 0)


@pytest.mark.parametrize("x, y", [(7, 3), (-7, 3), (7, -3), (-7.5, 2.0), (7.5, -2.0)])
def test_mod_takes_sign_of_divisor(x, y):
    m = arithmetic.mod(x, y)
    assert abs(m) < abs(y)
    assert m == 0 or (m > 0) == (y > 0)
    quotient = (x - m) / y
    assert quotient == pytest.approx(round(quotient))


def test_mod_of_negative_integer():
    assert arithmetic.mod(-7, 3) == 2


@pytest.mark.parametrize("function", [arithmetic.div, arithmetic.mod, arithmetic.rem])
def test_integer_division_by_zero_raises(function):
    with pytest.raises(ZeroDivisionError):
        function(1, 0)


@pytest.mark.parametrize("function", [arithmetic.div, arithmetic.mod, arithmetic.rem])
def test_boolean_division_by_false_raises(function):
    with pytest.raises(ZeroDivisionError):
        function(True, False)


def test_boolean_division():
    assert arithmetic.div(False, True) is False
    assert arithmetic.div(True, True) is True
    assert arithmetic.mod(True, True) is False
    assert arithmetic.rem(True, True) is False


def test_real_division_by_zero_follows_ieee():
    assert arithmetic.div(1.0, 0.0) == math.inf
    assert math.isnan(arithmetic.rem(1.0, 0.0))


def test_single_precision_results():
    quotient = arithmetic.div(np.float32(7.5), np.float32(2.0))
    modulo = arithmetic.mod(np.float32(7.5), np.float32(2.0))
    assert quotient == np.float32(3.0)
    assert modulo == np.float32(1.5)
    assert np.asarray(quotient).dtype == np.dtype(np.float32)
    assert np.asarray(modulo).dtype == np.dtype(np.float32)


@pytest.mark.parametrize("x, y", [(3, 5), (5, 3), (-1.5, 2.5), (4, 4)])
def test_max_and_min_pick_operands(x, y):
    high = arithmetic.max_scalars(x, y)
    low = arithmetic.min_scalars(x, y)
    assert high in (x, y) and low in (x, y)
    assert high >= x and high >= y
    assert low <= x and low <= y


def test_boolean_max_and_min_are_or_and():
    assert arithmetic.max_scalars(True, False) is True
    assert arithmetic.max_scalars(False, False) is False
    assert arithmetic.min_scalars(True, False) is False
    assert arithmetic.min_scalars(True, True) is True


def test_unordered_values_return_first_operand():
    assert math.isnan(arithmetic.max_scalars(math.nan, 1.0))
    assert arithmetic.max_scalars(1.0, math.nan) == 1.0
    assert math.isnan(arithmetic.min_scalars(math.nan, 1.0))
    assert arithmetic.min_scalars(1.0, math.nan) == 1.0


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, 1),
        (False, 0),
        (5, 1),
        (-5, -1),
        (0, 0),
        (0.0, 0),
        (np.float32(-0.5), -1),
        (2.5, 1),
        (math.nan, -1),
    ],
)
def test_sign(value, expected):
    assert arithmetic.sign(value) == expected


def test_non_scalar_rejected():
    with pytest.raises(TypeError):
        arithmetic.abs_value("3")
    with pytest.raises(TypeError):
        arithmetic.div(None, 2)