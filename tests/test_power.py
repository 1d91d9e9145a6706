import math

import numpy as np
import pytest

from marcort.power import power
from marcort.types import ScalarType

NUMERIC = [ScalarType.INT32, ScalarType.INT64, ScalarType.FLOAT32, ScalarType.FLOAT64]


@pytest.mark.parametrize("result", NUMERIC)
@pytest.mark.parametrize("base", [2, 3, -4, 7])
def test_exponent_one_gives_base(base, result):
    assert power(base, 1, result) == base


@pytest.mark.parametrize("result", NUMERIC)
@pytest.mark.parametrize("base", [2, -3, 2.5])
def test_exponent_zero_gives_one(base, result):
    assert power(base, 0, result) == 1


@pytest.mark.parametrize("result", NUMERIC)
def test_zero_base_with_positive_exponent(result):
    assert power(0, 3, result) == 0
    assert power(0.0, 2.0, result) == 0


@pytest.mark.parametrize("exponent", [0, -1, -2.5])
def test_zero_base_needs_positive_exponent(exponent):
    with pytest.raises(ValueError):
        power(0, exponent, ScalarType.FLOAT64)


def test_integer_powers_are_exact():
    assert power(3, 4, ScalarType.INT64) == 3**4
    assert power(-2, 5, ScalarType.INT32) == (-2) ** 5


def test_integer_result_is_truncated():
    assert power(2, -1, ScalarType.INT64) == 0


def test_square_root_through_power():
    root = power(4.0, 0.5, ScalarType.FLOAT64)
    assert root * root == pytest.approx(4.0)
    assert isinstance(root, float)


def test_single_precision_result():
    result = power(np.float32(2.0), np.float32(3.0), ScalarType.FLOAT32)
    assert isinstance(result, np.float32)
    assert result == np.float32(2.0) ** 3


def test_negative_base_with_fractional_exponent():
    assert math.isnan(power(-8.0, 0.5, ScalarType.FLOAT64))
    with pytest.raises(ValueError):
        power(-8.0, 0.5, ScalarType.INT64)


def test_integer_overflow_raises():
    with pytest.raises(OverflowError):
        power(10, 20, ScalarType.INT32)
    with pytest.raises(OverflowError):
        power(10.0, 400.0, ScalarType.INT64)


def test_boolean_base():
    assert power(True, 5, ScalarType.BOOL) is True
    assert power(False, 3, ScalarType.BOOL) is False
    assert power(True, -2, ScalarType.FLOAT64) == 1.0
    assert power(False, 2, ScalarType.INT32) == 0
    assert power(True, True, ScalarType.INT64) == 1


@pytest.mark.parametrize("exponent", [0, -1, False])
def test_false_base_needs_positive_exponent(exponent):
    with pytest.raises(ValueError):
        power(False, exponent, ScalarType.BOOL)


def test_boolean_exponent():
    assert power(5, True, ScalarType.INT32) == 5
    assert power(5, False, ScalarType.INT32) == 1
    assert power(2.5, True, ScalarType.FLOAT64) == 2.5
    with pytest.raises(ValueError):
        power(0, False, ScalarType.INT32)


def test_boolean_result_with_boolean_exponent():
    assert power(-3, True, ScalarType.BOOL) is False
    assert power(3, True, ScalarType.BOOL) is True
    assert power(-3, False, ScalarType.BOOL) is True


def test_boolean_result_tells_non_zero_base():
    assert power(-3, 2, ScalarType.BOOL) is True
    assert power(2.5, -1.0, ScalarType.BOOL) is True
    assert power(0, 2, ScalarType.BOOL) is False
    with pytest.raises(ValueError):
        power(0, 0, ScalarType.BOOL)


@pytest.mark.parametrize("result", [ScalarType.VOID, ScalarType.UINT32])
def test_unsupported_result_type(result):
    with pytest.raises(ValueError):
        power(2, 2, result)


def test_non_scalar_operand():
    with pytest.raises(TypeError):
        power("2", 2, ScalarType.INT64)
    with pytest.raises(TypeError):
        power(2, None, ScalarType.INT64)