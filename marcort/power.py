"""Exponentiation with an explicit result type."""

from __future__ import annotations

import math
from typing import Union

import numpy as np

from marcort.types import ScalarType

Scalar = Union[bool, int, float, np.generic]

_RESULT_TYPES = frozenset(
    {
        ScalarType.BOOL,
        ScalarType.INT32,
        ScalarType.INT64,
        ScalarType.FLOAT32,
        ScalarType.FLOAT64,
    }
)

_INT_LIMITS = {
    ScalarType.INT32: (-(2**31), 2**31 - 1),
    ScalarType.INT64: (-(2**63), 2**63 - 1),
}

_INTEGER_TYPES = frozenset(
    {ScalarType.INT32, ScalarType.UINT32, ScalarType.INT64, ScalarType.UINT64}
)


def _operand(value: object) -> Union[bool, int, float]:
    kind = ScalarType.from_value(value)
    if kind is ScalarType.VOID:
        raise TypeError("expected a scalar value, got None")
    if kind is ScalarType.BOOL:
        return bool(value)
    if kind in _INTEGER_TYPES:
        return int(value)
    return float(value)


def _bool_base(base: bool, exponent: Union[bool, int, float]) -> bool:
    if base:
        return True
    if not exponent > 0:
        raise ValueError("a false base requires a positive exponent")
    return False


def _bool_exponent(base: Union[int, float], exponent: bool) -> Union[int, float]:
    if exponent:
        return base
    if base == 0:
        raise ValueError("a zero base requires a non-zero exponent")
    return 1


def _raise(base: Union[int, float], exponent: Union[int, float]) -> Union[int, float]:
    if base == 0:
        if not exponent > 0:
            raise ValueError("a zero base requires a positive exponent")
        return base
    if exponent == 0:
        return 1
    if isinstance(base, int) and isinstance(exponent, int) and exponent > 0:
        return base**exponent
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(base), np.float64(exponent)))


def _convert(value: Union[int, float], result: ScalarType) -> Scalar:
    if result in _INT_LIMITS:
        if isinstance(value, float):
            if math.isnan(value):
                raise ValueError("the power is not a real number")
            if math.isinf(value):
                raise OverflowError("the power does not fit the result type")
            value = math.trunc(value)
        low, high = _INT_LIMITS[result]
        if not low <= value <= high:
            raise OverflowError("the power does not fit the result type")
        return int(value)
    if result is ScalarType.FLOAT32:
        with np.errstate(all="ignore"):
            return np.float32(value)
    return float(value)


def power(base: Scalar, exponent: Scalar, result: ScalarType) -> Scalar:
    """Raise ``base`` to ``exponent``, giving a value of type ``result``.

    A zero (or false) base needs a positive exponent, otherwise ValueError
    is raised. Integer results are truncated toward zero. Boolean results
    tell whether the power is non-zero (positive, for a boolean exponent).
    """
    if result not in _RESULT_TYPES:
        raise ValueError(f"unsupported result type: {result!r}")

    b = _operand(base)
    e = _operand(exponent)

    if isinstance(b, bool):
        truth = _bool_base(b, e)
        return truth if result is ScalarType.BOOL else _convert(int(truth), result)

    if isinstance(e, bool):
        value = _bool_exponent(b, e)
        return value > 0 if result is ScalarType.BOOL else _convert(value, result)

    if result is ScalarType.BOOL:
        if b == 0 and e == 0:
            raise ValueError("zero raised to zero is undefined")
        return b != 0

    return _convert(_raise(b, e), result)