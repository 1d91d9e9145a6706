"""Scalar arithmetic built-ins of the runtime.

Booleans, integers and reals are each handled by the rules of their own
type. Binary operations promote their operands to the wider of the two
kinds (bool < integer < single precision < double precision). Integer
results are Python ints, double precision results are Python floats and
single precision results are ``numpy.float32`` values.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Union

import numpy as np

from marcort.types import ScalarType

Scalar = Union[bool, int, float, np.generic]


class _Kind(IntEnum):
    BOOL = 0
    INT = 1
    FLOAT32 = 2
    FLOAT64 = 3


_KINDS = {
    ScalarType.BOOL: _Kind.BOOL,
    ScalarType.INT32: _Kind.INT,
    ScalarType.UINT32: _Kind.INT,
    ScalarType.INT64: _Kind.INT,
    ScalarType.UINT64: _Kind.INT,
    ScalarType.FLOAT32: _Kind.FLOAT32,
    ScalarType.FLOAT64: _Kind.FLOAT64,
}

_FLOAT_DTYPES = {_Kind.FLOAT32: np.float32, _Kind.FLOAT64: np.float64}


def _kind(value: object) -> _Kind:
    try:
        return _KINDS[ScalarType.from_value(value)]
    except KeyError:
        raise TypeError(f"expected a scalar value, got {value!r}") from None


def _common(x: object, y: object) -> _Kind:
    return max(_kind(x), _kind(y))


def _cast(kind: _Kind, value: object) -> Scalar:
    if kind is _Kind.BOOL:
        return bool(value)
    if kind is _Kind.INT:
        return int(value)
    if kind is _Kind.FLOAT32:
        return np.float32(value)
    return float(value)


def _real_pair(kind: _Kind, x: object, y: object):
    dtype = _FLOAT_DTYPES[kind]
    return dtype(x), dtype(y)


def _check_divisor(y: object) -> None:
    if not y:
        raise ZeroDivisionError("division by zero")


def abs_value(value: Scalar) -> Scalar:
    """Absolute value; booleans are returned unchanged."""
    kind = _kind(value)
    if kind is _Kind.BOOL:
        return bool(value)
    return _cast(kind, abs(value))


def ceil(value: Scalar) -> Scalar:
    """Smallest integral value not below the argument, in the argument's type."""
    kind = _kind(value)
    if kind in (_Kind.BOOL, _Kind.INT):
        return _cast(kind, value)
    return _cast(kind, np.ceil(_FLOAT_DTYPES[kind](value)))


def floor(value: Scalar) -> Scalar:
    """Largest integral value not above the argument, in the argument's type."""
    kind = _kind(value)
    if kind in (_Kind.BOOL, _Kind.INT):
        return _cast(kind, value)
    return _cast(kind, np.floor(_FLOAT_DTYPES[kind](value)))


def integer(value: Scalar) -> Scalar:
    """Largest integral value not above the argument, in the argument's type."""
    return floor(value)


def div(x: Scalar, y: Scalar) -> Scalar:
    """Quotient truncated toward zero.

    Integer and boolean division by zero raise ZeroDivisionError; real
    division follows IEEE rules.
    """
    kind = _common(x, y)
    if kind is _Kind.BOOL:
        _check_divisor(y)
        return bool(x)
    if kind is _Kind.INT:
        a, b = int(x), int(y)
        _check_divisor(b)
        quotient = abs(a) // abs(b)
        return -quotient if (a < 0) != (b < 0) else quotient
    a, b = _real_pair(kind, x, y)
    with np.errstate(all="ignore"):
        return _cast(kind, np.trunc(a / b))


def mod(x: Scalar, y: Scalar) -> Scalar:
    """Modulus ``x - floor(x / y) * y``, taking the sign of the divisor."""
    kind = _common(x, y)
    if kind is _Kind.BOOL:
        _check_divisor(y)
        return False
    if kind is _Kind.INT:
        a, b = int(x), int(y)
        _check_divisor(b)
        return a % b
    a, b = _real_pair(kind, x, y)
    with np.errstate(all="ignore"):
        return _cast(kind, a - np.floor(a / b) * b)


def rem(x: Scalar, y: Scalar) -> Scalar:
    """Remainder of the truncated division, taking the sign of the dividend."""
    kind = _common(x, y)
    if kind is _Kind.BOOL:
        _check_divisor(y)
        return False
    if kind is _Kind.INT:
        a, b = int(x), int(y)
        _check_divisor(b)
        remainder = abs(a) % abs(b)
        return -remainder if a < 0 else remainder
    a, b = _real_pair(kind, x, y)
    with np.errstate(all="ignore"):
        return _cast(kind, np.fmod(a, b))


def max_scalars(x: Scalar, y: Scalar) -> Scalar:
    """The larger of two values; for booleans their disjunction.

    When the values are unordered (NaN) the first one is returned.
    """
    kind = _common(x, y)
    if kind is _Kind.BOOL:
        return bool(x) or bool(y)
    a, b = _cast(kind, x), _cast(kind, y)
    return b if a < b else a


def min_scalars(x: Scalar, y: Scalar) -> Scalar:
    """The smaller of two values; for booleans their conjunction.

    When the values are unordered (NaN) the first one is returned.
    """
    kind = _common(x, y)
    if kind is _Kind.BOOL:
        return bool(x) and bool(y)
    a, b = _cast(kind, x), _cast(kind, y)
    return b if b < a else a


def sign(value: Scalar) -> int:
    """1 for positive values, -1 for negative ones, 0 for zero.

    Booleans give 1 when true and 0 when false; NaN gives -1.
    """
    kind = _kind(value)
    if kind is _Kind.BOOL:
        return 1 if value else 0
    if value == 0:
        return 0
    if value > 0:
        return 1
    return -1