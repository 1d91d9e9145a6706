"""Elementary mathematical functions of the runtime.

Each function works in single precision when given ``numpy.float32``
values and in double precision otherwise. Results outside a function's
domain follow IEEE semantics (NaN or infinities) rather than raising,
except for the functions whose argument must be non-negative.
"""

from __future__ import annotations

from numbers import Real
from typing import Callable, Union

import numpy as np

from marcort.types import ScalarType

Number = Union[float, np.floating]


def _is_single(value: object) -> bool:
    return ScalarType.from_value(value) is ScalarType.FLOAT32


def _check_real(value: object) -> None:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (Real, np.number)):
        raise TypeError(f"expected a real number, got {value!r}")


def _apply(ufunc: Callable, *values: object) -> Number:
    for value in values:
        _check_real(value)
    single = all(_is_single(value) for value in values)
    dtype = np.float32 if single else np.float64
    with np.errstate(all="ignore"):
        result = ufunc(*(dtype(value) for value in values))
    return np.float32(result) if single else float(result)


def _require_non_negative(value: object, name: str) -> None:
    _check_real(value)
    # Written so that NaN is rejected as well.
    if not value >= 0:
        raise ValueError(f"{name} requires a non-negative argument, got {value!r}")


def acos(value: Number) -> Number:
    """Arc cosine."""
    return _apply(np.arccos, value)


def asin(value: Number) -> Number:
    """Arc sine."""
    return _apply(np.arcsin, value)


def atan(value: Number) -> Number:
    """Arc tangent."""
    return _apply(np.arctan, value)


def atan2(y: Number, x: Number) -> Number:
    """Arc tangent of y / x, using the signs of both to pick the quadrant."""
    return _apply(np.arctan2, y, x)


def cos(value: Number) -> Number:
    """Cosine."""
    return _apply(np.cos, value)


def cosh(value: Number) -> Number:
    """Hyperbolic cosine."""
    return _apply(np.cosh, value)


def exp(value: Number) -> Number:
    """Base-e exponential."""
    return _apply(np.exp, value)


def ln(value: Number) -> Number:
    """Natural logarithm; the argument must be non-negative."""
    _require_non_negative(value, "ln")
    return _apply(np.log, value)


def log10(value: Number) -> Number:
    """Base-10 logarithm; the argument must be non-negative."""
    _require_non_negative(value, "log10")
    return _apply(np.log10, value)


def sin(value: Number) -> Number:
    """Sine."""
    return _apply(np.sin, value)


def sinh(value: Number) -> Number:
    """Hyperbolic sine."""
    return _apply(np.sinh, value)


def sqrt(value: Number) -> Number:
    """Square root; the argument must be non-negative."""
    _require_non_negative(value, "sqrt")
    return _apply(np.sqrt, value)


def tan(value: Number) -> Number:
    """Tangent."""
    return _apply(np.tan, value)


def tanh(value: Number) -> Number:
    """Hyperbolic tangent."""
    return _apply(np.tanh, value)