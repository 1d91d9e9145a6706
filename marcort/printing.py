"""Textual rendering of runtime scalars and arrays.

Booleans are written as ``true`` or ``false``, integers in decimal and
reals in scientific notation with six fractional digits. Arrays are
written as nested, comma separated lists in brackets, one level per
dimension, with their elements in row-major order.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

import numpy as np

from marcort.types import ScalarType

Scalar = Union[bool, int, float, np.generic]

_INTEGER_TYPES = frozenset(
    {ScalarType.INT32, ScalarType.UINT32, ScalarType.INT64, ScalarType.UINT64}
)
_REAL_TYPES = frozenset({ScalarType.FLOAT32, ScalarType.FLOAT64})
_SUPPORTED_DTYPES = frozenset(
    member.dtype for member in ScalarType if member is not ScalarType.VOID
)


def format_scalar(value: Scalar) -> str:
    """Render a single scalar value."""
    kind = ScalarType.from_value(value)
    if kind is ScalarType.BOOL:
        return "true" if value else "false"
    if kind in _INTEGER_TYPES:
        return str(int(value))
    if kind in _REAL_TYPES:
        return f"{float(value):e}"
    raise TypeError(f"cannot format value {value!r}")


def _format_nested(array: np.ndarray) -> str:
    if array.ndim == 1:
        items = (format_scalar(element) for element in array)
    else:
        items = (_format_nested(sub_array) for sub_array in array)
    return "[" + ", ".join(items) + "]"


def format_array(array: np.ndarray) -> str:
    """Render an array as nested bracketed lists.

    An array without dimensions is rendered as its only element.
    """
    if not isinstance(array, np.ndarray):
        raise TypeError(f"expected a numpy array, got {type(array).__name__}")
    if array.dtype not in _SUPPORTED_DTYPES:
        raise TypeError(f"unsupported element type {array.dtype}")
    if array.ndim == 0:
        return format_scalar(array[()])
    return _format_nested(array)


def format_value(value: Union[Scalar, np.ndarray]) -> str:
    """Render a scalar or an array."""
    if isinstance(value, np.ndarray):
        return format_array(value)
    return format_scalar(value)


def print_value(
    value: Union[Scalar, np.ndarray], stream: Optional[TextIO] = None
) -> None:
    """Write a scalar or an array, followed by a newline, and flush."""
    out = sys.stdout if stream is None else stream
    out.write(format_value(value) + "\n")
    out.flush()