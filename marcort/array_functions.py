"""Array built-ins of the runtime.

Arrays are numpy ndarrays of one of the runtime element types. Functions
that fill an array write into it in place. Functions that reduce an array
return an ``int`` for integer arrays, a ``bool`` for boolean arrays, a
``float`` for double precision arrays and a ``numpy.float32`` for single
precision ones. Elements are visited in row-major order.
"""

from __future__ import annotations

import functools
import operator
from typing import Callable, Union

import numpy as np

from marcort.types import ScalarType

Scalar = Union[bool, int, float, np.floating]

_SUPPORTED_DTYPES = frozenset(
    member.dtype for member in ScalarType if member is not ScalarType.VOID
)


def _check_array(array: object, name: str = "array") -> None:
    if not isinstance(array, np.ndarray):
        raise TypeError(f"{name} must be a numpy array, got {type(array).__name__}")
    if array.dtype not in _SUPPORTED_DTYPES:
        raise TypeError(f"{name} has unsupported element type {array.dtype}")


def _check_square_like(array: np.ndarray, name: str) -> None:
    if array.ndim == 0:
        raise ValueError(f"{name} must have at least one dimension")
    if any(size != array.shape[0] for size in array.shape):
        raise ValueError(f"{name} must have all dimensions of equal size")


def _check_rank(array: np.ndarray, rank: int, name: str) -> None:
    if array.ndim != rank:
        raise ValueError(f"{name} must have rank {rank}, got {array.ndim}")


def _to_scalar(value: object, dtype: np.dtype) -> Scalar:
    if dtype == np.bool_:
        return bool(value)
    if dtype.kind in "iu":
        return int(value)
    if dtype == np.float32:
        return np.float32(value)
    return float(value)


def _fold(array: np.ndarray, op: Callable, initial: int) -> Scalar:
    with np.errstate(all="ignore"):
        result = functools.reduce(op, array.flat, array.dtype.type(initial))
    return _to_scalar(result, array.dtype)


def _diagonal_positions(array: np.ndarray) -> tuple:
    positions = np.arange(array.shape[0])
    return (positions,) * array.ndim


def diagonal(destination: np.ndarray, values: np.ndarray) -> None:
    """Place ``values`` on the diagonal of ``destination`` and zero the rest.

    The destination must have all its dimensions equal to the number of
    values, which must form a one-dimensional array.
    """
    _check_array(destination, "destination")
    _check_array(values, "values")
    _check_square_like(destination, "destination")
    _check_rank(values, 1, "values")
    if destination.shape[0] != values.shape[0]:
        raise ValueError(
            f"destination size {destination.shape[0]} does not match "
            f"the {values.shape[0]} values"
        )
    source = values.copy()
    destination[...] = 0
    destination[_diagonal_positions(destination)] = source


def identity(array: np.ndarray) -> None:
    """Turn a square-like array into an identity: ones on the diagonal."""
    _check_array(array)
    _check_square_like(array, "array")
    array[...] = 0
    array[_diagonal_positions(array)] = 1


def linspace(array: np.ndarray, start: float, end: float) -> None:
    """Fill a one-dimensional array with equally spaced values.

    The first element gets ``start`` and the last ``end``; values are
    computed in double precision and converted to the element type.
    """
    _check_array(array)
    _check_rank(array, 1, "array")
    count = array.shape[0]
    with np.errstate(all="ignore"):
        step = np.float64(end - start) / (np.float64(count) - 1)
        points = np.float64(start) + np.arange(count, dtype=np.float64) * step
        array[...] = points.astype(array.dtype)


def max_array(array: np.ndarray) -> Scalar:
    """The largest element; for boolean arrays, whether any is true."""
    _check_array(array)
    if array.dtype == np.bool_:
        return bool(array.any())
    if array.size == 0:
        raise ValueError("max_array of an empty array")
    elements = iter(array.flat)
    best = next(elements)
    for element in elements:
        if best < element:
            best = element
    return _to_scalar(best, array.dtype)


def min_array(array: np.ndarray) -> Scalar:
    """The smallest element; for boolean arrays, whether all are true."""
    _check_array(array)
    if array.dtype == np.bool_:
        return bool(array.all())
    if array.size == 0:
        raise ValueError("min_array of an empty array")
    elements = iter(array.flat)
    best = next(elements)
    for element in elements:
        if element < best:
            best = element
    return _to_scalar(best, array.dtype)


def ones(array: np.ndarray) -> None:
    """Set every element to one."""
    _check_array(array)
    array[...] = 1


def zeros(array: np.ndarray) -> None:
    """Set every element to zero."""
    _check_array(array)
    array[...] = 0


def product(array: np.ndarray) -> Scalar:
    """Product of all the elements; for boolean arrays, whether all are true.

    The product is accumulated in the element type, starting from one.
    """
    _check_array(array)
    if array.dtype == np.bool_:
        return bool(array.all())
    return _fold(array, operator.mul, 1)


def sum_array(array: np.ndarray) -> Scalar:
    """Sum of all the elements; for boolean arrays, whether any is true.

    The sum is accumulated in the element type, starting from zero.
    """
    _check_array(array)
    if array.dtype == np.bool_:
        return bool(array.any())
    return _fold(array, operator.add, 0)


def symmetric(destination: np.ndarray, source: np.ndarray) -> None:
    """Fill ``destination`` with the symmetric version of ``source``.

    The upper triangle of the source (diagonal included) is mirrored; the
    elements below its diagonal are discarded.
    """
    _check_array(destination, "destination")
    _check_array(source, "source")
    _check_rank(destination, 2, "destination")
    _check_rank(source, 2, "source")
    if destination.shape != source.shape:
        raise ValueError(
            f"matrices differ in shape: {destination.shape} and {source.shape}"
        )
    if source.shape[0] != source.shape[1]:
        raise ValueError(f"matrices must be square, got {source.shape}")
    rows, columns = np.triu_indices(source.shape[0])
    upper = source[rows, columns].copy()
    destination[rows, columns] = upper
    destination[columns, rows] = upper


def transpose(destination: np.ndarray, source: np.ndarray) -> None:
    """Write the transpose of the ``source`` matrix into ``destination``."""
    _check_array(destination, "destination")
    _check_array(source, "source")
    _check_rank(destination, 2, "destination")
    _check_rank(source, 2, "source")
    if destination.shape != source.shape[::-1]:
        raise ValueError(
            f"destination shape {destination.shape} is not the transpose "
            f"of {source.shape}"
        )
    destination[...] = source.T