"""Array copying helpers of the runtime."""

from __future__ import annotations

import numpy as np

from marcort.types import ScalarType

_SUPPORTED_DTYPES = frozenset(
    member.dtype for member in ScalarType if member is not ScalarType.VOID
)


def _check_array(array: object, name: str) -> None:
    if not isinstance(array, np.ndarray):
        raise TypeError(f"{name} must be a numpy array, got {type(array).__name__}")


def clone(destination: np.ndarray, source: np.ndarray) -> None:
    """Copy the elements of ``source`` into ``destination`` in row-major order.

    The two arrays may differ in shape and element type but must hold the
    same number of elements; values are converted to the destination type.
    """
    _check_array(destination, "destination")
    _check_array(source, "source")
    for name, array in (("destination", destination), ("source", source)):
        if array.dtype not in _SUPPORTED_DTYPES:
            raise TypeError(f"{name} has unsupported element type {array.dtype}")
    if destination.size != source.size:
        raise ValueError(
            f"arrays differ in size: {destination.size} and {source.size}"
        )
    flat = source.reshape(-1).copy()
    destination[...] = flat.reshape(destination.shape)


def memref_copy(source: np.ndarray, destination: np.ndarray) -> None:
    """Copy every element of ``source`` into ``destination`` unchanged.

    Both arrays must have the same shape and element type; their layouts
    (strides) may differ. Nothing is copied when a dimension is empty.
    """
    _check_array(source, "source")
    _check_array(destination, "destination")
    if source.dtype != destination.dtype:
        raise TypeError(
            f"element types differ: {source.dtype} and {destination.dtype}"
        )
    if source.shape != destination.shape:
        raise ValueError(
            f"arrays differ in shape: {source.shape} and {destination.shape}"
        )
    if source.size == 0:
        return
    np.copyto(destination, source)