"""Runtime value types and the naming scheme of runtime entry points."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import numpy as np

PREFIX = "_M"


class ScalarType(Enum):
    """Scalar types understood by the runtime, with their mangling codes."""

    VOID = ("void", "void")
    BOOL = ("bool", "i1")
    INT32 = ("int32", "i32")
    UINT32 = ("uint32", "i32")
    INT64 = ("int64", "i64")
    UINT64 = ("uint64", "i64")
    FLOAT32 = ("float32", "f32")
    FLOAT64 = ("float64", "f64")

    def __init__(self, label: str, code: str) -> None:
        self.label = label
        self.code = code

    @property
    def mangled(self) -> str:
        return f"_{self.code}"

    @property
    def dtype(self) -> Optional[np.dtype]:
        """The numpy dtype holding values of this type, or None for VOID."""
        if self is ScalarType.VOID:
            return None
        return np.dtype(np.bool_ if self is ScalarType.BOOL else self.label)

    @classmethod
    def from_value(cls, value: object) -> "ScalarType":
        """Return the runtime type of a Python or numpy scalar."""
        if value is None:
            return cls.VOID
        if isinstance(value, (bool, np.bool_)):
            return cls.BOOL
        if isinstance(value, np.generic):
            try:
                return _BY_DTYPE[value.dtype]
            except KeyError:
                raise TypeError(f"unsupported scalar dtype: {value.dtype}") from None
        if isinstance(value, int):
            return cls.INT64
        if isinstance(value, float):
            return cls.FLOAT64
        raise TypeError(f"unsupported scalar value: {value!r}")


_BY_DTYPE = {
    member.dtype: member for member in ScalarType if member is not ScalarType.VOID
}


@dataclass(frozen=True)
class ArrayType:
    """An array whose elements have a scalar type."""

    element: ScalarType

    def __post_init__(self) -> None:
        if self.element is ScalarType.VOID:
            raise ValueError("arrays of void are not allowed")

    @property
    def mangled(self) -> str:
        return f"_a{self.element.code}"


@dataclass(frozen=True)
class PointerType:
    """A pointer to a value of a scalar type (void included)."""

    element: ScalarType

    @property
    def mangled(self) -> str:
        return f"_p{self.element.code}"


RuntimeType = Union[ScalarType, ArrayType, PointerType]


def mangle(name: str, result: RuntimeType, *args: RuntimeType) -> str:
    """Build the symbol name of a runtime function from its signature."""
    if not isinstance(name, str) or not name:
        raise ValueError("function name must be a non-empty string")
    parts = [PREFIX, name]
    for item in (result, *args):
        if not isinstance(item, (ScalarType, ArrayType, PointerType)):
            raise TypeError(f"not a runtime type: {item!r}")
        parts.append(item.mangled)
    return "".join(parts)