from __future__ import annotations

import math
from typing import Any, Union
from typing_extensions import TypeAliasType

from jss.errors import UnsupportedValueType
from jss.rules import is_block

__all__ = ["Value", "Primitive", "display"]


def display(value: Any) -> str:
    """Stringify a leaf value the way it is written in a declaration.

    Booleans are lower cased, integral floats lose their fraction, and lists
    (or tuples) are flattened and joined by a single space.
    """
    if isinstance(value, Value):
        return display(value.inner)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise UnsupportedValueType(value, f"non finite number has no css form: {value!r}")
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, str):
        return value
    if is_block(value):
        raise UnsupportedValueType(value, f"a block of properties can't be used as a value: {value!r}")
    if isinstance(value, (list, tuple)):
        return " ".join(display(v) for v in value)
    raise UnsupportedValueType(value)


class Value:
    """Wraps a primitive so that bools, numbers, strings and lists of them can be used
    interchangeably as css values.

    Args
        inner (Primitive): The wrapped primitive. Tuples are stored as lists.
    """

    __slots__ = ("inner",)

    def __init__(self, inner: Primitive) -> None:
        self.inner = Value._unwrap_(inner)

    @staticmethod
    def _unwrap_(value: Any) -> Any:
        if isinstance(value, Value):
            return value.inner
        if is_block(value):
            raise UnsupportedValueType(value, f"a block of properties can't be used as a value: {value!r}")
        if isinstance(value, (list, tuple)):
            return [Value._unwrap_(v) for v in value]
        if isinstance(value, (bool, int, float, str)):
            return value
        raise UnsupportedValueType(value)

    @staticmethod
    def new(value: Primitive) -> Value:
        return value if isinstance(value, Value) else Value(value)

    def is_list(self) -> bool:
        return isinstance(self.inner, list)

    def append(self, value: Primitive):
        """Push onto the list, turning a single value into a two element list first."""
        value = Value._unwrap_(value)
        if self.is_list():
            self.inner.append(value)
        else:
            self.inner = [self.inner, value]

    def as_str(self) -> str | None:
        """The string if this wraps one. Use `str()` to display any other value."""
        return self.inner if isinstance(self.inner, str) else None

    def as_bool(self) -> bool | None:
        return self.inner if isinstance(self.inner, bool) else None

    def as_float(self) -> float | None:
        if isinstance(self.inner, (int, float)) and not isinstance(self.inner, bool):
            return float(self.inner)
        return None

    def as_int(self) -> int | None:
        if isinstance(self.inner, (int, float)) and not isinstance(self.inner, bool):
            return int(self.inner)
        return None

    def __iter__(self):
        if self.is_list():
            yield from (Value(v) for v in self.inner)
        else:
            yield self

    def __len__(self) -> int:
        return len(self.inner) if self.is_list() else 1

    def __eq__(self, __value: object) -> bool:
        if isinstance(__value, Value):
            return type(self.inner) is type(__value.inner) and self.inner == __value.inner
        return False

    def __hash__(self) -> int:
        return hash(display(self.inner))

    def __repr__(self) -> str:
        return f"Value({self.inner!r})"

    def __str__(self) -> str:
        return display(self.inner)


Primitive = TypeAliasType(
    "Primitive",
    Union[bool, int, float, str, Value, list["Primitive"], tuple["Primitive", ...]],
)
