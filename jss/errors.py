from __future__ import annotations
from typing import Any

__all__ = ["JssError", "UnknownProperty", "UnsupportedValueType"]

class JssError(Exception): pass

class UnknownProperty(JssError):
    """A property name that is neither an ident nor a known css name (strict mode only)."""

    key: str
    selector: str | None
    def __init__(self, key: str, selector: str | None = None) -> None:
        self.key = key
        self.selector = selector
        where = f" in selector: `{selector}`" if selector is not None else ""
        super().__init__(f"invalid style name: `{key}`{where}")

class UnsupportedValueType(JssError, TypeError):
    value: Any
    def __init__(self, value: Any, message: str | None = None) -> None:
        self.value = value
        super().__init__(
            message
            or f"supported values are str, int, float, bool or a list of them, found: {value!r}"
        )
