from __future__ import annotations

from typing import Any, Iterable, Mapping

__all__ = ["Rules", "is_block"]


class Rules(tuple):
    """Ordered `(key, value)` pairs where a key may repeat.

    A `dict` works anywhere a block is expected; use `Rules` when the same
    selector has to be written more than once. Blocks are never merged.

    Examples
        >>> Rules([(".a", {"color": "red"}), (".a", {"opacity": 0})])
        Rules([('.a', {'color': 'red'}), ('.a', {'opacity': 0})])
    """

    def __new__(cls, pairs: Iterable[tuple[str, Any]] | Mapping[str, Any] = ()) -> Rules:
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        items = []
        for pair in pairs:
            if not isinstance(pair, tuple) or len(pair) != 2 or not isinstance(pair[0], str):
                raise TypeError(f"Rules expects (str, value) pairs, found {pair!r}")
            items.append(pair)
        return super().__new__(cls, items)

    def __repr__(self) -> str:
        return f"Rules({list(self)!r})"


def is_block(value: Any) -> bool:
    """Whether the value is a block of properties rather than a leaf."""
    return isinstance(value, (Mapping, Rules))
