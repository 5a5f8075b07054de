from __future__ import annotations

from typing import Generator

__all__ = ["Buffer"]

class Buffer:
    """Collects css text. Whitespace helpers only write in pretty mode.

    Args
        pretty (bool): Whether newlines, spaces and indentation are written. Defaults to `False`.
        unit (str): The text written once per indentation level. Defaults to four spaces.
    """

    __slots__ = ("__CHUNKS__", "_pretty_", "_unit_")

    def __init__(self, pretty: bool = False, unit: str = "    ") -> None:
        self._pretty_ = pretty
        self._unit_ = unit
        self.__CHUNKS__: list[str] = []

    @property
    def pretty(self) -> bool:
        """Whether whitespace is written."""
        return self._pretty_

    @property
    def unit(self) -> str:
        """Text of a single indentation level."""
        return self._unit_

    def write(self, *text: str):
        self.__CHUNKS__.extend(text)

    def indent(self, level: int):
        """Write `level` indentation units."""
        if self._pretty_ and level > 0:
            self.__CHUNKS__.append(self._unit_ * level)

    def newline(self):
        if self._pretty_:
            self.__CHUNKS__.append("\n")

    def space(self):
        if self._pretty_:
            self.__CHUNKS__.append(" ")

    def clear(self):
        self.__CHUNKS__.clear()

    def render(self) -> str:
        """Join everything written so far into a single string."""
        return "".join(self.__CHUNKS__)

    def __iter__(self) -> Generator[str, None, None]:
        yield from self.__CHUNKS__

    def __len__(self) -> int:
        return sum(len(chunk) for chunk in self.__CHUNKS__)

    def __repr__(self) -> str:
        return f"Buffer(pretty={self._pretty_}, {self.render()!r})"

    def __str__(self) -> str:
        return self.render()
