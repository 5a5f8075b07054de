"""Helpers that append a unit to a value.

A single value gets the unit appended, a list or tuple gets it appended to
every member, joined by a space.

>>> px(10)
'10px'
>>> px([10, 12])
'10px 12px'
>>> percent(100)
'100%'
>>> in_(2.5)
'2.5in'

References:
    - [values and units](https://developer.mozilla.org/en-US/docs/Learn/CSS/Building_blocks/Values_and_units)
    - [angle](https://developer.mozilla.org/en-US/docs/Web/CSS/angle)
    - [time](https://developer.mozilla.org/en-US/docs/Web/CSS/time)
"""
from __future__ import annotations

from functools import partial

from jss.value import Primitive, Value

__all__ = [
    "unit",
    "px", "q", "mm", "cm", "pt", "pc", "in_", "percent",
    "em", "ex", "ch", "rem", "vw", "vh", "vmin", "vmax",
    "deg", "rad", "grad", "turn",
    "s", "ms",
    "rgb", "rgba",
]

def unit(name: str, value: Primitive) -> str:
    value = Value.new(value)
    if value.is_list():
        return " ".join(f"{v}{name}" for v in value)
    return f"{value}{name}"

# absolute lengths
px = partial(unit, "px")
q = partial(unit, "q")
mm = partial(unit, "mm")
cm = partial(unit, "cm")
pt = partial(unit, "pt")
pc = partial(unit, "pc")
in_ = partial(unit, "in")
percent = partial(unit, "%")

# relative lengths
em = partial(unit, "em")
ex = partial(unit, "ex")
ch = partial(unit, "ch")
rem = partial(unit, "rem")
vw = partial(unit, "vw")
vh = partial(unit, "vh")
vmin = partial(unit, "vmin")
vmax = partial(unit, "vmax")

# angles
deg = partial(unit, "deg")
rad = partial(unit, "rad")
grad = partial(unit, "grad")
turn = partial(unit, "turn")

# time
s = partial(unit, "s")
ms = partial(unit, "ms")

def rgb(r: Primitive, g: Primitive, b: Primitive) -> str:
    return f"rgb({Value.new(r)}, {Value.new(g)}, {Value.new(b)})"

def rgba(r: Primitive, g: Primitive, b: Primitive, a: Primitive) -> str:
    return f"rgba({Value.new(r)}, {Value.new(g)}, {Value.new(b)}, {Value.new(a)})"
