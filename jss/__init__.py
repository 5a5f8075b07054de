"""Build css text from nested dictionaries.

>>> print(jss({
...     ".layer": {"background_color": "red", "border": "1px solid green"},
...     ".hide .layer": {"opacity": 0},
... }))
.layer{background-color:red;border:1px solid green;}.hide .layer{opacity:0;}

>>> print(jss_ns("frame", {".": {"display": "block"}, ".hide .layer": {"opacity": 0}}))
.frame{display:block;}.frame__hide .frame__layer{opacity:0;}
"""
from __future__ import annotations

from jss.config import Settings, settings
from jss.css import (
    Renderer,
    Rules,
    StyleTree,
    class_namespaced,
    process_css,
    render,
    resolve,
    selector_namespaced,
    style,
)
from jss.errors import JssError, UnknownProperty, UnsupportedValueType
from jss.units import *
from jss.value import Value

__version__ = "0.1.0"

__all__ = [
    "jss",
    "jss_pretty",
    "jss_ns",
    "jss_ns_pretty",
    "process_css",
    "render",
    "resolve",
    "style",
    "selector_namespaced",
    "class_namespaced",
    "Renderer",
    "Rules",
    "StyleTree",
    "Settings",
    "settings",
    "Value",
    "JssError",
    "UnknownProperty",
    "UnsupportedValueType",
    "px", "q", "mm", "cm", "pt", "pc", "in_", "percent",
    "em", "ex", "ch", "rem", "vw", "vh", "vmin", "vmax",
    "deg", "rad", "grad", "turn",
    "s", "ms",
    "rgb", "rgba",
]

def jss(tree: StyleTree) -> str:
    """Compact css, all on one line."""
    return process_css(None, tree, False)

def jss_pretty(tree: StyleTree) -> str:
    """Indented css, one declaration per line."""
    return process_css(None, tree, True)

def jss_ns(namespace: str, tree: StyleTree) -> str:
    """Compact css with every class selector prefixed by `<namespace>__`."""
    return process_css(namespace, tree, False)

def jss_ns_pretty(namespace: str, tree: StyleTree) -> str:
    return process_css(namespace, tree, True)
