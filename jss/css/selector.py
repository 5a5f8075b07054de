"""Class selector namespacing.

Scopes every class in a selector to a namespace so `.layer` becomes
`.frame__layer`. Element, id, attribute and pseudo selectors are left alone,
as are at-rule headers.
"""
from __future__ import annotations

__all__ = ["ROOT", "selector_namespaced", "class_namespaced", "namespace_class"]

# Selector that refers to the namespace class itself.
ROOT = "."

def namespace_class(namespace: str, name: str) -> str:
    return f".{namespace}__{name}"

def _namespace_part(namespace: str, part: str) -> str:
    if not part.startswith("."):
        return part

    groups = []
    for group in part.lstrip(".").split(","):
        # `.a.b` is a compound of two classes, keep them adjacent
        groups.append(
            "".join(namespace_class(namespace, name) for name in group.lstrip(".").split("."))
        )
    return ",".join(groups)

def selector_namespaced(namespace: str, selector: str) -> str:
    """Prefix the classes of a selector with the namespace.

    Examples
        >>> selector_namespaced("frame", ".")
        '.frame'
        >>> selector_namespaced("frame", ".hide .corner")
        '.frame__hide .frame__corner'
        >>> selector_namespaced("frame", ".hide button")
        '.frame__hide button'
        >>> selector_namespaced("frame", ".expand_corners,.hovered button .highlight")
        '.frame__expand_corners,.frame__hovered button .frame__highlight'
        >>> selector_namespaced("frame", ".expand_corners.hovered button .highlight")
        '.frame__expand_corners.frame__hovered button .frame__highlight'
    """
    trimmed = selector.strip()
    if trimmed == ROOT:
        return f".{namespace}"
    return " ".join(_namespace_part(namespace, part.strip()) for part in trimmed.split(" "))

def class_namespaced(namespace: str, class_names: str) -> str:
    """Namespace the value of an element's `class` attribute.

    Examples
        >>> class_namespaced("frame", "text-anim")
        'frame__text-anim'
        >>> class_namespaced("frame", "")
        'frame'
    """
    trimmed = class_names.strip()
    if trimmed == "":
        return namespace
    return " ".join(f"{namespace}__{part.strip()}" for part in trimmed.split(" "))
