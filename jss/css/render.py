""" CSS RENDERING

A style tree maps selectors to blocks of properties:

    {
        ".layer": {"background_color": "red", "border": "1px solid green"},
        "@media screen and (max-width: 800px)": {
            ".layer": {"width": "100%"},
        },
    }

A property whose value is itself a block is rendered as a nested rule, which
is how at-rules and keyframes are written. Every other value is a leaf and is
written as a declaration.
"""
from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping, Union
from typing_extensions import TypeAliasType

from jss.buffer import Buffer
from jss.config import Settings, settings as default_settings
from jss.css.properties import resolve
from jss.css.selector import selector_namespaced
from jss.errors import UnsupportedValueType
from jss.rules import Rules, is_block
from jss.value import Primitive, display

__all__ = ["Rules", "StyleTree", "Renderer", "render", "process_css", "style", "entries", "is_nested"]

logger = logging.getLogger(__name__)


StyleTree = TypeAliasType(
    "StyleTree",
    Union[Mapping[str, Union[Primitive, "StyleTree"]], Rules],
)


def is_nested(value: Any) -> bool:
    return is_block(value)


def entries(block: StyleTree) -> Iterator[tuple[str, Any]]:
    if isinstance(block, Rules):
        return iter(block)
    if isinstance(block, Mapping):
        return iter(block.items())
    raise UnsupportedValueType(block, f"expected a block of properties, found {block!r}")


class Renderer:
    """Turns a style tree into css text.

    Args
        namespace (str | None): Prefix every class selector with `<namespace>__`.
        pretty (bool): One declaration per line with indentation instead of a single line.
        settings (Settings | None): Strict mode and indentation. Defaults to the process settings.
    """

    def __init__(
        self,
        namespace: str | None = None,
        pretty: bool = False,
        *,
        settings: Settings | None = None,
    ) -> None:
        self.namespace = namespace
        self.pretty = pretty
        self.settings = settings or default_settings

    def selector(self, selector: str) -> str:
        if self.namespace is None:
            return selector
        return selector_namespaced(self.namespace, selector)

    def render(self, tree: StyleTree, indent: int = 0) -> str:
        buffer = Buffer(self.pretty, self.settings.indent)
        count = 0
        for selector, block in entries(tree):
            buffer.newline()
            self.write_rule(buffer, selector, block, indent)
            count += 1
        buffer.newline()
        logger.debug("rendered %d rules (namespace=%r, pretty=%s)", count, self.namespace, self.pretty)
        return buffer.render()

    def style(self, block: StyleTree) -> str:
        """Render the declarations of a single block, as used in a `style` attribute."""
        buffer = Buffer(False)
        for key, value in entries(block):
            if is_nested(value):
                raise UnsupportedValueType(value, f"inline styles can't contain nested rules, found {key!r}")
            self.write_declaration(buffer, key, value, 0)
        return buffer.render()

    def write_rule(self, buffer: Buffer, selector: str, block: Any, indent: int):
        if not isinstance(selector, str):
            raise UnsupportedValueType(selector, f"selectors must be strings, found {selector!r}")
        if not is_nested(block):
            raise UnsupportedValueType(
                block, f"selector `{selector}` must map to a block of properties, found {block!r}"
            )

        buffer.indent(indent)
        buffer.write(self.selector(selector))
        buffer.space()
        buffer.write("{")
        buffer.newline()
        self.write_block(buffer, selector, block, indent)
        buffer.indent(indent)
        buffer.write("}")

    def write_block(self, buffer: Buffer, selector: str, block: StyleTree, indent: int):
        for key, value in entries(block):
            if is_nested(value):
                # at-rules, keyframes: the key is a selector one level deeper
                self.write_rule(buffer, key, value, indent + 1)
                buffer.newline()
            else:
                self.write_declaration(buffer, key, value, indent + 1, selector)

    def write_declaration(
        self, buffer: Buffer, key: str, value: Any, indent: int, selector: str | None = None
    ):
        if not isinstance(key, str):
            raise UnsupportedValueType(key, f"property names must be strings, found {key!r}")
        name = resolve(key, selector, strict=self.settings.strict)
        text = display(value)
        buffer.indent(indent)
        buffer.write(name, ":")
        buffer.space()
        buffer.write(text, ";")
        buffer.newline()


def render(
    tree: StyleTree,
    namespace: str | None = None,
    pretty: bool = False,
    current_indent: int = 0,
) -> str:
    """Render a style tree with the process settings."""
    return Renderer(namespace, pretty).render(tree, current_indent)


def process_css(namespace: str | None, tree: StyleTree, use_indents: bool) -> str:
    return render(tree, namespace, use_indents)


def style(block: StyleTree) -> str:
    """Inline style text for a block of properties.

    Examples
        >>> style({"background_color": "red", "border": "1px solid green"})
        'background-color:red;border:1px solid green;'
    """
    return Renderer().style(block)
