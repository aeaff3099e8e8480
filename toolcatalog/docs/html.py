"""Tiny HTML node model used to render the tools table.

Block elements (table structure) are rendered one child per line with a
four space indent per level; everything else is rendered inline. The output
only depends on the node tree, so rendering the same tree twice gives the
same text.
"""

import html
from dataclasses import dataclass
from typing import Union

INDENT = "    "

BLOCK_TAGS = frozenset({"table", "thead", "tbody", "tr", "th", "td"})
VOID_TAGS = frozenset({"img", "br"})


@dataclass(frozen=True)
class Text:
    """Plain text, escaped on output."""

    value: str

    def render(self) -> str:
        return html.escape(self.value)


@dataclass(frozen=True)
class Raw:
    """Markup that is emitted as is."""

    value: str

    def render(self) -> str:
        return self.value


@dataclass(frozen=True)
class Fragment:
    """Inline nodes joined by a separator."""

    parts: tuple["Node", ...]
    separator: str = " "

    def render(self) -> str:
        return self.separator.join(part.render() for part in self.parts)


@dataclass(frozen=True)
class Element:
    """An HTML element with ordered attributes."""

    tag: str
    attrs: tuple[tuple[str, str], ...] = ()
    children: tuple["Node", ...] = ()

    def _open_tag(self) -> str:
        attrs = "".join(
            f' {key}="{html.escape(value, quote=True)}"' for key, value in self.attrs
        )
        return f"<{self.tag}{attrs}>"

    def render(self) -> str:
        """Render on a single line."""
        if self.tag in VOID_TAGS:
            return self._open_tag()
        inner = "".join(child.render() for child in self.children)
        return f"{self._open_tag()}{inner}</{self.tag}>"

    def render_formatted(self, level: int = 0) -> list[str]:
        """Render as indented lines."""
        pad = INDENT * level
        if self.tag not in BLOCK_TAGS:
            return [pad + self.render()]

        lines = [pad + self._open_tag()]
        for child in self.children:
            if isinstance(child, Element):
                lines.extend(child.render_formatted(level + 1))
            else:
                lines.append(INDENT * (level + 1) + child.render())
        lines.append(f"{pad}</{self.tag}>")
        return lines


Node = Union[Text, Raw, Fragment, Element]


def element(tag: str, *children: Union[Node, str], **attrs: Union[str, int]) -> Element:
    """Build an element; string children become escaped text.

    Keyword order is kept as attribute order.
    """
    nodes = tuple(Text(c) if isinstance(c, str) else c for c in children)
    return Element(
        tag=tag,
        attrs=tuple((key, str(value)) for key, value in attrs.items()),
        children=nodes,
    )


def join(*parts: Union[Node, str], separator: str = " ") -> Fragment:
    """Join inline parts with a separator, like words in a sentence."""
    return Fragment(tuple(Text(p) if isinstance(p, str) else p for p in parts), separator)


def render_formatted(node: Element) -> str:
    return "\n".join(node.render_formatted())
