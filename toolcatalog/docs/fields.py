"""Per-tool values shown in the catalog table."""

from typing import Optional

from ..tools.base import ToolDescriptor
from .html import Node, Text, element

EMPTY = "-"


def tool_id(descriptor: ToolDescriptor) -> str:
    return descriptor.id


def pipeline_symbol(descriptor: ToolDescriptor) -> str:
    """Pipeline call of the tool; "()" for tools without a symbol."""
    return f"{descriptor.symbol_name}()"


def default_pattern(descriptor: ToolDescriptor) -> str:
    """Default report pattern of parser tools, or the placeholder."""
    return descriptor.default_pattern() or EMPTY


def display_name(descriptor: ToolDescriptor) -> Node:
    """Tool name, linked to its home page when one is known."""
    if not descriptor.url:
        return Text(descriptor.name)
    return element("a", descriptor.name, href=descriptor.url)


def help_text(descriptor: ToolDescriptor) -> Optional[str]:
    help_html = descriptor.help or ""
    return help_html if help_html.strip() else None
