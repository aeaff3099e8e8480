"""Table rows for tool descriptors."""

from typing import Iterable

from ..tools.base import ToolDescriptor
from .fields import default_pattern, display_name, help_text, pipeline_symbol, tool_id
from .html import Element, Raw, element, join
from .icons import icon_cell

BULB_EMOJI = ":bulb:"
COLUMN_COUNT = 5


def build_rows(descriptor: ToolDescriptor) -> list[Element]:
    """Build the data row of a tool, followed by its help row if it has help."""
    rows = [
        element(
            "tr",
            element("td", tool_id(descriptor)),
            element("td", pipeline_symbol(descriptor)),
            element("td", icon_cell(descriptor)),
            element("td", display_name(descriptor)),
            element("td", default_pattern(descriptor)),
        )
    ]
    help_html = help_text(descriptor)
    if help_html is not None:
        rows.append(element(
            "tr",
            element("td", join(BULB_EMOJI, Raw(help_html)), colspan=COLUMN_COUNT),
        ))
    return rows


def build_all_rows(descriptors: Iterable[ToolDescriptor]) -> list[Element]:
    """Rows of all tools, in the given order."""
    return [row for descriptor in descriptors for row in build_rows(descriptor)]
