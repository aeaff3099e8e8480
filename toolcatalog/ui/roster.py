"""Borderless ghost table listing the catalog in the terminal."""

from typing import Iterable

from rich.text import Text

from ..docs.fields import default_pattern, pipeline_symbol
from ..docs.sorting import sort_descriptors
from ..tools.base import ToolDescriptor
from .theme import console, DEFAULT_PALETTE, ColorPalette


def render_roster(
    descriptors: Iterable[ToolDescriptor],
    palette: ColorPalette = DEFAULT_PALETTE,
) -> None:
    """Render a borderless, whitespace-aligned tool table in catalog order.

    Tools that have a home page are highlighted.
    """
    col_id = 24
    col_symbol = 28

    # Header -- uppercase, muted
    header = Text()
    header.append("  ")
    header.append("ID".ljust(col_id), style=f"dim {palette.text_muted}")
    header.append("SYMBOL".ljust(col_symbol), style=f"dim {palette.text_muted}")
    header.append("PATTERN", style=f"dim {palette.text_muted}")
    console.print(header)

    tools = sort_descriptors(descriptors)
    if not tools:
        line = Text()
        line.append("  ")
        line.append("(none)".ljust(col_id), style=f"dim {palette.text_muted}")
        line.append("-".ljust(col_symbol), style=f"dim {palette.text_muted}")
        line.append("no tools registered", style=f"dim {palette.error}")
        console.print(line)
        console.print()
        return

    for tool in tools:
        name_style = f"bold {palette.accent}" if tool.url else palette.text_bright

        line = Text()
        line.append("  ")
        line.append(tool.id.ljust(col_id), style=name_style)
        line.append(pipeline_symbol(tool).ljust(col_symbol), style=palette.text)
        line.append(default_pattern(tool), style=f"dim {palette.text_dim}")
        console.print(line)

    console.print()
