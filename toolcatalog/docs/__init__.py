"""Generation of the supported formats document."""

from .document import COLUMNS, PREAMBLE, assemble_document, render_banner, render_table
from .icons import icon_cell, resolve_icon_url
from .rows import build_all_rows, build_rows
from .sorting import sort_descriptors
from .writer import write_document

__all__ = [
    "COLUMNS",
    "PREAMBLE",
    "assemble_document",
    "render_banner",
    "render_table",
    "icon_cell",
    "resolve_icon_url",
    "build_all_rows",
    "build_rows",
    "sort_descriptors",
    "write_document",
]
