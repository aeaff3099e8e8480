"""Assemble the supported formats document."""

from datetime import datetime
from typing import Iterable

from ..tools.base import ToolDescriptor
from .html import element, render_formatted
from .rows import build_all_rows
from .sorting import sort_descriptors

DEFAULT_GENERATOR = "ToolsLister"

COLUMNS = ("ID", "Pipeline Symbol", "Icon", "Name", "Default Pattern")

PREAMBLE = (
    "# Supported Report Formats\n"
    "\n"
    "Jenkins' Warnings Next Generation Plugin supports the following report formats. \n"
    "If your tool is supported, but has no custom icon yet, please file a pull request for the\n"
    "[Warnings Next Generation Plugin](https://github.com/jenkinsci/warnings-ng-plugin/pulls).\n"
    "\n"
    "If your tool is not yet supported you can\n"
    "1. define a new Groovy based parser in the user interface\n"
    "2. export the issues of your tool to the native XML format (or any other format)\n"
    "3. provide a parser within a new small plugin. \n"
    "\n"
    "If the parser is useful for \n"
    "other teams as well please share it and provide pull requests for the \n"
    "[Warnings Next Generation Plug-in](https://github.com/jenkinsci/warnings-ng-plugin/pulls) and \n"
    "the [Analysis Parsers Library](https://github.com/jenkinsci/analysis-model/). \n"
)


def render_banner(generator: str, generated_at: datetime) -> str:
    """Comment line that marks the document as generated."""
    return f"<!--- DO NOT EDIT - Generated by {generator} at {generated_at.isoformat()}-->"


def render_table(descriptors: Iterable[ToolDescriptor]) -> str:
    """Render the header and all tool rows, sorted by display name."""
    header = element("thead", element("tr", *(element("th", label) for label in COLUMNS)))
    body = element("tbody", *build_all_rows(sort_descriptors(descriptors)))
    return render_formatted(element("table", header, body))


def assemble_document(
    descriptors: Iterable[ToolDescriptor],
    generated_at: datetime,
    generator: str = DEFAULT_GENERATOR,
) -> str:
    """Build the complete document text.

    The timestamp is only used in the banner, so the table is identical
    between runs over the same descriptors.
    """
    return "\n".join((
        render_banner(generator, generated_at),
        PREAMBLE,
        render_table(descriptors),
        "",
    ))
