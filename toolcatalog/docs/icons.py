"""Resolve a tool's icon reference to an image URL.

Tools reference icons in one of three ways:

* a symbol of the Font Awesome icon pack,
  e.g. ``"symbol-bug-solid plugin-font-awesome-api"``
* a symbol bundled with the warnings plugin,
  e.g. ``"symbol-analysis-model plugin-warnings-ng"``
* a concrete URL served by the plugin, e.g. ``"/plugin/warnings-ng/icons/foo.svg"``

Symbols are mapped to the raw SVG files in the upstream repositories, plugin
URLs to the path of the file in the source tree. Anything else has no image.
"""

from typing import Optional

from ..tools.base import ToolDescriptor
from .fields import EMPTY
from .html import Node, Text, element

SYMBOL_PREFIX = "symbol"
SYMBOL_NAME_START = "symbol-"

FONT_AWESOME_MARKER = "plugin-font-awesome-api"
FONT_AWESOME_BASE = "https://raw.githubusercontent.com/FortAwesome/Font-Awesome/6.x/svgs/"

WARNINGS_MARKER = "plugin-warnings-ng"
WARNINGS_SYMBOLS_BASE = (
    "https://raw.githubusercontent.com/jenkinsci/warnings-ng-plugin/main/"
    "plugin/src/main/resources/images/symbols/"
)

PLUGIN_URL_PREFIX = "/plugin/warnings-ng/"
SOURCE_TREE_PREFIX = "plugin/src/main/webapp/"

ICON_SIZE = 48


def _substring_after(value: str, separator: str) -> str:
    _, found, rest = value.partition(separator)
    return rest if found else ""


def _substring_before(value: str, separator: str) -> str:
    return value.partition(separator)[0]


def symbol_name(reference: str) -> str:
    """Extract the icon name between "symbol-" and the next space.

    Missing delimiters are tolerated: no "symbol-" yields an empty name,
    no trailing space yields the rest of the string.
    """
    return _substring_before(_substring_after(reference, SYMBOL_NAME_START), " ")


def resolve_icon_url(reference: str) -> Optional[str]:
    """Map an icon reference to an image URL, None if there is no image."""
    if not reference or reference.startswith(SYMBOL_PREFIX):
        if reference.endswith(FONT_AWESOME_MARKER):
            return f"{FONT_AWESOME_BASE}{symbol_name(reference)}.svg"
        if reference.endswith(WARNINGS_MARKER):
            return f"{WARNINGS_SYMBOLS_BASE}{symbol_name(reference)}.svg"
        return None
    return reference.replace(PLUGIN_URL_PREFIX, SOURCE_TREE_PREFIX)


def image(descriptor: ToolDescriptor, icon_url: str) -> Node:
    return element(
        "img",
        src=icon_url,
        alt=descriptor.name,
        height=ICON_SIZE,
        width=ICON_SIZE,
    )


def icon_cell(descriptor: ToolDescriptor) -> Node:
    """Icon of the tool as an image, or the placeholder."""
    icon_url = resolve_icon_url(descriptor.label_provider.large_icon_url or "")
    if icon_url is None:
        return Text(EMPTY)
    return image(descriptor, icon_url)
