"""Tool descriptors and the sources that supply them."""

from .base import (
    LabelProvider,
    ToolDescriptor,
    ParserDescriptor,
    StaticToolDescriptor,
    StaticParserDescriptor,
)
from .loader import load_tools_from_manifest, load_manifest_file
from .registry import (
    register_tool,
    discover_tools,
    get_tool_registry,
    registered_descriptors,
    clear_tool_registry,
)

__all__ = [
    "LabelProvider",
    "ToolDescriptor",
    "ParserDescriptor",
    "StaticToolDescriptor",
    "StaticParserDescriptor",
    "load_tools_from_manifest",
    "load_manifest_file",
    "register_tool",
    "discover_tools",
    "get_tool_registry",
    "registered_descriptors",
    "clear_tool_registry",
]
