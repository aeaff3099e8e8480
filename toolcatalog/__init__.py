"""toolcatalog - Generate the catalog of supported report formats."""

__version__ = "0.1.0"

from .config import ConfigManager
from .errors import ToolCatalogError, ManifestError, CatalogWriteError
from .generator import generate
from .tools import (
    LabelProvider,
    ToolDescriptor,
    ParserDescriptor,
    register_tool,
)

__all__ = [
    "ConfigManager",
    "ToolCatalogError",
    "ManifestError",
    "CatalogWriteError",
    "generate",
    "LabelProvider",
    "ToolDescriptor",
    "ParserDescriptor",
    "register_tool",
]
