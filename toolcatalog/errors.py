"""Exceptions raised by toolcatalog."""


class ToolCatalogError(Exception):
    """Base class for all toolcatalog errors."""


class ManifestError(ToolCatalogError):
    """A tool manifest file could not be read or parsed."""


class CatalogWriteError(ToolCatalogError, OSError):
    """The generated document could not be written."""
