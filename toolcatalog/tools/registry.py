"""Self-registering tool registry.

Tool descriptor classes register themselves via the @register_tool decorator.
Call discover_tools() with the host's plugin package to import all of its
modules, which triggers the decorators and populates the registry.
"""

import importlib
import logging
import pkgutil
import sys
from typing import Dict, List, Type

from ..errors import ToolCatalogError
from .base import ToolDescriptor

_log = logging.getLogger(__name__)

_REGISTRY: Dict[str, Type[ToolDescriptor]] = {}


def register_tool(tool_id: str):
    """Decorator that registers a tool descriptor class under the given id.

    Usage:
        @register_tool("checkstyle")
        class CheckStyleDescriptor(ParserDescriptor):
            ...
    """
    def decorator(cls: Type[ToolDescriptor]):
        if not isinstance(cls, type) or not issubclass(cls, ToolDescriptor):
            raise TypeError(f"{getattr(cls, '__name__', cls)!s} must be a subclass of ToolDescriptor")
        _REGISTRY[tool_id] = cls
        return cls
    return decorator


def discover_tools(package_name: str) -> None:
    """Import all modules in a package to trigger @register_tool decorators.

    If a module is already imported (cached in sys.modules), it is reloaded
    so that the decorators re-execute. This keeps the registry consistent
    even after clear_tool_registry().
    """
    package = importlib.import_module(package_name)
    if not hasattr(package, "__path__"):
        return
    for _importer, module_name, _is_pkg in pkgutil.iter_modules(package.__path__):
        fqn = f"{package_name}.{module_name}"
        if fqn in sys.modules:
            importlib.reload(sys.modules[fqn])
        else:
            importlib.import_module(fqn)
        _log.debug("Imported tool module %s", fqn)


def get_tool_registry() -> Dict[str, Type[ToolDescriptor]]:
    """Return a copy of the current tool registry (id -> class)."""
    return dict(_REGISTRY)


def registered_descriptors() -> List[ToolDescriptor]:
    """Instantiate every registered descriptor class.

    Raises:
        ToolCatalogError: If a registered class cannot be instantiated.
    """
    descriptors = []
    for tool_id, cls in _REGISTRY.items():
        try:
            descriptors.append(cls())
        except Exception as e:
            raise ToolCatalogError(f"Cannot create tool {tool_id} ({cls.__name__}): {e}") from e
    return descriptors


def clear_tool_registry() -> None:
    """Clear the registry. Primarily for testing."""
    _REGISTRY.clear()
