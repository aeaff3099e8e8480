"""Parse tool descriptors from manifest data."""

import logging
from pathlib import Path
from typing import Any, Union

import yaml

from ..errors import ManifestError
from .base import LabelProvider, StaticParserDescriptor, StaticToolDescriptor, ToolDescriptor

_log = logging.getLogger(__name__)


def load_tools_from_manifest(tools_data: list[dict[str, Any]]) -> tuple[ToolDescriptor, ...]:
    """Parse a list of tool dicts into descriptor instances.

    Each dict should have:
        id: str (required)
        name: str (required)
        symbol: str (optional) - pipeline symbol
        url: str (optional) - home page
        help: str (optional) - HTML fragment
        icon: str (optional) - large icon reference
        label: str (optional) - label provider name, defaults to name
        pattern: str (optional) - only parser tools have this key

    Invalid entries are skipped.
    """
    tools = []

    for entry in tools_data:
        if not isinstance(entry, dict):
            _log.warning("Skipping tool entry that is not a mapping: %r", entry)
            continue

        tool_id = entry.get("id")
        name = entry.get("name")
        if not all((tool_id, name)):
            _log.warning("Skipping tool entry without id or name: %r", entry)
            continue

        label = LabelProvider(
            name=str(entry.get("label") or name),
            large_icon_url=str(entry.get("icon") or ""),
        )
        common = dict(
            label_provider=label,
            symbol_name=str(entry.get("symbol") or ""),
            url=str(entry.get("url") or ""),
            help=str(entry.get("help") or ""),
        )

        if "pattern" in entry:
            tools.append(StaticParserDescriptor(
                str(tool_id), str(name), pattern=str(entry.get("pattern") or ""), **common,
            ))
        else:
            tools.append(StaticToolDescriptor(str(tool_id), str(name), **common))

    return tuple(tools)


def load_manifest_file(path: Union[str, Path]) -> tuple[ToolDescriptor, ...]:
    """Read a YAML manifest holding a list of tools or a {tools: [...]} mapping."""
    manifest_path = Path(path).expanduser()
    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except OSError as e:
        raise ManifestError(f"Cannot read tool manifest {manifest_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ManifestError(f"Invalid YAML in tool manifest {manifest_path}: {e}") from e

    if content is None:
        return ()
    if isinstance(content, dict):
        content = content.get("tools") or []
    if not isinstance(content, list):
        raise ManifestError(f"Tool manifest {manifest_path} must contain a list of tools")

    tools = load_tools_from_manifest(content)
    _log.info("Loaded %d tools from %s", len(tools), manifest_path)
    return tools
