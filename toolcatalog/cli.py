"""toolcatalog CLI - generate the supported report formats document."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfoNotFoundError

import click

from .config import ConfigManager
from .errors import ToolCatalogError
from .generator import generate
from .tools.base import ToolDescriptor
from .tools.loader import load_manifest_file
from .tools.registry import discover_tools, registered_descriptors
from .utils.time import current_time
from .ui import render_roster
from .ui.theme import console, DEFAULT_PALETTE

_log = logging.getLogger(__name__)


class CatalogApp:
    """Collect tool descriptors from the configured sources."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        manifest: Optional[str] = None,
        discover: tuple[str, ...] = (),
    ):
        self.config = ConfigManager(config_path)
        self._manifest_override = manifest
        self.discover_packages = list(discover) or self.config.get_discover_packages()

    def collect_descriptors(self) -> list[ToolDescriptor]:
        """Return manifest tools merged with registered tools, one per id.

        A registered tool replaces a manifest tool with the same id, and a
        later manifest entry replaces an earlier one. An explicitly given
        manifest must exist; the configured default is optional.
        """
        tools: dict[str, ToolDescriptor] = {}

        manifest_path = Path(self._manifest_override or self.config.get_manifest_path())
        if self._manifest_override or manifest_path.exists():
            _merge(tools, load_manifest_file(manifest_path), f"manifest {manifest_path}")
        else:
            _log.debug("No tool manifest at %s", manifest_path)

        for package in self.discover_packages:
            try:
                discover_tools(package)
            except Exception as e:
                raise ToolCatalogError(f"Cannot import tool package {package}: {e}") from e
        _merge(tools, registered_descriptors(), "tool registry")

        return list(tools.values())

    def generated_at(self) -> datetime:
        """Banner timestamp in the configured timezone."""
        timezone = self.config.get_timezone()
        try:
            return current_time(timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ToolCatalogError(f"Unknown timezone {timezone}: {e}") from e


def _merge(tools: dict[str, ToolDescriptor], descriptors, source: str) -> None:
    for descriptor in descriptors:
        if descriptor.id in tools:
            _log.warning("Duplicate tool id %s, using the one from %s", descriptor.id, source)
        tools[descriptor.id] = descriptor


def render_error(message: str) -> None:
    console.print(f"Error: {message}", style=f"bold {DEFAULT_PALETTE.error}")


@click.group()
@click.option("--config", "config_path", default=None, help="Path to toolcatalog.yaml")
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr")
@click.pass_context
def cli(ctx, config_path, verbose):
    """toolcatalog - list all registered analysis tools.

    Generate the supported formats document or preview it in the terminal.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"config_path": config_path}


@cli.command(name="generate")
@click.option("--manifest", "-m", default=None, help="YAML tool manifest")
@click.option("--output", "-o", default=None, help="Output file path")
@click.option("--discover", "-d", multiple=True, help="Package with @register_tool descriptors")
@click.pass_context
def generate_command(ctx, manifest, output, discover):
    """Write the supported formats document."""
    app = CatalogApp(ctx.obj["config_path"], manifest=manifest, discover=discover)
    try:
        descriptors = app.collect_descriptors()
        path = generate(
            descriptors,
            output or app.config.get_output_path(),
            generated_at=app.generated_at(),
            generator=app.config.get_generator_name(),
        )
    except ToolCatalogError as e:
        render_error(str(e))
        sys.exit(1)

    console.print(
        f"Wrote {len(descriptors)} tools to {path}",
        style=f"bold {DEFAULT_PALETTE.success}",
    )


@cli.command(name="list")
@click.option("--manifest", "-m", default=None, help="YAML tool manifest")
@click.option("--discover", "-d", multiple=True, help="Package with @register_tool descriptors")
@click.pass_context
def list_command(ctx, manifest, discover):
    """Show the tools in catalog order without writing anything."""
    app = CatalogApp(ctx.obj["config_path"], manifest=manifest, discover=discover)
    try:
        descriptors = app.collect_descriptors()
    except ToolCatalogError as e:
        render_error(str(e))
        sys.exit(1)

    console.print(f"\nRegistered tools ({len(descriptors)}):\n", style=f"bold {DEFAULT_PALETTE.accent}")
    render_roster(descriptors)


if __name__ == "__main__":
    cli()
