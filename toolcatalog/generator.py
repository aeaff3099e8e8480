"""Public entry point: generate the supported formats document."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Union

from .docs.document import DEFAULT_GENERATOR, assemble_document
from .docs.writer import write_document
from .tools.base import ToolDescriptor
from .utils.time import current_time

_log = logging.getLogger(__name__)

DEFAULT_OUTPUT_PATH = "../SUPPORTED-FORMATS.md"


def generate(
    descriptors: Iterable[ToolDescriptor],
    output_path: Union[str, Path] = DEFAULT_OUTPUT_PATH,
    *,
    generated_at: Optional[datetime] = None,
    generator: str = DEFAULT_GENERATOR,
) -> Path:
    """Render all descriptors and write the document to output_path.

    Args:
        descriptors: Tools to list, in any order.
        output_path: Destination file; its directory must exist.
        generated_at: Timestamp for the banner. Defaults to now.
        generator: Name shown in the banner.

    Returns:
        The path that was written.

    Raises:
        CatalogWriteError: If the file cannot be written.
    """
    tools = list(descriptors)
    if generated_at is None:
        generated_at = current_time()

    _log.debug("Generating catalog of %d tools", len(tools))
    content = assemble_document(tools, generated_at, generator=generator)
    return write_document(output_path, content)
