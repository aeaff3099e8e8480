"""Persist the generated document."""

import logging
from pathlib import Path
from typing import Union

from ..errors import CatalogWriteError

_log = logging.getLogger(__name__)


def write_document(path: Union[str, Path], content: str) -> Path:
    """Write content to path, replacing any previous file.

    The parent directory must exist. Failures are fatal and are raised as
    CatalogWriteError.
    """
    output_path = Path(path)
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        _log.error("Cannot write %s: %s", output_path, e)
        raise CatalogWriteError(f"Cannot write {output_path}: {e}") from e

    _log.info("Wrote %s", output_path)
    return output_path
