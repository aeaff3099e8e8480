"""toolcatalog utilities."""

from .time import current_time

__all__ = ["current_time"]
