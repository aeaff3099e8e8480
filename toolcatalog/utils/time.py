"""System time utilities for toolcatalog."""

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo


def current_time(tz: Optional[str] = None) -> datetime:
    """Get current time with optional timezone.

    Args:
        tz: Timezone string (e.g., 'Europe/Berlin'). Defaults to local time.

    Returns:
        Current datetime object.

    Raises:
        zoneinfo.ZoneInfoNotFoundError: If tz is not a known timezone.
    """
    if tz:
        return datetime.now(ZoneInfo(tz))
    return datetime.now()
