"""Terminal output for toolcatalog."""

from .roster import render_roster
from .theme import console, DEFAULT_PALETTE, ColorPalette

__all__ = ["render_roster", "console", "DEFAULT_PALETTE", "ColorPalette"]
