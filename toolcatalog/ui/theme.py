"""Terminal palette for toolcatalog output."""

from dataclasses import dataclass
from rich.console import Console


@dataclass(frozen=True)
class ColorPalette:
    """Core UI color palette."""

    text_bright: str = "#e8e8f0"
    text: str = "#b8b8cc"
    text_dim: str = "#4a4a60"
    text_muted: str = "#363648"
    accent: str = "#00d4e5"
    success: str = "#34d399"
    error: str = "#e55a6e"


DEFAULT_PALETTE = ColorPalette()

console = Console()
