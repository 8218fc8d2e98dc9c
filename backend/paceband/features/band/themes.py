"""
Band colour themes.

Theme keys arrive from the client as opaque strings; unknown keys fall
back to the default theme instead of failing the render.
"""

from dataclasses import dataclass
from typing import Optional

from paceband.config import settings


@dataclass(frozen=True)
class BandTheme:
    """Colours used to draw one band."""
    key: str
    header_bg: str
    header_fg: str
    accent: str          # goal time under the race label
    column_bg: str       # KM | TIME header row
    border: str
    row_rule: str
    highlight_bg: str    # every fifth marker
    text: str
    cut_line: str


THEMES: dict[str, BandTheme] = {
    "classic": BandTheme(
        key="classic",
        header_bg="#000000",
        header_fg="#ffffff",
        accent="#facc15",
        column_bg="#e5e7eb",
        border="#1f2937",
        row_rule="#d1d5db",
        highlight_bg="#f3f4f6",
        text="#1e293b",
        cut_line="#9ca3af",
    ),
    "contrast": BandTheme(
        key="contrast",
        header_bg="#1d4ed8",
        header_fg="#ffffff",
        accent="#fde047",
        column_bg="#dbeafe",
        border="#1e3a8a",
        row_rule="#93c5fd",
        highlight_bg="#eff6ff",
        text="#0f172a",
        cut_line="#9ca3af",
    ),
}


def get_theme(key: Optional[str]) -> BandTheme:
    """
    Resolve a theme key, falling back to settings.default_theme.

    A misconfigured default resolves to "classic".
    """
    default = THEMES.get(settings.default_theme, THEMES["classic"])
    return THEMES.get(key, default) if key else default
