"""
Band rendering module.

Usage:
    from paceband.features.band import render_band, BandSurface
"""

from .renderer import BandSurface, render_band, render_rows
from .themes import BandTheme, THEMES, get_theme

__all__ = [
    "BandSurface",
    "render_band",
    "render_rows",
    "BandTheme",
    "THEMES",
    "get_theme",
]
