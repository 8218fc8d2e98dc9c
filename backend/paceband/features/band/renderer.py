"""
Band Renderer

Draws a split table as a narrow printable band on a matplotlib figure:

- Race label and goal time header
- KM/MI | TIME column header
- One row per split, every fifth marker highlighted
- Footer and a dashed cut line to the left of the band

The figure is built without pyplot so rendering works off the main
thread and needs no GUI backend.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from paceband.config import settings
from paceband.features.splits.calculator import SplitRecord
from paceband.features.splits.distance import RaceDistance
from .themes import BandTheme, get_theme

View = Tuple[Tuple[float, float], Tuple[float, float]]

# Layout in row units; one row is one split line
BAND_WIDTH = 4.0
HEADER_ROWS = 2.6
COLUMN_ROWS = 1.3
FOOTER_ROWS = 1.2
CUT_MARGIN = 0.7
INCH_PER_UNIT_X = 0.5
INCH_PER_ROW = 0.176
FIT_SLACK = 0.98


@dataclass
class BandSurface:
    """
    A rendered band.

    The band lives in a single axes; its x/y limits are the view an
    interactive viewer pans around. home_view frames the whole band.
    """
    figure: Figure
    axes: Axes
    home_view: View

    def get_view(self) -> View:
        return tuple(self.axes.get_xlim()), tuple(self.axes.get_ylim())

    def set_view(self, view: View) -> None:
        xlim, ylim = view
        self.axes.set_xlim(*xlim)
        self.axes.set_ylim(*ylim)

    def reset_view(self) -> None:
        self.set_view(self.home_view)

    def pan(self, dx: float, dy: float) -> None:
        """Shift the view, as dragging in a viewer does."""
        (x0, x1), (y0, y1) = self.get_view()
        self.set_view(((x0 + dx, x1 + dx), (y0 + dy, y1 + dy)))

    @property
    def is_home(self) -> bool:
        return self.get_view() == self.home_view


def _race_label(distance: RaceDistance) -> str:
    return "Marathon" if distance.is_marathon else "Half"


def _max_aspect() -> float:
    """Tallest printed height/width ratio that fits below the top margin."""
    room = settings.page_height_mm - settings.top_margin_mm
    # slack for pixel rounding in the captured bitmap
    return FIT_SLACK * room / settings.band_width_mm


def _draw_row(ax: Axes, y: float, record: SplitRecord, theme: BandTheme, scale: float = 1.0) -> None:
    highlight = isinstance(record.marker, int) and record.marker % 5 == 0
    if highlight:
        ax.add_patch(Rectangle((0, y), BAND_WIDTH, 1, facecolor=theme.highlight_bg, edgecolor="none"))
    weight = "bold" if highlight else "normal"
    mid = y + 0.5
    ax.text(BAND_WIDTH * 0.25, mid, str(record.marker), ha="center", va="center",
            fontsize=7 * scale, fontweight=weight, color=theme.text)
    ax.text(BAND_WIDTH * 0.68, mid, record.time, ha="center", va="center",
            fontsize=7 * scale, fontweight=weight, color=theme.text, family="monospace")
    ax.plot([BAND_WIDTH * 0.45] * 2, [y, y + 1], color=theme.row_rule, linewidth=0.4)
    ax.plot([0, BAND_WIDTH], [y + 1, y + 1],
            color=theme.border if highlight else theme.row_rule,
            linewidth=1.0 if highlight else 0.4)


def render_band(
    splits: Sequence[SplitRecord],
    goal_time: str,
    distance: RaceDistance,
    theme: Optional[str] = None,
    max_aspect: Optional[float] = None,
) -> BandSurface:
    """
    Render a split table onto a new figure.

    Long tables (ultras) get shorter rows and smaller text so the whole
    band still fits on one page at the printed width.

    Args:
        splits: Rows from compute_splits
        goal_time: Goal time text as typed (first five chars shown)
        distance: Race distance, for the label and column header
        theme: Opaque theme key
        max_aspect: Height/width limit for the figure; defaults to
            what the configured page leaves room for

    Returns:
        BandSurface framing the whole band
    """
    style = get_theme(theme)
    total_rows = HEADER_ROWS + COLUMN_ROWS + len(splits) + FOOTER_ROWS

    if max_aspect is None:
        max_aspect = _max_aspect()
    width_in = (BAND_WIDTH + CUT_MARGIN) * INCH_PER_UNIT_X
    row_in = min(INCH_PER_ROW, width_in * max_aspect / total_rows)
    scale = row_in / INCH_PER_ROW

    fig = Figure(figsize=(width_in, total_rows * row_in), facecolor="white")
    ax = fig.add_axes((0, 0, 1, 1))
    ax.axis("off")

    # Header
    ax.add_patch(Rectangle((0, 0), BAND_WIDTH, HEADER_ROWS, facecolor=style.header_bg, edgecolor="none"))
    ax.text(BAND_WIDTH / 2, HEADER_ROWS * 0.35, _race_label(distance).upper(), ha="center", va="center",
            fontsize=9 * scale, fontweight="bold", color=style.header_fg)
    ax.text(BAND_WIDTH / 2, HEADER_ROWS * 0.75, goal_time[:5], ha="center", va="center",
            fontsize=9 * scale, color=style.accent)

    # Column header
    y = HEADER_ROWS
    ax.add_patch(Rectangle((0, y), BAND_WIDTH, COLUMN_ROWS, facecolor=style.column_bg, edgecolor="none"))
    ax.text(BAND_WIDTH * 0.25, y + COLUMN_ROWS / 2, distance.unit.value.upper(), ha="center", va="center",
            fontsize=7 * scale, fontweight="bold", color=style.text)
    ax.text(BAND_WIDTH * 0.68, y + COLUMN_ROWS / 2, "TIME", ha="center", va="center",
            fontsize=7 * scale, fontweight="bold", color=style.text)
    ax.plot([0, BAND_WIDTH], [y + COLUMN_ROWS] * 2, color=style.border, linewidth=1.2)

    y += COLUMN_ROWS
    for record in splits:
        _draw_row(ax, y, record, style, scale)
        y += 1

    # Footer
    ax.add_patch(Rectangle((0, y), BAND_WIDTH, FOOTER_ROWS, facecolor=style.header_bg, edgecolor="none"))
    ax.text(BAND_WIDTH / 2, y + FOOTER_ROWS / 2, "Good Luck!", ha="center", va="center",
            fontsize=6 * scale, color=style.header_fg)

    # Outline and cut line
    ax.add_patch(Rectangle((0, 0), BAND_WIDTH, total_rows, fill=False, edgecolor=style.border, linewidth=1.5))
    ax.plot([-CUT_MARGIN / 2] * 2, [0, total_rows], color=style.cut_line, linewidth=0.8, linestyle="--")
    ax.text(-CUT_MARGIN / 2, total_rows / 2, "Cut Here", rotation=90, ha="center", va="center",
            fontsize=6, color=style.cut_line, backgroundcolor="white")

    # y grows downward, like the rows
    home: View = ((-CUT_MARGIN, BAND_WIDTH), (total_rows, 0.0))
    surface = BandSurface(figure=fig, axes=ax, home_view=home)
    surface.reset_view()
    return surface


def render_rows(splits: Sequence[SplitRecord]) -> List[Tuple[str, str]]:
    """Plain-text rows for terminal output."""
    return [(str(s.marker), s.time) for s in splits]
