"""
Formatting utilities for display.

Used by the split calculator, the band renderer and the CLI.
"""

from .constants import DistanceUnit, MARKER_PRECISION, STANDARD_DISTANCE_LABELS


def format_elapsed(seconds: int) -> str:
    """
    Format whole seconds as 'H:MM:SS'.

    Hours are not padded, minutes and seconds always are.

        255   → "0:04:15"
        10800 → "3:00:00"
    """
    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours}:{minutes:02d}:{secs:02d}"


def parse_elapsed(text: str) -> int:
    """
    Parse 'H:MM:SS' produced by format_elapsed back to seconds.

    Raises:
        ValueError: If the text is not three integer fields
    """
    parts = text.split(":")
    if len(parts) != 3:
        raise ValueError(f"Expected H:MM:SS, got {text!r}")
    h, m, s = (int(p) for p in parts)
    return h * 3600 + m * 60 + s


def format_marker(distance: float, unit: DistanceUnit) -> str:
    """
    Format the finish marker of a split table.

    Standard distances keep their canonical label ('21.0975'),
    anything else is rounded to the unit precision with trailing
    zeros stripped ('10.5', '5').
    """
    label = STANDARD_DISTANCE_LABELS[unit].get(distance)
    if label is not None:
        return label
    text = f"{distance:.{MARKER_PRECISION[unit]}f}"
    return text.rstrip("0").rstrip(".")
