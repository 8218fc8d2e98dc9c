#!/usr/bin/env python3
"""CLI for pace band split tables and PDFs.

Usage:
    # Print marathon splits for a 3 hour goal
    python -m paceband.cli 03:00:00

    # Half marathon in miles, write the PDF to ./bands
    python -m paceband.cli 01:45:00 --distance 13.1094 --unit mi --pdf bands

    # Switch a standard distance to the other unit first
    python -m paceband.cli 01:45:00 --distance 21.0975 --to-unit mi
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
import tempfile
from pathlib import Path
from typing import List, Optional

from paceband.shared.constants import DistanceUnit
from paceband.features.splits import RaceDistance, SplitRecord, compute_splits, switch_unit
from paceband.features.band import render_band, render_rows
from paceband.features.export import ExportFailed, ExportGuard, PrintExporter


def print_table(goal_time: str, distance: RaceDistance, splits: List[SplitRecord]) -> None:
    """Print the split table."""
    print(f"\n=== Goal {goal_time} | {distance.value} {distance.unit.value} ===")
    print(f"{distance.unit.value.upper():>8}  TIME")
    for marker, time in render_rows(splits):
        print(f"{marker:>8}  {time}")


def write_atomic(path: Path, content: bytes) -> None:
    """Write bytes so that a crash never leaves a partial file behind."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".pace-band-", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        os.unlink(tmp_name)
        raise


def export_pdf(
    goal_time: str,
    distance: RaceDistance,
    splits: List[SplitRecord],
    out_dir: Path,
    theme: Optional[str],
) -> int:
    """Render, export and save the band. Returns an exit code."""
    surface = render_band(splits, goal_time, distance, theme=theme)
    guard = ExportGuard()
    with guard.acquire():
        result = asyncio.run(PrintExporter().export(surface, goal_time))

    if isinstance(result, ExportFailed):
        print(f"Error: {result.message}", file=sys.stderr)
        return 1

    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / result.filename
    write_atomic(path, result.content)
    print(f"\nSaved {path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Pace band split times and printable PDF")
    parser.add_argument("goal_time", help="Goal finish time, H:MM:SS")
    parser.add_argument("--distance", type=float, default=42.195, help="Race distance (default: marathon)")
    parser.add_argument("--unit", choices=[u.value for u in DistanceUnit], default=DistanceUnit.KM.value)
    parser.add_argument("--to-unit", choices=[u.value for u in DistanceUnit],
                        help="Switch a standard distance to this unit")
    parser.add_argument("--theme", help="Theme key (default: the default_theme setting)")
    parser.add_argument("--pdf", metavar="DIR", type=Path, help="Write the PDF band into DIR")
    args = parser.parse_args(argv)

    if args.distance <= 0:
        parser.error("--distance must be positive")

    distance = RaceDistance(args.distance, DistanceUnit(args.unit))
    if args.to_unit:
        switched = switch_unit(distance, args.to_unit)
        if switched is None:
            print(f"Error: {distance.value} {distance.unit.value} is not a standard distance, "
                  f"enter it in {args.to_unit} instead", file=sys.stderr)
            return 2
        distance = switched

    splits = compute_splits(args.goal_time, distance.value, distance.unit)
    if splits is None:
        print(f"Error: cannot parse goal time {args.goal_time!r} (expected H:MM:SS)", file=sys.stderr)
        return 2

    print_table(args.goal_time, distance, splits)

    if args.pdf:
        return export_pdf(args.goal_time, distance, splits, args.pdf, args.theme)
    return 0


if __name__ == "__main__":
    sys.exit(main())
