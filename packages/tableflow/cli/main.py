"""Command-line interface for tableflow.

Lays out booking files the way the calendar views do, for debugging
layouts and color assignments outside the web app.
"""

from __future__ import annotations

import argparse
from datetime import date
import json
import logging
from pathlib import Path
import sys
from typing import Any

from pydantic import TypeAdapter
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tableflow.core.colors import ResourceColorAssigner, ResourceRef
from tableflow.core.config.loader import configure_logging, load_config, load_engine_config
from tableflow.core.conflicts import detect_conflicts
from tableflow.core.layout import Interval, compute_layout, filter_by_date

console = Console()
logger = logging.getLogger(__name__)

_INTERVALS = TypeAdapter(list[Interval])
_RESOURCES = TypeAdapter(list[ResourceRef])


def _records(raw: Any, key: str) -> Any:
    """Accept either a bare list or ``{key: [...]}``."""
    if isinstance(raw, dict):
        return raw.get(key, [])
    return raw


def run_layout(args: argparse.Namespace) -> int:
    """Lay out a bookings file and print tracks, rectangles and conflicts.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        day = date.fromisoformat(args.date) if args.date else None
        config = load_engine_config(args.config)
        if not args.json:
            configure_logging(config)
        intervals = _INTERVALS.validate_python(_records(load_config(args.bookings), "intervals"))
        positioned = compute_layout(intervals, config.layout)
        conflicts = detect_conflicts(intervals, config.conflicts.critical_threshold_minutes)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1

    if day is not None:
        positioned = filter_by_date(positioned, day)

    if args.json:
        payload = {
            "layout": [p.model_dump(mode="json") for p in positioned],
            "conflicts": [c.model_dump(mode="json") for c in conflicts],
        }
        print(json.dumps(payload, indent=2))
        return 0

    table = Table(title=f"Layout: {Path(args.bookings).name}")
    for column in ("#", "Resource", "Start", "End", "Track", "Top", "Height", "Left %", "Width %"):
        table.add_column(column)
    for p in positioned:
        table.add_row(
            str(p.index),
            p.interval.resource_id,
            str(p.interval.start),
            str(p.interval.end),
            f"{p.track + 1}/{p.track_count}",
            f"{p.top:.1f}",
            f"{p.height:.1f}",
            f"{p.left_percent:.2f}",
            f"{p.width_percent:.2f}",
        )
    console.print(table)

    if conflicts:
        console.print(f"\n[bold]Conflicts:[/bold] {len(conflicts)}")
        for c in conflicts:
            color = "red" if c.severity.value == "critical" else "yellow"
            console.print(
                f"   [{color}]{c.severity.value}[/{color}] {c.resource_id}: "
                f"#{c.first_index} / #{c.second_index} overlap {c.overlap_minutes} min"
            )
    else:
        console.print("\n[green]No conflicts[/green]")

    return 0


def run_colors(args: argparse.Namespace) -> int:
    """Print the color of each resource and the next suggested palette slot.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        resources = _RESOURCES.validate_python(_records(load_config(args.resources), "resources"))
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1

    assigner = ResourceColorAssigner()
    color_map = assigner.build_color_map(resources)
    next_index = assigner.suggest_next_index(r.color_index for r in resources)

    if args.json:
        payload = {
            "colors": {rid: entry.model_dump() for rid, entry in color_map.items()},
            "next_index": next_index,
        }
        print(json.dumps(payload, indent=2))
        return 0

    table = Table(title="Resource colors")
    for column in ("Resource", "Label", "Slot", "Color", "Main", "Light", "Border"):
        table.add_column(column)
    for resource in resources:
        entry = color_map[resource.id]
        table.add_row(
            resource.id,
            resource.label,
            str(assigner.index_for(resource.id, resource.color_index)),
            f"[{entry.main}]■[/] {entry.name}",
            entry.main,
            entry.light,
            entry.border,
        )
    console.print(table)
    console.print(f"\n[bold]Next free slot:[/bold] {next_index}")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="tableflow",
        description="tableflow - booking overlap layout for venue calendars",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    layout = sub.add_parser("layout", help="Lay out a bookings file")
    layout.add_argument("bookings", help="Path to bookings JSON/YAML")
    layout.add_argument(
        "--config",
        default=None,
        help="Path to engine config JSON/YAML (default: tableflow.yaml if present)",
    )
    layout.add_argument("--date", default=None, help="Only show bookings starting on YYYY-MM-DD")
    layout.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    colors = sub.add_parser("colors", help="Show resource colors")
    colors.add_argument("resources", help="Path to resources JSON/YAML")
    colors.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    return p


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    if args.cmd == "layout":
        sys.exit(run_layout(args))
    elif args.cmd == "colors":
        sys.exit(run_colors(args))


if __name__ == "__main__":
    main()
