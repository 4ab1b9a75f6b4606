#!/usr/bin/env python3
"""
Parse day-planner shorthand and print the resulting events.

Usage:
    uv run python src/scripts/plan_day.py "Meeting 9:00-10:00 am; Lunch 12:00-1:00 pm"
    uv run python src/scripts/plan_day.py "Gym 6:00-7:00 am" --tomorrow
"""

import argparse
import sys
from datetime import date, datetime, timedelta
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.events import Event
from services.density import layout_metrics
from services.schedule import parse_schedule


def format_event(event: Event) -> str:
    """'Mon Nov 3 09:00 - 10:00  Meeting', with the end date shown when it wraps."""
    start = f"{event.start.strftime('%a %b')} {event.start.day} {event.start.strftime('%H:%M')}"
    if event.end.date() != event.start.date():
        end = f"{event.end.strftime('%a')} {event.end.strftime('%H:%M')}"
    else:
        end = event.end.strftime("%H:%M")
    return f"{start} - {end}  {event.title or '(untitled)'}"


def main(text: str, date_str: str | None = None, tomorrow: bool = False) -> int:
    """Main entry point. Returns the process exit code."""
    if date_str:
        reference_date = datetime.strptime(date_str, "%Y-%m-%d").date()
    else:
        reference_date = date.today()
    if tomorrow:
        reference_date += timedelta(days=1)

    result = parse_schedule(text, reference_date)
    if result.is_empty:
        print("Nothing to schedule.")
        return 0

    print(f"Events for {reference_date.isoformat()} ({len(result.events)}):")
    for event in result.events:
        print(f"  {format_event(event)}")

    if result.errors:
        print(f"\nCould not parse ({len(result.errors)}):")
        for error in result.errors:
            print(f"  - {error.raw_clause!r}: {error.reason}")

    metrics = layout_metrics(result.events)
    print(f"\nPeak overlap: {metrics.peak_overlap}")
    print(f"Grid height: {metrics.grid_height}px (font {metrics.font_scale}rem)")

    return 1 if result.errors else 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Parse day-planner shorthand into events")
    parser.add_argument(
        "text",
        help="Clauses separated by ';', e.g. 'Meeting 9:00-10:00 am; [Lunch] 12:00-1:00 pm'",
    )
    parser.add_argument(
        "--date",
        help="Reference date (YYYY-MM-DD). Defaults to today.",
    )
    parser.add_argument(
        "--tomorrow",
        action="store_true",
        help="Schedule on the day after the reference date",
    )
    args = parser.parse_args()

    sys.exit(main(args.text, args.date, args.tomorrow))
