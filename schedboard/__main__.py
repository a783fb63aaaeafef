"""Main entry point for schedboard."""

import argparse
import logging
import os
import sys
from datetime import date
from pathlib import Path

from rich.console import Console
from rich.table import Table

from schedboard.config import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_DB_PATH,
    DEFAULT_SORT_STEP,
    Config,
    parse_step,
)
from schedboard.database import MasterDatabase, parse_resource
from schedboard.dates import jst_today, parse_date
from schedboard.errors import SchedboardError
from schedboard.holidays import holidays_for_year
from schedboard.masters import append_item, normalize_order, reorder_item
from schedboard.models import DayType
from schedboard.timeline import build_timeline, default_range

console = Console()

DAY_STYLES = {
    DayType.WORKING_DAY: "",
    DayType.WEEKEND: "blue",
    DayType.HOLIDAY: "red",
}


def iso_date(value: str) -> str:
    """argparse type accepting only real ``YYYY-MM-DD`` dates."""
    if parse_date(value) is None:
        msg = f"not a valid YYYY-MM-DD date: {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return value


def configure() -> None:
    """Interactive configuration setup."""
    sys.stdout.write("Schedboard Configuration\n")
    sys.stdout.write("=" * 40 + "\n")
    db_path = input(f"Database path [{DEFAULT_DB_PATH}]: ") or str(DEFAULT_DB_PATH)
    sort_step = input(f"Sort order step [{DEFAULT_SORT_STEP}]: ") or str(DEFAULT_SORT_STEP)

    config = Config(db_path=Path(db_path).expanduser(), sort_step=parse_step(sort_step))
    config.save()
    sys.stdout.write("\n✓ Configuration saved successfully!\n")
    sys.stdout.write(f"Config file: {DEFAULT_CONFIG_PATH}\n")


def show_holidays(year: int) -> None:
    table = Table(title=f"Japanese holidays {year}")
    table.add_column("Date")
    table.add_column("Name")
    for day, name in holidays_for_year(year).items():
        table.add_row(day, name)
    console.print(table)


def show_calendar(start: str, end: str) -> None:
    table = Table(title=f"{start} to {end}")
    table.add_column("Date")
    table.add_column("Day type")
    table.add_column("Holiday")
    for day in build_timeline(start, end):
        table.add_row(
            day.date,
            day.day_type.value,
            day.holiday_name or "",
            style=DAY_STYLES[day.day_type],
        )
    console.print(table)


def show_masters(db: MasterDatabase, resource: str) -> None:
    target = parse_resource(resource)
    table = Table(title=target.value)
    table.add_column("Sort order", justify="right")
    table.add_column("Name")
    table.add_column("ID", style="dim")
    for item in db.list_items(target):
        table.add_row(str(item.sort_order), item.name, item.id)
    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schedboard", description="Team schedule calendar and master list tools."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("config", help="interactive configuration")
    commands.add_parser("seed", help="fill empty master lists with defaults")

    holidays = commands.add_parser("holidays", help="list Japanese holidays of a year")
    holidays.add_argument("year", type=int)

    calendar = commands.add_parser("calendar", help="classify every day of a range")
    calendar.add_argument("start", nargs="?", type=iso_date)
    calendar.add_argument("end", nargs="?", type=iso_date)

    masters = commands.add_parser("masters", help="show a master list in order")
    masters.add_argument("resource")

    add = commands.add_parser("add", help="append an entry to a master list")
    add.add_argument("resource")
    add.add_argument("name")

    move = commands.add_parser("move", help="drop an entry before or after another")
    move.add_argument("resource")
    move.add_argument("dragged_id")
    move.add_argument("over_id")
    move.add_argument("position", choices=["before", "after"])

    normalize = commands.add_parser("normalize", help="respace sort orders of a list")
    normalize.add_argument("resource")

    return parser


def run(args: argparse.Namespace, config: Config) -> None:
    if args.command == "holidays":
        show_holidays(args.year)
        return
    if args.command == "calendar":
        start, end = args.start, args.end
        if start is None or end is None:
            default_start, default_end = default_range(date.fromisoformat(jst_today()))
            start, end = start or default_start, end or default_end
        show_calendar(start, end)
        return

    db = MasterDatabase(config.db_path)
    if args.command == "seed":
        added = db.seed_defaults(config.sort_step)
        console.print(f"Added {added} entries")
    elif args.command == "masters":
        show_masters(db, args.resource)
    elif args.command == "add":
        item = append_item(db, args.resource, args.name, config.sort_step)
        console.print(f"Added {item.name} ({item.id}) at {item.sort_order}")
    elif args.command == "move":
        patches = reorder_item(
            db, args.resource, args.dragged_id, args.over_id, args.position, config.sort_step
        )
        console.print(f"Updated {len(patches)} rows")
    elif args.command == "normalize":
        patches = normalize_order(db, args.resource, config.sort_step)
        console.print(f"Updated {len(patches)} rows")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    logging.basicConfig(
        level=os.environ.get("SCHEDBOARD_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        if args.command == "config":
            configure()
        else:
            run(args, Config.resolve())
    except SchedboardError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
