"""
CLI (Command Line Interface).

Quick terminal commands for inspecting a schedule payload, e.g.:

    scheduledata summary
    scheduledata categories
    scheduledata streams
    scheduledata rooms
    scheduledata rooms-by-event <event_id>
    scheduledata events-by-stream <stream_id>
    scheduledata search <text>

All commands accept --data <file.json> (default: the packaged sample) and
--log-level. Output is rendered with rich tables.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Iterable, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from scheduledata import Views, build
from scheduledata.config import DEFAULT_DATA_PATH, DEFAULT_LOG_LEVEL, LOG_LEVELS, Settings
from scheduledata.errors import PayloadLoadError
from scheduledata.loader import load_payload
from scheduledata.logs import setup_logging
from scheduledata.model import Event

console = Console()


def _parse_id(text: str) -> Any:
    """
    Numeric-looking ids are passed on as int, everything else as str.
    """
    raw = (text or "").strip()
    if raw.lstrip("-").isdigit():
        return int(raw)
    return raw


def _safe_str(x: Any) -> str:
    return "" if x is None else str(x)


def _print_events(title: str, events: Iterable[Event]) -> None:
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Time")
    table.add_column("Room")
    table.add_column("Stream")
    for ev in events:
        time_range = f"{_safe_str(ev.start_time)}-{_safe_str(ev.end_time)}".strip("-")
        table.add_row(
            f"[bold cyan]{ev.id}[/]",
            ev.title or "(no title)",
            time_range,
            ev.room.title if ev.room else "",
            ev.stream.title if ev.stream else "",
        )
    console.print(table)


def _cmd_summary(views: Views) -> int:
    """
    Print the number of entities per collection.
    """
    summary = views.store.summary() if views.store is not None else {}
    table = Table(title="Schedule data", box=box.SIMPLE)
    table.add_column("Collection")
    table.add_column("Entries", justify="right")
    for name, count in summary.items():
        table.add_row(name, f"[yellow]{count}[/]")
    console.print(table)
    return 0


def _cmd_categories(views: Views) -> int:
    categories = views.categories.get_categories_with_event_counts()
    if not categories:
        console.print("No categories.")
        return 0

    table = Table(title="Categories", box=box.SIMPLE)
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Key")
    table.add_column("Events", justify="right")
    for c in categories:
        table.add_row(f"[bold cyan]{c.id}[/]", c.name, f"[green]{c.key}[/]", f"[yellow]{c.event_count}[/]")
    console.print(table)
    return 0


def _cmd_streams(views: Views) -> int:
    streams = views.streams.get_streams_with_event_counts()
    if not streams:
        console.print("No streams.")
        return 0

    table = Table(title="Streams", box=box.SIMPLE)
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Colour")
    table.add_column("Events", justify="right")
    for s in streams:
        table.add_row(f"[bold cyan]{s.id}[/]", s.title, s.colour, f"[yellow]{s.event_count}[/]")
    console.print(table)
    return 0


def _cmd_rooms(views: Views) -> int:
    rooms = views.rooms.get_all_rooms()
    if not rooms:
        console.print("No rooms.")
        return 0

    table = Table(title="Rooms", box=box.SIMPLE)
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Capacity", justify="right")
    for r in rooms:
        table.add_row(f"[bold cyan]{r.id}[/]", r.title, str(r.capacity))
    console.print(table)
    return 0


def _cmd_rooms_by_event(args: argparse.Namespace, views: Views) -> int:
    event_id = _parse_id(args.event_id)
    rooms = views.rooms.get_rooms_by_event(event_id)
    if not rooms:
        console.print(f"No room for event {event_id!r}.")
        return 0
    for r in rooms:
        console.print(f"{r.id} | {r.title}")
    return 0


def _cmd_events_by_stream(args: argparse.Namespace, views: Views) -> int:
    stream_id = _parse_id(args.stream_id)
    events = views.streams.get_events_by_stream(stream_id)
    if not events:
        console.print(f"No events for stream {stream_id!r}.")
        return 0
    _print_events(f"Events in stream {stream_id}", events)
    return 0


def _cmd_search(args: argparse.Namespace, views: Views) -> int:
    query = (args.text or "").strip()
    if not query:
        console.print("Please provide a search text.")
        return 1

    matches = views.events.search_events(query)
    if not matches:
        console.print("No results.")
        return 0

    # show max 20
    _print_events("Search results (max 20)", matches[:20])
    if len(matches) > 20:
        console.print(f"... and {len(matches) - 20} more results")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="scheduledata", description="Inspect schedule data")
    parser.add_argument(
        "--data",
        type=Path,
        default=DEFAULT_DATA_PATH,
        help="Schedule payload (JSON). Defaults to the packaged sample.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help="Log level for diagnostics on stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("summary", help="Count entities per collection")
    sub.add_parser("categories", help="List categories with event counts")
    sub.add_parser("streams", help="List streams with event counts")
    sub.add_parser("rooms", help="List rooms")

    p_rooms = sub.add_parser("rooms-by-event", help="Show the room of an event")
    p_rooms.add_argument("event_id", type=str, help="Event ID")

    p_stream = sub.add_parser("events-by-stream", help="List events of a stream")
    p_stream.add_argument("stream_id", type=str, help="Stream ID")

    p_search = sub.add_parser("search", help="Search events by title, subtitle or description")
    p_search.add_argument("text", type=str, help="Search text")

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """
    CLI entry point. Parses args, builds the views once, dispatches to command
    handlers, and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = Settings(data_path=args.data, log_level=args.log_level)

    setup_logging(settings.log_level)

    try:
        payload = load_payload(settings.data_path)
    except PayloadLoadError as exc:
        console.print(f"[red]{exc}[/]")
        raise SystemExit(2)

    views = build(payload)

    if args.command == "summary":
        raise SystemExit(_cmd_summary(views))
    if args.command == "categories":
        raise SystemExit(_cmd_categories(views))
    if args.command == "streams":
        raise SystemExit(_cmd_streams(views))
    if args.command == "rooms":
        raise SystemExit(_cmd_rooms(views))
    if args.command == "rooms-by-event":
        raise SystemExit(_cmd_rooms_by_event(args, views))
    if args.command == "events-by-stream":
        raise SystemExit(_cmd_events_by_stream(args, views))
    if args.command == "search":
        raise SystemExit(_cmd_search(args, views))

    raise SystemExit(2)
