"""TaskPulse CLI entry points.
This module exposes board listing, stats, export, and watch commands.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from datetime import date
import json
import sys
from typing import Any, Sequence

from core.constants import ALL_SELECTOR, DEFAULT_EXPORT_FILE_NAME, SORT_DIRECTIONS
from core.errors import TaskPulseError
from core.logging_config import configure_cli_logging
from core.types import BoardResult, FilterState, SortState
from ingest.date_normalizer import format_display_date
from ingest.refresh_monitor import MonitorState
from query.board_view import BoardView
from query.task_sorting import SORT_COLUMNS
from query.task_stats import compute_stats
from query.view_spec import load_view_spec
from store.task_payload import stats_to_payload, task_to_payload
from store.task_sdk import TaskPulseClient

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="taskpulse", description="TaskPulse task feed CLI")
    parser.add_argument("--feed", help="Override TASKPULSE_FEED_URI for this command")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=_LOG_LEVELS,
        help="Minimum level of structured events written to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_list_command(subparsers)
    _add_stats_command(subparsers)
    _add_options_command(subparsers)
    _add_export_command(subparsers)
    _add_watch_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the TaskPulse CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_cli_logging(args.log_level)
    try:
        client = _build_client(args.feed)
        if args.command == "list":
            return _run_list_command(client, args)
        if args.command == "stats":
            return _run_stats_command(client, args)
        if args.command == "options":
            return _run_options_command(client)
        if args.command == "export":
            return _run_export_command(client, args)
        if args.command == "watch":
            return _run_watch_command(client, args)
    except TaskPulseError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(feed_uri: str | None) -> TaskPulseClient:
    """Build SDK client with optional feed override.

    Args:
        feed_uri: Optional override path or URL.

    Returns:
        Configured SDK client.
    """
    client = TaskPulseClient()
    if feed_uri:
        return client.with_feed(feed_uri)
    return client


def _run_list_command(client: TaskPulseClient, args: argparse.Namespace) -> int:
    """Handle list command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    snapshot = client.load()
    result = client.board(snapshot, _build_view(client, args))
    if args.json:
        payload = {
            "tasks": [task_to_payload(task) for task in result.page.items],
            "page": result.page.page,
            "page_size": result.page.page_size,
            "total_pages": result.page.total_pages,
            "stats": stats_to_payload(result.stats),
        }
        print(json.dumps(payload, indent=2))
        return 0
    for task in result.page.items:
        print(
            f"{task.id}\t"
            f"{task.status}\t"
            f"{format_display_date(task.planned_at)}\t"
            f"{format_display_date(task.actual_at)}\t"
            f"{task.owner}\t"
            f"{task.system_type}\t"
            f"{task.description}"
        )
    print(_page_footer(result))
    return 0


def _run_stats_command(client: TaskPulseClient, args: argparse.Namespace) -> int:
    """Handle stats command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    snapshot = client.load()
    result = client.board(snapshot, _build_view(client, args))
    for key, value in stats_to_payload(result.stats).items():
        print(f"{key}={value}")
    return 0


def _run_options_command(client: TaskPulseClient) -> int:
    """Handle options command.

    Args:
        client: SDK client.

    Returns:
        Exit code.
    """
    owners, system_types = client.options(client.load())
    print("owners:\t" + "\t".join(owners))
    print("system_types:\t" + "\t".join(system_types))
    return 0


def _run_export_command(client: TaskPulseClient, args: argparse.Namespace) -> int:
    """Handle export command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    snapshot = client.load()
    report_path = client.export(snapshot, _build_view(client, args), args.output)
    if report_path is None:
        print("no tasks matched; nothing exported", file=sys.stderr)
        return 0
    print(report_path)
    return 0


def _run_watch_command(client: TaskPulseClient, args: argparse.Namespace) -> int:
    """Handle watch command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code; 1 when the last cycle ended with no data to show.
    """
    interval = args.interval or client.config.refresh_interval_seconds
    monitor = client.monitor()
    final_state = monitor.run(interval, max_cycles=args.cycles, on_cycle=_print_cycle)
    return 1 if final_state.is_blocking_error else 0


def _print_cycle(state: MonitorState) -> None:
    """Print one refresh summary line."""
    if state.snapshot is None:
        print(f"error={state.error}")
        return
    stats = stats_to_payload(compute_stats(state.snapshot.tasks))
    summary = {"synced_at": state.snapshot.synced_at.isoformat(), "stale": bool(state.error)}
    print(json.dumps({**summary, **stats}, sort_keys=True))


def _build_view(client: TaskPulseClient, args: argparse.Namespace) -> BoardView:
    """Build a board view from an optional view file and CLI overrides."""
    if args.view:
        view = load_view_spec(args.view, client.config.page_size)
    else:
        view = client.default_view()
    filters = _override_filters(view.filters, args)
    if filters != view.filters:
        view = view.with_filters(filters)
    if args.sort:
        view = view.with_sort(SortState(column=args.sort, direction=args.direction or "asc"))
    elif args.direction and view.sort.column:
        view = view.with_sort(replace(view.sort, direction=args.direction))
    if args.page_size is not None:
        view = view.with_page_size(args.page_size)
    if args.page is not None:
        view = view.with_page(args.page)
    return view


def _override_filters(filters: FilterState, args: argparse.Namespace) -> FilterState:
    """Apply filter arguments that were given explicitly."""
    overrides: dict[str, Any] = {}
    if args.owner is not None:
        overrides["owner"] = args.owner
    if args.system is not None:
        overrides["system_type"] = args.system
    if args.start is not None:
        overrides["start"] = args.start
    if args.end is not None:
        overrides["end"] = args.end
    if args.delayed_only:
        overrides["delayed_only"] = True
    if args.not_done_only:
        overrides["not_done_only"] = True
    if args.search is not None:
        overrides["search_query"] = args.search
    return replace(filters, **overrides)


def _page_footer(result: BoardResult) -> str:
    """Render the page and aggregate footer line."""
    page = result.page
    stats = result.stats
    return (
        f"page {page.page}/{page.total_pages} "
        f"({page.total_count} tasks, {stats.delayed} delayed, "
        f"{stats.delayed_rate_percent:.1f}% delay rate)"
    )


def _parse_date_arg(raw_value: str) -> date:
    """Parse a YYYY-MM-DD command-line date."""
    try:
        return date.fromisoformat(raw_value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(
            f"invalid date '{raw_value}': expected YYYY-MM-DD"
        ) from error


def _add_view_arguments(parser: argparse.ArgumentParser) -> None:
    """Register filter, sort, and page arguments shared by view commands."""
    parser.add_argument("--view", help="YAML view file with filters, sort, and paging")
    parser.add_argument("--owner", help=f"Exact owner name, or {ALL_SELECTOR}")
    parser.add_argument("--system", help=f"Exact system type, or {ALL_SELECTOR}")
    parser.add_argument("--start", type=_parse_date_arg, help="Planned on or after YYYY-MM-DD")
    parser.add_argument("--end", type=_parse_date_arg, help="Planned on or before YYYY-MM-DD")
    parser.add_argument("--delayed-only", action="store_true", help="Only delayed tasks")
    parser.add_argument(
        "--not-done-only",
        action="store_true",
        help="Only tasks without an actual completion date",
    )
    parser.add_argument("--search", help='Search text, e.g. \'"order entry", setup\'')
    parser.add_argument("--sort", choices=SORT_COLUMNS, help="Sort column")
    parser.add_argument("--direction", choices=SORT_DIRECTIONS, help="Sort direction")
    parser.add_argument("--page", type=int, help="One-based page index")
    parser.add_argument("--page-size", type=int, help="Tasks per page")


def _add_list_command(subparsers: Any) -> None:
    """Register list subcommand."""
    parser = subparsers.add_parser("list", help="List one page of filtered, sorted tasks")
    _add_view_arguments(parser)
    parser.add_argument("--json", action="store_true", help="Print the page as JSON")


def _add_stats_command(subparsers: Any) -> None:
    """Register stats subcommand."""
    parser = subparsers.add_parser("stats", help="Print aggregate counts for filtered tasks")
    _add_view_arguments(parser)


def _add_options_command(subparsers: Any) -> None:
    """Register options subcommand."""
    subparsers.add_parser("options", help="List distinct owners and system types")


def _add_export_command(subparsers: Any) -> None:
    """Register export subcommand."""
    parser = subparsers.add_parser("export", help="Export filtered tasks to CSV")
    _add_view_arguments(parser)
    parser.add_argument(
        "--output",
        default=DEFAULT_EXPORT_FILE_NAME,
        help="Destination CSV path",
    )


def _add_watch_command(subparsers: Any) -> None:
    """Register watch subcommand."""
    parser = subparsers.add_parser("watch", help="Refresh the feed on a timer")
    parser.add_argument("--interval", type=float, help="Seconds between refreshes")
    parser.add_argument("--cycles", type=int, help="Stop after this many load attempts")
