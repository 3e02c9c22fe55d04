from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional, Sequence
from zoneinfo import ZoneInfoNotFoundError

import orjson

from .api import get_tools
from .api.serializers import serialize_bounds, serialize_day_view
from .bootstrap import configure_logging
from .config import get_settings
from .core import InvalidTimestampError, timeline_bounds
from .data import EventSourceError, load_events
from .services import build_day_view

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lay out calendar events on a day timeline.")
    parser.add_argument("--log-level", default=None, help="Override AGENDA_LOG_LEVEL.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    layout_parser = subparsers.add_parser("layout", help="Print the day view for an events JSON file.")
    layout_parser.add_argument("path", help="JSON list of event records or a Google events response.")
    layout_parser.add_argument("--px-per-hour", type=int, default=None)
    layout_parser.add_argument("--timezone", default=None, help="IANA zone; defaults to the host zone.")

    bounds_parser = subparsers.add_parser("bounds", help="Print the visible hour range for an events JSON file.")
    bounds_parser.add_argument("path")
    bounds_parser.add_argument("--timezone", default=None)

    subparsers.add_parser("tools", help="Print the registered tool schemas.")

    return parser


def _emit(payload: Any) -> None:
    sys.stdout.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    settings = get_settings().timeline

    try:
        if args.command == "layout":
            view = build_day_view(
                load_events(args.path),
                px_per_hour=args.px_per_hour or settings.px_per_hour,
                default_bounds=settings.default_bounds,
                tz=settings.zone(args.timezone),
            )
            _emit(serialize_day_view(view))
        elif args.command == "bounds":
            bounds = timeline_bounds(
                load_events(args.path),
                default=settings.default_bounds,
                tz=settings.zone(args.timezone),
            )
            _emit(serialize_bounds(bounds))
        elif args.command == "tools":
            _emit([tool.as_tool() for tool in get_tools()])
        else:  # pragma: no cover - argparse enforces choices
            parser.print_help()
    except (EventSourceError, InvalidTimestampError, ValueError, ZoneInfoNotFoundError) as exc:
        logger.error("%s", exc)
        sys.stderr.write(f"error: {exc}\n")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
