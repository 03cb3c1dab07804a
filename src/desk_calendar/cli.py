from __future__ import annotations

import argparse
import logging
from datetime import datetime
from typing import Optional, Sequence

from .bootstrap import configure_logging
from .config import get_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Desk Calendar command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("gui", help="Launch the desktop calendar.")

    api_parser = subparsers.add_parser("api", help="Start the local HTTP API over the calendar functions.")
    api_parser.add_argument("--host", default=settings.http.host)
    api_parser.add_argument("--port", type=int, default=settings.http.port)

    agenda_parser = subparsers.add_parser("agenda", help="Print the upcoming incomplete events.")
    agenda_parser.add_argument("--limit", type=int, default=settings.ui.upcoming_limit)
    agenda_parser.add_argument("--from", dest="reference", help="ISO timestamp to start from (default: now).")

    return parser


def print_agenda(limit: int, reference: Optional[datetime] = None) -> None:
    from .api import api_state
    from .services import NO_UPCOMING_MESSAGE

    entries = api_state.calendar.upcoming(reference=reference, limit=limit)
    if not entries:
        print(NO_UPCOMING_MESSAGE)
        return
    for entry in entries:
        print(f"{entry.stamp:<32} {entry.event.title}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    configure_logging()
    logger.info("Desk Calendar CLI starting")
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "gui":
        from .ui.app import run_gui

        run_gui()
    elif args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    elif args.command == "agenda":
        try:
            reference = datetime.fromisoformat(args.reference) if args.reference else None
        except ValueError:
            parser.error(f"argument --from: invalid ISO timestamp: {args.reference!r}")
        print_agenda(args.limit, reference)
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
