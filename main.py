#!/usr/bin/env python3
"""
Catholic Quotes - One quote a day, following the liturgical calendar.

Usage:
    python main.py              # Show today's quote
    python main.py --next       # Also show the next liturgical day
    python main.py --preview    # Show today's quote without saving rotation state
    python main.py --status     # Show the shuffle rotation state
    python main.py --reset      # Start the shuffle rotation over
"""

import argparse
import logging
import sys
from datetime import date, datetime, time

from dotenv import load_dotenv

from catholic_quotes.config import Config
from catholic_quotes.easter import FIRST_GREGORIAN_YEAR
from catholic_quotes.formatter import format_next_day, format_selection, format_state
from catholic_quotes.manager import DataManager
from catholic_quotes.shuffle import LAST_ADVANCED_KEY, STATE_KEY
from catholic_quotes.store import FileStore

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Daily Catholic quote",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python main.py                          Show today's quote
    python main.py --next                   Include the next liturgical day
    python main.py --preview --date 2026-12-25
                                            Preview a day without saving state
        """,
    )
    parser.add_argument(
        "--date",
        type=str,
        help="Override today's date (YYYY-MM-DD format)",
    )
    parser.add_argument(
        "--next",
        action="store_true",
        help="Show the next liturgical day",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Work on a copy of the rotation state; nothing is saved",
    )
    parser.add_argument(
        "--status",
        action="store_true",
        help="Show the shuffle rotation state and exit",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Reset the shuffle rotation and exit",
    )
    return parser.parse_args(argv)


def build_clock(date_override: str | None):
    """Clock for the manager; a fixed day at noon when a date is given."""
    if not date_override:
        return None
    target_date = datetime.strptime(date_override, "%Y-%m-%d").date()
    if not FIRST_GREGORIAN_YEAR <= target_date.year < date.max.year:
        raise ValueError(
            f"--date year must be between {FIRST_GREGORIAN_YEAR} and {date.max.year - 1}"
        )
    fixed = datetime.combine(target_date, time(12))
    return lambda: fixed


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv()

    args = parse_args(argv)

    try:
        config = Config.from_env()
        clock = build_clock(args.date)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    config.setup_logging()
    logger.info("Catholic Quotes starting...")
    logger.info(f"State directory: {config.state_dir}")

    file_store = FileStore(config.state_dir)
    store = (
        file_store.copy_to_memory([STATE_KEY, LAST_ADVANCED_KEY])
        if args.preview
        else file_store
    )
    manager = DataManager.from_config(config, store=store, clock=clock)

    if args.status:
        print(format_state(manager.shuffle_manager.current_state()))
        return 0

    if args.reset:
        state = manager.shuffle_manager.reset_shuffle()
        print(f"Shuffle reset. {format_state(state)}")
        return 0

    for_date = manager.clock().date()
    selection = manager.get_todays_selection()
    print(format_selection(selection, for_date))

    if args.next:
        print()
        print(format_next_day(manager.get_next_liturgical_day()))

    return 0 if selection.quote is not None else 1


if __name__ == "__main__":
    sys.exit(main())
