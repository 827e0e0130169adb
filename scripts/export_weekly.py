"""Render one user's weekly intranet calendar to an .ics file or stdout.

Runs the same pipeline as the HTTP feed, without the server. Handy for
checking what a subscription will contain.

Run with: python scripts/export_weekly.py --token <autologin>
To file:  python scripts/export_weekly.py --output data/weekly.ics
Past day: python scripts/export_weekly.py --date 2024-03-04

The token defaults to EPITECH_AUTOLOGIN (from the environment or .env).

Exit codes:
  0 = success (calendar on stdout, or file written with --output)
  1 = error (message on stderr)
  2 = the intranet returned no planning data
"""

import argparse
import asyncio
import os
import sys
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Add project root to path for src imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.feed.config import get_config  # noqa: E402
from src.feed.intra import IntraClient  # noqa: E402
from src.feed.logging import setup_logging  # noqa: E402
from src.feed.projector import EventProjector  # noqa: E402
from src.feed.service import build_weekly_calendar  # noqa: E402

EXIT_EMPTY = 2


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments using argparse."""
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--token",
        default=os.getenv("EPITECH_AUTOLOGIN", ""),
        help="Intranet autologin token (default: $EPITECH_AUTOLOGIN)",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Write the calendar to this file instead of stdout",
    )
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Anchor date of the window, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log pipeline progress to stdout (keep off when piping the calendar)",
    )
    return parser.parse_args(argv)


def _log(msg: str) -> None:
    print(msg, file=sys.stderr)


async def main(args: argparse.Namespace) -> int:
    config = get_config()
    setup_logging(
        json_output=config.log_json,
        log_level=config.log_level if args.verbose else "ERROR",
    )

    client = IntraClient(
        base_url=config.intra_url,
        timeout=config.upstream_timeout_seconds,
    )
    try:
        calendar = await build_weekly_calendar(
            args.token,
            client=client,
            projector=EventProjector(config.intra_url),
            today=args.date or date.today(),
            window_days=config.window_days,
            product_id=config.product_id,
            timezone=config.display_timezone,
        )
    finally:
        client.close()

    if calendar is None:
        _log("export_weekly: intranet returned no planning data")
        return EXIT_EMPTY

    if args.output:
        output_file = Path(args.output)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the CRLF line endings required by RFC 5545
        with output_file.open("w", encoding="utf-8", newline="") as f:
            f.write(calendar)
        _log(f"export_weekly: wrote {output_file}")
    else:
        sys.stdout.write(calendar)
    return 0


if __name__ == "__main__":
    args = _parse_args()
    try:
        sys.exit(asyncio.run(main(args)))
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
