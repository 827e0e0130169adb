"""Date window queried from the intranet planning endpoint."""

from datetime import date, timedelta
from typing import NamedTuple

QUERY_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_WINDOW_DAYS = 7


class QueryWindow(NamedTuple):
    """Inclusive date bounds of a planning query."""

    start: date
    end: date

    def as_params(self) -> dict[str, str]:
        """Render the bounds as planning query parameters (YYYY-MM-DD)."""
        return {
            "start": self.start.strftime(QUERY_DATE_FORMAT),
            "end": self.end.strftime(QUERY_DATE_FORMAT),
        }


def query_window(today: date, days: int = DEFAULT_WINDOW_DAYS) -> QueryWindow:
    """Compute the window of `days` calendar days either side of today.

    today is passed in rather than read from the clock; callers use the
    server's local date (date.today()), not a UTC-shifted one.

    Args:
        today: Anchor date.
        days: Days before and after today to include.

    Returns:
        QueryWindow from today - days to today + days.
    """
    if days < 1:
        raise ValueError(f"window must span at least one day each side, got {days}")
    span = timedelta(days=days)
    return QueryWindow(start=today - span, end=today + span)
