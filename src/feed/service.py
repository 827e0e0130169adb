"""Weekly feed pipeline: token check, planning fetch, projection, rendering."""

import asyncio
from datetime import date

from src.feed.assembler import DISPLAY_TIMEZONE, PRODUCT_ID, assemble
from src.feed.errors import InvalidTokenError, UpstreamEmptyError
from src.feed.intra import IntraClient
from src.feed.logging import get_logger
from src.feed.projector import EventProjector
from src.feed.serializer import serialize
from src.feed.token import validate_token
from src.feed.window import DEFAULT_WINDOW_DAYS, query_window

log = get_logger(__name__)


async def build_weekly_calendar(
    token: str | None,
    *,
    client: IntraClient,
    projector: EventProjector,
    today: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
    product_id: str = PRODUCT_ID,
    timezone: str = DISPLAY_TIMEZONE,
) -> str | None:
    """Build the iCalendar feed for the user owning token.

    The planning fetch is the only await point; it runs in a worker thread
    because the intranet client is blocking.

    Args:
        token: Autologin token taken from the request path.
        client: Intranet planning client.
        projector: Record to event projector.
        today: Anchor of the query window.
        window_days: Days before and after today to include.
        product_id: PRODID of the generated calendar.
        timezone: X-WR-TIMEZONE of the generated calendar.

    Returns:
        The serialized calendar, or None when the intranet has no data at all.

    Raises:
        InvalidTokenError: token missing or malformed.
        UpstreamFailureError: planning fetch failed.
        ProjectionError: a registered activity is missing a required field.
    """
    if not token:
        raise InvalidTokenError("no autologin provided")
    if not validate_token(token):
        raise InvalidTokenError("invalid autologin provided")

    window = query_window(today, window_days)
    log.debug("planning_window", **window.as_params())

    try:
        records = await asyncio.to_thread(client.fetch_planning, token, window)
    except UpstreamEmptyError:
        return None

    document = assemble(records, projector, product_id=product_id, timezone=timezone)
    log.info("weekly_calendar_built", records=len(records), events=len(document.events))
    return serialize(document)
