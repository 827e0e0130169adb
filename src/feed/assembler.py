"""Assembly of projected events into a calendar document."""

from collections.abc import Iterable

from src.feed.logging import get_logger
from src.feed.models import CalendarDocument, CalendarEvent, RawScheduleRecord
from src.feed.projector import EventProjector

log = get_logger(__name__)

PRODUCT_ID = "-//epitech-ics//NONSGML Epitech Calendar//EN"
# Sent as X-WR-TIMEZONE, which Google Calendar honours. Event times stay
# floating; no VTIMEZONE is emitted.
DISPLAY_TIMEZONE = "Europe/Paris"


def assemble(
    records: Iterable[RawScheduleRecord],
    projector: EventProjector,
    *,
    product_id: str = PRODUCT_ID,
    timezone: str = DISPLAY_TIMEZONE,
) -> CalendarDocument:
    """Project every record in source order and collect the events.

    The first ProjectionError propagates as-is and no document is returned;
    records projected to None are skipped.

    Args:
        records: Planning records, in the order the intranet returned them.
        projector: Projector applied to each record.
        product_id: PRODID of the document.
        timezone: X-WR-TIMEZONE of the document.

    Returns:
        CalendarDocument with one event per registered activity.
    """
    events: list[CalendarEvent] = []
    skipped = 0
    for record in records:
        event = projector.project(record)
        if event is None:
            skipped += 1
            continue
        events.append(event)

    log.debug("calendar_assembled", events=len(events), skipped=skipped)
    return CalendarDocument(product_id=product_id, timezone=timezone, events=events)
