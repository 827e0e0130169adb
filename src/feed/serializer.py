"""iCalendar (RFC 5545) rendering of calendar documents.

Escaping of TEXT values, line folding and CRLF line endings are handled by the
icalendar library. DTSTART/DTEND are written as floating DATE-TIMEs.
"""

from icalendar import Calendar, Event, vDatetime

from src.feed.models import CalendarDocument, CalendarEvent


def _build_event(event: CalendarEvent) -> Event:
    component = Event()
    component.add("uid", event.uid)
    component.add("dtstamp", event.created_at)
    component.add("summary", event.title)
    # Naive datetimes render without Z or TZID
    component.add("dtstart", vDatetime.from_ical(event.start))
    component.add("dtend", vDatetime.from_ical(event.end))
    component.add("location", event.location)
    component.add("url", event.url)
    if event.description is not None:
        component.add("description", event.description)
    return component


def serialize(document: CalendarDocument) -> str:
    """Render a document as an iCalendar string.

    Pure: the same document always renders to the same text.
    """
    calendar = Calendar()
    calendar.add("version", document.version)
    calendar.add("prodid", document.product_id)
    calendar.add("x-wr-timezone", document.timezone)
    for event in document.events:
        calendar.add_component(_build_event(event))
    return calendar.to_ical(sorted=False).decode("utf-8")
