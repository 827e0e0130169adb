"""Weekly iCalendar feed of Epitech intranet planning activities.

Turns an intranet autologin token into a calendar of the activities the
student is registered to, one week either side of today.
"""

from src.feed.assembler import assemble
from src.feed.errors import FeedError
from src.feed.intra import IntraClient
from src.feed.models import CalendarDocument, CalendarEvent, RawScheduleRecord
from src.feed.projector import EventProjector
from src.feed.serializer import serialize
from src.feed.service import build_weekly_calendar
from src.feed.token import validate_token
from src.feed.window import query_window

__all__ = [
    "assemble",
    "build_weekly_calendar",
    "CalendarDocument",
    "CalendarEvent",
    "EventProjector",
    "FeedError",
    "IntraClient",
    "query_window",
    "RawScheduleRecord",
    "serialize",
    "validate_token",
]
