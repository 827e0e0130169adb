"""Projection of intranet planning records into calendar events."""

import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from src.feed.errors import (
    AmbiguousRegistrationError,
    MissingEndError,
    MissingReferenceError,
    MissingStartError,
    MissingTitleError,
)
from src.feed.extractors import (
    INTRA_URL,
    extract_location,
    extract_reference_url,
    extract_registration,
    extract_time,
    extract_title,
)
from src.feed.models import CalendarEvent, RawScheduleRecord, RegistrationStatus


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_uid() -> str:
    return str(uuid.uuid4())


class EventProjector:
    """Turns one RawScheduleRecord into a CalendarEvent.

    Records the student is not registered to are skipped (None). Any other
    missing field raises the ProjectionError subclass naming it; an event is
    either fully built or not built at all.
    """

    def __init__(
        self,
        base_url: str = INTRA_URL,
        *,
        clock: Callable[[], datetime] = _utc_now,
        uid_factory: Callable[[], str] = _new_uid,
    ) -> None:
        """Initialize EventProjector.

        Args:
            base_url: Intranet base URL used for event links.
            clock: Returns the creation timestamp stamped on each event.
            uid_factory: Returns a fresh UID per event.
        """
        self.base_url = base_url
        self._clock = clock
        self._uid_factory = uid_factory

    def project(self, record: RawScheduleRecord) -> CalendarEvent | None:
        """Project a record, or return None if the student is not registered.

        Raises:
            AmbiguousRegistrationError: event_registered missing or boolean True.
            MissingTitleError: acti_title missing.
            MissingStartError: start missing or unparsable.
            MissingEndError: end missing or unparsable.
            MissingReferenceError: one of the module codes missing.
        """
        status = extract_registration(record)
        if status is RegistrationStatus.UNKNOWN:
            raise AmbiguousRegistrationError()
        if status is RegistrationStatus.NOT_REGISTERED:
            return None

        title = extract_title(record)
        if title is None:
            raise MissingTitleError()

        start = extract_time(record, "start")
        if start is None:
            raise MissingStartError()

        end = extract_time(record, "end")
        if end is None:
            raise MissingEndError()

        location = extract_location(record)

        url = extract_reference_url(record, self.base_url)
        if url is None:
            raise MissingReferenceError()

        return CalendarEvent(
            uid=self._uid_factory(),
            created_at=self._clock(),
            title=title,
            start=start,
            end=end,
            location=location,
            url=url,
            # Some calendar clients hide URL, so repeat it as the description
            description=url,
        )
