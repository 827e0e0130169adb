"""Field extractors for intranet planning records.

Each extractor reads one semantic field from a RawScheduleRecord and returns
the normalized value, or None when the field is missing or unusable. They
never raise; deciding whether absence is fatal is the projector's job.
"""

import re
from datetime import datetime

from src.feed.models import RawScheduleRecord, RegistrationStatus

INTRA_URL = "https://intra.epitech.eu"

# Intranet dates are naive local times
RECORD_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
# Floating iCalendar DATE-TIME (no Z, no TZID)
ICS_TIME_FORMAT = "%Y%m%dT%H%M%S"

REGISTERED_VALUES: frozenset[str] = frozenset({"registered", "present"})

FALLBACK_LOCATION = "At the bar 🍺"
LOCATION_SEPARATOR = " → "

# Raw room format: "Country/City/Location/Room-Name"
_COUNTRY_CITY_PREFIX = re.compile(r"^[a-zA-Z]+/[a-zA-Z]+/")


def extract_registration(record: RawScheduleRecord) -> RegistrationStatus:
    """Derive the registration status from event_registered.

    A bare boolean True is reported as UNKNOWN: the intranet only seems to
    send False, and True does not say whether the student is registered or
    merely not absent.
    """
    value = record.event_registered
    if isinstance(value, bool):
        return RegistrationStatus.UNKNOWN if value else RegistrationStatus.NOT_REGISTERED
    if isinstance(value, str):
        if value in REGISTERED_VALUES:
            return RegistrationStatus.REGISTERED
        return RegistrationStatus.NOT_REGISTERED
    return RegistrationStatus.UNKNOWN


def extract_title(record: RawScheduleRecord) -> str | None:
    return record.acti_title


def extract_time(record: RawScheduleRecord, field: str) -> str | None:
    """Convert a record time field ("start" or "end") to compact floating form.

    "2024-03-04 09:30:00" -> "20240304T093000"
    """
    raw = getattr(record, field, None)
    if not isinstance(raw, str):
        return None
    try:
        parsed = datetime.strptime(raw, RECORD_TIME_FORMAT)
    except ValueError:
        return None
    return parsed.strftime(ICS_TIME_FORMAT)


def extract_location(record: RawScheduleRecord) -> str:
    """Turn room.code into a readable label.

    "FR/PAR/Campus-A/Room-101" -> "Campus-A → Room 101". Only the room name
    (last segment) has its dashes turned into spaces. Activities without a
    room are still valid and get FALLBACK_LOCATION.
    """
    code = record.room.code if record.room is not None else None
    if code is None:
        return FALLBACK_LOCATION

    *path, room_name = _COUNTRY_CITY_PREFIX.sub("", code, count=1).split("/")
    return LOCATION_SEPARATOR.join([*path, room_name.replace("-", " ")])


def extract_reference_url(
    record: RawScheduleRecord, base_url: str = INTRA_URL
) -> str | None:
    """Build the intranet activity page URL from the record's module codes."""
    parts = (
        record.scolaryear,
        record.codemodule,
        record.codeinstance,
        record.codeacti,
    )
    if any(part is None for part in parts):
        return None
    return f"{base_url.rstrip('/')}/module/" + "/".join(parts)
