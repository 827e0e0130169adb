"""Pydantic models for planning records and generated calendars.

All data structures use Pydantic v2 for validation, serialization, and type safety.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


class Room(BaseModel):
    """Room object attached to an intranet activity."""

    model_config = ConfigDict(extra="ignore")

    code: str | None = None  # "FR/PAR/Epitech/Salle-Turing"

    coerce_code = field_validator("code", mode="before")(_str_or_none)


class RawScheduleRecord(BaseModel):
    """One activity from the intranet planning endpoint.

    Only the keys below are read; everything else in the payload is ignored.
    Every field is optional, and a value of the wrong JSON type is treated as
    absent rather than rejected, so a malformed record fails later in the
    projection with a message naming the field.
    """

    model_config = ConfigDict(extra="ignore")

    event_registered: str | bool | None = None  # "registered", "present", "absent", False
    acti_title: str | None = None
    start: str | None = None  # "2024-03-04 09:30:00"
    end: str | None = None
    room: Room | None = None
    scolaryear: str | None = None
    codemodule: str | None = None
    codeinstance: str | None = None
    codeacti: str | None = None

    coerce_strings = field_validator(
        "acti_title",
        "start",
        "end",
        "scolaryear",
        "codemodule",
        "codeinstance",
        "codeacti",
        mode="before",
    )(_str_or_none)

    @field_validator("event_registered", mode="before")
    @classmethod
    def coerce_registration(cls, value: Any) -> str | bool | None:
        return value if isinstance(value, (str, bool)) else None

    @field_validator("room", mode="before")
    @classmethod
    def coerce_room(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None


class RegistrationStatus(str, Enum):
    """Registration state derived from event_registered."""

    REGISTERED = "registered"
    NOT_REGISTERED = "not_registered"
    UNKNOWN = "unknown"


class CalendarEvent(BaseModel):
    """A projected VEVENT.

    start/end are floating times in compact form ("20240304T093000"), read by
    calendar clients in their own local zone. uid and created_at belong to the
    projection, not to the intranet activity.
    """

    model_config = ConfigDict(frozen=True)

    uid: str
    created_at: datetime
    title: str
    start: str
    end: str
    location: str
    url: str
    description: str | None = None  # duplicates url for clients that hide URL


class CalendarDocument(BaseModel):
    """Request-scoped calendar: events in source order plus fixed metadata."""

    version: str = "2.0"
    product_id: str
    timezone: str
    events: list[CalendarEvent] = Field(default_factory=list)
