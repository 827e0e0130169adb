"""Shared fixtures for the feed test suite."""

from datetime import date, datetime, timezone
from typing import Any

import pytest

from src.feed.errors import UpstreamError
from src.feed.models import RawScheduleRecord
from src.feed.projector import EventProjector
from src.feed.window import QueryWindow

TOKEN = "0123456789abcdefghijklmnopqrstuvwxyz0123"
TODAY = date(2024, 3, 4)
CREATED_AT = datetime(2024, 3, 4, 8, 0, 0, tzinfo=timezone.utc)
FIXED_UID = "00000000-0000-4000-8000-000000000001"


def make_payload(**overrides: Any) -> dict[str, Any]:
    """Planning record as returned by the intranet, registered by default."""
    payload: dict[str, Any] = {
        "event_registered": "registered",
        "acti_title": "Bootstrap Pool",
        "start": "2024-03-04 09:30:00",
        "end": "2024-03-04 12:00:00",
        "room": {"code": "France/Paris/Campus-A/Room-101", "type": "salle"},
        "scolaryear": "2023",
        "codemodule": "B-CPE-100",
        "codeinstance": "PAR-1-1",
        "codeacti": "acti-612345",
        "instance_location": "FR/PAR",
        "semester": 1,
    }
    payload.update(overrides)
    return {key: value for key, value in payload.items() if value is not ...}


def make_record(**overrides: Any) -> RawScheduleRecord:
    """RawScheduleRecord built from make_payload; pass ... to drop a key."""
    return RawScheduleRecord.model_validate(make_payload(**overrides))


class FakeIntraClient:
    """Stands in for IntraClient; records calls and replays a canned result."""

    def __init__(
        self,
        payloads: list[dict[str, Any]] | None = None,
        error: UpstreamError | None = None,
    ) -> None:
        self.payloads = payloads or []
        self.error = error
        self.calls: list[tuple[str, QueryWindow]] = []
        self.closed = False

    def fetch_planning(self, token: str, window: QueryWindow) -> list[RawScheduleRecord]:
        self.calls.append((token, window))
        if self.error is not None:
            raise self.error
        return [RawScheduleRecord.model_validate(p) for p in self.payloads]

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def projector() -> EventProjector:
    return EventProjector(clock=lambda: CREATED_AT, uid_factory=lambda: FIXED_UID)
