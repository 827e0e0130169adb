import pytest

from src.feed.assembler import DISPLAY_TIMEZONE, PRODUCT_ID, assemble
from src.feed.errors import MissingStartError
from src.feed.projector import EventProjector

from tests.conftest import make_record


def test_keeps_registered_events_in_source_order(projector: EventProjector) -> None:
    records = [
        make_record(acti_title="First"),
        make_record(acti_title="Skipped", event_registered="absent"),
        make_record(acti_title="Second", event_registered="present"),
    ]

    document = assemble(records, projector)

    assert [event.title for event in document.events] == ["First", "Second"]
    assert document.version == "2.0"
    assert document.product_id == PRODUCT_ID == "-//epitech-ics//NONSGML Epitech Calendar//EN"
    assert document.timezone == DISPLAY_TIMEZONE == "Europe/Paris"


def test_empty_schedule_gives_empty_document(projector: EventProjector) -> None:
    document = assemble([], projector)

    assert document.events == []


def test_first_failure_aborts(projector: EventProjector) -> None:
    calls: list[str] = []

    class CountingProjector(EventProjector):
        def project(self, record):
            calls.append(record.acti_title)
            return super().project(record)

    records = [
        make_record(acti_title="Good"),
        make_record(acti_title="Broken", start="tomorrow"),
        make_record(acti_title="Never reached"),
    ]

    with pytest.raises(MissingStartError):
        assemble(records, CountingProjector())
    assert calls == ["Good", "Broken"]


def test_metadata_overrides(projector: EventProjector) -> None:
    document = assemble([], projector, product_id="-//test//EN", timezone="UTC")

    assert document.product_id == "-//test//EN"
    assert document.timezone == "UTC"
