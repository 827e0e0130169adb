from src.feed.models import RawScheduleRecord


def test_unknown_keys_are_ignored() -> None:
    record = RawScheduleRecord.model_validate({"acti_title": "Pool", "nb_hours": "2:00:00"})

    assert record.acti_title == "Pool"
    assert not hasattr(record, "nb_hours")


def test_wrong_types_become_absent() -> None:
    record = RawScheduleRecord.model_validate(
        {
            "event_registered": 1,
            "acti_title": 42,
            "start": None,
            "scolaryear": 2023,
            "room": "Room-101",
        }
    )

    assert record.event_registered is None
    assert record.acti_title is None
    assert record.start is None
    assert record.scolaryear is None
    assert record.room is None


def test_registration_keeps_strings_and_booleans() -> None:
    assert RawScheduleRecord.model_validate({"event_registered": False}).event_registered is False
    assert RawScheduleRecord.model_validate({"event_registered": "false"}).event_registered == "false"


def test_room_code_must_be_a_string() -> None:
    record = RawScheduleRecord.model_validate({"room": {"code": 101}})

    assert record.room is not None
    assert record.room.code is None
