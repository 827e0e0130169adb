from src.feed.logging import REDACTED, redact_autologin

from tests.conftest import TOKEN


def test_token_shaped_values_are_redacted() -> None:
    event = {
        "event": "planning_request_failed",
        "url": f"https://intra.epitech.eu/auth-{TOKEN}/planning/load",
        "path": f"/{TOKEN}/weekly.ics",
        "records": 3,
    }

    redacted = redact_autologin(None, "info", event)

    assert redacted["url"] == f"https://intra.epitech.eu/{REDACTED}/planning/load"
    assert redacted["path"] == f"/{REDACTED}/weekly.ics"
    assert redacted["records"] == 3


def test_other_strings_are_untouched() -> None:
    event = {"event": "request_completed", "route": "/{token}/weekly.ics", "uid": "a" * 41}

    assert redact_autologin(None, "info", dict(event)) == event
