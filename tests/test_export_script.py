"""Tests for scripts/export_weekly.py, loaded by path like the other scripts."""

import asyncio
import importlib.util
from pathlib import Path

import pytest

from src.feed.errors import UpstreamEmptyError

from tests.conftest import TOKEN, FakeIntraClient, make_payload

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "export_weekly.py"


@pytest.fixture
def export_weekly():
    spec = importlib.util.spec_from_file_location("export_weekly", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _patch_client(monkeypatch: pytest.MonkeyPatch, module, intra: FakeIntraClient) -> None:
    monkeypatch.setattr(module, "IntraClient", lambda **kwargs: intra)


def test_writes_calendar_to_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, export_weekly) -> None:
    intra = FakeIntraClient([make_payload()])
    _patch_client(monkeypatch, export_weekly, intra)
    output = tmp_path / "out" / "weekly.ics"
    args = export_weekly._parse_args(["--token", TOKEN, "--output", str(output), "--date", "2024-03-04"])

    assert asyncio.run(export_weekly.main(args)) == 0

    content = output.read_bytes()
    assert content.startswith(b"BEGIN:VCALENDAR\r\n")
    assert b"SUMMARY:Bootstrap Pool" in content
    assert intra.calls[0][1].as_params() == {"start": "2024-02-26", "end": "2024-03-11"}
    assert intra.closed


def test_empty_planning_exit_code(monkeypatch: pytest.MonkeyPatch, export_weekly) -> None:
    _patch_client(monkeypatch, export_weekly, FakeIntraClient(error=UpstreamEmptyError()))
    args = export_weekly._parse_args(["--token", TOKEN])

    assert asyncio.run(export_weekly.main(args)) == export_weekly.EXIT_EMPTY
