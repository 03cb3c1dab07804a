"""Tests for the agenda command."""

from datetime import datetime

import pytest

from desk_calendar import cli
from desk_calendar.cli import build_parser, print_agenda


@pytest.fixture
def quiet_cli(monkeypatch):
    """Keep ``main`` from configuring file logging under the user data dir."""
    monkeypatch.setattr(cli, "configure_logging", lambda: None)


def test_agenda_lists_upcoming(api, capsys):
    api.calendar.store.add("2025-01-02", "Dentist", "14:00")
    api.calendar.store.add("2025-01-01", "Breakfast", "08:00")

    print_agenda(limit=5, reference=datetime(2025, 1, 1))

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("January 1, 2025 • 08:00")
    assert lines[0].endswith("Breakfast")
    assert lines[1].endswith("Dentist")


def test_agenda_without_events(api, capsys):
    print_agenda(limit=5, reference=datetime(2025, 1, 1))
    assert capsys.readouterr().out.strip() == "No upcoming incomplete events yet."


def test_parser_agenda_options():
    args = build_parser().parse_args(["agenda", "--limit", "3", "--from", "2025-06-01T09:00"])
    assert args.command == "agenda"
    assert args.limit == 3
    assert args.reference == "2025-06-01T09:00"


def test_main_agenda_from_timestamp(api, quiet_cli, capsys):
    api.calendar.store.add("2025-06-01", "Picnic", "12:00")
    cli.main(["agenda", "--from", "2025-06-01T09:00"])
    assert capsys.readouterr().out.rstrip().endswith("Picnic")


def test_main_rejects_bad_from_value(api, quiet_cli, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["agenda", "--from", "next tuesday"])
    assert excinfo.value.code == 2
    assert "invalid ISO timestamp" in capsys.readouterr().err
