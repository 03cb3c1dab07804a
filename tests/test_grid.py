"""Tests for the month grid projection."""

from datetime import date

import pytest

from desk_calendar.core.dates import MONDAY, days_in_month, first_weekday
from desk_calendar.domain import CalendarDay
from desk_calendar.services import GRID_CELLS, grid_rows, project_month


@pytest.mark.parametrize("year", [-500, 1, 1582, 1900, 2000, 2023, 2024, 9999, 12345])
def test_every_month_fills_forty_two_cells(year):
    for month_index in range(12):
        cells = project_month(year, month_index, {}, today=date(2025, 1, 15))
        assert len(cells) == GRID_CELLS
        days = [cell.day for cell in cells if not cell.is_padding]
        assert days == list(range(1, days_in_month(year, month_index) + 1))


def test_leading_padding_matches_first_weekday():
    cells = project_month(2024, 1, {})
    offset = first_weekday(2024, 1)
    assert offset == 4
    assert all(cell.is_padding for cell in cells[:offset])
    assert cells[offset].day == 1
    assert cells[offset].date_key == "2024-02-01"
    assert cells[offset].label == "February 1, 2024"


def test_monday_week_start_shifts_columns():
    sunday_first = project_month(2025, 5, {})
    monday_first = project_month(2025, 5, {}, week_start=MONDAY)
    assert sunday_first[0].day == 1
    assert monday_first[6].day == 1
    assert monday_first[6].column == 6


def test_today_flag(today):
    cells = project_month(2025, 0, {}, today=today)
    flagged = [cell for cell in cells if cell.is_today]
    assert [cell.date_key for cell in flagged] == ["2025-01-15"]


def test_today_not_flagged_in_other_month(today):
    cells = project_month(2025, 1, {}, today=today)
    assert not any(cell.is_today for cell in cells)


def test_selected_flag(today):
    cells = project_month(2025, 0, {}, selected=CalendarDay(2025, 0, 3), today=today)
    assert [cell.day for cell in cells if cell.is_selected] == [3]


def test_selected_in_other_month_is_not_flagged(today):
    cells = project_month(2025, 1, {}, selected=CalendarDay(2025, 0, 3), today=today)
    assert not any(cell.is_selected for cell in cells)


def test_has_events_flag(store, today):
    store.add("2025-01-20", "Dinner")
    done = store.add("2025-01-21", "Finished")
    store.toggle_completed("2025-01-21", done)

    cells = project_month(2025, 0, store.load(), today=today)

    marked = sorted(cell.date_key for cell in cells if cell.has_events)
    assert marked == ["2025-01-20", "2025-01-21"]


def test_padding_cells_carry_no_flags(today):
    cells = project_month(2025, 0, {"2024-12-31": ["x"]}, today=today)
    for cell in cells:
        if cell.is_padding:
            assert cell.date_key is None
            assert not (cell.is_today or cell.is_selected or cell.has_events)


def test_projection_is_pure(store, today):
    store.add("2025-01-05", "Lunch")
    snapshot = store.load()
    first = project_month(2025, 0, snapshot, today=today)
    second = project_month(2025, 0, snapshot, today=today)
    assert first == second
    assert list(snapshot) == ["2025-01-05"]


def test_grid_rows():
    rows = grid_rows(project_month(2025, 0, {}))
    assert len(rows) == 6
    assert all(len(row) == 7 for row in rows)
    assert rows[1][0].row == 1
