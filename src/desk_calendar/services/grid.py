"""Projection of one month onto the fixed 6x7 day grid."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Mapping, Optional, Sequence

from ..core.dates import SUNDAY, days_in_month, first_weekday, format_long, is_today
from ..domain import CalendarDay, make_date_key

GRID_COLUMNS = 7
GRID_ROWS = 6
GRID_CELLS = GRID_COLUMNS * GRID_ROWS


@dataclass(frozen=True, slots=True)
class GridCell:
    index: int
    day: Optional[int] = None
    date_key: Optional[str] = None
    label: str = ""
    is_today: bool = False
    is_selected: bool = False
    has_events: bool = False

    @property
    def is_padding(self) -> bool:
        return self.day is None

    @property
    def row(self) -> int:
        return self.index // GRID_COLUMNS

    @property
    def column(self) -> int:
        return self.index % GRID_COLUMNS


def project_month(
    year: int,
    month_index: int,
    snapshot: Mapping[str, Sequence[object]],
    selected: Optional[CalendarDay] = None,
    today: Optional[date] = None,
    week_start: int = SUNDAY,
) -> List[GridCell]:
    """Describe all 42 cells of the month grid, padding included.

    The grid always has six rows so its height does not change between months.
    """

    current = today or date.today()
    offset = first_weekday(year, month_index, week_start)
    total_days = days_in_month(year, month_index)

    cells: List[GridCell] = []
    for index in range(GRID_CELLS):
        day_number = index - offset + 1
        if day_number < 1 or day_number > total_days:
            cells.append(GridCell(index=index))
            continue
        key = make_date_key(year, month_index, day_number)
        cells.append(
            GridCell(
                index=index,
                day=day_number,
                date_key=key,
                label=format_long(year, month_index, day_number),
                is_today=is_today(year, month_index, day_number, current),
                is_selected=selected == (year, month_index, day_number),
                has_events=bool(snapshot.get(key)),
            )
        )
    return cells


def grid_rows(cells: Sequence[GridCell]) -> List[List[GridCell]]:
    return [list(cells[start : start + GRID_COLUMNS]) for start in range(0, len(cells), GRID_COLUMNS)]


__all__ = ["GRID_CELLS", "GRID_COLUMNS", "GRID_ROWS", "GridCell", "grid_rows", "project_month"]
