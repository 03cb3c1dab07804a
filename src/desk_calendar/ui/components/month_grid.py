from __future__ import annotations

from typing import List, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QGridLayout, QLabel, QPushButton, QSizePolicy, QWidget

from ...services import GRID_CELLS, GRID_COLUMNS, GridCell


class MonthGrid(QWidget):
    """Six rows of seven day buttons under a weekday header row."""

    day_clicked = pyqtSignal(str)

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("calendarPanel")
        layout = QGridLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(6)

        self._headers: List[QLabel] = []
        for column in range(GRID_COLUMNS):
            header = QLabel("")
            header.setObjectName("weekdayHeader")
            header.setAlignment(Qt.AlignmentFlag.AlignCenter)
            layout.addWidget(header, 0, column)
            self._headers.append(header)

        self._buttons: List[QPushButton] = []
        for index in range(GRID_CELLS):
            button = QPushButton("")
            button.setObjectName("dayCell")
            button.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
            button.setMinimumSize(56, 48)
            button.clicked.connect(lambda _checked=False, i=index: self._emit_click(i))
            layout.addWidget(button, 1 + index // GRID_COLUMNS, index % GRID_COLUMNS)
            self._buttons.append(button)

        self._cells: List[GridCell] = []

    def set_cells(self, headers: Sequence[str], cells: Sequence[GridCell]) -> None:
        for label, text in zip(self._headers, headers):
            label.setText(text)
        self._cells = list(cells)
        for button, cell in zip(self._buttons, self._cells):
            button.setText("" if cell.is_padding else f"{cell.day}{'  •' if cell.has_events else ''}")
            button.setEnabled(not cell.is_padding)
            button.setToolTip(cell.label)
            button.setAccessibleName(cell.label)
            button.setProperty("padding", cell.is_padding)
            button.setProperty("today", cell.is_today)
            button.setProperty("selected", cell.is_selected)
            button.setProperty("hasEvents", cell.has_events)
            # Dynamic properties only restyle after a repolish.
            button.style().unpolish(button)
            button.style().polish(button)

    def _emit_click(self, index: int) -> None:
        if index >= len(self._cells):
            return
        cell = self._cells[index]
        if cell.date_key:
            self.day_clicked.emit(cell.date_key)
