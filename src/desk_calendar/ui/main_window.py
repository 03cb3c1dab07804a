from __future__ import annotations

import logging
from typing import Callable, List

from PyQt6.QtCore import QEvent, Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSplitter,
    QVBoxLayout,
    QWidget,
)

from ..config.settings import AppSettings
from ..core.dates import MONTH_NAMES, year_range
from ..domain import parse_date_key
from ..services import CalendarService, CalendarState, initial_state
from ..services import selection
from .components.day_events import DayEventList
from .components.event_form import EventForm
from .components.month_grid import MonthGrid
from .components.upcoming_panel import UpcomingPanel

logger = logging.getLogger(__name__)


class CalendarWindow(QMainWindow):
    """One calendar surface. Several windows can share the same store."""

    def __init__(self, *, service: CalendarService, settings: AppSettings) -> None:
        super().__init__()
        self.service = service
        self.settings = settings
        self.state: CalendarState = selection.jump_to_today(initial_state())
        self._secondary_windows: List[CalendarWindow] = []
        self._ready = False

        self.setWindowTitle(settings.ui.app_name)
        self.resize(1180, 720)
        self._build_actions()

        # ------------------------------------------------------------------ header
        self.prev_button = QPushButton("◀")
        self.prev_button.clicked.connect(lambda: self._navigate(-1))
        self.next_button = QPushButton("▶")
        self.next_button.clicked.connect(lambda: self._navigate(1))
        self.today_button = QPushButton("Today")
        self.today_button.setObjectName("secondaryButton")
        self.today_button.clicked.connect(self.go_today)

        self.month_box = QComboBox()
        self.month_box.addItems(MONTH_NAMES)
        self.month_box.currentIndexChanged.connect(self._on_month_year_changed)
        self.year_box = QComboBox()
        self._fill_years(self.state.view_year)
        self.year_box.currentIndexChanged.connect(self._on_month_year_changed)

        header = QHBoxLayout()
        header.addWidget(self.prev_button)
        header.addWidget(self.month_box)
        header.addWidget(self.year_box)
        header.addWidget(self.next_button)
        header.addStretch(1)
        header.addWidget(self.today_button)

        self.grid = MonthGrid()
        self.grid.day_clicked.connect(self.select_day)

        left = QWidget()
        left_layout = QVBoxLayout(left)
        left_layout.addLayout(header)
        left_layout.addWidget(self.grid, stretch=1)

        # ------------------------------------------------------------------ sidebar
        sidebar = QWidget()
        sidebar.setObjectName("sidebarPanel")
        sidebar_layout = QVBoxLayout(sidebar)
        sidebar_layout.setContentsMargins(16, 16, 16, 16)
        sidebar_layout.setSpacing(12)

        self.selected_label = QLabel("")
        self.selected_label.setObjectName("title")
        sidebar_layout.addWidget(self.selected_label)

        self.form = EventForm()
        self.form.add_requested.connect(self.add_event)
        self.form.save_requested.connect(self.save_edit)
        self.form.cancel_requested.connect(self.cancel_edit)
        sidebar_layout.addWidget(self.form)

        self.day_events = DayEventList()
        self.day_events.toggle_requested.connect(self.toggle_event)
        self.day_events.edit_requested.connect(self.start_edit)
        self.day_events.delete_requested.connect(self.delete_event)
        sidebar_layout.addWidget(self.day_events, stretch=1)

        self.upcoming = UpcomingPanel()
        self.upcoming.jump_requested.connect(self.jump_to_day)
        sidebar_layout.addWidget(self.upcoming, stretch=1)

        splitter = QSplitter()
        splitter.setOrientation(Qt.Orientation.Horizontal)
        splitter.addWidget(left)
        splitter.addWidget(sidebar)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)
        self.setCentralWidget(splitter)

        self._ready = True
        self.sync_ui()

    # ------------------------------------------------------------------ window management

    def _build_actions(self) -> None:
        menu = self.menuBar().addMenu("&Window")

        new_window = QAction("New Window", self)
        new_window.setShortcut(QKeySequence.StandardKey.New)
        new_window.triggered.connect(lambda: self.open_secondary_window())
        menu.addAction(new_window)

        close_window = QAction("Close Window", self)
        close_window.setShortcut(QKeySequence.StandardKey.Close)
        close_window.triggered.connect(lambda: self.close())
        menu.addAction(close_window)

    def open_secondary_window(self) -> None:
        window = CalendarWindow(service=self.service, settings=self.settings)
        window.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        window.destroyed.connect(lambda _obj=None, w=window: self._forget_window(w))
        self._secondary_windows.append(window)
        window.show()
        logger.debug("Opened secondary calendar window (%d open)", len(self._secondary_windows))

    def _forget_window(self, window: "CalendarWindow") -> None:
        if window in self._secondary_windows:
            self._secondary_windows.remove(window)

    def event(self, event: QEvent) -> bool:
        # Another window may have changed the store while this one was in the background.
        if self._ready and event.type() == QEvent.Type.WindowActivate:
            self._remember_form()
            self.sync_ui()
        return super().event(event)

    # ------------------------------------------------------------------ rendering

    def sync_ui(self) -> None:
        view = self.service.render(self.state)

        self._ensure_year_range(self.state.view_year)
        for box, value in (
            (self.month_box, self.state.view_month_index),
            (self.year_box, self.year_box.findData(self.state.view_year)),
        ):
            box.blockSignals(True)
            box.setCurrentIndex(value)
            box.blockSignals(False)

        self.grid.set_cells(view.headers, view.cells)
        self.selected_label.setText(view.selected_label)
        self.form.apply(view.state)
        self.day_events.populate(view.state.selected_key, view.day_events)
        self.upcoming.populate(view.upcoming, view.upcoming_placeholder)

    def _fill_years(self, center: int) -> None:
        self.year_box.blockSignals(True)
        self.year_box.clear()
        for year in year_range(center, self.settings.ui.year_span):
            self.year_box.addItem(str(year), year)
        self.year_box.blockSignals(False)

    def _ensure_year_range(self, year: int) -> None:
        first = self.year_box.itemData(0)
        last = self.year_box.itemData(self.year_box.count() - 1)
        if first is None or last is None or not first <= year <= last:
            self._fill_years(year)

    # ------------------------------------------------------------------ transitions

    def _apply(self, transition: Callable[[], CalendarState]) -> None:
        outcome = selection.run_transition(self.state, transition)
        self.state = outcome.state
        if outcome.notice is not None:
            self._show_notice(outcome.notice)
        if outcome.redraw:
            self.sync_ui()

    def _show_notice(self, notice: selection.Notice) -> None:
        if notice.level == "critical":
            QMessageBox.critical(self, notice.title, notice.text)
        elif notice.level == "information":
            self.statusBar().showMessage(notice.text, 5000)
            QMessageBox.information(self, notice.title, notice.text)
        else:
            QMessageBox.warning(self, notice.title, notice.text)

    def _remember_form(self) -> None:
        self.state = selection.update_form(self.state, self.form.values())

    def _navigate(self, delta: int) -> None:
        self._apply(lambda: selection.change_month(self.state, delta))

    def _on_month_year_changed(self, _index: int) -> None:
        year = self.year_box.currentData()
        if year is None:
            return
        self._apply(lambda: selection.set_month(self.state, year, self.month_box.currentIndex()))

    def go_today(self) -> None:
        self._apply(lambda: selection.jump_to_today(self.state))

    def select_day(self, date_key: str) -> None:
        day = parse_date_key(date_key)
        self._apply(lambda: selection.select_date(self.state, *day))

    def jump_to_day(self, date_key: str) -> None:
        day = parse_date_key(date_key)
        self._apply(lambda: selection.jump_to_date(self.state, *day))

    def add_event(self) -> None:
        self._apply(lambda: selection.commit_add(self.state, self.service.store, self.form.values()))

    def save_edit(self) -> None:
        self._apply(lambda: selection.commit_edit(self.state, self.service.store, self.form.values()))

    def cancel_edit(self) -> None:
        self._apply(lambda: selection.cancel_edit(self.state))

    def start_edit(self, date_key: str, event_id: str) -> None:
        self._apply(lambda: selection.start_edit(self.state, self.service.snapshot(), date_key, event_id))

    def toggle_event(self, date_key: str, event_id: str) -> None:
        self._remember_form()
        self._apply(lambda: selection.toggle_event(self.state, self.service.store, date_key, event_id))

    def delete_event(self, date_key: str, event_id: str) -> None:
        self._remember_form()
        self._apply(lambda: selection.delete_event(self.state, self.service.store, date_key, event_id))
