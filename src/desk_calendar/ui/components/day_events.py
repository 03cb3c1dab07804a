from __future__ import annotations

from typing import Iterable, Optional

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QListWidget, QListWidgetItem, QPushButton, QVBoxLayout, QWidget

from ...domain import EventRecord


class DayEventList(QWidget):
    """Events of the selected day with a completion checkbox per line."""

    toggle_requested = pyqtSignal(str, str)
    edit_requested = pyqtSignal(str, str)
    delete_requested = pyqtSignal(str, str)

    def __init__(self) -> None:
        super().__init__()
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(QLabel("For selected date"))

        self.event_list = QListWidget()
        self.event_list.itemChanged.connect(self._on_item_changed)
        self.event_list.itemDoubleClicked.connect(lambda _item: self._emit_for_current(self.edit_requested))
        layout.addWidget(self.event_list, stretch=1)

        buttons = QHBoxLayout()
        edit_button = QPushButton("Edit")
        edit_button.clicked.connect(lambda: self._emit_for_current(self.edit_requested))
        buttons.addWidget(edit_button)
        delete_button = QPushButton("Delete")
        delete_button.setObjectName("secondaryButton")
        delete_button.clicked.connect(lambda: self._emit_for_current(self.delete_requested))
        buttons.addWidget(delete_button)
        layout.addLayout(buttons)

        self._date_key: Optional[str] = None

    def populate(self, date_key: Optional[str], events: Iterable[EventRecord]) -> None:
        self._date_key = date_key
        self.event_list.blockSignals(True)
        try:
            self.event_list.clear()
            for event in events:
                label = f"{event.title}    {event.time}" if event.time else event.title
                item = QListWidgetItem(label)
                item.setData(Qt.ItemDataRole.UserRole, event.id)
                item.setFlags(item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
                item.setCheckState(Qt.CheckState.Checked if event.completed else Qt.CheckState.Unchecked)
                item.setToolTip(event.notes)
                if event.completed:
                    font = item.font()
                    font.setStrikeOut(True)
                    item.setFont(font)
                self.event_list.addItem(item)
        finally:
            self.event_list.blockSignals(False)

    def _on_item_changed(self, item: QListWidgetItem) -> None:
        if not self._date_key:
            return
        date_key, event_id = self._date_key, item.data(Qt.ItemDataRole.UserRole)
        # The list is rebuilt on toggle, so leave the item signal before emitting.
        QTimer.singleShot(0, lambda: self.toggle_requested.emit(date_key, event_id))

    def _emit_for_current(self, signal) -> None:
        item = self.event_list.currentItem()
        if item is None or not self._date_key:
            return
        signal.emit(self._date_key, item.data(Qt.ItemDataRole.UserRole))
