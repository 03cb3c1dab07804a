from __future__ import annotations

from typing import Iterable, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QLabel, QListWidget, QListWidgetItem, QVBoxLayout, QWidget

from ...services import UpcomingEntry


class UpcomingPanel(QWidget):
    jump_requested = pyqtSignal(str)

    def __init__(self) -> None:
        super().__init__()
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(QLabel("Upcoming"))

        self.upcoming_list = QListWidget()
        self.upcoming_list.itemClicked.connect(self._on_item_clicked)
        layout.addWidget(self.upcoming_list, stretch=1)

    def populate(self, entries: Iterable[UpcomingEntry], placeholder: Optional[str]) -> None:
        self.upcoming_list.clear()
        for entry in entries:
            item = QListWidgetItem(f"{entry.event.title}\n{entry.stamp}")
            item.setData(Qt.ItemDataRole.UserRole, entry.date_key)
            item.setToolTip(entry.event.notes)
            self.upcoming_list.addItem(item)
        if placeholder:
            empty = QListWidgetItem(placeholder)
            empty.setFlags(Qt.ItemFlag.NoItemFlags)
            self.upcoming_list.addItem(empty)

    def _on_item_clicked(self, item: QListWidgetItem) -> None:
        date_key = item.data(Qt.ItemDataRole.UserRole)
        if date_key:
            self.jump_requested.emit(date_key)
