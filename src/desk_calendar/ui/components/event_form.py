from __future__ import annotations

from PyQt6.QtCore import QRegularExpression, pyqtSignal
from PyQt6.QtGui import QRegularExpressionValidator
from PyQt6.QtWidgets import QFormLayout, QHBoxLayout, QLineEdit, QPushButton, QTextEdit, QVBoxLayout, QWidget

from ...domain import FormFields, FormMode
from ...services import CalendarState

_TIME_INPUT = QRegularExpression(r"^$|^([01]\d|2[0-3]):[0-5]\d$")


class EventForm(QWidget):
    """Shared add/edit form. Add is shown in add mode, Save and Cancel in edit mode."""

    add_requested = pyqtSignal()
    save_requested = pyqtSignal()
    cancel_requested = pyqtSignal()

    def __init__(self) -> None:
        super().__init__()
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        form = QFormLayout()

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("Title")
        self.title_input.returnPressed.connect(self._submit)
        form.addRow("Title", self.title_input)

        self.time_input = QLineEdit()
        self.time_input.setPlaceholderText("HH:MM (optional)")
        self.time_input.setValidator(QRegularExpressionValidator(_TIME_INPUT, self.time_input))
        form.addRow("Time", self.time_input)

        self.notes_input = QTextEdit()
        self.notes_input.setPlaceholderText("Notes")
        self.notes_input.setFixedHeight(80)
        form.addRow("Notes", self.notes_input)
        layout.addLayout(form)

        buttons = QHBoxLayout()
        self.add_button = QPushButton("Add")
        self.add_button.clicked.connect(lambda: self.add_requested.emit())
        buttons.addWidget(self.add_button)

        self.save_button = QPushButton("Save")
        self.save_button.clicked.connect(lambda: self.save_requested.emit())
        buttons.addWidget(self.save_button)

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.setObjectName("secondaryButton")
        self.cancel_button.clicked.connect(lambda: self.cancel_requested.emit())
        buttons.addWidget(self.cancel_button)
        layout.addLayout(buttons)

    def values(self) -> FormFields:
        return FormFields(
            title=self.title_input.text(),
            time=self.time_input.text(),
            notes=self.notes_input.toPlainText(),
        )

    def apply(self, state: CalendarState) -> None:
        self.title_input.setText(state.form.title)
        self.time_input.setText(state.form.time)
        self.notes_input.setPlainText(state.form.notes)

        editing = state.mode is FormMode.EDITING
        self.add_button.setVisible(not editing)
        self.add_button.setEnabled(state.mode is FormMode.SELECTED)
        self.save_button.setVisible(editing)
        self.cancel_button.setVisible(editing)
        for widget in (self.title_input, self.time_input, self.notes_input):
            widget.setEnabled(state.mode is not FormMode.IDLE)

    def _submit(self) -> None:
        if self.save_button.isVisible():
            self.save_requested.emit()
        else:
            self.add_requested.emit()
