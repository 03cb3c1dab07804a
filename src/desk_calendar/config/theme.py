from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppPalette:
    background_primary: str = "#030712"
    background_secondary: str = "#050b18"
    surface: str = "#0c162c"
    surface_alt: str = "#12203f"
    accent_primary: str = "#7dd3fc"
    accent_secondary: str = "#f472b6"
    accent_success: str = "#4ade80"
    accent_error: str = "#fb7185"
    text_primary: str = "#f8fafc"
    text_secondary: str = "#c7d2fe"
    text_muted: str = "#64748b"
    border_subtle: str = "#1e293b"
    border_strong: str = "#243657"

    def as_stylesheet(self) -> str:
        """Global stylesheet for the PyQt app, including the day grid cell states."""

        return f"""
        QWidget {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            font-family: 'Helvetica Neue', 'Segoe UI', Arial, sans-serif;
            font-size: 14px;
        }}
        QPushButton {{
            background-color: {self.accent_primary};
            color: #031525;
            border: none;
            padding: 8px 14px;
            border-radius: 10px;
            font-weight: 600;
        }}
        QPushButton:hover {{
            background-color: #5cc9f5;
        }}
        QPushButton:disabled {{
            background-color: {self.border_subtle};
            color: {self.text_secondary};
        }}
        QPushButton#secondaryButton {{
            background-color: transparent;
            color: {self.accent_primary};
            border: 1px solid {self.accent_primary};
        }}
        QPushButton#dayCell {{
            background-color: {self.surface};
            color: {self.text_primary};
            border: 1px solid {self.border_subtle};
            border-radius: 8px;
            text-align: left;
            padding: 6px;
            font-weight: 500;
        }}
        QPushButton#dayCell:hover {{
            border-color: {self.accent_primary};
        }}
        QPushButton#dayCell[padding="true"] {{
            background-color: {self.background_secondary};
            color: {self.text_muted};
            border-color: transparent;
        }}
        QPushButton#dayCell[today="true"] {{
            border: 2px solid {self.accent_success};
        }}
        QPushButton#dayCell[selected="true"] {{
            border: 2px solid {self.accent_secondary};
            background-color: {self.surface_alt};
        }}
        QPushButton#dayCell[hasEvents="true"] {{
            color: {self.accent_primary};
            font-weight: 800;
        }}
        QLineEdit, QTextEdit, QComboBox {{
            background-color: {self.background_secondary};
            color: {self.text_primary};
            border: 1px solid {self.border_strong};
            border-radius: 8px;
            padding: 8px 10px;
        }}
        QLineEdit:focus, QTextEdit:focus, QComboBox:focus {{
            border-color: {self.accent_primary};
        }}
        QListView {{
            background-color: {self.background_secondary};
            alternate-background-color: {self.surface};
            border: 1px solid {self.border_strong};
            selection-background-color: rgba(125, 211, 252, 0.25);
        }}
        QLabel#title {{
            font-size: 18px;
            font-weight: 700;
        }}
        QLabel#weekdayHeader {{
            color: {self.text_secondary};
            font-size: 12px;
            font-weight: 600;
        }}
        QWidget#sidebarPanel {{
            background-color: {self.surface_alt};
            border-left: 1px solid {self.border_strong};
        }}
        QWidget#calendarPanel {{
            background-color: {self.surface};
        }}
        QSplitter::handle {{
            background: {self.border_strong};
            width: 2px;
        }}
        """
