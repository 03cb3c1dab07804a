from __future__ import annotations

from enum import Enum


class FormMode(str, Enum):
    IDLE = "idle"
    SELECTED = "selected"
    EDITING = "editing"
