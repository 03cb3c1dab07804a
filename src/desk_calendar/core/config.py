from __future__ import annotations

from pathlib import Path
from platformdirs import user_data_dir

APP_NAME = "Desk Calendar"
APP_AUTHOR = "DeskCalendar"
DATA_DIR = Path(user_data_dir(APP_NAME, APP_AUTHOR))
STORAGE_KEY = "pda_calendar_events_v1"
