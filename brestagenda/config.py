"""Runtime configuration shared by the CLI subcommands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

BASE_URL = "https://www.brest.fr"
START_PATH = "/actus-agenda/agenda-132.html"
REQUEST_TIMEOUT = 30.0  # seconds per GET
USER_AGENT = "brestagenda (+https://www.brest.fr/actus-agenda/agenda-132.html)"

# Weekday abbreviations, indexed from Sunday.
WEEKDAYS = ("Di", "Lu", "Ma", "Me", "Je", "Ve", "Sa")

# Deltas longer than this many days are shown in months.
MONTH_DAYS = 30


@dataclass
class Config:
    """Settings passed explicitly to each subcommand handler."""

    base_url: str = BASE_URL
    start_path: str = START_PATH
    timeout: float = REQUEST_TIMEOUT
    user_agent: str = USER_AGENT
    dump_dir: Optional[Path] = None
    weekdays: tuple[str, ...] = WEEKDAYS
    month_days: int = MONTH_DAYS
