from __future__ import annotations

from datetime import date, datetime


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def format_board_date(value: datetime | date) -> str:
    """Calendar date as stored in the board's date column (YYYY-MM-DD)."""
    return value.strftime("%Y-%m-%d")


def format_clock_time(value: datetime) -> str:
    return value.strftime("%H:%M:%S")
