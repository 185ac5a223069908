from __future__ import annotations

import logging
import threading
from collections import deque
from datetime import datetime
from typing import Callable

from ..common.datetime_utils import format_clock_time, now_local
from ..core.constants import DEFAULT_ACTIVITY_LOG_LIMIT

logger = logging.getLogger("attendance_board.activity")


class ActivityLog:
    """Append-only, timestamped trace of engine decisions shown to the operator.

    Entries look like ``[09:00:01] Creating new attendance item...``. Only the
    newest ``limit`` entries are kept.
    """

    def __init__(self, *, limit: int = DEFAULT_ACTIVITY_LOG_LIMIT, clock: Callable[[], datetime] = now_local):
        self._entries: deque[str] = deque(maxlen=int(limit))
        self._clock = clock
        self._lock = threading.Lock()

    def add(self, message: str) -> str:
        entry = f"[{format_clock_time(self._clock())}] {message}"
        with self._lock:
            self._entries.append(entry)
        logger.info(message)
        return entry

    def entries(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
