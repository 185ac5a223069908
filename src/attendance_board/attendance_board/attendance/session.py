from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

from ..core.exceptions import SubmissionInProgressError


class SubmissionGuard:
    """Rejects a second submission for an employee while the first is in flight.

    This plays the part of the disabled Login/Logout buttons; it does not stop
    two separate processes from racing on the same employee and day.
    Only employees with a submission in flight are tracked.
    """

    def __init__(self):
        self._in_flight: set[str] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._in_flight)

    def is_busy(self, employee_id: str) -> bool:
        with self._lock:
            return employee_id in self._in_flight

    @contextmanager
    def hold(self, employee_id: str) -> Iterator[None]:
        with self._lock:
            if employee_id in self._in_flight:
                raise SubmissionInProgressError("Processing... please wait for the current submission.")
            self._in_flight.add(employee_id)
        try:
            yield
        finally:
            with self._lock:
                self._in_flight.discard(employee_id)
