from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..mapping.model import ColumnMapping
from .model import AttendanceRecord, ColumnValue, TimeFields


class AttendanceRepository(Protocol):
    def find_record_for_day(self, *, mapping: ColumnMapping, employee_id: str, date: str) -> Optional[AttendanceRecord]:
        """Unique record for (employee_id, date), or None; never raises on remote errors."""

        raise NotImplementedError

    def fetch_time_fields(self, *, mapping: ColumnMapping, record_id: str) -> TimeFields:
        raise NotImplementedError

    def create_record(self, *, mapping: ColumnMapping, item_name: str, values: Sequence[ColumnValue]) -> Optional[str]:
        raise NotImplementedError

    def update_record(self, *, mapping: ColumnMapping, record_id: str, values: Sequence[ColumnValue]) -> Optional[str]:
        """Partial merge: columns not in ``values`` keep their current content."""

        raise NotImplementedError
