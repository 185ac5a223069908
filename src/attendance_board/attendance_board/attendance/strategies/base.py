from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import AttendanceAction
from ...mapping.model import ColumnMapping
from ..model import AttendanceEvent, ColumnValue, TimeFields


class ActionStrategy(ABC):
    """Strategy Pattern: which columns a Login or Logout writes."""

    action: AttendanceAction

    @abstractmethod
    def time_column(self, mapping: ColumnMapping) -> str:
        raise NotImplementedError

    @abstractmethod
    def location_column(self, mapping: ColumnMapping) -> str:
        raise NotImplementedError

    @abstractmethod
    def already_recorded(self, fields: TimeFields) -> bool:
        raise NotImplementedError

    def action_columns(self, event: AttendanceEvent, mapping: ColumnMapping) -> list[ColumnValue]:
        columns = [ColumnValue(self.time_column(mapping), event.time)]
        # A missing location must not blank out one recorded earlier.
        location_column = self.location_column(mapping)
        if event.location is not None and location_column:
            columns.append(ColumnValue(location_column, event.location.to_column_value()))
        return columns
