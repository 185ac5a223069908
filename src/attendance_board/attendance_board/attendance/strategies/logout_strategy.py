from __future__ import annotations

from ...core.enums import AttendanceAction
from ...mapping.model import ColumnMapping
from ..model import TimeFields
from .base import ActionStrategy


class LogoutStrategy(ActionStrategy):
    """Logout writes the logout time and the logout-location column."""

    action = AttendanceAction.LOGOUT

    def time_column(self, mapping: ColumnMapping) -> str:
        return mapping.logout_time

    def location_column(self, mapping: ColumnMapping) -> str:
        return mapping.logout_location

    def already_recorded(self, fields: TimeFields) -> bool:
        return bool(fields.logout_time)
