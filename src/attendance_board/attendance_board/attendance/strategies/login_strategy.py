from __future__ import annotations

from ...core.enums import AttendanceAction
from ...mapping.model import ColumnMapping
from ..model import TimeFields
from .base import ActionStrategy


class LoginStrategy(ActionStrategy):
    """Login writes the login time and the location column."""

    action = AttendanceAction.LOGIN

    def time_column(self, mapping: ColumnMapping) -> str:
        return mapping.login_time

    def location_column(self, mapping: ColumnMapping) -> str:
        return mapping.location

    def already_recorded(self, fields: TimeFields) -> bool:
        return bool(fields.login_time)
