from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceAction
from ..core.exceptions import ValidationError
from .strategies.base import ActionStrategy
from .strategies.login_strategy import LoginStrategy
from .strategies.logout_strategy import LogoutStrategy


def parse_action(value: AttendanceAction | str) -> AttendanceAction:
    """Accept the enum, its value ("Login") or a case-insensitive name ("login")."""

    if isinstance(value, AttendanceAction):
        return value
    for action in AttendanceAction:
        if str(value).strip().lower() == action.value.lower():
            return action
    raise ValidationError(f"Unknown attendance action: {value}")


@dataclass
class ActionStrategyFactory:
    """Factory Pattern: choose the column strategy for a submitted action."""

    def for_action(self, action: AttendanceAction | str) -> ActionStrategy:
        if parse_action(action) == AttendanceAction.LOGIN:
            return LoginStrategy()
        return LogoutStrategy()
