from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.constants import UNKNOWN_ADDRESS
from ..core.enums import AttendanceAction, AttendanceState


@dataclass(frozen=True)
class Location:
    lat: float
    lng: float
    address: str = UNKNOWN_ADDRESS

    def to_column_value(self) -> dict[str, Any]:
        return {"lat": self.lat, "lng": self.lng, "address": self.address}


@dataclass(frozen=True)
class AttendanceEvent:
    """One Login/Logout submission; only its fields ever reach the board."""

    employee_id: str
    employee_name: str
    date: str
    time: str
    action: AttendanceAction
    location: Optional[Location] = None

    def to_log_dict(self) -> dict[str, Any]:
        return {
            "employeeName": self.employee_name,
            "employeeId": self.employee_id,
            "date": self.date,
            "time": self.time,
            "action": self.action.value,
            "location": self.location.to_column_value() if self.location else None,
        }


@dataclass(frozen=True)
class AttendanceRecord:
    """Board item holding one employee's attendance for one date."""

    record_id: str
    name: str
    employee_id: str
    date: str


@dataclass(frozen=True)
class TimeFields:
    login_time: str = ""
    logout_time: str = ""


@dataclass(frozen=True)
class ColumnValue:
    column_id: str
    value: Any


@dataclass(frozen=True)
class AttendanceFlags:
    login_disabled: bool = False
    logout_disabled: bool = False

    @property
    def state(self) -> AttendanceState:
        if self.login_disabled and self.logout_disabled:
            return AttendanceState.LOGGED_IN_OUT
        if self.login_disabled:
            return AttendanceState.LOGGED_IN
        if self.logout_disabled:
            return AttendanceState.LOGGED_OUT_ONLY
        return AttendanceState.NONE

    def to_dict(self) -> dict[str, Any]:
        return {
            "login_disabled": self.login_disabled,
            "logout_disabled": self.logout_disabled,
            "state": self.state.value,
        }


@dataclass(frozen=True)
class SubmissionResult:
    success: bool
    flags: AttendanceFlags
    event: AttendanceEvent
