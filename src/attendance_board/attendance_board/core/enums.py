from __future__ import annotations

from enum import Enum


class AttendanceAction(str, Enum):
    """Action submitted by the employee; its value is written to the entry-type column."""

    LOGIN = "Login"
    LOGOUT = "Logout"


class AttendanceState(str, Enum):
    """Per employee, per day progression derived from the record's time columns."""

    NONE = "NONE"
    LOGGED_IN = "LOGGED_IN"
    LOGGED_IN_OUT = "LOGGED_IN_OUT"
    LOGGED_OUT_ONLY = "LOGGED_OUT_ONLY"
