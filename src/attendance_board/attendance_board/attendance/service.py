from __future__ import annotations

import json
from datetime import date, datetime
from typing import Optional

from ..activity.log import ActivityLog
from ..common.datetime_utils import format_board_date, format_clock_time, now_local
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_LOCATION_TIMEOUT_SECONDS
from ..core.enums import AttendanceAction
from ..mapping.model import ColumnMapping
from ..mapping.service import ColumnMappingService
from .factory import ActionStrategyFactory, parse_action
from .geolocation import LocationSource, acquire_location
from .model import AttendanceEvent, AttendanceFlags, AttendanceRecord, ColumnValue, SubmissionResult
from .repository import AttendanceRepository
from .strategies.base import ActionStrategy


class AttendanceService:
    """Reconciles Login/Logout events with the one board item per employee and day.

    Uniqueness of (employee id, date) is kept purely by looking the item up
    before every write. Two sessions submitting for the same employee at the
    same moment can still both miss the lookup and create two items; the board
    offers no unique constraint to close that race.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        mappings: ColumnMappingService,
        activity: ActivityLog,
        *,
        strategy_factory: ActionStrategyFactory | None = None,
        overwrite_repeated_logout: bool = True,
        location_timeout: float = DEFAULT_LOCATION_TIMEOUT_SECONDS,
    ):
        self._attendance = attendance
        self._mappings = mappings
        self._activity = activity
        self._factory = strategy_factory or ActionStrategyFactory()
        self._overwrite_repeated_logout = bool(overwrite_repeated_logout)
        self._location_timeout = float(location_timeout)

    def build_column_values(
        self,
        event: AttendanceEvent,
        mapping: ColumnMapping,
        strategy: ActionStrategy,
        *,
        include_action_columns: bool = True,
    ) -> list[ColumnValue]:
        """Sparse payload: only columns this event has a value for."""

        columns = [ColumnValue(mapping.employee_id, event.employee_id)]
        if mapping.employee_name:
            columns.append(ColumnValue(mapping.employee_name, event.employee_name or ""))
        columns.append(ColumnValue(mapping.date, event.date))
        columns.append(ColumnValue(mapping.entry_type, event.action.value))
        if include_action_columns:
            columns.extend(strategy.action_columns(event, mapping))
        return columns

    def _keeps_recorded_logout(self, mapping: ColumnMapping, record: AttendanceRecord, strategy: ActionStrategy) -> bool:
        if self._overwrite_repeated_logout or strategy.action != AttendanceAction.LOGOUT:
            return False
        fields = self._attendance.fetch_time_fields(mapping=mapping, record_id=record.record_id)
        if strategy.already_recorded(fields):
            self._activity.add(f"Logout already recorded at {fields.logout_time}; keeping it.")
            return True
        return False

    def submit(self, event: AttendanceEvent) -> bool:
        mapping = self._mappings.current()
        if mapping is None:
            self._activity.add("Cannot record attendance: app is not configured.")
            return False

        strategy = self._factory.for_action(event.action)

        self._activity.add("Checking existing attendance record...")
        existing = self._attendance.find_record_for_day(
            mapping=mapping,
            employee_id=event.employee_id,
            date=event.date,
        )

        if existing:
            keep_logout = self._keeps_recorded_logout(mapping, existing, strategy)
            values = self.build_column_values(event, mapping, strategy, include_action_columns=not keep_logout)
            self._activity.add(f"Updating existing attendance item (ID: {existing.record_id})...")
            ack = self._attendance.update_record(mapping=mapping, record_id=existing.record_id, values=values)
            if ack is None:
                return False
            self._activity.add(f"Attendance item updated successfully (ID: {ack}).")
            return True

        values = self.build_column_values(event, mapping, strategy)
        self._activity.add("Creating new attendance item...")
        ack = self._attendance.create_record(
            mapping=mapping,
            item_name=f"{event.employee_id} - {event.date}",
            values=values,
        )
        if ack is None:
            return False
        self._activity.add(f"New attendance item created successfully (ID: {ack}).")
        return True

    def derive_state(self, employee_id: str, today: str | date | None = None) -> AttendanceFlags:
        """Which actions are already recorded today; recomputed on every call."""

        employee_id = (employee_id or "").strip()
        mapping = self._mappings.current()
        if mapping is None or not employee_id:
            return AttendanceFlags()

        if today is None:
            today = now_local()
        if isinstance(today, (date, datetime)):
            today = format_board_date(today)

        record = self._attendance.find_record_for_day(mapping=mapping, employee_id=employee_id, date=today)
        if not record:
            self._activity.add("No attendance record found for today.")
            return AttendanceFlags()

        fields = self._attendance.fetch_time_fields(mapping=mapping, record_id=record.record_id)
        self._activity.add(
            f"Login time: {fields.login_time or 'not recorded'}, "
            f"Logout time: {fields.logout_time or 'not recorded'}"
        )
        return AttendanceFlags(login_disabled=fields.login_time != "", logout_disabled=fields.logout_time != "")

    def record_attendance(
        self,
        employee_id: str,
        employee_name: str,
        action: AttendanceAction | str,
        *,
        location_source: Optional[LocationSource] = None,
        now: datetime | None = None,
    ) -> SubmissionResult:
        """Build the event for a button press, submit it and re-derive the flags."""

        employee_id = require_non_empty(employee_id, "Employee ID")
        employee_name = require_non_empty(employee_name, "Employee Name")
        action = parse_action(action)
        self._mappings.require()

        location = acquire_location(location_source, timeout=self._location_timeout, activity=self._activity)
        now = now or now_local()
        event = AttendanceEvent(
            employee_id=employee_id,
            employee_name=employee_name,
            date=format_board_date(now),
            time=format_clock_time(now),
            action=action,
            location=location,
        )
        self._activity.add("Prepared attendance data: " + json.dumps(event.to_log_dict()))

        success = self.submit(event)
        if success:
            self._activity.add(f"{action.value} recorded for Employee ID: {employee_id}")
        else:
            self._activity.add(f"Failed to record {action.value} for Employee ID: {employee_id}")

        flags = self.derive_state(employee_id, event.date)
        return SubmissionResult(success=success, flags=flags, event=event)
