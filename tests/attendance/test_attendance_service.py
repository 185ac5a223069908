from __future__ import annotations

from datetime import datetime

import pytest

from src.attendance_board.attendance_board.attendance.factory import ActionStrategyFactory
from src.attendance_board.attendance_board.attendance.geolocation import PayloadLocationSource
from src.attendance_board.attendance_board.attendance.model import AttendanceEvent, Location
from src.attendance_board.attendance_board.attendance.monday_attendance_repository import MondayAttendanceRepository
from src.attendance_board.attendance_board.attendance.service import AttendanceService
from src.attendance_board.attendance_board.core.enums import AttendanceAction, AttendanceState
from src.attendance_board.attendance_board.core.exceptions import UnconfiguredError, ValidationError
from src.attendance_board.attendance_board.mapping.model import ColumnMapping
from src.attendance_board.attendance_board.mapping.service import ColumnMappingService

from tests.fakes import InMemoryMappingStore


def make_service(board, store, activity, **kwargs) -> AttendanceService:
    mappings = ColumnMappingService(store, activity)
    return AttendanceService(MondayAttendanceRepository(board, activity), mappings, activity, **kwargs)


def login(time="09:00:00", location=None, employee_id="E1", date="2024-03-01"):
    return AttendanceEvent(
        employee_id=employee_id,
        employee_name="Alice",
        date=date,
        time=time,
        action=AttendanceAction.LOGIN,
        location=location,
    )


def logout(time="17:30:00", location=None, employee_id="E1", date="2024-03-01"):
    return AttendanceEvent(
        employee_id=employee_id,
        employee_name="Alice",
        date=date,
        time=time,
        action=AttendanceAction.LOGOUT,
        location=location,
    )


def only_item(board):
    assert len(board.items) == 1
    item_id, item = next(iter(board.items.items()))
    return item_id, item


def test_first_login_creates_item_with_login_time_and_location(board, mapping_store, activity):
    svc = make_service(board, mapping_store, activity)

    assert svc.submit(login(location=Location(lat=1.0, lng=2.0))) is True

    _, item = only_item(board)
    assert item["name"] == "E1 - 2024-03-01"
    assert item["columns"] == {
        "text_emp": "E1",
        "text_name": "Alice",
        "date4": "2024-03-01",
        "status": "Login",
        "text_login": "09:00:00",
        "location": {"lat": 1.0, "lng": 2.0, "address": "unknown"},
    }
    assert board.calls == ["items_page_by_column_values", "create_item"]


def test_logout_updates_same_item_and_keeps_login_fields(board, mapping_store, activity):
    svc = make_service(board, mapping_store, activity)
    svc.submit(login(location=Location(lat=1.0, lng=2.0)))
    item_id, _ = only_item(board)

    assert svc.submit(logout()) is True

    same_id, item = only_item(board)
    assert same_id == item_id
    assert item["columns"]["text_logout"] == "17:30:00"
    assert item["columns"]["text_login"] == "09:00:00"
    assert item["columns"]["status"] == "Logout"
    assert item["columns"]["location"] == {"lat": 1.0, "lng": 2.0, "address": "unknown"}
    assert "location_out" not in item["columns"]
    assert board.mutations() == ["create_item", "change_multiple_column_values"]


def test_login_without_location_writes_no_location_column(board, mapping_store, activity):
    svc = make_service(board, mapping_store, activity)

    assert svc.submit(login(location=None)) is True

    _, item = only_item(board)
    assert "location" not in item["columns"]
    assert "text_logout" not in item["columns"]


def test_update_payload_omits_opposite_action_columns(board, mapping_store, mapping_data, activity):
    svc = make_service(board, mapping_store, activity)
    mapping = ColumnMapping.from_storage(mapping_data)
    strategy = ActionStrategyFactory().for_action(AttendanceAction.LOGOUT)

    columns = [c.column_id for c in svc.build_column_values(logout(), mapping, strategy)]

    assert columns == ["text_emp", "text_name", "date4", "status", "text_logout"]


def test_transient_lookup_error_creates_duplicate_item(board, mapping_store, activity):
    # Known gap: a failed lookup falls through to create.
    svc = make_service(board, mapping_store, activity)
    svc.submit(login())
    board.fail_queries = 1

    assert svc.submit(logout()) is True

    assert len(board.items) == 2
    assert board.mutations() == ["create_item", "create_item"]
    assert any("Error fetching items" in e for e in activity.entries())


def test_unconfigured_submit_returns_false_without_remote_calls(board, activity):
    svc = make_service(board, InMemoryMappingStore(), activity)

    assert svc.submit(login()) is False
    assert board.calls == []


def test_incomplete_stored_mapping_counts_as_unconfigured(board, mapping_data, activity):
    del mapping_data["login_time"]
    svc = make_service(board, InMemoryMappingStore(mapping_data), activity)

    assert svc.submit(login()) is False
    assert board.calls == []


def test_mutation_error_returns_false_and_logs(board, mapping_store, activity):
    svc = make_service(board, mapping_store, activity)
    board.fail_mutations = 1

    assert svc.submit(login()) is False
    assert board.items == {}
    assert any("Error creating item" in e and "Column value is invalid" in e for e in activity.entries())


def test_transport_failure_returns_false(board, mapping_store, activity):
    svc = make_service(board, mapping_store, activity)
    board.transport_down = True

    assert svc.submit(login()) is False
    assert board.items == {}


def test_lookup_ignores_loose_matches(board, mapping_store, activity):
    board.add_item("E10 - 2024-03-01", {"text_emp": "E10", "date4": "2024-03-01", "text_login": "08:00:00"})
    svc = make_service(board, mapping_store, activity)

    assert svc.submit(login()) is True

    assert len(board.items) == 2
    assert board.mutations() == ["create_item"]


def test_lookup_twice_returns_same_record(board, mapping_store, mapping_data, activity):
    svc = make_service(board, mapping_store, activity)
    svc.submit(login())
    repo = MondayAttendanceRepository(board, activity)
    mapping = ColumnMapping.from_storage(mapping_data)

    first = repo.find_record_for_day(mapping=mapping, employee_id="E1", date="2024-03-01")
    second = repo.find_record_for_day(mapping=mapping, employee_id="E1", date="2024-03-01")

    assert first is not None
    assert first.record_id == second.record_id


def test_derive_state_progression(board, mapping_store, activity):
    svc = make_service(board, mapping_store, activity)

    flags = svc.derive_state("E1", "2024-03-01")
    assert (flags.login_disabled, flags.logout_disabled) == (False, False)
    assert flags.state == AttendanceState.NONE

    svc.submit(login())
    flags = svc.derive_state("E1", "2024-03-01")
    assert (flags.login_disabled, flags.logout_disabled) == (True, False)
    assert flags.state == AttendanceState.LOGGED_IN

    svc.submit(logout())
    flags = svc.derive_state("E1", "2024-03-01")
    assert (flags.login_disabled, flags.logout_disabled) == (True, True)
    assert flags.state == AttendanceState.LOGGED_IN_OUT


def test_logout_first_then_login_merges_into_one_item(board, mapping_store, activity):
    svc = make_service(board, mapping_store, activity)

    svc.submit(logout())
    assert svc.derive_state("E1", "2024-03-01").state == AttendanceState.LOGGED_OUT_ONLY

    svc.submit(login())
    _, item = only_item(board)
    assert item["columns"]["text_login"] == "09:00:00"
    assert item["columns"]["text_logout"] == "17:30:00"


def test_derive_state_skips_remote_when_unconfigured_or_blank(board, mapping_store, activity):
    svc = make_service(board, mapping_store, activity)
    assert svc.derive_state("   ", "2024-03-01").state == AttendanceState.NONE

    unconfigured = make_service(board, InMemoryMappingStore(), activity)
    assert unconfigured.derive_state("E1", "2024-03-01").state == AttendanceState.NONE
    assert board.calls == []


def test_repeated_logout_overwrites_by_default(board, mapping_store, activity):
    svc = make_service(board, mapping_store, activity)
    svc.submit(login())
    svc.submit(logout(time="17:30:00"))

    svc.submit(logout(time="18:05:00"))

    _, item = only_item(board)
    assert item["columns"]["text_logout"] == "18:05:00"


def test_repeated_logout_kept_when_overwrite_disabled(board, mapping_store, activity):
    svc = make_service(board, mapping_store, activity, overwrite_repeated_logout=False)
    svc.submit(login())
    svc.submit(logout(time="17:30:00", location=Location(lat=3.0, lng=4.0)))

    assert svc.submit(logout(time="18:05:00", location=Location(lat=5.0, lng=6.0))) is True

    _, item = only_item(board)
    assert item["columns"]["text_logout"] == "17:30:00"
    assert item["columns"]["location_out"]["lat"] == 3.0
    assert item["columns"]["status"] == "Logout"
    assert board.mutations().count("change_multiple_column_values") == 2


def test_unmapped_optional_columns_are_not_written(board, mapping_data, activity):
    mapping_data["employee_name"] = ""
    mapping_data["location"] = ""
    svc = make_service(board, InMemoryMappingStore(mapping_data), activity)

    svc.submit(login(location=Location(lat=1.0, lng=2.0)))

    _, item = only_item(board)
    assert set(item["columns"]) == {"text_emp", "date4", "status", "text_login"}


def test_record_attendance_builds_event_and_refreshes_flags(board, mapping_store, activity):
    svc = make_service(board, mapping_store, activity)
    now = datetime(2024, 3, 1, 9, 0, 0)

    result = svc.record_attendance(
        " E1 ",
        "Alice",
        "login",
        location_source=PayloadLocationSource({"lat": "1.5", "lng": 2}),
        now=now,
    )

    assert result.success is True
    assert result.event.date == "2024-03-01"
    assert result.event.time == "09:00:00"
    assert result.event.employee_id == "E1"
    assert result.event.location == Location(lat=1.5, lng=2.0)
    assert result.flags.to_dict() == {"login_disabled": True, "logout_disabled": False, "state": "LOGGED_IN"}
    assert any(e.endswith("Login recorded for Employee ID: E1") for e in activity.entries())


def test_record_attendance_proceeds_without_location(board, mapping_store, activity):
    svc = make_service(board, mapping_store, activity)

    result = svc.record_attendance(
        "E1",
        "Alice",
        AttendanceAction.LOGIN,
        location_source=PayloadLocationSource(None),
        now=datetime(2024, 3, 1, 9, 0, 0),
    )

    assert result.success is True
    assert result.event.location is None
    assert any("Error getting location" in e for e in activity.entries())


def test_record_attendance_reports_failure(board, mapping_store, activity):
    svc = make_service(board, mapping_store, activity)
    board.fail_mutations = 1

    result = svc.record_attendance("E1", "Alice", "Logout", now=datetime(2024, 3, 1, 17, 30, 0))

    assert result.success is False
    assert result.flags.state == AttendanceState.NONE
    assert any("Failed to record Logout for Employee ID: E1" in e for e in activity.entries())


@pytest.mark.parametrize("employee_id,employee_name", [("", "Alice"), ("E1", "  ")])
def test_record_attendance_requires_id_and_name(board, mapping_store, activity, employee_id, employee_name):
    svc = make_service(board, mapping_store, activity)

    with pytest.raises(ValidationError):
        svc.record_attendance(employee_id, employee_name, "Login")
    assert board.calls == []


def test_record_attendance_unconfigured_raises_before_remote_calls(board, activity):
    svc = make_service(board, InMemoryMappingStore(), activity)

    with pytest.raises(UnconfiguredError):
        svc.record_attendance("E1", "Alice", "Login")
    assert board.calls == []
