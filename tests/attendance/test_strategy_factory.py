import pytest

from src.attendance_board.attendance_board.attendance.factory import ActionStrategyFactory, parse_action
from src.attendance_board.attendance_board.attendance.model import AttendanceEvent, ColumnValue, Location, TimeFields
from src.attendance_board.attendance_board.attendance.strategies.login_strategy import LoginStrategy
from src.attendance_board.attendance_board.attendance.strategies.logout_strategy import LogoutStrategy
from src.attendance_board.attendance_board.core.enums import AttendanceAction
from src.attendance_board.attendance_board.core.exceptions import ValidationError
from src.attendance_board.attendance_board.mapping.model import ColumnMapping


@pytest.mark.parametrize("value", ["Login", "login", " LOGIN ", AttendanceAction.LOGIN])
def test_factory_login(value):
    assert isinstance(ActionStrategyFactory().for_action(value), LoginStrategy)


def test_factory_logout():
    assert isinstance(ActionStrategyFactory().for_action("logout"), LogoutStrategy)


def test_unknown_action_rejected():
    with pytest.raises(ValidationError):
        parse_action("lunch")


def test_logout_strategy_uses_logout_columns(mapping_data):
    mapping = ColumnMapping.from_storage(mapping_data)
    event = AttendanceEvent("E1", "Alice", "2024-03-01", "17:30:00", AttendanceAction.LOGOUT, Location(1.0, 2.0))

    columns = LogoutStrategy().action_columns(event, mapping)

    assert columns == [
        ColumnValue("text_logout", "17:30:00"),
        ColumnValue("location_out", {"lat": 1.0, "lng": 2.0, "address": "unknown"}),
    ]


def test_already_recorded_checks_own_time_field():
    fields = TimeFields(login_time="09:00:00", logout_time="")

    assert LoginStrategy().already_recorded(fields) is True
    assert LogoutStrategy().already_recorded(fields) is False
