from __future__ import annotations

import pytest

from src.attendance_board.attendance_board.core.exceptions import UnconfiguredError, ValidationError
from src.attendance_board.attendance_board.mapping.model import ColumnMapping
from src.attendance_board.attendance_board.mapping.service import ColumnMappingService

from tests.fakes import InMemoryMappingStore


class BrokenStore:
    def get(self, key):
        raise ConnectionError("db down")

    def set(self, key, value):
        raise ConnectionError("db down")


def test_from_storage_normalizes_board_id(mapping_data):
    mapping = ColumnMapping.from_storage(mapping_data)

    assert mapping.board_id == "1234567890"
    assert mapping.to_storage()["logout_location"] == "location_out"


def test_from_storage_lists_missing_required_columns(mapping_data):
    mapping_data["date"] = ""
    del mapping_data["entry_type"]

    with pytest.raises(ValidationError) as exc:
        ColumnMapping.from_storage(mapping_data)
    assert "date, entry_type" in str(exc.value)


def test_optional_columns_may_be_missing(mapping_data):
    for key in ("employee_name", "location", "logout_location"):
        del mapping_data[key]

    mapping = ColumnMapping.from_storage(mapping_data)

    assert (mapping.employee_name, mapping.location, mapping.logout_location) == ("", "", "")


def test_load_logs_config(mapping_store, activity):
    svc = ColumnMappingService(mapping_store, activity)

    assert svc.current() is not None
    assert activity.entries()[0].startswith("[09:00:00] Loaded config: {")


def test_missing_config_is_not_configured(activity):
    svc = ColumnMappingService(InMemoryMappingStore(), activity)

    assert svc.current() is None
    assert activity.entries() == ["[09:00:00] No config found. Please set it up in app settings."]
    with pytest.raises(UnconfiguredError):
        svc.require()


def test_store_error_is_not_configured(activity):
    svc = ColumnMappingService(BrokenStore(), activity)

    assert svc.load() is None
    assert "Error loading config: db down" in activity.entries()[0]


def test_mapping_is_read_once(mapping_store, mapping_data, activity):
    svc = ColumnMappingService(mapping_store, activity)
    svc.current()
    mapping_store.data["config"] = {**mapping_data, "board_id": 42}

    assert svc.current().board_id == "1234567890"
    assert svc.load().board_id == "42"


def test_save_validates_and_replaces_snapshot(mapping_data, activity):
    store = InMemoryMappingStore()
    svc = ColumnMappingService(store, activity)
    assert svc.current() is None

    saved = svc.save(mapping_data)

    assert svc.current() == saved
    assert store.data["config"]["board_id"] == "1234567890"


def test_save_rejects_incomplete_mapping(mapping_data, activity):
    store = InMemoryMappingStore()
    del mapping_data["board_id"]

    with pytest.raises(ValidationError):
        ColumnMappingService(store, activity).save(mapping_data)
    assert store.data == {}
