from __future__ import annotations

from datetime import datetime
from typing import Any

import pytest

from src.attendance_board.attendance_board.activity.log import ActivityLog

from tests.fakes import MAPPING_DATA, FakeMondayBoard, InMemoryMappingStore


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 1, 9, 0, 0)


@pytest.fixture
def mapping_data() -> dict[str, Any]:
    return dict(MAPPING_DATA)


@pytest.fixture
def board() -> FakeMondayBoard:
    return FakeMondayBoard()


@pytest.fixture
def activity(fixed_now) -> ActivityLog:
    return ActivityLog(clock=lambda: fixed_now)


@pytest.fixture
def mapping_store(mapping_data) -> InMemoryMappingStore:
    return InMemoryMappingStore(mapping_data)
