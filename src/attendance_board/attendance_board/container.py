from __future__ import annotations

from dataclasses import dataclass

from .activity.log import ActivityLog
from .attendance.factory import ActionStrategyFactory
from .attendance.monday_attendance_repository import MondayAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .attendance.session import SubmissionGuard
from .core.constants import (
    DEFAULT_ACTIVITY_LOG_LIMIT,
    DEFAULT_APP_NAMESPACE,
    DEFAULT_LOCATION_TIMEOUT_SECONDS,
    DEFAULT_MONDAY_API_URL,
    DEFAULT_MONDAY_API_VERSION,
    DEFAULT_MONDAY_TIMEOUT_SECONDS,
)
from .database.connection import connection_from_settings
from .mapping.mysql_mapping_repository import MySQLColumnMappingStore
from .mapping.repository import ColumnMappingStore
from .mapping.service import ColumnMappingService
from .remote.client import MondayClient


@dataclass(frozen=True)
class Container:
    activity_log: ActivityLog
    submission_guard: SubmissionGuard

    mapping_store: ColumnMappingStore
    attendance_repo: AttendanceRepository

    mapping_service: ColumnMappingService
    attendance_service: AttendanceService


def assemble(
    *,
    mapping_store: ColumnMappingStore,
    attendance_repo: AttendanceRepository,
    activity_log: ActivityLog,
    overwrite_repeated_logout: bool = True,
    location_timeout: float = DEFAULT_LOCATION_TIMEOUT_SECONDS,
) -> Container:
    mapping_service = ColumnMappingService(mapping_store, activity_log)
    attendance_service = AttendanceService(
        attendance_repo,
        mapping_service,
        activity_log,
        strategy_factory=ActionStrategyFactory(),
        overwrite_repeated_logout=overwrite_repeated_logout,
        location_timeout=location_timeout,
    )
    return Container(
        activity_log=activity_log,
        submission_guard=SubmissionGuard(),
        mapping_store=mapping_store,
        attendance_repo=attendance_repo,
        mapping_service=mapping_service,
        attendance_service=attendance_service,
    )


def build_container(*, db_config: dict, monday_config: dict, engine_config: dict | None = None) -> Container:
    engine_config = engine_config or {}

    conn = connection_from_settings(db_config)

    activity_log = ActivityLog(limit=int(engine_config.get("activity_log_limit", DEFAULT_ACTIVITY_LOG_LIMIT)))
    client = MondayClient(
        str(monday_config["token"]),
        api_url=str(monday_config.get("api_url", DEFAULT_MONDAY_API_URL)),
        api_version=str(monday_config.get("api_version", DEFAULT_MONDAY_API_VERSION)),
        timeout=float(monday_config.get("timeout", DEFAULT_MONDAY_TIMEOUT_SECONDS)),
    )

    return assemble(
        mapping_store=MySQLColumnMappingStore(conn, namespace=str(engine_config.get("namespace", DEFAULT_APP_NAMESPACE))),
        attendance_repo=MondayAttendanceRepository(client, activity_log),
        activity_log=activity_log,
        overwrite_repeated_logout=bool(engine_config.get("overwrite_repeated_logout", True)),
        location_timeout=float(engine_config.get("location_timeout", DEFAULT_LOCATION_TIMEOUT_SECONDS)),
    )
