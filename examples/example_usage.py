"""Example: use the service layer directly (without Flask).

Controllers are only a thin layer; reconciliation lives in AttendanceService.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_board.attendance_board.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        monday_config=settings.MONDAY_CONFIG,
        engine_config=settings.ENGINE_CONFIG,
    )

    result = container.attendance_service.record_attendance("E1", "Demo Employee", "Login")
    print(result.success, result.flags.to_dict())
    print("\n".join(container.activity_log.entries()))


if __name__ == "__main__":
    main()
