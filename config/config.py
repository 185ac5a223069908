import os


def _flag(name: str, default: str) -> bool:
    return bool(int(os.environ.get(name, default)))


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "attendance-board-secret"

    # Settings store (column mapping)
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "attendance_board")

    # monday.com API
    MONDAY_API_URL = os.environ.get("MONDAY_API_URL", "https://api.monday.com/v2")
    MONDAY_API_TOKEN = os.environ.get("MONDAY_API_TOKEN", "")
    MONDAY_API_VERSION = os.environ.get("MONDAY_API_VERSION", "2024-01")
    MONDAY_TIMEOUT_SECONDS = float(os.environ.get("MONDAY_TIMEOUT_SECONDS", "20"))

    # Engine behaviour
    APP_NAMESPACE = os.environ.get("APP_NAMESPACE", "attendance-board")
    LOCATION_TIMEOUT_SECONDS = float(os.environ.get("LOCATION_TIMEOUT_SECONDS", "10"))
    OVERWRITE_REPEATED_LOGOUT = _flag("OVERWRITE_REPEATED_LOGOUT", "1")
    ACTIVITY_LOG_LIMIT = int(os.environ.get("ACTIVITY_LOG_LIMIT", "200"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    AUTO_INIT_DB = _flag("AUTO_INIT_DB", "0")

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }

    @classmethod
    def monday_config(cls) -> dict:
        return {
            "api_url": cls.MONDAY_API_URL,
            "token": cls.MONDAY_API_TOKEN,
            "api_version": cls.MONDAY_API_VERSION,
            "timeout": cls.MONDAY_TIMEOUT_SECONDS,
        }

    @classmethod
    def engine_config(cls) -> dict:
        return {
            "namespace": cls.APP_NAMESPACE,
            "location_timeout": cls.LOCATION_TIMEOUT_SECONDS,
            "overwrite_repeated_logout": cls.OVERWRITE_REPEATED_LOGOUT,
            "activity_log_limit": cls.ACTIVITY_LOG_LIMIT,
        }
