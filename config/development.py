import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY

DB_CONFIG = Config.db_config()
MONDAY_CONFIG = Config.monday_config()
ENGINE_CONFIG = Config.engine_config()

DEBUG = True
LOG_LEVEL = "DEBUG"

# If enabled, app creates the app_storage table on startup (CREATE TABLE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
