from .config import Config

SECRET_KEY = "test-secret"

DB_CONFIG = Config.db_config()
MONDAY_CONFIG = {**Config.monday_config(), "token": "test-token"}
ENGINE_CONFIG = {**Config.engine_config(), "location_timeout": 1.0}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
