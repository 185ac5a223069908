"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Candidates beyond this page size are not considered by the day lookup.
CANDIDATE_PAGE_LIMIT = 50

CONFIG_STORAGE_KEY = "config"
DEFAULT_APP_NAMESPACE = "attendance-board"

DEFAULT_MONDAY_API_URL = "https://api.monday.com/v2"
DEFAULT_MONDAY_API_VERSION = "2024-01"
DEFAULT_MONDAY_TIMEOUT_SECONDS = 20

DEFAULT_LOCATION_TIMEOUT_SECONDS = 10
DEFAULT_ACTIVITY_LOG_LIMIT = 200

UNKNOWN_ADDRESS = "unknown"
