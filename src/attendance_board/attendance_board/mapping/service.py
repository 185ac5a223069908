from __future__ import annotations

import json
import logging
from typing import Any, Optional

from ..activity.log import ActivityLog
from ..core.constants import CONFIG_STORAGE_KEY
from ..core.exceptions import UnconfiguredError, ValidationError
from .model import ColumnMapping
from .repository import ColumnMappingStore

logger = logging.getLogger(__name__)


class ColumnMappingService:
    """Loads the column mapping once per session and keeps it as a snapshot."""

    def __init__(self, store: ColumnMappingStore, activity: ActivityLog):
        self._store = store
        self._activity = activity
        self._current: Optional[ColumnMapping] = None
        self._loaded = False

    def load(self) -> Optional[ColumnMapping]:
        self._loaded = True
        self._current = None
        try:
            data = self._store.get(CONFIG_STORAGE_KEY)
        except Exception as e:
            logger.exception("Could not read column mapping")
            self._activity.add(f"Error loading config: {e}")
            return None

        if not data:
            self._activity.add("No config found. Please set it up in app settings.")
            return None

        try:
            self._current = ColumnMapping.from_storage(data)
        except ValidationError as e:
            self._activity.add(f"Stored config is incomplete: {e}")
            return None

        self._activity.add("Loaded config: " + json.dumps(self._current.to_storage()))
        return self._current

    def current(self) -> Optional[ColumnMapping]:
        if not self._loaded:
            return self.load()
        return self._current

    def require(self) -> ColumnMapping:
        mapping = self.current()
        if mapping is None:
            raise UnconfiguredError("Please complete app setup in the settings view.")
        return mapping

    def save(self, data: dict[str, Any]) -> ColumnMapping:
        """Validate and persist a mapping; it becomes the snapshot for later submissions."""

        mapping = ColumnMapping.from_storage(data)
        self._store.set(CONFIG_STORAGE_KEY, mapping.to_storage())
        self._current = mapping
        self._loaded = True
        self._activity.add(f"Configuration saved for board {mapping.board_id}.")
        return mapping
