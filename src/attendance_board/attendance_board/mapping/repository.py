from __future__ import annotations

from typing import Any, Optional, Protocol


class ColumnMappingStore(Protocol):
    """Named-blob storage keyed by application namespace."""

    def get(self, key: str) -> Optional[dict[str, Any]]:
        raise NotImplementedError

    def set(self, key: str, value: dict[str, Any]) -> None:
        raise NotImplementedError
