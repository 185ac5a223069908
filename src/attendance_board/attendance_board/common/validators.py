from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"Please enter {field_name}.")
    return value.strip()


def require_json_object(data: Any) -> dict[str, Any]:
    """A missing body counts as empty; anything other than an object is rejected."""

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object.")
    return data
