from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from ..core.exceptions import ValidationError

# Logical fields shown in the settings editor, in display order.
MAPPED_FIELDS = (
    "employee_id",
    "employee_name",
    "date",
    "login_time",
    "logout_time",
    "entry_type",
    "location",
    "logout_location",
)

REQUIRED_FIELDS = ("board_id", "employee_id", "date", "login_time", "logout_time", "entry_type")


@dataclass(frozen=True)
class ColumnMapping:
    """Board id plus the column id behind each logical attendance field.

    Optional columns may be empty; the engine never writes to an unmapped column.
    """

    board_id: str
    employee_id: str
    date: str
    login_time: str
    logout_time: str
    entry_type: str
    employee_name: str = ""
    location: str = ""
    logout_location: str = ""

    @classmethod
    def from_storage(cls, data: Mapping[str, Any]) -> "ColumnMapping":
        values = {name: _as_text(data.get(name)) for name in ("board_id", *MAPPED_FIELDS)}
        missing = [name for name in REQUIRED_FIELDS if not values[name]]
        if missing:
            raise ValidationError(f"Column mapping is missing: {', '.join(missing)}")
        return cls(**values)

    def to_storage(self) -> dict[str, str]:
        return asdict(self)


def _as_text(value: Any) -> str:
    # board_id arrives as a number from the settings editor.
    if value is None:
        return ""
    return str(value).strip()
