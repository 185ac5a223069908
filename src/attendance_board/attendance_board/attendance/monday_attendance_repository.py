from __future__ import annotations

import json
import logging
from typing import Any, Optional, Sequence

from ..activity.log import ActivityLog
from ..core.constants import CANDIDATE_PAGE_LIMIT
from ..core.exceptions import RemoteApiError
from ..mapping.model import ColumnMapping
from ..remote.client import GraphQLClient, GraphQLResponse
from .model import AttendanceRecord, ColumnValue, TimeFields
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

FIND_FOR_DAY_QUERY = """
query ($boardId: ID!, $employeeColumnId: String!, $employeeIdValue: String!, $dateColumnId: String!, $dateValue: String!, $limit: Int!) {
  items_page_by_column_values(
    board_id: $boardId,
    columns: [
      { column_id: $employeeColumnId, column_values: [$employeeIdValue] },
      { column_id: $dateColumnId, column_values: [$dateValue] }
    ],
    limit: $limit
  ) {
    items {
      id
      name
      column_values(ids: [$employeeColumnId, $dateColumnId]) {
        id
        text
      }
    }
  }
}
"""

TIME_FIELDS_QUERY = """
query ($itemIds: [ID!]!, $columnIds: [String!]!) {
  items(ids: $itemIds) {
    id
    column_values(ids: $columnIds) {
      id
      text
    }
  }
}
"""

CREATE_ITEM_MUTATION = """
mutation ($boardId: ID!, $itemName: String!, $columnValues: JSON!) {
  create_item(board_id: $boardId, item_name: $itemName, column_values: $columnValues) {
    id
  }
}
"""

UPDATE_ITEM_MUTATION = """
mutation ($itemId: ID!, $boardId: ID!, $columnValues: JSON!) {
  change_multiple_column_values(item_id: $itemId, board_id: $boardId, column_values: $columnValues) {
    id
  }
}
"""


def _column_text(item: dict[str, Any], column_id: str) -> str:
    for cv in item.get("column_values") or []:
        if cv.get("id") == column_id:
            return cv.get("text") or ""
    return ""


def serialize_column_values(values: Sequence[ColumnValue]) -> str:
    """Encode the payload as the single JSON blob the board API expects."""

    return json.dumps({v.column_id: v.value for v in values})


class MondayAttendanceRepository(AttendanceRepository):
    def __init__(self, client: GraphQLClient, activity: ActivityLog, *, page_limit: int = CANDIDATE_PAGE_LIMIT):
        self._client = client
        self._activity = activity
        self._page_limit = int(page_limit)

    def _execute(self, what: str, query: str, variables: dict[str, Any]) -> Optional[GraphQLResponse]:
        try:
            response = self._client.execute(query, variables)
        except RemoteApiError as e:
            self._activity.add(f"Error {what}: {e}")
            return None
        if not response.ok:
            self._activity.add(f"Error {what}: " + json.dumps(response.errors))
            return None
        return response

    def find_record_for_day(self, *, mapping: ColumnMapping, employee_id: str, date: str) -> Optional[AttendanceRecord]:
        response = self._execute(
            "fetching items",
            FIND_FOR_DAY_QUERY,
            {
                "boardId": mapping.board_id,
                "employeeColumnId": mapping.employee_id,
                "employeeIdValue": employee_id,
                "dateColumnId": mapping.date,
                "dateValue": date,
                "limit": self._page_limit,
            },
        )
        if response is None:
            return None

        page = (response.data or {}).get("items_page_by_column_values") or {}
        items = (page.get("items") or [])[: self._page_limit]
        logger.debug("Day lookup for %s on %s returned %d candidates", employee_id, date, len(items))

        # The remote filter can be a loose text match, so compare exactly here.
        for item in items:
            emp_val = _column_text(item, mapping.employee_id)
            date_val = _column_text(item, mapping.date)
            if emp_val == employee_id and date_val == date:
                return AttendanceRecord(
                    record_id=str(item["id"]),
                    name=item.get("name") or "",
                    employee_id=emp_val,
                    date=date_val,
                )
        return None

    def fetch_time_fields(self, *, mapping: ColumnMapping, record_id: str) -> TimeFields:
        response = self._execute(
            "fetching time fields",
            TIME_FIELDS_QUERY,
            {"itemIds": [str(record_id)], "columnIds": [mapping.login_time, mapping.logout_time]},
        )
        if response is None:
            return TimeFields()

        items = (response.data or {}).get("items") or []
        if not items:
            return TimeFields()
        return TimeFields(
            login_time=_column_text(items[0], mapping.login_time),
            logout_time=_column_text(items[0], mapping.logout_time),
        )

    def create_record(self, *, mapping: ColumnMapping, item_name: str, values: Sequence[ColumnValue]) -> Optional[str]:
        response = self._execute(
            "creating item",
            CREATE_ITEM_MUTATION,
            {
                "boardId": mapping.board_id,
                "itemName": item_name,
                "columnValues": serialize_column_values(values),
            },
        )
        if response is None:
            return None
        created = (response.data or {}).get("create_item") or {}
        return str(created["id"]) if created.get("id") else None

    def update_record(self, *, mapping: ColumnMapping, record_id: str, values: Sequence[ColumnValue]) -> Optional[str]:
        response = self._execute(
            "updating item",
            UPDATE_ITEM_MUTATION,
            {
                "itemId": str(record_id),
                "boardId": mapping.board_id,
                "columnValues": serialize_column_values(values),
            },
        )
        if response is None:
            return None
        updated = (response.data or {}).get("change_multiple_column_values") or {}
        return str(updated["id"]) if updated.get("id") else None
