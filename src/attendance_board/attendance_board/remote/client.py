from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

import requests

from ..core.constants import DEFAULT_MONDAY_API_URL, DEFAULT_MONDAY_API_VERSION, DEFAULT_MONDAY_TIMEOUT_SECONDS
from ..core.exceptions import RemoteApiError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphQLResponse:
    data: Optional[dict[str, Any]]
    errors: list[Any] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class GraphQLClient(Protocol):
    def execute(self, query: str, variables: dict[str, Any] | None = None) -> GraphQLResponse:
        raise NotImplementedError


class MondayClient:
    """Client for the monday.com GraphQL API.

    GraphQL-level failures come back inside the response (``errors``); only
    transport and HTTP failures raise :class:`RemoteApiError`.
    """

    def __init__(
        self,
        token: str,
        *,
        api_url: str = DEFAULT_MONDAY_API_URL,
        api_version: str = DEFAULT_MONDAY_API_VERSION,
        timeout: float = DEFAULT_MONDAY_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self._token = token
        self._api_url = api_url
        self._api_version = api_version
        self._timeout = timeout
        self._session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": self._token,
            "API-Version": self._api_version,
            "Content-Type": "application/json",
        }

    def execute(self, query: str, variables: dict[str, Any] | None = None) -> GraphQLResponse:
        try:
            response = self._session.post(
                self._api_url,
                json={"query": query, "variables": variables or {}},
                headers=self._headers(),
                timeout=self._timeout,
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            logger.warning("monday.com request failed: %s", e)
            raise RemoteApiError(str(e)) from e
        except ValueError as e:
            raise RemoteApiError(f"Invalid JSON from monday.com: {e}") from e

        errors = list(body.get("errors") or [])
        # Complexity/auth failures use error_message instead of an errors list.
        if body.get("error_message"):
            errors.append({"message": body["error_message"], "code": body.get("error_code")})
        return GraphQLResponse(data=body.get("data"), errors=errors)
