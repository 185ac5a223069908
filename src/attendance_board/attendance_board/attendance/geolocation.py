from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from typing import Any, Optional, Protocol

from ..activity.log import ActivityLog
from ..core.exceptions import LocationUnavailableError
from .model import Location

logger = logging.getLogger(__name__)


class LocationSource(Protocol):
    def locate(self) -> Optional[Location]:
        raise NotImplementedError


class PayloadLocationSource:
    """Position captured by the browser and posted along with the action.

    A missing ``location`` means geolocation was unsupported or denied on the
    client side.
    """

    def __init__(self, payload: Any):
        self._payload = payload

    def locate(self) -> Optional[Location]:
        if not self._payload:
            raise LocationUnavailableError("Geolocation not supported or permission denied.")
        if not isinstance(self._payload, Mapping):
            raise LocationUnavailableError(f"Invalid location: {self._payload!r}")
        try:
            lat = float(self._payload["lat"])
            lng = float(self._payload["lng"])
        except (KeyError, TypeError, ValueError):
            raise LocationUnavailableError(f"Invalid location: {self._payload!r}") from None
        # NaN and Infinity cannot be written as JSON column values.
        if not (math.isfinite(lat) and math.isfinite(lng)):
            raise LocationUnavailableError(f"Invalid location: {self._payload!r}")
        return Location(lat=lat, lng=lng)


def acquire_location(source: Optional[LocationSource], *, timeout: float, activity: ActivityLog) -> Optional[Location]:
    """One-shot position request; any failure degrades to None."""

    if source is None:
        return None

    executor = ThreadPoolExecutor(max_workers=1)
    future = executor.submit(source.locate)
    try:
        return future.result(timeout=timeout)
    except FutureTimeout:
        activity.add(f"Error getting location: no position after {timeout:g}s")
        return None
    except LocationUnavailableError as e:
        activity.add(f"Error getting location: {e}")
        return None
    except Exception as e:
        logger.warning("Location source failed", exc_info=True)
        activity.add(f"Error getting location: {e}")
        return None
    finally:
        executor.shutdown(wait=False)
