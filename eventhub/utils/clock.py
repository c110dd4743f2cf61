"""Clock and id sources for the event store."""

import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional

def utc_now() -> datetime:
    """Get current time in UTC."""
    return datetime.now(timezone.utc)

def new_event_id() -> str:
    """Default id factory: a random 32 character hex token."""
    return uuid.uuid4().hex

class MonotonicClock:
    """
    Wraps a clock so that successive readings never go backwards.

    A reading earlier than the previous one is replaced by the previous one.
    """

    def __init__(self, source: Optional[Callable[[], datetime]] = None):
        self._source = source or utc_now
        self._last: Optional[datetime] = None
        self._lock = threading.Lock()

    def __call__(self) -> datetime:
        with self._lock:
            now = self._source()
            if self._last is not None and now < self._last:
                now = self._last
            self._last = now
            return now
