"""Event store exceptions."""

from typing import Iterable, Optional, Tuple

class StoreError(Exception):
    """Base exception for event store errors."""
    pass

class ValidationError(StoreError):
    """Raised when input is malformed or a required field is missing."""

    def __init__(self, message: str, fields: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.fields: Tuple[str, ...] = tuple(fields or ())

class NotFoundError(StoreError):
    """Raised when an operation references an event that does not exist."""

    def __init__(self, event_id: str):
        super().__init__(f"Event {event_id} not found")
        self.event_id = event_id

class CapacityConflictError(StoreError):
    """Raised when an update would leave more attendees than seats."""

    def __init__(self, event_id: str, capacity: int, attendee_count: int):
        super().__init__(
            f"Cannot set capacity of event {event_id} to {capacity}: "
            f"{attendee_count} attendees already reserved"
        )
        self.event_id = event_id
        self.capacity = capacity
        self.attendee_count = attendee_count

class LockTimeoutError(StoreError):
    """Raised when an event stays locked by other callers past the configured timeout."""

    def __init__(self, event_id: str, timeout: float):
        super().__init__(f"Timed out after {timeout}s waiting for event {event_id}")
        self.event_id = event_id
        self.timeout = timeout
