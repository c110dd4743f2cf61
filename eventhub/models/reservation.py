"""Reservation outcome and dashboard models."""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

from .event import Event

class ReservationReason(str, Enum):
    """Why a reservation was not granted."""
    ALREADY_RESERVED = 'already_reserved'
    EVENT_FULL = 'event_full'
    NOT_FOUND = 'not_found'

RESERVATION_MESSAGES = {
    None: "Successfully RSVP'd to event!",
    ReservationReason.ALREADY_RESERVED: "You have already RSVP'd to this event",
    ReservationReason.EVENT_FULL: "Event is at full capacity",
    ReservationReason.NOT_FOUND: "Event not found",
}

@dataclass(frozen=True)
class ReservationResult:
    """
    Outcome of EventStore.reserve().

    Being full or already booked are ordinary outcomes, so they are returned
    here instead of raised.
    """
    ok: bool
    reason: Optional[ReservationReason] = None
    event: Optional[Event] = None

    @classmethod
    def granted(cls, event: Event) -> 'ReservationResult':
        return cls(ok=True, event=event)

    @classmethod
    def rejected(cls, reason: ReservationReason, event: Optional[Event] = None) -> 'ReservationResult':
        return cls(ok=False, reason=reason, event=event)

    @property
    def message(self) -> str:
        return RESERVATION_MESSAGES[self.reason]

@dataclass(frozen=True)
class DashboardSummary:
    """A user's own events and reservations."""
    user_id: str
    created: List[Event] = field(default_factory=list)
    reserved: List[Event] = field(default_factory=list)

    @property
    def created_count(self) -> int:
        return len(self.created)

    @property
    def reserved_count(self) -> int:
        return len(self.reserved)
