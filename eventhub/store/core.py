"""Core event store.

The store owns the authoritative collection of events and is the only place
they are mutated. Every event has its own lock: reserve, cancel, update and
delete on one event run one at a time, while different events never wait on
each other. Records are immutable; a mutation builds the next version and
publishes it under a short registry lock, which is also what snapshot() takes,
so readers only ever see whole versions.

Lock order is always event lock, then registry lock. No operation holds two
event locks.
"""

from contextlib import contextmanager
import dataclasses
import logging
import threading
from datetime import datetime
from typing import Any, Callable, Dict, Generator, Iterable, List, Mapping, Optional, Set, Tuple, Union

from ..config.store import StoreConfig
from ..models.event import Event, EventDraft, REQUIRED_FIELDS
from ..models.reservation import ReservationReason, ReservationResult, DashboardSummary
from ..utils.clock import MonotonicClock, new_event_id
from .errors import StoreError, ValidationError, NotFoundError, CapacityConflictError, LockTimeoutError
from .validation import validate_draft, validate_patch, validate_user_id

logger = logging.getLogger(__name__)

# How many times a colliding id is redrawn before giving up
MAX_ID_ATTEMPTS = 5

class EventStore:
    """In-process store for events and their reservations."""

    def __init__(
        self,
        config: Optional[StoreConfig] = None,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Create an empty store.

        Args:
            config: Store settings (defaults read from the environment)
            id_factory: Returns a fresh id string per call
            clock: Returns the current time; readings are made non-decreasing
        """
        self.config = config or StoreConfig()
        self._id_factory = id_factory or new_event_id
        self._clock = MonotonicClock(clock)

        self._registry_lock = threading.Lock()
        self._events: Dict[str, Event] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._issued_ids: Set[str] = set()

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._events)

    def __contains__(self, event_id: object) -> bool:
        with self._registry_lock:
            return event_id in self._events

    def _allocate_id(self) -> str:
        """Draw an id that has never been issued. Caller holds the registry lock."""
        for _ in range(MAX_ID_ATTEMPTS):
            event_id = self._id_factory()
            if not isinstance(event_id, str) or not event_id:
                raise StoreError(f"Id factory returned an invalid id: {event_id!r}")
            if event_id not in self._issued_ids:
                self._issued_ids.add(event_id)
                return event_id
            logger.warning(f"Id factory returned already issued id {event_id}, drawing again")
        raise StoreError(f"Id factory failed to produce an unused id after {MAX_ID_ATTEMPTS} attempts")

    def _publish(self, event: Event) -> None:
        with self._registry_lock:
            self._events[event.id] = event

    @contextmanager
    def _locked(self, event_id: str) -> Generator[Optional[Event], None, None]:
        """
        Hold the event's lock for the duration of the block.

        Yields the current version of the event, or None if it does not exist
        (or was deleted while we waited for the lock).

        Raises:
            LockTimeoutError: If the lock is not acquired within config.lock_timeout
        """
        with self._registry_lock:
            lock = self._locks.get(event_id)
        if lock is None:
            yield None
            return

        timeout = self.config.lock_timeout
        if not lock.acquire(timeout=-1 if timeout is None else timeout):
            logger.error(f"Timed out after {timeout}s waiting for event {event_id}")
            raise LockTimeoutError(event_id, timeout)
        try:
            with self._registry_lock:
                current = self._events.get(event_id)
            yield current
        finally:
            lock.release()

    def create(self, draft: Union[EventDraft, Mapping[str, Any]]) -> Event:
        """
        Create a new event.

        Args:
            draft: Creator-supplied fields (EventDraft or mapping)

        Returns:
            Event: The stored event, with id, created_at and empty attendees

        Raises:
            ValidationError: If a required field is missing or invalid
        """
        fields = validate_draft(draft)
        with self._registry_lock:
            event_id = self._allocate_id()
            event = Event(
                id=event_id,
                created_at=self._clock(),
                attendees=(),
                **fields
            )
            self._events[event_id] = event
            self._locks[event_id] = threading.Lock()

        logger.info(f"Created event {event.id} '{event.title}' (capacity {event.capacity})")
        return event

    def update(self, event_id: str, patch: Mapping[str, Any]) -> Event:
        """
        Apply a partial update to an event.

        Returns:
            Event: The new version of the event

        Raises:
            ValidationError: If the patch is invalid or touches identity fields
            NotFoundError: If the event does not exist
            CapacityConflictError: If the new capacity is below the attendee count
        """
        changes = validate_patch(patch)
        with self._locked(event_id) as current:
            if current is None:
                raise NotFoundError(event_id)
            if not changes:
                return current

            new_capacity = changes.get('capacity')
            if new_capacity is not None and new_capacity < current.attendee_count:
                raise CapacityConflictError(event_id, new_capacity, current.attendee_count)

            updated = dataclasses.replace(current, **changes)
            self._publish(updated)

        logger.info(f"Updated event {event_id}: {', '.join(sorted(changes))}")
        return updated

    def delete(self, event_id: str) -> None:
        """
        Delete an event together with all of its reservations.

        Raises:
            NotFoundError: If the event does not exist (including when already deleted)
        """
        with self._locked(event_id) as current:
            if current is None:
                raise NotFoundError(event_id)
            with self._registry_lock:
                del self._events[event_id]
                del self._locks[event_id]

        logger.info(f"Deleted event {event_id} ({current.attendee_count} reservations dropped)")

    def reserve(self, event_id: str, user_id: str) -> ReservationResult:
        """
        Reserve a seat for a user.

        The membership check, the capacity check and the insertion happen
        while holding the event's lock, so concurrent calls can never grant
        more seats than remain.

        Returns:
            ReservationResult: ok=True with the new event version, or ok=False
                             with ALREADY_RESERVED, EVENT_FULL or NOT_FOUND

        Raises:
            ValidationError: If user_id is empty
            LockTimeoutError: If the event stays locked past the configured timeout
        """
        validate_user_id(user_id)
        with self._locked(event_id) as current:
            if current is None:
                logger.debug(f"Reservation by {user_id} rejected: event {event_id} not found")
                return ReservationResult.rejected(ReservationReason.NOT_FOUND)
            if current.has_attendee(user_id):
                logger.debug(f"Reservation by {user_id} rejected: already attending {event_id}")
                return ReservationResult.rejected(ReservationReason.ALREADY_RESERVED, current)
            if current.attendee_count >= current.capacity:
                logger.debug(f"Reservation by {user_id} rejected: event {event_id} is full")
                return ReservationResult.rejected(ReservationReason.EVENT_FULL, current)

            updated = dataclasses.replace(current, attendees=current.attendees + (user_id,))
            self._publish(updated)

        logger.info(
            f"Reserved seat on event {event_id} for {user_id} "
            f"({updated.attendee_count}/{updated.capacity})"
        )
        return ReservationResult.granted(updated)

    def cancel(self, event_id: str, user_id: str) -> bool:
        """
        Cancel a user's reservation.

        Safe to retry: cancelling a reservation that does not exist, or on an
        event that does not exist, does nothing.

        Returns:
            bool: True if a reservation was removed
        """
        with self._locked(event_id) as current:
            if current is None or not current.has_attendee(user_id):
                return False
            remaining = tuple(a for a in current.attendees if a != user_id)
            self._publish(dataclasses.replace(current, attendees=remaining))

        logger.info(f"Cancelled reservation on event {event_id} for {user_id}")
        return True

    def get(self, event_id: str) -> Optional[Event]:
        """Get an event by id, or None if it does not exist."""
        with self._registry_lock:
            return self._events.get(event_id)

    def snapshot(self) -> Tuple[Event, ...]:
        """Point-in-time copy of all events, in creation order."""
        with self._registry_lock:
            return tuple(self._events.values())

    def list_by_creator(self, user_id: str) -> List[Event]:
        """All events created by the user."""
        return [event for event in self.snapshot() if event.creator_id == user_id]

    def list_by_attendee(self, user_id: str) -> List[Event]:
        """All events the user holds a reservation for."""
        return [event for event in self.snapshot() if event.has_attendee(user_id)]

    def dashboard(self, user_id: str) -> DashboardSummary:
        """A user's created events and reservations, from one snapshot."""
        snapshot = self.snapshot()
        return DashboardSummary(
            user_id=user_id,
            created=[event for event in snapshot if event.creator_id == user_id],
            reserved=[event for event in snapshot if event.has_attendee(user_id)],
        )

    def load(self, events: Iterable[Event]) -> int:
        """
        Insert fully formed events, e.g. seed data.

        Ids are taken from the records and registered as issued.

        Returns:
            int: Number of events loaded

        Raises:
            ValidationError: If a record is invalid, its id is already issued,
                           or its attendees break uniqueness or capacity
        """
        checked = []
        for event in events:
            if not isinstance(event, Event):
                raise ValidationError(f"Expected an Event, got {type(event).__name__}")
            validate_draft({name: getattr(event, name) for name in REQUIRED_FIELDS + ('image_url',)})
            if not isinstance(event.id, str) or not event.id:
                raise ValidationError("Loaded events must carry an id", ['id'])
            if not isinstance(event.created_at, datetime):
                raise ValidationError(f"Event {event.id} has no created_at timestamp", ['created_at'])
            attendees = tuple(event.attendees)
            if len(set(attendees)) != len(attendees):
                raise ValidationError(f"Event {event.id} lists an attendee twice", ['attendees'])
            if len(attendees) > event.capacity:
                raise ValidationError(
                    f"Event {event.id} has {len(attendees)} attendees for {event.capacity} seats",
                    ['attendees']
                )
            checked.append(dataclasses.replace(event, attendees=attendees))

        with self._registry_lock:
            ids = [event.id for event in checked]
            if len(set(ids)) != len(ids):
                raise ValidationError("Duplicate event ids in batch", ['id'])
            clashes = sorted(set(ids) & self._issued_ids)
            if clashes:
                raise ValidationError(f"Event ids already in use: {', '.join(clashes)}", ['id'])
            for event in checked:
                self._issued_ids.add(event.id)
                self._events[event.id] = event
                self._locks[event.id] = threading.Lock()

        logger.info(f"Loaded {len(checked)} events")
        return len(checked)
