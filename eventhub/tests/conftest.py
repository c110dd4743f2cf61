import itertools
import typing as t
from datetime import datetime, timedelta, timezone

import pytest

from eventhub.config.store import StoreConfig
from eventhub.models.event import Event
from eventhub.store import EventStore

BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


class StepClock:
    """Deterministic clock advancing one second per reading; can be rewound."""

    def __init__(self, start: datetime = BASE_TIME) -> None:
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(seconds=1)
        return current


def make_event(
    event_id: str,
    date: str = "2025-01-10",
    time: str = "10:00",
    capacity: int = 10,
    attendee_count: int = 0,
    **overrides: t.Any,
) -> Event:
    """Build an Event directly, with `attendee_count` generated attendees."""
    fields: dict[str, t.Any] = {
        "id": event_id,
        "title": f"Event {event_id}",
        "description": f"Description of {event_id}",
        "date": date,
        "time": time,
        "location": "Main Hall",
        "capacity": capacity,
        "category": "Technology",
        "creator_id": "creator",
        "creator_name": "Creator",
        "created_at": BASE_TIME,
        "attendees": tuple(f"{event_id}-guest-{n}" for n in range(attendee_count)),
    }
    fields.update(overrides)
    return Event(**fields)


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def store_config() -> StoreConfig:
    return StoreConfig(lock_timeout=None, max_retries=3, retry_delay=0)


@pytest.fixture
def store(store_config: StoreConfig, clock: StepClock) -> EventStore:
    ids = itertools.count(1)
    return EventStore(config=store_config, id_factory=lambda: f"evt-{next(ids)}", clock=clock)


@pytest.fixture
def draft() -> dict[str, t.Any]:
    return {
        "title": "Python Meetup",
        "description": "Talks and pizza",
        "date": "2025-03-01",
        "time": "18:30",
        "location": "Community Hall",
        "capacity": 5,
        "category": "Technology",
        "creator_id": "alice",
        "creator_name": "Alice",
    }


@pytest.fixture
def event(store: EventStore, draft: dict[str, t.Any]) -> Event:
    return store.create(draft)


@pytest.fixture
def abc_events() -> tuple[Event, Event, Event]:
    """A(01-10, 3/10), B(01-05, 9/10), C(01-20, 1/5)."""
    a = make_event("A", date="2025-01-10", capacity=10, attendee_count=3)
    b = make_event("B", date="2025-01-05", capacity=10, attendee_count=9)
    c = make_event("C", date="2025-01-20", capacity=5, attendee_count=1)
    return a, b, c
