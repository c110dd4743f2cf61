import dataclasses

import pytest

from eventhub.models.event import ALMOST_FULL_THRESHOLD
from eventhub.models.reservation import DashboardSummary, ReservationReason, ReservationResult
from eventhub.tests.conftest import BASE_TIME, make_event


def test_availability_properties() -> None:
    event = make_event("e", capacity=10, attendee_count=3)

    assert event.attendee_count == 3
    assert event.spots_left == 7
    assert not event.is_full
    assert not event.is_almost_full


@pytest.mark.parametrize(
    "attendees,almost_full,full",
    [
        (10 - ALMOST_FULL_THRESHOLD - 1, False, False),
        (10 - ALMOST_FULL_THRESHOLD, True, False),
        (9, True, False),
        (10, False, True),
    ],
)
def test_almost_full_and_full(attendees: int, almost_full: bool, full: bool) -> None:
    event = make_event("e", capacity=10, attendee_count=attendees)

    assert event.is_almost_full is almost_full
    assert event.is_full is full


def test_events_are_immutable() -> None:
    event = make_event("e")

    with pytest.raises(dataclasses.FrozenInstanceError):
        event.capacity = 99  # type: ignore[misc]


def test_to_dict() -> None:
    event = make_event("e", capacity=4, attendee_count=1, image_url="img.png")

    data = event.to_dict()

    assert data["id"] == "e"
    assert data["attendees"] == ["e-guest-0"]
    assert data["spots_left"] == 3
    assert data["created_at"] == BASE_TIME.isoformat()
    assert data["image_url"] == "img.png"
    data["attendees"].append("mutated")
    assert event.attendees == ("e-guest-0",)


def test_summary_and_detailed_strings() -> None:
    event = make_event("e", capacity=2, attendee_count=2, title="Board Games")

    assert event.to_summary_string() == "[e] 2025-01-10 10:00 - Board Games (Technology, 2/2, full)"
    detailed = event.to_detailed_string()
    assert "Title: Board Games" in detailed
    assert "Attending: 2 / 2" in detailed
    assert detailed.endswith("Description of e")


def test_reservation_messages() -> None:
    event = make_event("e")

    assert ReservationResult.granted(event).message == "Successfully RSVP'd to event!"
    assert ReservationResult.rejected(ReservationReason.EVENT_FULL).message == "Event is at full capacity"
    assert ReservationResult.rejected(ReservationReason.ALREADY_RESERVED).message == (
        "You have already RSVP'd to this event"
    )
    assert ReservationResult.rejected(ReservationReason.NOT_FOUND).message == "Event not found"


def test_dashboard_counts() -> None:
    summary = DashboardSummary(user_id="u", created=[make_event("a")], reserved=[])

    assert summary.created_count == 1
    assert summary.reserved_count == 0
