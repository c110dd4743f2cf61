"""Event model definition."""

from datetime import datetime
from typing import Optional, Tuple, Dict, Any
from dataclasses import dataclass, field

# Fixed category enumeration, in display order
CATEGORIES = (
    'Technology',
    'Music',
    'Business',
    'Health',
    'Art',
    'Food',
    'Sports',
    'Education',
)

# Sentinel accepted by the query engine meaning "no category filter"
ALL_CATEGORIES = 'All Categories'

# An event with this many spots left or fewer (but not zero) is "almost full"
ALMOST_FULL_THRESHOLD = 5

# Fields a creator must supply, in the order they are reported when missing
REQUIRED_FIELDS = (
    'title',
    'description',
    'date',
    'time',
    'location',
    'capacity',
    'category',
    'creator_id',
    'creator_name',
)

# Fields that may be changed through EventStore.update()
MUTABLE_FIELDS = (
    'title',
    'description',
    'date',
    'time',
    'location',
    'capacity',
    'category',
    'image_url',
)

# Fields fixed at creation
IDENTITY_FIELDS = ('id', 'creator_id', 'creator_name', 'created_at')

@dataclass
class EventDraft:
    """
    Creator-supplied data for a new event.

    Everything is optional here so that a half-filled form can be passed
    straight to EventStore.create(), which reports every missing field at once.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    location: Optional[str] = None
    capacity: Optional[int] = None
    category: Optional[str] = None
    creator_id: Optional[str] = None
    creator_name: Optional[str] = None
    image_url: Optional[str] = None

@dataclass(frozen=True)
class Event:
    """
    A capacity-bounded, attendee-tracked gathering.

    Instances are immutable: the store publishes a new version for every
    change, so a record held by a caller never changes under it.

    Fields:
        id: Unique identifier assigned by the store
        title: Event title
        description: Event description
        date: ISO calendar date (YYYY-MM-DD) as given by the creator
        time: Time of day (HH:MM) as given by the creator
        location: Where the event takes place
        capacity: Maximum number of distinct attendees
        category: One of CATEGORIES
        creator_id: User id of the creator
        creator_name: Display name of the creator
        created_at: When the store accepted the event
        attendees: User ids in order of reservation
        image_url: Opaque image reference (optional, never inspected)
    """
    id: str
    title: str
    description: str
    date: str
    time: str
    location: str
    capacity: int
    category: str
    creator_id: str
    creator_name: str
    created_at: datetime
    attendees: Tuple[str, ...] = field(default_factory=tuple)
    image_url: Optional[str] = None

    @property
    def attendee_count(self) -> int:
        return len(self.attendees)

    @property
    def spots_left(self) -> int:
        return self.capacity - len(self.attendees)

    @property
    def is_full(self) -> bool:
        return self.spots_left <= 0

    @property
    def is_almost_full(self) -> bool:
        return 0 < self.spots_left <= ALMOST_FULL_THRESHOLD

    def has_attendee(self, user_id: str) -> bool:
        return user_id in self.attendees

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to a plain dictionary, e.g. for a JSON response."""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'date': self.date,
            'time': self.time,
            'location': self.location,
            'capacity': self.capacity,
            'category': self.category,
            'creator_id': self.creator_id,
            'creator_name': self.creator_name,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'attendees': list(self.attendees),
            'image_url': self.image_url,
            'spots_left': self.spots_left,
        }

    def to_summary_string(self) -> str:
        """One line summary for listings."""
        if self.is_full:
            availability = "full"
        else:
            availability = f"{self.spots_left} spots left"
        return (
            f"[{self.id}] {self.date} {self.time} - {self.title} "
            f"({self.category}, {self.attendee_count}/{self.capacity}, {availability})"
        )

    def to_detailed_string(self) -> str:
        """Multi-line view with every field."""
        lines = [
            f"Title: {self.title}",
            f"ID: {self.id}",
            f"Category: {self.category}",
            f"When: {self.date} {self.time}",
            f"Where: {self.location}",
            f"Organizer: {self.creator_name} ({self.creator_id})",
            f"Attending: {self.attendee_count} / {self.capacity}",
            f"Created: {self.created_at.isoformat() if self.created_at else 'unknown'}",
        ]
        if self.image_url:
            lines.append(f"Image: {self.image_url}")
        lines.append("")
        lines.append(self.description)
        return '\n'.join(lines)
