"""Demo catalog used by the CLI and for local development."""

from datetime import datetime, timezone
from typing import List

from ..models.event import Event

def _created(day: str) -> datetime:
    return datetime.fromisoformat(day).replace(tzinfo=timezone.utc)

def demo_events() -> List[Event]:
    """A small catalog spanning several categories and fill levels."""
    return [
        Event(
            id='1',
            title='Tech Innovation Summit 2024',
            description=(
                'Join us for an exciting day of tech talks, workshops, and networking with industry '
                'leaders. Learn about the latest trends in AI, blockchain, and cloud computing.'
            ),
            date='2025-01-15',
            time='09:00',
            location='Convention Center, San Francisco',
            capacity=500,
            category='Technology',
            creator_id='1',
            creator_name='TechOrg',
            created_at=_created('2024-12-01'),
            attendees=('user1', 'user2', 'user3'),
        ),
        Event(
            id='2',
            title='Music in the Park',
            description=(
                'A beautiful evening of live music under the stars. Featuring local bands and artists '
                'performing a variety of genres from jazz to indie rock.'
            ),
            date='2025-01-20',
            time='18:00',
            location='Central Park Amphitheater',
            capacity=200,
            category='Music',
            creator_id='2',
            creator_name='MusicLovers',
            created_at=_created('2024-12-05'),
            attendees=('user1',),
        ),
        Event(
            id='3',
            title='Startup Pitch Night',
            description=(
                'Watch 10 innovative startups pitch their ideas to a panel of investors. Great '
                'networking opportunity for entrepreneurs and investors alike.'
            ),
            date='2025-01-25',
            time='19:00',
            location='Innovation Hub, Downtown',
            capacity=100,
            category='Business',
            creator_id='3',
            creator_name='StartupCommunity',
            created_at=_created('2024-12-10'),
        ),
        Event(
            id='4',
            title='Yoga & Wellness Retreat',
            description=(
                'A full day of relaxation, meditation, and yoga sessions led by certified instructors. '
                'Healthy lunch included.'
            ),
            date='2025-02-01',
            time='07:00',
            location='Serenity Resort & Spa',
            capacity=50,
            category='Health',
            creator_id='1',
            creator_name='WellnessGroup',
            created_at=_created('2024-12-12'),
            attendees=('user2', 'user3'),
        ),
        Event(
            id='5',
            title='Art Gallery Opening',
            description=(
                'Exclusive opening night for the new contemporary art exhibition featuring works from '
                'emerging artists around the world.'
            ),
            date='2025-02-10',
            time='17:00',
            location='Modern Art Museum',
            capacity=150,
            category='Art',
            creator_id='2',
            creator_name='ArtCollective',
            created_at=_created('2024-12-15'),
            attendees=('user1', 'user2'),
        ),
        Event(
            id='6',
            title='Food & Wine Festival',
            description=(
                'Sample cuisines from 30+ local restaurants and taste wines from renowned vineyards. '
                'Live cooking demonstrations throughout the day.'
            ),
            date='2025-02-15',
            time='12:00',
            location='Riverside Plaza',
            capacity=300,
            category='Food',
            creator_id='3',
            creator_name='FoodieNetwork',
            created_at=_created('2024-12-18'),
            attendees=('user1', 'user2', 'user3'),
        ),
    ]

def seed_demo_events(store) -> int:
    """Load the demo catalog into an empty or compatible store."""
    return store.load(demo_events())
