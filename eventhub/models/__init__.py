"""Models package initialization."""

from .event import (
    Event,
    EventDraft,
    CATEGORIES,
    ALL_CATEGORIES,
    ALMOST_FULL_THRESHOLD,
)
from .reservation import ReservationReason, ReservationResult, DashboardSummary

__all__ = [
    'Event',
    'EventDraft',
    'CATEGORIES',
    'ALL_CATEGORIES',
    'ALMOST_FULL_THRESHOLD',
    'ReservationReason',
    'ReservationResult',
    'DashboardSummary',
]
