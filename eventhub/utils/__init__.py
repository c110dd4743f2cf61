"""Utility helpers."""

from .clock import utc_now, new_event_id, MonotonicClock
from .logging_config import setup_logging

__all__ = ['utc_now', 'new_event_id', 'MonotonicClock', 'setup_logging']
