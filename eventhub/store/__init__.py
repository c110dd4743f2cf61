"""Event store package initialization.

This module exposes the public interface of the store package.
"""

from .core import EventStore, MAX_ID_ATTEMPTS
from .errors import (
    StoreError,
    ValidationError,
    NotFoundError,
    CapacityConflictError,
    LockTimeoutError,
)
from .operations import with_retry, reserve_with_retry

__all__ = [
    # Core store class
    'EventStore',
    'MAX_ID_ATTEMPTS',

    # Exceptions
    'StoreError',
    'ValidationError',
    'NotFoundError',
    'CapacityConflictError',
    'LockTimeoutError',

    # Utilities
    'with_retry',
    'reserve_with_retry',
]
