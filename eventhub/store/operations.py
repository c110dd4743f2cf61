"""Store operations and utilities.

This module provides retry logic for callers that bound how long they wait
on a contended event (see StoreConfig.lock_timeout).
"""

import logging
import time
from functools import wraps
from typing import Any, Callable, Optional, TypeVar, cast

from ..models.reservation import ReservationResult
from .errors import StoreError, LockTimeoutError

logger = logging.getLogger(__name__)

# Type variable for generic return type
T = TypeVar('T')

def with_retry(
    max_attempts: int = 3,
    delay: float = 0.05,
    backoff: float = 2,
    exceptions: tuple = (LockTimeoutError,),
    sleep: Callable[[float], None] = time.sleep
) -> Callable:
    """
    Decorator that retries an operation on transient store failures.

    A timed out attempt leaves the store untouched, so retrying it is safe.

    Args:
        max_attempts: Maximum number of attempts
        delay: Initial delay between attempts in seconds
        backoff: Multiplier for delay between attempts
        exceptions: Tuple of exceptions to catch and retry
        sleep: Function used to wait between attempts

    Example:
        @with_retry(max_attempts=3)
        def book(store: EventStore, event_id: str, user_id: str) -> ReservationResult:
            return store.reserve(event_id, user_id)
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        # partials and callable objects have no __name__
        name = getattr(func, '__qualname__', None) or repr(func)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            current_delay = delay

            for attempt in range(max_attempts):
                try:
                    return cast(T, func(*args, **kwargs))
                except exceptions as e:
                    if attempt + 1 == max_attempts:
                        logger.error(
                            f"Final attempt failed for {name}: {str(e)}"
                        )
                        raise

                    logger.warning(
                        f"Attempt {attempt + 1}/{max_attempts} failed for "
                        f"{name}: {str(e)}. Retrying in {current_delay}s..."
                    )

                    sleep(current_delay)
                    current_delay *= backoff

            raise StoreError("Unknown error in retry logic")

        return wrapper
    return decorator

def reserve_with_retry(
    store: Any,
    event_id: str,
    user_id: str,
    max_attempts: Optional[int] = None,
    delay: Optional[float] = None
) -> ReservationResult:
    """
    Reserve a seat, retrying while the event stays contended.

    Args:
        store: The EventStore to reserve on
        event_id: Event to reserve a seat on
        user_id: User claiming the seat
        max_attempts: Overrides store.config.max_retries
        delay: Overrides store.config.retry_delay

    Returns:
        ReservationResult: The outcome of the first attempt that got the lock

    Raises:
        LockTimeoutError: If every attempt timed out
    """
    config = store.config

    @with_retry(
        max_attempts=config.max_retries if max_attempts is None else max_attempts,
        delay=config.retry_delay if delay is None else delay,
        backoff=config.retry_backoff
    )
    def attempt_reservation() -> ReservationResult:
        return store.reserve(event_id, user_id)

    return attempt_reservation()
