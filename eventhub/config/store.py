"""Event store configuration."""

import os
import logging
from typing import Optional

from .environment import IS_PRODUCTION_ENVIRONMENT

logger = logging.getLogger(__name__)

def _env_float(name: str) -> Optional[float]:
    """Read an optional float from the environment; empty or 'none' means unset."""
    raw = os.environ.get(name, '').strip()
    if not raw or raw.lower() == 'none':
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"Environment variable {name} must be a number, got '{raw}'") from e

class StoreConfig:
    """Event store settings."""

    def __init__(
        self,
        lock_timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        retry_backoff: float = 2
    ):
        """
        Initialize store configuration.

        Explicit arguments win over environment variables, which win over defaults.

        Args:
            lock_timeout: Seconds to wait for a contended event before giving up
                        (EVENT_STORE_LOCK_TIMEOUT). None waits indefinitely.
            max_retries: Attempts made by reserve_with_retry when an event
                       stays contended (EVENT_STORE_MAX_RETRIES, default 3)
            retry_delay: Initial delay between those attempts in seconds
                       (EVENT_STORE_RETRY_DELAY, default 0.05)
            retry_backoff: Multiplier applied to the delay after each attempt

        Raises:
            ValueError: If a setting is out of range
        """
        if lock_timeout is None:
            lock_timeout = _env_float('EVENT_STORE_LOCK_TIMEOUT')
            # Production never waits indefinitely
            if lock_timeout is None and IS_PRODUCTION_ENVIRONMENT:
                lock_timeout = 5.0
        if max_retries is None:
            max_retries = int(os.environ.get('EVENT_STORE_MAX_RETRIES', '3'))
        if retry_delay is None:
            env_delay = _env_float('EVENT_STORE_RETRY_DELAY')
            retry_delay = 0.05 if env_delay is None else env_delay

        if lock_timeout is not None and lock_timeout <= 0:
            raise ValueError(f"lock_timeout must be positive, got {lock_timeout}")
        if max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {max_retries}")
        if retry_delay < 0:
            raise ValueError(f"retry_delay must not be negative, got {retry_delay}")

        self.lock_timeout = lock_timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.retry_backoff = retry_backoff

    def __repr__(self) -> str:
        return (
            f"StoreConfig(lock_timeout={self.lock_timeout}, max_retries={self.max_retries}, "
            f"retry_delay={self.retry_delay}, retry_backoff={self.retry_backoff})"
        )
