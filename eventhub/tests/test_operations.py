import functools
import typing as t

import pytest

from eventhub.config.store import StoreConfig
from eventhub.store import EventStore, LockTimeoutError, NotFoundError, reserve_with_retry, with_retry


class Flaky:
    """Callable that times out a fixed number of times before answering."""

    def __init__(self, failures: int) -> None:
        self.failures = failures
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise LockTimeoutError("evt", 0.01)
        return "done"


def test_retries_until_success() -> None:
    sleeps: list[float] = []
    flaky = Flaky(failures=2)

    result = with_retry(max_attempts=3, delay=0.1, backoff=2, sleep=sleeps.append)(flaky)()

    assert result == "done"
    assert flaky.calls == 3
    assert sleeps == [0.1, 0.2]


def test_final_failure_propagates() -> None:
    sleeps: list[float] = []
    flaky = Flaky(failures=5)

    with pytest.raises(LockTimeoutError):
        with_retry(max_attempts=3, delay=0.1, sleep=sleeps.append)(flaky)()

    assert flaky.calls == 3
    assert sleeps == [0.1, 0.2]


def test_other_errors_are_not_retried() -> None:
    calls = []

    @with_retry(max_attempts=5, sleep=lambda _: None)
    def lookup() -> None:
        calls.append(1)
        raise NotFoundError("evt")

    with pytest.raises(NotFoundError):
        lookup()
    assert len(calls) == 1


def test_wrapped_function_keeps_its_name() -> None:
    @with_retry()
    def reserve_seat() -> None:
        """Reserve."""

    assert reserve_seat.__name__ == "reserve_seat"
    assert reserve_seat.__doc__ == "Reserve."


def test_max_attempts_must_be_positive() -> None:
    with pytest.raises(ValueError):
        with_retry(max_attempts=0)


def test_retries_partials_and_logs_them(caplog: pytest.LogCaptureFixture) -> None:
    flaky = Flaky(failures=1)
    partial = functools.partial(flaky)

    with caplog.at_level("WARNING", logger="eventhub.store.operations"):
        result = with_retry(max_attempts=2, sleep=lambda _: None)(partial)()

    assert result == "done"
    assert "Attempt 1/2 failed for functools.partial" in caplog.text


def test_reserve_with_retry_rejects_zero_attempts(draft: dict[str, t.Any]) -> None:
    store = EventStore(config=StoreConfig(lock_timeout=0.05, max_retries=3, retry_delay=0))
    event = store.create(draft)

    with pytest.raises(ValueError):
        reserve_with_retry(store, event.id, "bob", max_attempts=0)

    assert store.get(event.id).attendees == ()
