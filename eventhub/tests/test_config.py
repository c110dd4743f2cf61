import logging

import pytest

from eventhub.config.environment import get_environment_name
from eventhub.config.store import StoreConfig
from eventhub.utils.clock import MonotonicClock
from eventhub.utils.logging_config import setup_logging
from eventhub.tests.conftest import BASE_TIME, StepClock


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("EVENT_STORE_LOCK_TIMEOUT", "EVENT_STORE_MAX_RETRIES", "EVENT_STORE_RETRY_DELAY"):
        monkeypatch.delenv(name, raising=False)


def test_explicit_settings() -> None:
    config = StoreConfig(lock_timeout=1.5, max_retries=4, retry_delay=0.2, retry_backoff=3)

    assert config.lock_timeout == 1.5
    assert config.max_retries == 4
    assert config.retry_delay == 0.2
    assert config.retry_backoff == 3


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVENT_STORE_LOCK_TIMEOUT", "2.5")
    monkeypatch.setenv("EVENT_STORE_MAX_RETRIES", "7")
    monkeypatch.setenv("EVENT_STORE_RETRY_DELAY", "0.5")

    config = StoreConfig()

    assert config.lock_timeout == 2.5
    assert config.max_retries == 7
    assert config.retry_delay == 0.5


def test_explicit_settings_override_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVENT_STORE_LOCK_TIMEOUT", "2.5")

    assert StoreConfig(lock_timeout=9).lock_timeout == 9


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("eventhub.config.store.IS_PRODUCTION_ENVIRONMENT", False)

    config = StoreConfig()

    assert config.lock_timeout is None
    assert config.max_retries == 3
    assert config.retry_delay == 0.05


def test_production_bounds_lock_wait(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("eventhub.config.store.IS_PRODUCTION_ENVIRONMENT", True)

    assert StoreConfig().lock_timeout == 5.0


@pytest.mark.parametrize(
    "kwargs",
    [{"lock_timeout": 0}, {"lock_timeout": -1}, {"max_retries": 0}, {"retry_delay": -0.1}],
)
def test_invalid_settings(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        StoreConfig(**kwargs)


def test_invalid_environment_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVENT_STORE_LOCK_TIMEOUT", "soon")

    with pytest.raises(ValueError):
        StoreConfig()


def test_monotonic_clock_never_goes_back() -> None:
    source = StepClock()
    clock = MonotonicClock(source)

    first = clock()
    source.now = BASE_TIME.replace(year=2000)
    second = clock()

    assert first == BASE_TIME
    assert second == first


def test_setup_logging_is_repeatable() -> None:
    root = logging.getLogger()
    level = root.level

    try:
        setup_logging("DEBUG")
        setup_logging("WARNING")

        assert root.level == logging.WARNING
        ours = [h for h in root.handlers if getattr(h, "_eventhub_handler", False)]
        assert len(ours) == 1
    finally:
        root.setLevel(level)
        for handler in list(root.handlers):
            if getattr(handler, "_eventhub_handler", False):
                root.removeHandler(handler)


def test_setup_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        setup_logging("CHATTY")


@pytest.mark.parametrize(
    "value,expected",
    [
        ("production", "production"),
        (" Production ", "production"),
        ("development", "development"),
        ("staging", "development"),
        ("", "development"),
    ],
)
def test_environment_name(monkeypatch: pytest.MonkeyPatch, value: str, expected: str) -> None:
    monkeypatch.setenv("ENVIRONMENT", value)

    assert get_environment_name() == expected
