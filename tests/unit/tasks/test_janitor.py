"""Unit tests for the JanitorTask

Test coverage includes:

1. Single sweeps
   - Ensures tick() sweeps the store with the current UTC time.
   - Ensures a failing sweep is logged and swallowed.

2. Scheduling
   - Ensures sweeps run periodically and keep running after a failure.
   - Ensures nothing is swept before the first interval elapses.

3. Lifecycle
   - Ensures stop() halts future sweeps and never waits longer than its timeout.
   - Ensures invalid intervals and restarts are rejected.
"""

import logging
import threading
import time
from datetime import datetime, UTC
from unittest.mock import MagicMock

import pytest
from freezegun import freeze_time

from linkshortener.constants import Event
from linkshortener.store.base import EntryBaseStore
from linkshortener.tasks.janitor import JanitorTask


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def store():
    _store = MagicMock(spec=EntryBaseStore)
    _store.sweep_expired.return_value = 0
    return _store


@pytest.fixture
def janitor(store):
    _janitor = JanitorTask(store, interval=0.01)
    yield _janitor
    _janitor.stop(timeout=1)


# -------------------------------
# 1. Single sweeps
# -------------------------------


@freeze_time('2026-10-19 12:00:00')
def test_tick_sweeps_store(janitor, store):
    store.sweep_expired.return_value = 3

    assert janitor.tick() == 3
    store.sweep_expired.assert_called_once_with(datetime(2026, 10, 19, 12, 0, 0, tzinfo=UTC))


def test_tick_failure_is_logged_and_swallowed(janitor, store, caplog):
    store.sweep_expired.side_effect = RuntimeError('boom')

    with caplog.at_level(logging.ERROR, logger='linkshortener.tasks.janitor'):
        assert janitor.tick() is None

    (record,) = caplog.records
    assert record.event == Event.JANITOR_TICK_FAILED
    assert record.exc_info is not None


# -------------------------------
# 2. Scheduling
# -------------------------------


def test_sweeps_keep_running_after_failure(janitor, store):
    swept = threading.Event()
    calls = []

    def sweep(now):
        calls.append(now)
        if len(calls) == 1:
            raise RuntimeError('first sweep fails')
        if len(calls) >= 3:
            swept.set()
        return 0

    store.sweep_expired.side_effect = sweep
    janitor.start()

    assert swept.wait(timeout=5)
    assert janitor.is_running


def test_no_sweep_before_first_interval(store):
    janitor = JanitorTask(store, interval=3600).start()
    try:
        time.sleep(0.05)
        store.sweep_expired.assert_not_called()
    finally:
        assert janitor.stop(timeout=1) is True


# -------------------------------
# 3. Lifecycle
# -------------------------------


def test_stop_halts_future_sweeps(janitor, store):
    swept = threading.Event()
    store.sweep_expired.side_effect = lambda now: swept.set() or 0
    janitor.start()
    assert swept.wait(timeout=5)

    assert janitor.stop(timeout=1) is True
    assert not janitor.is_running

    calls = store.sweep_expired.call_count
    time.sleep(0.05)
    assert store.sweep_expired.call_count == calls


def test_stop_does_not_block_on_inflight_sweep(janitor, store):
    in_flight = threading.Event()
    release = threading.Event()

    def slow_sweep(now):
        in_flight.set()
        release.wait(timeout=5)
        return 0

    store.sweep_expired.side_effect = slow_sweep
    janitor.start()
    assert in_flight.wait(timeout=5)

    started = time.monotonic()
    assert janitor.stop(timeout=0.05) is False
    assert time.monotonic() - started < 1

    release.set()


def test_stop_before_start(store):
    assert JanitorTask(store).stop() is True


def test_start_is_idempotent(janitor):
    janitor.start()
    thread = janitor._thread
    janitor.start()
    assert janitor._thread is thread


def test_restart_after_stop_raises(janitor):
    janitor.start()
    janitor.stop(timeout=1)
    with pytest.raises(RuntimeError):
        janitor.start()


@pytest.mark.parametrize('interval', [0, -1])
def test_invalid_interval(store, interval):
    with pytest.raises(ValueError):
        JanitorTask(store, interval=interval)
