"""Background expiry sweeps

Classes:
    JanitorTask:
        Daemon thread calling `EntryBaseStore.sweep_expired()` on a fixed period.

Example:
    >>> janitor = JanitorTask(store, interval=3600)
    >>> janitor.start()
    >>> ...
    >>> janitor.stop()
    True
"""

import logging
import threading
from datetime import datetime, UTC

from linkshortener.constants import TTL, Event
from linkshortener.store.base import EntryBaseStore


logger = logging.getLogger(__name__)


class JanitorTask:
    """Periodically purge time-expired entries from an entry store

    The first sweep runs one full `interval` after `start()`. A failing sweep
    is logged and the next one is still scheduled.

    Attributes:
        store (EntryBaseStore):
            Store to sweep.
        interval (float):
            Seconds between two sweeps.
    """

    def __init__(self, store: EntryBaseStore, interval: float = TTL.ONE_HOUR, name: str = 'linkshortener-janitor'):
        if interval <= 0:
            raise ValueError(f'Interval must be positive (given value: {interval}).')

        self.store = store
        self.interval = interval
        self.name = name
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> 'JanitorTask':
        if self.is_running:
            return self
        if self._stopped.is_set():
            raise RuntimeError('JanitorTask was stopped and cannot be restarted.')

        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()
        logger.debug('Janitor started.', extra={'event': Event.JANITOR_STARTED, 'interval': self.interval})
        return self

    def stop(self, timeout: float | None = TTL.JANITOR_STOP_TIMEOUT) -> bool:
        """Cancel future sweeps and wait (at most `timeout` seconds) for the thread

        Returns:
            bool:
                True if the thread is gone, False if a sweep was still in flight
                when the timeout ran out. The thread is a daemon, so it never
                blocks interpreter shutdown either way.
        """
        self._stopped.set()
        if self._thread is None:
            return True

        if self._thread is not threading.current_thread():
            self._thread.join(timeout)
        finished = not self._thread.is_alive()
        logger.debug('Janitor stopped.', extra={'event': Event.JANITOR_STOPPED, 'finished': finished})
        return finished

    def tick(self) -> int | None:
        """Run one sweep

        Returns:
            int | None:
                Number of removed entries, None if the sweep failed.
        """
        try:
            removed = self.store.sweep_expired(datetime.now(UTC))
        except Exception:
            logger.exception('Janitor sweep failed. Next sweep is still scheduled.', extra={'event': Event.JANITOR_TICK_FAILED})
            return None

        logger.info('Janitor sweep finished.', extra={'event': Event.JANITOR_SWEEP, 'removed': removed})
        return removed

    def _run(self) -> None:
        # Event.wait() returns True as soon as stop() is called
        while not self._stopped.wait(self.interval):
            self.tick()
