"""In-memory, thread-safe implementation of the entry store

This module provides a sharded in-memory implementation of EntryBaseStore.

Responsibilities:
    - Insert, resolve, list and remove Entry objects;
    - Count link uses atomically with the expiry and use limit checks;
    - Purge expired entries (on resolve and in bulk sweeps);
    - Never hand out a retired identifier again.

Classes:
    EntryMemoryStore:
        Store for Entry objects, sharded by identifier with one lock per shard.

Example:
    >>> from linkshortener.store.memory import EntryMemoryStore
    >>> store = EntryMemoryStore(shards=4)
    >>> store.insert(entry)
    <EntryMemoryStore>
    >>> store.resolve(entry.identifier)
    'https://example.com/page'
    >>> store.sweep_expired()
    0
"""

import logging
import threading
from dataclasses import replace
from datetime import datetime, UTC

import xxhash
from beartype import beartype

from linkshortener.constants import Defaults, Event
from linkshortener.models import Entry
from linkshortener.store.base import EntryBaseStore
from linkshortener.store.exceptions import CollisionError, ExpiredError, NotFoundError, UseLimitExceededError


logger = logging.getLogger(__name__)


class _Shard:
    """One independently locked slice of the store."""

    __slots__ = ('lock', 'entries', 'retired')

    def __init__(self):
        self.lock = threading.Lock()
        self.entries: dict[str, Entry] = {}
        self.retired: set[str] = set()

    def discard(self, identifier: str) -> Entry | None:
        """Drop an entry and retire its identifier. Caller must hold the lock."""
        entry = self.entries.pop(identifier, None)
        if entry is not None:
            self.retired.add(identifier)
        return entry


class EntryMemoryStore(EntryBaseStore):
    """Sharded in-memory store for short link entries

    Identifiers are spread over a fixed number of shards by their xxhash
    digest. Every operation on one identifier runs under its shard's lock,
    so operations on identifiers living in different shards never wait for
    each other.

    Attributes:
        shards (int):
            Number of shards (and locks).

    Methods:
        insert(entry: Entry) -> EntryMemoryStore:
            Raises CollisionError when the identifier is live or retired.

        resolve(identifier: str, now: datetime | None = None) -> str:
            Raises NotFoundError, ExpiredError (entry removed) or UseLimitExceededError (entry kept).

        get(identifier: str) -> Entry:
            Raises NotFoundError when the identifier doesn't exist.

        list_by_owner(owner_token: str, now: datetime | None = None) -> list[Entry]

        remove(identifier: str) -> None

        sweep_expired(now: datetime | None = None) -> int

    NOTE:
        - Retired identifiers are remembered for the lifetime of the store.
          Memory use grows with the number of links ever created.
    """

    def __init__(self, shards: int = Defaults.STORE_SHARDS):
        if not isinstance(shards, int) or isinstance(shards, bool):
            raise TypeError(f'Shards must be of type integer (given type: {type(shards)}).')
        if shards <= 0:
            raise ValueError(f'Shards must be a positive integer (given value: {shards}).')

        self.shards = shards
        self._shards = tuple(_Shard() for _ in range(shards))

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'

    def __len__(self) -> int:
        total = 0
        for shard in self._shards:
            with shard.lock:
                total += len(shard.entries)
        return total

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, str):
            return False
        shard = self._shard(identifier)
        with shard.lock:
            return identifier in shard.entries

    def _shard(self, identifier: str) -> _Shard:
        return self._shards[xxhash.xxh32_intdigest(identifier.encode()) % self.shards]

    @beartype
    def insert(self, entry: Entry) -> 'EntryMemoryStore':
        """Insert a short link entry

        Args:
            entry (Entry):
                Entry to store under `entry.identifier`.

        Returns:
            EntryMemoryStore: self (for method chaining)

        Raises:
            CollisionError:
                If the identifier maps to a live entry or was retired.
        """
        shard = self._shard(entry.identifier)
        with shard.lock:
            if entry.identifier in shard.entries:
                raise CollisionError(f"Short link with identifier '{entry.identifier}' already exists.")
            if entry.identifier in shard.retired:
                raise CollisionError(f"Identifier '{entry.identifier}' was used before and can't be reissued.")
            shard.entries[entry.identifier] = entry
        return self

    @beartype
    def resolve(self, identifier: str, now: datetime | None = None) -> str:
        """Resolve an identifier to its target and count one use

        Args:
            identifier (str):
                The identifier to resolve.
            now (datetime | None):
                Evaluation instant. Defaults to the current UTC time.

        Returns:
            str:
                The target of the entry.

        Raises:
            NotFoundError:
                If the identifier doesn't exist.
            ExpiredError:
                If the entry expired. The entry is removed before raising.
            UseLimitExceededError:
                If the entry reached its use limit. The entry stays in place.

        Example:
            >>> store.resolve('abc123')
            'https://example.com'
        """
        now = now or datetime.now(UTC)
        shard = self._shard(identifier)

        # NOTE: The expiry check, the limit check and the increment must run in one
        #       critical section. Otherwise two concurrent resolves of an entry with
        #       a single use left could both pass the limit check:
        #
        #       (thread 1): resolve() -> use_count (0) < max_uses (1) => OK
        #       ... interruption
        #       (thread 2): resolve() -> use_count (0) < max_uses (1) => OK
        #       (thread 2): use_count = 1
        #       (thread 1): use_count = 1  => 2 resolutions granted, 1 counted
        with shard.lock:
            entry = shard.entries.get(identifier)
            if entry is None:
                raise NotFoundError(f"Short link with identifier '{identifier}' not found.")

            if entry.is_expired(now):
                shard.discard(identifier)
                logger.debug('Removed expired entry on resolve.', extra={'identifier': identifier})
                raise ExpiredError(f"Short link '{identifier}' expired at {entry.expires_at.isoformat()}.")

            if entry.is_limit_exceeded():
                raise UseLimitExceededError(f"Short link '{identifier}' reached its limit of {entry.max_uses} uses.")

            shard.entries[identifier] = replace(entry, use_count=entry.use_count + 1)

        return entry.target

    @beartype
    def get(self, identifier: str) -> Entry:
        """Return the stored entry for `identifier` without counting a use

        Raises:
            NotFoundError:
                If the identifier doesn't exist.
        """
        shard = self._shard(identifier)
        with shard.lock:
            entry = shard.entries.get(identifier)
        if entry is None:
            raise NotFoundError(f"Short link with identifier '{identifier}' not found.")
        return entry

    @beartype
    def list_by_owner(self, owner_token: str, now: datetime | None = None) -> list[Entry]:
        """Return the owner's unexpired entries, oldest first

        Expired entries which the janitor hasn't swept yet are filtered out
        but not removed.
        """
        now = now or datetime.now(UTC)
        entries = []
        for shard in self._shards:
            with shard.lock:
                entries.extend(e for e in shard.entries.values() if e.owner_token == owner_token and not e.is_expired(now))
        return sorted(entries, key=lambda e: e.created_at)

    @beartype
    def remove(self, identifier: str) -> None:
        """Remove an entry and retire its identifier (no-op for unknown identifiers)"""
        shard = self._shard(identifier)
        with shard.lock:
            shard.discard(identifier)

    @beartype
    def sweep_expired(self, now: datetime | None = None) -> int:
        """Remove every entry which expired strictly before `now`

        Shards are swept one at a time, so resolves against other shards
        keep running during a sweep.

        Returns:
            int:
                Number of removed entries.
        """
        now = now or datetime.now(UTC)
        removed = 0
        for shard in self._shards:
            with shard.lock:
                expired = [identifier for identifier, entry in shard.entries.items() if entry.expires_at < now]
                for identifier in expired:
                    shard.discard(identifier)
                removed += len(expired)

        if removed:
            logger.debug('Swept expired entries.', extra={'event': Event.JANITOR_SWEEP, 'removed': removed})
        return removed
