"""Abstract base class for short link entry stores.

This class establishes a consistent contract for all entry store
implementations, regardless of how entries are held and synchronized.

Responsibilities:
    - Provide an interface for inserting, resolving, listing and removing Entry objects.
    - Guarantee that click accounting (check-then-increment) is atomic per identifier.
    - Standardize error handling across implementations.

Example:
    Typical usage with a concrete implementation:

        >>> from datetime import datetime, timedelta, UTC
        >>> from linkshortener.models import Entry
        >>> from linkshortener.store.memory import EntryMemoryStore

        >>> store = EntryMemoryStore()
        >>> entry = Entry(
        ...     target='https://example.com/blog/article-123',
        ...     identifier='a1b2c3',
        ...     owner_token='owner-1',
        ...     max_uses=1,
        ...     expires_at=datetime.now(UTC) + timedelta(minutes=5),
        ... )
        >>> store.insert(entry)
        <EntryMemoryStore>

        >>> store.resolve('a1b2c3')
        'https://example.com/blog/article-123'

        >>> store.resolve('a1b2c3')
        Traceback (most recent call last):
            ...
        linkshortener.store.exceptions.UseLimitExceededError: Short link 'a1b2c3' reached its limit of 1 uses.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from linkshortener.models import Entry


class EntryBaseStore(ABC):
    """Interface for short link entry stores.

    Methods:
        insert(entry: Entry) -> EntryBaseStore:
            Insert a new Entry.
            Raises CollisionError if the identifier is live or was retired.

        resolve(identifier: str, now: datetime | None = None) -> str:
            Validate expiry and use limit, count one use and return the target.
            Raises NotFoundError, ExpiredError or UseLimitExceededError.

        get(identifier: str) -> Entry:
            Return a snapshot of an entry without counting a use.
            Raises NotFoundError if the entry does not exist.

        list_by_owner(owner_token: str, now: datetime | None = None) -> list[Entry]:
            Return snapshots of an owner's unexpired entries.

        remove(identifier: str) -> None:
            Remove an entry. Idempotent.

        sweep_expired(now: datetime | None = None) -> int:
            Remove every entry which expired before `now`, return the count.

    Subclassing:
        Implementations must make each operation on a single identifier
        mutually exclusive with every other operation on that identifier.
    """

    @abstractmethod
    def insert(self, entry: Entry) -> 'EntryBaseStore':
        """Insert a new Entry into the store.

        Args:
            entry (Entry):
                The entry to be inserted. Its identifier is the key.

        Returns:
            EntryBaseStore: self (for method chaining)

        Raises:
            CollisionError:
                If the identifier maps to a live entry or was used before.
        """
        pass

    @abstractmethod
    def resolve(self, identifier: str, now: datetime | None = None) -> str:
        """Resolve an identifier to its target and count one use.

        The expiry check, the use limit check and the increment happen in one
        critical section.

        Args:
            identifier (str):
                The identifier to resolve.

            now (datetime | None):
                Evaluation instant. Defaults to the current UTC time.

        Returns:
            str: The entry's target.

        Raises:
            NotFoundError:
                If no entry is stored under `identifier`.

            ExpiredError:
                If the entry expired. The entry is removed.

            UseLimitExceededError:
                If the entry already reached `max_uses`. The entry is kept.
        """
        pass

    @abstractmethod
    def get(self, identifier: str) -> Entry:
        """Return a snapshot of an entry without counting a use.

        Raises:
            NotFoundError:
                If no entry is stored under `identifier`.
        """
        pass

    @abstractmethod
    def list_by_owner(self, owner_token: str, now: datetime | None = None) -> list[Entry]:
        """Return snapshots of all unexpired entries owned by `owner_token`."""
        pass

    @abstractmethod
    def remove(self, identifier: str) -> None:
        """Remove an entry. Removing an unknown identifier is a no-op."""
        pass

    @abstractmethod
    def sweep_expired(self, now: datetime | None = None) -> int:
        """Remove entries whose `expires_at` is strictly before `now`.

        Returns:
            int: Number of removed entries.
        """
        pass
