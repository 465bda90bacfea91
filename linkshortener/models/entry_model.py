from dataclasses import dataclass, field
from datetime import datetime, UTC


@dataclass(frozen=True)
class Entry:
    """Represent a short link with usage and time bounds.

    Entries are immutable snapshots. The store swaps in a new Entry whenever
    `use_count` changes, so callers never observe a half-updated record.

    Attributes:
        target (str):
            The original resource (URL) the identifier resolves to.
        identifier (str):
            The unique short identifier, assigned once at creation.
        owner_token (str):
            Opaque token of the owner who created the link.
        max_uses (int):
            Maximum number of successful resolutions.
        expires_at (datetime):
            Absolute UTC instant after which the link is no longer valid.
        use_count (int):
            Number of successful resolutions so far.
        created_at (datetime):
            UTC instant the link was created.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> entry = Entry(
        ...     target='https://example.com/article/123',
        ...     identifier='4fZk1',
        ...     owner_token='0b7c...',
        ...     max_uses=10,
        ...     expires_at=datetime.now(UTC) + timedelta(hours=1),
        ... )
        >>> entry.use_count
        0
        >>> entry.remaining_uses
        10
        >>> entry.is_expired()
        False
    """

    target: str
    identifier: str
    owner_token: str
    max_uses: int
    expires_at: datetime
    use_count: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_expired(self, now: datetime | None = None) -> bool:
        """Return True once `now` is strictly past `expires_at`."""
        now = now or datetime.now(UTC)
        return self.expires_at < now

    def is_limit_exceeded(self) -> bool:
        return self.use_count >= self.max_uses

    @property
    def remaining_uses(self) -> int:
        return max(self.max_uses - self.use_count, 0)
