from datetime import datetime, timedelta, UTC

import pytest

from linkshortener.models import Entry


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 10, 19, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def make_entry(now):
    """Build entries relative to the `now` fixture."""

    def _make_entry(
        identifier: str = 'abc123',
        target: str = 'https://example.com/test',
        owner_token: str = 'owner-1',
        max_uses: int = 2,
        ttl: timedelta = timedelta(seconds=60),
        created_at: datetime | None = None,
    ) -> Entry:
        created_at = created_at or now
        return Entry(
            target=target,
            identifier=identifier,
            owner_token=owner_token,
            max_uses=max_uses,
            expires_at=created_at + ttl,
            created_at=created_at,
        )

    return _make_entry
