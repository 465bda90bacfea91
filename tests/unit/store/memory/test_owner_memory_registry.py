"""Unit tests for the OwnerMemoryRegistry

Test coverage includes:

1. Token creation
   - Ensures the first token_for() call creates a UUID4 token.
   - Ensures later calls return the same token.
   - Ensures different users get different tokens.

2. Lookup
   - Ensures lookup() never registers users.

3. Concurrency
   - Ensures concurrent first calls for one user create exactly one token.
"""

import threading
import uuid
from concurrent.futures import ThreadPoolExecutor

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from linkshortener.store.memory import OwnerMemoryRegistry


@pytest.fixture
def registry():
    return OwnerMemoryRegistry()


# -------------------------------
# 1. Token creation
# -------------------------------


def test_token_for_creates_uuid_token(registry):
    token = registry.token_for('user-123')
    assert uuid.UUID(token).version == 4
    assert len(registry) == 1


def test_token_for_is_idempotent(registry):
    assert registry.token_for('user-123') == registry.token_for('user-123')
    assert len(registry) == 1


def test_token_for_different_users(registry):
    assert registry.token_for('user-1') != registry.token_for('user-2')
    assert len(registry) == 2


def test_token_for_with_invalid_type(registry):
    with pytest.raises(BeartypeCallHintParamViolation):
        registry.token_for(123)


# -------------------------------
# 2. Lookup
# -------------------------------


def test_lookup_unknown_user(registry):
    assert registry.lookup('user-123') is None
    assert len(registry) == 0


def test_lookup_known_user(registry):
    token = registry.token_for('user-123')
    assert registry.lookup('user-123') == token


# -------------------------------
# 3. Concurrency
# -------------------------------


@pytest.mark.parametrize('callers', [2, 16, 64])
def test_concurrent_first_calls_create_one_token(registry, callers):
    barrier = threading.Barrier(callers)

    def token_for():
        barrier.wait()
        return registry.token_for('user-123')

    with ThreadPoolExecutor(max_workers=callers) as executor:
        tokens = list(executor.map(lambda _: token_for(), range(callers)))

    assert len(set(tokens)) == 1
    assert len(registry) == 1
    assert registry.lookup('user-123') == tokens[0]
