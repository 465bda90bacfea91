"""Abstract base class for owner registries.

An owner registry maps external user identifiers to internal, stable owner
tokens. Entries only ever reference owner tokens, which decouples link
ownership from whatever the caller uses to identify its users.

Example:
    Typical usage with a concrete implementation:

        >>> from linkshortener.store.memory import OwnerMemoryRegistry
        >>> registry = OwnerMemoryRegistry()

        >>> token = registry.token_for('user-123')
        >>> token == registry.token_for('user-123')
        True
        >>> registry.lookup('user-456') is None
        True
"""

from abc import ABC, abstractmethod


class OwnerBaseRegistry(ABC):
    """Interface for user -> owner token registries.

    Methods:
        token_for(user_id: str) -> str:
            Return the user's owner token, creating it on first use.

        lookup(user_id: str) -> str | None:
            Return the user's owner token, or None if the user never created a link.

    NOTE:
        - Owner tokens are never removed.
    """

    @abstractmethod
    def token_for(self, user_id: str) -> str:
        """Return the owner token for a user, creating it on first call.

        NOTE: Implementations must guarantee that concurrent first calls for the
              same user create exactly one token and all return it.

        Args:
            user_id (str):
                The user's external identifier.

        Returns:
            str:
                The user's owner token.
        """
        pass

    @abstractmethod
    def lookup(self, user_id: str) -> str | None:
        """Return the owner token for a user without registering it."""
        pass
