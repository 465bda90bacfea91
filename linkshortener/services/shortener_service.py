"""Short link service

Composes the identifier generator, the entry store, the owner registry and
the janitor into the public create/resolve/list/delete operations.

Classes:
    ShortenerService:
        Entry point for creating and following expiring, usage-limited short links.

Example:
    >>> from datetime import timedelta
    >>> from linkshortener.services import ShortenerService

    >>> service = ShortenerService()
    >>> identifier = service.create_short_link('https://a', 'u1', max_uses=2, ttl=timedelta(seconds=60))
    >>> service.resolve_link(identifier)
    'https://a'
    >>> [entry.remaining_uses for entry in service.list_links_for_user('u1')]
    [1]
    >>> service.close()
"""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, UTC

from linkshortener.constants import TTL, Defaults, Event
from linkshortener.exceptions import InvalidArgumentError
from linkshortener.models import Entry
from linkshortener.services.opener import Opener, open_in_browser
from linkshortener.store.base import EntryBaseStore, OwnerBaseRegistry
from linkshortener.store.exceptions import CollisionError, ExpiredError, NotFoundError, UseLimitExceededError
from linkshortener.store.memory import EntryMemoryStore, OwnerMemoryRegistry
from linkshortener.tasks.janitor import JanitorTask
from linkshortener.utils.config import ServiceConfig
from linkshortener.utils.helpers import as_timedelta
from linkshortener.utils.shortener import generate_identifier


logger = logging.getLogger(__name__)


class ShortenerService:
    """Create, resolve, list and delete short links

    The service owns a JanitorTask sweeping the store in the background. It is
    started on construction (unless `start_janitor=False`) and stopped by
    `close()` or by leaving the `with` block.

    Attributes:
        store (EntryBaseStore):
            Store holding the entries.
        registry (OwnerBaseRegistry):
            User -> owner token registry.
        janitor (JanitorTask):
            Background expiry sweeper.
    """

    def __init__(
        self,
        store: EntryBaseStore | None = None,
        registry: OwnerBaseRegistry | None = None,
        *,
        janitor_interval: float = TTL.ONE_HOUR,
        start_janitor: bool = True,
        salt: str = Defaults.SALT,
        identifier_length: int = Defaults.IDENTIFIER_LENGTH,
        max_generation_attempts: int = Defaults.MAX_GENERATION_ATTEMPTS,
        generator: Callable[..., str] = generate_identifier,
    ):
        if max_generation_attempts <= 0:
            raise ValueError(f'Max generation attempts must be positive (given value: {max_generation_attempts}).')

        self.store = store if store is not None else EntryMemoryStore()
        self.registry = registry if registry is not None else OwnerMemoryRegistry()
        self.salt = salt
        self.identifier_length = identifier_length
        self.max_generation_attempts = max_generation_attempts
        self._generate = generator

        self.janitor = JanitorTask(self.store, interval=janitor_interval)
        if start_janitor:
            self.janitor.start()

    @classmethod
    def from_config(cls, config: ServiceConfig, **kwargs) -> 'ShortenerService':
        """Build a service (and its in-memory store) from a ServiceConfig"""
        return cls(
            store=EntryMemoryStore(shards=config.store_shards),
            janitor_interval=config.janitor_interval,
            salt=config.salt,
            identifier_length=config.identifier_length,
            **kwargs,
        )

    def __enter__(self) -> 'ShortenerService':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self.janitor.stop()

    def create_short_link(self, target: str, user_id: str, max_uses: int, ttl: timedelta | int | float) -> str:
        """Create a short link and return its identifier

        Procedure:
        - Step 1: Validate parameters (nothing is stored if they are invalid)
        - Step 2: Resolve (or register) the user's owner token
        - Step 3: Generate an identifier and insert the entry
        - Step 4: On collision, regenerate with fresh seed material (bounded retries)

        Args:
            target (str):
                Resource the link should point to.
            user_id (str):
                External identifier of the user creating the link.
            max_uses (int):
                Number of allowed resolutions (> 0).
            ttl (timedelta | int | float):
                Time-to-live, as timedelta or seconds (> 0).

        Returns:
            str:
                The new link's identifier.

        Raises:
            InvalidArgumentError:
                If any parameter is invalid.
            CollisionError:
                If every generated identifier collided.
        """
        # 1- Validate parameters
        if not isinstance(target, str) or not target.strip():
            raise InvalidArgumentError('Target must be a non-empty string.')
        if not isinstance(user_id, str) or not user_id.strip():
            raise InvalidArgumentError('User ID must be a non-empty string.')
        if not isinstance(max_uses, int) or isinstance(max_uses, bool):
            raise InvalidArgumentError(f'Max uses must be an integer (given type: {type(max_uses)}).')
        try:
            ttl = as_timedelta(ttl)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(str(e)) from e
        if max_uses <= 0 or ttl <= timedelta(0):
            raise InvalidArgumentError(f'Max uses and TTL must be greater than 0 (given values: max_uses={max_uses}, ttl={ttl}).')

        created_at = datetime.now(UTC)
        try:
            expires_at = created_at + ttl
        except OverflowError as e:
            raise InvalidArgumentError(f'TTL reaches past the latest representable date (given value: {ttl}).') from e

        # 2- Resolve owner token
        owner_token = self.registry.token_for(user_id)

        # 3- Generate identifier and insert entry
        error = None
        for attempt in range(self.max_generation_attempts):
            identifier = self._generate(target, owner_token, attempt=attempt, salt=self.salt, length=self.identifier_length)
            entry = Entry(
                target=target,
                identifier=identifier,
                owner_token=owner_token,
                max_uses=max_uses,
                expires_at=expires_at,
                created_at=created_at,
            )
            try:
                self.store.insert(entry)
            except CollisionError as e:
                # 4- Retry with fresh seed material
                logger.warning(
                    'Identifier collision. Regenerating.',
                    extra={'event': Event.IDENTIFIER_COLLISION, 'identifier': identifier, 'attempt': attempt},
                )
                error = e
            else:
                logger.info(
                    'Short link created.',
                    extra={'event': Event.LINK_CREATED, 'identifier': identifier, 'maxUses': max_uses, 'expiresAt': expires_at},
                )
                return identifier

        raise error

    def resolve_link(self, identifier: str) -> str:
        """Resolve a short link and count one use

        Raises:
            NotFoundError, ExpiredError, UseLimitExceededError (see EntryBaseStore.resolve)
        """
        try:
            target = self.store.resolve(identifier)
        except NotFoundError:
            logger.info('Short link not found.', extra={'event': Event.LINK_NOT_FOUND, 'identifier': identifier})
            raise
        except ExpiredError:
            logger.info('Short link expired and was removed.', extra={'event': Event.LINK_EXPIRED, 'identifier': identifier})
            raise
        except UseLimitExceededError:
            logger.info('Short link use limit exceeded.', extra={'event': Event.LINK_USE_LIMIT_EXCEEDED, 'identifier': identifier})
            raise

        logger.debug('Short link resolved.', extra={'event': Event.LINK_RESOLVED, 'identifier': identifier})
        return target

    def list_links_for_user(self, user_id: str) -> list[Entry]:
        """Return the user's live links (empty list for unknown users)"""
        owner_token = self.registry.lookup(user_id)
        if owner_token is None:
            return []
        return self.store.list_by_owner(owner_token)

    def delete_link(self, identifier: str) -> None:
        self.store.remove(identifier)
        logger.info('Short link deleted (if it existed).', extra={'event': Event.LINK_DELETED, 'identifier': identifier})

    def open_link(self, identifier: str, opener: Opener = open_in_browser) -> str:
        """Resolve a short link and hand its target to `opener`

        Returns:
            str: The resolved target.
        """
        target = self.resolve_link(identifier)
        opener(target)
        return target
