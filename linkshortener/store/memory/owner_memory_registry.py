import logging
import threading
import uuid

from beartype import beartype

from linkshortener.constants import Event
from linkshortener.store.base import OwnerBaseRegistry


logger = logging.getLogger(__name__)


class OwnerMemoryRegistry(OwnerBaseRegistry):
    """In-memory user -> owner token registry

    Tokens are random UUID4 strings, created lazily on the first `token_for()`
    call for a user and kept for the lifetime of the registry.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._tokens: dict[str, str] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)

    @beartype
    def token_for(self, user_id: str) -> str:
        # NOTE: The lookup and the creation happen under one lock, otherwise two
        #       concurrent first calls for the same user could both miss and
        #       create two different tokens.
        with self._lock:
            token = self._tokens.get(user_id)
            if token is not None:
                return token
            token = self._tokens[user_id] = str(uuid.uuid4())

        logger.debug('Registered new owner.', extra={'event': Event.OWNER_REGISTERED, 'userId': user_id})
        return token

    @beartype
    def lookup(self, user_id: str) -> str | None:
        with self._lock:
            return self._tokens.get(user_id)
