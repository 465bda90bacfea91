"""Exceptions related to entry store and owner registry operations.

Classes:
    StoreError:
        Generic base class for store-related exceptions.

    NotFoundError:
        Raised when no entry is stored under the requested identifier.

    ExpiredError:
        Raised when the requested entry outlived its TTL. The entry is purged.

    UseLimitExceededError:
        Raised when the requested entry already reached its maximum number of uses.
        The entry is kept until it expires or gets deleted.

    CollisionError:
        Raised when inserting an entry whose identifier is live or was retired.

Example:
    >>> from linkshortener.store.exceptions import NotFoundError
    >>> raise NotFoundError("Short link with identifier 'abc123' not found.")
    Traceback (most recent call last):
        ...
    linkshortener.store.exceptions.NotFoundError: Short link with identifier 'abc123' not found.
"""

from linkshortener.exceptions import LinkShortenerError


class StoreError(LinkShortenerError):
    """Generic base class for store-related exceptions."""

    error_code = 'store:store_error'


class NotFoundError(StoreError):
    """Exception raised when an entry is not found in the store."""

    error_code = 'store:not_found_error'


class ExpiredError(StoreError):
    """Exception raised when an entry's TTL has passed."""

    error_code = 'store:expired_error'


class UseLimitExceededError(StoreError):
    """Exception raised when an entry has been resolved its maximum number of times."""

    error_code = 'store:use_limit_exceeded_error'


class CollisionError(StoreError):
    """Exception raised when an identifier is already taken (or was used before).

    Callers are expected to regenerate the identifier with fresh seed material and retry.
    """

    error_code = 'store:collision_error'
