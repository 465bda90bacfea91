from enum import StrEnum


class TTL:
    """TTL durations in seconds."""

    # Janitor sweep period (1 hour in seconds)
    ONE_HOUR = 3_600
    # Upper bound for waiting on an in-flight sweep during shutdown
    JANITOR_STOP_TIMEOUT = 5


class Defaults:
    """Default tuning values."""

    STORE_SHARDS = 16  # Number of lock shards in the in-memory entry store
    IDENTIFIER_LENGTH = 7  # Max identifier length (62**7 possible identifiers)
    SALT = 'default_salt'
    MAX_GENERATION_ATTEMPTS = 5  # Identifier regenerations before giving up on collisions


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        LOG_LEVEL = 'LOG_LEVEL'

    class Shortener(StrEnum):
        JANITOR_INTERVAL = 'LINKSHORTENER_JANITOR_INTERVAL'
        STORE_SHARDS = 'LINKSHORTENER_STORE_SHARDS'
        IDENTIFIER_LENGTH = 'LINKSHORTENER_IDENTIFIER_LENGTH'
        SALT = 'LINKSHORTENER_SALT'


class Event(StrEnum):
    """Log event codes (attached to log records via `extra`)."""

    LINK_CREATED = 'LINK_CREATED'
    LINK_RESOLVED = 'LINK_RESOLVED'
    LINK_NOT_FOUND = 'LINK_NOT_FOUND'
    LINK_EXPIRED = 'LINK_EXPIRED'
    LINK_USE_LIMIT_EXCEEDED = 'LINK_USE_LIMIT_EXCEEDED'
    LINK_DELETED = 'LINK_DELETED'
    IDENTIFIER_COLLISION = 'IDENTIFIER_COLLISION'
    OWNER_REGISTERED = 'OWNER_REGISTERED'
    JANITOR_STARTED = 'JANITOR_STARTED'
    JANITOR_STOPPED = 'JANITOR_STOPPED'
    JANITOR_SWEEP = 'JANITOR_SWEEP'
    JANITOR_TICK_FAILED = 'JANITOR_TICK_FAILED'
