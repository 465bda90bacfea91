"""Utility functions for application configuration management.

All settings are read from environment variables. Unset variables fall back
to the defaults in `linkshortener.constants`.

    APP_ENV                          – environment name (default: 'local')
    LINKSHORTENER_JANITOR_INTERVAL   – seconds between expiry sweeps (default: 3600)
    LINKSHORTENER_STORE_SHARDS       – number of lock shards in the entry store (default: 16)
    LINKSHORTENER_IDENTIFIER_LENGTH  – maximum identifier length (default: 7)
    LINKSHORTENER_SALT               – identifier generation salt (default: 'default_salt')

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    load_config() -> ServiceConfig
        Build a ServiceConfig from the environment.

Example:
    >>> from linkshortener.utils.config import load_config
    >>> os.environ['LINKSHORTENER_JANITOR_INTERVAL'] = '60'
    >>> load_config().janitor_interval
    60.0
"""

import os
import logging
from dataclasses import dataclass

from linkshortener.constants import ENV, TTL, Defaults
from linkshortener.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceConfig:
    """Tunables for ShortenerService and its collaborators.

    Attributes:
        janitor_interval (float):
            Seconds between two expiry sweeps.
        store_shards (int):
            Number of independently locked shards in the entry store.
        identifier_length (int):
            Maximum length of generated identifiers.
        salt (str):
            Salt mixed into identifier generation.
    """

    janitor_interval: float = TTL.ONE_HOUR
    store_shards: int = Defaults.STORE_SHARDS
    identifier_length: int = Defaults.IDENTIFIER_LENGTH
    salt: str = Defaults.SALT


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def _positive(name: str, default, cast):
    raw = os.environ.get(name)
    if raw is None or raw == '':
        return default
    try:
        value = cast(raw)
    except ValueError as e:
        raise BadConfigurationError(f"Environment variable '{name}' must be a number (given value: {raw!r}).") from e
    if value <= 0:
        raise BadConfigurationError(f"Environment variable '{name}' must be positive (given value: {raw!r}).")
    return value


def load_config() -> ServiceConfig:
    """Load service configuration from environment variables

    Returns:
        ServiceConfig: configuration with defaults applied for unset variables.

    Raises:
        BadConfigurationError:
            If a numeric variable is malformed or not positive, or the salt is blank.
    """
    salt = os.environ.get(ENV.Shortener.SALT, Defaults.SALT)
    if not salt.strip():
        raise BadConfigurationError(f"Environment variable '{ENV.Shortener.SALT}' must be a non-empty string.")

    config = ServiceConfig(
        janitor_interval=_positive(ENV.Shortener.JANITOR_INTERVAL, float(TTL.ONE_HOUR), float),
        store_shards=_positive(ENV.Shortener.STORE_SHARDS, Defaults.STORE_SHARDS, int),
        identifier_length=_positive(ENV.Shortener.IDENTIFIER_LENGTH, Defaults.IDENTIFIER_LENGTH, int),
        salt=salt,
    )
    logger.debug(
        'Loaded service configuration.',
        extra={
            'appEnv': app_env(),
            'janitorInterval': config.janitor_interval,
            'storeShards': config.store_shards,
            'identifierLength': config.identifier_length,
        },
    )
    return config
