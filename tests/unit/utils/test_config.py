"""Unit tests for configuration utilities in config.py

Test coverage includes:

1. Environment variable resolution
   - Ensures app_env() correctly reads APP_ENV.

2. Configuration loading behavior
   - Ensures load_config() falls back to defaults for unset variables.
   - Ensures load_config() reads overrides from the environment.
   - Ensures malformed, non-positive or blank values raise BadConfigurationError.
"""

import pytest

from linkshortener.constants import ENV, TTL, Defaults
from linkshortener.exceptions import BadConfigurationError
from linkshortener.utils import config


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    """Start every test from a clean environment."""
    for name in (*ENV.App, *ENV.Shortener):
        monkeypatch.delenv(name, raising=False)


# -------------------------------
# 1. Environment variable resolution
# -------------------------------


def test_app_env_defaults_to_local():
    assert config.app_env() == 'local'


def test_app_env_is_lowercased(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'DEV')
    assert config.app_env() == 'dev'


# -------------------------------
# 2. Configuration loading behavior
# -------------------------------


def test_load_config_defaults():
    loaded = config.load_config()
    assert loaded == config.ServiceConfig()
    assert loaded.janitor_interval == TTL.ONE_HOUR
    assert loaded.store_shards == Defaults.STORE_SHARDS
    assert loaded.identifier_length == Defaults.IDENTIFIER_LENGTH
    assert loaded.salt == Defaults.SALT


def test_load_config_from_environment(monkeypatch):
    monkeypatch.setenv('LINKSHORTENER_JANITOR_INTERVAL', '0.5')
    monkeypatch.setenv('LINKSHORTENER_STORE_SHARDS', '32')
    monkeypatch.setenv('LINKSHORTENER_IDENTIFIER_LENGTH', '9')
    monkeypatch.setenv('LINKSHORTENER_SALT', 'pepper')

    loaded = config.load_config()

    assert loaded.janitor_interval == 0.5
    assert loaded.store_shards == 32
    assert loaded.identifier_length == 9
    assert loaded.salt == 'pepper'


def test_load_config_ignores_empty_values(monkeypatch):
    monkeypatch.setenv('LINKSHORTENER_STORE_SHARDS', '')
    assert config.load_config().store_shards == Defaults.STORE_SHARDS


@pytest.mark.parametrize(
    'name, value, match',
    [
        ('LINKSHORTENER_JANITOR_INTERVAL', 'hourly', 'must be a number'),
        ('LINKSHORTENER_JANITOR_INTERVAL', '0', 'must be positive'),
        ('LINKSHORTENER_STORE_SHARDS', '1.5', 'must be a number'),
        ('LINKSHORTENER_STORE_SHARDS', '-4', 'must be positive'),
        ('LINKSHORTENER_IDENTIFIER_LENGTH', '0', 'must be positive'),
        ('LINKSHORTENER_SALT', '   ', 'non-empty string'),
    ],
)
def test_load_config_with_bad_values(monkeypatch, name, value, match):
    monkeypatch.setenv(name, value)
    with pytest.raises(BadConfigurationError, match=match):
        config.load_config()
