"""Expiring, usage-limited short links."""

from linkshortener.models import Entry
from linkshortener.services import ShortenerService


__version__ = '0.1.0'

__all__ = [
    'Entry',
    'ShortenerService',
]
