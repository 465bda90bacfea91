from linkshortener.services.shortener_service import ShortenerService
from linkshortener.services.opener import open_in_browser


__all__ = [
    'ShortenerService',
    'open_in_browser',
]
