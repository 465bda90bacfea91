from linkshortener.utils.config import ServiceConfig, app_env, load_config
from linkshortener.utils.helpers import as_timedelta
from linkshortener.utils.shortener import encode_base62, generate_identifier
from linkshortener.utils.logging import initialize_logging


__all__ = [
    'encode_base62',
    'generate_identifier',
    'ServiceConfig',
    'app_env',
    'load_config',
    'as_timedelta',
    'initialize_logging',
]
