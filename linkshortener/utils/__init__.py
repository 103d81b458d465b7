from linkshortener.utils.config import ShortenerConfig, load_config
from linkshortener.utils.helpers import base_url, get_short_url, guarantee_500_response
from linkshortener.utils.shortener import generate_shortcode, validate_alphabet
from linkshortener.utils.logging import initialize_logging
from linkshortener.utils.runtime import app_env, running_locally


__all__ = [
    'generate_shortcode',
    'validate_alphabet',
    'ShortenerConfig',
    'load_config',
    'base_url',
    'get_short_url',
    'guarantee_500_response',
    'initialize_logging',
    'app_env',
    'running_locally',
]
