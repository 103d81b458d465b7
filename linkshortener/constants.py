import string
from enum import StrEnum


class DefaultShortcode:
    """Default shortcode generation parameters."""

    LENGTH = 6
    # Base62: 26 lowercase + 26 uppercase + 10 digits
    ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
    # Characters allowed in a configured alphabet (RFC 3986 unreserved, minus '.' and '~')
    URL_SAFE_CHARACTERS = frozenset(string.ascii_letters + string.digits + '-_')
    MAX_ATTEMPTS = 10  # Total insert attempts before giving up
    GROW_AFTER = 5  # Consecutive collisions before the shortcode grows by one character


class DefaultServer:
    """Default HTTP server parameters."""

    HOST = '127.0.0.1'
    PORT = 7878


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        LOG_LEVEL = 'LOG_LEVEL'
        LOG_FORMAT = 'LOG_FORMAT'

    class Server(StrEnum):
        HOST = 'SHORTENER_HOST'
        PORT = 'SHORTENER_PORT'
        BASE_URL = 'SHORTENER_BASE_URL'

    class Shortcode(StrEnum):
        LENGTH = 'SHORTCODE_LENGTH'
        ALPHABET = 'SHORTCODE_ALPHABET'
        MAX_ATTEMPTS = 'SHORTCODE_MAX_ATTEMPTS'
        GROW_AFTER = 'SHORTCODE_GROW_AFTER'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
