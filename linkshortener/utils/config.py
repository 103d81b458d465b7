"""Utility functions for application configuration management.

The service is configured entirely through environment variables. Every
variable is optional; unset variables fall back to the defaults in
`linkshortener.constants`.

    SHORTENER_HOST          – bind host (default: 127.0.0.1)
    SHORTENER_PORT          – bind port (default: 7878)
    SHORTENER_BASE_URL      – public prefix for returned short URLs
                              (default: derived from each request)
    SHORTCODE_LENGTH        – shortcode length (default: 6)
    SHORTCODE_ALPHABET      – shortcode alphabet (default: [a-zA-Z0-9])
    SHORTCODE_MAX_ATTEMPTS  – insert attempts before giving up (default: 10)
    SHORTCODE_GROW_AFTER    – collisions before the shortcode grows by one
                              character, 0 disables growth (default: 5)

Classes:
    ShortenerConfig:
        Immutable, validated configuration snapshot (pydantic-settings).

Functions:
    load_config() -> ShortenerConfig
        Read and validate configuration from the environment.

Example:
    >>> os.environ['SHORTCODE_LENGTH'] = '8'
    >>> config = load_config()
    >>> config.shortcode_length
    8
"""

import logging
import urllib.parse

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from linkshortener.constants import ENV, DefaultServer, DefaultShortcode
from linkshortener.exceptions import BadConfigurationError
from linkshortener.utils.shortener import validate_alphabet


logger = logging.getLogger(__name__)


class ShortenerConfig(BaseSettings):
    """Immutable service configuration, read from the environment on construction

    Fields can also be passed by name (`ShortenerConfig(max_attempts=3)`);
    explicit values take precedence over the environment.
    """

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True, env_ignore_empty=True, extra='ignore')

    host: str = Field(default=DefaultServer.HOST, validation_alias=ENV.Server.HOST.value, description='Interface the HTTP server binds to')
    port: int = Field(
        default=DefaultServer.PORT,
        ge=1,
        le=65535,
        validation_alias=ENV.Server.PORT.value,
        description='Port the HTTP server listens on',
    )
    base_url: str | None = Field(
        default=None,
        validation_alias=ENV.Server.BASE_URL.value,
        description='Public prefix for short URLs, None = derive from request',
    )
    shortcode_length: int = Field(
        default=DefaultShortcode.LENGTH,
        ge=1,
        validation_alias=ENV.Shortcode.LENGTH.value,
        description='Initial shortcode length',
    )
    alphabet: str = Field(
        default=DefaultShortcode.ALPHABET,
        validation_alias=ENV.Shortcode.ALPHABET.value,
        description='Characters shortcodes are drawn from',
    )
    max_attempts: int = Field(
        default=DefaultShortcode.MAX_ATTEMPTS,
        ge=1,
        validation_alias=ENV.Shortcode.MAX_ATTEMPTS.value,
        description='Insert attempts per create() call',
    )
    grow_after: int = Field(
        default=DefaultShortcode.GROW_AFTER,
        ge=0,
        validation_alias=ENV.Shortcode.GROW_AFTER.value,
        description='Collisions before length += 1 (0 = never)',
    )

    @field_validator('alphabet')
    @classmethod
    def check_alphabet(cls, value: str) -> str:
        validate_alphabet(value)
        return value

    @field_validator('base_url')
    @classmethod
    def check_base_url(cls, value: str | None) -> str | None:
        if value is None:
            return None
        components = urllib.parse.urlparse(value)
        if components.scheme not in {'http', 'https'} or not components.netloc:
            raise ValueError(f'Base URL must be an absolute http(s) URL (given value: {value!r}).')
        return value


def load_config() -> ShortenerConfig:
    """Load service configuration from environment variables

    Blank variables count as unset.

    Returns:
        ShortenerConfig: validated configuration.

    Raises:
        BadConfigurationError:
            If any variable holds an invalid value.

    Example:
        >>> os.environ['SHORTENER_BASE_URL'] = 'https://sho.rt'
        >>> load_config().base_url
        'https://sho.rt'
    """
    try:
        config = ShortenerConfig()
    except ValidationError as e:
        raise BadConfigurationError(f'Invalid configuration: {e}') from e

    logger.debug(
        'Loaded configuration from environment.',
        extra={'host': config.host, 'port': config.port, 'shortcodeLength': config.shortcode_length},
    )
    return config
