"""Helper utilities for HTTP route handlers.

Functions:
    base_url(request, configured=None) -> str
        Public base URL, either configured or derived from the request
    get_short_url(shortcode, base) -> str
        Get string representation of short URL for a given shortcode
    guarantee_500_response(func) -> Callable
        Decorator: Turn unexpected route errors into a plain 500 response

Example:
    Typical usage inside a route handler:

        >>> base_url(request)
        'http://localhost:7878'
        >>> base_url(request, configured='https://sho.rt/')
        'https://sho.rt'
        >>> get_short_url('abc123', 'https://sho.rt')
        'https://sho.rt/abc123'
"""

import logging
import functools
from collections.abc import Callable

from fastapi import Request, status
from fastapi.responses import PlainTextResponse

from linkshortener.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from linkshortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def base_url(request: Request, configured: str | None = None) -> str:
    """Return the public base URL for short links

    Args:
        request (Request): incoming request
        configured (str | None): explicitly configured base URL, takes precedence

    Returns:
        str: Base URL without a trailing slash, e.g.:
             - "https://sho.rt" (configured)
             - "http://localhost:7878" (derived from the request)
    """
    if configured:
        return configured.rstrip('/')

    host = request.headers.get('host') or request.url.netloc
    return f'{request.url.scheme}://{host}'


def get_short_url(shortcode: str, base: str) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        base (str): public base URL

    Returns:
        str: short url string representation
    """
    return f'{base.rstrip("/")}/{shortcode}'


def guarantee_500_response(func: Callable) -> Callable:
    """Decorator: respond with a plain 500 if a route handler raises unexpectedly.

    When running locally the original exception is re-raised so the traceback
    reaches the developer.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception:
            if running_locally():
                raise
            logger.exception(
                'Unhandled error in route handler. Responding with 500.',
                extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR},
            )
            return PlainTextResponse('Internal Server Error', status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return wrapper
