"""FastAPI application factory."""

from fastapi import FastAPI

from linkshortener import __version__
from linkshortener.api.middleware import RequestLoggingMiddleware
from linkshortener.api.routes import router
from linkshortener.store import ShortURLStore
from linkshortener.utils.config import ShortenerConfig


def create_app(store: ShortURLStore, config: ShortenerConfig) -> FastAPI:
    """Create and configure the FastAPI application.

    The app never creates a store; every request handler uses the one passed in.

    Args:
        store (ShortURLStore): mapping store shared by all request handlers
        config (ShortenerConfig): service configuration

    Returns:
        FastAPI: configured app
    """
    app = FastAPI(
        title='URL Shortener',
        description='In-memory URL shortening service',
        version=__version__,
        docs_url=None,
        redoc_url=None,
    )

    app.state.store = store
    app.state.config = config

    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(router)

    return app
