import logging

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from linkshortener.api.constants import (
    MISSING_URL,
    SHORT_URL_CREATED,
    SHORTCODE_GENERATION_EXHAUSTED,
    SHORT_URL_NOT_FOUND,
    REDIRECT_SUCCESS,
)
from linkshortener.api.html import HOMEPAGE
from linkshortener.dao.exceptions import ShortURLNotFoundError, ShortcodeGenerationExhaustedError
from linkshortener.store import ShortURLStore
from linkshortener.utils.config import ShortenerConfig
from linkshortener.utils.helpers import base_url, get_short_url, guarantee_500_response


logger = logging.getLogger(__name__)

router = APIRouter()


def response_500() -> PlainTextResponse:
    return PlainTextResponse('Internal Server Error', status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def response_400(message: str | None = None) -> PlainTextResponse:
    base = 'Bad Request'
    return PlainTextResponse(base if not message else f'{base} ({message})', status_code=status.HTTP_400_BAD_REQUEST)


def response_404() -> PlainTextResponse:
    return PlainTextResponse('ID not found', status_code=status.HTTP_404_NOT_FOUND)


def response_307(*, location: str) -> RedirectResponse:
    return RedirectResponse(url=location, status_code=status.HTTP_307_TEMPORARY_REDIRECT)


@router.get('/', response_class=HTMLResponse, include_in_schema=False)
def homepage() -> HTMLResponse:
    """Serve the page with the URL submission form."""
    return HTMLResponse(HOMEPAGE)


@router.post('/shorten', response_class=PlainTextResponse)
@guarantee_500_response
def shorten_url(request: Request, url: str | None = Form(None)):
    """Shorten a URL submitted as the `url` form field

    This handler follows this procedure to shorten URLs:
    - Step 1: Extract the target URL from the form body
    - Step 2: Store it under a fresh shortcode
    - Step 3: Respond with the full short URL as plain text

    HTTP responses:
        200: the short URL, e.g. http://localhost:7878/Gh71WP
        400: missing or empty `url` form field
        500: no free shortcode found (shortcode space near exhaustion)
    """
    store: ShortURLStore = request.app.state.store
    config: ShortenerConfig = request.app.state.config

    # 1- Extract target URL from form body
    if url is None or not url.strip():
        logger.info("Missing 'url' in form body. Responding with 400.", extra={'event': MISSING_URL})
        return response_400(message="missing 'url' in form body")

    # 2- Store target URL under a fresh shortcode
    try:
        short_url = store.create(url.strip())
    except ShortcodeGenerationExhaustedError as e:
        logger.error(
            'Shortcode generation exhausted, shortcode space may be close to full. Responding with 500.',
            extra={'event': SHORTCODE_GENERATION_EXHAUSTED, 'attempts': e.attempts, 'length': e.length},
        )
        return response_500()

    # 3- Respond with the short URL
    short_url_string = get_short_url(short_url.shortcode, base_url(request, configured=config.base_url))
    logger.info(
        'Shortened URL. Responding with 200.',
        extra={'event': SHORT_URL_CREATED, 'shortcode': short_url.shortcode},
    )
    return PlainTextResponse(short_url_string)


@router.get('/{shortcode}')
@guarantee_500_response
def redirect_url(request: Request, shortcode: str):
    """Redirect to the target URL stored under `shortcode`

    HTTP responses:
        307: Location header holds the target URL
        404: unknown shortcode
    """
    store: ShortURLStore = request.app.state.store

    try:
        target_url = store.resolve(shortcode)
    except ShortURLNotFoundError:
        logger.info(
            'Short URL record not found. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404()

    logger.info(
        'Redirecting client to target URL. Responding with 307.',
        extra={'shortcode': shortcode, 'event': REDIRECT_SUCCESS},
    )
    return response_307(location=target_url)
