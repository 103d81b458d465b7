"""Unit tests for the HTTP routes in routes.py.

Test coverage includes:

1. Homepage
   - GET / serves the HTML form posting the `url` field.

2. Shortening
   - POST /shorten returns the short URL as plain text (HTTP 200).
   - Base URL comes from configuration or, if unset, from the request.
   - Missing or empty `url` returns HTTP 400.
   - Generation exhausted returns HTTP 500 and logs an ERROR.

3. Redirect
   - GET /{shortcode} redirects to the target (HTTP 307), for any stored target.
   - Whitespace around the submitted `url` is not part of the redirect target.
   - Unknown shortcodes return HTTP 404.

4. Unexpected errors
   - Unhandled exceptions become HTTP 500.
"""

import logging
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from linkshortener.api import create_app
from linkshortener.api.constants import SHORTCODE_GENERATION_EXHAUSTED, SHORT_URL_NOT_FOUND
from linkshortener.dao.exceptions import ShortcodeGenerationExhaustedError
from linkshortener.dao.memory import ShortURLMemoryDAO
from linkshortener.store import ShortURLStore
from linkshortener.utils.config import ShortenerConfig
from linkshortener.utils.shortener import ALPHABET


def shortcode_of(short_url: str) -> str:
    return short_url.rsplit('/', 1)[-1]


# -------------------------------
# 1. Homepage
# -------------------------------


def test_homepage(client):
    response = client.get('/')

    assert response.status_code == 200
    assert response.headers['content-type'].startswith('text/html')
    assert '<form id="shortenForm">' in response.text
    assert 'name="url"' in response.text


# -------------------------------
# 2. Shortening
# -------------------------------


def test_shorten_url(client, store):
    response = client.post('/shorten', data={'url': 'https://example.com/page'})

    assert response.status_code == 200
    assert response.headers['content-type'].startswith('text/plain')
    assert response.text.startswith('https://sho.rt/')

    shortcode = shortcode_of(response.text)
    assert len(shortcode) == 6
    assert set(shortcode) <= set(ALPHABET)
    assert store.resolve(shortcode) == 'https://example.com/page'
    assert store.count() == 1


def test_shorten_url_derives_base_url_from_request(store):
    app = create_app(store, ShortenerConfig())
    client = TestClient(app, base_url='http://localhost:7878')

    response = client.post('/shorten', data={'url': 'https://example.com/page'})

    assert response.status_code == 200
    assert response.text.startswith('http://localhost:7878/')


@pytest.mark.parametrize('data', [{}, {'url': ''}, {'url': '   '}, {'other': 'https://example.com'}])
def test_shorten_url_without_url(client, store, data):
    response = client.post('/shorten', data=data)

    assert response.status_code == 400
    assert response.text == "Bad Request (missing 'url' in form body)"
    assert store.count() == 0


def test_shorten_url_generation_exhausted(client, app, caplog):
    failing_store = MagicMock(spec=ShortURLStore)
    failing_store.create.side_effect = ShortcodeGenerationExhaustedError('exhausted', attempts=10, length=6)
    app.state.store = failing_store

    with caplog.at_level(logging.ERROR, logger='linkshortener.api.routes'):
        response = client.post('/shorten', data={'url': 'https://example.com/page'})

    assert response.status_code == 500
    assert response.text == 'Internal Server Error'
    records = [r for r in caplog.records if getattr(r, 'event', None) == SHORTCODE_GENERATION_EXHAUSTED]
    assert len(records) == 1
    assert records[0].levelno == logging.ERROR


# -------------------------------
# 3. Redirect
# -------------------------------


def test_redirect_url(client):
    short_url = client.post('/shorten', data={'url': 'https://example.com/page'}).text

    response = client.get(f'/{shortcode_of(short_url)}')

    assert response.status_code == 307
    assert response.headers['location'] == 'https://example.com/page'


def test_redirect_url_drops_surrounding_whitespace(client, store):
    short_url = client.post('/shorten', data={'url': ' https://example.com/page '}).text

    response = client.get(f'/{shortcode_of(short_url)}')

    assert response.status_code == 307
    assert response.headers['location'] == 'https://example.com/page'
    assert store.resolve(shortcode_of(short_url)) == 'https://example.com/page'


def test_redirect_url_is_repeatable(client):
    shortcode = shortcode_of(client.post('/shorten', data={'url': 'https://example.com/page'}).text)

    locations = {client.get(f'/{shortcode}').headers['location'] for _ in range(10)}

    assert locations == {'https://example.com/page'}


@pytest.mark.parametrize('method', ['post', 'put', 'delete'])
def test_redirect_only_answers_get(client, method):
    shortcode = shortcode_of(client.post('/shorten', data={'url': 'https://example.com/page'}).text)

    response = getattr(client, method)(f'/{shortcode}')

    assert response.status_code == 405


def test_redirect_url_with_unknown_shortcode(client, caplog):
    with caplog.at_level(logging.INFO, logger='linkshortener.api.routes'):
        response = client.get('/zzzzzz')

    assert response.status_code == 404
    assert response.text == 'ID not found'
    assert any(getattr(r, 'event', None) == SHORT_URL_NOT_FOUND for r in caplog.records)


def test_each_shortcode_redirects_to_its_own_target(client):
    targets = [f'https://example.com/{i}' for i in range(20)]
    shortcodes = [shortcode_of(client.post('/shorten', data={'url': target}).text) for target in targets]

    assert len(set(shortcodes)) == 20
    for shortcode, target in zip(shortcodes, targets):
        assert client.get(f'/{shortcode}').headers['location'] == target


# -------------------------------
# 4. Unexpected errors
# -------------------------------


def test_unexpected_error_returns_500(client, app):
    broken_store = MagicMock(spec=ShortURLStore)
    broken_store.resolve.side_effect = RuntimeError('boom')
    app.state.store = broken_store

    response = client.get('/abc123')

    assert response.status_code == 500
    assert response.text == 'Internal Server Error'


def test_unexpected_error_reraised_when_running_locally(monkeypatch):
    monkeypatch.setattr('linkshortener.utils.helpers.running_locally', lambda: True)
    broken_store = MagicMock(spec=ShortURLStore)
    broken_store.resolve.side_effect = RuntimeError('boom')
    client = TestClient(create_app(broken_store, ShortenerConfig()))

    with pytest.raises(RuntimeError, match='boom'):
        client.get('/abc123')


def test_fresh_app_has_empty_store():
    store = ShortURLStore(ShortURLMemoryDAO())
    create_app(store, ShortenerConfig())

    assert store.count() == 0
