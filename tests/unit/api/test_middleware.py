"""Unit tests for the request logging middleware.

Test coverage includes:

1. One log line per request with method, path, status and duration.
"""

import logging


def test_request_is_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger='linkshortener.api.access'):
        client.get('/zzzzzz')

    records = [r for r in caplog.records if r.name == 'linkshortener.api.access']
    assert len(records) == 1

    record = records[0]
    assert record.getMessage() == 'GET /zzzzzz 404'
    assert record.method == 'GET'
    assert record.path == '/zzzzzz'
    assert record.status == 404
    assert record.durationMs >= 0
