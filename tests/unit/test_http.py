from __future__ import annotations

import pytest
import requests

from locationdata.common.http import HttpClient, HttpRequestError, RetryConfig, RetryableHttpError, TokenBucket


class FakeResponse:
    def __init__(self, status_code: int, payload=None, raises_json: bool = False):
        self.status_code = status_code
        self._payload = payload
        self._raises_json = raises_json

    def json(self):
        if self._raises_json:
            raise ValueError("bad json")
        return self._payload


def test_http_get_json_success(monkeypatch):
    client = HttpClient(retry=RetryConfig(max_attempts=1))
    seen = {}

    def fake_request(**kwargs):
        seen.update(kwargs)
        return FakeResponse(200, {"value": []})

    monkeypatch.setattr(client.session, "request", fake_request)
    payload = client.get_json("https://opendata.cbs.nl/x", params={"$filter": "a"})

    assert payload == {"value": []}
    assert seen["method"] == "GET"
    assert seen["params"] == {"$filter": "a"}
    assert seen["headers"]["User-Agent"].startswith("locationdata/")


def test_http_retryable_status_raises_retryable_error(monkeypatch):
    client = HttpClient(retry=RetryConfig(max_attempts=1))
    monkeypatch.setattr(client.session, "request", lambda **_kwargs: FakeResponse(503, {"x": 1}))

    with pytest.raises(RetryableHttpError):
        client.get_json("https://example.com")


def test_http_client_error_is_not_retried(monkeypatch):
    client = HttpClient(retry=RetryConfig(max_attempts=3, multiplier=0.01, max_wait=0.01))
    calls = []

    def fake_request(**_kwargs):
        calls.append(1)
        return FakeResponse(404)

    monkeypatch.setattr(client.session, "request", fake_request)
    with pytest.raises(HttpRequestError) as excinfo:
        client.get_json("https://example.com")

    assert not isinstance(excinfo.value, RetryableHttpError)
    assert len(calls) == 1


def test_http_retries_until_success(monkeypatch):
    client = HttpClient(retry=RetryConfig(max_attempts=3, multiplier=0.01, max_wait=0.01), rate_per_sec=1000)
    responses = iter([FakeResponse(429), FakeResponse(200, {"ok": True})])
    monkeypatch.setattr(client.session, "request", lambda **_kwargs: next(responses))

    assert client.get_json("https://example.com") == {"ok": True}


def test_http_connection_errors_are_retryable(monkeypatch):
    client = HttpClient(retry=RetryConfig(max_attempts=1))

    def boom(**_kwargs):
        raise requests.ConnectionError("down")

    monkeypatch.setattr(client.session, "request", boom)
    with pytest.raises(RetryableHttpError):
        client.get_json("https://example.com")


def test_http_invalid_json_raises(monkeypatch):
    client = HttpClient(retry=RetryConfig(max_attempts=1))
    monkeypatch.setattr(client.session, "request", lambda **_kwargs: FakeResponse(200, raises_json=True))

    with pytest.raises(HttpRequestError):
        client.get_json("https://example.com")


def test_token_bucket_spends_tokens():
    bucket = TokenBucket(rate_per_sec=100.0, capacity=2)
    bucket.acquire()
    bucket.acquire()
    assert bucket.tokens < 1


def test_http_client_context_manager_closes_session(monkeypatch):
    closed = []
    with HttpClient() as client:
        monkeypatch.setattr(client.session, "close", lambda: closed.append(True))
    assert closed == [True]


def test_get_odata_rows_follows_next_link(monkeypatch):
    client = HttpClient(retry=RetryConfig(max_attempts=1), rate_per_sec=1000)
    pages = {
        "https://opendata.cbs.nl/feed": FakeResponse(
            200, {"value": [{"a": 1}], "odata.nextLink": "https://opendata.cbs.nl/feed?$skiptoken=1"}
        ),
        "https://opendata.cbs.nl/feed?$skiptoken=1": FakeResponse(200, {"value": [{"a": 2}]}),
    }
    seen_params = []

    def fake_request(**kwargs):
        seen_params.append(kwargs["params"])
        return pages[kwargs["url"]]

    monkeypatch.setattr(client.session, "request", fake_request)
    rows = client.get_odata_rows("https://opendata.cbs.nl/feed", params={"$filter": "x"})

    assert rows == [{"a": 1}, {"a": 2}]
    assert seen_params == [{"$filter": "x"}, None]


def test_get_odata_rows_raises_on_error_body(monkeypatch):
    client = HttpClient(retry=RetryConfig(max_attempts=1))
    monkeypatch.setattr(
        client.session,
        "request",
        lambda **_kwargs: FakeResponse(200, {"odata.error": {"code": "", "message": "bad filter"}}),
    )
    with pytest.raises(HttpRequestError):
        client.get_odata_rows("https://opendata.cbs.nl/feed")


def test_get_odata_rows_caps_pages(monkeypatch):
    client = HttpClient(retry=RetryConfig(max_attempts=1), rate_per_sec=1000)
    monkeypatch.setattr(
        client.session,
        "request",
        lambda **_kwargs: FakeResponse(200, {"value": [], "odata.nextLink": "https://opendata.cbs.nl/loop"}),
    )
    with pytest.raises(HttpRequestError):
        client.get_odata_rows("https://opendata.cbs.nl/feed", max_pages=3)
