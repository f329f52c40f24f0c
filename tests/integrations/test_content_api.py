"""Tests for the content API client and HTTP gateway."""

import json
import urllib.error
from unittest.mock import MagicMock, patch

import pytest

from pageforge.config import ApiConfig
from pageforge.content.defaults import default_document
from pageforge.content.models import ContentStatus
from pageforge.errors import FetchError, PublishError, RestoreError, SaveError
from pageforge.integrations.content_api import (
    ContentAPIClient,
    ContentAPIError,
    HttpContentGateway,
)

_TEST_CONFIG = ApiConfig(url="https://api.example.com/v1/", retry_limit=2, backoff=0.5)


def _response(body) -> MagicMock:
    mock_response = MagicMock()
    raw = body if isinstance(body, str) else json.dumps(body)
    mock_response.read.return_value = raw.encode("utf-8")
    mock_response.__enter__ = lambda s: s
    mock_response.__exit__ = MagicMock(return_value=False)
    return mock_response


def _http_error(code: int, reason: str = "error") -> urllib.error.HTTPError:
    return urllib.error.HTTPError("https://api.example.com", code, reason, {}, None)


def _gateway(sleeps: list | None = None) -> HttpContentGateway:
    sleeps = sleeps if sleeps is not None else []
    client = ContentAPIClient(_TEST_CONFIG, sleep=sleeps.append)
    return HttpContentGateway(_TEST_CONFIG, client=client)


class TestClientRequest:
    def test_builds_request(self):
        client = ContentAPIClient(_TEST_CONFIG, sleep=lambda _s: None)
        with patch("urllib.request.urlopen", return_value=_response({"ok": True})) as mock_urlopen:
            result = client.request("PUT", "content/about", {"hero": {}})

        assert result == {"ok": True}
        req = mock_urlopen.call_args[0][0]
        assert req.full_url == "https://api.example.com/v1/content/about"
        assert req.method == "PUT"
        assert req.get_header("Content-type") == "application/json"
        assert req.get_header("X-client-version") == "1.0.0"
        assert json.loads(req.data) == {"hero": {}}
        assert mock_urlopen.call_args.kwargs["timeout"] == 30.0

    def test_empty_body_is_none(self):
        client = ContentAPIClient(_TEST_CONFIG, sleep=lambda _s: None)
        with patch("urllib.request.urlopen", return_value=_response("")):
            assert client.request("POST", "content/about/publish") is None

    def test_invalid_json(self):
        client = ContentAPIClient(_TEST_CONFIG, sleep=lambda _s: None)
        with patch("urllib.request.urlopen", return_value=_response("<html>")):
            with pytest.raises(ContentAPIError, match="invalid JSON"):
                client.request("POST", "content/about/publish")


class TestRetries:
    def test_get_retried_on_503(self):
        sleeps: list[float] = []
        client = ContentAPIClient(_TEST_CONFIG, sleep=sleeps.append)
        responses = [_http_error(503), _http_error(503), _response({"hero": {}})]
        with patch("urllib.request.urlopen", side_effect=responses) as mock_urlopen:
            assert client.request("GET", "content/about") == {"hero": {}}
        assert mock_urlopen.call_count == 3
        assert sleeps == [0.5, 1.0]

    def test_gives_up_after_retry_limit(self):
        client = ContentAPIClient(_TEST_CONFIG, sleep=lambda _s: None)
        with patch("urllib.request.urlopen", side_effect=[_http_error(429)] * 5) as mock_urlopen:
            with pytest.raises(ContentAPIError) as exc_info:
                client.request("PUT", "content/about", {})
        assert mock_urlopen.call_count == 3
        assert exc_info.value.status_code == 429

    def test_connection_error_retried(self):
        client = ContentAPIClient(_TEST_CONFIG, sleep=lambda _s: None)
        responses = [urllib.error.URLError("refused"), _response({})]
        with patch("urllib.request.urlopen", side_effect=responses) as mock_urlopen:
            client.request("GET", "content/about")
        assert mock_urlopen.call_count == 2

    def test_client_error_not_retried(self):
        client = ContentAPIClient(_TEST_CONFIG, sleep=lambda _s: None)
        with patch("urllib.request.urlopen", side_effect=[_http_error(400)]) as mock_urlopen:
            with pytest.raises(ContentAPIError):
                client.request("GET", "content/about")
        assert mock_urlopen.call_count == 1

    def test_post_never_retried(self):
        client = ContentAPIClient(_TEST_CONFIG, sleep=lambda _s: None)
        with patch("urllib.request.urlopen", side_effect=[_http_error(503)] * 3) as mock_urlopen:
            with pytest.raises(ContentAPIError):
                client.request("POST", "content/about/publish")
        assert mock_urlopen.call_count == 1


class TestHttpGateway:
    def test_fetch_flat_document(self):
        body = {"hero": {"title": "Server"}, "status": "published", "lastUpdated": "2025-01-01T00:00:00Z"}
        with patch("urllib.request.urlopen", return_value=_response(body)):
            doc = _gateway().fetch("about")
        assert doc is not None
        assert doc.content == {"hero": {"title": "Server"}}
        assert doc.status == ContentStatus.PUBLISHED

    def test_fetch_envelope(self):
        body = {"id": 1, "pageKey": "home", "content": {"hero": {}}, "status": "draft", "updatedAt": "2025-01-01T00:00:00Z"}
        with patch("urllib.request.urlopen", return_value=_response(body)):
            doc = _gateway().fetch("home")
        assert doc.content == {"hero": {}}

    def test_fetch_404_is_none(self):
        with patch("urllib.request.urlopen", side_effect=[_http_error(404)]):
            assert _gateway().fetch("about") is None

    def test_fetch_failure(self):
        with patch("urllib.request.urlopen", side_effect=[_http_error(500)] * 3):
            with pytest.raises(FetchError) as exc_info:
                _gateway().fetch("about")
        assert exc_info.value.page == "about"
        assert "HTTP 500" in exc_info.value.reason

    def test_fetch_non_object(self):
        with patch("urllib.request.urlopen", return_value=_response([1, 2])):
            with pytest.raises(FetchError):
                _gateway().fetch("about")

    def test_save_sends_full_document(self):
        doc = default_document("about")
        with patch("urllib.request.urlopen", return_value=_response(doc.to_payload())) as mock_urlopen:
            saved = _gateway().save("about", doc)
        req = mock_urlopen.call_args[0][0]
        assert req.method == "PUT"
        body = json.loads(req.data)
        assert body["hero"] == doc.content["hero"]
        assert body["status"] == "draft"
        assert saved.content == doc.content

    def test_save_failure(self):
        with patch("urllib.request.urlopen", side_effect=[_http_error(502)] * 3):
            with pytest.raises(SaveError):
                _gateway().save("about", default_document("about"))

    def test_publish(self):
        body = {**default_document("about").to_payload(), "status": "published"}
        with patch("urllib.request.urlopen", return_value=_response(body)) as mock_urlopen:
            doc = _gateway().publish("about")
        req = mock_urlopen.call_args[0][0]
        assert req.full_url.endswith("/content/about/publish")
        assert req.method == "POST"
        assert doc.status == ContentStatus.PUBLISHED

    def test_publish_failure_not_retried(self):
        with patch("urllib.request.urlopen", side_effect=[_http_error(503)]) as mock_urlopen:
            with pytest.raises(PublishError):
                _gateway().publish("about")
        assert mock_urlopen.call_count == 1

    def test_history(self):
        body = [
            {"id": "v2", "timestamp": "2025-02-01T00:00:00Z", "author": "ana", "data": {"hero": {"title": "b"}}},
            {"id": "v1", "timestamp": "2025-01-01T00:00:00Z", "author": "ana", "data": {"hero": {"title": "a"}}},
        ]
        with patch("urllib.request.urlopen", return_value=_response(body)):
            revisions = _gateway().history("about")
        assert [r.id for r in revisions] == ["v2", "v1"]
        assert revisions[0].created_by == "ana"
        assert revisions[1].document.content["hero"]["title"] == "a"

    def test_history_wrapped(self):
        body = {"versions": [{"id": 3, "data": {}}]}
        with patch("urllib.request.urlopen", return_value=_response(body)):
            revisions = _gateway().history("about")
        assert revisions[0].id == "3"

    def test_restore(self):
        body = default_document("about").to_payload()
        with patch("urllib.request.urlopen", return_value=_response(body)) as mock_urlopen:
            _gateway().restore("about", "v1")
        assert mock_urlopen.call_args[0][0].full_url.endswith("/content/about/restore/v1")

    def test_restore_failure(self):
        with patch("urllib.request.urlopen", side_effect=[_http_error(404)]):
            with pytest.raises(RestoreError):
                _gateway().restore("about", "v9")
