"""Tests for github/http.py - HTTP client abstraction."""

from __future__ import annotations

import io
import json
import urllib.error
import urllib.request
from typing import Any

import pytest

from create_release.core.result import Err, Ok
from create_release.github.http import (
    GITHUB_API_VERSION,
    HttpClient,
    HttpError,
    MockHttpClient,
    RealHttpClient,
)

URL = "https://api.github.com/repos/owner/repo/releases"


# =============================================================================
# HttpError tests
# =============================================================================


class TestHttpError:
    def test_str_with_status(self) -> None:
        error = HttpError(url=URL, status=422, message="Validation Failed")
        assert str(error) == f"HTTP 422: Validation Failed ({URL})"

    def test_str_without_status(self) -> None:
        error = HttpError(url=URL, status=0, message="Request timed out")
        assert str(error) == f"Request timed out ({URL})"

    def test_is_frozen(self) -> None:
        error = HttpError(url=URL, status=404, message="Not Found")
        with pytest.raises(AttributeError):
            error.status = 500  # type: ignore[misc]


# =============================================================================
# MockHttpClient tests
# =============================================================================


class TestMockHttpClient:
    def test_isinstance_check(self) -> None:
        assert isinstance(MockHttpClient(), HttpClient)

    def test_post_json_success(self) -> None:
        client = MockHttpClient()
        client.set_json(URL, {"id": 1})

        result = client.post_json(URL, {"tag_name": "v1"}, token="t")

        assert result == Ok({"id": 1})
        assert client.calls == [(URL, {"tag_name": "v1"}, "t")]
        assert client.payloads == [{"tag_name": "v1"}]

    def test_post_json_error(self) -> None:
        client = MockHttpClient()
        error = HttpError(url=URL, status=500, message="Error creating release")
        client.set_json(URL, error)

        assert client.post_json(URL, {}) == Err(error)

    def test_unknown_url_is_404(self) -> None:
        result = MockHttpClient().post_json(URL, {})
        assert isinstance(result, Err)
        assert result.error.status == 404


# =============================================================================
# RealHttpClient tests (urlopen patched, no network)
# =============================================================================


class _FakeResponse:
    def __init__(self, body: bytes) -> None:
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> _FakeResponse:
        return self

    def __exit__(self, *exc: object) -> None:
        return None


def _http_error(status: int, reason: str, body: bytes) -> urllib.error.HTTPError:
    return urllib.error.HTTPError(URL, status, reason, None, io.BytesIO(body))  # type: ignore[arg-type]


class TestRealHttpClient:
    def test_isinstance_check(self) -> None:
        assert isinstance(RealHttpClient(), HttpClient)

    def test_post_json_sends_request(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: dict[str, Any] = {}

        def fake_urlopen(req: urllib.request.Request, timeout: float, context: object):
            seen["req"] = req
            seen["timeout"] = timeout
            return _FakeResponse(b'{"id": 7, "html_url": "h", "upload_url": "u"}')

        monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)

        client = RealHttpClient(timeout=5.0)
        result = client.post_json(URL, {"tag_name": "v1.0.0", "draft": False}, token="secret")

        assert result == Ok({"id": 7, "html_url": "h", "upload_url": "u"})
        req: urllib.request.Request = seen["req"]
        assert req.get_method() == "POST"
        assert req.full_url == URL
        assert json.loads(req.data) == {"tag_name": "v1.0.0", "draft": False}  # type: ignore[arg-type]
        assert req.get_header("Authorization") == "Bearer secret"
        assert req.get_header("X-github-api-version") == GITHUB_API_VERSION
        assert req.get_header("Accept") == "application/vnd.github+json"
        assert seen["timeout"] == 5.0

    def test_no_token_no_authorization(self, monkeypatch: pytest.MonkeyPatch) -> None:
        seen: dict[str, urllib.request.Request] = {}

        def fake_urlopen(req: urllib.request.Request, timeout: float, context: object):
            seen["req"] = req
            return _FakeResponse(b"{}")

        monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)

        RealHttpClient().post_json(URL, {})
        assert seen["req"].get_header("Authorization") is None

    def test_http_error_uses_github_message(self, monkeypatch: pytest.MonkeyPatch) -> None:
        body = json.dumps(
            {
                "message": "Validation Failed",
                "errors": [{"resource": "Release", "code": "already_exists", "field": "tag_name"}],
            }
        ).encode()

        def fake_urlopen(req: urllib.request.Request, timeout: float, context: object):
            raise _http_error(422, "Unprocessable Entity", body)

        monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)

        result = RealHttpClient().post_json(URL, {})
        assert result == Err(
            HttpError(
                url=URL,
                status=422,
                message="Validation Failed: Release tag_name already_exists",
            )
        )

    def test_http_error_without_json_body(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_urlopen(req: urllib.request.Request, timeout: float, context: object):
            raise _http_error(502, "Bad Gateway", b"<html>")

        monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)

        result = RealHttpClient().post_json(URL, {})
        assert result == Err(HttpError(url=URL, status=502, message="Bad Gateway"))

    def test_http_error_with_message_details(self, monkeypatch: pytest.MonkeyPatch) -> None:
        body = b'{"message": "Bad credentials", "errors": [{"message": "token expired"}]}'

        def fake_urlopen(req: urllib.request.Request, timeout: float, context: object):
            raise _http_error(401, "Unauthorized", body)

        monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)

        result = RealHttpClient().post_json(URL, {})
        assert isinstance(result, Err)
        assert result.error.message == "Bad credentials: token expired"

    def test_network_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_urlopen(req: urllib.request.Request, timeout: float, context: object):
            raise urllib.error.URLError("Name or service not known")

        monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)

        result = RealHttpClient().post_json(URL, {})
        assert result == Err(HttpError(url=URL, status=0, message="Name or service not known"))

    def test_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_urlopen(req: urllib.request.Request, timeout: float, context: object):
            raise TimeoutError()

        monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen)

        result = RealHttpClient().post_json(URL, {})
        assert isinstance(result, Err)
        assert result.error.message == "Request timed out"

    def test_invalid_json_response(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            urllib.request, "urlopen", lambda req, timeout, context: _FakeResponse(b"not json")
        )
        result = RealHttpClient().post_json(URL, {})
        assert isinstance(result, Err)
        assert result.error.message.startswith("JSON parse error")

    def test_non_object_response(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            urllib.request, "urlopen", lambda req, timeout, context: _FakeResponse(b"[1, 2]")
        )
        result = RealHttpClient().post_json(URL, {})
        assert result == Err(HttpError(url=URL, status=0, message="Expected JSON object"))
