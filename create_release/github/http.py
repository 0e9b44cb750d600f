"""HTTP client abstraction for the GitHub REST API.

This module provides:
- HttpClient: Protocol for JSON POST requests (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing
"""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Protocol, cast, runtime_checkable

from create_release import __version__
from create_release.core.result import Err, Ok, Result
from create_release.core.structured import as_str_dict, get_str

__all__ = [
    "HttpClient",
    "RealHttpClient",
    "MockHttpClient",
    "HttpError",
    "GITHUB_API_VERSION",
]

GITHUB_API_VERSION = "2022-11-28"


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP operations.

    The release creator only ever needs to POST a JSON document and read a
    JSON object back; this is the whole surface a test has to fake.
    """

    def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        *,
        token: str = "",
    ) -> Result[dict[str, Any], HttpError]:
        """POST ``payload`` as JSON and parse the JSON object response.

        Args:
            url: Endpoint URL
            payload: JSON-serializable request body
            token: Credential sent as a bearer token when non-empty

        Returns:
            Ok with the parsed response object, or Err with HttpError
        """
        ...


def _error_message(body: bytes, fallback: str) -> str:
    """Pull GitHub's ``message`` (and validation details) out of an error body."""
    try:
        data = as_str_dict(json.loads(body.decode("utf-8")))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return fallback
    if data is None:
        return fallback

    message = get_str(data, "message") or fallback
    details: list[str] = []
    errors = data.get("errors")
    if isinstance(errors, list):
        for item in cast(list[object], errors):
            entry = as_str_dict(item)
            if entry is None:
                continue
            detail = get_str(entry, "message")
            if detail is None:
                parts = [get_str(entry, k) for k in ("resource", "field", "code")]
                detail = " ".join(p for p in parts if p) or None
            if detail:
                details.append(detail)
    if details:
        return f"{message}: {'; '.join(details)}"
    return message


class RealHttpClient:
    """Real HTTP client using urllib.

    One request, no retries: the timeout is the only bound on how long a
    call may block.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = f"create-release/{__version__}",
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def _headers(self, token: str) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "Content-Type": "application/json; charset=utf-8",
            "User-Agent": self.user_agent,
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        *,
        token: str = "",
    ) -> Result[dict[str, Any], HttpError]:
        data = json.dumps(payload).encode("utf-8")
        try:
            req = urllib.request.Request(
                url,
                data=data,
                headers=self._headers(token),
                method="POST",
            )
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                raw: bytes = response.read()
        except urllib.error.HTTPError as e:
            return Err(HttpError(url=url, status=e.code, message=_error_message(e.read(), e.reason)))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Request timed out"))
        except ValueError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))

        try:
            obj: object = json.loads(raw.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(HttpError(url=url, status=0, message=f"JSON parse error: {e}"))
        result = as_str_dict(obj)
        if result is None:
            return Err(HttpError(url=url, status=0, message="Expected JSON object"))
        return Ok(cast(dict[str, Any], result))


class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_json(url, {"id": 1, "html_url": "...", "upload_url": "..."})
        result = client.post_json(url, {"tag_name": "v1.0.0"})
        assert client.calls == [(url, {"tag_name": "v1.0.0"}, "")]
    """

    def __init__(self) -> None:
        self._responses: dict[str, dict[str, Any] | HttpError] = {}
        self.calls: list[tuple[str, dict[str, Any], str]] = []

    def set_json(self, url: str, response: dict[str, Any] | HttpError) -> None:
        """Set the response (or error) returned for URL."""
        self._responses[url] = response

    def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        *,
        token: str = "",
    ) -> Result[dict[str, Any], HttpError]:
        self.calls.append((url, payload, token))

        if url not in self._responses:
            return Err(HttpError(url=url, status=404, message="Not Found (mock)"))

        response = self._responses[url]
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)

    @property
    def payloads(self) -> list[dict[str, Any]]:
        return [payload for _, payload, _ in self.calls]
