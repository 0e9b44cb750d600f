"""GitHub Releases REST operation.

API documentation: https://docs.github.com/en/rest/releases/releases#create-a-release
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from create_release.core.result import Err, Ok, Result
from create_release.core.structured import get_scalar
from create_release.github.http import HttpError
from create_release.release.model import ReleaseRequest, ReleaseResult

if TYPE_CHECKING:
    from create_release.core.context import ActionContext
    from create_release.github.http import HttpClient

__all__ = ["create_release", "releases_url"]


def releases_url(api_url: str, owner: str, repo: str) -> str:
    return f"{api_url.rstrip('/')}/repos/{owner}/{repo}/releases"


def create_release(
    http: HttpClient,
    context: ActionContext,
    request: ReleaseRequest,
) -> Result[ReleaseResult, HttpError]:
    """Create a release. Exactly one request is made; nothing is retried.

    Args:
        http: HTTP client to use
        context: Supplies the API base URL and the token
        request: Release to create

    Returns:
        Ok with the created release's id and URLs, or Err with HttpError
    """
    url = releases_url(context.api_url, request.owner, request.repo)
    result = http.post_json(url, request.to_payload(), token=context.token)
    if isinstance(result, Err):
        return result

    data = result.value
    release_id = get_scalar(data, "id")
    html_url = data.get("html_url")
    upload_url = data.get("upload_url")
    if release_id is None or not isinstance(html_url, str) or not isinstance(upload_url, str):
        return Err(HttpError(url=url, status=0, message="Unexpected release payload in response"))

    return Ok(ReleaseResult(id=release_id, html_url=html_url, upload_url=upload_url))
