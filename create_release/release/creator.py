"""Release creator: step inputs in, one release out, outputs published.

Inputs are read in a fixed order (tag_name, release_name, body, draft,
prerelease, commitish, body_path, owner, repo), then the body file is read if
one was given, then exactly one "create release" call is made.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from create_release.core.result import Err, Ok
from create_release.github.releases import create_release
from create_release.output.console import Style
from create_release.release.body import read_body_file
from create_release.release.model import ReleaseRequest, ReleaseResult

if TYPE_CHECKING:
    from create_release.actions.runtime import ActionsRuntime
    from create_release.core.context import ActionContext
    from create_release.github.http import HttpClient
    from create_release.output.console import ConsoleProtocol

__all__ = [
    "TAG_REF_PREFIX",
    "parse_flag",
    "resolve_request",
    "run",
    "strip_tag_ref",
]

TAG_REF_PREFIX = "refs/tags/"


def strip_tag_ref(value: str) -> str:
    """``refs/tags/v1.10.15`` -> ``v1.10.15``; anything else is returned as-is."""
    return value.removeprefix(TAG_REF_PREFIX)


def parse_flag(value: str) -> bool:
    """Only the exact string ``"true"`` is true."""
    return value == "true"


def _require(value: str, what: str, hint: str) -> str:
    if not value:
        raise ValueError(f"Unable to determine {what}: {hint}")
    return value


def resolve_request(runtime: ActionsRuntime, context: ActionContext) -> ReleaseRequest:
    """Read the step inputs and fill the gaps from the ambient context.

    A body file that cannot be read is reported through ``runtime.set_failed``
    and the literal ``body`` input is used instead.

    Raises:
        InputRequiredError: If ``tag_name`` is missing.
        ValueError: If owner, repo or target commitish resolve to empty.
    """
    tag = strip_tag_ref(runtime.get_input("tag_name", required=True))
    release_name = strip_tag_ref(runtime.get_input("release_name")) or None
    body = runtime.get_input("body")
    draft = parse_flag(runtime.get_input("draft"))
    prerelease = parse_flag(runtime.get_input("prerelease"))
    commitish = runtime.get_input("commitish") or context.sha
    body_path = runtime.get_input("body_path")
    owner = runtime.get_input("owner") or context.owner
    repo = runtime.get_input("repo") or context.repo

    if body_path:
        match read_body_file(Path(body_path)):
            case Ok(text):
                # An empty file falls back to the literal body.
                body = text or body
            case Err(error):
                runtime.set_failed(error.message)

    return ReleaseRequest(
        owner=_require(owner, "repository owner", "set the 'owner' input or GITHUB_REPOSITORY"),
        repo=_require(repo, "repository name", "set the 'repo' input or GITHUB_REPOSITORY"),
        tag=_require(tag, "tag", "'tag_name' is empty after removing 'refs/tags/'"),
        name=release_name,
        body=body,
        draft=draft,
        prerelease=prerelease,
        target_commitish=_require(
            commitish, "target commitish", "set the 'commitish' input or GITHUB_SHA"
        ),
    )


def run(
    runtime: ActionsRuntime,
    context: ActionContext,
    http: HttpClient,
    console: ConsoleProtocol | None = None,
) -> ReleaseResult | None:
    """Create the release and publish ``id``, ``html_url`` and ``upload_url``.

    Every failure ends in ``runtime.set_failed`` with the underlying message;
    outputs are only published once the release exists. Returns the created
    release, or None when the call was not made or failed.
    """
    try:
        request = resolve_request(runtime, context)
        runtime.debug(f"release payload: {request.to_payload()}")
        if console is not None:
            console.info(f"Creating release {request.tag} on {request.full_name}")
            console.print(f"target: {request.target_commitish}", Style.DIM)

        result = create_release(http, context, request)
        if isinstance(result, Err):
            runtime.set_failed(result.error.message)
            return None

        release = result.value
        runtime.set_output("id", release.id)
        runtime.set_output("html_url", release.html_url)
        runtime.set_output("upload_url", release.upload_url)
        if console is not None:
            console.success(f"Release created: {release.html_url}")
        return release
    except Exception as e:  # noqa: BLE001
        runtime.set_failed(str(e))
        return None
