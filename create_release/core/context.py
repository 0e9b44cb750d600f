"""Ambient trigger context of the running workflow.

GitHub Actions describes the event that started a run through environment
variables. They are read once, at process start, into an ``ActionContext``
that is passed explicitly to whoever needs a default owner, repo or commit.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .result import Err, Ok, Result

__all__ = [
    "ActionContext",
    "ContextError",
    "DEFAULT_API_URL",
    "load_context",
]

DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True, slots=True)
class ContextError:
    """The environment does not describe a usable workflow context."""

    message: str
    variable: str | None = None


@dataclass(frozen=True, slots=True)
class ActionContext:
    """Defaults supplied by the runner for the current workflow run.

    Attributes:
        owner: Repository owner from ``GITHUB_REPOSITORY`` (empty when unset).
        repo: Repository name from ``GITHUB_REPOSITORY`` (empty when unset).
        sha: Commit that triggered the run (``GITHUB_SHA``).
        api_url: REST API base URL, without trailing slash.
        token: Opaque credential handed to the HTTP client.
    """

    owner: str = ""
    repo: str = ""
    sha: str = ""
    api_url: str = DEFAULT_API_URL
    token: str = ""

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> ActionContext:
        """Build a context from an environment mapping.

        Raises:
            ValueError: If ``GITHUB_REPOSITORY`` is set but not ``owner/repo``.
        """
        owner, repo = _split_repository(environ.get("GITHUB_REPOSITORY", "").strip())
        api_url = environ.get("GITHUB_API_URL", "").strip().rstrip("/") or DEFAULT_API_URL
        return cls(
            owner=owner,
            repo=repo,
            sha=environ.get("GITHUB_SHA", "").strip(),
            api_url=api_url,
            token=environ.get("GITHUB_TOKEN", ""),
        )


def _split_repository(value: str) -> tuple[str, str]:
    if not value:
        return "", ""
    owner, sep, repo = value.partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise ValueError(f"GITHUB_REPOSITORY must look like 'owner/repo', got '{value}'")
    return owner, repo


def load_context(environ: Mapping[str, str] | None = None) -> Result[ActionContext, ContextError]:
    """Load the ambient context.

    Args:
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        Ok(ActionContext) on success, Err(ContextError) if a variable is malformed.
    """
    env = os.environ if environ is None else environ
    try:
        return Ok(ActionContext.from_environ(env))
    except ValueError as e:
        return Err(ContextError(str(e), variable="GITHUB_REPOSITORY"))
