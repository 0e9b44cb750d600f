"""Tests for create_release.core.context module."""

from __future__ import annotations

import pytest

from create_release.core.context import (
    DEFAULT_API_URL,
    ActionContext,
    ContextError,
    load_context,
)
from create_release.core.result import Err, Ok


class TestActionContext:
    def test_defaults(self) -> None:
        ctx = ActionContext()
        assert ctx.owner == ""
        assert ctx.repo == ""
        assert ctx.sha == ""
        assert ctx.api_url == DEFAULT_API_URL
        assert ctx.token == ""

    def test_from_environ(self) -> None:
        ctx = ActionContext.from_environ(
            {
                "GITHUB_REPOSITORY": "octo/hello",
                "GITHUB_SHA": "abc123",
                "GITHUB_API_URL": "https://ghe.example.com/api/v3/",
                "GITHUB_TOKEN": "t0ken",
            }
        )
        assert ctx == ActionContext(
            owner="octo",
            repo="hello",
            sha="abc123",
            api_url="https://ghe.example.com/api/v3",
            token="t0ken",
        )

    def test_from_empty_environ(self) -> None:
        assert ActionContext.from_environ({}) == ActionContext()

    @pytest.mark.parametrize("value", ["octo", "octo/", "/hello", "a/b/c"])
    def test_malformed_repository(self, value: str) -> None:
        with pytest.raises(ValueError, match="owner/repo"):
            ActionContext.from_environ({"GITHUB_REPOSITORY": value})

    def test_frozen(self) -> None:
        ctx = ActionContext()
        with pytest.raises(AttributeError):
            ctx.owner = "x"  # type: ignore[misc]


class TestLoadContext:
    def test_ok(self) -> None:
        result = load_context({"GITHUB_REPOSITORY": "octo/hello", "GITHUB_SHA": "sha"})
        assert isinstance(result, Ok)
        assert result.value.owner == "octo"
        assert result.value.sha == "sha"

    def test_err(self) -> None:
        result = load_context({"GITHUB_REPOSITORY": "nope"})
        assert isinstance(result, Err)
        assert isinstance(result.error, ContextError)
        assert result.error.variable == "GITHUB_REPOSITORY"
        assert "nope" in result.error.message

    def test_defaults_to_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_REPOSITORY", "env/repo")
        monkeypatch.setenv("GITHUB_SHA", "deadbeef")
        result = load_context()
        assert isinstance(result, Ok)
        assert (result.value.owner, result.value.repo, result.value.sha) == (
            "env",
            "repo",
            "deadbeef",
        )
