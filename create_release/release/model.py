from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ReleaseRequest:
    """Everything needed to create one release."""

    owner: str
    repo: str
    tag: str
    name: str | None
    body: str
    draft: bool
    prerelease: bool
    target_commitish: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def to_payload(self) -> dict[str, Any]:
        """JSON body for ``POST /repos/{owner}/{repo}/releases``."""
        payload: dict[str, Any] = {"tag_name": self.tag}
        if self.name is not None:
            payload["name"] = self.name
        payload.update(
            body=self.body,
            draft=self.draft,
            prerelease=self.prerelease,
            target_commitish=self.target_commitish,
        )
        return payload


@dataclass(frozen=True, slots=True)
class ReleaseResult:
    """Identifiers of a created release, passed through from the API response."""

    id: int | str
    html_url: str
    upload_url: str
