"""Release body loaded from a file in the workspace."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from create_release.core.result import Err, Ok, Result

__all__ = ["BodyFileError", "read_body_file"]


@dataclass(frozen=True, slots=True)
class BodyFileError:
    """The body file could not be read. ``message`` is the underlying error text."""

    path: Path
    message: str


def read_body_file(path: Path) -> Result[str, BodyFileError]:
    """Read ``path`` as UTF-8 text, line endings untouched."""
    try:
        return Ok(path.read_bytes().decode("utf-8"))
    except UnicodeDecodeError as e:
        return Err(BodyFileError(path=path, message=str(e)))
    except OSError as e:
        return Err(BodyFileError(path=path, message=str(e)))
