"""Exit codes for the create-release process.

A workflow step is failed by GitHub Actions when its process exits non-zero;
the runner does not distinguish codes, so every failed run exits with
``USER_ERROR`` and the message on the ``::error::`` line carries the detail.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes. Values are stable."""

    OK = 0
    USER_ERROR = 1
