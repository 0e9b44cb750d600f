"""Result type for recoverable failures.

Operations that can fail in an expected way (a body file that cannot be read,
an API call that is rejected) return ``Ok(value)`` or ``Err(error)`` instead of
raising, so the caller decides at the call site whether the failure is fatal.

Usage:
    match read_body_file(path):
        case Ok(text):
            body = text
        case Err(error):
            runtime.set_failed(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful outcome.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed outcome.

    Attributes:
        error: The error value, usually a frozen dataclass with a ``message``.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Union[Ok[T], Err[E]]
