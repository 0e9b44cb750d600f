"""Core types shared across the action."""

from .context import ActionContext, ContextError, load_context
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # context
    "ActionContext",
    "ContextError",
    "load_context",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
