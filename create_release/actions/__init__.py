"""GitHub Actions runner integration."""

from .runtime import (
    ActionsRuntime,
    EnvRuntime,
    InputRequiredError,
    MockRuntime,
)

__all__ = [
    "ActionsRuntime",
    "EnvRuntime",
    "InputRequiredError",
    "MockRuntime",
]
