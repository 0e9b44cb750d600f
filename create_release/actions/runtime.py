"""Step runtime: inputs, outputs and the failure signal.

This module provides:
- ActionsRuntime: Protocol the release creator talks to (injectable for tests)
- EnvRuntime: Real implementation following the GitHub Actions runner contract
- MockRuntime: In-memory implementation that records every call
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

import typer

from create_release.actions.commands import format_command, format_output_entry, new_delimiter

__all__ = [
    "ActionsRuntime",
    "EnvRuntime",
    "InputRequiredError",
    "MockRuntime",
    "input_env_name",
]


class InputRequiredError(ValueError):
    """A required step input was not supplied."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Input required and not supplied: {name}")
        self.name = name


def input_env_name(name: str) -> str:
    """Environment variable holding an input (``tag_name`` -> ``INPUT_TAG_NAME``)."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


@runtime_checkable
class ActionsRuntime(Protocol):
    """What a step can ask of the runner."""

    def get_input(self, name: str, *, required: bool = False) -> str:
        """Return the trimmed input value, or ``""`` when absent.

        Raises:
            InputRequiredError: If ``required`` and the value is empty.
        """
        ...

    def set_output(self, name: str, value: object) -> None:
        """Publish a step output for downstream steps."""
        ...

    def set_failed(self, message: str) -> None:
        """Mark the step failed and report ``message``."""
        ...

    def debug(self, message: str) -> None:
        """Emit a message only shown when step debug logging is enabled."""
        ...

    @property
    def failed(self) -> bool:
        """True once ``set_failed`` has been called."""
        ...


class EnvRuntime:
    """Runtime backed by the runner's environment variables and files.

    Inputs come from ``INPUT_*`` variables. Outputs are appended to the file
    named by ``GITHUB_OUTPUT``; on runners that do not set it, the legacy
    ``set-output`` workflow command is written instead.
    """

    def __init__(
        self,
        environ: Mapping[str, str],
        write: Callable[[str], None] = typer.echo,
    ) -> None:
        self._environ = environ
        self._write = write
        self._failed = False

    @property
    def failed(self) -> bool:
        return self._failed

    def get_input(self, name: str, *, required: bool = False) -> str:
        value = self._environ.get(input_env_name(name), "").strip()
        if required and not value:
            raise InputRequiredError(name)
        return value

    def set_output(self, name: str, value: object) -> None:
        output_file = self._environ.get("GITHUB_OUTPUT", "")
        if output_file:
            entry = format_output_entry(name, value, new_delimiter())
            with Path(output_file).open("a", encoding="utf-8") as handle:
                handle.write(entry)
            return
        self._write(format_command("set-output", value, {"name": name}))

    def set_failed(self, message: str) -> None:
        self._failed = True
        self._write(format_command("error", message))

    def debug(self, message: str) -> None:
        self._write(format_command("debug", message))


def _empty_outputs() -> list[tuple[str, object]]:
    return []


def _empty_strs() -> list[str]:
    return []


@dataclass
class MockRuntime:
    """Runtime that records everything, for tests.

    Usage:
        runtime = MockRuntime(inputs={"tag_name": "v1.0.0"})
        run(runtime, context, http)
        assert runtime.outputs[0] == ("id", 1)
    """

    inputs: dict[str, str] = field(default_factory=dict)
    outputs: list[tuple[str, object]] = field(default_factory=_empty_outputs)
    failures: list[str] = field(default_factory=_empty_strs)
    debug_messages: list[str] = field(default_factory=_empty_strs)
    reads: list[str] = field(default_factory=_empty_strs)

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    def get_input(self, name: str, *, required: bool = False) -> str:
        self.reads.append(name)
        value = (self.inputs.get(name) or "").strip()
        if required and not value:
            raise InputRequiredError(name)
        return value

    def set_output(self, name: str, value: object) -> None:
        self.outputs.append((name, value))

    def set_failed(self, message: str) -> None:
        self.failures.append(message)

    def debug(self, message: str) -> None:
        self.debug_messages.append(message)

    # Test helpers

    @property
    def output_names(self) -> list[str]:
        return [name for name, _ in self.outputs]

    def output(self, name: str) -> object | None:
        for key, value in self.outputs:
            if key == name:
                return value
        return None
