"""Encoding of GitHub Actions workflow commands and file commands.

Workflow commands are stdout lines of the form ``::name key=value::message``.
File commands (``GITHUB_OUTPUT`` and friends) are appended to a file the runner
names in the environment, using a heredoc-style delimiter for values.
"""

from __future__ import annotations

import json
import uuid
from collections.abc import Mapping

__all__ = [
    "escape_data",
    "escape_property",
    "format_command",
    "format_output_entry",
    "new_delimiter",
    "to_command_value",
]


def to_command_value(value: object) -> str:
    """Render a value the way the runner expects it.

    ``None`` becomes the empty string, strings pass through, anything else is
    JSON encoded (so ``42`` becomes ``"42"`` and ``True`` becomes ``"true"``).
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def escape_data(value: object) -> str:
    return to_command_value(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: object) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(
    command: str,
    message: object = "",
    properties: Mapping[str, object] | None = None,
) -> str:
    """Build a single workflow command line (without trailing newline)."""
    line = f"::{command}"
    if properties:
        rendered = ",".join(
            f"{key}={escape_property(value)}"
            for key, value in properties.items()
            if value is not None
        )
        if rendered:
            line += f" {rendered}"
    return f"{line}::{escape_data(message)}"


def new_delimiter() -> str:
    return f"ghadelimiter_{uuid.uuid4()}"


def format_output_entry(name: str, value: object, delimiter: str) -> str:
    """Build a ``name<<delimiter`` block for the ``GITHUB_OUTPUT`` file.

    Raises:
        ValueError: If the delimiter occurs in the name or the value.
    """
    text = to_command_value(value)
    if delimiter in name:
        raise ValueError(f"Unexpected input: name should not contain the delimiter \"{delimiter}\"")
    if delimiter in text:
        raise ValueError(f"Unexpected input: value should not contain the delimiter \"{delimiter}\"")
    return f"{name}<<{delimiter}\n{text}\n{delimiter}\n"
