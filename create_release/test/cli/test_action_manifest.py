"""The composite action must run the package on an interpreter it supports."""

from __future__ import annotations

import re
import tomllib
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[3]
ACTION = ROOT / "action.yml"
PYPROJECT = ROOT / "pyproject.toml"


@pytest.fixture
def action_text() -> str:
    if not ACTION.is_file():
        pytest.skip("action.yml is only present in a source checkout")
    return ACTION.read_text(encoding="utf-8")


def test_sets_up_python_before_install(action_text: str) -> None:
    setup = action_text.find("uses: actions/setup-python@v5")
    install = action_text.find("-m pip install")
    assert setup != -1
    assert install != -1
    assert setup < install


def test_python_version_satisfies_requires_python(action_text: str) -> None:
    match = re.search(r'python-version:\s*"(\d+)\.(\d+)"', action_text)
    assert match is not None
    pinned = (int(match.group(1)), int(match.group(2)))

    project = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]
    minimum = re.fullmatch(r">=(\d+)\.(\d+)", project["requires-python"])
    assert minimum is not None
    assert pinned >= (int(minimum.group(1)), int(minimum.group(2)))


def test_entry_point_runs_from_installed_interpreter(action_text: str) -> None:
    assert "steps.python.outputs.python-path" in action_text
    assert "create-release-venv/bin/create-release" in action_text
