"""Tests for create_release.core.errors module."""

from create_release.core.errors import ErrorCode


def test_values_are_stable() -> None:
    assert ErrorCode.OK == 0
    assert ErrorCode.USER_ERROR == 1


def test_usable_as_exit_code() -> None:
    code: int = int(ErrorCode.USER_ERROR)
    assert code == 1
