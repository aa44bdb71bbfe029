"""Argument-list checks shared by every operation."""
from __future__ import annotations

from typing import Sequence

from employee_office.core.errors import ArgumentCountError


def expect_args(args: Sequence[str], expected: int) -> None:
    """Fail before any store access when ``args`` has the wrong length."""
    if len(args) != expected:
        raise ArgumentCountError(expected, len(args))
