"""Test configuration for pytest.

:author: Shay Hill
:created: 2026-10-18
"""

from __future__ import annotations

from typing import Any


def pytest_assertrepr_compare(
    config: Any, op: str, left: str, right: str
) -> list[str] | None:
    """See full error diffs"""
    del config
    if op in ("==", "!="):
        return [f"{left!r} {op} {right!r}"]
    return None
