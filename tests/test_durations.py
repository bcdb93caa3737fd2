"""Test functions in durations.py.

:author: Shay Hill
:created: 2026-10-18
"""

import pytest

from htmx_ultralight.durations import Duration, TimeUnit, milliseconds, seconds
from htmx_ultralight.string_conversion import format_duration


class TestConstructors:
    def test_seconds(self):
        """Seconds helper sets unit S."""
        assert seconds(3) == Duration(3, TimeUnit.S)

    def test_milliseconds(self):
        """Milliseconds helper sets unit MS."""
        assert milliseconds(250) == Duration(250, TimeUnit.MS)

    def test_frozen(self):
        """Durations are immutable values."""
        duration = seconds(1)
        with pytest.raises(AttributeError):
            duration.value = 2  # type: ignore[misc]

    def test_hashable(self):
        """Equal durations hash the same."""
        assert len({seconds(1), seconds(1), milliseconds(1)}) == 2


class TestFormatDuration:
    @pytest.mark.parametrize("value", [0, 1, 2, 59, 1000, 2**40])
    def test_seconds(self, value: int):
        """Write value then 's'."""
        assert format_duration(seconds(value)) == f"{value}s"

    @pytest.mark.parametrize("value", [0, 1, 2, 59, 1000, 2**40])
    def test_milliseconds(self, value: int):
        """Write value then 'ms'."""
        assert format_duration(milliseconds(value)) == f"{value}ms"

    def test_not_validated(self):
        """Pass a negative value through unchanged."""
        assert format_duration(seconds(-1)) == "-1s"
