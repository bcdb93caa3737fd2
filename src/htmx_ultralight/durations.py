"""Durations for trigger delays, throttles, polling, and swap timing.

htmx reads time intervals as an integer and a unit specifier with no space between
them. e.g., "2s" or "500ms". Only those two units are understood.

:author: Shay Hill
:created: 2026-10-18
"""

from __future__ import annotations

import dataclasses
import enum


class TimeUnit(enum.Enum):
    """htmx units of time.

    Value is the unit specifier as it appears in an attribute value.
    """

    S = "s"  # seconds
    MS = "ms"  # milliseconds


@dataclasses.dataclass(frozen=True)
class Duration:
    """A time interval with a unit of measurement.

    The value is not checked. A negative or enormous value will be written out
    as-is, and htmx can decide what to do with it.
    """

    value: int
    unit: TimeUnit


def seconds(value: int) -> Duration:
    """Create a duration in seconds.

    :param value: number of seconds
    :return: Duration that will be written as "<value>s"
    """
    return Duration(value, TimeUnit.S)


def milliseconds(value: int) -> Duration:
    """Create a duration in milliseconds.

    :param value: number of milliseconds
    :return: Duration that will be written as "<value>ms"
    """
    return Duration(value, TimeUnit.MS)
