"""Events and event modifiers for the ``hx-trigger`` attribute.

:author: Shay Hill
:created: 2026-10-18

A trigger is an event name followed by any number of modifiers. Modifiers are
written in the order given. Nothing here checks for repeated or conflicting
modifiers. ``TriggerEvent("click", [ONCE, ONCE])`` will be written as
"click once once".
"""

from __future__ import annotations

import dataclasses
import enum
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterable

    from htmx_ultralight.durations import Duration
    from htmx_ultralight.values.type_element_reference import ElementReference


class QueueMode(enum.Enum):
    """Which events to queue while a request is in flight.

    NONE is an explicit choice (do not queue), not a missing value.
    """

    FIRST = "first"
    LAST = "last"
    ALL = "all"
    NONE = "none"


class EventFlag(enum.Enum):
    """Event modifiers that take no argument."""

    ONCE = "once"
    CHANGED = "changed"
    CONSUME = "consume"


ONCE = EventFlag.ONCE
CHANGED = EventFlag.CHANGED
CONSUME = EventFlag.CONSUME


@dataclasses.dataclass(frozen=True)
class Delay:
    """Wait before issuing the request. Restart the wait on each new event."""

    duration: Duration


@dataclasses.dataclass(frozen=True)
class Throttle:
    """Issue the request, then ignore events for a duration."""

    duration: Duration


@dataclasses.dataclass(frozen=True)
class From:
    """Listen for the event on another element."""

    element: ElementReference


@dataclasses.dataclass(frozen=True)
class EventTarget:
    """Only fire when the event target matches a css selector."""

    selector: str


@dataclasses.dataclass(frozen=True)
class Queue:
    """How to queue events that arrive while a request is in flight."""

    mode: QueueMode


EventModifier: TypeAlias = EventFlag | Delay | Throttle | From | EventTarget | Queue


@dataclasses.dataclass(frozen=True)
class TriggerEvent:
    """One event name with its modifiers.

    :param name: event name, e.g., "click" or "keyup"
    :param modifiers: event modifiers, written in the order given
    :param filter_: optional javascript filter expression. Written in square
        brackets directly after the event name.
    """

    name: str
    modifiers: tuple[EventModifier, ...] = ()
    filter_: str | None = None

    def __init__(
        self,
        name: str,
        modifiers: Iterable[EventModifier] = (),
        filter_: str | None = None,
    ) -> None:
        """Store modifiers as a tuple so any iterable can be passed."""
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "modifiers", tuple(modifiers))
        object.__setattr__(self, "filter_", filter_)
