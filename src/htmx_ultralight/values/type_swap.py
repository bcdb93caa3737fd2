"""Swap strategies and swap modifiers for the ``hx-swap`` attribute.

:author: Shay Hill
:created: 2026-10-18
"""

from __future__ import annotations

import dataclasses
import enum
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from htmx_ultralight.durations import Duration
    from htmx_ultralight.values.type_element_reference import ElementReference


class SwapStrategy(enum.Enum):
    """Where to put response content relative to the target element.

    Value is the strategy name exactly as htmx expects it.
    """

    INNER_HTML = "innerHTML"
    OUTER_HTML = "outerHTML"
    AFTER = "after"
    AFTER_BEGIN = "afterBegin"
    BEFORE_BEGIN = "beforeBegin"
    BEFORE_END = "beforeEnd"
    AFTER_END = "afterEnd"
    DELETE = "delete"
    NONE = "none"


class Position(enum.Enum):
    """Scroll position for the scroll and show swap modifiers."""

    TOP = "top"
    BOTTOM = "bottom"


@dataclasses.dataclass(frozen=True)
class Transition:
    """Use the View Transitions API for this swap."""

    enabled: bool


@dataclasses.dataclass(frozen=True)
class SwapDelay:
    """Time between receiving the response and swapping in the content."""

    duration: Duration


@dataclasses.dataclass(frozen=True)
class SettleDelay:
    """Time between the swap and the settle step."""

    duration: Duration


@dataclasses.dataclass(frozen=True)
class IgnoreTitle:
    """Do not update the document title from a title tag in the response."""

    enabled: bool


@dataclasses.dataclass(frozen=True)
class Scroll:
    """Scroll the target (or another element) to the top or bottom after the swap.

    :param position: top or bottom
    :param target: optional element to scroll instead of the swap target
    """

    position: Position
    target: ElementReference | None = None


@dataclasses.dataclass(frozen=True)
class Show:
    """Scroll the target (or another element) into view after the swap.

    :param position: top or bottom
    :param target: optional element to show instead of the swap target
    """

    position: Position
    target: ElementReference | None = None


@dataclasses.dataclass(frozen=True)
class FocusScroll:
    """Scroll to a focused input after the swap."""

    enabled: bool


SwapModifier: TypeAlias = (
    Transition | SwapDelay | SettleDelay | IgnoreTitle | Scroll | Show | FocusScroll
)
