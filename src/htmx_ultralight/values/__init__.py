"""Raise the level of the value types.

:author: Shay Hill
:created: 2026-10-18
"""

from htmx_ultralight.values.type_attribute import Attribute
from htmx_ultralight.values.type_element_reference import (
    DOCUMENT,
    THIS,
    WINDOW,
    Closest,
    ElementReference,
    Find,
    Keyword,
    Next,
    Previous,
    Standard,
)
from htmx_ultralight.values.type_swap import (
    FocusScroll,
    IgnoreTitle,
    Position,
    Scroll,
    SettleDelay,
    Show,
    SwapDelay,
    SwapModifier,
    SwapStrategy,
    Transition,
)
from htmx_ultralight.values.type_sync_option import SyncMode, SyncOption
from htmx_ultralight.values.type_trigger_event import (
    CHANGED,
    CONSUME,
    ONCE,
    Delay,
    EventFlag,
    EventModifier,
    EventTarget,
    From,
    Queue,
    QueueMode,
    Throttle,
    TriggerEvent,
)

__all__ = [
    "CHANGED",
    "CONSUME",
    "DOCUMENT",
    "ONCE",
    "THIS",
    "WINDOW",
    "Attribute",
    "Closest",
    "Delay",
    "ElementReference",
    "EventFlag",
    "EventModifier",
    "EventTarget",
    "Find",
    "FocusScroll",
    "From",
    "IgnoreTitle",
    "Keyword",
    "Next",
    "Position",
    "Previous",
    "Queue",
    "QueueMode",
    "Scroll",
    "SettleDelay",
    "Show",
    "Standard",
    "SwapDelay",
    "SwapModifier",
    "SwapStrategy",
    "SyncMode",
    "SyncOption",
    "Throttle",
    "Transition",
    "TriggerEvent",
]
