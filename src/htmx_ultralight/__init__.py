"""Import functions into the package namespace.

:author: ShayHill
:created: 2026-10-18
"""

from htmx_ultralight.attribute_names import HxAttr
from htmx_ultralight.constructors.new_element import (
    new_element,
    new_sub_element,
    update_element,
)
from htmx_ultralight.durations import Duration, TimeUnit, milliseconds, seconds
from htmx_ultralight.hx_attributes import (
    boost,
    confirm,
    delete,
    get,
    hyper_script,
    include,
    indicator,
    patch,
    post,
    push_url,
    put,
    replace_url,
    select,
    swap,
    sync,
    target,
    trigger,
    trigger_load_polling,
    trigger_polling,
)
from htmx_ultralight.string_conversion import (
    format_attr_dict,
    format_duration,
    format_element_reference,
    html_tostring,
)
from htmx_ultralight.values import (
    CHANGED,
    CONSUME,
    DOCUMENT,
    ONCE,
    THIS,
    WINDOW,
    Attribute,
    Closest,
    Delay,
    ElementReference,
    EventFlag,
    EventModifier,
    EventTarget,
    Find,
    FocusScroll,
    From,
    IgnoreTitle,
    Keyword,
    Next,
    Position,
    Previous,
    Queue,
    QueueMode,
    Scroll,
    SettleDelay,
    Show,
    Standard,
    SwapDelay,
    SwapModifier,
    SwapStrategy,
    SyncMode,
    SyncOption,
    Throttle,
    Transition,
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
    "Duration",
    "ElementReference",
    "EventFlag",
    "EventModifier",
    "EventTarget",
    "Find",
    "FocusScroll",
    "From",
    "HxAttr",
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
    "TimeUnit",
    "Transition",
    "TriggerEvent",
    "boost",
    "confirm",
    "delete",
    "format_attr_dict",
    "format_duration",
    "format_element_reference",
    "get",
    "html_tostring",
    "hyper_script",
    "include",
    "indicator",
    "milliseconds",
    "new_element",
    "new_sub_element",
    "patch",
    "post",
    "push_url",
    "put",
    "replace_url",
    "seconds",
    "select",
    "swap",
    "sync",
    "target",
    "trigger",
    "trigger_load_polling",
    "trigger_polling",
    "update_element",
]
