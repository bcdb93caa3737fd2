"""Quasi-private functions for high-level string conversion.

:author: Shay Hill
:created: 2026-10-18

Every htmx attribute value is a string with its own small grammar. The functions
here turn value types into those strings. None of them check the values they are
given. A selector or a filter expression is written out exactly as passed, so any
problem will be found (or ignored) by htmx in the browser.

* durations -> "2s", "500ms"
* extended selectors -> "closest tr", "next .error", "document"
* trigger events -> "keyup changed delay:500ms, load"
* swap strategies with modifiers -> "outerHTML transition:true"
* sync options -> "closest form:abort"
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, TypeGuard, cast

from lxml import etree

from htmx_ultralight.values.type_element_reference import (
    Closest,
    Find,
    Keyword,
    Next,
    Previous,
    Standard,
)
from htmx_ultralight.values.type_swap import (
    FocusScroll,
    IgnoreTitle,
    Scroll,
    SettleDelay,
    Show,
    SwapDelay,
    Transition,
)
from htmx_ultralight.values.type_sync_option import SyncMode
from htmx_ultralight.values.type_trigger_event import (
    Delay,
    EventFlag,
    EventTarget,
    From,
    Queue,
    QueueMode,
    Throttle,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )

    from htmx_ultralight.attrib_hints import ElemAttrib, HxAttribArg
    from htmx_ultralight.durations import Duration
    from htmx_ultralight.values.type_element_reference import ElementReference
    from htmx_ultralight.values.type_swap import SwapModifier, SwapStrategy
    from htmx_ultralight.values.type_sync_option import SyncOption
    from htmx_ultralight.values.type_trigger_event import EventModifier, TriggerEvent


def format_flag(flag: bool) -> str:
    """Format a boolean the way htmx reads one.

    :param flag: True or False
    :return: "true" or "false"

    Not `str(flag).lower()`. These two literals are the only values htmx knows.
    """
    return "true" if flag else "false"


def format_duration(duration: Duration) -> str:
    """Format a duration as an integer and unit specifier.

    :param duration: a Duration instance
    :return: "<value>s" or "<value>ms"
    """
    return f"{duration.value}{duration.unit.value}"


def format_element_reference(element: ElementReference) -> str:
    """Format a plain or extended css selector.

    :param element: a selector string or one of the extended selector types
    :return: the selector string, possibly with a keyword prefix
    :raises TypeError: if element is not a selector string or extended selector

    Next and Previous without a selector keep the trailing space: Next() -> "next ".
    """
    if isinstance(element, str):
        return element
    if isinstance(element, Standard):
        return element.selector
    if isinstance(element, Keyword):
        return element.value
    if isinstance(element, Closest):
        return f"closest {element.selector}"
    if isinstance(element, Find):
        return f"find {element.selector}"
    if isinstance(element, Next):
        return f"next {element.selector or ''}"
    if isinstance(element, Previous):
        return f"previous {element.selector or ''}"
    msg = f"Cannot format {element!r} as an element reference"
    raise TypeError(msg)


def format_event_modifier(modifier: EventModifier) -> str:
    """Format one event modifier.

    :param modifier: an EventFlag or one of the event modifier types
    :return: a modifier token like "once", "delay:1s", or "from:closest form"
    :raises TypeError: if modifier is not an event modifier
    """
    if isinstance(modifier, EventFlag):
        return modifier.value
    if isinstance(modifier, Delay):
        return f"delay:{format_duration(modifier.duration)}"
    if isinstance(modifier, Throttle):
        return f"throttle:{format_duration(modifier.duration)}"
    if isinstance(modifier, From):
        return f"from:{format_element_reference(modifier.element)}"
    if isinstance(modifier, EventTarget):
        return f"target:{modifier.selector}"
    if isinstance(modifier, Queue):
        return f"queue:{modifier.mode.value}"
    msg = f"Cannot format {modifier!r} as an event modifier"
    raise TypeError(msg)


def format_trigger_event(event: TriggerEvent | str) -> str:
    """Format an event name, optional filter, and modifiers.

    :param event: a TriggerEvent or a bare event name
    :return: the event name, then the filter in brackets (if any), then each
        modifier preceded by a single space
    """
    if isinstance(event, str):
        return event
    name = event.name
    if event.filter_ is not None:
        name = f"{name}[{event.filter_}]"
    return " ".join([name, *(format_event_modifier(m) for m in event.modifiers)])


def format_trigger(events: Iterable[TriggerEvent | str]) -> str:
    """Format any number of events for an hx-trigger attribute.

    :param events: TriggerEvents or bare event names
    :return: formatted events joined with ", ". An empty string if no events.
    """
    return ", ".join(format_trigger_event(e) for e in events)


def format_polling(duration: Duration, filter_: str | None = None) -> str:
    """Format a polling trigger.

    :param duration: polling interval
    :param filter_: optional javascript filter expression
    :return: "every <duration>" or "every <duration> [<filter>]"
    """
    polling = f"every {format_duration(duration)}"
    if filter_ is None:
        return polling
    return f"{polling} [{filter_}]"


def _format_scroll_target(
    prefix: str, position: str, target: ElementReference | None
) -> str:
    """Format a scroll or show swap modifier.

    :param prefix: "scroll" or "show"
    :param position: "top" or "bottom"
    :param target: optional element to scroll instead of the swap target
    :return: "<prefix>:<position>" or "<prefix>:<target>:<position>"
    """
    if target is None:
        return f"{prefix}:{position}"
    return f"{prefix}:{format_element_reference(target)}:{position}"


def format_swap_modifier(modifier: SwapModifier) -> str:
    """Format one swap modifier.

    :param modifier: one of the swap modifier types
    :return: a modifier token like "transition:true" or "settle:20ms"
    :raises TypeError: if modifier is not a swap modifier
    """
    if isinstance(modifier, Transition):
        return f"transition:{format_flag(modifier.enabled)}"
    if isinstance(modifier, SwapDelay):
        return f"swap:{format_duration(modifier.duration)}"
    if isinstance(modifier, SettleDelay):
        return f"settle:{format_duration(modifier.duration)}"
    if isinstance(modifier, IgnoreTitle):
        return f"ignoreTitle:{format_flag(modifier.enabled)}"
    if isinstance(modifier, Scroll):
        return _format_scroll_target("scroll", modifier.position.value, modifier.target)
    if isinstance(modifier, Show):
        return _format_scroll_target("show", modifier.position.value, modifier.target)
    if isinstance(modifier, FocusScroll):
        return f"focus-scroll:{format_flag(modifier.enabled)}"
    msg = f"Cannot format {modifier!r} as a swap modifier"
    raise TypeError(msg)


def format_swap(strategy: SwapStrategy, *modifiers: SwapModifier | None) -> str:
    """Format a swap strategy with optional modifiers.

    :param strategy: a SwapStrategy
    :param modifiers: optional swap modifiers. None values are skipped.
    :return: the strategy name, then each modifier preceded by a single space
    """
    tokens = [format_swap_modifier(m) for m in modifiers if m is not None]
    return " ".join([strategy.value, *tokens])


def format_sync_option(option: SyncOption) -> str:
    """Format one hx-sync option.

    :param option: a SyncOption
    :return: "<selector>", "<selector>:<mode>", or "<selector>:queue <mode>"
    """
    selector = format_element_reference(option.selector)
    if isinstance(option.mode, QueueMode):
        return f"{selector}:queue {option.mode.value}"
    if option.mode is SyncMode.DEFAULT:
        return selector
    return f"{selector}:{option.mode.value}"


def format_sync(options: Iterable[SyncOption]) -> str:
    """Format any number of sync options, space delimited.

    :param options: SyncOption instances
    :return: formatted options joined with " "
    """
    return " ".join(format_sync_option(o) for o in options)


# ===================================================================================
#   Put formatted attributes on lxml elements.
# ===================================================================================


def _is_attribute_pair(obj: object) -> TypeGuard[tuple[str, str]]:
    """Determine if an object is a (name, value) pair of strings.

    :param obj: object
    :return: True if obj is a 2-tuple of strings. Attribute instances are.
    """
    return (
        isinstance(obj, tuple)
        and len(cast("tuple[object, ...]", obj)) == 2
        and all(isinstance(x, str) for x in cast("tuple[object, ...]", obj))
    )


def _fix_key_and_format_val(key: str, val: str | float) -> tuple[str, str]:
    """Format one keyword argument key, value pair for an html element.

    :param key: element attribute name as a python keyword
    :param val: element attribute value
    :return: tuple of key, value

    etree.Elements will only accept string values. This saves having to convert
    input to strings.

    * convert bools to "true" or "false"
    * convert int and float values to strings
    * replace '_' with '-' in keywords
    * remove trailing '_' from keywords

    Reserved Python keywords that are also valid and useful html attribute names (a
    popular one will be 'class') can be passed with a trailing underscore (e.g.,
    class_='btn').
    """
    key_ = key.rstrip("_").replace("_", "-")
    if isinstance(val, bool):
        return key_, format_flag(val)
    if isinstance(val, (int, float)):
        return key_, str(val)
    return key_, val


def _iter_attribute_pairs(
    hx_attributes: Iterable[object], attributes: dict[str, ElemAttrib]
) -> Iterator[tuple[str, str]]:
    """Yield (name, value) pairs from positional and keyword attributes.

    :param hx_attributes: Attribute instances or (name, value) tuples. Names are
        used exactly as given.
    :param attributes: keyword attributes. Names are fixed as in
        `_fix_key_and_format_val`. Attributes with a None value are
        skipped.
    :yield: tuples of (attribute name, attribute value)
    :raises TypeError: if an item in hx_attributes is not a (name, value) pair
    """
    for hx_attribute in hx_attributes:
        if not _is_attribute_pair(hx_attribute):
            msg = f"Expected a (name, value) attribute pair, not {hx_attribute!r}"
            raise TypeError(msg)
        yield hx_attribute
    for key, val in attributes.items():
        if val is None:
            continue
        yield _fix_key_and_format_val(key, val)


def format_attr_dict(
    *hx_attributes: HxAttribArg, **attributes: ElemAttrib
) -> dict[str, str]:
    """Create a dict of attributes from Attribute pairs and keyword arguments.

    :param hx_attributes: Attribute instances (e.g., from `hx_attributes.get`) or
        any (name, value) tuples of strings.
    :param attributes: element attribute names and values. None values are
        skipped, so an optional value can be passed without a check.
    :return: dict of attributes, each key a valid html attribute name, each value a
        str
    :raises TypeError: if an item in hx_attributes is not a (name, value) pair

    If an attribute name occurs more than once, the last value wins and a warning
    is issued. An element can only have one hx-swap, so this is almost certainly a
    mistake.
    """
    attr_dict: dict[str, str] = {}
    for key, val in _iter_attribute_pairs(hx_attributes, attributes):
        if key in attr_dict:
            msg = f"Attribute '{key}' given more than once. Keeping '{val}'."
            warnings.warn(msg, stacklevel=2)
        attr_dict[key] = val
    return attr_dict


def set_attributes(
    elem: EtreeElement, *hx_attributes: HxAttribArg, **attributes: ElemAttrib
) -> None:
    """Set name: value items as element attributes. Make every value a string.

    :param elem: element to receive element.set(keyword, str(value)) calls
    :param hx_attributes: Attribute instances or (name, value) tuples
    :param attributes: element attribute names and values. Knows what to do with
        'text' keyword.
    :effects: updates ``elem``
    """
    attr_dict = format_attr_dict(*hx_attributes, **attributes)

    dots = {"text"}
    for dot in dots & set(attr_dict):
        setattr(elem, dot, attr_dict.pop(dot))

    for key, val in attr_dict.items():
        elem.set(key, val)


def html_tostring(elem: EtreeElement, *, pretty_print: bool = False) -> str:
    """Serialize an element as html.

    :param elem: root node of your html fragment
    :param pretty_print: optionally indent nested elements
    :return: html string

    Serialized with the lxml html method, so void elements like ``input`` do not
    get a closing tag and empty elements like ``div`` get an explicit one.
    """
    as_str = etree.tostring(
        elem, method="html", encoding="unicode", pretty_print=pretty_print
    )
    return cast("str", as_str)
