"""One function per htmx attribute. Each returns a (name, value) Attribute.

:author: Shay Hill
:created: 2026-10-18

Pass the results to ``new_element`` (or anything else that takes attribute names
and values).

    >>> elem = new_element("button", post("/clicked"), swap(SwapStrategy.OUTER_HTML))
    >>> html_tostring(elem)
    '<button hx-post="/clicked" hx-swap="outerHTML"></button>'

None of these functions validate their arguments. Urls, selectors, filter
expressions, and scripts are written exactly as passed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from htmx_ultralight.attribute_names import HxAttr
from htmx_ultralight.string_conversion import (
    format_element_reference,
    format_flag,
    format_polling,
    format_swap,
    format_sync,
    format_trigger,
)
from htmx_ultralight.values.type_attribute import Attribute

if TYPE_CHECKING:
    from collections.abc import Iterable

    from htmx_ultralight.durations import Duration
    from htmx_ultralight.values.type_element_reference import ElementReference
    from htmx_ultralight.values.type_swap import SwapModifier, SwapStrategy
    from htmx_ultralight.values.type_sync_option import SyncOption
    from htmx_ultralight.values.type_trigger_event import TriggerEvent


def _new_attribute(name: HxAttr, value: str) -> Attribute:
    """Pair a fixed attribute name with a formatted value."""
    return Attribute(name.value, value)


# ===================================================================================
#   Requests
# ===================================================================================


def get(url: str) -> Attribute:
    """Issue a GET request to url.

    :param url: any string. Not checked.
    :return: Attribute("hx-get", url)
    """
    return _new_attribute(HxAttr.GET, url)


def post(url: str) -> Attribute:
    """Issue a POST request to url.

    :param url: any string. Not checked.
    :return: Attribute("hx-post", url)
    """
    return _new_attribute(HxAttr.POST, url)


def put(url: str) -> Attribute:
    """Issue a PUT request to url."""
    return _new_attribute(HxAttr.PUT, url)


def patch(url: str) -> Attribute:
    """Issue a PATCH request to url."""
    return _new_attribute(HxAttr.PATCH, url)


def delete(url: str) -> Attribute:
    """Issue a DELETE request to url."""
    return _new_attribute(HxAttr.DELETE, url)


# ===================================================================================
#   Triggers
# ===================================================================================


def trigger(events: Iterable[TriggerEvent | str]) -> Attribute:
    """Specify the events that will issue a request.

    :param events: TriggerEvents or bare event names
    :return: Attribute("hx-trigger", "<event> <modifier>..., <event> ...")

    An empty iterable gives an empty value, which htmx treats the same as no
    hx-trigger attribute at all.
    """
    return _new_attribute(HxAttr.TRIGGER, format_trigger(events))


def trigger_polling(duration: Duration, filter_: str | None = None) -> Attribute:
    """Poll at an interval.

    :param duration: polling interval
    :param filter_: optional javascript filter expression
    :return: Attribute("hx-trigger", "every <duration> [<filter>]") or without the
        filter if no filter is given.
    """
    return _new_attribute(HxAttr.TRIGGER, format_polling(duration, filter_))


def trigger_load_polling(duration: Duration, filter_: str) -> Attribute:
    """Poll at an interval, starting with a request on load.

    :param duration: polling interval
    :param filter_: javascript filter expression. Required here.
    :return: Attribute("hx-trigger", "load every <duration> [<filter>]")
    """
    return _new_attribute(HxAttr.TRIGGER, f"load {format_polling(duration, filter_)}")


# ===================================================================================
#   Targets and selections
# ===================================================================================


def indicator(selector: str) -> Attribute:
    """Select the element that gets the htmx-request class during a request."""
    return _new_attribute(HxAttr.INDICATOR, selector)


def target(element: ElementReference) -> Attribute:
    """Select the element to swap response content into.

    :param element: a css selector or extended selector
    :return: Attribute("hx-target", formatted selector)
    """
    return _new_attribute(HxAttr.TARGET, format_element_reference(element))


def include(element: ElementReference) -> Attribute:
    """Select additional elements whose values will be submitted with a request.

    :param element: a css selector or extended selector
    :return: Attribute("hx-include", formatted selector)
    """
    return _new_attribute(HxAttr.INCLUDE, format_element_reference(element))


def select(selector: str) -> Attribute:
    """Select the content to swap in from the response."""
    return _new_attribute(HxAttr.SELECT, selector)


# ===================================================================================
#   Swapping and synchronization
# ===================================================================================


def swap(strategy: SwapStrategy, *modifiers: SwapModifier | None) -> Attribute:
    """Specify how response content is swapped in.

    :param strategy: where to put the content relative to the target
    :param modifiers: optional swap modifiers. None is accepted and skipped, so
        ``swap(strategy, maybe_modifier)`` works with an optional value.
    :return: Attribute("hx-swap", "<strategy> <modifier> ...")

    Exactly one space between the strategy and each modifier.
    """
    return _new_attribute(HxAttr.SWAP, format_swap(strategy, *modifiers))


def sync(options: Iterable[SyncOption]) -> Attribute:
    """Synchronize requests between elements.

    :param options: SyncOption instances
    :return: Attribute("hx-sync", space-delimited options)
    """
    return _new_attribute(HxAttr.SYNC, format_sync(options))


# ===================================================================================
#   History, confirmation, boosting, and scripting
# ===================================================================================


def push_url(url: bool | str) -> Attribute:
    """Push a url into the browser location history.

    :param url: True to push the request url, False to push nothing, or a url to
        push in place of the request url.
    :return: Attribute("hx-push-url", "true" | "false" | url)
    """
    if isinstance(url, bool):
        return _new_attribute(HxAttr.PUSH_URL, format_flag(url))
    return _new_attribute(HxAttr.PUSH_URL, url)


def replace_url(url: bool | str) -> Attribute:
    """Replace the current url in the browser location history.

    :param url: True to use the request url, False to replace nothing, or a url.
    :return: Attribute("hx-replace-url", "true" | "false" | url)
    """
    if isinstance(url, bool):
        return _new_attribute(HxAttr.REPLACE_URL, format_flag(url))
    return _new_attribute(HxAttr.REPLACE_URL, url)


def confirm(text: str) -> Attribute:
    """Show a confirm() dialog with this text before issuing a request."""
    return _new_attribute(HxAttr.CONFIRM, text)


def boost(flag: bool) -> Attribute:
    """Turn (or, with False, keep from turning) links and forms into ajax requests.

    :param flag: True or False
    :return: Attribute("hx-boost", "true" | "false")
    """
    return _new_attribute(HxAttr.BOOST, format_flag(flag))


def hyper_script(script: str) -> Attribute:
    """Attach a _hyperscript script to an element.

    :param script: _hyperscript source. Not checked.
    :return: Attribute("_", script)
    """
    return _new_attribute(HxAttr.HYPERSCRIPT, script)
