"""Test functions in hx_attributes.py.

:author: Shay Hill
:created: 2026-10-18

Explicitly tests string output, so any change in format will cause the tests to fail.
htmx reads these strings in the browser. They have to match character for character.
"""

import pytest

from htmx_ultralight import hx_attributes as hx
from htmx_ultralight.durations import milliseconds, seconds
from htmx_ultralight.values import (
    CHANGED,
    ONCE,
    THIS,
    Attribute,
    Closest,
    Delay,
    From,
    Next,
    Previous,
    QueueMode,
    SwapStrategy,
    SyncMode,
    SyncOption,
    Transition,
    TriggerEvent,
)


class TestRequests:
    @pytest.mark.parametrize(
        ("func", "name"),
        [
            (hx.get, "hx-get"),
            (hx.post, "hx-post"),
            (hx.put, "hx-put"),
            (hx.patch, "hx-patch"),
            (hx.delete, "hx-delete"),
        ],
    )
    def test_method_names(self, func, name: str) -> None:
        """Pair the method attribute name with the url."""
        assert func("/items/1") == Attribute(name, "/items/1")

    def test_url_not_validated(self) -> None:
        """Pass any string through verbatim."""
        assert hx.get("not a url ?&") == ("hx-get", "not a url ?&")

    def test_empty_url(self) -> None:
        """Accept an empty string."""
        assert hx.post("") == ("hx-post", "")


class TestTrigger:
    def test_empty(self) -> None:
        """Return an empty value for no events."""
        assert hx.trigger([]) == ("hx-trigger", "")

    def test_once_delay(self) -> None:
        """Write modifiers after the event name."""
        result = hx.trigger([TriggerEvent("click", [ONCE, Delay(seconds(2))])])
        assert result.value == "click once delay:2s"

    def test_two_events(self) -> None:
        """Join events with comma and space."""
        events = [TriggerEvent("click", []), TriggerEvent("keyup", [CHANGED])]
        assert hx.trigger(events).value == "click, keyup changed"

    def test_from(self) -> None:
        """Format an extended selector inside a from modifier."""
        event = TriggerEvent("submit", [From(Closest("form"))])
        assert hx.trigger([event]).value == "submit from:closest form"

    def test_name(self) -> None:
        """Use hx-trigger."""
        assert hx.trigger(["load"]).name == "hx-trigger"


class TestPolling:
    def test_polling(self) -> None:
        """Write every and the duration."""
        assert hx.trigger_polling(seconds(1)) == ("hx-trigger", "every 1s")

    def test_polling_filter(self) -> None:
        """Write the filter in brackets."""
        result = hx.trigger_polling(milliseconds(750), "window.active")
        assert result == ("hx-trigger", "every 750ms [window.active]")

    def test_load_polling(self) -> None:
        """Prefix load and always write the filter."""
        result = hx.trigger_load_polling(seconds(5), "ready")
        assert result == ("hx-trigger", "load every 5s [ready]")

    def test_load_polling_requires_filter(self) -> None:
        """Filter is a required argument for load polling."""
        with pytest.raises(TypeError):
            _ = hx.trigger_load_polling(seconds(5))  # type: ignore[call-arg]


class TestSelectors:
    def test_indicator(self) -> None:
        """Pass the selector through."""
        assert hx.indicator("#spinner") == ("hx-indicator", "#spinner")

    def test_select(self) -> None:
        """Pass the selector through."""
        assert hx.select("#content") == ("hx-select", "#content")

    def test_target_plain(self) -> None:
        """Pass a plain selector through."""
        assert hx.target("#result") == ("hx-target", "#result")

    def test_target_closest(self) -> None:
        """Prefix closest."""
        assert hx.target(Closest("#row")).value == "closest #row"

    def test_target_next_none(self) -> None:
        """Keep the trailing space after next."""
        assert hx.target(Next()).value == "next "

    def test_target_previous(self) -> None:
        """Prefix previous."""
        assert hx.target(Previous("li")).value == "previous li"

    def test_target_this(self) -> None:
        """Write this."""
        assert hx.target(THIS) == ("hx-target", "this")

    def test_include(self) -> None:
        """Format an extended selector for hx-include."""
        assert hx.include(Closest("form")) == ("hx-include", "closest form")


class TestSwap:
    def test_no_modifier(self) -> None:
        """Write the strategy name alone."""
        assert hx.swap(SwapStrategy.OUTER_HTML) == ("hx-swap", "outerHTML")

    def test_explicit_none(self) -> None:
        """Write the strategy name alone for a None modifier."""
        assert hx.swap(SwapStrategy.OUTER_HTML, None).value == "outerHTML"

    def test_modifier(self) -> None:
        """Separate strategy and modifier with one space."""
        result = hx.swap(SwapStrategy.OUTER_HTML, Transition(True))
        assert result.value == "outerHTML transition:true"


class TestSync:
    def test_default_and_queue(self) -> None:
        """Join options with a space."""
        options = [SyncOption("#a"), SyncOption("#b", QueueMode.ALL)]
        assert hx.sync(options) == ("hx-sync", "#a #b:queue all")

    def test_abort(self) -> None:
        """Write selector:abort."""
        assert hx.sync([SyncOption("this", SyncMode.ABORT)]).value == "this:abort"


class TestFlags:
    @pytest.mark.parametrize(("flag", "expect"), [(True, "true"), (False, "false")])
    def test_push_url(self, flag: bool, expect: str) -> None:
        """Write exactly true or false."""
        assert hx.push_url(flag) == ("hx-push-url", expect)

    def test_push_url_string(self) -> None:
        """Pass a url through."""
        assert hx.push_url("/page/2") == ("hx-push-url", "/page/2")

    @pytest.mark.parametrize(("flag", "expect"), [(True, "true"), (False, "false")])
    def test_replace_url(self, flag: bool, expect: str) -> None:
        """Write exactly true or false."""
        assert hx.replace_url(flag) == ("hx-replace-url", expect)

    @pytest.mark.parametrize(("flag", "expect"), [(True, "true"), (False, "false")])
    def test_boost(self, flag: bool, expect: str) -> None:
        """Write exactly true or false."""
        assert hx.boost(flag) == ("hx-boost", expect)


class TestPassthrough:
    def test_confirm(self) -> None:
        """Pass text through unmodified."""
        text = "Are you sure?  It's \"final\"."
        assert hx.confirm(text) == ("hx-confirm", text)

    def test_hyper_script(self) -> None:
        """Use the underscore attribute name."""
        script = "on click toggle .active on me"
        assert hx.hyper_script(script) == ("_", script)


class TestAttribute:
    def test_unpacks(self) -> None:
        """Attributes unpack like tuples."""
        name, value = hx.get("/a")
        assert (name, value) == ("hx-get", "/a")

    def test_dict(self) -> None:
        """Attributes build a dict."""
        attrs = dict([hx.get("/a"), hx.swap(SwapStrategy.DELETE)])
        assert attrs == {"hx-get": "/a", "hx-swap": "delete"}

    def test_name_is_plain_str(self) -> None:
        """Attribute names are plain strings, not enum members."""
        assert type(hx.boost(True).name) is str
