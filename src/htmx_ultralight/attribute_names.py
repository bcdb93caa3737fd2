"""Attribute names htmx (and _hyperscript) will look for on an element.

:author: Shay Hill
:created: 2026-10-18

These are the other half of the wire contract. The values have to match what the
htmx runtime reads character for character.
"""

from __future__ import annotations

import enum


class HxAttr(str, enum.Enum):
    """Fixed attribute names, one per attribute family."""

    GET = "hx-get"
    POST = "hx-post"
    PUT = "hx-put"
    PATCH = "hx-patch"
    DELETE = "hx-delete"
    TRIGGER = "hx-trigger"
    INDICATOR = "hx-indicator"
    TARGET = "hx-target"
    INCLUDE = "hx-include"
    SWAP = "hx-swap"
    SYNC = "hx-sync"
    SELECT = "hx-select"
    PUSH_URL = "hx-push-url"
    REPLACE_URL = "hx-replace-url"
    CONFIRM = "hx-confirm"
    BOOST = "hx-boost"
    # _hyperscript reads its script from an attribute named only "_"
    HYPERSCRIPT = "_"
