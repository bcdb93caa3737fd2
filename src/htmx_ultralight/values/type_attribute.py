"""The one thing every htmx_ultralight attribute function returns.

:author: Shay Hill
:created: 2026-10-18
"""

from __future__ import annotations

from typing import NamedTuple


class Attribute(NamedTuple):
    """An attribute name and a formatted attribute value.

    This is a tuple, so it will unpack into ``elem.set(*attribute)`` or feed
    ``dict([attribute, ...])`` without any help.
    """

    name: str
    value: str
