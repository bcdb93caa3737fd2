"""Extended css selectors.

htmx accepts a plain css selector anywhere it needs to find an element, but
``hx-target``, ``hx-include``, and the ``from:`` trigger modifier also understand a
few relational keywords. e.g., "closest tr" or "next .error".

:author: Shay Hill
:created: 2026-10-18

Selector strings are never inspected. Whatever you pass will be written into the
attribute value.

| argument             | attribute value  |
| -------------------- | ---------------- |
| "#row"               | "#row"           |
| Standard("#row")     | "#row"           |
| DOCUMENT             | "document"       |
| WINDOW               | "window"         |
| Closest("tr")        | "closest tr"     |
| Find(".error")       | "find .error"    |
| Next(".error")       | "next .error"    |
| Next()               | "next "          |
| Previous(".error")   | "previous .error"|
| Previous()           | "previous "      |
| THIS                 | "this"           |

"""

from __future__ import annotations

import dataclasses
import enum
from typing import TypeAlias


class Keyword(enum.Enum):
    """Extended selectors that do not take a css selector."""

    DOCUMENT = "document"
    WINDOW = "window"
    THIS = "this"


DOCUMENT = Keyword.DOCUMENT
WINDOW = Keyword.WINDOW
THIS = Keyword.THIS


@dataclasses.dataclass(frozen=True)
class Standard:
    """An ordinary css selector. Same as passing the selector string."""

    selector: str


@dataclasses.dataclass(frozen=True)
class Closest:
    """The closest ancestor (or self) matching a selector."""

    selector: str


@dataclasses.dataclass(frozen=True)
class Find:
    """The first descendant matching a selector."""

    selector: str


@dataclasses.dataclass(frozen=True)
class Next:
    """The next sibling, optionally the next element matching a selector."""

    selector: str | None = None


@dataclasses.dataclass(frozen=True)
class Previous:
    """The previous sibling, optionally the previous element matching a selector."""

    selector: str | None = None


ElementReference: TypeAlias = (
    str | Standard | Keyword | Closest | Find | Next | Previous
)
