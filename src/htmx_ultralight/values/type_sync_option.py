"""Request synchronization directives for the ``hx-sync`` attribute.

:author: Shay Hill
:created: 2026-10-18
"""

from __future__ import annotations

import dataclasses
import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from htmx_ultralight.values.type_element_reference import ElementReference
    from htmx_ultralight.values.type_trigger_event import QueueMode


class SyncMode(enum.Enum):
    """What to do when requests from the synced element overlap.

    DEFAULT writes the selector alone and lets htmx pick (drop).
    """

    DEFAULT = ""
    DROP = "drop"
    ABORT = "abort"
    REPLACE = "replace"


@dataclasses.dataclass(frozen=True)
class SyncOption:
    """Synchronize requests with another element.

    :param selector: the element to synchronize on
    :param mode: a SyncMode or, to queue requests, a QueueMode

    e.g., SyncOption("closest form", SyncMode.ABORT) -> "closest form:abort"
    e.g., SyncOption("#list", QueueMode.LAST) -> "#list:queue last"
    e.g., SyncOption("this") -> "this"

    htmx only recognizes the queue modes first, last, and all in hx-sync.
    SyncOption("#list", QueueMode.NONE) is written as "#list:queue none", but htmx
    will not recognize it. Use SyncMode.DROP to ignore new requests instead.
    """

    selector: ElementReference
    mode: SyncMode | QueueMode = SyncMode.DEFAULT
