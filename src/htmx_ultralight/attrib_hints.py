"""Type hints for pass-through arguments to lxml constructors.

:author: Shay Hill
:created: 2026-10-18
"""

from collections.abc import Mapping
from typing import TypeAlias

from htmx_ultralight.values.type_attribute import Attribute

# Types htmx_ultralight can format to pass through to lxml constructors.
ElemAttrib: TypeAlias = str | float | bool | None

# Type for an optional dictionary of element attributes.
OptionalElemAttribMapping: TypeAlias = Mapping[str, ElemAttrib] | None

# An Attribute from one of the hx_attributes functions or any (name, value) pair.
HxAttribArg: TypeAlias = Attribute | tuple[str, str]
