"""Raise the level of the constructors module.

:author: Shay Hill
created: 2026-10-18.
"""

from htmx_ultralight.constructors.new_element import (
    new_element,
    new_sub_element,
    update_element,
)

__all__ = ["new_element", "new_sub_element", "update_element"]
