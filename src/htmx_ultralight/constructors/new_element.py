"""Html Element constructors. Create an html element from attributes.

:author: Shay Hill
:created: 2026-10-18

This is principally to allow passing Attribute instances from ``hx_attributes``,
alongside ordinary values, as element parameters.

Will translate ``data_id=10`` to ``data-id="10"``
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lxml import etree

from htmx_ultralight.string_conversion import set_attributes

if TYPE_CHECKING:
    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )

    from htmx_ultralight.attrib_hints import (
        ElemAttrib,
        HxAttribArg,
        OptionalElemAttribMapping,
    )


def new_element(
    tag: str,
    *hx_attributes: HxAttribArg,
    attrib: OptionalElemAttribMapping = None,
    **attributes: ElemAttrib,
) -> EtreeElement:
    """Create an etree.Element, make every kwarg value a string.

    :param tag: element tag
    :param hx_attributes: Attribute instances or (name, value) tuples
    :param attrib: optionally pass additional attributes as a mapping instead of as
        anonymous kwargs. This is useful for pleasing the linter when unpacking a
        dictionary into a function call.
    :param attributes: element attribute names and values
    :returns: new ``tag`` element

        >>> elem = new_element('button', get('/items'), target(Closest('tr')))
        >>> html_tostring(elem)
        '<button hx-get="/items" hx-target="closest tr"></button>'

    Strips trailing underscores

        >>> elem = new_element('div', class_="row")
        >>> html_tostring(elem)
        '<div class="row"></div>'

    Translates other underscores to hyphens

        >>> elem = new_element('div', data_id=3)
        >>> html_tostring(elem)
        '<div data-id="3"></div>'

    Skips None values

        >>> elem = new_element('div', id_=None)
        >>> html_tostring(elem)
        '<div></div>'

    Special handling for a 'text' argument. Places value between element tags.

        >>> elem = new_element('button', text='please star my project')
        >>> html_tostring(elem)
        '<button>please star my project</button>'

    """
    attributes.update(attrib or {})
    elem = etree.Element(tag)
    set_attributes(elem, *hx_attributes, **attributes)
    return elem


def new_sub_element(
    parent: EtreeElement,
    tag: str,
    *hx_attributes: HxAttribArg,
    attrib: OptionalElemAttribMapping = None,
    **attributes: ElemAttrib,
) -> EtreeElement:
    """Create an etree.SubElement, make every kwarg value a string.

    :param parent: parent element
    :param tag: element tag
    :param hx_attributes: Attribute instances or (name, value) tuples
    :param attrib: optionally pass additional attributes as a mapping
    :param attributes: element attribute names and values
    :returns: new ``tag`` element

        >>> parent = etree.Element('form')
        >>> _ = new_sub_element(parent, 'input', name='q')
        >>> html_tostring(parent)
        '<form><input name="q"></form>'
    """
    attributes.update(attrib or {})
    elem = etree.SubElement(parent, tag)
    set_attributes(elem, *hx_attributes, **attributes)
    return elem


def update_element(
    elem: EtreeElement,
    *hx_attributes: HxAttribArg,
    attrib: OptionalElemAttribMapping = None,
    **attributes: ElemAttrib,
) -> EtreeElement:
    """Update an existing etree.Element with additional params.

    :param elem: at etree element
    :param hx_attributes: Attribute instances or (name, value) tuples
    :param attrib: optionally pass additional attributes as a mapping
    :param attributes: element attribute names and values
    :returns: the element with updated attributes

    This is to take advantage of the argument conversion in ``new_element``.
    Attributes already on ``elem`` will be overwritten without a warning.
    """
    attributes.update(attrib or {})
    set_attributes(elem, *hx_attributes, **attributes)
    return elem
