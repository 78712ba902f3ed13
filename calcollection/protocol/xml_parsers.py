"""
Pure functions for parsing DAV XML request bodies.

All functions in this module are pure - they take XML bytes in and return
structured data out, with no side effects or I/O.
"""

import logging
from typing import Any

from lxml import etree

from calcollection.elements import cdav, dav
from calcollection.lib import error

log = logging.getLogger("calcollection")


def parse_mkcalendar_body(body: bytes | None) -> dict[str, Any]:
    """
    Parse the properties to set from a MKCALENDAR request body.

    The body is optional.  When given, it is a C:mkcalendar element with
    zero or more DAV:set children, each holding a DAV:prop.

    Args:
        body: Raw XML request bytes, or None

    Returns:
        Dict mapping property tag to value (text, or the element for complex values)

    Raises:
        BadRequestError: If body is not valid XML or not a C:mkcalendar request
    """
    if not body or not body.strip():
        return {}

    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        tree = etree.fromstring(body, parser)
    except etree.XMLSyntaxError as e:
        raise error.BadRequestError(reason=f"invalid XML in MKCALENDAR body: {e}")

    if tree.tag != cdav.Mkcalendar.tag:
        raise error.BadRequestError(
            reason=f"expected {cdav.Mkcalendar.tag} in MKCALENDAR body, got {tree.tag}"
        )

    properties: dict[str, Any] = {}
    for el in tree.iterchildren(etree.Element):
        if el.tag != dav.Set.tag:
            log.warning(f"Ignoring unknown tag {el.tag} in MKCALENDAR body")
            continue
        prop = el.find(dav.Prop.tag)
        if prop is None:
            continue
        for child in prop.iterchildren(etree.Element):
            if len(child) == 0:
                properties[child.tag] = child.text
            else:
                properties[child.tag] = child
    return properties

