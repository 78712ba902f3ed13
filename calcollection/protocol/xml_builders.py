"""
Pure functions for building DAV XML response bodies.

All functions in this module are pure - they take data in and return XML out,
with no side effects or I/O.
"""
from typing import Iterable
from typing import Optional
from typing import Type

from lxml import etree

from calcollection.elements import dav
from calcollection.elements.base import AnyElement
from calcollection.elements.base import BaseElement

from .types import PropstatResult, status_line


def build_multistatus_body(results: Iterable[PropstatResult]) -> bytes:
    """
    Build a DAV:multistatus body reporting per-property outcomes.

    Properties of each result are grouped into one DAV:propstat per
    status, lowest status first.  Property elements are empty, as
    mandated for PROPPATCH-like responses.

    Args:
        results: One PropstatResult per resource

    Returns:
        UTF-8 encoded XML bytes
    """
    multistatus = dav.MultiStatus()
    for result in results:
        response = dav.Response() + dav.Href(result.href)
        for status, tags in sorted(result.by_status().items()):
            prop = dav.Prop() + [AnyElement(tag) for tag in tags]
            response += dav.PropStat() + [prop, dav.Status(status_line(status))]
        if result.description:
            response += dav.ResponseDescription(result.description)
        multistatus += response

    return etree.tostring(
        multistatus.xmlelement(), encoding="utf-8", xml_declaration=True
    )


def build_error_body(precondition: Optional[Type[BaseElement]] = None) -> bytes:
    """
    Build a DAV:error body naming the failed precondition.

    Args:
        precondition: Element class of the precondition (e.g. dav.ResourceMustBeNull)

    Returns:
        UTF-8 encoded XML bytes
    """
    error = dav.Error()
    if precondition is not None:
        error += precondition()
    return etree.tostring(error.xmlelement(), encoding="utf-8", xml_declaration=True)
