"""
Content negotiation for GET/HEAD on a calendar collection.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable

from calcollection.operations.base import CALENDAR_MEDIA_TYPE


class RenderMode(Enum):
    """How a collection is rendered in a response."""

    RAW_CALENDAR = "raw-calendar"
    GENERIC = "generic"


def negotiate(accept_values: Iterable[str] | None) -> RenderMode:
    """
    Choose how to render a collection from the Accept header values.

    Every value of the (possibly repeated) Accept header is compared as a
    whole, case-insensitively and with surrounding whitespace ignored,
    against text/calendar.  Media ranges, parameters and q-values are
    not interpreted: anything but an exact match falls through to the
    generic rendering.

    Args:
        accept_values: All values of the Accept header, or None

    Returns:
        RenderMode.RAW_CALENDAR on a match, RenderMode.GENERIC otherwise
    """
    for value in accept_values or ():
        if value.strip().lower() == CALENDAR_MEDIA_TYPE:
            return RenderMode.RAW_CALENDAR
    return RenderMode.GENERIC
