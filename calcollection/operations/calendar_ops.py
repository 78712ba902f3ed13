"""
Calendar operations - assembling the calendar of a collection.
"""
from __future__ import annotations

import logging

import icalendar

from calcollection.lib import vcal
from calcollection.model import Collection
from calcollection.model import ResourceKind

log = logging.getLogger("calcollection")


def assemble_calendar(
    collection: Collection, product_id: str = vcal.DEFAULT_PRODUCT_ID
) -> icalendar.Calendar:
    """
    Build one calendar holding the events of all children of collection.

    Children are visited in stored order.  Only notes contribute; each
    event facet (event or event exception stamp) of a note adds a copy
    of its VEVENT.  The result is not sorted by date.

    The display name of the collection, if any, goes into X-WR-CALNAME.

    Args:
        collection: The calendar collection
        product_id: PRODID of the resulting calendar

    Returns:
        A new icalendar.Calendar, sharing nothing with the stored events

    Raises:
        MalformedCalendarDataError: a stored event could not be copied
    """
    calendar = vcal.new_calendar(product_id)
    if collection.display_name:
        calendar.add("x-wr-calname", collection.display_name)

    for child in collection.children:
        if child.kind is not ResourceKind.NOTE:
            continue
        for stamp in child.event_stamps():
            calendar.add_component(vcal.copy_component(stamp.event))

    log.debug(
        f"assembled {len(calendar.subcomponents)} events from {collection.path}"
    )
    return calendar
