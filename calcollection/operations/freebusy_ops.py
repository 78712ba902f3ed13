"""
Free/busy redaction.

A ticket of type free-busy only grants insight into when the owner is
busy.  Calendars served to such a ticket keep all temporal information
(DTSTART, DTEND, DURATION, RRULE, UID, STATUS, TRANSP ...), while the
textual content of each event is blanked out and alarms are removed.
"""
from __future__ import annotations

import logging
from typing import AbstractSet
from typing import Callable

import icalendar

from calcollection.lib import vcal
from calcollection.model import AccessContext
from calcollection.model import AccessTicket

log = logging.getLogger("calcollection")

BUSY = "Busy"

## Property name -> factory for the value replacing it.  The replacement
## values carry no parameters, so CN, ALTREP, LANGUAGE etc. go away too.
REDACTED_PROPERTIES: dict[str, Callable[[], object]] = {
    "SUMMARY": lambda: icalendar.vText(BUSY),
    "DESCRIPTION": lambda: icalendar.vText(BUSY),
    "LOCATION": lambda: icalendar.vText(BUSY),
    "ATTENDEE": lambda: icalendar.vCalAddress(""),
    "ORGANIZER": lambda: icalendar.vCalAddress(""),
}


def requires_freebusy(
    context: AccessContext, tickets: AbstractSet[AccessTicket] | None
) -> bool:
    """
    True if the request runs on a free-busy ticket registered on the collection.
    """
    ticket = context.current_ticket()
    if ticket is None or not tickets:
        return False
    return ticket in tickets and ticket.free_busy


def redact(
    calendar: icalendar.Calendar,
    context: AccessContext,
    tickets: AbstractSet[AccessTicket] | None,
) -> icalendar.Calendar:
    """
    The calendar as it may be shown to the current request.

    Args:
        calendar: Calendar of the collection
        context: Access context of the request
        tickets: Tickets registered on the collection

    Returns:
        calendar itself if no redaction is needed, else a redacted copy
    """
    if not requires_freebusy(context, tickets):
        return calendar
    log.debug(
        f"free-busy ticket {context.current_ticket().key} used by "
        f"{context.principal or 'anonymous'}, redacting calendar"
    )
    return freebusy_calendar(calendar)


def freebusy_calendar(calendar: icalendar.Calendar) -> icalendar.Calendar:
    """
    A copy of calendar with all events reduced to free/busy information.

    Raises:
        MalformedCalendarDataError: calendar could not be copied.  Nothing
            is returned in that case, not even partially redacted data.
    """
    freebusy = vcal.copy_component(calendar)
    for event in freebusy.walk("VEVENT"):
        _strip_event(event)
    return freebusy


def _strip_event(event: icalendar.Event) -> None:
    """Redacts event in place"""
    event.subcomponents = [c for c in event.subcomponents if c.name != "VALARM"]

    for name in list(event.keys()):
        replacement = REDACTED_PROPERTIES.get(name)
        if replacement is None:
            continue
        value = event[name]
        ## ATTENDEE (and in broken data anything) may occur more than once
        if isinstance(value, list):
            event[name] = [replacement() for _ in value]
        else:
            event[name] = replacement()
