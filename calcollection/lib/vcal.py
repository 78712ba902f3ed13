#!/usr/bin/env python
import difflib
import logging
import re
from typing import TypeVar

import icalendar

from calcollection.lib import error
from calcollection.lib.python_utilities import to_normal_str

log = logging.getLogger("calcollection")

## Counts how often event data stored on stamps had to be fixed up.
## Used for rate limiting the warnings.
fixup_error_loggings = 0

DEFAULT_PRODUCT_ID = "-//calcollection//calcollection//EN"

ComponentT = TypeVar("ComponentT", bound=icalendar.Component)


def fix(event):
    """Clean up event data before handing it to the icalendar parser.

    Clients have been storing all kinds of slightly broken data over the
    years, and we'd rather serve it than fail the whole collection:

    1) COMPLETED given as a date rather than a UTC datetime gets a
    (made up) time of day.

    2) CREATED in year 0001 is moved to the epoch.

    3) Duplicated DTSTAMP lines, only the first one is kept.

    4) Trailing spaces are dropped, unless the next line continues a
    folded line.

    5) An end given both as DTEND/DUE and DURATION, whatever comes
    last is dropped.
    """
    event = to_normal_str(event)
    if not event.endswith("\n"):
        event = event + "\n"

    ## 1
    fixed = re.sub(
        r"COMPLETED(?:;VALUE=DATE)?:(\d+)\s", r"COMPLETED:\g<1>T120000Z\n", event
    )

    ## 2
    fixed = re.sub("CREATED:00001231T000000Z", "CREATED:19700101T000000Z", fixed)

    ## 4
    fixed = re.sub(r" +$(?!\n[ \t])", "", fixed, flags=re.MULTILINE)

    ## 3 and 5
    fixed = (
        "\n".join(filter(LineFilterDiscardingDuplicates(), fixed.strip().split("\n")))
        + "\n"
    )

    if fixed != event:
        global fixup_error_loggings
        fixup_error_loggings += 1
        ## warn on the 1st, 2nd, 4th, 8th ... occurrence only
        is_power_of_two = lambda n: not (n & (n - 1))
        if is_power_of_two(fixup_error_loggings):
            logfunc = log.warning
        else:
            logfunc = log.debug

        diff = difflib.unified_diff(event.split("\n"), fixed.split("\n"), lineterm="")
        logfunc(
            "\n".join(
                [
                    "Stored ical data was modified to conform with RFC5545",
                    f"(error count: {fixup_error_loggings} - this message is ratelimited)",
                ]
                + list(diff)
            )
        )

    return fixed


class LineFilterDiscardingDuplicates:
    """Needs to be a class because it keeps track of whether a certain
    group of date line was already encountered within a component.
    This must be called line by line in order on the complete text.
    """

    def __init__(self) -> None:
        self.stamped = 0
        self.ended = 0

    def __call__(self, line):
        if line.startswith("BEGIN:V"):
            self.stamped = 0
            self.ended = 0

        elif re.match("(DURATION|DTEND|DUE)[:;]", line):
            if self.ended:
                return False
            self.ended += 1

        elif re.match("DTSTAMP[:;]", line):
            if self.stamped:
                return False
            self.stamped += 1

        return True


def new_calendar(product_id: str = DEFAULT_PRODUCT_ID) -> icalendar.Calendar:
    """An empty VCALENDAR with the mandatory properties populated"""
    calendar = icalendar.Calendar()
    calendar.add("prodid", product_id)
    calendar.add("version", "2.0")
    return calendar


def parse_event(data) -> icalendar.Event:
    """
    Parse event data, either a bare VEVENT or a VCALENDAR wrapping one.
    """
    try:
        component = icalendar.Component.from_ical(fix(data))
    except ValueError as e:
        raise error.MalformedCalendarDataError(reason=str(e)) from e
    if component.name == "VCALENDAR":
        events = component.walk("VEVENT")
        if not events:
            raise error.MalformedCalendarDataError(reason="no VEVENT in calendar data")
        component = events[0]
    if component.name != "VEVENT":
        raise error.MalformedCalendarDataError(
            reason=f"expected VEVENT, got {component.name}"
        )
    return component


def copy_component(component: ComponentT) -> ComponentT:
    """
    Deep copy of an icalendar component, done by serializing and parsing it again.

    The copy shares nothing with the original.  Anything that fails on the
    way (unserializable values, data icalendar refuses to parse or parses
    with errors) raises MalformedCalendarDataError.
    """
    try:
        copy = type(component).from_ical(component.to_ical())
    except (ValueError, TypeError, AttributeError, KeyError) as e:
        raise error.MalformedCalendarDataError(reason=str(e)) from e
    for subcomponent in copy.walk():
        if subcomponent.errors:
            raise error.MalformedCalendarDataError(
                reason=f"{subcomponent.name}: {subcomponent.errors}"
            )
    return copy
