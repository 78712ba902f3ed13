#!/usr/bin/env python
from typing import ClassVar

from .base import BaseElement
from calcollection.lib.namespace import ns


# Operations
class Mkcalendar(BaseElement):
    tag: ClassVar[str] = ns("C", "mkcalendar")


# Preconditions
class CalendarCollectionLocationOk(BaseElement):
    tag: ClassVar[str] = ns("C", "calendar-collection-location-ok")
