#!/usr/bin/env python
import logging
import os
from typing import ClassVar
from typing import Optional
from typing import Type

from calcollection import __version__
from calcollection.elements import cdav
from calcollection.elements import dav
from calcollection.elements.base import BaseElement

try:
    ## one of DEBUG, DEVELOPMENT, PRODUCTION
    debugmode = os.environ["CALCOLLECTION_DEBUGMODE"]
except KeyError:
    if "dev" in __version__ or __version__ == "(unknown)":
        debugmode = "DEVELOPMENT"
    else:
        debugmode = "PRODUCTION"

log = logging.getLogger("calcollection")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
else:
    log.setLevel(logging.WARNING)


class DAVError(Exception):
    """
    Base class for errors that end up as a DAV error response.

    status is the HTTP status the error maps to, precondition the element
    class of the DAV precondition to report in the DAV:error body, if any.
    """

    url: Optional[str] = None
    reason: str = "no reason"
    status: ClassVar[int] = 500
    precondition: ClassVar[Optional[Type[BaseElement]]] = None

    def __init__(self, url: Optional[str] = None, reason: Optional[str] = None) -> None:
        if url:
            self.url = url
        if reason:
            self.reason = reason

    def __str__(self) -> str:
        return "%s at '%s', reason %s" % (
            self.__class__.__name__,
            self.url,
            self.reason,
        )


class ExistsError(DAVError):
    """
    The target of a MKCALENDAR already exists.
    """

    reason = "Resource exists"
    status = 409
    precondition = dav.ResourceMustBeNull


class MissingParentError(DAVError):
    reason = "One or more intermediate collections must be created"
    status = 409


class InvalidCalendarLocationError(DAVError):
    """
    A calendar collection was to be placed somewhere calendar
    collections are not allowed, i.e. inside another calendar collection.
    """

    reason = "A calendar collection may not be created within a calendar collection"
    status = 403
    precondition = cdav.CalendarCollectionLocationOk


class BadRequestError(DAVError):
    status = 400


class UnsupportedMediaTypeError(DAVError):
    status = 415


class MethodNotAllowedError(DAVError):
    status = 405


class MalformedCalendarDataError(DAVError):
    """
    Calendar data could not be copied or parsed.  The request must fail
    rather than serve a partially processed calendar.
    """

    reason = "Calendar data could not be processed"
    status = 500


class ConsistencyError(DAVError):
    """
    An internal contract was broken.  Never turned into a response.
    """

    pass


class IncompatibleResourceTypeError(ConsistencyError):
    reason = "Incompatible resource type for this provider"
