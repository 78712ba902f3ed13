#!/usr/bin/env python
from typing import ClassVar

from .base import BaseElement
from .base import ValuedBaseElement
from calcollection.lib.namespace import ns


# Response bodies
class MultiStatus(BaseElement):
    tag: ClassVar[str] = ns("D", "multistatus")


class Response(BaseElement):
    tag: ClassVar[str] = ns("D", "response")


class Href(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "href")


class PropStat(BaseElement):
    tag: ClassVar[str] = ns("D", "propstat")


class Prop(BaseElement):
    tag: ClassVar[str] = ns("D", "prop")


class Status(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "status")


class ResponseDescription(ValuedBaseElement):
    tag: ClassVar[str] = ns("D", "responsedescription")


class Error(BaseElement):
    tag: ClassVar[str] = ns("D", "error")


# Request bodies
class Set(BaseElement):
    tag: ClassVar[str] = ns("D", "set")


# Preconditions
class ResourceMustBeNull(BaseElement):
    tag: ClassVar[str] = ns("D", "resource-must-be-null")
