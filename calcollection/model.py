"""
Resource values the provider operates on.

The persistence layer resolves requests into these values; the provider
only reads them.  Every resource carries an explicit ResourceKind tag,
and items carry their facets (stamps) in a mapping keyed by StampKind,
so all dispatch is done on tags rather than on Python types.
"""
from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any
from typing import Dict
from typing import Iterator
from typing import List
from typing import Optional
from typing import Set
from typing import Union

import icalendar

from calcollection.lib import error
from calcollection.lib import vcal


class ResourceKind(Enum):
    COLLECTION = "collection"
    CALENDAR_COLLECTION = "calendar-collection"
    HOME_COLLECTION = "home-collection"
    NOTE = "note"
    FILE = "file"

    @property
    def is_collection(self) -> bool:
        return self in (
            ResourceKind.COLLECTION,
            ResourceKind.CALENDAR_COLLECTION,
            ResourceKind.HOME_COLLECTION,
        )


class StampKind(Enum):
    EVENT = "event"
    EVENT_EXCEPTION = "eventexception"
    TASK = "task"
    MESSAGE = "message"

    @property
    def is_event(self) -> bool:
        """Event and event exception stamps both carry a VEVENT"""
        return self in (StampKind.EVENT, StampKind.EVENT_EXCEPTION)


@dataclass
class Stamp:
    """
    A facet attached to an item.  Event facets carry the VEVENT.
    """

    kind: StampKind
    event: Optional[icalendar.Event] = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.kind.is_event and self.event is None:
            raise ValueError(f"{self.kind.value} stamp without event")

    @classmethod
    def for_event(
        cls, event: Union[icalendar.Event, str, bytes], exception: bool = False
    ) -> "Stamp":
        """
        Event stamp from an icalendar.Event or from stored ical data.
        """
        if not isinstance(event, icalendar.Event):
            event = vcal.parse_event(event)
        kind = StampKind.EVENT_EXCEPTION if exception else StampKind.EVENT
        return cls(kind=kind, event=event)


@dataclass
class Item:
    name: str
    kind: ResourceKind = ResourceKind.NOTE
    stamps: Dict[StampKind, Stamp] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.kind.is_collection:
            raise ValueError(f"an item can't be a {self.kind.value}")

    def add_stamp(self, stamp: Stamp) -> None:
        self.stamps[stamp.kind] = stamp

    def get_stamp(self, kind: StampKind) -> Optional[Stamp]:
        return self.stamps.get(kind)

    def remove_stamp(self, kind: StampKind) -> None:
        self.stamps.pop(kind, None)

    def event_stamps(self) -> Iterator[Stamp]:
        return (s for s in self.stamps.values() if s.kind.is_event)


class TicketType(Enum):
    READ_ONLY = "read-only"
    READ_WRITE = "read-write"
    FREE_BUSY = "free-busy"


@dataclass(frozen=True)
class AccessTicket:
    """
    A capability granting access to the collections it is registered on.
    """

    key: str
    ticket_type: TicketType = TicketType.READ_ONLY

    @property
    def free_busy(self) -> bool:
        return self.ticket_type is TicketType.FREE_BUSY


@dataclass(eq=False)
class Collection:
    """
    A collection in the resource tree.

    The tree owns the forward edges (children); parent is a back
    reference only, and may be None for the root or an unresolved parent.
    Collections compare by identity.
    """

    path: str
    kind: ResourceKind = ResourceKind.COLLECTION
    exists: bool = True
    parent: Optional["Collection"] = field(default=None, repr=False)
    children: List[Union[Item, "Collection"]] = field(default_factory=list, repr=False)
    tickets: Set[AccessTicket] = field(default_factory=set, repr=False)
    display_name: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.kind.is_collection:
            raise ValueError(f"a collection can't be a {self.kind.value}")

    @property
    def is_calendar_collection(self) -> bool:
        return self.kind is ResourceKind.CALENDAR_COLLECTION

    def add_child(self, child: Union[Item, "Collection"]) -> None:
        """
        Appends child, and sets its parent if it is a collection.
        Calendar collections can't be nested.
        """
        if (
            self.is_calendar_collection
            and child.kind is ResourceKind.CALENDAR_COLLECTION
        ):
            raise error.InvalidCalendarLocationError(url=child.path)
        if child.kind.is_collection:
            child.parent = self
        self.children.append(child)

    def new_calendar_collection(self, name: str) -> "Collection":
        """
        A not yet existing child collection, i.e. the target of a MKCALENDAR.
        Nothing is added to children.
        """
        path = self.path.rstrip("/") + "/" + name.strip("/") + "/"
        return Collection(
            path=path,
            kind=ResourceKind.CALENDAR_COLLECTION,
            exists=False,
            parent=self,
        )


@dataclass(frozen=True)
class AccessContext:
    """
    Who the current request runs as.  Passed explicitly to everything
    that needs it.
    """

    ticket: Optional[AccessTicket] = None
    principal: Optional[str] = None

    def current_ticket(self) -> Optional[AccessTicket]:
        return self.ticket


def tickets_of(collection: Collection) -> Set[AccessTicket]:
    return collection.tickets
