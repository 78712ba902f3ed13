"""
Tests for the resource values.
"""
import pytest

from calcollection.lib import error
from calcollection.model import AccessContext
from calcollection.model import AccessTicket
from calcollection.model import Collection
from calcollection.model import Item
from calcollection.model import ResourceKind
from calcollection.model import Stamp
from calcollection.model import StampKind
from calcollection.model import TicketType
from calcollection.model import tickets_of

from .fixture_helpers import make_event
from .fixture_helpers import make_tree

ICAL_EVENT = """BEGIN:VCALENDAR
VERSION:2.0
PRODID:-//Example Corp.//CalDAV Client//EN
BEGIN:VEVENT
UID:20010712T182145Z-123401@example.com
DTSTAMP:20060712T182145Z
DTSTART:20060714T170000Z
DTEND:20060715T040000Z
SUMMARY:Bastille Day Party
END:VEVENT
END:VCALENDAR
"""


class TestStamp:
    def test_event_stamp_needs_event(self):
        with pytest.raises(ValueError):
            Stamp(kind=StampKind.EVENT)
        with pytest.raises(ValueError):
            Stamp(kind=StampKind.EVENT_EXCEPTION)

    def test_other_stamps_without_event(self):
        assert Stamp(kind=StampKind.TASK).event is None

    def test_for_event(self):
        event = make_event()
        stamp = Stamp.for_event(event)
        assert stamp.kind is StampKind.EVENT
        assert stamp.event is event
        assert Stamp.for_event(event, exception=True).kind is StampKind.EVENT_EXCEPTION

    def test_for_event_from_ical_data(self):
        stamp = Stamp.for_event(ICAL_EVENT)
        assert stamp.event.name == "VEVENT"
        assert str(stamp.event["SUMMARY"]) == "Bastille Day Party"

    def test_for_event_from_bad_data(self):
        with pytest.raises(error.MalformedCalendarDataError):
            Stamp.for_event("BEGIN:VTODO\nUID:x\nEND:VTODO\n")


class TestItem:
    def test_collection_kind_refused(self):
        with pytest.raises(ValueError):
            Item(name="x", kind=ResourceKind.CALENDAR_COLLECTION)

    def test_stamps(self):
        item = Item(name="note")
        item.add_stamp(Stamp.for_event(make_event()))
        item.add_stamp(Stamp(kind=StampKind.TASK))
        assert [s.kind for s in item.event_stamps()] == [StampKind.EVENT]
        assert item.get_stamp(StampKind.TASK) is not None

        item.remove_stamp(StampKind.EVENT)
        item.remove_stamp(StampKind.MESSAGE)
        assert item.get_stamp(StampKind.EVENT) is None
        assert list(item.event_stamps()) == []


class TestCollection:
    def test_item_kind_refused(self):
        with pytest.raises(ValueError):
            Collection(path="/x/", kind=ResourceKind.NOTE)

    def test_add_child_sets_parent(self):
        home, work = make_tree()
        assert work.parent is home
        assert home.children == [work]
        assert work.is_calendar_collection
        assert not home.is_calendar_collection

    def test_items_in_calendar_collection(self):
        _, work = make_tree()
        note = Item(name="n1")
        work.add_child(note)
        work.add_child(Collection(path="/home/alice/work/sub/"))
        assert work.children[0] is note
        assert work.children[1].parent is work

    def test_no_nested_calendar_collections(self):
        _, work = make_tree()
        nested = Collection(
            path="/home/alice/work/nested/", kind=ResourceKind.CALENDAR_COLLECTION
        )
        with pytest.raises(error.InvalidCalendarLocationError):
            work.add_child(nested)
        assert work.children == []

    def test_new_calendar_collection(self):
        home, _ = make_tree()
        target = home.new_calendar_collection("personal")
        assert target.path == "/home/alice/personal/"
        assert target.kind is ResourceKind.CALENDAR_COLLECTION
        assert not target.exists
        assert target.parent is home
        assert target not in home.children


class TestTickets:
    def test_free_busy(self):
        assert AccessTicket("a", TicketType.FREE_BUSY).free_busy
        assert not AccessTicket("b").free_busy
        assert not AccessTicket("c", TicketType.READ_WRITE).free_busy

    def test_tickets_compare_by_value(self):
        assert AccessTicket("a", TicketType.FREE_BUSY) in {
            AccessTicket("a", TicketType.FREE_BUSY)
        }

    def test_tickets_of(self):
        _, work = make_tree()
        ticket = AccessTicket("a")
        work.tickets.add(ticket)
        assert tickets_of(work) == {ticket}

    def test_context(self):
        ticket = AccessTicket("a")
        assert AccessContext(ticket=ticket).current_ticket() is ticket
        assert AccessContext(principal="alice").current_ticket() is None
