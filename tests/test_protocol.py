"""
Tests for the protocol layer: request/response types, XML builders and parsers.

All of these are pure, no mocking needed.
"""
import pytest
from lxml import etree

from calcollection.elements import cdav
from calcollection.elements import dav
from calcollection.lib import error
from calcollection.protocol import build_error_body
from calcollection.protocol import build_multistatus_body
from calcollection.protocol import DAVMethod
from calcollection.protocol import DAVRequest
from calcollection.protocol import DAVResponse
from calcollection.protocol import parse_mkcalendar_body
from calcollection.protocol import PropstatResult
from calcollection.protocol.types import status_line


class TestDAVRequest:
    def test_headers_case_insensitive(self):
        request = DAVRequest(
            DAVMethod.GET, "/cal/", headers=(("Accept", "text/calendar"),)
        )
        assert request.get_header("accept") == "text/calendar"
        assert request.get_header("ACCEPT") == "text/calendar"
        assert request.get_header("Content-Type") is None

    def test_repeated_headers(self):
        request = DAVRequest(
            DAVMethod.GET,
            "/cal/",
            headers=(("Accept", "text/html"), ("accept", "text/calendar")),
        )
        assert request.get_headers("Accept") == ["text/html", "text/calendar"]
        assert request.get_header("Accept") == "text/html"

    def test_with_header(self):
        request = DAVRequest(DAVMethod.GET, "/cal/")
        extended = request.with_header("Accept", "text/calendar")
        assert request.headers == ()
        assert extended.get_headers("Accept") == ["text/calendar"]
        assert extended.path == "/cal/"


class TestDAVResponse:
    def test_headers_become_case_insensitive(self):
        response = DAVResponse(status=201, headers={"Cache-Control": "no-cache"})
        assert response.headers["cache-control"] == "no-cache"

    def test_status_helpers(self):
        assert DAVResponse(status=201).ok
        assert not DAVResponse(status=409).ok
        assert DAVResponse(status=207).is_multistatus
        assert DAVResponse(status=415).reason == "Unsupported Media Type"
        assert DAVResponse(status=299).reason == "Unknown"

    def test_status_line(self):
        assert status_line(201) == "HTTP/1.1 201 Created"
        assert status_line(424) == "HTTP/1.1 424 Failed Dependency"


class TestPropstatResult:
    def test_has_non_ok(self):
        assert not PropstatResult(href="/a/", statuses={"x": 200}).has_non_ok
        assert PropstatResult(href="/a/", statuses={"x": 200, "y": 403}).has_non_ok
        assert not PropstatResult(href="/a/").has_non_ok

    def test_by_status(self):
        result = PropstatResult(
            href="/a/", statuses={"x": 403, "y": 200, "z": 403}
        )
        assert result.by_status() == {403: ["x", "z"], 200: ["y"]}


class TestBuildMultistatusBody:
    def test_propstat_per_status(self):
        result = PropstatResult(
            href="/home/alice/personal/",
            statuses={
                "{DAV:}displayname": 424,
                "{http://apple.com/ns/ical/}calendar-color": 403,
            },
            description="calendar-color is read only",
        )

        tree = etree.fromstring(build_multistatus_body([result]))

        assert tree.tag == dav.MultiStatus.tag
        [response] = tree.findall(dav.Response.tag)
        assert response.findtext(dav.Href.tag) == "/home/alice/personal/"
        propstats = response.findall(dav.PropStat.tag)
        assert [p.findtext(dav.Status.tag) for p in propstats] == [
            "HTTP/1.1 403 Forbidden",
            "HTTP/1.1 424 Failed Dependency",
        ]
        first = propstats[0].find(dav.Prop.tag)[0]
        assert first.tag == "{http://apple.com/ns/ical/}calendar-color"
        assert first.text is None
        assert (
            response.findtext(dav.ResponseDescription.tag)
            == "calendar-color is read only"
        )

    def test_xml_declaration(self):
        body = build_multistatus_body([PropstatResult(href="/a/")])
        assert body.startswith(b"<?xml")


class TestBuildErrorBody:
    def test_precondition(self):
        tree = etree.fromstring(build_error_body(cdav.CalendarCollectionLocationOk))
        assert tree.tag == dav.Error.tag
        assert [c.tag for c in tree] == [cdav.CalendarCollectionLocationOk.tag]

    def test_without_precondition(self):
        tree = etree.fromstring(build_error_body())
        assert tree.tag == "{DAV:}error"
        assert len(tree) == 0


class TestParseMkcalendarBody:
    def test_empty_body(self):
        assert parse_mkcalendar_body(None) == {}
        assert parse_mkcalendar_body(b"") == {}
        assert parse_mkcalendar_body(b"  \n") == {}

    def test_simple_and_complex_values(self):
        body = b"""<?xml version="1.0" encoding="utf-8" ?>
<C:mkcalendar xmlns:D="DAV:" xmlns:C="urn:ietf:params:xml:ns:caldav">
  <!-- clients do send comments -->
  <D:set>
    <D:prop>
      <D:displayname>Lisa's Events</D:displayname>
      <C:supported-calendar-component-set>
        <C:comp name="VEVENT"/>
      </C:supported-calendar-component-set>
    </D:prop>
  </D:set>
</C:mkcalendar>
"""
        properties = parse_mkcalendar_body(body)

        assert properties["{DAV:}displayname"] == "Lisa's Events"
        compset = properties[
            "{urn:ietf:params:xml:ns:caldav}supported-calendar-component-set"
        ]
        assert compset[0].get("name") == "VEVENT"

    def test_empty_mkcalendar(self):
        body = b'<C:mkcalendar xmlns:C="urn:ietf:params:xml:ns:caldav"/>'
        assert parse_mkcalendar_body(body) == {}

    def test_unknown_children_ignored(self):
        body = b"""<C:mkcalendar xmlns:D="DAV:" xmlns:C="urn:ietf:params:xml:ns:caldav">
  <D:remove><D:prop><D:displayname/></D:prop></D:remove>
  <D:set><D:prop><D:displayname>Work</D:displayname></D:prop></D:set>
</C:mkcalendar>"""
        assert parse_mkcalendar_body(body) == {"{DAV:}displayname": "Work"}

    def test_invalid_xml(self):
        with pytest.raises(error.BadRequestError):
            parse_mkcalendar_body(b"<not xml")

    def test_wrong_root(self):
        with pytest.raises(error.BadRequestError):
            parse_mkcalendar_body(b'<D:propertyupdate xmlns:D="DAV:"/>')
