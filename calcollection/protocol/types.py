"""
Core protocol types for the Sans-I/O calendar collection provider.

These dataclasses represent HTTP requests and responses at the protocol level,
independent of the server framework doing the actual I/O.
"""

from dataclasses import dataclass, field
from enum import Enum

from requests.structures import CaseInsensitiveDict


class DAVMethod(Enum):
    """WebDAV/CalDAV HTTP methods."""

    GET = "GET"
    HEAD = "HEAD"
    PUT = "PUT"
    DELETE = "DELETE"
    PROPFIND = "PROPFIND"
    PROPPATCH = "PROPPATCH"
    REPORT = "REPORT"
    MKCALENDAR = "MKCALENDAR"
    MKCOL = "MKCOL"
    OPTIONS = "OPTIONS"
    MOVE = "MOVE"
    COPY = "COPY"
    POST = "POST"


REASONS = {
    200: "OK",
    201: "Created",
    204: "No Content",
    207: "Multi-Status",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    409: "Conflict",
    412: "Precondition Failed",
    415: "Unsupported Media Type",
    424: "Failed Dependency",
    500: "Internal Server Error",
    507: "Insufficient Storage",
}


def status_line(status: int) -> str:
    """Status as it goes into a DAV:status element, e.g. HTTP/1.1 200 OK"""
    return f"HTTP/1.1 {status} {REASONS.get(status, 'Unknown')}"


@dataclass(frozen=True)
class DAVRequest:
    """
    Represents an incoming HTTP request.

    Headers are kept as an ordered sequence of (name, value) pairs, since
    a header like Accept may legitimately be sent more than once.

    Attributes:
        method: HTTP method (GET, MKCALENDAR, etc.)
        path: Request path of the target resource
        headers: HTTP headers as (name, value) pairs
        body: Request body as bytes (optional)
    """

    method: DAVMethod
    path: str
    headers: tuple[tuple[str, str], ...] = ()
    body: bytes | None = None

    def get_headers(self, name: str) -> list[str]:
        """All values of a header, in the order received.  Name is case-insensitive."""
        name = name.lower()
        return [v for (k, v) in self.headers if k.lower() == name]

    def get_header(self, name: str) -> str | None:
        """First value of a header, or None."""
        values = self.get_headers(name)
        return values[0] if values else None

    def with_header(self, name: str, value: str) -> "DAVRequest":
        """Return new request with additional header."""
        return DAVRequest(
            method=self.method,
            path=self.path,
            headers=self.headers + ((name, value),),
            body=self.body,
        )


@dataclass(frozen=True)
class DAVResponse:
    """
    Represents an HTTP response to be sent.

    Attributes:
        status: HTTP status code
        headers: HTTP headers, case-insensitive
        body: Response body as bytes
    """

    status: int
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    body: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.headers, CaseInsensitiveDict):
            object.__setattr__(self, "headers", CaseInsensitiveDict(self.headers))

    @property
    def ok(self) -> bool:
        """True if status indicates success (2xx)."""
        return 200 <= self.status < 300

    @property
    def is_multistatus(self) -> bool:
        """True if this is a 207 Multi-Status response."""
        return self.status == 207

    @property
    def reason(self) -> str:
        """Return a reason phrase for the status code."""
        return REASONS.get(self.status, "Unknown")


@dataclass
class PropstatResult:
    """
    Per-property outcome of an operation on a single resource, as
    reported by the store when creating a collection.

    Attributes:
        href: URL/path of the resource
        statuses: Dict of property tag -> HTTP status
        description: Optional human readable description
    """

    href: str
    statuses: dict[str, int] = field(default_factory=dict)
    description: str | None = None

    @property
    def has_non_ok(self) -> bool:
        """True if any property failed"""
        return any(not 200 <= s < 300 for s in self.statuses.values())

    def by_status(self) -> dict[int, list[str]]:
        """Property tags grouped by status, in order of first appearance"""
        ret: dict[int, list[str]] = {}
        for tag, status in self.statuses.items():
            ret.setdefault(status, []).append(tag)
        return ret
