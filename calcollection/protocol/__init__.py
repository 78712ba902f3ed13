"""
Sans-I/O protocol layer of the calendar collection provider.

Requests come in as DAVRequest values and leave as DAVResponse values;
the server framework around it does the actual reading and writing.

The protocol layer is organized into:
- types: Core data structures (DAVRequest, DAVResponse, PropstatResult)
- xml_builders: Pure functions to build XML response bodies
- xml_parsers: Pure functions to parse XML request bodies
"""

from .types import (
    # Enums
    DAVMethod,
    # Request/Response
    DAVRequest,
    DAVResponse,
    # Result types
    PropstatResult,
    status_line,
)
from .xml_builders import (
    build_error_body,
    build_multistatus_body,
)
from .xml_parsers import (
    parse_mkcalendar_body,
)

__all__ = [
    # Enums
    "DAVMethod",
    # Request/Response
    "DAVRequest",
    "DAVResponse",
    # Result types
    "PropstatResult",
    "status_line",
    # XML Builders
    "build_error_body",
    "build_multistatus_body",
    # XML Parsers
    "parse_mkcalendar_body",
]
