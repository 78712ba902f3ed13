"""
Operations Layer - Sans-I/O calendar collection logic.

This package contains pure functions implementing what is specific to
calendar collections.  The provider (calcollection.provider) wires them
to requests and responses.

Architecture:
    ┌─────────────────────────────────────┐
    │  CalendarCollectionProvider         │
    │  (requests in, responses out)       │
    ├─────────────────────────────────────┤
    │  Operations Layer (this package)    │
    │  - validate / create collections    │
    │  - negotiate, assemble, redact      │
    ├─────────────────────────────────────┤
    │  Protocol Layer                     │
    │  (calcollection.protocol)           │
    │  - XML building and parsing         │
    └─────────────────────────────────────┘

Modules:
    base: Common constants and the CollectionStore interface
    collection_ops: MKCALENDAR validation and creation flow
    negotiation_ops: Accept header based choice of rendering
    calendar_ops: Assembling the calendar of a collection
    freebusy_ops: Redaction for free-busy tickets
"""
from calcollection.operations.base import CALENDAR_MEDIA_TYPE
from calcollection.operations.base import CollectionStore
from calcollection.operations.calendar_ops import assemble_calendar
from calcollection.operations.collection_ops import create_calendar_collection
from calcollection.operations.collection_ops import MkcalendarOutcome
from calcollection.operations.collection_ops import validate_creation
from calcollection.operations.freebusy_ops import freebusy_calendar
from calcollection.operations.freebusy_ops import redact
from calcollection.operations.freebusy_ops import requires_freebusy
from calcollection.operations.negotiation_ops import negotiate
from calcollection.operations.negotiation_ops import RenderMode

__all__ = [
    # Base
    "CALENDAR_MEDIA_TYPE",
    "CollectionStore",
    # Collection operations
    "MkcalendarOutcome",
    "validate_creation",
    "create_calendar_collection",
    # Negotiation
    "RenderMode",
    "negotiate",
    # Calendar operations
    "assemble_calendar",
    # Free/busy
    "requires_freebusy",
    "redact",
    "freebusy_calendar",
]
