"""
Collection operations - creation of calendar collections (MKCALENDAR).

validate_creation() checks the structural preconditions, and
create_calendar_collection() runs the whole creation flow against a
CollectionStore and decides how the outcome is to be reported.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from calcollection.lib import error
from calcollection.model import Collection
from calcollection.operations.base import CollectionStore
from calcollection.protocol.types import PropstatResult

log = logging.getLogger("calcollection")


@dataclass
class MkcalendarOutcome:
    """
    How a successful MKCALENDAR is to be reported.

    Attributes:
        status: 201 if no properties were requested or all were set,
            207 if some of them failed
        result: Per-property outcome from the store
    """

    status: int
    result: PropstatResult

    @property
    def is_multistatus(self) -> bool:
        return self.status == 207


def validate_creation(collection: Collection) -> None:
    """
    Check that a calendar collection may be created at collection.

    Checks are done in order: the target must not exist, its parent
    must exist, and the parent must not be a calendar collection.

    Args:
        collection: The (resolved, possibly not existing) target

    Raises:
        ExistsError: collection already exists
        MissingParentError: the parent is unknown or does not exist
        InvalidCalendarLocationError: the parent is a calendar collection
    """
    if collection.exists:
        raise error.ExistsError(url=collection.path)

    parent = collection.parent
    if parent is None or not parent.exists:
        raise error.MissingParentError(url=collection.path)

    if parent.is_calendar_collection:
        raise error.InvalidCalendarLocationError(url=collection.path)


def create_calendar_collection(
    collection: Collection,
    properties: dict[str, Any],
    store: CollectionStore,
) -> MkcalendarOutcome:
    """
    Validate and create a calendar collection.

    Validation errors propagate untouched.  Creation itself, including
    setting the properties, is done by the store.

    Args:
        collection: The target collection
        properties: Properties to set, tag -> value
        store: Persistence layer doing the creation

    Returns:
        MkcalendarOutcome with status 201 or 207
    """
    validate_creation(collection)

    log.debug(f"MKCALENDAR at {collection.path}")
    result = store.add_collection(collection, properties)

    if not properties or not result.has_non_ok:
        return MkcalendarOutcome(status=201, result=result)

    log.debug(
        f"MKCALENDAR at {collection.path}: some properties could not be set: {result.statuses}"
    )
    return MkcalendarOutcome(status=207, result=result)
