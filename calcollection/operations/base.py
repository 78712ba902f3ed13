"""
Base utilities for the operations layer.

The operations layer contains pure functions (Sans-I/O) implementing the
calendar collection logic.  They take resource values and return new
values; the only side effect anywhere in the layer is the creation call
delegated to the CollectionStore.

Design principles:
- Functions read the resource tree but never mutate it
- Calendar documents handed out are always fresh copies
- Errors are raised as calcollection.lib.error exceptions, mapping to
  protocol errors is the provider's job
"""
from __future__ import annotations

from typing import Any
from typing import Dict
from typing import Protocol

from calcollection.model import Collection
from calcollection.protocol.types import PropstatResult

CALENDAR_MEDIA_TYPE = "text/calendar"


class CollectionStore(Protocol):
    """
    The persistence layer, as far as creating collections is concerned.
    """

    def add_collection(
        self, collection: Collection, properties: Dict[str, Any]
    ) -> PropstatResult:
        """
        Create collection below its parent and apply properties to it.

        Returns the outcome for each requested property.
        """
        ...
