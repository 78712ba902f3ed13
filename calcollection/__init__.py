#!/usr/bin/env python
import logging

__version__ = "0.3.0"

from .provider import CalendarCollectionProvider

# Silence notification of no default logging handler
log = logging.getLogger("calcollection")


class NullHandler(logging.Handler):
    def emit(self, record) -> None:
        pass


log.addHandler(NullHandler())

__all__ = ["__version__", "CalendarCollectionProvider"]
