"""Export observability — what the pipeline fetched, rendered, and served.

All events are frozen dataclasses with nanosecond timestamps, safe for
concurrent production from rendering threads.

Quick Start:
    >>> from distill.observability import ExportCollector, EventLog
    >>> log = EventLog()
    >>> collector = ExportCollector(log)
    >>> # Pass collector to CorpusAggregator / create_app

"""

from distill.observability.collector import ExportCollector
from distill.observability.events import (
    CollectionFailed,
    CollectionFetched,
    CorpusExported,
    DocumentRendered,
    ExportEvent,
    now_ns,
)
from distill.observability.log import EventLog

__all__ = [
    "CollectionFailed",
    "CollectionFetched",
    "CorpusExported",
    "DocumentRendered",
    "EventLog",
    "ExportCollector",
    "ExportEvent",
    "now_ns",
]
