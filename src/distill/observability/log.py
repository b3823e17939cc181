"""Event log — queryable, thread-safe event store.

Stores a bounded ring buffer of ``ExportEvent`` objects for inspection.
Supports querying by event type, time range, and collection or slug.

Thread Safety:
    All methods are protected by a ``threading.Lock``.  Documents may be
    rendered from several threads at once, all appending here.

"""

import threading
from collections import Counter, deque
from typing import Any

from distill.observability.events import ExportEvent


class EventLog:
    """Bounded event store with query support.

    When the buffer is full, the oldest events are discarded automatically.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_events", "_lock", "_max_events")

    def __init__(self, max_events: int = 10_000) -> None:
        self._max_events = max_events
        self._events: deque[ExportEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: ExportEvent) -> None:
        """Record an event in the log."""
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        since_ns: int = 0,
        subject: str | None = None,
        limit: int = 100,
    ) -> list[ExportEvent]:
        """Query events with optional filters.

        Args:
            event_type: Only return events of this type.
            since_ns: Only return events after this timestamp (nanoseconds).
            subject: Only return events whose collection or slug equals this.
            limit: Maximum number of events to return.

        Returns:
            List of matching events, most recent first.

        """
        with self._lock:
            results: list[ExportEvent] = []
            for event in reversed(self._events):
                if len(results) >= limit:
                    break

                if event_type is not None and not isinstance(event, event_type):
                    continue

                if since_ns and _timestamp(event) < since_ns:
                    continue

                if subject is not None and subject not in (
                    getattr(event, "collection", None),
                    getattr(event, "slug", None),
                ):
                    continue

                results.append(event)

            return results

    def latest(self, event_type: type) -> ExportEvent | None:
        """Return the most recent event of *event_type*, or *None*."""
        with self._lock:
            for event in reversed(self._events):
                if isinstance(event, event_type):
                    return event
        return None

    def recent(self, n: int = 20) -> list[ExportEvent]:
        """Return the N most recent events."""
        with self._lock:
            items = list(self._events)
        return items[-n:]

    def clear(self) -> int:
        """Clear all events and return the count that was cleared."""
        with self._lock:
            count = len(self._events)
            self._events.clear()
            return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def stats(self) -> dict[str, Any]:
        """Return summary statistics about stored events."""
        with self._lock:
            events = list(self._events)

        type_counts = Counter(type(event).__name__ for event in events)
        span_ms = (
            (_timestamp(events[-1]) - _timestamp(events[0])) / 1_000_000
            if events else 0.0
        )

        return {
            "total": len(events),
            "max_events": self._max_events,
            "by_type": dict(type_counts),
            "span_ms": round(span_ms, 3),
        }


def _timestamp(event: object) -> int:
    # Server lifecycle events recorded through the collector may not carry one
    return getattr(event, "timestamp_ns", 0)
