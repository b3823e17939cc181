"""Export collector — records pipeline events into the event log.

Also accepts the Chirp server's lifecycle events through ``record()``, so
connection events and export events land in the same log.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked.

"""

from __future__ import annotations

from typing import Any

from distill.observability.events import (
    CollectionFailed,
    CollectionFetched,
    CorpusExported,
    DocumentRendered,
    now_ns,
)
from distill.observability.log import EventLog


class ExportCollector:
    """Event collector for the export pipeline.

    Args:
        log: The EventLog to store events in.

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    def record(self, event: Any) -> None:
        """Record a server lifecycle event as-is."""
        self._log.append(event)

    # ----- Collection events -----

    def record_fetch(self, collection: str, *, documents: int = 0, fetch_ms: float = 0.0) -> None:
        """Record a successful collection fetch."""
        self._log.append(
            CollectionFetched(
                collection=collection,
                documents=documents,
                fetch_ms=fetch_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_fetch_failure(self, collection: str, error: BaseException) -> None:
        """Record a failed collection fetch."""
        self._log.append(
            CollectionFailed(
                collection=collection,
                error=f"{type(error).__name__}: {error}",
                timestamp_ns=now_ns(),
            )
        )

    # ----- Export events -----

    def record_render(self, slug: str, *, chars: int = 0, render_ms: float = 0.0) -> None:
        """Record a rendered document."""
        self._log.append(
            DocumentRendered(
                slug=slug,
                chars=chars,
                render_ms=render_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_export(
        self,
        target: str,
        *,
        collection: str = "",
        documents: int = 0,
        skipped: int = 0,
        size_bytes: int = 0,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a produced llms.txt output."""
        self._log.append(
            CorpusExported(
                target=target,  # type: ignore[arg-type]
                collection=collection,
                documents=documents,
                skipped=skipped,
                size_bytes=size_bytes,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )
