"""Export router — serves llms.txt and llms-full.txt as Chirp routes.

Both routes are read-only and recompute nothing between requests except
the full corpus, which is aggregated from the live collection each time.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from distill.export.aggregate import exclude_slugs

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chirp import App, Request

    from distill.export.aggregate import CorpusAggregator
    from distill.observability.collector import ExportCollector


INDEX_ENDPOINT = "/llms.txt"
FULL_ENDPOINT = "/llms-full.txt"
STATS_ENDPOINT = "/__distill/stats"

TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"

# Body of the 500 response when the corpus cannot be built
FULL_ERROR_BODY = "Error generating llms-full.txt"


class ExportRouter:
    """Registers the llms.txt endpoints on a Chirp app.

    Args:
        app: Chirp App to register routes on (must not yet be frozen).
        aggregator: Builds the full corpus per request.
        index_text: Constant body of the index endpoint.
        exclude: Slugs left out of the full corpus.
        collector: Optional observability collector.

    """

    def __init__(
        self,
        app: App,
        aggregator: CorpusAggregator,
        *,
        index_text: str,
        exclude: Iterable[str] = (),
        collector: ExportCollector | None = None,
    ) -> None:
        self._app = app
        self._aggregator = aggregator
        self._index_text = index_text
        self._exclude = frozenset(exclude)
        self._collector = collector

    @property
    def excluded(self) -> frozenset[str]:
        """Slugs never served by the full-corpus endpoint."""
        return self._exclude

    def register(self) -> None:
        """Register the index and full-corpus routes (and stats, with a collector)."""
        self.register_index_endpoint()
        self.register_full_endpoint()
        if self._collector is not None:
            self.register_stats_endpoint(self._collector)

    def register_index_endpoint(self) -> None:
        """Register ``/llms.txt``, which returns the index text verbatim."""
        body = self._index_text
        collector = self._collector

        async def index_handler(request: Request) -> Any:
            from chirp.http.response import Response

            if collector is not None:
                collector.record_export(
                    "index", size_bytes=len(body.encode("utf-8")),
                )
            return Response(body=body, status=200, content_type=TEXT_CONTENT_TYPE)

        index_handler.__name__ = "llms_index"
        index_handler.__qualname__ = "ExportRouter.llms_index"

        self._app.route(INDEX_ENDPOINT, name="distill:index")(index_handler)

    def register_full_endpoint(self) -> None:
        """Register ``/llms-full.txt``, which aggregates the collection per request.

        Answers 500 with a short plain-text message when aggregation fails.

        """
        aggregator = self._aggregator
        predicate = exclude_slugs(self._exclude)

        async def full_handler(request: Request) -> Any:
            from chirp.http.response import Response

            result = await aggregator.aggregate(predicate)
            if not result.ok:
                return Response(
                    body=FULL_ERROR_BODY,
                    status=500,
                    content_type=TEXT_CONTENT_TYPE,
                )
            return Response(body=result.text, status=200, content_type=TEXT_CONTENT_TYPE)

        full_handler.__name__ = "llms_full"
        full_handler.__qualname__ = "ExportRouter.llms_full"

        self._app.route(FULL_ENDPOINT, name="distill:full")(full_handler)

    def register_stats_endpoint(self, collector: ExportCollector) -> None:
        """Register the ``/__distill/stats`` JSON endpoint.

        Returns the event log summary and the most recent export.

        """

        async def stats_handler(request: Request) -> Any:
            from chirp.http.response import Response

            from distill.observability.events import CorpusExported, now_ns

            latest = collector.log.latest(CorpusExported)
            payload = json.dumps(
                {
                    "event_log": collector.log.stats(),
                    "last_export": _describe(latest) if latest is not None else None,
                    "generated_ns": now_ns(),
                },
                indent=2,
            )

            return Response(
                body=payload,
                status=200,
                content_type="application/json",
            )

        stats_handler.__name__ = "distill_stats"
        stats_handler.__qualname__ = "ExportRouter.distill_stats"

        self._app.route(STATS_ENDPOINT, name="distill:stats")(stats_handler)


def _describe(event: Any) -> dict[str, Any]:
    return {
        "target": event.target,
        "collection": event.collection,
        "documents": event.documents,
        "skipped": event.skipped,
        "size_bytes": event.size_bytes,
        "duration_ms": round(event.duration_ms, 3),
    }
