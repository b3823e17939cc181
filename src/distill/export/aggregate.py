"""Corpus aggregation — many documents into one llms-full.txt buffer.

Pipeline per request:
    1. Fetch the collection (the only await point, no timeout, no retry)
    2. Select documents: predicate holds and the document is not a draft
    3. Render each selected document (optionally across a thread pool)
    4. Join the blocks in selection order, each followed by a separator

The aggregator never raises for a failed fetch.  It returns a failed
:class:`CorpusResult` instead, so callers can answer with an error page
and never see a partial buffer.
"""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING

from distill._errors import CollectionError, ContentError, DistillError
from distill.content.markup import DEFAULT_RULES
from distill.content.render import render_document

if TYPE_CHECKING:
    from distill._types import FilterPredicate, Metadata, Slug
    from distill.content.collection import DocumentCollection
    from distill.content.document import SourceDocument
    from distill.content.markup import StripRule
    from distill.observability.collector import ExportCollector

# Line written after every document block
SEPARATOR = "---"

_BLOCK_END = f"\n\n{SEPARATOR}\n\n"


@dataclass(frozen=True, slots=True)
class CorpusResult:
    """Outcome of one aggregation.

    Attributes:
        text: The concatenated corpus. Empty when nothing was selected or
            when aggregation failed.
        documents: Slugs of the included documents, in output order.
        skipped: Number of fetched documents left out by the selection.
        error: The failure, or *None* on success.

    """

    text: str = ""
    documents: tuple[str, ...] = ()
    skipped: int = 0
    error: DistillError | None = None

    @property
    def ok(self) -> bool:
        """True when aggregation succeeded (possibly with no documents)."""
        return self.error is None


def include_all(metadata: Metadata, slug: Slug) -> bool:  # noqa: ARG001
    """Predicate accepting every document."""
    return True


def exclude_slugs(slugs: Iterable[str]) -> FilterPredicate:
    """Return a predicate rejecting documents whose slug is in *slugs*."""
    excluded = frozenset(slugs)

    def predicate(metadata: Metadata, slug: Slug) -> bool:  # noqa: ARG001
        return slug not in excluded

    return predicate


class CorpusAggregator:
    """Builds the full-corpus text from a document collection.

    Holds no per-request state; one instance can serve concurrent requests.

    Args:
        collection: Source of documents.
        name: Collection name to fetch.
        workers: Threads used to render documents. ``1`` renders inline.
        rules: Markup strip rules applied to every body.
        collector: Optional observability collector.

    """

    def __init__(
        self,
        collection: DocumentCollection,
        *,
        name: str = "docs",
        workers: int = 1,
        rules: Iterable[StripRule] = DEFAULT_RULES,
        collector: ExportCollector | None = None,
    ) -> None:
        self._collection = collection
        self._name = name
        self._workers = max(1, workers)
        self._rules = tuple(rules)
        self._collector = collector

    @property
    def name(self) -> str:
        """Name of the aggregated collection."""
        return self._name

    async def aggregate(self, predicate: FilterPredicate = include_all) -> CorpusResult:
        """Fetch, select, render, and join the collection.

        Drafts are always left out, whatever *predicate* says.

        Returns:
            CorpusResult with the text on success, or with ``error`` set to a
            :class:`CollectionError` (fetch failed) or :class:`ContentError`
            (a document could not be rendered).

        """
        start = time.perf_counter()

        try:
            documents = await self._collection.get_collection(self._name)
        except Exception as exc:
            return self._fetch_failed(exc)

        fetch_ms = (time.perf_counter() - start) * 1000
        if self._collector is not None:
            self._collector.record_fetch(
                self._name, documents=len(documents), fetch_ms=fetch_ms,
            )

        selected = [
            doc for doc in documents
            if not doc.draft and predicate(doc.metadata, doc.slug)
        ]

        try:
            blocks = self._render_all(selected)
        except ContentError as exc:
            print(f"  Failed to render {self._name!r}: {exc}", file=sys.stderr)
            return CorpusResult(error=exc)

        text = "".join(block + _BLOCK_END for block in blocks)
        elapsed = (time.perf_counter() - start) * 1000

        if self._collector is not None:
            self._collector.record_export(
                "full",
                collection=self._name,
                documents=len(selected),
                skipped=len(documents) - len(selected),
                size_bytes=len(text.encode("utf-8")),
                duration_ms=elapsed,
            )

        return CorpusResult(
            text=text,
            documents=tuple(doc.slug for doc in selected),
            skipped=len(documents) - len(selected),
        )

    def _fetch_failed(self, exc: Exception) -> CorpusResult:
        print(f"  Failed to fetch collection {self._name!r}: {exc}", file=sys.stderr)
        if self._collector is not None:
            self._collector.record_fetch_failure(self._name, exc)

        if isinstance(exc, CollectionError):
            return CorpusResult(error=exc)
        error = CollectionError(f"Failed to fetch collection {self._name!r}: {exc}")
        error.__cause__ = exc
        return CorpusResult(error=error)

    def _render_all(self, documents: list[SourceDocument]) -> list[str]:
        """Render *documents*, preserving their order.

        ``Executor.map`` yields results in input order regardless of which
        thread finishes first.

        """
        if self._workers == 1 or len(documents) < 2:
            return [self._render_one(doc) for doc in documents]
        with ThreadPoolExecutor(max_workers=self._workers) as pool:
            return list(pool.map(self._render_one, documents))

    def _render_one(self, doc: SourceDocument) -> str:
        t0 = time.perf_counter()
        try:
            block = render_document(doc, self._rules)
        except Exception as exc:
            msg = f"Failed to render document {doc.slug!r}: {exc}"
            raise ContentError(msg) from exc
        if self._collector is not None:
            self._collector.record_render(
                doc.slug,
                chars=len(block),
                render_ms=(time.perf_counter() - t0) * 1000,
            )
        return block


async def aggregate_corpus(
    collection: DocumentCollection,
    predicate: FilterPredicate = include_all,
    *,
    name: str = "docs",
    workers: int = 1,
    collector: ExportCollector | None = None,
) -> CorpusResult:
    """Aggregate collection *name* in one call.

    Equivalent to ``CorpusAggregator(collection, ...).aggregate(predicate)``.

    """
    aggregator = CorpusAggregator(
        collection, name=name, workers=workers, collector=collector,
    )
    return await aggregator.aggregate(predicate)
