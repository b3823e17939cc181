"""Event model for export observability.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal


# ---------------------------------------------------------------------------
# Collection events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CollectionFetched:
    """A document collection was retrieved.

    Attributes:
        collection: Collection name.
        documents: Number of documents the collection returned.
        fetch_ms: Time spent retrieving the collection.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    collection: str
    documents: int
    fetch_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class CollectionFailed:
    """Retrieving a document collection raised an error.

    Attributes:
        collection: Collection name.
        error: Short description of the failure.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    collection: str
    error: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Export events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DocumentRendered:
    """A document was rendered to plain text.

    Attributes:
        slug: Document slug.
        chars: Length of the rendered block.
        render_ms: Time spent rendering.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    slug: str
    chars: int
    render_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class CorpusExported:
    """An llms.txt output was produced.

    Attributes:
        target: Which output was produced.
        collection: Collection the corpus was built from (empty for the index).
        documents: Number of documents included.
        skipped: Number of documents filtered out (drafts and exclusions).
        size_bytes: UTF-8 size of the output.
        duration_ms: Total time to produce the output.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    target: Literal["index", "full"]
    collection: str
    documents: int
    skipped: int
    size_bytes: int
    duration_ms: float
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

type ExportEvent = (
    CollectionFetched
    | CollectionFailed
    | DocumentRendered
    | CorpusExported
)


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
