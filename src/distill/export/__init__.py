"""Export layer — llms.txt outputs.

Aggregates a document collection into llms-full.txt, serves both outputs
as Chirp routes, and writes them as static files.
"""

from distill.export.aggregate import (
    CorpusAggregator,
    CorpusResult,
    aggregate_corpus,
    exclude_slugs,
)
from distill.export.index import load_index
from distill.export.router import ExportRouter
from distill.export.static import ExportedFile, ExportResult, StaticExporter

__all__ = [
    "CorpusAggregator",
    "CorpusResult",
    "ExportResult",
    "ExportRouter",
    "ExportedFile",
    "StaticExporter",
    "aggregate_corpus",
    "exclude_slugs",
    "load_index",
]
