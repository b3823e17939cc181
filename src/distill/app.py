"""Distill application — llms.txt endpoints on a Chirp app.

The two public functions (serve, build) are the primary entry points;
``create_app`` builds the Chirp app for embedding or testing.
"""

from __future__ import annotations

import asyncio
import sys
import time
from pathlib import Path
from typing import TYPE_CHECKING

from distill.config_loader import load_config
from distill.content.collection import BengalCollection, FileCollection, load_bengal_site
from distill.export.aggregate import CorpusAggregator
from distill.export.index import load_index

if TYPE_CHECKING:
    from chirp import App

    from distill.config import DistillConfig
    from distill.content.collection import DocumentCollection
    from distill.export.static import ExportResult
    from distill.observability.collector import ExportCollector


def create_collection(config: DistillConfig) -> DocumentCollection:
    """Build the document collection named by ``config.source``.

    Raises:
        ConfigError: If a Bengal site cannot be loaded.

    """
    if config.source == "bengal":
        site = load_bengal_site(config.root)
        return BengalCollection(site, config.content_path, name=config.collection)
    return FileCollection(config.content_path)


def create_aggregator(
    config: DistillConfig,
    collection: DocumentCollection,
    collector: ExportCollector | None = None,
) -> CorpusAggregator:
    """Build the corpus aggregator for ``config.collection``."""
    return CorpusAggregator(
        collection,
        name=config.collection,
        workers=config.workers,
        collector=collector,
    )


def create_app(
    config: DistillConfig,
    collection: DocumentCollection,
    *,
    index_text: str | None = None,
    collector: ExportCollector | None = None,
    debug: bool = False,
) -> App:
    """Create a Chirp App serving ``/llms.txt`` and ``/llms-full.txt``.

    Args:
        config: Resolved configuration (exclusions, collection name, workers).
        collection: Source of documents for the full corpus.
        index_text: Body of ``/llms.txt``. Read from ``config.index_path``
            when omitted.
        collector: Optional observability collector; also enables
            ``/__distill/stats``.
        debug: Chirp debug mode.

    """
    from chirp import App, AppConfig

    from distill.export.router import ExportRouter

    if index_text is None:
        index_text = load_index(config)

    app = App(config=AppConfig(
        template_dir=config.root,
        debug=debug,
        host=config.host,
        port=config.port,
    ))

    router = ExportRouter(
        app,
        create_aggregator(config, collection, collector),
        index_text=index_text,
        exclude=config.exclude,
        collector=collector,
    )
    router.register()
    return app


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------


def serve(root: str | Path = ".", **kwargs: object) -> None:
    """Serve the llms.txt endpoints.

    The collection is read again on every ``/llms-full.txt`` request, so
    edited content shows up without a restart.

    Args:
        root: Path to the site root directory.
        **kwargs: Override DistillConfig fields.

    """
    from distill.banner import print_banner
    from distill.observability import EventLog, ExportCollector

    config = load_config(Path(root), **kwargs)
    t0 = time.perf_counter()

    collection = create_collection(config)
    index_text = load_index(config)

    collector = ExportCollector(EventLog())
    app = create_app(config, collection, index_text=index_text, collector=collector)

    load_ms = (time.perf_counter() - t0) * 1000

    print_banner(config, mode="serve", load_ms=load_ms, warnings=_startup_warnings(config))

    # Connection lifecycle events flow into the same EventLog as export events.
    app.run(host=config.host, port=config.port, lifecycle_collector=collector)


def build(root: str | Path = ".", **kwargs: object) -> ExportResult:
    """Write llms.txt and llms-full.txt to the output directory.

    Args:
        root: Path to the site root directory.
        **kwargs: Override DistillConfig fields.

    Raises:
        ExportError: If the corpus cannot be built or written.

    """
    from distill.banner import print_banner
    from distill.export.static import StaticExporter

    config = load_config(Path(root), **kwargs)
    t0 = time.perf_counter()

    collection = create_collection(config)
    index_text = load_index(config)

    load_ms = (time.perf_counter() - t0) * 1000

    print_banner(config, mode="build", load_ms=load_ms, warnings=_startup_warnings(config))

    exporter = StaticExporter(
        create_aggregator(config, collection),
        config,
        index_text,
    )
    result = asyncio.run(exporter.export())

    _print_export_summary(result)
    return result


def _startup_warnings(config: DistillConfig) -> list[str]:
    warnings: list[str] = []
    if config.source == "files" and not config.collection_path.is_dir():
        warnings.append(f"collection directory {config.collection_path} not found")
    if not config.index_path.is_file():
        warnings.append(f"{config.index_file} not found, using a generated index")
    return warnings


def _print_export_summary(result: ExportResult) -> None:
    """Print export completion summary to stderr."""
    count = len(result.documents)
    lines = [
        "",
        "─" * 41,
        f"  Exported {count} document{'s' if count != 1 else ''}",
    ]
    if result.skipped > 0:
        lines.append(f"  Skipped {result.skipped} (drafts and exclusions)")
    lines.extend(
        f"  {f.output_path.name}: {f.size_bytes} bytes" for f in result.files
    )
    lines.append(f"  Output: {result.output_dir}")
    lines.append(f"  Done in {result.duration_ms:.0f}ms")

    print("\n".join(lines), file=sys.stderr)
