"""Static export — write llms.txt and llms-full.txt to the output directory.

Produces the same bodies the live endpoints serve, as plain files suitable
for deployment next to a statically built documentation site.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from distill._errors import ExportError
from distill.export.aggregate import exclude_slugs

if TYPE_CHECKING:
    from distill.config import DistillConfig
    from distill.export.aggregate import CorpusAggregator

INDEX_FILENAME = "llms.txt"
FULL_FILENAME = "llms-full.txt"


@dataclass(frozen=True, slots=True)
class ExportedFile:
    """Record of a single file written during export.

    Attributes:
        output_path: Absolute filesystem path to the written file.
        kind: Which llms.txt output this is.
        size_bytes: Size of the written file in bytes.
        duration_ms: Time taken to produce and write this file.

    """

    output_path: Path
    kind: Literal["index", "full"]
    size_bytes: int
    duration_ms: float


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Aggregate result of a full static export.

    Attributes:
        files: All files written during export.
        documents: Slugs included in llms-full.txt, in output order.
        skipped: Documents left out (drafts and excluded slugs).
        duration_ms: Total wall-clock time for the export.
        output_dir: Absolute path to the output directory.

    """

    files: tuple[ExportedFile, ...]
    documents: tuple[str, ...]
    skipped: int
    duration_ms: float
    output_dir: Path


class StaticExporter:
    """Exports the llms.txt outputs as static files.

    Existing files in the output directory other than the two outputs are
    left alone, so the exporter can run after a site build into the same
    directory.

    Args:
        aggregator: Builds the full corpus.
        config: Frozen Distill configuration.
        index_text: Body of llms.txt.

    """

    def __init__(
        self,
        aggregator: CorpusAggregator,
        config: DistillConfig,
        index_text: str,
    ) -> None:
        self._aggregator = aggregator
        self._config = config
        self._index_text = index_text

    async def export(self) -> ExportResult:
        """Write both outputs and return the result.

        The corpus is aggregated before anything is written, so a failed
        aggregation leaves the output directory untouched.  Both files are
        staged beside their targets and moved into place only once both are
        written, so a failed write leaves the previous pair as it was.

        Raises:
            ExportError: If aggregation fails or a file cannot be written.

        """
        start = time.perf_counter()
        output_dir = self._config.output_path

        t0 = time.perf_counter()
        result = await self._aggregator.aggregate(exclude_slugs(self._config.exclude))
        if not result.ok:
            msg = f"Failed to build {FULL_FILENAME}: {result.error}"
            raise ExportError(msg) from result.error
        full_ms = (time.perf_counter() - t0) * 1000

        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            msg = f"Failed to create output directory {output_dir}: {exc}"
            raise ExportError(msg) from exc

        targets = (
            ("index", output_dir / INDEX_FILENAME, self._index_text, 0.0),
            ("full", output_dir / FULL_FILENAME, result.text, full_ms),
        )
        try:
            files = tuple(self._stage(*target) for target in targets)
            for exported in files:
                _staging_path(exported.output_path).replace(exported.output_path)
        except OSError as exc:
            msg = f"Failed to write {output_dir}: {exc}"
            raise ExportError(msg) from exc
        finally:
            for _, filepath, _, _ in targets:
                staged = _staging_path(filepath)
                if staged.is_file():
                    staged.unlink()

        return ExportResult(
            files=files,
            documents=result.documents,
            skipped=result.skipped,
            duration_ms=(time.perf_counter() - start) * 1000,
            output_dir=output_dir,
        )

    @staticmethod
    def _stage(
        kind: Literal["index", "full"],
        filepath: Path,
        text: str,
        render_ms: float,
    ) -> ExportedFile:
        t0 = time.perf_counter()
        data = text.encode("utf-8")
        _staging_path(filepath).write_bytes(data)
        elapsed = render_ms + (time.perf_counter() - t0) * 1000
        return ExportedFile(
            output_path=filepath,
            kind=kind,
            size_bytes=len(data),
            duration_ms=elapsed,
        )


def _staging_path(filepath: Path) -> Path:
    return filepath.with_name(f".{filepath.name}.tmp")
