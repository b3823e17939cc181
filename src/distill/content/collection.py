"""Document collections — where source documents come from.

The export pipeline never reads files itself.  It asks a collection for
documents by collection name, which keeps it testable with an in-memory
fixture and lets a site plug in its own content store.

Three collections ship with distill:

    MemoryCollection    in-memory documents (tests, embedding)
    FileCollection      markdown/MDX files under ``content/<name>/``
    BengalCollection    pages of a loaded Bengal site

Slugs follow the file-path convention, each segment slugified::

    content/docs/showcase.mdx             -> showcase
    content/docs/Getting Started.mdx      -> getting-started
    content/docs/guides/forms/index.mdx   -> guides/forms
    content/docs/guides/_index.md         -> guides

A string ``slug`` in the frontmatter replaces the derived slug.
"""

from __future__ import annotations

import asyncio
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from distill._errors import CollectionError, ConfigError
from distill.content.document import SourceDocument
from distill.content.frontmatter import frontmatter_text, parse_metadata

if TYPE_CHECKING:
    from bengal.core.site import Site

    from distill._types import FilterPredicate

# File suffixes treated as documents
_DOCUMENT_SUFFIXES = frozenset({".md", ".mdx"})

# Final path segments that stand for their parent directory
_INDEX_STEMS = frozenset({"index", "_index"})

# Characters dropped from slug segments (everything but word chars, whitespace, -)
_SLUG_DROP = re.compile(r"[^\w\s-]")


class DocumentCollection(Protocol):
    """Anything that can hand out the documents of a named collection."""

    async def get_collection(
        self,
        name: str,
        predicate: FilterPredicate | None = None,
    ) -> tuple[SourceDocument, ...]:
        """Return the documents of *name* in collection order.

        When *predicate* is given, only documents for which
        ``predicate(metadata, slug)`` is true are returned.

        Raises:
            CollectionError: If the collection cannot be retrieved.

        """
        ...


def _select(
    documents: Iterable[SourceDocument],
    predicate: FilterPredicate | None,
) -> tuple[SourceDocument, ...]:
    if predicate is None:
        return tuple(documents)
    return tuple(doc for doc in documents if predicate(doc.metadata, doc.slug))


def slugify(segment: str) -> str:
    """Lowercase *segment*, drop punctuation, and turn whitespace into ``-``."""
    text = _SLUG_DROP.sub("", segment.strip().lower())
    return re.sub(r"\s", "-", text)


def derive_slug(path: Path, base: Path) -> str:
    """Derive a document slug from *path* relative to *base*.

    ``guides/forms/validation.mdx`` -> ``guides/forms/validation``
    ``guides/forms/index.mdx``      -> ``guides/forms``
    ``Guides/Getting Started.md``   -> ``guides/getting-started``
    ``index.md``                    -> ``index``

    """
    parts = [slugify(part) for part in path.relative_to(base).with_suffix("").parts]
    if len(parts) > 1 and parts[-1] in _INDEX_STEMS:
        parts.pop()
    elif parts and parts[-1] == "_index":
        parts[-1] = "index"
    return "/".join(parts)


def resolve_slug(metadata: Mapping[str, object], derived: str) -> str:
    """Return the frontmatter ``slug`` when it is a non-empty string, else *derived*."""
    override = metadata.get("slug")
    if isinstance(override, str) and override.strip("/ "):
        return override.strip("/ ")
    return derived


class MemoryCollection:
    """Collections held in memory, keyed by name.

    Args:
        collections: Mapping of collection name to documents, in order.

    """

    __slots__ = ("_collections",)

    def __init__(self, collections: Mapping[str, Iterable[SourceDocument]]) -> None:
        self._collections = {name: tuple(docs) for name, docs in collections.items()}

    async def get_collection(
        self,
        name: str,
        predicate: FilterPredicate | None = None,
    ) -> tuple[SourceDocument, ...]:
        try:
            documents = self._collections[name]
        except KeyError:
            msg = f"Unknown collection {name!r}"
            raise CollectionError(msg) from None
        return _select(documents, predicate)


class FileCollection:
    """Markdown and MDX files under ``<content_path>/<name>/``.

    Files are read in sorted path order from a worker thread, so the
    event loop is not blocked while a large collection loads.  Files and
    directories whose names start with ``.`` are skipped.

    Args:
        content_path: Directory holding one subdirectory per collection.

    """

    __slots__ = ("_content_path",)

    def __init__(self, content_path: Path) -> None:
        self._content_path = content_path

    @property
    def content_path(self) -> Path:
        return self._content_path

    async def get_collection(
        self,
        name: str,
        predicate: FilterPredicate | None = None,
    ) -> tuple[SourceDocument, ...]:
        documents = await asyncio.to_thread(self.load, name)
        return _select(documents, predicate)

    def load(self, name: str) -> tuple[SourceDocument, ...]:
        """Read every document of collection *name* synchronously.

        Raises:
            CollectionError: If the collection directory is missing or a
                file cannot be read.

        """
        base = self._content_path / name
        if not base.is_dir():
            msg = f"Collection {name!r} not found at {base}"
            raise CollectionError(msg)

        documents: list[SourceDocument] = []
        for path in sorted(base.rglob("*")):
            if path.suffix not in _DOCUMENT_SUFFIXES or not path.is_file():
                continue
            if any(part.startswith(".") for part in path.relative_to(base).parts):
                continue
            try:
                raw = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                msg = f"Failed to read {path}: {exc}"
                raise CollectionError(msg) from exc
            metadata = parse_metadata(frontmatter_text(raw))
            documents.append(SourceDocument(
                slug=resolve_slug(metadata, derive_slug(path, base)),
                metadata=metadata,
                body=raw,
            ))
        return tuple(documents)


class BengalCollection:
    """Pages of a loaded Bengal site, exposed as one collection.

    Bengal discovers and parses the pages; the raw text (with frontmatter)
    is re-read from each page's source file so the export sees exactly what
    the author wrote.  Pages without a source file are skipped.

    Args:
        site: A Bengal Site whose content has been discovered.
        content_path: Content root, used to derive slugs.
        name: Collection name this site answers to.

    """

    __slots__ = ("_content_path", "_name", "_site")

    def __init__(self, site: Site, content_path: Path, name: str = "docs") -> None:
        self._site = site
        self._content_path = content_path
        self._name = name

    async def get_collection(
        self,
        name: str,
        predicate: FilterPredicate | None = None,
    ) -> tuple[SourceDocument, ...]:
        if name != self._name:
            msg = f"Unknown collection {name!r} (site provides {self._name!r})"
            raise CollectionError(msg)
        documents = await asyncio.to_thread(self._documents)
        return _select(documents, predicate)

    def _documents(self) -> tuple[SourceDocument, ...]:
        documents: list[SourceDocument] = []
        for page in self._site.pages:
            source = getattr(page, "source_path", None)
            if not source:
                continue
            source = Path(source)
            if not source.is_absolute():
                source = self._content_path / source
            try:
                raw = source.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                msg = f"Failed to read {source}: {exc}"
                raise CollectionError(msg) from exc
            metadata = getattr(page, "metadata", None) or parse_metadata(frontmatter_text(raw))
            metadata = dict(metadata)
            documents.append(SourceDocument(
                slug=resolve_slug(metadata, self._slug(source)),
                metadata=metadata,
                body=raw,
            ))
        return tuple(documents)

    def _slug(self, source: Path) -> str:
        base = self._content_path / self._name
        if not source.is_relative_to(base):
            base = self._content_path
        if not source.is_relative_to(base):
            return slugify(source.stem)
        return derive_slug(source, base)


def load_bengal_site(root: Path) -> Site:
    """Load a Bengal site and discover its content.

    Raises:
        ConfigError: If the site cannot be loaded (missing config, bad structure).

    """
    try:
        from bengal.core.site import Site
        from bengal.orchestration.content import ContentOrchestrator

        site = Site.from_config(root)
        ContentOrchestrator(site).discover()
        return site
    except Exception as exc:
        msg = f"Failed to load Bengal site from {root}: {exc}"
        raise ConfigError(msg) from exc
