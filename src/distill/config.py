"""Distill configuration.

DistillConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass, field
from pathlib import Path

from distill._types import SourceKind

# Slugs left out of llms-full.txt (landing and showcase pages carry no reference material)
DEFAULT_EXCLUDE: tuple[str, ...] = (
    "getting-started",
    "showcase",
    "starter-kits",
    "composables",
)



def split_slugs(value: object) -> tuple[str, ...]:
    """Normalize an exclusion list.

    A string is one comma-separated list (``"showcase, composables"``), never
    a sequence of characters.  Lists, tuples and sets become a tuple of str.
    Anything else is empty.

    """
    if isinstance(value, str):
        return tuple(s.strip() for s in value.split(",") if s.strip())
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(str(s) for s in value)
    return ()


@dataclass(frozen=True, slots=True)
class DistillConfig:
    """Configuration for a Distill export.

    Attributes:
        root: Path to the site root directory (contains content/, llms.txt, etc.).
              Always resolved to an absolute path on construction.
        host: Bind address for serve mode.
        port: Bind port for serve mode.
        output: Output directory for ``distill build``.
        workers: Threads used to render documents (1 = render inline).
        content_dir: Directory containing document collections.
        collection: Name of the collection exported to llms-full.txt.
        source: ``"files"`` reads markdown from disk, ``"bengal"`` loads a Bengal site.
        exclude: Slugs left out of llms-full.txt. Drafts are always left out.
            A comma-separated string is split into slugs.
        index_file: Hand-written summary index served as llms.txt.
        site_title: Heading for the generated index when ``index_file`` is missing.
        base_url: Public URL of the site, shown in the banner.

    """

    root: Path = field(default_factory=Path.cwd)
    host: str = "127.0.0.1"
    port: int = 3000
    output: Path = field(default_factory=lambda: Path("dist"))
    workers: int = 1
    content_dir: str = "content"
    collection: str = "docs"
    source: SourceKind = "files"
    exclude: tuple[str, ...] = DEFAULT_EXCLUDE
    index_file: str = "llms.txt"
    site_title: str = "Documentation"
    base_url: str = ""

    def __post_init__(self) -> None:
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())
        if not isinstance(self.exclude, tuple):
            object.__setattr__(self, "exclude", split_slugs(self.exclude))

    @property
    def content_path(self) -> Path:
        """Absolute path to content directory."""
        return self.root / self.content_dir

    @property
    def collection_path(self) -> Path:
        """Absolute path to the exported collection."""
        return self.content_path / self.collection

    @property
    def index_path(self) -> Path:
        """Absolute path to the hand-written summary index."""
        return self.root / self.index_file

    @property
    def output_path(self) -> Path:
        """Absolute path to output directory."""
        if self.output.is_absolute():
            return self.output
        return self.root / self.output
