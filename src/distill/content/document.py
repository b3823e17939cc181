"""Source documents as handed to the export pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from distill._types import Metadata


@dataclass(frozen=True, slots=True)
class SourceDocument:
    """A single document of a collection.

    Attributes:
        slug: Identifier of the document within its collection
            (e.g. ``"guides/forms/validation"``).
        metadata: Parsed frontmatter. Frozen into a read-only mapping.
        body: Raw document text, including its frontmatter block if any.

    """

    slug: str
    metadata: Metadata = field(default_factory=dict)
    body: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.metadata, MappingProxyType):
            object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def title(self) -> str:
        """Document title, falling back to the slug."""
        title = self.metadata.get("title")
        return str(title) if title is not None else self.slug

    @property
    def description(self) -> str:
        """Document description, empty when not set."""
        description = self.metadata.get("description")
        return str(description) if description is not None else ""

    @property
    def draft(self) -> bool:
        """True when the document is marked unpublished."""
        return bool(self.metadata.get("draft", False))
