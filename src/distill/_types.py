"""Shared type definitions for distill."""

from collections.abc import Callable, Mapping
from typing import Literal

# Where documents are discovered from
type SourceKind = Literal["files", "bengal"]

# Unique, URL-safe document identifier within a collection
type Slug = str

# Parsed frontmatter of a document
type Metadata = Mapping[str, object]

# Selection test applied to (metadata, slug) before rendering
type FilterPredicate = Callable[[Metadata, Slug], bool]
