"""Content layer — documents, frontmatter, markup cleaning, and collections.

Turns raw documentation sources into plain text: split the frontmatter,
strip presentation-only markup, normalize blank lines, and render each
document as a self-identifying block.
"""

from distill.content.collection import (
    BengalCollection,
    DocumentCollection,
    FileCollection,
    MemoryCollection,
)
from distill.content.document import SourceDocument
from distill.content.frontmatter import extract_frontmatter, parse_metadata
from distill.content.markup import (
    DEFAULT_RULES,
    StripRule,
    normalize_whitespace,
    strip_markup,
)
from distill.content.render import clean_content, metadata_summary, render_document

__all__ = [
    "DEFAULT_RULES",
    "BengalCollection",
    "DocumentCollection",
    "FileCollection",
    "MemoryCollection",
    "SourceDocument",
    "StripRule",
    "clean_content",
    "extract_frontmatter",
    "metadata_summary",
    "normalize_whitespace",
    "parse_metadata",
    "render_document",
    "strip_markup",
]
