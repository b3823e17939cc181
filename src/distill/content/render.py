"""Document rendering — one source document to one plain-text block.

A rendered document reads::

    --- title: Forms description: Working with forms ---

    # Forms

    title: Forms
    description: Working with forms

    Cleaned body...

The first line keeps each document identifiable inside the aggregate.  The
frontmatter text is reproduced verbatim; only the body is cleaned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from distill.content.frontmatter import extract_frontmatter
from distill.content.markup import DEFAULT_RULES, normalize_whitespace, strip_markup

if TYPE_CHECKING:
    from collections.abc import Iterable

    from distill.content.document import SourceDocument
    from distill.content.markup import StripRule


def clean_content(raw: str, rules: Iterable[StripRule] = DEFAULT_RULES) -> str:
    """Strip markup from *raw* while keeping its frontmatter as text.

    Returns the metadata text, a blank line, then the cleaned body.  When
    there is no frontmatter only the cleaned body is returned.

    """
    metadata_text, body = extract_frontmatter(raw)
    cleaned = normalize_whitespace(strip_markup(body, rules))
    if not metadata_text:
        return cleaned
    return f"{metadata_text}\n\n{cleaned}"


def metadata_summary(doc: SourceDocument) -> str:
    """Return the one-line ``--- title: ... description: ... ---`` summary."""
    return f"--- title: {doc.title} description: {doc.description} ---"


def render_document(
    doc: SourceDocument,
    rules: Iterable[StripRule] = DEFAULT_RULES,
) -> str:
    """Render *doc* as summary line, title heading, and cleaned content."""
    return (
        f"{metadata_summary(doc)}\n\n"
        f"# {doc.title}\n\n"
        f"{clean_content(doc.body, rules)}"
    )
