"""Frontmatter extraction — split a raw document into metadata text and body.

A document may open with a metadata block delimited by ``---`` marker lines::

    ---
    title: Forms
    description: Working with forms
    ---
    Body text...

Absence (or malformation) of the block is not an error: the whole input is
treated as body and the metadata text is empty.
"""

from __future__ import annotations

import re

import yaml

# Opening marker at the very start, lazily up to the first closing marker
_FRONTMATTER = re.compile(r"^---\n([\s\S]*?)\n---")


def extract_frontmatter(raw: str) -> tuple[str, str]:
    """Split *raw* into ``(metadata_text, body)``.

    The body is everything after the closing marker, untouched (it usually
    starts with the newline that ended the marker line).  A leading byte
    order mark is ignored.

    """
    text = raw.removeprefix("\ufeff")
    match = _FRONTMATTER.match(text)
    if match is None:
        return "", raw
    return match.group(1), text[match.end():]


def frontmatter_text(raw: str) -> str:
    """Return only the metadata text of *raw* (empty when absent)."""
    return extract_frontmatter(raw)[0]


def parse_metadata(text: str) -> dict[str, object]:
    """Parse metadata text as YAML.

    Returns an empty dict when the text is empty, is not valid YAML, or does
    not describe a mapping.

    """
    if not text.strip():
        return {}
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        return {}
    if not isinstance(data, dict):
        return {}
    return {str(k): v for k, v in data.items()}
