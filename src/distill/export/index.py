"""Summary index — the hand-written table of contents served as llms.txt.

The index is authored by people, not generated from the collection::

    # Formwerk Documentation

    > Headless composables for building accessible forms.

    ## Guides

    - [Forms](/guides/forms/): Working with forms

It is read once when the app is created and served verbatim afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from distill._errors import ConfigError

if TYPE_CHECKING:
    from distill.config import DistillConfig


def default_index(site_title: str) -> str:
    """Return the minimal index used when no index file exists."""
    return f"# {site_title}\n"


def load_index(config: DistillConfig) -> str:
    """Read ``config.index_path``, or fall back to :func:`default_index`.

    Raises:
        ConfigError: If the index file exists but cannot be read.

    """
    path = config.index_path
    if not path.is_file():
        return default_index(config.site_title)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Failed to read index file {path}: {exc}"
        raise ConfigError(msg) from exc
