"""Shared test fixtures for distill."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from distill._errors import CollectionError
from distill.content.collection import MemoryCollection
from distill.content.document import SourceDocument

STEPS_BODY = (
    "import X from '@astrojs/starlight/components';\n"
    "<Steps>\n"
    "1. Do a thing\n"
    "</Steps>\n"
    "\n\n\n"
    "Done."
)


def make_doc(
    slug: str,
    *,
    title: str | None = None,
    description: str = "",
    draft: bool = False,
    body: str = "Body text.",
    **extra: Any,
) -> SourceDocument:
    """Create a SourceDocument with the usual metadata keys."""
    metadata: dict[str, Any] = {
        "title": title if title is not None else slug.title(),
        "description": description,
        "draft": draft,
        **extra,
    }
    return SourceDocument(slug=slug, metadata=metadata, body=body)


class FailingCollection:
    """A collection whose fetch always raises."""

    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc if exc is not None else RuntimeError("content store unavailable")
        self.calls = 0

    async def get_collection(self, name: str, predicate: Any = None) -> Any:
        self.calls += 1
        raise self.exc


@pytest.fixture
def docs() -> list[SourceDocument]:
    """A small docs collection: two published pages, one draft, one excluded slug."""
    return [
        make_doc(
            "guides/forms",
            title="Forms",
            description="Working with forms",
            body="---\ntitle: Forms\ndescription: Working with forms\n---\n\nUse forms.\n",
        ),
        make_doc("showcase", title="Showcase", description="Examples"),
        make_doc("wip", title="Work In Progress", draft=True),
        make_doc(
            "guides/fields",
            title="Fields",
            description="Field components",
            body="<Tabs>\n<TabItem label=\"Vue\">\nField docs.\n</TabItem>\n</Tabs>\n",
        ),
    ]


@pytest.fixture
def memory_collection(docs: list[SourceDocument]) -> MemoryCollection:
    return MemoryCollection({"docs": docs})


@pytest.fixture
def failing_collection() -> FailingCollection:
    return FailingCollection(CollectionError("content store unavailable"))


@pytest.fixture
def tmp_site(tmp_path: Path) -> Path:
    """Create a minimal site structure for testing.

    Returns the site root with ``content/docs/`` documents and an ``llms.txt``
    index.
    """
    docs_dir = tmp_path / "content" / "docs"
    (docs_dir / "guides").mkdir(parents=True)

    (docs_dir / "index.mdx").write_text(
        "---\ntitle: Home\ndescription: Start here\n---\n\nWelcome.\n"
    )
    (docs_dir / "getting-started.mdx").write_text(
        "---\ntitle: Getting Started\ndescription: Intro\n---\n\n"
        "import { Steps } from '@astrojs/starlight/components';\n\n"
        "<Steps>\n1. Install\n</Steps>\n"
    )
    (docs_dir / "guides" / "forms.md").write_text(
        "---\ntitle: Forms\ndescription: Working with forms\n---\n\n"
        "```ts\n// @noErrors\nconst form = useForm();\n```\n"
    )
    (docs_dir / "guides" / "draft.md").write_text(
        "---\ntitle: Unpublished\ndescription: Not yet\ndraft: true\n---\n\nSecret.\n"
    )
    (docs_dir / "notes.txt").write_text("not a document\n")

    (tmp_path / "llms.txt").write_text("# Test Docs\n\n- [Forms](/guides/forms/)\n")
    return tmp_path
