"""Distill — llms.txt exports for documentation sites.

Flattens a documentation collection into plain text for language models,
following the ``llms.txt`` / ``llms-full.txt`` conventions: frontmatter is
kept as text, presentation-only MDX markup is stripped, and every page is
concatenated into one deterministic stream.

Quick start::

    import distill

    distill.serve("my-site/")     # GET /llms.txt, GET /llms-full.txt
    distill.build("my-site/")     # write dist/llms.txt, dist/llms-full.txt

In-process::

    from distill import MemoryCollection, SourceDocument, aggregate_corpus

    result = await aggregate_corpus(MemoryCollection({"docs": docs}))
    print(result.text)

Part of the Bengal ecosystem:

    distill     llms.txt export   (flattens content)
    chirp       Web framework     (serves the endpoints)
    bengal      Static site gen   (discovers content)

"""

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "DistillConfig",
    "MemoryCollection",
    "SourceDocument",
    "__version__",
    "aggregate_corpus",
    "build",
    "create_app",
    "serve",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import distill`` fast while providing a clean top-level API.
    """
    if name == "DistillConfig":
        from distill.config import DistillConfig

        return DistillConfig

    if name == "MemoryCollection":
        from distill.content.collection import MemoryCollection

        return MemoryCollection

    if name == "SourceDocument":
        from distill.content.document import SourceDocument

        return SourceDocument

    if name == "aggregate_corpus":
        from distill.export.aggregate import aggregate_corpus

        return aggregate_corpus

    if name == "build":
        from distill.app import build

        return build

    if name == "create_app":
        from distill.app import create_app

        return create_app

    if name == "serve":
        from distill.app import serve

        return serve

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
