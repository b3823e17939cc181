"""Distill CLI — distill serve / distill build.

Entry point for the ``distill`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the distill CLI."""
    parser = argparse.ArgumentParser(
        prog="distill",
        description="Export documentation as llms.txt and llms-full.txt.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # distill serve
    serve_parser = subparsers.add_parser(
        "serve",
        help="Serve /llms.txt and /llms-full.txt",
    )
    serve_parser.add_argument("root", nargs="?", default=".", help="Site root directory")
    serve_parser.add_argument("--host", default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")
    serve_parser.add_argument(
        "--workers", type=int, default=None, help="Document render threads",
    )
    _add_source_args(serve_parser)

    # distill build
    build_parser = subparsers.add_parser(
        "build",
        help="Write llms.txt and llms-full.txt to the output directory",
    )
    build_parser.add_argument("root", nargs="?", default=".", help="Site root directory")
    build_parser.add_argument("--output", default=None, help="Output directory")
    build_parser.add_argument(
        "--workers", type=int, default=None, help="Document render threads",
    )
    _add_source_args(build_parser)

    return parser


def _add_source_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--source",
        choices=("files", "bengal"),
        default=None,
        help="Where documents are read from",
    )
    parser.add_argument("--collection", default=None, help="Collection to export")


def _get_version() -> str:
    """Get the package version."""
    from distill import __version__

    return __version__


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from distill._errors import DistillError
    from distill.app import build, serve

    try:
        if args.command == "serve":
            serve(
                root=args.root,
                host=args.host,
                port=args.port,
                workers=args.workers,
                source=args.source,
                collection=args.collection,
            )
        elif args.command == "build":
            build(
                root=args.root,
                output=args.output,
                workers=args.workers,
                source=args.source,
                collection=args.collection,
            )
    except DistillError as exc:
        print(f"  Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
