"""Startup banner — mode-aware status output.

Prints a short banner with timing and the export settings.  Detects
``NO_COLOR`` / ``TERM`` for safe fallback.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from distill.config import DistillConfig


# ---------------------------------------------------------------------------
# ANSI helpers — respect NO_COLOR (https://no-color.org)
# ---------------------------------------------------------------------------

def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_CYAN = "\033[36m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""

_MODE_STYLES: dict[str, tuple[str, str]] = {
    "build": (_YELLOW, "build"),
    "serve": (_CYAN, "serve"),
}


def _mode_badge(mode: str) -> str:
    """Return a styled [mode] badge."""
    color, label = _MODE_STYLES.get(mode, (_DIM, mode))
    return f"{color}[{label}]{_RESET}"


def print_banner(
    config: DistillConfig,
    mode: str,
    *,
    load_ms: float = 0.0,
    warnings: list[str] | None = None,
) -> None:
    """Print the Distill startup banner to stderr.

    Args:
        config: Resolved DistillConfig.
        mode: One of ``"build"``, ``"serve"``.
        load_ms: Time spent loading the collection source in milliseconds.
        warnings: Optional list of warning messages to display.

    """
    from distill import __version__
    from distill.export.router import FULL_ENDPOINT, INDEX_ENDPOINT

    header = f"  {_BOLD}Distill{_RESET} {_DIM}v{__version__}{_RESET}  {_mode_badge(mode)}"

    lines: list[str] = [
        "",
        header,
        f"  {_DIM}{'─' * 43}{_RESET}",
    ]

    timing = f" {_DIM}in {load_ms:.0f}ms{_RESET}" if load_ms > 0 else ""
    lines.append(
        f"  {_DIM}├─{_RESET} collection: {config.collection} "
        f"{_DIM}({config.source}){_RESET}{timing}"
    )
    excluded = ", ".join(config.exclude) if config.exclude else "none"
    lines.append(f"  {_DIM}├─{_RESET} excluded: {_DIM}{excluded}{_RESET}")

    index_label = config.index_path if config.index_path.is_file() else "generated"
    lines.append(f"  {_DIM}├─{_RESET} index: {_DIM}{index_label}{_RESET}")

    if mode == "build":
        lines.append(f"  {_DIM}└─{_RESET} output: {_DIM}{config.output_path}{_RESET}")
    elif mode == "serve":
        lines.append(f"  {_DIM}└─{_RESET} render workers: {config.workers}")
        url = config.base_url.rstrip("/") or f"http://{config.host}:{config.port}"
        lines.append("")
        lines.append(f"  {_CYAN}{url}{INDEX_ENDPOINT}{_RESET}")
        lines.append(f"  {_CYAN}{url}{FULL_ENDPOINT}{_RESET}")

    if warnings:
        lines.append("")
        lines.extend(f"  {_YELLOW}!{_RESET} {w}" for w in warnings)

    lines.append("")

    print("\n".join(lines), file=sys.stderr)
