"""Load DistillConfig from distill.yaml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from distill.config import DistillConfig

_CONFIG_KEYS = frozenset({
    "host", "port", "output", "workers", "content_dir", "collection",
    "source", "exclude", "index_file", "site_title", "base_url",
})


def load_config(root: Path, **overrides: object) -> DistillConfig:
    """Load DistillConfig from root, optionally merging distill.yaml.

    Looks for distill.yaml, distill.yml, or distill.toml in root. If found,
    loads and merges with overrides. Overrides take precedence.
    ``None`` overrides (unset CLI flags) are ignored.
    """
    file_config = _read_distill_config(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    # Normalize output to Path
    if "output" in merged and not isinstance(merged["output"], Path):
        merged["output"] = Path(str(merged["output"]))
    return DistillConfig(root=root, **merged)


def _read_distill_config(root: Path) -> dict[str, object]:
    """Read distill config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("distill.yaml", "distill.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "distill.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    """Parse YAML config. Returns empty dict on error."""
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError:
        return {}
    if not isinstance(data, dict):
        return {}
    return _flatten_distill_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    """Parse TOML config. Returns empty dict on error."""
    try:
        data = tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError:
        return {}
    return _flatten_distill_section(data)


def _flatten_distill_section(data: dict[str, object]) -> dict[str, object]:
    """Extract distill.* keys into top-level config."""
    result: dict[str, object] = {}
    for k, v in data.items():
        if k in _CONFIG_KEYS:
            result[k] = v
    section = data.get("distill")
    if isinstance(section, dict):
        for k, v in section.items():
            if k in _CONFIG_KEYS:
                result[k] = v
    return result
