"""Project configuration: discovery, loading, validation."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

CONFIG_NAME = ".flatscript.json"
CONFIG_ENV = "FLATSCRIPT_CONFIG"

UNSTITCHED_POLICIES = ("drop", "append", "error")


@dataclass(frozen=True)
class FlattenConfig:
    program_class: str = "Program"
    tab_width: int = 4
    unstitched: str = "drop"
    include_comments: bool = True

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


_FIELD_TYPES = {f.name: f.type for f in fields(FlattenConfig)}


def find_config(start: str | Path = ".") -> Path | None:
    """Locate the config file.

    ``$FLATSCRIPT_CONFIG`` wins when set; otherwise walk up from *start*
    looking for ``.flatscript.json``.  Returns None when nothing is found.
    """
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override)
    current = Path(start).resolve()
    while True:
        candidate = current / CONFIG_NAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def load_config(path: Path) -> dict[str, Any]:
    """Read and validate a config file.

    Raises FileNotFoundError or ValueError on problems.
    """
    if not path.exists():
        raise FileNotFoundError(f"No flatscript config at {path}")
    try:
        cfg = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path}: not valid JSON ({exc.msg})") from exc
    _validate_config(cfg)
    return cfg


def write_config(config: dict[str, Any], root: Path | None = None) -> Path:
    """Write (or update) .flatscript.json in *root*.

    Merges *config* into the existing file so other keys are preserved.
    """
    if root is None:
        root = Path.cwd()
    config_path = root / CONFIG_NAME
    existing: dict[str, Any] = {}
    if config_path.exists():
        existing = load_config(config_path)
    existing.update(config)
    _validate_config(existing)
    config_path.write_text(json.dumps(existing, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return config_path


def resolve_config(start: str | Path = ".", **overrides: Any) -> FlattenConfig:
    """Build the effective config: defaults < config file < overrides.

    Overrides whose value is None are ignored so CLI options can be
    passed straight through.
    """
    config = FlattenConfig()
    path = find_config(start)
    if path is not None:
        config = replace(config, **load_config(path))
    explicit = {k: v for k, v in overrides.items() if v is not None}
    if explicit:
        _validate_config(explicit)
        config = replace(config, **explicit)
    return config


def parse_value(key: str, raw: str) -> Any:
    """Convert a ``KEY=VALUE`` string from the command line to a typed value."""
    if key not in _FIELD_TYPES:
        raise ValueError(f"Unknown config key: {key!r}")
    kind = _FIELD_TYPES[key]
    if kind in (int, "int"):
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"{key} must be an integer, got {raw!r}") from None
    if kind in (bool, "bool"):
        lowered = raw.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"{key} must be a boolean, got {raw!r}")
    return raw


def _validate_config(cfg: Any) -> None:
    """Raise ValueError if the config is structurally invalid."""
    if not isinstance(cfg, dict):
        raise ValueError("flatscript config must be a JSON object")
    for key in cfg:
        if key not in _FIELD_TYPES:
            raise ValueError(f"Unknown config key: {key!r}")
    if "program_class" in cfg:
        name = cfg["program_class"]
        if not isinstance(name, str) or not name.strip():
            raise ValueError("program_class must be a non-empty string")
    if "tab_width" in cfg:
        width = cfg["tab_width"]
        if isinstance(width, bool) or not isinstance(width, int) or width < 1:
            raise ValueError("tab_width must be a positive integer")
    if "unstitched" in cfg and cfg["unstitched"] not in UNSTITCHED_POLICIES:
        raise ValueError(f"unstitched must be one of {', '.join(UNSTITCHED_POLICIES)}")
    if "include_comments" in cfg and not isinstance(cfg["include_comments"], bool):
        raise ValueError("include_comments must be true or false")
