from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from compiler import MAX_CSS_ROWS
from errors import ConfigurationError

FORMATS = ("css", "jsonl")


@dataclass(frozen=True)
class GridConfig:
    """
    One stylesheet build. Defaults match the demo page: a 40-cell tape shown
    15 rows deep, of which the first MAX_CSS_ROWS rows are compiled.
    """
    rows: int = 15
    cols: int = 40
    cap: int = MAX_CSS_ROWS
    name: str = "rule110"
    outfile: Optional[Path] = None
    format: str = "css"

    def __post_init__(self) -> None:
        for key in ("rows", "cols", "cap"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(f"{key} must be a positive integer, got {value!r}")
        if self.cap > MAX_CSS_ROWS:
            raise ConfigurationError(f"cap must be at most {MAX_CSS_ROWS}, got {self.cap}")
        if self.format not in FORMATS:
            raise ConfigurationError(f"format must be one of {FORMATS}, got {self.format!r}")

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> GridConfig:
        if not isinstance(raw, dict):
            raise ConfigurationError(f"grid entry must be a mapping, got {type(raw).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = set(raw) - known
        if unknown:
            raise ConfigurationError(f"unknown grid keys: {sorted(unknown)}")
        values = dict(raw)
        if values.get("outfile") is not None:
            values["outfile"] = Path(values["outfile"])
        return cls(**values)


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        raw = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"{path}: invalid YAML ({e})") from e
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{path}: top level must be a mapping")
    return raw


def load_config(path: Path) -> GridConfig:
    """Single grid, either at the top level or under a `grid:` key."""
    raw = _read_yaml(path)
    return GridConfig.from_dict(raw.get("grid", raw))


def load_batch(path: Path) -> List[GridConfig]:
    """Every entry of the `grids:` list."""
    raw = _read_yaml(path)
    grids = raw.get("grids")
    if not isinstance(grids, list) or not grids:
        raise ConfigurationError(f"{path}: expected a non-empty 'grids' list")
    return [GridConfig.from_dict(g) for g in grids]
