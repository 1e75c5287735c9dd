from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .ranking import RANKERS

VALUE_ORDERS = ("ascending", "least_used")


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


@dataclass
class SolverConfig:
    # "full" rebuilds the ranked set after every change, "incremental" rescoring peers only
    ranker: str = "full"
    # candidate order inside a new Move: "ascending" or "least_used" (global digit usage)
    value_order: str = "ascending"
    # stop with budget_exceeded once forward+backward+lateral reaches this
    max_steps: Optional[int] = None
    # reject seeds that already repeat a digit in some row/column/box
    precheck: bool = False
    # log a progress line every N transitions (0 = off)
    progress_every: int = 0

    def __post_init__(self):
        if self.ranker not in RANKERS:
            raise ValueError(f"unknown ranker {self.ranker!r}; choose from {sorted(RANKERS)}")
        if self.value_order not in VALUE_ORDERS:
            raise ValueError(f"unknown value order {self.value_order!r}; choose from {list(VALUE_ORDERS)}")
        if self.max_steps is not None and self.max_steps < 0:
            raise ValueError("max_steps must be >= 0")
        if self.progress_every < 0:
            raise ValueError("progress_every must be >= 0")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def config_from_dict(data: Dict[str, Any], **overrides) -> SolverConfig:
    """Build a SolverConfig from a mapping, ignoring unrelated keys."""
    known = {f.name for f in fields(SolverConfig)}
    merged = merge_overrides({k: v for k, v in dict(data).items() if k in known}, **overrides)
    return SolverConfig(**merged)


def load_config(path: str | Path | None = None, **overrides) -> SolverConfig:
    """Read a YAML config (solver settings may sit under a `solver:` key) and apply overrides."""
    data: Dict[str, Any] = {}
    if path is not None:
        raw = load_yaml(path)
        data = raw.get("solver", raw) or {}
    return config_from_dict(data, **overrides)
