# YAML-backed pathfinding configuration
# src/pathing/config.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from monitoring.bus import EventBus
from spec.pathfinding import TraversabilityOracle
from .astar import AStarPathfinder
from .base import PathfindingStrategy
from .breadth_first import BreadthFirstPathfinder
from .heuristics import HEURISTICS, heuristic_by_name

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
DEFAULT_CONFIG_PATH = CONFIG_ROOT / "pathfinding.yaml"

ALGORITHMS = ("astar", "breadth_first")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PathfindingConfig:
    """Strategy selection and tuning knobs, usually loaded from YAML."""

    algorithm: str = "astar"
    heuristic: str = "chebyshev"
    heuristic_unit: float = 1.0
    max_expansions: Optional[int] = None
    log_level: str = "INFO"
    events_log: Optional[str] = None

    def __post_init__(self) -> None:
        self.algorithm = self.algorithm.lower()
        self.heuristic = self.heuristic.lower()
        self.log_level = self.log_level.upper()
        if self.algorithm not in ALGORITHMS:
            raise ValueError(
                f"Unknown algorithm {self.algorithm!r}; expected one of {list(ALGORITHMS)}"
            )
        if self.heuristic not in HEURISTICS:
            raise ValueError(
                f"Unknown heuristic {self.heuristic!r}; expected one of {sorted(HEURISTICS)}"
            )
        if self.heuristic_unit <= 0:
            raise ValueError(f"heuristic_unit must be positive, got {self.heuristic_unit}")
        if self.max_expansions is not None and self.max_expansions < 0:
            raise ValueError(f"max_expansions must be >= 0, got {self.max_expansions}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {self.log_level!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PathfindingConfig":
        """
        Convenience constructor from a plain dict (e.g. YAML).

        Wrongly typed values raise ValueError naming the key.
        """
        max_expansions = data.get("max_expansions")
        events_log = data.get("events_log")
        return cls(
            algorithm=_require_str(data, "algorithm", "astar"),
            heuristic=_require_str(data, "heuristic", "chebyshev"),
            heuristic_unit=_require_number(data, "heuristic_unit", 1.0),
            max_expansions=(
                None if max_expansions is None else _require_int(max_expansions, "max_expansions")
            ),
            log_level=_require_str(data, "log_level", "INFO"),
            events_log=None if events_log is None else _require_str(data, "events_log", ""),
        )


def _require_str(data: Dict[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got {value!r}")
    return value


def _require_number(data: Dict[str, Any], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number, got {value!r}")
    return float(value)


def _require_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer, got {value!r}")
    return value


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML mapping from `path`."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def load_config(path: Optional[Path] = None) -> PathfindingConfig:
    """
    Load PathfindingConfig from YAML.

    Reads the `pathfinding` section if present, otherwise the top-level
    mapping. Defaults to config/pathfinding.yaml.
    """
    raw = _load_yaml(path or DEFAULT_CONFIG_PATH)
    section = raw.get("pathfinding", raw)
    if not isinstance(section, dict):
        raise ValueError("'pathfinding' section must be a mapping")
    return PathfindingConfig.from_dict(section)


def build_pathfinder(
    config: PathfindingConfig,
    oracle: TraversabilityOracle,
    bus: Optional[EventBus] = None,
) -> PathfindingStrategy:
    """Instantiate the configured strategy over `oracle`."""
    if config.algorithm == "breadth_first":
        return BreadthFirstPathfinder(
            oracle,
            max_expansions=config.max_expansions,
            bus=bus,
        )
    return AStarPathfinder(
        oracle,
        heuristic_by_name(config.heuristic, unit=config.heuristic_unit),
        max_expansions=config.max_expansions,
        bus=bus,
    )
