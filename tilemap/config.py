"""Simple configuration loader for tilemap."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class PathfindingConfig:
    """Defaults applied to every :class:`~tilemap.movement.pathfinding.Pathfinder`."""

    require_start_tile: bool = False
    max_expansions: Optional[int] = None


@dataclass
class LoggingConfig:
    """Log levels for the ``tilemap`` package loggers."""

    global_level: str = "WARNING"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    pathfinding: PathfindingConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    path_data = data.get("pathfinding") or {}
    max_expansions = path_data.get("max_expansions")
    if max_expansions is not None:
        max_expansions = int(max_expansions)
        if max_expansions <= 0:
            raise ValueError("pathfinding.max_expansions must be positive")
    pathfinding = PathfindingConfig(
        require_start_tile=bool(path_data.get("require_start_tile", False)),
        max_expansions=max_expansions,
    )

    log_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(log_data.get("global_level", "WARNING")).upper(),
        module_levels=dict(log_data.get("module_levels") or {}),
    )

    return Config(pathfinding=pathfinding, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "PathfindingConfig",
    "LoggingConfig",
    "load_config",
]
