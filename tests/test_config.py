from pathlib import Path

import pytest

from tilemap.config import CONFIG, Config, load_config


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "nope.yaml")
    assert isinstance(cfg, Config)
    assert cfg.pathfinding.require_start_tile is False
    assert cfg.pathfinding.max_expansions is None
    assert cfg.logging.global_level == "WARNING"
    assert cfg.logging.module_levels == {}


def test_load_values_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "pathfinding:\n"
        "  require_start_tile: true\n"
        "  max_expansions: 500\n"
        "logging:\n"
        "  global_level: debug\n"
        "  module_levels:\n"
        "    tilemap.movement.pathfinding: INFO\n"
    )
    cfg = load_config(path)
    assert cfg.pathfinding.require_start_tile is True
    assert cfg.pathfinding.max_expansions == 500
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"tilemap.movement.pathfinding": "INFO"}


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path).pathfinding.max_expansions is None


def test_non_positive_expansion_limit_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("pathfinding:\n  max_expansions: 0\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_bundled_config_loaded_at_import() -> None:
    assert CONFIG.pathfinding.require_start_tile is False
    assert CONFIG.pathfinding.max_expansions is None
