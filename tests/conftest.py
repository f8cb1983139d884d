# tests/conftest.py
import logging

import pytest

from tests.helpers import build_map, hex_area


@pytest.fixture
def radius2_map():
    """Uniform cost map of the 19 hexes within two steps of the origin."""
    return build_map(hex_area(2))


@pytest.fixture
def reset_tilemap_loggers():
    """Restore logger levels touched by ``configure_logging``."""
    names = ["tilemap", "tilemap.movement.pathfinding", "tilemap.core.tile_map"]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)
