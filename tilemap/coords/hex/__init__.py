"""Pre-made hexagonal coordinate systems."""

from .axial import AxialCoords
from .cube import CubeCoords
from .doubled import DoubledCoords
from .offset import OffsetCoords
from .util import cube_round

__all__ = ["AxialCoords", "CubeCoords", "DoubledCoords", "OffsetCoords", "cube_round"]
