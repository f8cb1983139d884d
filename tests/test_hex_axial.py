from tilemap.coords.hex.axial import AxialCoords
from tilemap.coords.hex.cube import CubeCoords
from tilemap.core.traits import TileCoords


def test_splat():
    coords = AxialCoords.splat(3)
    assert (coords.q, coords.r) == (3, 3)


def test_adjacent_around_origin():
    adjacent = AxialCoords.splat(0).adjacent_coords()
    assert len(adjacent) == 6
    assert set(adjacent) == {
        AxialCoords(1, -1),
        AxialCoords(1, 0),
        AxialCoords(0, 1),
        AxialCoords(-1, 1),
        AxialCoords(-1, 0),
        AxialCoords(0, -1),
    }


def test_adjacent_off_center():
    adjacent = AxialCoords(2, -3).adjacent_coords()
    assert set(adjacent) == {
        AxialCoords(3, -3),
        AxialCoords(2, -2),
        AxialCoords(1, -2),
        AxialCoords(1, -3),
        AxialCoords(2, -4),
        AxialCoords(3, -4),
    }


def test_distance():
    origin = AxialCoords(0, 0)
    assert origin.distance(origin) == 0
    assert origin.distance(AxialCoords(1, 0)) == 1
    assert origin.distance(AxialCoords(1, 1)) == 2
    assert origin.distance(AxialCoords(2, -1)) == 2
    assert AxialCoords(-2, 1).distance(AxialCoords(1, -1)) == 3


def test_arithmetic_and_s():
    assert AxialCoords(1, 2) + AxialCoords(3, -1) == AxialCoords(4, 1)
    assert AxialCoords(1, 2) - AxialCoords(3, -1) == AxialCoords(-2, 3)
    assert AxialCoords(2, -5).s == 3


def test_cube_conversion():
    coords = AxialCoords(2, -1)
    assert coords.to_cube() == CubeCoords(2, -1, -1)
    assert AxialCoords.from_cube(CubeCoords(2, -1, -1)) == coords


def test_usable_as_dict_key():
    seen = {AxialCoords(1, 1): "a"}
    assert seen[AxialCoords(1, 1)] == "a"
    assert isinstance(AxialCoords(0, 0), TileCoords)
