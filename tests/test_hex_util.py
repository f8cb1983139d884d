import pytest

from tilemap.coords.hex.util import cube_distance, cube_round, round_half_away


@pytest.mark.parametrize(
    "fractional, expected",
    [
        ((0.0, 0.0, 0.0), (0, 0, 0)),
        ((0.4, -0.4, 0.0), (0, 0, 0)),
        ((0.6, -0.4, 0.0), (1, -1, 0)),
        ((0.6, -0.6, 0.0), (1, -1, 0)),
        ((1.4, -1.4, 0.0), (1, -1, 0)),
        ((2.0, -1.0, 0.0), (2, -1, -1)),
        ((3.0, -2.0, 0.0), (3, -2, -1)),
        ((-1.0, 4.0, 0.0), (-1, 4, -3)),
    ],
)
def test_cube_round(fractional, expected):
    result = cube_round(*fractional)
    assert result == expected
    assert sum(result) == 0


def test_cube_distance():
    assert cube_distance((0, 0, 0), (3, -1, -2)) == 3


@pytest.mark.parametrize(
    "fractional, expected",
    [
        ((0.5, -0.5, 0.0), (1, -1, 0)),
        ((-0.5, 0.5, 0.0), (-1, 1, 0)),
        ((1.5, -2.5, 1.0), (2, -3, 1)),
    ],
)
def test_cube_round_halves_go_away_from_zero(fractional, expected):
    assert cube_round(*fractional) == expected


def test_round_half_away():
    assert [round_half_away(x) for x in (0.5, -0.5, 2.5, -2.5, 0.4, -0.4, 1.6)] == [
        1, -1, 3, -3, 0, 0, 2,
    ]
