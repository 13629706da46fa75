import pytest

from marbles.components.direction import Direction
from marbles.components.tile_geometry import TileGeometry


@pytest.mark.parametrize("row,col", [(0, 0), (1, 2), (7, 7), (-1, 0), (0, -1), (8, 3)])
def test_cell_center_round_trip(row, col):
    geometry = TileGeometry(width=64, height=48)
    assert geometry.cell_at(*geometry.cell_center(row, col)) == (row, col)


def test_positions_inside_a_cell_map_to_that_cell():
    geometry = TileGeometry(width=50, height=50)
    assert geometry.cell_at(0.0, 0.0) == (0, 0)
    assert geometry.cell_at(49.9, 49.9) == (0, 0)
    assert geometry.cell_at(50.0, 0.0) == (0, 1)
    assert geometry.cell_at(-0.1, 10.0) == (0, -1)


def test_speed_is_fraction_of_tile_edge():
    geometry = TileGeometry(width=50, height=100)
    assert geometry.speed(Direction.RIGHT) == pytest.approx(20.0)
    assert geometry.speed(Direction.LEFT) == pytest.approx(20.0)
    assert geometry.speed(Direction.UP) == pytest.approx(40.0)
    assert geometry.speed(Direction.DOWN) == pytest.approx(40.0)


def test_direction_tokens():
    assert Direction.from_token("left") is Direction.LEFT
    assert Direction.from_token(" UP ") is Direction.UP
    assert Direction.from_token("sideways") is None
    assert Direction.from_token(None) is None
    assert Direction.DOWN.delta == (1, 0)
    assert Direction.LEFT.delta == (0, -1)
