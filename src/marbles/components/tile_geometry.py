from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from marbles.components.direction import Direction
from marbles.constants import SPEED_FRACTION


@dataclass(frozen=True, slots=True)
class TileGeometry:
    """Tile dimensions in board units and the conversions between cells and positions."""
    width: float
    height: float
    speed_fraction: float = SPEED_FRACTION

    def cell_center(self, row: int, col: int) -> Tuple[float, float]:
        """Return the (x, y) center of a cell."""
        return (col * self.width + self.width / 2, row * self.height + self.height / 2)

    def cell_at(self, x: float, y: float) -> Tuple[int, int]:
        """Return the (row, col) containing a position; may lie outside the grid."""
        return (math.floor(y / self.height), math.floor(x / self.width))

    def speed(self, direction: Direction) -> float:
        """Distance travelled per tick along ``direction``."""
        edge = self.width if direction.horizontal else self.height
        return self.speed_fraction * edge
