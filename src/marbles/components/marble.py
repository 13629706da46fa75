from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from marbles.components.direction import Direction
from marbles.components.tile_geometry import TileGeometry


@dataclass(slots=True)
class Marble:
    """Mutable simulation state of the marble.

    ``x``/``y`` are continuous board units; ``y`` grows with the row index.
    """
    x: float = 0.0
    y: float = 0.0
    direction: Direction | None = None
    spawn_cell: Tuple[int, int] | None = None
    transition_pending: bool = False

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def center_on(self, row: int, col: int, geometry: TileGeometry) -> None:
        self.x, self.y = geometry.cell_center(row, col)

    def spawn(self, row: int, col: int, geometry: TileGeometry, *, initial: bool = False) -> None:
        """Place the marble at rest on ``(row, col)``.

        Only the initial spawn records the cell as the respawn point.
        """
        self.center_on(row, col, geometry)
        self.direction = None
        self.transition_pending = False
        if initial or self.spawn_cell is None:
            self.spawn_cell = (row, col)

    def set_direction(self, direction: Direction) -> bool:
        """Start rolling; ignored unless at rest with no transition pending."""
        if self.direction is not None or self.transition_pending:
            return False
        self.direction = direction
        return True
