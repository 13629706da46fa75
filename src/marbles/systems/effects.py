from __future__ import annotations

from typing import Tuple

from marbles.components.marble import Marble
from marbles.components.tile_geometry import TileGeometry
from marbles.components.tile_kind import TileKind


class UnhandledTileKindError(RuntimeError):
    """A tile kind with no defined effect reached the resolver."""

    def __init__(self, kind) -> None:
        super().__init__(f"No effect defined for tile kind {kind!r}")
        self.kind = kind


def resolve_effect(kind: TileKind, cell: Tuple[int, int], marble: Marble, geometry: TileGeometry) -> None:
    """Apply the consequence of a triggered tile to the marble.

    Star: center on ``cell`` and flag a pending board transition.
    Hole: respawn at the recorded spawn cell (direction resets).
    Bumper: center on ``cell`` and stop.
    """
    if kind is TileKind.STAR:
        marble.center_on(*cell, geometry)
        marble.transition_pending = True
    elif kind is TileKind.HOLE:
        if marble.spawn_cell is None:
            raise RuntimeError(f"Marble fell into {cell} before its spawn cell was recorded")
        marble.spawn(*marble.spawn_cell, geometry)
    elif kind is TileKind.BUMPER:
        marble.center_on(*cell, geometry)
        marble.direction = None
    else:
        raise UnhandledTileKindError(kind)
