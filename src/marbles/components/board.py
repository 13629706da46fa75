from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from marbles.components.tile_kind import TileKind

Cell = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable grid of tile kinds for one level.

    Coordinates outside the grid read as ``TileKind.HOLE`` so that rolling off
    the edge behaves like falling into a hole.
    """
    rows: int
    cols: int
    tiles: Tuple[Tuple[TileKind, ...], ...]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def kind_at(self, row: int, col: int) -> TileKind:
        if not self.in_bounds(row, col):
            return TileKind.HOLE
        return self.tiles[row][col]

    def cells(self) -> Iterator[Tuple[int, int, TileKind]]:
        for r, line in enumerate(self.tiles):
            for c, kind in enumerate(line):
                yield r, c, kind
