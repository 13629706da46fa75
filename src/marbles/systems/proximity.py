"""Trigger-zone detection for special tiles.

A tile fires once the marble, nudged forward by half a tick of travel, has
reached or passed the center of the cell it currently occupies. The half-step
tolerance keeps discrete stepping from skipping over the exact center.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from marbles.components.board import Board
from marbles.components.direction import Direction
from marbles.components.tile_geometry import TileGeometry
from marbles.components.tile_kind import TileKind

# Kinds that fire when the marble sits on them.
LANDED_KINDS = frozenset({TileKind.STAR, TileKind.HOLE})
# Kinds that fire one cell early, from the neighbouring cell.
APPROACHING_KINDS = frozenset({TileKind.BUMPER})
# Slack on the zone boundary, as a fraction of one step, absorbing float
# drift from accumulated fractional steps.
BOUNDARY_TOLERANCE = 1e-6


@dataclass(frozen=True, slots=True)
class Trigger:
    kind: TileKind
    cell: Tuple[int, int]  # cell the marble comes to rest on


def reached_center(direction: Direction | None, position: Tuple[float, float], center: Tuple[float, float], speed: float) -> bool:
    """True when ``position`` is within the trigger zone of ``center``."""
    if direction is None:
        return False
    axis = 0 if direction.horizontal else 1
    pos = position[axis]
    target = center[axis]
    reach = speed / 2 + speed * BOUNDARY_TOLERANCE
    if direction.decreasing:
        return pos <= target + reach
    return pos >= target - reach


def next_cell(cell: Tuple[int, int], direction: Direction) -> Tuple[int, int]:
    dr, dc = direction.delta
    return (cell[0] + dr, cell[1] + dc)


def detect_trigger(
    board: Board,
    geometry: TileGeometry,
    direction: Direction | None,
    position: Tuple[float, float],
) -> Trigger | None:
    """Return the tile effect the marble has just entered, if any."""
    if direction is None:
        return None
    current = geometry.cell_at(*position)
    center = geometry.cell_center(*current)
    if not reached_center(direction, position, center, geometry.speed(direction)):
        return None
    current_kind = board.kind_at(*current)
    if current_kind in LANDED_KINDS:
        return Trigger(kind=current_kind, cell=current)
    ahead = next_cell(current, direction)
    ahead_kind = board.kind_at(*ahead)
    if ahead_kind in APPROACHING_KINDS:
        return Trigger(kind=ahead_kind, cell=current)
    return None
