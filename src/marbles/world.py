from __future__ import annotations

from typing import Tuple

from esper import World

from marbles.components.board_catalog import BoardCatalog, BoardSpecError
from marbles.components.game_state import GameMode, GameState
from marbles.components.level_progress import LevelProgress
from marbles.components.marble import Marble
from marbles.components.pending_transition import PendingTransition
from marbles.components.tile_geometry import TileGeometry
from marbles.constants import START_CELL, TILE_SIZE
from marbles.events.bus import EventBus
from marbles.factories.boards import create_default_catalog


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.PLAYING,
    *,
    catalog: BoardCatalog | None = None,
    geometry: TileGeometry | None = None,
    start_cell: Tuple[int, int] = START_CELL,
) -> World:
    """Build the world with a single maze entity.

    The maze starts with a pending transition carrying ``start_cell`` so the
    first tick installs the first board and performs the initial spawn.
    """
    world = World()
    catalog = catalog if catalog is not None else create_default_catalog()
    geometry = geometry or TileGeometry(width=TILE_SIZE, height=TILE_SIZE)
    row, col = start_cell
    if not (0 <= row < catalog.rows and 0 <= col < catalog.cols):
        raise BoardSpecError(
            f"Start cell ({row}, {col}) lies outside a {catalog.rows}x{catalog.cols} board"
        )

    world.create_entity(GameState(mode=initial_mode))
    marble = Marble(spawn_cell=(row, col), transition_pending=True)
    marble.center_on(row, col, geometry)
    world.create_entity(
        marble,
        catalog,
        geometry,
        LevelProgress(),
        PendingTransition(ticks_remaining=0, spawn_cell=(row, col)),
    )
    return world


def maze_entity(world: World) -> int | None:
    """Return the entity that owns the marble, board and catalog."""
    for ent, _ in world.get_component(Marble):
        return ent
    return None
