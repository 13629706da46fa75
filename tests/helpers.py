from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from esper import World

from marbles.components.board import Board
from marbles.components.board_catalog import BoardCatalog, BoardSpec
from marbles.components.level_progress import LevelProgress
from marbles.components.marble import Marble
from marbles.components.tile_geometry import TileGeometry
from marbles.events.bus import EVENT_TICK, EventBus
from marbles.systems.input import InputSystem
from marbles.systems.motion import MotionSystem
from marbles.world import create_world, maze_entity

# 0.4 * 50 is exactly 20, so positions stay on whole numbers.
TEST_TILE = 50


@dataclass
class Game:
    bus: EventBus
    world: World
    motion: MotionSystem
    input: InputSystem


@dataclass
class MazeState:
    marble: Marble
    board: Board | None
    catalog: BoardCatalog
    geometry: TileGeometry
    progress: LevelProgress


def spec(rows: int, cols: int, overrides: Iterable[Sequence] = (), default: str = "plain") -> BoardSpec:
    return BoardSpec.from_tokens(rows, cols, default, overrides)


def make_game(
    specs: Sequence[BoardSpec],
    start_cell: Tuple[int, int] = (0, 0),
    *,
    delay: int = 0,
    install: bool = True,
    tile: float = TEST_TILE,
) -> Game:
    """Build a world over ``specs`` and, by default, install the first board."""
    bus = EventBus()
    world = create_world(
        bus,
        catalog=BoardCatalog(specs),
        geometry=TileGeometry(width=tile, height=tile),
        start_cell=start_cell,
    )
    game = Game(
        bus=bus,
        world=world,
        motion=MotionSystem(world, bus, transition_delay_ticks=delay),
        input=InputSystem(world, bus),
    )
    if install:
        tick(bus)
    return game


def maze_state(world: World) -> MazeState:
    ent = maze_entity(world)
    assert ent is not None, "Expected a maze entity"
    return MazeState(
        marble=world.component_for_entity(ent, Marble),
        board=world.try_component(ent, Board),
        catalog=world.component_for_entity(ent, BoardCatalog),
        geometry=world.component_for_entity(ent, TileGeometry),
        progress=world.component_for_entity(ent, LevelProgress),
    )


def tick(bus: EventBus, count: int = 1, dt: float = 1 / 60) -> None:
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


def center(row: int, col: int) -> Tuple[float, float]:
    return TileGeometry(width=TEST_TILE, height=TEST_TILE).cell_center(row, col)
