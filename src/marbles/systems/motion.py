"""Per-tick marble motion, tile triggers and board transitions."""
from __future__ import annotations

import logging

from esper import World

from marbles.components.board import Board
from marbles.components.board_catalog import BoardCatalog
from marbles.components.game_state import GameMode
from marbles.components.level_progress import LevelProgress
from marbles.components.marble import Marble
from marbles.components.pending_transition import PendingTransition
from marbles.components.tile_geometry import TileGeometry
from marbles.components.tile_kind import TileKind
from marbles.constants import TRANSITION_DELAY_TICKS
from marbles.events.bus import (
    EVENT_BOARD_INSTALLED,
    EVENT_GAME_OVER,
    EVENT_MARBLE_FELL,
    EVENT_MARBLE_STOPPED,
    EVENT_STAR_REACHED,
    EVENT_TICK,
    EVENT_TILE_TRIGGERED,
    EventBus,
)
from marbles.systems.effects import resolve_effect
from marbles.systems.proximity import Trigger, detect_trigger
from marbles.systems.termination import is_game_over
from marbles.utils.game_state import get_game_state, set_game_mode

logger = logging.getLogger(__name__)


class MotionSystem:
    """Advances the marble once per tick.

    Each tick either completes a pending board transition, fires the effect of
    a tile the marble has reached, or moves the marble one step along its
    direction. All state changes and events of a tick happen inside a single
    ``process`` call.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        transition_delay_ticks: int = TRANSITION_DELAY_TICKS,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.transition_delay_ticks = max(0, int(transition_delay_ticks))
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs) -> None:
        self.process()

    def process(self) -> None:
        state = get_game_state(self.world)
        if state is not None and state.mode == GameMode.VICTORY:
            return
        for ent, (marble, catalog, geometry) in self.world.get_components(Marble, BoardCatalog, TileGeometry):
            self._step(ent, marble, catalog, geometry)

    def _step(self, ent: int, marble: Marble, catalog: BoardCatalog, geometry: TileGeometry) -> None:
        if marble.transition_pending:
            self._advance_transition(ent, marble, catalog, geometry)
            return
        if marble.direction is None:
            return
        board = self.world.try_component(ent, Board)
        if board is None:
            return
        trigger = detect_trigger(board, geometry, marble.direction, marble.position)
        if trigger is not None:
            self._apply_trigger(ent, trigger, marble, geometry)
            return
        step = geometry.speed(marble.direction)
        dr, dc = marble.direction.delta
        marble.x += dc * step
        marble.y += dr * step

    def _apply_trigger(self, ent: int, trigger: Trigger, marble: Marble, geometry: TileGeometry) -> None:
        row, col = trigger.cell
        resolve_effect(trigger.kind, trigger.cell, marble, geometry)
        self.event_bus.emit(EVENT_TILE_TRIGGERED, kind=trigger.kind, row=row, col=col)
        progress = self.world.try_component(ent, LevelProgress)
        if trigger.kind is TileKind.STAR:
            self.world.add_component(ent, PendingTransition(ticks_remaining=self.transition_delay_ticks))
            level = progress.level if progress is not None else 0
            self.event_bus.emit(EVENT_STAR_REACHED, row=row, col=col, level=level)
        elif trigger.kind is TileKind.HOLE:
            if progress is not None:
                progress.falls += 1
            spawn_row, spawn_col = marble.spawn_cell
            logger.debug("Marble fell at (%d, %d); respawning at (%d, %d)", row, col, spawn_row, spawn_col)
            self.event_bus.emit(EVENT_MARBLE_FELL, row=row, col=col, spawn_row=spawn_row, spawn_col=spawn_col)
        elif trigger.kind is TileKind.BUMPER:
            self.event_bus.emit(EVENT_MARBLE_STOPPED, row=row, col=col)

    def _advance_transition(self, ent: int, marble: Marble, catalog: BoardCatalog, geometry: TileGeometry) -> None:
        pending = self.world.try_component(ent, PendingTransition)
        if pending is None:
            pending = PendingTransition(ticks_remaining=self.transition_delay_ticks)
            self.world.add_component(ent, pending)
        if pending.ticks_remaining > 0:
            pending.ticks_remaining -= 1
            return
        # Checked before pulling so an exhausted catalog ends the game instead.
        if is_game_over(marble, catalog):
            self._finish_game(ent)
            return
        board = catalog.load_next()
        self.world.add_component(ent, board)
        if pending.spawn_cell is not None:
            row, col = pending.spawn_cell
            marble.spawn(row, col, geometry, initial=True)
        else:
            row, col = geometry.cell_at(*marble.position)
            marble.spawn(row, col, geometry)
        self.world.remove_component(ent, PendingTransition)
        progress = self.world.try_component(ent, LevelProgress)
        level = 0
        if progress is not None:
            progress.level += 1
            level = progress.level
        logger.debug("Installed board %d (%d remaining)", level, catalog.remaining)
        self.event_bus.emit(EVENT_BOARD_INSTALLED, level=level, rows=board.rows, cols=board.cols)

    def _finish_game(self, ent: int) -> None:
        progress = self.world.try_component(ent, LevelProgress)
        level = progress.level if progress is not None else 0
        logger.info("All boards cleared after %d levels", level)
        set_game_mode(self.world, self.event_bus, GameMode.VICTORY)
        self.event_bus.emit(EVENT_GAME_OVER, level=level)
