from __future__ import annotations

from typing import Any

from esper import World

from marbles.components.board import Board
from marbles.components.game_state import GameMode
from marbles.components.level_progress import LevelProgress
from marbles.components.marble import Marble
from marbles.components.tile_geometry import TileGeometry
from marbles.components.tile_kind import TileKind
from marbles.constants import MARBLE_COLOR, TILE_COLORS, VICTORY_MARBLE_COLOR
from marbles.events.bus import EventBus
from marbles.ui.layout import board_to_screen, compute_board_geometry
from marbles.utils.game_state import get_game_state

PADDING = 2


class RenderSystem:
    """Draws the current board, the marble and the level banner.

    Reads world state only; called from the window's ``on_draw``.
    """

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        # Screen-space layout of the last frame, kept for headless inspection.
        self.last_tile_layout: dict[tuple[int, int], dict[str, Any]] = {}
        self.last_marble_center: tuple[float, float] | None = None
        self.last_marble_color: tuple[int, int, int] | None = None

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True

        entries = self.world.get_components(Marble, TileGeometry, LevelProgress)
        if not entries:
            return
        ent, (marble, geometry, progress) = entries[0]
        board = self.world.try_component(ent, Board)
        if board is None:
            return
        state = get_game_state(self.world)
        victory = state is not None and state.mode == GameMode.VICTORY

        tile_size, start_x, start_y = compute_board_geometry(self.window.width, self.window.height, board.rows, board.cols)
        self.last_tile_layout = {}
        draw_size = max(tile_size - PADDING, 1)
        for row, col, kind in board.cells():
            cx, cy = board_to_screen(
                *geometry.cell_center(row, col),
                geometry.width, geometry.height, board.rows, tile_size, start_x, start_y,
            )
            self.last_tile_layout[(row, col)] = {"kind": kind, "center": (cx, cy), "size": draw_size}
            if headless:
                continue
            color = TILE_COLORS[kind.value]
            arcade.draw_lbwh_rectangle_filled(cx - draw_size / 2, cy - draw_size / 2, draw_size, draw_size, color)
            if kind is TileKind.STAR:
                arcade.draw_circle_outline(cx, cy, draw_size * 0.3, (255, 255, 255), 2)
            elif kind is TileKind.BUMPER:
                arcade.draw_lbwh_rectangle_outline(cx - draw_size / 2, cy - draw_size / 2, draw_size, draw_size, (240, 200, 180), 3)

        mx, my = board_to_screen(
            marble.x, marble.y, geometry.width, geometry.height, board.rows, tile_size, start_x, start_y,
        )
        marble_color = VICTORY_MARBLE_COLOR if victory else MARBLE_COLOR
        self.last_marble_center = (mx, my)
        self.last_marble_color = marble_color
        if headless:
            return
        arcade.draw_circle_filled(mx, my, tile_size * 0.35, marble_color)

        banner_y = start_y + board.rows * tile_size + 12
        if victory:
            label = f"All {progress.level} boards cleared!"
        else:
            label = f"Level {progress.level}    Falls {progress.falls}"
        arcade.draw_text(label, self.window.width / 2, banner_y, (255, 255, 255), 18, anchor_x="center")
