GRID_ROWS = 8
GRID_COLS = 8
# Edge length of one tile in board units. Marble positions are expressed in
# these units; the renderer scales them to the window.
TILE_SIZE = 64
BOTTOM_MARGIN = 20

# Per-tick marble speed as a fraction of one tile edge.
SPEED_FRACTION = 0.4

# Fixed tick rate the window driver uses (seconds per tick).
TICK_RATE = 1 / 60
# Pause between reaching a star and installing the next board, in ticks.
TRANSITION_DELAY_TICKS = 30

# Cell the marble is placed on when the first board is installed.
START_CELL = (0, 0)

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.90
BOARD_MAX_HEIGHT_PCT = 0.85
# Height reserved above the board for the level banner.
HUD_HEIGHT = 48

# Raw key symbols delivered by the window (pyglet key codes).
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_A = 97
KEY_D = 100
KEY_S = 115
KEY_W = 119

KEY_DIRECTION_TOKENS = {
    KEY_LEFT: "left",
    KEY_RIGHT: "right",
    KEY_UP: "up",
    KEY_DOWN: "down",
    KEY_A: "left",
    KEY_D: "right",
    KEY_W: "up",
    KEY_S: "down",
}

# Tile palette used by the renderer.
TILE_COLORS = {
    "plain": (58, 64, 82),
    "bumper": (170, 80, 60),
    "hole": (12, 12, 16),
    "star": (226, 196, 62),
}
MARBLE_COLOR = (200, 210, 230)
VICTORY_MARBLE_COLOR = (255, 215, 0)
