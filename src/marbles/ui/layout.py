from marbles.constants import BOTTOM_MARGIN, BOARD_MAX_WIDTH_PCT, BOARD_MAX_HEIGHT_PCT, HUD_HEIGHT

def compute_board_geometry(window_width: int, window_height: int, rows: int, cols: int):
    """Return (tile_size, start_x, start_y) for drawing a rows x cols board.

    ``start_x``/``start_y`` are the screen coordinates of the board's bottom-left corner.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - HUD_HEIGHT) * BOARD_MAX_HEIGHT_PCT
    tile_by_w = max_board_w / cols
    tile_by_h = max_board_h / rows
    tile_size = int(min(tile_by_w, tile_by_h))
    if tile_size < 8:
        tile_size = 8
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def board_to_screen(x: float, y: float, tile_width: float, tile_height: float, rows: int, tile_size: int, start_x: float, start_y: float):
    """Map a board-unit position (y grows downward by row) to screen coordinates (y up)."""
    sx = start_x + x * tile_size / tile_width
    sy = start_y + rows * tile_size - y * tile_size / tile_height
    return sx, sy
