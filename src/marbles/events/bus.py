from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_KEY_PRESS = "key_press"                      # payload: symbol=int, modifiers=int
EVENT_DIRECTION_COMMAND = "direction_command"      # payload: direction=str ("left"|"right"|"up"|"down")
EVENT_DIRECTION_CHANGED = "direction_changed"      # payload: direction=Direction


# ============================================================================
# MARBLE & TILES
# ============================================================================
EVENT_TILE_TRIGGERED = "tile_triggered"            # payload: kind=TileKind, row=int, col=int
EVENT_MARBLE_STOPPED = "marble_stopped"            # payload: row=int, col=int
EVENT_MARBLE_FELL = "marble_fell"                  # payload: row=int, col=int, spawn_row=int, spawn_col=int
EVENT_STAR_REACHED = "star_reached"                # payload: row=int, col=int, level=int


# ============================================================================
# LEVELS & GAME FLOW
# ============================================================================
EVENT_BOARD_INSTALLED = "board_installed"          # payload: level=int, rows=int, cols=int
EVENT_GAME_OVER = "game_over"                      # payload: level=int
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
