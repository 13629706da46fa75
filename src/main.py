"""Entry point for the marble maze.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging
import sys
from pathlib import Path

from arcade import Window, run, set_background_color, color
from marbles.world import create_world
from marbles.constants import TICK_RATE
from marbles.events.bus import EVENT_KEY_PRESS, EVENT_TICK, EventBus
from marbles.factories.boards import load_catalog
from marbles.systems.input import InputSystem
from marbles.systems.motion import MotionSystem
from marbles.systems.render import RenderSystem


class MarbleMazeWindow(Window):
    def __init__(self, levels_path: Path | None = None):
        super().__init__(800, 700, "Marble Maze")
        self.set_update_rate(TICK_RATE)
        self.event_bus = EventBus()
        catalog = load_catalog(levels_path) if levels_path is not None else None
        self.world = create_world(self.event_bus, catalog=catalog)

        self.input_system = InputSystem(self.world, self.event_bus)
        self.motion_system = MotionSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = sys.argv[1:] if argv is None else argv
    levels_path = Path(args[0]) if args else None
    MarbleMazeWindow(levels_path)
    run()

if __name__ == "__main__":
    main()
