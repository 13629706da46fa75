from esper import World

from marbles.components.direction import Direction
from marbles.components.game_state import GameMode
from marbles.components.marble import Marble
from marbles.constants import KEY_DIRECTION_TOKENS
from marbles.events.bus import (
    EventBus,
    EVENT_DIRECTION_CHANGED,
    EVENT_DIRECTION_COMMAND,
    EVENT_KEY_PRESS,
)
from marbles.utils.game_state import get_game_state


class InputSystem:
    """Turns key presses and direction commands into marble directions.

    Commands only take effect while the marble is at rest and no board
    transition is pending; anything else is silently dropped.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)
        self.event_bus.subscribe(EVENT_DIRECTION_COMMAND, self.on_direction_command)

    def on_key_press(self, sender, **kwargs):
        token = KEY_DIRECTION_TOKENS.get(kwargs.get('symbol'))
        if token is None:
            return
        self.event_bus.emit(EVENT_DIRECTION_COMMAND, direction=token)

    def on_direction_command(self, sender, **kwargs):
        self.apply(kwargs.get('direction'))

    def apply(self, token) -> bool:
        direction = Direction.from_token(token)
        if direction is None:
            return False
        state = get_game_state(self.world)
        if state is not None and state.mode != GameMode.PLAYING:
            return False
        accepted = False
        for _, marble in self.world.get_component(Marble):
            if marble.set_direction(direction):
                accepted = True
        if accepted:
            self.event_bus.emit(EVENT_DIRECTION_CHANGED, direction=direction)
        return accepted
