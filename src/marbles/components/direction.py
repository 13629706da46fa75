from __future__ import annotations

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Travel direction of the marble. A stationary marble has no Direction (None)."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Tuple[int, int]:
        """(row, col) offset of one step in this direction."""
        return _DELTAS[self]

    @property
    def horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def decreasing(self) -> bool:
        """True when travel moves toward smaller coordinates."""
        return self in (Direction.LEFT, Direction.UP)

    @classmethod
    def from_token(cls, token: str) -> Direction | None:
        """Return the direction named by ``token`` or None if it is not one."""
        if isinstance(token, Direction):
            return token
        if not isinstance(token, str):
            return None
        try:
            return cls(token.strip().lower())
        except ValueError:
            return None


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}
