from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass(slots=True)
class PendingTransition:
    """Countdown before the next board is installed.

    ``spawn_cell`` is set only for the very first board; later boards place the
    marble on the cell it came to rest on.
    """
    ticks_remaining: int = 0
    spawn_cell: Optional[Tuple[int, int]] = None
