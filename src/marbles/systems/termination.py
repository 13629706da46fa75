from marbles.components.board_catalog import BoardCatalog
from marbles.components.marble import Marble


def is_game_over(marble: Marble, catalog: BoardCatalog) -> bool:
    """A star was reached and no boards remain to advance to."""
    return marble.transition_pending and catalog.is_exhausted()
