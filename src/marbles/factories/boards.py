from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Sequence

from marbles.components.board_catalog import BoardCatalog, BoardSpec, BoardSpecError
from marbles.constants import GRID_COLS, GRID_ROWS

logger = logging.getLogger(__name__)


def _spec(default: str, overrides: Sequence[tuple]) -> BoardSpec:
    return BoardSpec.from_tokens(GRID_ROWS, GRID_COLS, default, overrides)


# Built-in levels, played in order. Every board keeps (0, 0) plain so the
# respawn point stays usable, and each star cell is a safe landing spot on the
# following board.
DEFAULT_BOARD_SPECS: Sequence[BoardSpec] = (
    # Roll right to the star.
    _spec("plain", [
        (0, 5, "star"),
        (3, 3, "hole"),
        (5, 1, "hole"),
    ]),
    # Stop against the bumpers, then slide left.
    _spec("plain", [
        (0, 6, "bumper"),
        (5, 5, "bumper"),
        (4, 1, "star"),
        (2, 2, "hole"),
        (6, 6, "hole"),
        (7, 0, "hole"),
    ]),
    _spec("plain", [
        (2, 0, "bumper"),
        (0, 1, "bumper"),
        (1, 6, "bumper"),
        (7, 5, "star"),
        (3, 3, "hole"),
        (4, 4, "hole"),
        (5, 2, "hole"),
        (6, 7, "hole"),
    ]),
    _spec("plain", [
        (7, 0, "bumper"),
        (0, 2, "bumper"),
        (2, 1, "star"),
        (1, 4, "hole"),
        (3, 6, "hole"),
        (4, 3, "hole"),
        (5, 6, "hole"),
        (6, 2, "hole"),
    ]),
    _spec("plain", [
        (2, 0, "bumper"),
        (1, 7, "bumper"),
        (2, 7, "bumper"),
        (6, 6, "star"),
        (3, 4, "hole"),
        (4, 2, "hole"),
        (5, 3, "hole"),
        (7, 7, "hole"),
    ]),
)


def create_default_catalog() -> BoardCatalog:
    return BoardCatalog(DEFAULT_BOARD_SPECS)


def parse_board_specs(entries: Iterable[Any]) -> List[BoardSpec]:
    """Convert raw layout mappings into validated specs.

    Each entry looks like ``{"rows": 8, "cols": 8, "default": "plain",
    "overrides": [[0, 5, "star"], ...]}``.
    """
    specs: List[BoardSpec] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise BoardSpecError(f"Board entry {index} must be an object")
        try:
            rows = entry["rows"]
            cols = entry["cols"]
        except KeyError as exc:
            raise BoardSpecError(f"Board entry {index} is missing {exc.args[0]!r}") from exc
        spec = BoardSpec.from_tokens(
            rows,
            cols,
            entry.get("default", "plain"),
            entry.get("overrides", ()),
        )
        spec.validate()
        specs.append(spec)
    return specs


def load_board_specs(path: Path | str) -> List[BoardSpec]:
    """Read board layouts from a JSON file (a list, or an object with a ``boards`` list)."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except json.JSONDecodeError as exc:
        raise BoardSpecError(f"{path} is not valid JSON: {exc}") from exc
    if isinstance(data, dict):
        data = data.get("boards")
    if not isinstance(data, list):
        raise BoardSpecError(f"{path} must contain a list of boards")
    specs = parse_board_specs(data)
    logger.debug("Loaded %d board layouts from %s", len(specs), path)
    return specs


def load_catalog(path: Path | str) -> BoardCatalog:
    return BoardCatalog(load_board_specs(path))
