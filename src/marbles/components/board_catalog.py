from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, Sequence, Tuple

from marbles.components.board import Board
from marbles.components.tile_kind import TileKind

logger = logging.getLogger(__name__)

Override = Tuple[int, int, TileKind]


class BoardSpecError(ValueError):
    """A board layout is malformed and cannot be loaded."""


@dataclass(frozen=True, slots=True)
class BoardSpec:
    """Layout description for one level: a default kind plus sparse overrides."""
    rows: int
    cols: int
    default: TileKind = TileKind.PLAIN
    overrides: Tuple[Override, ...] = ()

    @classmethod
    def from_tokens(
        cls,
        rows: int,
        cols: int,
        default: str | TileKind = TileKind.PLAIN,
        overrides: Iterable[Sequence] = (),
    ) -> BoardSpec:
        """Build a spec from raw layout data, converting kind tokens."""
        try:
            default_kind = TileKind.from_token(default)
            parsed = []
            for entry in overrides:
                row, col, kind = entry
                parsed.append((int(row), int(col), TileKind.from_token(kind)))
            return cls(rows=int(rows), cols=int(cols), default=default_kind, overrides=tuple(parsed))
        except (TypeError, ValueError) as exc:
            raise BoardSpecError(f"Invalid board layout: {exc}") from exc

    def validate(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise BoardSpecError(f"Board dimensions must be positive, got {self.rows}x{self.cols}")
        if not isinstance(self.default, TileKind):
            raise BoardSpecError(f"Unknown default tile kind {self.default!r}")
        for row, col, kind in self.overrides:
            if not isinstance(kind, TileKind):
                raise BoardSpecError(f"Unknown tile kind {kind!r} at ({row}, {col})")
            if not (0 <= row < self.rows and 0 <= col < self.cols):
                raise BoardSpecError(
                    f"Override ({row}, {col}) lies outside a {self.rows}x{self.cols} board"
                )

    def build(self) -> Board:
        self.validate()
        grid = [[self.default] * self.cols for _ in range(self.rows)]
        # Later overrides win when the same cell is listed twice.
        for row, col, kind in self.overrides:
            grid[row][col] = kind
        return Board(rows=self.rows, cols=self.cols, tiles=tuple(tuple(line) for line in grid))


class BoardCatalog:
    """Ordered, one-shot queue of board layouts consumed as levels complete.

    Every entry is validated on construction, so a running game never meets a
    malformed layout.
    """

    def __init__(self, specs: Iterable[BoardSpec]) -> None:
        entries = list(specs)
        if not entries:
            raise BoardSpecError("Board catalog must contain at least one board")
        first = entries[0]
        for index, spec in enumerate(entries):
            spec.validate()
            if (spec.rows, spec.cols) != (first.rows, first.cols):
                raise BoardSpecError(
                    f"Board {index} is {spec.rows}x{spec.cols}; expected {first.rows}x{first.cols}"
                )
        self.rows = first.rows
        self.cols = first.cols
        self._entries: Deque[BoardSpec] = deque(entries)
        logger.debug("Board catalog loaded with %d boards of %dx%d", len(entries), self.rows, self.cols)

    @property
    def remaining(self) -> int:
        return len(self._entries)

    def is_exhausted(self) -> bool:
        return not self._entries

    def load_next(self) -> Board:
        """Remove the front entry and return its board.

        Callers check ``is_exhausted()`` first; pulling from an empty catalog
        raises IndexError.
        """
        if not self._entries:
            raise IndexError("Board catalog is exhausted")
        return self._entries.popleft().build()
