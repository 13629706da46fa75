from enum import Enum


class TileKind(Enum):
    """Closed set of board cell categories."""
    PLAIN = "plain"
    BUMPER = "bumper"
    HOLE = "hole"
    STAR = "star"

    @classmethod
    def from_token(cls, token: str) -> "TileKind":
        """Parse a lower-case layout token such as ``"star"``.

        Raises ValueError for anything outside the closed set.
        """
        if isinstance(token, TileKind):
            return token
        try:
            return cls(str(token).strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unknown tile kind '{token}'") from exc
