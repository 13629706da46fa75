from dataclasses import dataclass

@dataclass(slots=True)
class LevelProgress:
    level: int = 0  # boards installed so far
    falls: int = 0
