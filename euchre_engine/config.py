"""
Scoring configuration for a Euchre match.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class GameConfig:
    """Point table and match length."""

    winning_score: int = 10

    points_made: int = 1  # Calling team takes 3 or 4 tricks
    points_march: int = 2  # Calling team takes all 5
    points_march_alone: int = 4  # Lone caller takes all 5
    points_euchre: int = 2  # Defenders take 3 or more

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_CONFIG = GameConfig()
