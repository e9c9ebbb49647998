"""
Player seats for Euchre
"""

from typing import Any, Dict

NUM_PLAYERS = 4


def team_for_index(index: int) -> int:
    """Team of a seat: 0 for seats 0 & 2, 1 for seats 1 & 3"""
    return index % 2


def partner_index(index: int) -> int:
    """Seat across the table"""
    return (index + 2) % NUM_PLAYERS


class Player:
    """A seat at the table. Team and partner are derived from the index."""

    def __init__(self, name: str, index: int):
        """
        Initialize a player.

        Args:
            name: Player's display name
            index: Position at table (0-3), fixed for the whole game
        """
        if not 0 <= index < NUM_PLAYERS:
            raise ValueError(f"Player index must be 0-3, got {index}")
        self.name = name
        self.index = index

    @property
    def team(self) -> int:
        return team_for_index(self.index)

    @property
    def partner_index(self) -> int:
        return partner_index(self.index)

    def __eq__(self, other):
        if not isinstance(other, Player):
            return False
        return self.name == other.name and self.index == other.index

    def __hash__(self):
        return hash((self.name, self.index))

    def __str__(self):
        return f"{self.name} (P{self.index})"

    def __repr__(self):
        return f"Player(name={self.name}, index={self.index})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert player to dictionary for JSON serialization"""
        return {
            "name": self.name,
            "index": self.index,
            "team": self.team,
        }
