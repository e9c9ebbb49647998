"""
Card and Suit definitions for Euchre
"""

from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    """Card suits in Euchre"""
    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    def __str__(self):
        symbols = {
            "C": "♣",
            "D": "♦",
            "H": "♥",
            "S": "♠"
        }
        return symbols[self.value]

    @property
    def color(self) -> str:
        """'red' for hearts and diamonds, 'black' for clubs and spades"""
        return "red" if self in (Suit.HEARTS, Suit.DIAMONDS) else "black"

    @classmethod
    def from_string(cls, s: str) -> "Suit":
        """Create Suit from a letter, symbol or full name ('H', '♥', 'hearts')"""
        mapping = {
            "C": cls.CLUBS,
            "D": cls.DIAMONDS,
            "H": cls.HEARTS,
            "S": cls.SPADES,
            "♣": cls.CLUBS,
            "♦": cls.DIAMONDS,
            "♥": cls.HEARTS,
            "♠": cls.SPADES,
            "CLUBS": cls.CLUBS,
            "DIAMONDS": cls.DIAMONDS,
            "HEARTS": cls.HEARTS,
            "SPADES": cls.SPADES,
        }
        try:
            return mapping[s.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid suit: {s}") from None

    def opposite(self) -> "Suit":
        """Get the same-color suit (for determining left bower)"""
        opposites = {
            Suit.CLUBS: Suit.SPADES,
            Suit.SPADES: Suit.CLUBS,
            Suit.DIAMONDS: Suit.HEARTS,
            Suit.HEARTS: Suit.DIAMONDS,
        }
        return opposites[self]


class Rank(Enum):
    """Card ranks in Euchre (9 through Ace)"""
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self):
        names = {
            9: "9",
            10: "10",
            11: "J",
            12: "Q",
            13: "K",
            14: "A"
        }
        return names[self.value]

    @classmethod
    def from_string(cls, s: str) -> "Rank":
        """Create Rank from string representation"""
        mapping = {
            "9": cls.NINE,
            "10": cls.TEN,
            "J": cls.JACK,
            "Q": cls.QUEEN,
            "K": cls.KING,
            "A": cls.ACE,
        }
        try:
            return mapping[s.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid rank: {s}") from None


@dataclass(frozen=True)
class Card:
    """A single Euchre card. Immutable; two cards are equal iff suit and rank match."""

    suit: Suit
    rank: Rank

    def __str__(self):
        return f"{self.rank}{self.suit}"

    def __repr__(self):
        return f"Card({self.suit.name}, {self.rank.name})"

    @property
    def image_key(self) -> str:
        """Asset name a presentation layer can use to draw this card"""
        return f"{self.suit.name.lower()}_{self.rank}.png"

    def is_right_bower(self, trump: Suit) -> bool:
        """Check if this card is the right bower (Jack of trump suit)"""
        return self.rank == Rank.JACK and self.suit == trump

    def is_left_bower(self, trump: Suit) -> bool:
        """Check if this card is the left bower (Jack of same color)"""
        return self.rank == Rank.JACK and self.suit == trump.opposite()

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """
        Create a Card from string like '9C', 'AS', 'JH', '10♦', etc.
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank = Rank.from_string(rank_str)
        suit = Suit.from_string(suit_str)

        return cls(suit, rank)
