"""
Trick management for Euchre
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from .card import Card, Suit
from .errors import AlreadyPlayed, PlayerSittingOut, TrickNotComplete
from .player import NUM_PLAYERS
from .ranking import beats


class SeatState(Enum):
    """State of one seat within a trick"""
    PENDING = "pending"  # Still to play
    PLAYED = "played"
    EXCLUDED = "excluded"  # Partner of a lone caller, never plays


class Trick:
    """A single trick: one slot per seat, filled as cards are played"""

    def __init__(self, out_seat: Optional[int] = None):
        """
        Initialize a trick.

        Args:
            out_seat: Seat sitting out this round (partner of a lone caller)
        """
        self.out_seat = out_seat
        self.cards_played: List[Optional[Card]] = [None] * NUM_PLAYERS
        self.card_led: Optional[Card] = None
        self.lead_position: Optional[int] = None

    def seat_state(self, position: int) -> SeatState:
        if position == self.out_seat:
            return SeatState.EXCLUDED
        if self.cards_played[position] is None:
            return SeatState.PENDING
        return SeatState.PLAYED

    def check_can_play(self, position: int):
        """Raise if the seat may not add a card to this trick"""
        state = self.seat_state(position)
        if state is SeatState.EXCLUDED:
            raise PlayerSittingOut(f"Player {position} is sitting out this round")
        if state is SeatState.PLAYED:
            raise AlreadyPlayed(f"Player {position} already played to this trick")

    def add_card(self, position: int, card: Card):
        """Record a card for a seat; the first card played is the card led"""
        self.check_can_play(position)
        if self.card_led is None:
            self.card_led = card
            self.lead_position = position
        self.cards_played[position] = card

    def pending_seats(self) -> List[int]:
        return [
            pos for pos in range(NUM_PLAYERS)
            if self.seat_state(pos) is SeatState.PENDING
        ]

    def is_complete(self) -> bool:
        """Every seat except the sitting-out one has played"""
        return not self.pending_seats()

    def num_cards(self) -> int:
        return sum(1 for card in self.cards_played if card is not None)

    def get_winner(self, trump: Suit) -> int:
        """
        Determine which seat won the trick.

        The card led is the first candidate; the other seats are then
        scanned in index order and replace the best card only if they beat it.
        Starting from seat 0 instead would let an off-suit card there block
        the led suit whenever another seat led.
        """
        if not self.is_complete():
            raise TrickNotComplete(self.pending_seats())

        winning_position = self.lead_position
        winning_card = self.card_led
        for position, card in enumerate(self.cards_played):
            if card is None or position == self.lead_position:
                continue
            if beats(card, winning_card, trump):
                winning_position = position
                winning_card = card

        return winning_position

    def get_card_for_position(self, position: int) -> Optional[Card]:
        """Get the card played by a specific player position"""
        return self.cards_played[position]

    def __str__(self):
        cards_str = ", ".join(
            f"P{pos}: {card}" for pos, card in enumerate(self.cards_played) if card
        )
        return f"Trick(led={self.card_led}, cards=[{cards_str}])"

    def to_dict(self) -> Dict[str, Any]:
        """Convert trick to dictionary for JSON serialization"""
        return {
            "card_led": str(self.card_led) if self.card_led else None,
            "lead_position": self.lead_position,
            "out_seat": self.out_seat,
            "cards": [
                {
                    "position": pos,
                    "state": self.seat_state(pos).value,
                    "card": str(card) if card else None,
                }
                for pos, card in enumerate(self.cards_played)
            ],
            "is_complete": self.is_complete(),
        }


def create_trick(out_seat: Optional[int] = None) -> Trick:
    """Fresh, empty trick"""
    return Trick(out_seat)
