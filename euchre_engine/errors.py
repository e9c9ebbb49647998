"""
Exceptions raised by the Euchre engine.

Every error is a caller-input or sequencing violation. They all derive from
ValueError so code that already catches ValueError keeps working.
"""

from typing import List, Optional


class EuchreError(ValueError):
    """Base exception for Euchre rule violations"""


class WrongPlayerCount(EuchreError):
    """Raised when a game is created without exactly four players"""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"There must be exactly 4 players, got {count}")


class CardNotInHand(EuchreError):
    """Raised when a player plays a card they do not hold"""

    def __init__(self, player_name: str, card):
        self.player_name = player_name
        self.card = card
        super().__init__(f"Card {card} not in {player_name}'s hand")


class MustFollowSuit(EuchreError):
    """Raised when a player could follow the led suit and did not"""

    def __init__(self, player_name: str, card, valid_cards: Optional[List] = None):
        self.player_name = player_name
        self.card = card
        self.valid_cards = list(valid_cards or [])
        valid = ", ".join(str(c) for c in self.valid_cards)
        super().__init__(
            f"{player_name} must follow suit, cannot play {card}. Valid cards: {valid}"
        )


class TrickNotComplete(EuchreError):
    """Raised when a trick is resolved before every active seat has played"""

    def __init__(self, pending_seats: List[int]):
        self.pending_seats = list(pending_seats)
        super().__init__(
            f"Cannot determine winner - trick not complete (waiting on {self.pending_seats})"
        )


class RoundNotComplete(EuchreError):
    """Raised when a round is scored before all five tricks are recorded"""

    def __init__(self, trick_counter: int):
        self.trick_counter = trick_counter
        super().__init__(f"Round not complete: {trick_counter} of 5 tricks played")


class RoundComplete(EuchreError):
    """Raised when play continues after the fifth trick"""


class TrumpNotDeclared(EuchreError):
    """Raised when trump-dependent state is read before trump is named"""


class TrumpAlreadyDeclared(EuchreError):
    """Raised when trump is named twice in the same round"""


class PlayerSittingOut(EuchreError):
    """Raised when the partner of a lone caller tries to play"""


class AlreadyPlayed(EuchreError):
    """Raised when a player plays a second card to the same trick"""


class GameOver(EuchreError):
    """Raised when a round is scored after a team has already won"""
