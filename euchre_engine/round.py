"""
One deal of Euchre: hands, trump declaration and the five tricks played on it.
"""

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Any, Dict, List, Optional

import numpy as np

from .card import Card, Suit
from .deck import HAND_SIZE, create_deck, deal_cards, shuffle_deck
from .errors import (
    CardNotInHand,
    MustFollowSuit,
    RoundComplete,
    TrickNotComplete,
    TrumpAlreadyDeclared,
    TrumpNotDeclared,
)
from .player import Player, team_for_index
from .ranking import are_same_suit
from .trick import SeatState, Trick, create_trick

logger = logging.getLogger(__name__)

TRICKS_PER_ROUND = HAND_SIZE


class RoundPhase(Enum):
    """Phases of a single deal"""
    AWAITING_TRUMP = "awaiting_trump"
    PLAYING = "playing"
    COMPLETE = "complete"


@dataclass(frozen=True)
class TrumpDeclaration:
    """Trump as named for a round. out_player is set only when the caller goes alone."""

    trump: Suit
    caller: Player
    out_player: Optional[Player] = None

    @property
    def going_alone(self) -> bool:
        return self.out_player is not None

    @property
    def calling_team(self) -> int:
        return self.caller.team


class Round:
    """A single deal. Owns the hands, the current trick and the trick tally."""

    def __init__(
        self,
        hands: List[List[Card]],
        kitty_card: Card,
        dealer: Player,
        undealt: Optional[List[Card]] = None,
    ):
        self.hands = hands
        self.kitty_card = kitty_card
        self.undealt: List[Card] = list(undealt or [])
        self.dealer = dealer

        self.declaration: Optional[TrumpDeclaration] = None
        self.trick_counter = 0
        self.current_trick: Trick = create_trick()
        self.tricks_played: List[Trick] = []
        self.tricks_won = [0, 0]

    @property
    def phase(self) -> RoundPhase:
        if self.declaration is None:
            return RoundPhase.AWAITING_TRUMP
        if self.trick_counter >= TRICKS_PER_ROUND:
            return RoundPhase.COMPLETE
        return RoundPhase.PLAYING

    @property
    def trump(self) -> Suit:
        if self.declaration is None:
            raise TrumpNotDeclared("Trump has not been declared for this round")
        return self.declaration.trump

    @property
    def caller(self) -> Optional[Player]:
        return self.declaration.caller if self.declaration else None

    @property
    def out_player(self) -> Optional[Player]:
        return self.declaration.out_player if self.declaration else None

    def declare_trump(
        self, trump: Suit, caller: Player, out_player: Optional[Player] = None
    ) -> TrumpDeclaration:
        """
        Record trump and who called it.

        out_player is the lone caller's partner. Their seat is excluded from
        every trick for the rest of the round.
        """
        if self.declaration is not None:
            raise TrumpAlreadyDeclared(
                f"Trump already declared as {self.declaration.trump.name.lower()}"
            )

        self.declaration = TrumpDeclaration(trump, caller, out_player)
        self.current_trick.out_seat = out_player.index if out_player else None
        logger.debug(
            "Trump %s called by %s%s", trump.name, caller, " (alone)" if out_player else ""
        )
        return self.declaration

    def hand(self, index: int) -> List[Card]:
        """Copy of a seat's hand"""
        return list(self.hands[index])

    def valid_cards(self, index: int) -> List[Card]:
        """
        Cards the seat may legally play to the current trick.

        The first card of a trick may be anything. After that a player must
        play a card of the led suit (left bower counts as trump) if they hold one.
        """
        if self.phase is not RoundPhase.PLAYING:
            return []
        if self.current_trick.seat_state(index) is not SeatState.PENDING:
            return []

        hand = self.hands[index]
        card_led = self.current_trick.card_led
        if card_led is None:
            return list(hand)

        following = [card for card in hand if are_same_suit(card, card_led, self.trump)]
        return following if following else list(hand)

    def play(self, player: Player, card: Card):
        """Validate and apply one card play. Nothing changes if the play is rejected."""
        if self.phase is RoundPhase.AWAITING_TRUMP:
            raise TrumpNotDeclared("Cannot play a card before trump is declared")
        if self.phase is RoundPhase.COMPLETE:
            raise RoundComplete("All tricks in this round have been played")

        self.current_trick.check_can_play(player.index)

        hand = self.hands[player.index]
        if card not in hand:
            raise CardNotInHand(player.name, card)

        valid = self.valid_cards(player.index)
        if card not in valid:
            raise MustFollowSuit(player.name, card, valid)

        hand.remove(card)
        self.current_trick.add_card(player.index, card)

    def trick_winner_index(self) -> int:
        return self.current_trick.get_winner(self.trump)

    def record_trick(self, winner_index: int) -> int:
        """Credit a completed trick to the winner's team and start a fresh one"""
        if not self.current_trick.is_complete():
            raise TrickNotComplete(self.current_trick.pending_seats())

        team = team_for_index(winner_index)
        self.tricks_won[team] += 1
        self.tricks_played.append(self.current_trick)
        self.current_trick = create_trick(self.current_trick.out_seat)
        self.trick_counter += 1
        return team

    def card_count(self) -> int:
        """Cards accounted for in this round: hands, kitty, undealt cards and every played card"""
        in_hands = sum(len(hand) for hand in self.hands)
        played = sum(trick.num_cards() for trick in self.tricks_played)
        return in_hands + 1 + len(self.undealt) + played + self.current_trick.num_cards()

    def to_dict(self, perspective: Optional[int] = None, include_hands: bool = False) -> Dict[str, Any]:
        """
        Convert round to dictionary for JSON serialization.

        Args:
            perspective: If set, show that seat's hand
            include_hands: Whether to include all hands
        """
        hands = []
        for index, hand in enumerate(self.hands):
            entry: Dict[str, Any] = {"position": index, "hand_size": len(hand)}
            if include_hands or index == perspective:
                entry["hand"] = [str(card) for card in hand]
            hands.append(entry)

        declaration = self.declaration
        return {
            "phase": self.phase.value,
            "dealer": self.dealer.index,
            "kitty_card": str(self.kitty_card),
            "undealt_count": len(self.undealt),
            "trump": declaration.trump.value if declaration else None,
            "caller": declaration.caller.index if declaration else None,
            "going_alone": declaration.going_alone if declaration else False,
            "out_player": declaration.out_player.index if declaration and declaration.out_player else None,
            "trick_counter": self.trick_counter,
            "tricks_won": list(self.tricks_won),
            "current_trick": self.current_trick.to_dict(),
            "hands": hands,
        }


def create_round(dealer: Player, rng: Optional[np.random.Generator] = None) -> Round:
    """Shuffle a fresh deck, deal it, and return a round awaiting trump"""
    hands, kitty_card, undealt = deal_cards(shuffle_deck(create_deck(), rng))
    logger.debug("Dealt new round, dealer %s, kitty %s", dealer, kitty_card)
    return Round(hands, kitty_card, dealer, undealt)
