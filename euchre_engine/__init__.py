"""
Euchre rules engine
"""

import logging

from .card import Card, Suit, Rank
from .config import GameConfig
from .deck import create_deck, shuffle_deck, deal_cards
from .errors import (
    EuchreError,
    WrongPlayerCount,
    CardNotInHand,
    MustFollowSuit,
    TrickNotComplete,
    RoundNotComplete,
    RoundComplete,
    TrumpNotDeclared,
    TrumpAlreadyDeclared,
    PlayerSittingOut,
    AlreadyPlayed,
    GameOver,
)
from .player import Player
from .ranking import (
    is_right_bower,
    is_left_bower,
    is_trump_suit,
    are_same_suit,
    card_rank,
)
from .trick import Trick, SeatState, create_trick
from .round import Round, RoundPhase, TrumpDeclaration, create_round
from .game import EuchreGame, TrickResult, RoundResult, initialize_game

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Card",
    "Suit",
    "Rank",
    "GameConfig",
    "create_deck",
    "shuffle_deck",
    "deal_cards",
    "EuchreError",
    "WrongPlayerCount",
    "CardNotInHand",
    "MustFollowSuit",
    "TrickNotComplete",
    "RoundNotComplete",
    "RoundComplete",
    "TrumpNotDeclared",
    "TrumpAlreadyDeclared",
    "PlayerSittingOut",
    "AlreadyPlayed",
    "GameOver",
    "Player",
    "is_right_bower",
    "is_left_bower",
    "is_trump_suit",
    "are_same_suit",
    "card_rank",
    "Trick",
    "SeatState",
    "create_trick",
    "Round",
    "RoundPhase",
    "TrumpDeclaration",
    "create_round",
    "EuchreGame",
    "TrickResult",
    "RoundResult",
    "initialize_game",
]
