"""
Main Euchre Game Engine
"""

from dataclasses import dataclass, asdict
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple
import uuid

import numpy as np

from .card import Card, Suit
from .config import DEFAULT_CONFIG, GameConfig
from .errors import GameOver, RoundNotComplete, WrongPlayerCount
from .player import NUM_PLAYERS, Player
from .round import TRICKS_PER_ROUND, Round, TrumpDeclaration, create_round

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrickResult:
    """What happened when a trick was scored"""

    trick_number: int  # 1-based
    winner: int
    winning_team: int
    tricks_won: Tuple[int, int]

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["tricks_won"] = list(self.tricks_won)
        return result


@dataclass(frozen=True)
class RoundResult:
    """What happened when a round was scored"""

    round_number: int  # 1-based
    calling_team: int
    winning_team: int
    points_awarded: int
    tricks_won: Tuple[int, int]
    alone: bool
    march: bool
    euchred: bool
    score: Tuple[int, int]
    game_over: bool

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["tricks_won"] = list(self.tricks_won)
        result["score"] = list(self.score)
        return result


def round_points(
    tricks_won: Sequence[int],
    calling_team: int,
    alone: bool,
    config: GameConfig = DEFAULT_CONFIG,
) -> Tuple[int, int]:
    """
    Apply the Euchre point table to a finished round.

    Returns (winning_team, points). The team with more tricks wins the round;
    if that is not the calling team the callers were euchred.
    """
    winning_team = 0 if tricks_won[0] > tricks_won[1] else 1

    if winning_team != calling_team:
        return winning_team, config.points_euchre

    if tricks_won[winning_team] == TRICKS_PER_ROUND:
        return winning_team, config.points_march_alone if alone else config.points_march

    return winning_team, config.points_made


class EuchreGame:
    """Main Euchre game controller. Holds the players, the score and exactly one round."""

    def __init__(
        self,
        player_names: Sequence[str],
        game_id: Optional[str] = None,
        config: Optional[GameConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        if len(player_names) != NUM_PLAYERS:
            raise WrongPlayerCount(len(player_names))

        self.game_id = game_id or str(uuid.uuid4())
        self.config = config or DEFAULT_CONFIG
        self.rng = rng if rng is not None else np.random.default_rng()

        self.players: List[Player] = [
            Player(name, index) for index, name in enumerate(player_names)
        ]
        self.round_counter = 0
        self.score = [0, 0]
        self.current_round: Round = create_round(self.players[0], self.rng)

    def get_player(self, index: int) -> Player:
        """Get player at a specific position"""
        return self.players[index]

    def hand(self, player: Player) -> List[Card]:
        """Current hand of a player"""
        return self.current_round.hand(player.index)

    @property
    def current_trick(self):
        return self.current_round.current_trick

    @property
    def is_over(self) -> bool:
        return max(self.score) >= self.config.winning_score

    @property
    def winning_team(self) -> Optional[int]:
        """Team that reached the winning score, if any"""
        if not self.is_over:
            return None
        return 0 if self.score[0] > self.score[1] else 1

    def set_trump(self, trump: Suit, caller: Player, alone: bool = False) -> TrumpDeclaration:
        """
        Record trump for the current round.

        How trump was chosen (ordering up, calling in the second pass) is up
        to the caller; this only records the outcome.
        """
        out_player = self.players[caller.partner_index] if alone else None
        declaration = self.current_round.declare_trump(trump, caller, out_player)
        logger.info(
            "Round %d: %s called %s%s",
            self.round_counter + 1,
            caller.name,
            trump.name.lower(),
            " and is going alone" if alone else "",
        )
        return declaration

    def get_valid_moves(self, player: Player) -> List[Card]:
        """Cards the player may legally play right now"""
        return self.current_round.valid_cards(player.index)

    def play_card(self, player: Player, card: Card):
        """
        Play a card for a player.

        Does not resolve the trick; call determine_trick_winner and
        score_trick once every active seat has played.
        """
        self.current_round.play(player, card)
        logger.debug("%s played %s", player.name, card)

    def determine_trick_winner(self) -> Player:
        """Player who takes the current (complete) trick"""
        return self.get_player(self.current_round.trick_winner_index())

    def score_trick(self, winning_player: Player) -> TrickResult:
        """Credit the trick to the winner's team and start the next trick"""
        current_round = self.current_round
        team = current_round.record_trick(winning_player.index)
        result = TrickResult(
            trick_number=current_round.trick_counter,
            winner=winning_player.index,
            winning_team=team,
            tricks_won=tuple(current_round.tricks_won),
        )
        logger.info(
            "Trick %d won by %s (team %d), tricks %d-%d",
            result.trick_number,
            winning_player.name,
            team,
            *result.tricks_won,
        )
        return result

    def score_round(self) -> RoundResult:
        """
        Award points for the finished round, rotate the dealer and deal the next round.

        Raises RoundNotComplete until all five tricks have been scored.
        """
        if self.is_over:
            raise GameOver(f"Game is over, team {self.winning_team} won")

        finished = self.current_round
        if finished.trick_counter < TRICKS_PER_ROUND:
            raise RoundNotComplete(finished.trick_counter)

        declaration = finished.declaration
        calling_team = declaration.calling_team
        winning_team, points = round_points(
            finished.tricks_won, calling_team, declaration.going_alone, self.config
        )
        self.score[winning_team] += points

        self.round_counter += 1
        next_dealer = self.get_player((finished.dealer.index + 1) % NUM_PLAYERS)
        self.current_round = create_round(next_dealer, self.rng)

        result = RoundResult(
            round_number=self.round_counter,
            calling_team=calling_team,
            winning_team=winning_team,
            points_awarded=points,
            tricks_won=tuple(finished.tricks_won),
            alone=declaration.going_alone,
            march=winning_team == calling_team and finished.tricks_won[calling_team] == TRICKS_PER_ROUND,
            euchred=winning_team != calling_team,
            score=tuple(self.score),
            game_over=self.is_over,
        )
        logger.info(
            "Round %d: team %d scores %d%s, score %d-%d",
            result.round_number,
            winning_team,
            points,
            " (euchre)" if result.euchred else "",
            *result.score,
        )
        return result

    def to_dict(self, perspective: Optional[int] = None, include_hands: bool = False) -> Dict[str, Any]:
        """
        Convert game state to dictionary for JSON serialization.

        Args:
            perspective: If set, only show that seat's hand
            include_hands: Whether to include all player hands
        """
        return {
            "game_id": self.game_id,
            "config": self.config.to_dict(),
            "players": [player.to_dict() for player in self.players],
            "round_counter": self.round_counter,
            "score": list(self.score),
            "game_over": self.is_over,
            "winning_team": self.winning_team,
            "current_round": self.current_round.to_dict(perspective, include_hands),
        }


def initialize_game(
    player_names: Sequence[str],
    rng: Optional[np.random.Generator] = None,
    config: Optional[GameConfig] = None,
) -> EuchreGame:
    """Create a game for exactly four players; player 0 deals first"""
    return EuchreGame(player_names, config=config, rng=rng)
