"""
Shared fixtures for Euchre engine tests
"""

import numpy as np
import pytest

from euchre_engine import Card, EuchreGame, initialize_game

NAMES = ["North", "East", "South", "West"]


def cards(*specs):
    """cards("JD", "AH") -> [Card, Card]"""
    return [Card.from_string(s) for s in specs]


def stage_hands(game: EuchreGame, *hands):
    """Replace the dealt hands with known ones"""
    game.current_round.hands = [cards(*hand) for hand in hands]


def play_out_round(game: EuchreGame):
    """
    Play every remaining trick with the first legal card, winner leading next.
    Returns the list of TrickResults.
    """
    results = []
    leader = (game.current_round.dealer.index + 1) % 4
    while game.current_round.trick_counter < 5:
        out_seat = game.current_trick.out_seat
        for offset in range(4):
            seat = (leader + offset) % 4
            if seat == out_seat:
                continue
            player = game.players[seat]
            game.play_card(player, game.get_valid_moves(player)[0])
            assert game.current_round.card_count() == 24
        winner = game.determine_trick_winner()
        results.append(game.score_trick(winner))
        leader = winner.index
    return results


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def game(rng):
    return initialize_game(NAMES, rng=rng)
