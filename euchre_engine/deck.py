"""
Deck construction and dealing for Euchre
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .card import Card, Suit, Rank

DECK_SIZE = 24
HAND_SIZE = 5
NUM_HANDS = 4


def create_deck() -> List[Card]:
    """Build the 24-card euchre deck (9 through Ace in each suit), in suit order"""
    return [Card(suit, rank) for suit in Suit for rank in Rank]


def shuffle_deck(
    deck: Sequence[Card], rng: Optional[np.random.Generator] = None
) -> List[Card]:
    """
    Return a uniformly random permutation of the deck.

    The input is left untouched. Pass a seeded generator
    (np.random.default_rng(seed)) for a reproducible order.
    """
    if rng is None:
        rng = np.random.default_rng()
    order = rng.permutation(len(deck))
    return [deck[i] for i in order]


def deal_cards(deck: Sequence[Card]) -> Tuple[List[List[Card]], Card, List[Card]]:
    """
    Deal five rounds of one card to each of the four hands, then turn up the kitty card.

    Returns (hands, kitty_card, undealt). Cards are taken from the front of the
    deck; undealt holds whatever follows the kitty card.
    """
    needed = HAND_SIZE * NUM_HANDS + 1
    if len(deck) < needed:
        raise ValueError(f"Cannot deal from {len(deck)} cards, need at least {needed}")

    cards = list(deck)
    hands: List[List[Card]] = [[] for _ in range(NUM_HANDS)]
    position = 0
    for _ in range(HAND_SIZE):
        for hand in hands:
            hand.append(cards[position])
            position += 1

    kitty_card = cards[position]
    undealt = cards[position + 1:]
    return hands, kitty_card, undealt
