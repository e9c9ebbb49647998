"""
Trump-aware card ranking.

Pure functions of (card, trump). The left bower is treated as a member of the
trump suit everywhere: it is never part of its printed suit once trump is set.
"""

from .card import Card, Rank, Suit

RIGHT_BOWER_RANK = 8
LEFT_BOWER_RANK = 7

# Non-bower ordering. A trump Jack is always a bower, so JACK here only ever
# applies to off-suit jacks.
_BASE_RANKS = {
    Rank.ACE: 6,
    Rank.KING: 5,
    Rank.QUEEN: 4,
    Rank.JACK: 3,
    Rank.TEN: 2,
    Rank.NINE: 1,
}


def is_right_bower(card: Card, trump: Suit) -> bool:
    return card.is_right_bower(trump)


def is_left_bower(card: Card, trump: Suit) -> bool:
    return card.is_left_bower(trump)


def is_trump_suit(card: Card, trump: Suit) -> bool:
    """True if the card's printed suit is trump, or it is the left bower"""
    return card.suit == trump or card.is_left_bower(trump)


def are_same_suit(card_a: Card, card_b: Card, trump: Suit) -> bool:
    """
    Suit equivalence under trump.

    Two cards match if both are trump, or neither is trump and their printed
    suits are equal. The left bower therefore matches trump and not its
    printed suit.
    """
    a_trump = is_trump_suit(card_a, trump)
    b_trump = is_trump_suit(card_b, trump)
    if a_trump or b_trump:
        return a_trump and b_trump
    return card_a.suit == card_b.suit


def card_rank(card: Card, trump: Suit) -> int:
    """
    Ordinal used to compare two cards already known to be the same suit.

    Right bower 8, left bower 7, then A=6 down to 9=1. Comparing cards of
    different suit classes with this value is meaningless.
    """
    if card.is_right_bower(trump):
        return RIGHT_BOWER_RANK
    if card.is_left_bower(trump):
        return LEFT_BOWER_RANK
    return _BASE_RANKS[card.rank]


def beats(challenger: Card, best: Card, trump: Suit) -> bool:
    """Whether challenger takes the trick from the current best card"""
    if is_trump_suit(challenger, trump) and not is_trump_suit(best, trump):
        return True
    if are_same_suit(challenger, best, trump):
        return card_rank(challenger, trump) > card_rank(best, trump)
    return False
