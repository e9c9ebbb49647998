"""
Tests for Card, Suit and Rank
"""

import dataclasses

import pytest

from euchre_engine import Card, Rank, Suit


class TestSuit:
    """Test suit parsing and colors"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("H", Suit.HEARTS),
            ("d", Suit.DIAMONDS),
            ("♣", Suit.CLUBS),
            ("spades", Suit.SPADES),
            ("Hearts", Suit.HEARTS),
        ],
    )
    def test_from_string(self, text, expected):
        assert Suit.from_string(text) == expected

    def test_from_string_rejects_unknown(self):
        with pytest.raises(ValueError, match="Invalid suit"):
            Suit.from_string("X")

    def test_opposite_is_same_color(self):
        """Opposite suit shares the color and is never the suit itself"""
        for suit in Suit:
            assert suit.opposite() != suit
            assert suit.opposite().color == suit.color
            assert suit.opposite().opposite() == suit

    def test_colors(self):
        assert Suit.HEARTS.color == "red"
        assert Suit.DIAMONDS.color == "red"
        assert Suit.CLUBS.color == "black"
        assert Suit.SPADES.color == "black"


class TestCard:
    """Test card values"""

    def test_equality_is_by_value(self):
        """Two separately built cards with the same suit and rank are equal"""
        assert Card(Suit.HEARTS, Rank.ACE) == Card(Suit.HEARTS, Rank.ACE)
        assert Card(Suit.HEARTS, Rank.ACE) != Card(Suit.DIAMONDS, Rank.ACE)
        assert len({Card(Suit.HEARTS, Rank.ACE), Card(Suit.HEARTS, Rank.ACE)}) == 1

    def test_card_is_immutable(self):
        card = Card(Suit.CLUBS, Rank.NINE)
        with pytest.raises(dataclasses.FrozenInstanceError):
            card.rank = Rank.ACE

    def test_from_string(self):
        assert Card.from_string("JD") == Card(Suit.DIAMONDS, Rank.JACK)
        assert Card.from_string("10♠") == Card(Suit.SPADES, Rank.TEN)
        assert Card.from_string("as") == Card(Suit.SPADES, Rank.ACE)

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            Card.from_string("Z")
        with pytest.raises(ValueError, match="Invalid rank"):
            Card.from_string("2H")

    def test_str_and_image_key(self):
        card = Card(Suit.HEARTS, Rank.TEN)
        assert str(card) == "10♥"
        assert card.image_key == "hearts_10.png"
