"""
Tests for trick completeness and winner resolution
"""

import pytest

from euchre_engine import (
    AlreadyPlayed,
    Card,
    PlayerSittingOut,
    SeatState,
    Suit,
    TrickNotComplete,
    create_trick,
    is_trump_suit,
)


def play(trick, *plays):
    """play(trick, (3, "KH"), (0, "JD"), ...) in the given order"""
    for position, spec in plays:
        trick.add_card(position, Card.from_string(spec))


class TestTrickState:
    """Test seat states and completeness"""

    def test_first_card_is_led(self):
        trick = create_trick()
        play(trick, (2, "9C"), (3, "AC"))
        assert trick.card_led == Card.from_string("9C")
        assert trick.lead_position == 2

    def test_incomplete_until_all_seats_play(self):
        trick = create_trick()
        play(trick, (0, "9C"), (1, "AC"), (2, "KC"))
        assert not trick.is_complete()
        assert trick.pending_seats() == [3]
        with pytest.raises(TrickNotComplete):
            trick.get_winner(Suit.HEARTS)

    def test_out_seat_is_excluded_not_pending(self):
        """A lone caller's partner is never waited on"""
        trick = create_trick(out_seat=2)
        assert trick.seat_state(2) == SeatState.EXCLUDED
        assert trick.seat_state(0) == SeatState.PENDING
        play(trick, (0, "9C"), (1, "AC"), (3, "KC"))
        assert trick.is_complete()
        assert trick.get_card_for_position(2) is None

    def test_out_seat_cannot_play(self):
        trick = create_trick(out_seat=1)
        with pytest.raises(PlayerSittingOut):
            play(trick, (1, "9C"))

    def test_seat_cannot_play_twice(self):
        trick = create_trick()
        play(trick, (0, "9C"))
        with pytest.raises(AlreadyPlayed):
            play(trick, (0, "AC"))

    def test_to_dict(self):
        trick = create_trick(out_seat=3)
        play(trick, (0, "9C"))
        data = trick.to_dict()
        assert data["card_led"] == "9♣"
        assert [c["state"] for c in data["cards"]] == ["played", "pending", "pending", "excluded"]
        assert data["is_complete"] is False


class TestTrickWinner:
    """Test trick resolution under trump"""

    def test_left_bower_beats_trump_ace(self):
        """Hearts trump, K♥ led by P3: the left bower (J♦) takes it"""
        trick = create_trick()
        play(trick, (3, "KH"), (0, "JD"), (1, "AH"), (2, "9C"))
        assert trick.get_winner(Suit.HEARTS) == 0

    def test_right_bower_beats_left_bower(self):
        trick = create_trick()
        play(trick, (0, "JD"), (1, "JH"), (2, "AH"), (3, "9H"))
        assert trick.get_winner(Suit.HEARTS) == 1

    def test_highest_of_led_suit_wins_without_trump(self):
        trick = create_trick()
        play(trick, (1, "QC"), (2, "AC"), (3, "9D"), (0, "KC"))
        assert trick.get_winner(Suit.HEARTS) == 2

    def test_off_suit_ace_cannot_win(self):
        """A card that neither follows nor trumps never takes the trick"""
        trick = create_trick()
        play(trick, (2, "9C"), (3, "10C"), (0, "AS"), (1, "AD"))
        assert trick.get_winner(Suit.HEARTS) == 3

    def test_lowest_trump_beats_led_ace(self):
        trick = create_trick()
        play(trick, (0, "AC"), (1, "KC"), (2, "9H"), (3, "QC"))
        assert trick.get_winner(Suit.HEARTS) == 2

    def test_left_bower_not_counted_in_printed_suit(self):
        """Diamonds led, hearts trump: J♦ is trump and wins, it does not 'follow' diamonds"""
        trick = create_trick()
        play(trick, (0, "AD"), (1, "JD"), (2, "KD"), (3, "QD"))
        assert trick.get_winner(Suit.HEARTS) == 1

    def test_off_suit_jack_is_not_trump(self):
        trick = create_trick()
        play(trick, (0, "9S"), (1, "JC"), (2, "10S"), (3, "JH"))
        # Hearts trump: J♣ is an ordinary club, J♥ the right bower
        assert trick.get_winner(Suit.HEARTS) == 3

    def test_off_suit_card_in_seat_zero_does_not_block_led_suit(self):
        """A♠ led from seat 1, seat 0 discards a club: the led ace wins"""
        trick = create_trick()
        play(trick, (1, "AS"), (2, "9S"), (3, "10S"), (0, "9C"))
        assert trick.get_winner(Suit.HEARTS) == 1

    def test_alone_trick_winner(self):
        trick = create_trick(out_seat=0)
        play(trick, (2, "10S"), (3, "AS"), (1, "9S"))
        assert trick.get_winner(Suit.CLUBS) == 3

    def test_trump_always_wins_when_played(self):
        """Winner is trump whenever any trump card is in the trick"""
        trump = Suit.SPADES
        layouts = [
            ("AH", "KH", "JC", "QH"),
            ("9D", "AD", "KD", "9S"),
            ("JS", "JC", "AS", "KS"),
        ]
        for layout in layouts:
            trick = create_trick()
            for position, spec in enumerate(layout):
                trick.add_card(position, Card.from_string(spec))
            winner = trick.get_winner(trump)
            assert is_trump_suit(trick.get_card_for_position(winner), trump)
