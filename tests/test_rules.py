"""Tests for the rules engine (ranks and hands).

Test coverage:
- Rank ordering: A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2
- Card creation, formatting and parsing
- Hand size validation
- Literal category predicates (is_pair, is_flush, ...)
- Best-category classification and tie-break ranks
"""

import pytest
from poker_hands.rules import (
    Rank,
    Suit,
    Card,
    DECK_SIZE,
    are_consecutive,
    get_rank_counts,
    get_suit_counts,
    create_standard_deck,
    sort_cards,
    compare_ranks,
    HandRank,
    Hand,
    HandEvaluation,
    InvalidHandSize,
    is_pair,
    is_two_pair,
    is_three_of_a_kind,
    is_straight,
    is_flush,
    is_full_house,
    is_four_of_a_kind,
    is_straight_flush,
    is_royal_flush,
    evaluate_hand,
    make_cards_from_ranks,
    make_cards_from_string,
    describe_hand_ranks,
)


def hand(s: str) -> Hand:
    return Hand.from_string(s)


class TestRankOrdering:
    """Test that rank ordering is correct: A > K > Q > ... > 3 > 2"""

    def test_rank_order_ace_is_highest(self):
        assert Rank.ACE > Rank.KING
        assert Rank.ACE > Rank.TWO
        assert max(Rank) == Rank.ACE

    def test_rank_order_two_is_lowest(self):
        assert Rank.TWO < Rank.THREE
        assert min(Rank) == Rank.TWO

    def test_complete_rank_ordering(self):
        expected_order = [
            Rank.TWO,
            Rank.THREE,
            Rank.FOUR,
            Rank.FIVE,
            Rank.SIX,
            Rank.SEVEN,
            Rank.EIGHT,
            Rank.NINE,
            Rank.TEN,
            Rank.JACK,
            Rank.QUEEN,
            Rank.KING,
            Rank.ACE,
        ]
        for i in range(len(expected_order) - 1):
            assert int(expected_order[i + 1]) - int(expected_order[i]) == 1

    def test_compare_ranks_function(self):
        assert compare_ranks(Rank.ACE, Rank.KING) > 0
        assert compare_ranks(Rank.TWO, Rank.THREE) < 0
        assert compare_ranks(Rank.KING, Rank.KING) == 0

    def test_are_consecutive(self):
        assert are_consecutive([Rank.TWO, Rank.THREE, Rank.FOUR])
        assert are_consecutive([Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE])
        assert not are_consecutive([Rank.THREE, Rank.FIVE])
        assert not are_consecutive([Rank.KING, Rank.ACE, Rank.TWO])


class TestCardBasics:
    """Test Card creation and utilities."""

    def test_card_creation(self):
        card = Card(suit=Suit.HEART, rank=Rank.ACE)
        assert card.suit == Suit.HEART
        assert card.rank == Rank.ACE

    def test_card_positional_order_is_suit_then_rank(self):
        card = Card(Suit.DIAMOND, Rank.KING)
        assert card.suit == Suit.DIAMOND
        assert card.rank == Rank.KING

    def test_card_to_string(self):
        assert str(Card(Suit.DIAMOND, Rank.KING)) == "K♦"
        assert str(Card(Suit.HEART, Rank.TEN)) == "T♥"
        assert str(Card(Suit.CLUB, Rank.FIVE)) == "5♣"
        assert str(Card(Suit.SPADE, Rank.ACE)) == "A♠"

    def test_card_is_immutable(self):
        card = Card(Suit.HEART, Rank.ACE)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_card_from_string(self):
        card = Card.from_string("T♣")
        assert card == Card(Suit.CLUB, Rank.TEN)

        card = Card.from_string("10S")
        assert card == Card(Suit.SPADE, Rank.TEN)

        card = Card.from_string("ah")
        assert card == Card(Suit.HEART, Rank.ACE)

    def test_card_from_string_round_trip_whole_deck(self):
        for card in create_standard_deck():
            assert Card.from_string(str(card)) == card

    @pytest.mark.parametrize("text", ["", "A", "1H", "AX", "11S", "ZZ"])
    def test_card_from_string_invalid(self, text):
        with pytest.raises(ValueError):
            Card.from_string(text)

    def test_card_equality_and_hashing(self):
        c1 = Card(Suit.HEART, Rank.THREE)
        c2 = Card(Suit.HEART, Rank.THREE)
        c3 = Card(Suit.SPADE, Rank.THREE)

        assert c1 == c2
        assert c1 != c3
        assert hash(c1) == hash(c2)
        assert len({c1, c2, c3}) == 2

    def test_standard_deck(self):
        deck = create_standard_deck()
        assert len(deck) == DECK_SIZE == 52
        assert len(set(deck)) == 52

        assert all(count == 4 for count in get_rank_counts(deck).values())
        assert all(count == 13 for count in get_suit_counts(deck).values())

    def test_sort_cards_by_rank(self):
        cards = make_cards_from_string("KS 2C 9H 2D")
        assert [str(c) for c in sort_cards(cards)] == ["2♣", "2♦", "9♥", "K♠"]


class TestHandConstruction:
    """Test Hand size validation and formatting."""

    def test_hand_with_five_cards(self):
        h = hand("AH KD QC JS TH")
        assert len(h) == 5
        assert len(h.cards) == 5

    def test_hand_keeps_given_order(self):
        cards = make_cards_from_string("9S 5C 7C 5S 4S")
        h = Hand(cards)
        assert list(h.cards) == cards

    @pytest.mark.parametrize("count", [0, 2, 4, 6])
    def test_wrong_number_of_cards_raises(self, count):
        cards = create_standard_deck()[:count]
        with pytest.raises(InvalidHandSize) as excinfo:
            Hand(cards)
        assert excinfo.value.size == count

    def test_invalid_hand_size_is_value_error(self):
        with pytest.raises(ValueError):
            hand("AH KD")

    def test_hand_to_string(self):
        h = hand("AH KD QC JS TH")
        assert str(h) == "A♥K♦Q♣J♠T♥"

    def test_hands_from_identical_cards_are_equal(self):
        assert hand("5C 5S 4S 7C 9S") == hand("5C 5S 4S 7C 9S")
        assert hand("5C 5S 4S 7C 9S") != hand("5S 5C 4S 7C 9S")

    def test_duplicate_cards_are_allowed(self):
        h = hand("5C 5C 5C 5C 5C")
        assert len(h) == 5

    def test_hand_is_immutable(self):
        h = hand("AH KD QC JS TH")
        with pytest.raises(AttributeError):
            h.cards = ()


class TestPredicates:
    """Test literal category predicates."""

    def test_is_pair_valid(self):
        h = hand("5C 5S 4S 7C 9S")
        assert is_pair(h) is h

    def test_is_pair_no_pair(self):
        assert is_pair(hand("5C 6S 4S 7C 9S")) is None

    def test_is_pair_rejects_two_pair(self):
        assert is_pair(hand("5C 5S 4D 4C 9S")) is None

    def test_is_pair_rejects_trips_quads_and_full_house(self):
        assert is_pair(hand("5C 5S 5D 4C 9S")) is None
        assert is_pair(hand("5C 5S 5D 5H 9S")) is None
        assert is_pair(hand("5C 5S 5D 9C 9S")) is None

    def test_is_two_pair_valid(self):
        h = hand("5C 5S 4D 4C 9S")
        assert is_two_pair(h) is h

    def test_is_two_pair_no_pair(self):
        assert is_two_pair(hand("5C 6S 4S 7C 9S")) is None
        assert is_two_pair(hand("5C 5S 4S 7C 9S")) is None

    def test_is_three_of_a_kind_valid(self):
        h = hand("5C 5S 5D 4C 9S")
        assert is_three_of_a_kind(h) is h

    def test_is_three_of_a_kind_rejects_full_house(self):
        assert is_three_of_a_kind(hand("5C 5S 5D 9C 9S")) is None

    def test_is_straight_valid(self):
        h = hand("5C 6S 7D 8C 9S")
        assert is_straight(h) is h

    def test_is_straight_unordered_input(self):
        assert is_straight(hand("9S 7D 5C 8C 6S")) is not None

    def test_is_straight_ace_high(self):
        assert is_straight(hand("TC JS QD KC AS")) is not None

    def test_is_straight_no_wheel(self):
        assert is_straight(hand("AC 2S 3D 4C 5S")) is None

    def test_is_straight_no_wrap(self):
        assert is_straight(hand("QC KS AD 2C 3S")) is None

    def test_is_straight_rejects_gap_and_repeats(self):
        assert is_straight(hand("5C 6S 7D 8C TS")) is None
        assert is_straight(hand("5C 5S 6D 7C 8S")) is None

    def test_is_flush_valid(self):
        h = hand("2C 6C 9C JC KC")
        assert is_flush(h) is h

    def test_is_flush_four_suited(self):
        assert is_flush(hand("2C 6C 9C JC KD")) is None

    def test_is_full_house_valid(self):
        h = hand("5C 5S 5D 9C 9S")
        assert is_full_house(h) is h

    def test_is_full_house_rejects_trips(self):
        assert is_full_house(hand("5C 5S 5D 9C TS")) is None

    def test_is_four_of_a_kind_valid(self):
        h = hand("5C 5S 5D 5H 9S")
        assert is_four_of_a_kind(h) is h

    def test_is_four_of_a_kind_rejects_trips(self):
        assert is_four_of_a_kind(hand("5C 5S 5D 4H 9S")) is None

    def test_is_straight_flush_valid(self):
        h = hand("5C 6C 7C 8C 9C")
        assert is_straight_flush(h) is h

    def test_is_straight_flush_needs_both(self):
        assert is_straight_flush(hand("5C 6C 7C 8C 9S")) is None
        assert is_straight_flush(hand("5C 6C 7C 8C TC")) is None

    def test_is_royal_flush(self):
        h = hand("TC JC QC KC AC")
        assert is_royal_flush(h) is h
        assert is_royal_flush(hand("9C TC JC QC KC")) is None
        assert is_royal_flush(hand("TC JC QC KC AD")) is None

    def test_straight_flush_also_matches_straight_and_flush(self):
        h = hand("5C 6C 7C 8C 9C")
        assert is_straight(h) is h
        assert is_flush(h) is h


class TestEvaluateHand:
    """Test best-category classification."""

    @pytest.mark.parametrize(
        "cards,expected",
        [
            ("2C 5S 9D JH KC", HandRank.HIGH_CARD),
            ("5C 5S 4S 7C 9S", HandRank.PAIR),
            ("5C 5S 4D 4C 9S", HandRank.TWO_PAIR),
            ("5C 5S 5D 4C 9S", HandRank.THREE_OF_A_KIND),
            ("5C 6S 7D 8C 9S", HandRank.STRAIGHT),
            ("2C 6C 9C JC KC", HandRank.FLUSH),
            ("5C 5S 5D 9C 9S", HandRank.FULL_HOUSE),
            ("5C 5S 5D 5H 9S", HandRank.FOUR_OF_A_KIND),
            ("5C 6C 7C 8C 9C", HandRank.STRAIGHT_FLUSH),
            ("TC JC QC KC AC", HandRank.ROYAL_FLUSH),
        ],
    )
    def test_categories(self, cards, expected):
        assert evaluate_hand(hand(cards)).hand_rank == expected

    def test_wheel_is_high_card(self):
        assert evaluate_hand(hand("AC 2S 3D 4C 5S")).hand_rank == HandRank.HIGH_CARD

    def test_suited_wheel_is_flush(self):
        assert evaluate_hand(hand("AC 2C 3C 4C 5C")).hand_rank == HandRank.FLUSH

    def test_labels(self):
        assert [r.label for r in HandRank] == [
            "High Card",
            "Pair",
            "Two Pair",
            "Three of a Kind",
            "Straight",
            "Flush",
            "Full House",
            "Four of a Kind",
            "Straight Flush",
            "Royal Flush",
        ]
        assert str(HandRank.TWO_PAIR) == "Two Pair"

    def test_every_dealt_hand_has_exactly_one_best_category(self):
        deck = create_standard_deck()
        for start in range(0, 50, 5):
            h = Hand(deck[start : start + 5])
            evaluation = evaluate_hand(h)
            assert evaluation == evaluate_hand(h)
            assert evaluation.hand_rank in HandRank

    def test_tiebreak_pair_first_then_kickers(self):
        evaluation = evaluate_hand(hand("5C 9S 4S 5D 7C"))
        assert evaluation.tiebreak == (Rank.FIVE, Rank.NINE, Rank.SEVEN, Rank.FOUR)

    def test_tiebreak_two_pair(self):
        evaluation = evaluate_hand(hand("4D 9S 5C 4C 5S"))
        assert evaluation.tiebreak == (Rank.FIVE, Rank.FOUR, Rank.NINE)

    def test_tiebreak_full_house_trips_first(self):
        evaluation = evaluate_hand(hand("KC KS 5D 5C 5S"))
        assert evaluation.tiebreak == (Rank.FIVE, Rank.KING)

    def test_tiebreak_high_card_descending(self):
        evaluation = evaluate_hand(hand("2C KS 9D 5H JC"))
        assert evaluation.tiebreak == (Rank.KING, Rank.JACK, Rank.NINE, Rank.FIVE, Rank.TWO)

    def test_evaluations_order_by_category_then_ranks(self):
        pair_of_aces = evaluate_hand(hand("AC AS 2D 3C 4S"))
        two_pair_low = evaluate_hand(hand("2C 2S 3D 3C 4S"))
        pair_of_kings = evaluate_hand(hand("KC KS QD JC 9S"))

        assert two_pair_low > pair_of_aces
        assert pair_of_aces > pair_of_kings

    def test_evaluation_ignores_suits(self):
        assert evaluate_hand(hand("2C 6C 9C JC KC")) == evaluate_hand(hand("2H 6H 9H JH KH"))

    def test_evaluation_str(self):
        evaluation = HandEvaluation(hand_rank=HandRank.PAIR, tiebreak=(Rank.FIVE, Rank.NINE))
        assert str(evaluation) == "Pair(5 9)"


class TestHelpers:
    """Test card construction helpers."""

    def test_make_cards_from_ranks_cycles_suits(self):
        cards = make_cards_from_ranks([Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.SIX])
        assert len({c.suit for c in cards}) == 4
        assert evaluate_hand(Hand(cards)).hand_rank == HandRank.STRAIGHT

    def test_make_cards_from_ranks_with_suits(self):
        cards = make_cards_from_ranks([Rank.TWO, Rank.ACE], [Suit.SPADE, Suit.SPADE])
        assert cards == [Card(Suit.SPADE, Rank.TWO), Card(Suit.SPADE, Rank.ACE)]

    def test_make_cards_from_ranks_length_mismatch(self):
        with pytest.raises(ValueError):
            make_cards_from_ranks([Rank.TWO], [Suit.SPADE, Suit.CLUB])

    def test_make_cards_from_string_accepts_commas_and_symbols(self):
        cards = make_cards_from_string("5♣, 5♠,4♠ 7c 9S")
        assert [str(c) for c in cards] == ["5♣", "5♠", "4♠", "7♣", "9♠"]

    def test_describe_hand_ranks_covers_every_category(self):
        descriptions = describe_hand_ranks()
        assert set(descriptions) == set(HandRank)
        assert all(descriptions.values())
