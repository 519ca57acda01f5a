"""Poker rules implementations.

This module provides:
- Card and rank definitions (ranks.py)
- Hand construction, category detection and evaluation (hands.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    DECK_SIZE,
    are_consecutive,
    get_rank_counts,
    get_suit_counts,
    create_standard_deck,
    sort_cards,
    compare_ranks,
)

from .hands import (
    HAND_SIZE,
    HAND_RANK_LABELS,
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

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "DECK_SIZE",
    "are_consecutive",
    "get_rank_counts",
    "get_suit_counts",
    "create_standard_deck",
    "sort_cards",
    "compare_ranks",
    # Hands
    "HAND_SIZE",
    "HAND_RANK_LABELS",
    "HandRank",
    "Hand",
    "HandEvaluation",
    "InvalidHandSize",
    "is_pair",
    "is_two_pair",
    "is_three_of_a_kind",
    "is_straight",
    "is_flush",
    "is_full_house",
    "is_four_of_a_kind",
    "is_straight_flush",
    "is_royal_flush",
    "evaluate_hand",
    "make_cards_from_ranks",
    "make_cards_from_string",
    "describe_hand_ranks",
]
