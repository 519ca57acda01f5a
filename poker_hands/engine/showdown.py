"""Head-to-head showdown between two five-card hands.

This module provides:
- Verdict: outcome of a showdown (winning hand or tie, plus category label)
- check_hands: full comparison by category, then tie-break ranks
- compare_hands: the same ordering as a three-way integer
- compare_highest_card: top-card-only comparison
"""

import logging
from dataclasses import dataclass
from typing import Optional

from poker_hands.rules import Hand, HandEvaluation, evaluate_hand

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Verdict:
    """Result of comparing two hands.

    Attributes:
        winning_hand: The stronger hand, or None when both hands tie
        hand_type: Category label of the winner, or of both hands on a tie
    """

    winning_hand: Optional[Hand]
    hand_type: str

    @property
    def is_tie(self) -> bool:
        """Whether neither hand won."""
        return self.winning_hand is None


def _compare_evaluations(eval_a: HandEvaluation, eval_b: HandEvaluation) -> int:
    if eval_a > eval_b:
        return 1
    if eval_a < eval_b:
        return -1
    return 0


def compare_hands(hand_a: Hand, hand_b: Hand) -> int:
    """Compare two hands.

    Args:
        hand_a: First hand
        hand_b: Second hand

    Returns:
        Positive if hand_a wins
        Negative if hand_b wins
        Zero if the hands tie (same category and same ranks in every position)
    """
    return _compare_evaluations(evaluate_hand(hand_a), evaluate_hand(hand_b))


def check_hands(hand_a: Hand, hand_b: Hand) -> Verdict:
    """Decide the winner between two hands.

    The higher category wins. Within a category, grouped ranks are compared
    before kickers, highest first. Suits are ignored.

    Args:
        hand_a: First hand
        hand_b: Second hand

    Returns:
        Verdict naming the winning hand (the object passed in) and its
        category label. On a tie, winning_hand is None and hand_type is the
        shared category label.
    """
    eval_a = evaluate_hand(hand_a)
    eval_b = evaluate_hand(hand_b)
    result = _compare_evaluations(eval_a, eval_b)

    if result > 0:
        verdict = Verdict(winning_hand=hand_a, hand_type=eval_a.label)
    elif result < 0:
        verdict = Verdict(winning_hand=hand_b, hand_type=eval_b.label)
    else:
        verdict = Verdict(winning_hand=None, hand_type=eval_a.label)

    logger.debug("Showdown %s (%s) vs %s (%s): %s", hand_a, eval_a, hand_b, eval_b, verdict)
    return verdict


def compare_highest_card(hand_a: Hand, hand_b: Hand) -> Hand:
    """Return the hand whose highest card outranks the other's.

    Only the single top rank is looked at; categories are ignored. When the
    top ranks are equal, hand_a is returned.
    """
    top_a = max(card.rank for card in hand_a.cards)
    top_b = max(card.rank for card in hand_b.cards)
    return hand_b if top_b > top_a else hand_a
