"""Five-card hands, category detection, and evaluation.

Hand categories (weakest to strongest):
- High card: nothing better
- Pair: two cards of the same rank
- Two pair: two different pairs
- Three of a kind: three cards of the same rank
- Straight: five consecutive ranks (ace high only, no A-2-3-4-5)
- Flush: five cards of one suit
- Full house: three of a kind plus a pair
- Four of a kind: four cards of the same rank
- Straight flush: straight and flush together
- Royal flush: T-J-Q-K-A straight flush

The ``is_*`` predicates are literal pattern checks: each answers whether its
own pattern is present and ignores stronger categories. ``evaluate_hand`` is
the classifier and always reports the single best category.

Comparison rules:
- Higher category wins
- Same category: compare tie-break ranks lexicographically, grouped ranks
  first (largest group, then highest rank), kickers after
- Suits never break ties
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple

from .ranks import (
    Card,
    Rank,
    Suit,
    are_consecutive,
    get_rank_counts,
    get_suit_counts,
)

# Number of cards in a hand
HAND_SIZE = 5

ROYAL_RANKS = frozenset([Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE])


class InvalidHandSize(ValueError):
    """Raised when a hand is built from anything other than five cards."""

    def __init__(self, size: int):
        super().__init__(f"A hand needs exactly {HAND_SIZE} cards, got {size}")
        self.size = size


class HandRank(IntEnum):
    """Hand categories ordered by strength (higher value = stronger hand)."""

    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def label(self) -> str:
        """Display name of the category."""
        return HAND_RANK_LABELS[self]

    def __str__(self) -> str:
        return self.label


HAND_RANK_LABELS = {
    HandRank.HIGH_CARD: "High Card",
    HandRank.PAIR: "Pair",
    HandRank.TWO_PAIR: "Two Pair",
    HandRank.THREE_OF_A_KIND: "Three of a Kind",
    HandRank.STRAIGHT: "Straight",
    HandRank.FLUSH: "Flush",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind",
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
    HandRank.ROYAL_FLUSH: "Royal Flush",
}


@dataclass(frozen=True)
class Hand:
    """An ordered, immutable hand of exactly five cards.

    Cards keep the order they were given in. Duplicate cards are not
    rejected here; a deck never deals them, but tests may build them.

    Attributes:
        cards: Tuple of the five cards
    """

    cards: Tuple[Card, ...]

    def __post_init__(self):
        cards = tuple(self.cards)
        if len(cards) != HAND_SIZE:
            raise InvalidHandSize(len(cards))
        object.__setattr__(self, "cards", cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return "".join(str(c) for c in self.cards)

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        """Build a hand from a string like "5C 5S 4S 7C 9S"."""
        return cls(make_cards_from_string(s))


class _HandProfile(NamedTuple):
    """Derived views of a hand, computed once per evaluation."""

    rank_counts: Dict[Rank, int]
    suit_counts: Dict[Suit, int]
    sorted_ranks: List[Rank]

    def ranks_with_count(self, count: int) -> List[Rank]:
        return [r for r, c in self.rank_counts.items() if c == count]


def _profile(hand: Hand) -> _HandProfile:
    return _HandProfile(
        rank_counts=get_rank_counts(hand.cards),
        suit_counts=get_suit_counts(hand.cards),
        sorted_ranks=sorted(card.rank for card in hand.cards),
    )


def _has_pair(p: _HandProfile) -> bool:
    return len(p.ranks_with_count(2)) == 1 and max(p.rank_counts.values()) < 3


def _has_two_pair(p: _HandProfile) -> bool:
    return len(p.ranks_with_count(2)) == 2


def _has_three_of_a_kind(p: _HandProfile) -> bool:
    return len(p.ranks_with_count(3)) == 1 and not p.ranks_with_count(2)


def _has_straight(p: _HandProfile) -> bool:
    if len(p.rank_counts) != HAND_SIZE:
        return False
    return are_consecutive(p.sorted_ranks)


def _has_flush(p: _HandProfile) -> bool:
    return any(count == HAND_SIZE for count in p.suit_counts.values())


def _has_full_house(p: _HandProfile) -> bool:
    return len(p.ranks_with_count(3)) == 1 and len(p.ranks_with_count(2)) == 1


def _has_four_of_a_kind(p: _HandProfile) -> bool:
    return len(p.ranks_with_count(4)) == 1


def _has_straight_flush(p: _HandProfile) -> bool:
    return _has_straight(p) and _has_flush(p)


def _has_royal_flush(p: _HandProfile) -> bool:
    return _has_straight_flush(p) and frozenset(p.sorted_ranks) == ROYAL_RANKS


def is_pair(hand: Hand) -> Optional[Hand]:
    """Return the hand if it holds exactly one pair and no trips or quads."""
    return hand if _has_pair(_profile(hand)) else None


def is_two_pair(hand: Hand) -> Optional[Hand]:
    """Return the hand if two different ranks each appear exactly twice."""
    return hand if _has_two_pair(_profile(hand)) else None


def is_three_of_a_kind(hand: Hand) -> Optional[Hand]:
    """Return the hand if one rank appears three times with no pair beside it."""
    return hand if _has_three_of_a_kind(_profile(hand)) else None


def is_straight(hand: Hand) -> Optional[Hand]:
    """Return the hand if its five ranks are distinct and consecutive."""
    return hand if _has_straight(_profile(hand)) else None


def is_flush(hand: Hand) -> Optional[Hand]:
    """Return the hand if all five cards share a suit."""
    return hand if _has_flush(_profile(hand)) else None


def is_full_house(hand: Hand) -> Optional[Hand]:
    """Return the hand if it holds three of one rank and two of another."""
    return hand if _has_full_house(_profile(hand)) else None


def is_four_of_a_kind(hand: Hand) -> Optional[Hand]:
    """Return the hand if one rank appears four times."""
    return hand if _has_four_of_a_kind(_profile(hand)) else None


def is_straight_flush(hand: Hand) -> Optional[Hand]:
    """Return the hand if it is both a straight and a flush."""
    return hand if _has_straight_flush(_profile(hand)) else None


def is_royal_flush(hand: Hand) -> Optional[Hand]:
    """Return the hand if it is the T-J-Q-K-A straight flush."""
    return hand if _has_royal_flush(_profile(hand)) else None


# Strongest first; the first match is the hand's category
_CATEGORY_CHECKS = (
    (HandRank.ROYAL_FLUSH, _has_royal_flush),
    (HandRank.STRAIGHT_FLUSH, _has_straight_flush),
    (HandRank.FOUR_OF_A_KIND, _has_four_of_a_kind),
    (HandRank.FULL_HOUSE, _has_full_house),
    (HandRank.FLUSH, _has_flush),
    (HandRank.STRAIGHT, _has_straight),
    (HandRank.THREE_OF_A_KIND, _has_three_of_a_kind),
    (HandRank.TWO_PAIR, _has_two_pair),
    (HandRank.PAIR, _has_pair),
)


@dataclass(frozen=True, order=True)
class HandEvaluation:
    """The best category of a hand and the ranks that break ties within it.

    Evaluations compare by category first, then by tie-break ranks.

    Attributes:
        hand_rank: The best category the hand satisfies
        tiebreak: Distinct ranks ordered by group size, then rank, highest first
    """

    hand_rank: HandRank
    tiebreak: Tuple[Rank, ...]

    @property
    def label(self) -> str:
        return self.hand_rank.label

    def __str__(self) -> str:
        ranks = " ".join(str(int(r)) for r in self.tiebreak)
        return f"{self.label}({ranks})"


def _tiebreak_ranks(rank_counts: Dict[Rank, int]) -> Tuple[Rank, ...]:
    # Pairs/trips/quads come before kickers; straights, flushes and high
    # cards have no groups so this is just the ranks high to low.
    ordered = sorted(rank_counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    return tuple(rank for rank, _ in ordered)


def evaluate_hand(hand: Hand) -> HandEvaluation:
    """Classify a hand into its single best category.

    Args:
        hand: The hand to classify

    Returns:
        HandEvaluation with the category and tie-break ranks. Hands that match
        nothing else are HIGH_CARD.
    """
    profile = _profile(hand)
    hand_rank = HandRank.HIGH_CARD
    for candidate, check in _CATEGORY_CHECKS:
        if check(profile):
            hand_rank = candidate
            break
    return HandEvaluation(hand_rank=hand_rank, tiebreak=_tiebreak_ranks(profile.rank_counts))


def make_cards_from_ranks(ranks: List[Rank], suits: Optional[List[Suit]] = None) -> List[Card]:
    """Create cards from a list of ranks and optional suits.

    If suits not provided, cycles through suits so that five cards never
    form a flush by accident.

    Args:
        ranks: List of Rank values
        suits: Optional list of Suit values (must match length of ranks if provided)

    Returns:
        List of Card objects
    """
    if suits is None:
        suits = [Suit(i % 4) for i in range(len(ranks))]

    if len(ranks) != len(suits):
        raise ValueError("ranks and suits must have same length")

    return [Card(suit=s, rank=r) for r, s in zip(ranks, suits)]


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "5C 5S 4S 7C 9S".

    Commas are accepted as separators too.

    Args:
        s: Whitespace or comma separated card strings

    Returns:
        List of Card objects
    """
    return [Card.from_string(cs) for cs in s.replace(",", " ").split()]


def describe_hand_ranks() -> Dict[HandRank, str]:
    """Get a description of the pattern behind each category."""
    return {
        HandRank.HIGH_CARD: "No pair, straight or flush",
        HandRank.PAIR: "Two cards of the same rank",
        HandRank.TWO_PAIR: "Two different pairs",
        HandRank.THREE_OF_A_KIND: "Three cards of the same rank",
        HandRank.STRAIGHT: "Five consecutive ranks, ace high only",
        HandRank.FLUSH: "Five cards of the same suit",
        HandRank.FULL_HOUSE: "Three of a kind plus a pair",
        HandRank.FOUR_OF_A_KIND: "Four cards of the same rank",
        HandRank.STRAIGHT_FLUSH: "Straight with all cards of one suit",
        HandRank.ROYAL_FLUSH: "Ten to ace straight flush",
    }
