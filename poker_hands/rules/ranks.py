"""Card rank definitions and utilities.

Rank order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

Aces are always high; there is no ace-low ordering.

This module provides:
- Rank constants and ordering
- Card representation
- Suit definitions
- Histogram and comparison utilities
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List


class Rank(IntEnum):
    """Card ranks ordered by strength (higher value = stronger rank).

    Values match the pip count, with face cards continuing the sequence so
    that consecutive ranks always differ by exactly one.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14  # Highest rank


class Suit(IntEnum):
    """Card suits. Values are identifiers only and carry no ranking."""

    CLUB = 0
    DIAMOND = 1
    HEART = 2
    SPADE = 3


# Rank symbols for display
RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Suit symbols for display
SUIT_SYMBOLS = {
    Suit.CLUB: "♣",
    Suit.DIAMOND: "♦",
    Suit.HEART: "♥",
    Suit.SPADE: "♠",
}

# Symbol to rank mapping (for parsing); "10" is accepted as an alias for "T"
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_RANK["10"] = Rank.TEN

# Symbol/letter to suit mapping (for parsing)
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}
SYMBOL_TO_SUIT.update({"C": Suit.CLUB, "D": Suit.DIAMOND, "H": Suit.HEART, "S": Suit.SPADE})

# Number of cards in a standard deck
DECK_SIZE = len(Rank) * len(Suit)


@dataclass(frozen=True)
class Card:
    """A playing card with suit and rank.

    Immutable and hashable for use in sets. Two cards are equal only when
    both suit and rank match.
    """

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]})"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from string like 'T♣', '10S' or 'ah'.

        Args:
            s: Card string in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            ValueError: If string cannot be parsed
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s!r}")

        suit_char = s[-1].upper()
        rank_str = s[:-1].upper()

        if suit_char not in SYMBOL_TO_SUIT:
            raise ValueError(f"Invalid suit character: {s[-1]}")
        suit = SYMBOL_TO_SUIT[suit_char]

        if rank_str not in SYMBOL_TO_RANK:
            raise ValueError(f"Invalid rank: {s[:-1]}")
        rank = SYMBOL_TO_RANK[rank_str]

        return cls(suit=suit, rank=rank)


def are_consecutive(ranks: List[Rank]) -> bool:
    """Check if a sorted list of unique ranks are consecutive.

    Args:
        ranks: List of ranks (should be sorted and unique)

    Returns:
        True if all ranks are consecutive
    """
    if len(ranks) < 2:
        return True

    for i in range(1, len(ranks)):
        if int(ranks[i]) - int(ranks[i - 1]) != 1:
            return False
    return True


def get_rank_counts(cards: Iterable[Card]) -> Dict[Rank, int]:
    """Count occurrences of each rank in a list of cards.

    Args:
        cards: Iterable of Card objects

    Returns:
        Dict mapping Rank to count
    """
    counts: Dict[Rank, int] = {}
    for card in cards:
        counts[card.rank] = counts.get(card.rank, 0) + 1
    return counts


def get_suit_counts(cards: Iterable[Card]) -> Dict[Suit, int]:
    """Count occurrences of each suit in a list of cards."""
    counts: Dict[Suit, int] = {}
    for card in cards:
        counts[card.suit] = counts.get(card.suit, 0) + 1
    return counts


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (4 suits × 13 ranks), unshuffled
    """
    deck = []
    for suit in Suit:
        for rank in Rank:
            deck.append(Card(suit=suit, rank=rank))
    return deck


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards by rank (ascending), then by suit.

    Args:
        cards: Iterable of Card objects

    Returns:
        New sorted list of cards
    """
    return sorted(cards, key=lambda c: (c.rank, c.suit))


def compare_ranks(rank1: Rank, rank2: Rank) -> int:
    """Compare two ranks.

    Args:
        rank1: First rank
        rank2: Second rank

    Returns:
        Positive if rank1 > rank2, negative if rank1 < rank2, zero if equal
    """
    return int(rank1) - int(rank2)
