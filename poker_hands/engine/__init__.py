"""Poker game engine implementations.

This module provides:
- DeckOfCards: Shuffled 52-card deck that deals five-card hands
- InsufficientCards: Raised when a deck runs out
- Verdict: Outcome of a two-hand showdown
- check_hands / compare_hands / compare_highest_card: Showdown comparisons
"""

from .deck import DeckOfCards, InsufficientCards
from .showdown import (
    Verdict,
    check_hands,
    compare_hands,
    compare_highest_card,
)

__all__ = [
    "DeckOfCards",
    "InsufficientCards",
    "Verdict",
    "check_hands",
    "compare_hands",
    "compare_highest_card",
]
