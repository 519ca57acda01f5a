"""Deck of cards: shuffling and dealing five-card hands.

Each DeckOfCards owns its own pool and random number generator, so games
running side by side never share deck state. A deck is not thread safe;
callers dealing from one deck on several threads must serialize access.
"""

import logging
import random
from typing import List, Optional, Tuple

from poker_hands.rules import Card, Hand, HAND_SIZE, create_standard_deck

logger = logging.getLogger(__name__)


class InsufficientCards(Exception):
    """Raised when the deck cannot supply the cards requested."""

    def __init__(self, requested: int, remaining: int):
        super().__init__(f"Cannot deal {requested} cards, only {remaining} remaining")
        self.requested = requested
        self.remaining = remaining


class DeckOfCards:
    """A shrinking pool of the 52 standard cards.

    Cards are dealt from the front of the pool. Dealt cards never return.

    Attributes:
        rng: Random number generator used for the initial shuffle
    """

    def __init__(self, seed: Optional[int] = None, shuffle: bool = True):
        """Build a full deck and optionally shuffle it.

        Args:
            seed: Random seed for reproducibility
            shuffle: Whether to shuffle; an unshuffled deck is in
                create_standard_deck() order
        """
        self.rng = random.Random(seed)
        self._cards: List[Card] = create_standard_deck()
        if shuffle:
            self.rng.shuffle(self._cards)

    @property
    def remaining_count(self) -> int:
        """Number of cards left to deal."""
        return len(self._cards)

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Snapshot of the remaining cards in dealing order."""
        return tuple(self._cards)

    def _take(self, count: int) -> List[Card]:
        if count > len(self._cards):
            raise InsufficientCards(requested=count, remaining=len(self._cards))
        taken = self._cards[:count]
        del self._cards[:count]
        return taken

    def deal_hand(self) -> Hand:
        """Remove five cards from the front of the pool as a new hand.

        Raises:
            InsufficientCards: If fewer than five cards remain. The pool is
                left untouched.
        """
        hand = Hand(self._take(HAND_SIZE))
        logger.debug("Dealt %s, %d cards remaining", hand, len(self._cards))
        return hand

    def deal_hands(self, count: int) -> List[Hand]:
        """Deal several hands at once.

        Either every hand is dealt or none is: the deck is checked for
        ``count * 5`` cards before anything is removed.

        Raises:
            ValueError: If count is negative
            InsufficientCards: If the deck cannot cover all hands
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        cards = self._take(count * HAND_SIZE)
        hands = [Hand(cards[i : i + HAND_SIZE]) for i in range(0, len(cards), HAND_SIZE)]
        logger.debug("Dealt %d hands, %d cards remaining", count, len(self._cards))
        return hands

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"DeckOfCards(remaining={len(self._cards)})"
