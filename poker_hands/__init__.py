"""Poker Hands - five-card poker hand evaluation.

Deals five-card hands from a standard deck, classifies them into the
standard poker categories and decides head-to-head showdowns.
"""

__version__ = "0.1.0"
__author__ = "Poker Hands Team"

from poker_hands.utils.seeding import set_seed

__all__ = ["__version__", "set_seed"]
