#!/usr/bin/env python3
"""Monte Carlo simulation of head-to-head five-card showdowns.

This script deals N pairs of hands, each pair from a fresh shuffled deck,
and collects:
- Frequency of each hand category
- How often the first hand wins, loses or ties

Usage:
    python -m poker_hands.scripts.simulate --deals 1000
    python -m poker_hands.scripts.simulate --deals 10000 --seed 42 --verbose
"""

import argparse
import logging
import sys
import time
from dataclasses import dataclass, field
from typing import Optional, List

import numpy as np
from rich import box
from rich.console import Console
from rich.table import Table

from poker_hands.engine import DeckOfCards, compare_hands
from poker_hands.rules import HandRank, describe_hand_ranks, evaluate_hand
from poker_hands.utils.seeding import set_seed

logger = logging.getLogger(__name__)

# Index 0 of the category histogram is unused; HandRank values start at 1
NUM_CATEGORY_BINS = max(HandRank) + 1


@dataclass
class SimulationStats:
    """Aggregated results of a simulation run.

    Attributes:
        categories: Category value of every evaluated hand
        outcomes: Per deal, 1 if the first hand won, -1 if it lost, 0 on a tie
    """

    categories: List[int] = field(default_factory=list)
    outcomes: List[int] = field(default_factory=list)

    @property
    def deals(self) -> int:
        return len(self.outcomes)

    def category_counts(self) -> np.ndarray:
        """Number of hands per category, indexed by HandRank value."""
        return np.bincount(np.asarray(self.categories, dtype=np.int64), minlength=NUM_CATEGORY_BINS)

    def category_frequencies(self) -> np.ndarray:
        counts = self.category_counts()
        total = counts.sum()
        if total == 0:
            return np.zeros_like(counts, dtype=np.float64)
        return counts / total

    def outcome_counts(self) -> dict:
        outcomes = np.asarray(self.outcomes, dtype=np.int64)
        return {
            "wins": int(np.sum(outcomes > 0)),
            "losses": int(np.sum(outcomes < 0)),
            "ties": int(np.sum(outcomes == 0)),
        }

    def summary_table(self) -> Table:
        """Rich table of category frequencies."""
        table = Table(title=f"Hand categories over {self.deals} deals", box=box.SIMPLE)
        table.add_column("Category", no_wrap=True)
        table.add_column("Hands", justify="right")
        table.add_column("Frequency", justify="right")
        table.add_column("Pattern", style="dim")

        counts = self.category_counts()
        freqs = self.category_frequencies()
        patterns = describe_hand_ranks()
        for hand_rank in sorted(HandRank, reverse=True):
            table.add_row(
                hand_rank.label,
                str(int(counts[hand_rank])),
                f"{freqs[hand_rank]:.4%}",
                patterns[hand_rank],
            )
        return table


def run_simulation(deals: int, seed: Optional[int] = None) -> SimulationStats:
    """Deal and compare ``deals`` pairs of hands.

    Args:
        deals: Number of hand pairs to deal
        seed: Base seed; deal i uses seed + i so runs are reproducible

    Returns:
        SimulationStats with every category and outcome recorded
    """
    if deals < 0:
        raise ValueError(f"deals must be non-negative, got {deals}")

    stats = SimulationStats()
    for i in range(deals):
        deal_seed = None if seed is None else seed + i
        deck = DeckOfCards(seed=deal_seed)
        hand_a, hand_b = deck.deal_hands(2)

        stats.categories.append(int(evaluate_hand(hand_a).hand_rank))
        stats.categories.append(int(evaluate_hand(hand_b).hand_rank))
        stats.outcomes.append(compare_hands(hand_a, hand_b))

        if (i + 1) % 1000 == 0:
            logger.debug("Completed %d/%d deals", i + 1, deals)

    return stats


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate head-to-head five-card showdowns")
    parser.add_argument("--deals", type=int, default=1000, help="Number of hand pairs to deal")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--plain", action="store_true", help="Disable colors")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    console = Console(no_color=True, highlight=False) if args.plain else Console()

    if args.deals < 1:
        console.print("[red]Error: --deals must be at least 1[/red]")
        return 2

    seed = set_seed(args.seed)
    console.print(f"Running {args.deals} deals (seed={seed})")

    start_time = time.time()
    stats = run_simulation(args.deals, seed=seed)
    elapsed = time.time() - start_time

    console.print(stats.summary_table())
    outcomes = stats.outcome_counts()
    console.print(
        f"First hand: {outcomes['wins']} wins, {outcomes['losses']} losses, {outcomes['ties']} ties"
    )
    console.print(f"[dim]Time: {elapsed:.2f}s ({elapsed / stats.deals * 1000:.3f}ms/deal)[/dim]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
