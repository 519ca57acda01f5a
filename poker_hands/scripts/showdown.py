#!/usr/bin/env python3
"""Deal (or read) two five-card hands and show who wins.

Usage:
    python -m poker_hands.scripts.showdown
    python -m poker_hands.scripts.showdown --seed 42
    python -m poker_hands.scripts.showdown --hand-a "5C 5S 4S 7C 9S" --hand-b "5C 5S 4D 4C 9S"
    python -m poker_hands.scripts.showdown --plain --verbose

Card input:
- Ranks 2-9, T (or 10), J, Q, K, A
- Suits as letters C D H S or symbols ♣ ♦ ♥ ♠, case-insensitive
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from poker_hands.engine import DeckOfCards, InsufficientCards, Verdict, check_hands
from poker_hands.rules import Card, Hand, HandEvaluation, Suit, evaluate_hand, RANK_SYMBOLS, SUIT_SYMBOLS

# Colors for suits - high contrast on dark terminals
SUIT_COLORS = {
    Suit.HEART: "red1",
    Suit.DIAMOND: "red1",
    Suit.CLUB: "green1",
    Suit.SPADE: "cyan1",
}
COLOR_WINNER = "green"
COLOR_TIE = "yellow"

logger = logging.getLogger(__name__)


def debug_enabled() -> bool:
    return os.getenv("POKER_HANDS_DEBUG") == "1"


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for command-line use."""
    level = logging.DEBUG if verbose or debug_enabled() else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def make_console(plain: bool = False) -> Console:
    if plain:
        return Console(no_color=True, highlight=False)
    return Console()


def get_card_rich_text(card: Card) -> Text:
    """Return a Rich Text object for a card with symbol and color."""
    style = f"bold {SUIT_COLORS[card.suit]}"
    return Text(f"{RANK_SYMBOLS[card.rank]}{SUIT_SYMBOLS[card.suit]}", style=style)


def render_hand_visual(hand: Hand) -> Table:
    """Render a hand as a horizontal row of small card panels."""
    grid = Table.grid(padding=(0, 1))
    grid.add_row(
        *[Panel(get_card_rich_text(card), expand=False, padding=(0, 1), border_style="white") for card in hand]
    )
    return grid


def build_hand_panel(name: str, hand: Hand, evaluation: HandEvaluation, verdict: Verdict) -> Panel:
    """Panel for one player's hand, highlighted when it won."""
    won = verdict.winning_hand is hand
    if won:
        border = COLOR_WINNER
        title = f"{name} - WINNER"
    elif verdict.is_tie:
        border = COLOR_TIE
        title = f"{name} - TIE"
    else:
        border = "dim"
        title = name

    ranks = " ".join(RANK_SYMBOLS[r] for r in evaluation.tiebreak)
    content = [
        render_hand_visual(hand),
        Text(evaluation.label, style="bold"),
        Text(f"Tie-break: {ranks}", style="dim"),
    ]
    return Panel(Group(*content), title=title, border_style=border)


def build_verdict_panel(verdict: Verdict, names: Tuple[str, str], hands: Tuple[Hand, Hand]) -> Panel:
    """Summary panel stating the result of the showdown."""
    if verdict.is_tie:
        message = Text(f"Tie - both hands hold {verdict.hand_type}", style=f"bold {COLOR_TIE}")
    else:
        winner = names[0] if verdict.winning_hand is hands[0] else names[1]
        message = Text(f"{winner} wins with {verdict.hand_type}", style=f"bold {COLOR_WINNER}")
    return Panel(message, title="Verdict", box=box.HEAVY)


def parse_hand_arg(text: str) -> Hand:
    """Parse a hand given on the command line."""
    return Hand.from_string(text)


def resolve_hands(
    hand_a: Optional[str],
    hand_b: Optional[str],
    seed: Optional[int],
) -> Tuple[Hand, Hand, Optional[DeckOfCards]]:
    """Return the two hands to compare, dealing any that were not given.

    Missing hands are dealt from one fresh deck, skipping cards already held
    by a given hand so the two hands never share a card.
    """
    given: List[Optional[Hand]] = [
        parse_hand_arg(hand_a) if hand_a else None,
        parse_hand_arg(hand_b) if hand_b else None,
    ]
    if all(h is not None for h in given):
        return given[0], given[1], None

    deck = DeckOfCards(seed=seed)
    held = {card for h in given if h is not None for card in h}
    resolved: List[Hand] = []
    for hand in given:
        if hand is None:
            hand = deck.deal_hand()
            while held.intersection(hand.cards):
                logger.debug("Redealing %s, it shares a card with the given hand", hand)
                hand = deck.deal_hand()
        resolved.append(hand)
    return resolved[0], resolved[1], deck


def run_showdown(hand_a: Hand, hand_b: Hand, console: Console) -> Verdict:
    """Evaluate, compare and print both hands."""
    eval_a = evaluate_hand(hand_a)
    eval_b = evaluate_hand(hand_b)
    verdict = check_hands(hand_a, hand_b)

    names = ("Hand A", "Hand B")
    console.print(build_hand_panel(names[0], hand_a, eval_a, verdict))
    console.print(build_hand_panel(names[1], hand_b, eval_b, verdict))
    console.print(build_verdict_panel(verdict, names, (hand_a, hand_b)))
    return verdict


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Poker Hands: two-hand showdown")
    parser.add_argument("--hand-a", type=str, help='First hand, e.g. "5C 5S 4S 7C 9S"')
    parser.add_argument("--hand-b", type=str, help='Second hand, e.g. "TC JC QC KC AC"')
    parser.add_argument("--seed", type=int, default=None, help="Seed for dealing missing hands")
    parser.add_argument("--plain", action="store_true", help="Disable colors")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    console = make_console(args.plain)

    try:
        hand_a, hand_b, deck = resolve_hands(args.hand_a, args.hand_b, args.seed)
    except (ValueError, InsufficientCards) as exc:
        if debug_enabled():
            logger.exception("Could not build hands")
        console.print(f"[red]Error: {exc}[/red]")
        return 2

    if deck is not None:
        console.print(f"[dim]Dealt from a fresh deck, {deck.remaining_count} cards remaining[/dim]")
    run_showdown(hand_a, hand_b, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
