from __future__ import annotations

import random
from typing import Sequence

from .types import ALL_RANKS, BLACK_SUITS, NUMBERED_RANKS, RED_SUITS, Card, Rank, Suit

DUNGEON_SIZE = 44


def _fold_in(cards: list[Card], suits: Sequence[Suit], ranks: Sequence[Rank]) -> None:
    for suit in suits:
        for rank in ranks:
            cards.append(Card(rank=rank, suit=suit))


def dungeon_composition() -> list[Card]:
    """The fixed, unshuffled dungeon: every black card plus the numbered red cards."""
    cards: list[Card] = []
    _fold_in(cards, BLACK_SUITS, ALL_RANKS)
    _fold_in(cards, RED_SUITS, NUMBERED_RANKS)
    return cards


def build_dungeon(rng: random.Random) -> list[Card]:
    cards = dungeon_composition()
    rng.shuffle(cards)
    return cards
