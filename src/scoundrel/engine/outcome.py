from __future__ import annotations

from collections.abc import Iterable

from .state import GameResult, GameState, Outcome
from .types import Card, Role


def loss_score(dungeon: Iterable[Card]) -> int:
    """Negative total weight of the monsters still waiting in the dungeon.

    Monsters sitting in the room are not counted.
    """
    return -sum(c.weight for c in dungeon if c.is_monster())


def win_score(health: int, last_card: Card) -> int:
    """Final health, plus the weight of a last potion even if its heal was capped."""
    if last_card.role is Role.POTION:
        return health + last_card.weight
    return health


def check_loss(state: GameState) -> GameResult | None:
    if state.player.health > 0:
        return None
    return GameResult(outcome=Outcome.LOST, score=loss_score(state.dungeon))


def check_win(state: GameState, last_card: Card) -> GameResult | None:
    if state.dungeon or state.room:
        return None
    return GameResult(outcome=Outcome.WON, score=win_score(state.player.health, last_card))
