from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from .oracle import AVOID_QUESTION, WEAPON_QUESTION
from .rules import can_use_weapon
from .state import GameState
from .types import Card, Role


@dataclass(frozen=True)
class AISpec:
    """Simple AI tuning parameters.

    difficulty:
      0 = easy (makes mistakes)
      1 = normal
      2 = hard (no mistakes)
    """

    difficulty: int = 1
    seed: int = 0


_MISTAKE_RATE = {0: 0.35, 1: 0.10}


def _incoming_damage(state: GameState, cards: Sequence[Card]) -> int:
    p = state.player
    total = 0
    for c in cards:
        if not c.is_monster():
            continue
        if p.weapon is not None and can_use_weapon(p, c.weight):
            total += max(0, c.weight - p.weapon)
        else:
            total += c.weight
    return total


def _card_priority(state: GameState, card: Card) -> float:
    p = state.player
    if card.role is Role.WEAPON:
        if p.weapon is None:
            return 40.0 + card.weight
        # A blunted weapon is only as good as what it can still kill.
        reach = p.weapon if p.weakest_killed is None else min(p.weapon, p.weakest_killed - 1)
        return 40.0 + card.weight if card.weight > reach else 2.0
    if card.role is Role.POTION:
        missing = state.config.max_health - p.health
        if missing >= card.weight:
            return 30.0 + card.weight
        return 1.0 + missing / 10.0
    # Monsters: strongest first while the weapon still handles them,
    # weakest first otherwise.
    if can_use_weapon(p, card.weight):
        return 20.0 + card.weight
    return 15.0 - card.weight


class AutoOracle:
    """Heuristic decision oracle bound to one game."""

    def __init__(self, state: GameState, spec: AISpec | None = None) -> None:
        self.state = state
        self.spec = spec or AISpec()
        self.rng = random.Random(self.spec.seed)
        self._pending: Card | None = None

    def _slips(self) -> bool:
        rate = _MISTAKE_RATE.get(self.spec.difficulty, 0.0)
        return rate > 0.0 and self.rng.random() < rate

    def _should_avoid(self) -> bool:
        return _incoming_damage(self.state, self.state.room) >= self.state.player.health

    def _should_use_weapon(self) -> bool:
        monster = self._pending
        if monster is None:
            return True
        p = self.state.player
        if monster.weight >= p.health:
            return True
        # Save a fresh weapon for something bigger than a small fry.
        return monster.weight >= 5 or (p.weapon or 0) <= monster.weight

    def confirm(self, prompt: str) -> bool:
        if prompt.endswith(AVOID_QUESTION):
            answer = self._should_avoid()
        elif prompt.endswith(WEAPON_QUESTION):
            answer = self._should_use_weapon()
        else:
            answer = False
        if self._slips():
            return not answer
        return answer

    def select(self, prompt: str, options: Sequence[Card]) -> int:
        if self._slips():
            idx = self.rng.randrange(len(options))
        else:
            scored = [(_card_priority(self.state, c), -i) for i, c in enumerate(options)]
            idx = -max(scored)[1]
        self._pending = options[idx]
        return idx
