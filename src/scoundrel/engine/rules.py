from __future__ import annotations

import logging

from .oracle import WEAPON_QUESTION, DecisionOracle
from .state import GameState, PlayerState
from .status import render_status
from .types import Card, Role

log = logging.getLogger(__name__)


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def can_use_weapon(player: PlayerState, monster: int) -> bool:
    """A weapon only works on monsters weaker than the last one it killed."""
    if player.weapon is None:
        return False
    if player.weakest_killed is None:
        return True
    return monster < player.weakest_killed


def equip(state: GameState, weapon: int) -> None:
    p = state.player
    p.weapon = weapon
    p.weakest_killed = None
    state.record("WEAPON_EQUIPPED", weapon=weapon)


def fight(state: GameState, monster: int, oracle: DecisionOracle | None) -> int:
    """Fight a monster, asking the oracle whether to use an eligible weapon.

    Returns the damage taken.
    """
    p = state.player
    blocked = 0
    used = False
    if can_use_weapon(p, monster) and oracle is not None:
        if oracle.confirm(render_status(state, WEAPON_QUESTION)):
            assert p.weapon is not None
            p.weakest_killed = monster
            blocked = p.weapon
            used = True

    damage = clamp(monster - blocked, 0, monster)
    before = p.health
    p.health = clamp(p.health - damage, 0, state.config.max_health)
    state.record("MONSTER_FOUGHT", monster=monster, weapon_used=used, damage=damage)
    log.debug("fought %d (weapon used: %s), health %d -> %d", monster, used, before, p.health)
    return damage


def heal(state: GameState, potion: int) -> int:
    p = state.player
    before = p.health
    p.health = clamp(p.health + potion, 0, state.config.max_health)
    healed = p.health - before
    state.record("POTION_DRUNK", potion=potion, healed=healed)
    return healed


def apply_card(state: GameState, card: Card, oracle: DecisionOracle | None = None) -> None:
    role = card.role
    if role is Role.WEAPON:
        equip(state, card.weight)
    elif role is Role.MONSTER:
        fight(state, card.weight, oracle)
    elif role is Role.POTION:
        heal(state, card.weight)
