from __future__ import annotations

import random

from scoundrel.engine.oracle import ScriptedOracle
from scoundrel.engine.rules import apply_card, can_use_weapon, clamp, equip, fight, heal
from scoundrel.engine.state import GameConfig, GameState, Phase, PlayerState
from scoundrel.engine.types import Card


def _state(health: int = 20, weapon: int | None = None, weakest_killed: int | None = None) -> GameState:
    return GameState(
        config=GameConfig(),
        seed=0,
        rng=random.Random(0),
        dungeon=[],
        player=PlayerState(health=health, weapon=weapon, weakest_killed=weakest_killed),
        phase=Phase.RESOLVING_ROOM,
    )


def test_clamp() -> None:
    assert clamp(-3, 0, 20) == 0
    assert clamp(25, 0, 20) == 20
    assert clamp(7, 0, 20) == 7


def test_bare_handed_fight_takes_full_damage() -> None:
    state = _state()
    oracle = ScriptedOracle()
    apply_card(state, Card.parse("10S"), oracle)
    assert state.player.health == 10
    # No weapon, so nothing to ask.
    assert oracle.prompts == []


def test_weapon_blocks_and_marks_weakest_killed() -> None:
    state = _state(health=5)
    apply_card(state, Card.parse("6D"))
    assert state.player.weapon == 6
    assert state.player.weakest_killed is None

    oracle = ScriptedOracle(confirms=[True])
    apply_card(state, Card.parse("4C"), oracle)
    assert state.player.health == 5
    assert state.player.weakest_killed == 4
    assert oracle.prompts[-1].endswith("use weapon?")


def test_blunted_weapon_cannot_hit_equal_monster() -> None:
    state = _state(health=5, weapon=6, weakest_killed=4)
    oracle = ScriptedOracle(confirms=[True])
    apply_card(state, Card.parse("4S"), oracle)
    assert state.player.health == 1
    assert state.player.weakest_killed == 4
    # Ineligible weapon: the player is never asked.
    assert oracle.prompts == []


def test_declining_weapon_takes_full_damage() -> None:
    state = _state(weapon=9)
    damage = fight(state, 7, ScriptedOracle(confirms=[False]))
    assert damage == 7
    assert state.player.health == 13
    assert state.player.weakest_killed is None


def test_weapon_stronger_than_monster_blocks_everything() -> None:
    state = _state(health=3, weapon=10)
    damage = fight(state, 8, ScriptedOracle(confirms=[True]))
    assert damage == 0
    assert state.player.health == 3


def test_weapon_use_is_monotonic() -> None:
    p = PlayerState(weapon=5, weakest_killed=9)
    assert can_use_weapon(p, 8)
    assert not can_use_weapon(p, 9)
    assert not can_use_weapon(p, 14)
    assert not can_use_weapon(PlayerState(), 2)


def test_equip_clears_kill_history() -> None:
    state = _state(weapon=8, weakest_killed=3)
    equip(state, 4)
    assert state.player.weapon == 4
    assert state.player.weakest_killed is None
    assert can_use_weapon(state.player, 14)


def test_heal_caps_at_max_health() -> None:
    state = _state(health=3)
    apply_card(state, Card.parse("7H"))
    assert state.player.health == 10
    healed = heal(state, 10)
    assert healed == 10
    assert heal(state, 5) == 0
    assert state.player.health == 20


def test_health_stays_in_bounds() -> None:
    for start in range(0, 21):
        for w in range(2, 15):
            s = _state(health=start)
            heal(s, w)
            assert 0 <= s.player.health <= 20
            s = _state(health=start)
            fight(s, w, None)
            assert 0 <= s.player.health <= 20
            s = _state(health=start, weapon=w)
            fight(s, 14, ScriptedOracle(confirms=[True]))
            assert 0 <= s.player.health <= 20
