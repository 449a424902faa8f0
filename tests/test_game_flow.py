from __future__ import annotations

import random

import pytest

from scoundrel.engine.actions import AcceptRoomAction, AvoidRoomAction, PlayCardAction
from scoundrel.engine.errors import InvalidDecision
from scoundrel.engine.game import new_game, play, step
from scoundrel.engine.oracle import ScriptedOracle
from scoundrel.engine.outcome import loss_score, win_score
from scoundrel.engine.state import GameConfig, GameState, Outcome, Phase, PlayerState
from scoundrel.engine.status import render_status
from scoundrel.engine.types import Card


def _cards(codes: str) -> list[Card]:
    return [Card.parse(c) for c in codes.split()]


def _state(dungeon: str, room: str, health: int = 20, weapon: int | None = None) -> GameState:
    return GameState(
        config=GameConfig(),
        seed=0,
        rng=random.Random(0),
        dungeon=_cards(dungeon),
        room=_cards(room),
        player=PlayerState(health=health, weapon=weapon),
        phase=Phase.RESOLVING_ROOM,
    )


def test_new_game_starts_with_a_full_room() -> None:
    state = new_game(seed=7)
    assert state.phase is Phase.AWAIT_AVOID_DECISION
    assert len(state.room) == 4
    assert len(state.dungeon) == 40
    assert state.player.health == 20
    assert state.player.weapon is None


def test_avoid_then_forced_entry() -> None:
    state = new_game(seed=7)
    first_room = list(state.room)
    res = step(state, AvoidRoomAction())
    assert res.ok
    assert state.dungeon[-4:] == first_room
    assert len(state.room) == 4
    assert state.just_avoided_room

    res2 = step(state, AvoidRoomAction())
    assert not res2.ok
    assert res2.error is not None
    assert "two rooms in a row" in res2.error

    res3 = step(state, AcceptRoomAction())
    assert res3.ok
    assert state.phase is Phase.RESOLVING_ROOM
    assert not state.just_avoided_room


def test_cards_cannot_be_played_before_entering() -> None:
    state = new_game(seed=3)
    res = step(state, PlayCardAction(room_index=0))
    assert not res.ok


def test_invalid_room_index_is_rejected() -> None:
    state = _state("2S", "3S 4S")
    res = step(state, PlayCardAction(room_index=5))
    assert not res.ok
    assert res.error == "Invalid room index."


def test_room_refills_after_three_cards() -> None:
    state = _state("2S 3S 4S 5S 6S", "2H 3H 4H 5H")
    for _ in range(3):
        assert step(state, PlayCardAction(room_index=0)).ok
    assert state.phase is Phase.AWAIT_AVOID_DECISION
    assert state.room == _cards("5H 2S 3S 4S")
    assert state.dungeon == _cards("5S 6S")


def test_final_room_is_played_out() -> None:
    state = _state("", "2S 3H")
    step(state, PlayCardAction(room_index=0))
    assert state.phase is Phase.RESOLVING_ROOM
    assert state.result is None
    step(state, PlayCardAction(room_index=0))
    assert state.result is not None
    assert state.result.outcome is Outcome.WON
    # 2♠ leaves 18, 3♥ heals back to the cap of 20, then banks its 3.
    assert state.result.score == 23


def test_final_potion_is_banked() -> None:
    state = _state("", "9H", health=6)
    step(state, PlayCardAction(room_index=0))
    assert state.phase is Phase.WON
    assert state.player.health == 15
    assert state.result is not None
    assert state.result.score == 24


def test_final_potion_is_banked_after_a_capped_heal() -> None:
    state = _state("", "9H", health=15)
    step(state, PlayCardAction(room_index=0))
    assert state.player.health == 20
    assert state.result is not None
    assert state.result.score == 29


def test_win_without_final_potion_scores_health() -> None:
    state = _state("", "3S", health=15)
    step(state, PlayCardAction(room_index=0))
    assert state.result is not None
    assert state.result.outcome is Outcome.WON
    assert state.result.score == 12


def test_loss_counts_only_dungeon_monsters() -> None:
    state = _state("10S 8C 5H 6S 4C 7D 2S", "KS QC 2H", health=5)
    step(state, PlayCardAction(room_index=0))
    assert state.phase is Phase.LOST
    assert state.result is not None
    assert state.result.outcome is Outcome.LOST
    assert state.result.score == -30


def test_no_actions_after_game_end() -> None:
    state = _state("", "9H", health=15)
    step(state, PlayCardAction(room_index=0))
    res = step(state, AvoidRoomAction())
    assert not res.ok
    assert res.error == "Game already ended."


def test_score_helpers() -> None:
    assert loss_score(_cards("AS KC 9H 5D")) == -27
    assert win_score(20, Card.parse("5H")) == 25
    assert win_score(15, Card.parse("9H")) == 24
    assert win_score(17, Card.parse("5S")) == 17


def test_weapon_answer_is_recorded_for_replay() -> None:
    state = _state("2S 3S 4S", "9S 2H 3H", weapon=10)
    step(state, PlayCardAction(room_index=0), ScriptedOracle(confirms=[True]))
    assert state.action_log[-1] == PlayCardAction(room_index=0, use_weapon=True)
    assert state.player.health == 20
    assert state.player.weakest_killed == 9


def test_play_drives_oracle_decisions() -> None:
    state = _state("", "10D 5C 3H")
    oracle = ScriptedOracle(confirms=[True], selections=[0, 0, 0])
    result = play(state, oracle)
    assert result.outcome is Outcome.WON
    # 5 blocked by the 10 weapon, then 3♥ banked at full health.
    assert result.score == 23
    assert any(p.endswith("use weapon?") for p in oracle.prompts)


def test_play_rejects_out_of_range_selection() -> None:
    state = new_game(seed=1)
    oracle = ScriptedOracle(confirms=[False], selections=[9])
    with pytest.raises(InvalidDecision):
        play(state, oracle)


def test_status_line() -> None:
    state = _state("2S 3S", "KS 3H", health=9, weapon=7)
    assert render_status(state) == "H:  9, W:  7 (M:  0), D:  2, R: K♠ 3♥"
    assert render_status(state, "avoid?").endswith(", avoid?")
