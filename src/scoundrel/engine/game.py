from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterable

from .actions import AcceptRoomAction, Action, AvoidRoomAction, PlayCardAction
from .deck import build_dungeon
from .errors import GameError, InvalidDecision
from .oracle import AVOID_QUESTION, DecisionOracle, FixedAnswerOracle
from .outcome import check_loss, check_win
from .room import avoid_room, can_avoid, enter_room
from .rules import apply_card
from .state import Event, GameConfig, GameResult, GameState, Outcome, Phase, PlayerState
from .status import render_status
from .types import Card

log = logging.getLogger(__name__)


@dataclass
class StepResult:
    ok: bool
    events: list[Event]
    error: str | None = None


class _RecordingOracle:
    """Forwards to another oracle and remembers the weapon answer."""

    def __init__(self, inner: DecisionOracle | None) -> None:
        self.inner = inner
        self.answer = False

    def confirm(self, prompt: str) -> bool:
        if self.inner is None:
            return False
        self.answer = self.inner.confirm(prompt)
        return self.answer

    def select(self, prompt: str, options: Sequence[Card]) -> int:
        if self.inner is None:
            raise InvalidDecision("No oracle to select a card")
        return self.inner.select(prompt, options)


def _fail(msg: str) -> StepResult:
    return StepResult(ok=False, events=[], error=msg)


def _room_continues(state: GameState) -> bool:
    if len(state.room) > 1:
        return True
    # Once the dungeon is spent the last room is played out to the end.
    return not state.dungeon and bool(state.room)


def resolvable_cards(state: GameState) -> list[Card]:
    if state.phase is not Phase.RESOLVING_ROOM:
        return []
    return list(state.room)


def _finish(state: GameState, result: GameResult) -> None:
    state.result = result
    state.phase = Phase.WON if result.outcome is Outcome.WON else Phase.LOST
    state.record("GAME_ENDED", outcome=result.outcome.value, score=result.score)
    log.info("game %d ended: %s, score %d", state.seed, result.outcome.value, result.score)


def _avoid(state: GameState) -> StepResult:
    if state.phase is not Phase.AWAIT_AVOID_DECISION:
        return _fail("No room to avoid right now.")
    if not can_avoid(state):
        return _fail("Cannot avoid two rooms in a row.")
    before = len(state.event_log)
    avoid_room(state)
    enter_room(state)
    return StepResult(ok=True, events=state.event_log[before:])


def _accept(state: GameState) -> StepResult:
    if state.phase is not Phase.AWAIT_AVOID_DECISION:
        return _fail("No room waiting to be entered.")
    before = len(state.event_log)
    state.just_avoided_room = False
    state.phase = Phase.RESOLVING_ROOM
    state.record("ROOM_ACCEPTED", room=[c.code for c in state.room])
    return StepResult(ok=True, events=state.event_log[before:])


def _play_card(state: GameState, action: PlayCardAction, oracle: DecisionOracle | None) -> StepResult:
    if state.phase is not Phase.RESOLVING_ROOM:
        return _fail("Enter the room before playing cards.")
    if action.room_index < 0 or action.room_index >= len(state.room):
        return _fail("Invalid room index.")

    before = len(state.event_log)
    card = state.room[action.room_index]
    if action.use_weapon is None:
        recorder = _RecordingOracle(oracle)
    else:
        recorder = _RecordingOracle(FixedAnswerOracle(action.use_weapon))
    apply_card(state, card, recorder)
    state.room.pop(action.room_index)
    state.cards_resolved += 1
    state.record("CARD_RESOLVED", card=card.code, health=state.player.health)
    # Record the answer actually given so replays need no oracle.
    state.action_log[-1] = PlayCardAction(room_index=action.room_index, use_weapon=recorder.answer)

    result = check_loss(state) or check_win(state, card)
    if result is not None:
        _finish(state, result)
    elif not _room_continues(state):
        enter_room(state)
        state.phase = Phase.AWAIT_AVOID_DECISION
    return StepResult(ok=True, events=state.event_log[before:])


def step(state: GameState, action: Action, oracle: DecisionOracle | None = None) -> StepResult:
    """Apply a single action to the game state.

    This mutates `state` in-place but remains deterministic for a given
    (seed, action sequence). ``oracle`` is consulted only for weapon
    questions left open by a ``PlayCardAction``.
    """
    if state.finished:
        return _fail("Game already ended.")

    state.action_log.append(action)

    if isinstance(action, AvoidRoomAction):
        return _avoid(state)
    if isinstance(action, AcceptRoomAction):
        return _accept(state)
    if isinstance(action, PlayCardAction):
        return _play_card(state, action, oracle)
    return _fail("Unknown action.")


def new_game(seed: int | None = None, config: GameConfig | None = None) -> GameState:
    cfg = config or GameConfig()
    if seed is None:
        seed = random.SystemRandom().randrange(2**31)
    rng = random.Random(seed)
    state = GameState(
        config=cfg,
        seed=seed,
        rng=rng,
        dungeon=build_dungeon(rng),
        player=PlayerState(health=cfg.max_health),
    )
    state.record("GAME_STARTED", seed=seed, dungeon_size=len(state.dungeon))
    enter_room(state)
    state.phase = Phase.AWAIT_AVOID_DECISION
    return state


def play(state: GameState, oracle: DecisionOracle) -> GameResult:
    """Drive the game to its end, taking every decision from ``oracle``."""
    while state.result is None:
        if state.phase is Phase.AWAIT_AVOID_DECISION:
            if can_avoid(state) and oracle.confirm(render_status(state, AVOID_QUESTION)):
                res = step(state, AvoidRoomAction(), oracle)
            else:
                res = step(state, AcceptRoomAction(), oracle)
        else:
            options = resolvable_cards(state)
            index = oracle.select(render_status(state), options)
            if not 0 <= index < len(options):
                raise InvalidDecision(f"Selected index {index} outside 0..{len(options) - 1}")
            res = step(state, PlayCardAction(room_index=index), oracle)
        if not res.ok:
            raise GameError(res.error or "Action rejected")
    return state.result


def replay(seed: int, actions: Iterable[Action], config: GameConfig | None = None) -> GameState:
    state = new_game(seed=seed, config=config)
    for a in actions:
        step(state, a)
        if state.finished:
            break
    return state
