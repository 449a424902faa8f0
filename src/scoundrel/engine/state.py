from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from .actions import Action
from .types import Card

Event = dict[str, object]

MAX_HEALTH = 20
ROOM_SIZE = 4


@dataclass(frozen=True)
class GameConfig:
    max_health: int = MAX_HEALTH
    room_size: int = ROOM_SIZE


class Phase(Enum):
    SETUP = "setup"
    AWAIT_AVOID_DECISION = "await_avoid_decision"
    RESOLVING_ROOM = "resolving_room"
    WON = "won"
    LOST = "lost"


class Outcome(Enum):
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GameResult:
    outcome: Outcome
    score: int


@dataclass
class PlayerState:
    health: int = MAX_HEALTH
    weapon: int | None = None
    # Weight of the last monster slain with the current weapon.
    weakest_killed: int | None = None


@dataclass
class GameState:
    config: GameConfig
    seed: int
    rng: random.Random
    dungeon: list[Card]
    room: list[Card] = field(default_factory=list)
    player: PlayerState = field(default_factory=PlayerState)
    just_avoided_room: bool = False
    phase: Phase = Phase.SETUP
    result: GameResult | None = None
    rooms_entered: int = 0
    cards_resolved: int = 0
    action_log: list[Action] = field(default_factory=list)
    event_log: list[Event] = field(default_factory=list)

    @property
    def finished(self) -> bool:
        return self.result is not None

    def record(self, event_type: str, **payload: object) -> None:
        ev: Event = {"type": event_type}
        ev.update(payload)
        self.event_log.append(ev)
