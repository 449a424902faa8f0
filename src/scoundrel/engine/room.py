from __future__ import annotations

import logging

from .errors import DungeonFinished, RoomAvoidanceForbidden, RoomUnfinished
from .state import GameState
from .types import Card

log = logging.getLogger(__name__)


def enter_room(state: GameState) -> list[Card]:
    """Top the room back up to ``room_size`` from the front of the dungeon.

    Returns the cards drawn. The room may end up smaller than ``room_size``
    only when this draw empties the dungeon.
    """
    if len(state.room) > 1:
        raise RoomUnfinished(f"Room still holds {len(state.room)} cards")
    if not state.dungeon:
        raise DungeonFinished("No cards left in the dungeon")

    count = min(len(state.dungeon), state.config.room_size - len(state.room))
    drawn = state.dungeon[:count]
    del state.dungeon[:count]
    state.room.extend(drawn)
    state.rooms_entered += 1
    state.record("ROOM_ENTERED", drawn=[c.code for c in drawn], dungeon_left=len(state.dungeon))
    log.debug("entered room %d: %s", state.rooms_entered, " ".join(str(c) for c in state.room))
    return drawn


def can_avoid(state: GameState) -> bool:
    return not state.just_avoided_room and bool(state.room)


def avoid_room(state: GameState) -> None:
    """Send the whole room to the bottom of the dungeon."""
    if state.just_avoided_room:
        raise RoomAvoidanceForbidden("Cannot avoid two rooms in a row")
    avoided = list(state.room)
    state.dungeon.extend(avoided)
    state.room.clear()
    state.just_avoided_room = True
    state.record("ROOM_AVOIDED", cards=[c.code for c in avoided])
    log.debug("avoided room: %s", " ".join(str(c) for c in avoided))
