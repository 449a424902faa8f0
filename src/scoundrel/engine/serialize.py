from __future__ import annotations

from .actions import AcceptRoomAction, Action, AvoidRoomAction, PlayCardAction
from .state import GameResult, GameState, PlayerState


def action_to_dict(a: Action) -> dict[str, object]:
    if isinstance(a, AvoidRoomAction):
        return {"type": "avoid"}
    if isinstance(a, AcceptRoomAction):
        return {"type": "accept"}
    if isinstance(a, PlayCardAction):
        return {"type": "play", "room_index": a.room_index, "use_weapon": a.use_weapon}
    # should be unreachable
    return {"type": "unknown"}


def action_from_dict(d: dict[str, object]) -> Action:
    t = d.get("type")
    if t == "avoid":
        return AvoidRoomAction()
    if t == "accept":
        return AcceptRoomAction()
    if t == "play":
        idx = d.get("room_index")
        use = d.get("use_weapon")
        if not isinstance(idx, int) or not (use is None or isinstance(use, bool)):
            raise ValueError(f"Malformed play action: {d}")
        return PlayCardAction(room_index=idx, use_weapon=use)
    raise ValueError(f"Unknown action type: {t}")


def _player_to_dict(p: PlayerState) -> dict[str, object]:
    return {"health": p.health, "weapon": p.weapon, "weakest_killed": p.weakest_killed}


def result_to_dict(r: GameResult | None) -> dict[str, object] | None:
    if r is None:
        return None
    return {"outcome": r.outcome.value, "score": r.score}


def snapshot(state: GameState) -> dict[str, object]:
    """Return a JSON-serializable canonical snapshot of the current game state."""
    return {
        "seed": state.seed,
        "phase": state.phase.value,
        "dungeon": [c.code for c in state.dungeon],
        "room": [c.code for c in state.room],
        "player": _player_to_dict(state.player),
        "just_avoided_room": state.just_avoided_room,
        "rooms_entered": state.rooms_entered,
        "cards_resolved": state.cards_resolved,
        "result": result_to_dict(state.result),
        "action_log": [action_to_dict(a) for a in state.action_log],
    }
