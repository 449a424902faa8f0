from __future__ import annotations

from .state import GameState


def render_status(state: GameState, question: str | None = None) -> str:
    """One-line summary: health, weapon (last kill), dungeon count, room cards."""
    p = state.player
    room = " ".join(str(c) for c in state.room)
    line = (
        f"H: {p.health:>2}, W: {p.weapon or 0:>2} (M: {p.weakest_killed or 0:>2}), "
        f"D: {len(state.dungeon):>2}, R: {room}"
    )
    if question:
        line += f", {question}"
    return line
