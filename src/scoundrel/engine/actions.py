from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AvoidRoomAction:
    pass


@dataclass(frozen=True)
class AcceptRoomAction:
    pass


@dataclass(frozen=True)
class PlayCardAction:
    room_index: int
    # None defers the weapon question to the decision oracle.
    use_weapon: bool | None = None


Action = AvoidRoomAction | AcceptRoomAction | PlayCardAction
