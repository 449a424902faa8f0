from __future__ import annotations


class GameError(RuntimeError):
    """Base class for engine contract violations."""


class DungeonFinished(GameError):
    pass


class RoomUnfinished(GameError):
    pass


class RoomAvoidanceForbidden(GameError):
    pass


class InvalidCardSuit(GameError, ValueError):
    pass


class InvalidCardRank(GameError, ValueError):
    pass


class InvalidDecision(GameError):
    pass


class OracleExhausted(GameError):
    pass
