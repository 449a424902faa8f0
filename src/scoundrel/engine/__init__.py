"""Deterministic, headless rules engine for Scoundrel.

IMPORTANT: This package must never import pygame.
"""

from .actions import AcceptRoomAction, AvoidRoomAction, PlayCardAction
from .errors import (
    DungeonFinished,
    GameError,
    InvalidCardRank,
    InvalidCardSuit,
    InvalidDecision,
    OracleExhausted,
    RoomAvoidanceForbidden,
    RoomUnfinished,
)
from .game import StepResult, new_game, play, replay, step
from .oracle import DecisionOracle, ScriptedOracle
from .state import GameConfig, GameResult, GameState, Outcome, Phase, PlayerState
from .status import render_status
from .types import Card, Rank, Role, Suit

__all__ = [
    "AcceptRoomAction",
    "AvoidRoomAction",
    "Card",
    "DecisionOracle",
    "DungeonFinished",
    "GameConfig",
    "GameError",
    "GameResult",
    "GameState",
    "InvalidCardRank",
    "InvalidCardSuit",
    "InvalidDecision",
    "OracleExhausted",
    "Outcome",
    "Phase",
    "PlayCardAction",
    "PlayerState",
    "Rank",
    "Role",
    "RoomAvoidanceForbidden",
    "RoomUnfinished",
    "ScriptedOracle",
    "StepResult",
    "Suit",
    "new_game",
    "play",
    "render_status",
    "replay",
    "step",
]
