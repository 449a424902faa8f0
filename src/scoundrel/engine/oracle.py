from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from .errors import OracleExhausted
from .types import Card

AVOID_QUESTION = "avoid?"
WEAPON_QUESTION = "use weapon?"


class DecisionOracle(Protocol):
    """Source of every player decision the engine needs.

    ``confirm`` answers the yes/no questions ("avoid?", "use weapon?") and
    ``select`` picks the index of the room card to resolve next.
    """

    def confirm(self, prompt: str) -> bool: ...

    def select(self, prompt: str, options: Sequence[Card]) -> int: ...


class ScriptedOracle:
    """Replays a fixed list of answers. Used by tests and replays."""

    def __init__(self, confirms: Iterable[bool] = (), selections: Iterable[int] = ()) -> None:
        self._confirms = list(confirms)
        self._selections = list(selections)
        self.prompts: list[str] = []

    def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        if not self._confirms:
            raise OracleExhausted(f"No scripted answer for: {prompt}")
        return self._confirms.pop(0)

    def select(self, prompt: str, options: Sequence[Card]) -> int:
        self.prompts.append(prompt)
        if not self._selections:
            raise OracleExhausted(f"No scripted selection for: {prompt}")
        return self._selections.pop(0)


class FixedAnswerOracle:
    """Answers every confirmation the same way; never selects."""

    def __init__(self, answer: bool) -> None:
        self.answer = answer

    def confirm(self, prompt: str) -> bool:
        return self.answer

    def select(self, prompt: str, options: Sequence[Card]) -> int:
        raise OracleExhausted("FixedAnswerOracle cannot select cards")
