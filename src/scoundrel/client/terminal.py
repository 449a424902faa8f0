from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Callable, TextIO

from scoundrel.engine.state import GameResult
from scoundrel.engine.types import Card

_YES = {"y", "yes"}
_NO = {"", "n", "no"}


class TerminalOracle:
    """Asks a human through stdin/stdout."""

    def __init__(self, read: Callable[[str], str] = input, out: TextIO | None = None) -> None:
        self._read = read
        self._out = out or sys.stdout

    def confirm(self, prompt: str) -> bool:
        while True:
            answer = self._read(f"{prompt} [y/N] ").strip().lower()
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            print("Please answer y or n.", file=self._out)

    def select(self, prompt: str, options: Sequence[Card]) -> int:
        print(prompt, file=self._out)
        for i, card in enumerate(options, start=1):
            print(f"  {i}) {card}", file=self._out)
        while True:
            raw = self._read("play which card? ").strip()
            if raw.isdigit() and 1 <= int(raw) <= len(options):
                return int(raw) - 1
            print(f"Pick a number from 1 to {len(options)}.", file=self._out)


def format_result(result: GameResult) -> str:
    return f"{result.outcome.value.capitalize()}! Score: {result.score}"
