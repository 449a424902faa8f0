from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping

from scoundrel.engine.serialize import result_to_dict
from scoundrel.engine.state import GameState

from .config import validate_json


@dataclass
class TelemetryService:
    """Appends one JSON record per line to ``path``."""

    path: Path
    result_schema: object | None = None

    def log(self, event_type: str, payload: Mapping[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        rec = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "type": event_type,
            "payload": dict(payload),
        }
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(rec, ensure_ascii=False) + "\n")

    def log_game(self, state: GameState, mode: str) -> None:
        result = result_to_dict(state.result)
        if result is None:
            return
        payload: dict[str, object] = {
            "seed": state.seed,
            **result,
            "rooms_entered": state.rooms_entered,
            "cards_resolved": state.cards_resolved,
            "mode": mode,
        }
        if self.result_schema is not None:
            validate_json(payload, self.result_schema, context="game result")
        self.log("game_finished", payload)

    def read(self) -> list[dict[str, object]]:
        if not self.path.exists():
            return []
        lines = self.path.read_text(encoding="utf-8").splitlines()
        return [json.loads(line) for line in lines if line.strip()]
