from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator


class ConfigError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"Missing config file: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: [str(p) for p in e.path])
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ConfigError("\n".join(lines))


@dataclass(frozen=True)
class Settings:
    seed: int | None = None
    log_level: str = "WARNING"
    telemetry: bool = False
    auto_difficulty: int = 2

    @staticmethod
    def from_dict(d: Mapping[str, object], base: "Settings | None" = None) -> "Settings":
        b = base or Settings()
        seed = d.get("seed", b.seed)
        level = d.get("log_level", b.log_level)
        difficulty = d.get("auto_difficulty", b.auto_difficulty)
        return Settings(
            seed=seed if isinstance(seed, int) else None,
            log_level=str(level),
            telemetry=bool(d.get("telemetry", b.telemetry)),
            auto_difficulty=difficulty if isinstance(difficulty, int) else b.auto_difficulty,
        )


class SettingsService:
    """Loads the shipped defaults, then overlays an optional user file."""

    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    def schema(self, name: str) -> object:
        return _load_json(self._schema_dir / f"{name}.schema.json")

    def _load_validated(self, path: Path) -> Mapping[str, object]:
        raw = _load_json(path)
        validate_json(raw, self.schema("settings"), context=str(path))
        if not isinstance(raw, dict):
            raise ConfigError(f"{path} must be an object")
        return raw

    def defaults(self) -> Settings:
        return Settings.from_dict(self._load_validated(self._data_dir / "settings.json"))

    def load(self, user_path: Path | None = None) -> Settings:
        settings = self.defaults()
        if user_path is None:
            return settings
        return Settings.from_dict(self._load_validated(user_path), base=settings)

    def validate_all(self) -> None:
        # Load is validation (schema + parse)
        _ = self.defaults()
