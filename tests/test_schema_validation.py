from __future__ import annotations

import json
from pathlib import Path

import pytest

from scoundrel.engine.ai import AutoOracle
from scoundrel.engine.game import new_game, play
from scoundrel.paths import get_paths
from scoundrel.services.config import ConfigError, Settings, SettingsService
from scoundrel.services.telemetry import TelemetryService


def _service() -> SettingsService:
    paths = get_paths()
    return SettingsService(paths.data_dir, paths.schema_dir)


def test_default_settings_validate() -> None:
    service = _service()
    service.validate_all()
    assert service.defaults() == Settings()


def test_user_settings_overlay_defaults(tmp_path: Path) -> None:
    user = tmp_path / "settings.json"
    user.write_text(json.dumps({"seed": 42, "telemetry": True}), encoding="utf-8")
    settings = _service().load(user)
    assert settings.seed == 42
    assert settings.telemetry
    assert settings.log_level == "WARNING"


def test_invalid_settings_are_rejected(tmp_path: Path) -> None:
    user = tmp_path / "settings.json"
    user.write_text(json.dumps({"auto_difficulty": 7, "colour": "red"}), encoding="utf-8")
    with pytest.raises(ConfigError) as exc:
        _service().load(user)
    assert "Schema validation failed" in str(exc.value)


def test_broken_json_is_a_config_error(tmp_path: Path) -> None:
    user = tmp_path / "settings.json"
    user.write_text("{seed: ", encoding="utf-8")
    with pytest.raises(ConfigError):
        _service().load(user)


def test_telemetry_records_game_results(tmp_path: Path) -> None:
    telemetry = TelemetryService(tmp_path / "telemetry.jsonl", result_schema=_service().schema("telemetry"))
    state = new_game(seed=8)
    result = play(state, AutoOracle(state))
    telemetry.log_game(state, mode="test")

    records = telemetry.read()
    assert len(records) == 1
    assert records[0]["type"] == "game_finished"
    payload = records[0]["payload"]
    assert payload["seed"] == 8
    assert payload["outcome"] == result.outcome.value
    assert payload["score"] == result.score
