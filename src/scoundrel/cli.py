from __future__ import annotations

import argparse
import sys
from pathlib import Path

from scoundrel.client.terminal import TerminalOracle, format_result
from scoundrel.engine.ai import AISpec, AutoOracle
from scoundrel.engine.game import new_game, play
from scoundrel.engine.state import Outcome
from scoundrel.logging_utils import setup_logging
from scoundrel.paths import Paths, get_paths
from scoundrel.services.config import ConfigError, Settings, SettingsService
from scoundrel.services.telemetry import TelemetryService


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scoundrel", description="Single-player dungeon crawl with a deck of cards.")
    parser.add_argument("--config", type=Path, default=None, help="settings.json to load")
    # Also accepted after the subcommand.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", type=Path, default=argparse.SUPPRESS, help="settings.json to load")
    sub = parser.add_subparsers(dest="command")

    p_play = sub.add_parser("play", parents=[common], help="play a game in the terminal")
    p_play.add_argument("--seed", type=int, default=None)

    p_sim = sub.add_parser("simulate", parents=[common], help="let the automatic player run many games")
    p_sim.add_argument("--games", type=int, default=100)
    p_sim.add_argument("--seed", type=int, default=0, help="seed of the first game")
    p_sim.add_argument("--difficulty", type=int, choices=(0, 1, 2), default=None)
    return parser


def _load_settings(service: SettingsService, paths: Paths, config: Path | None) -> Settings:
    if config is not None:
        return service.load(config)
    user_file = paths.userdata_dir / "settings.json"
    return service.load(user_file if user_file.exists() else None)


def _cmd_play(args: argparse.Namespace, settings: Settings, telemetry: TelemetryService | None) -> int:
    seed = args.seed if args.seed is not None else settings.seed
    state = new_game(seed=seed)
    try:
        result = play(state, TerminalOracle())
    except (KeyboardInterrupt, EOFError):
        print("\nAborted.")
        return 130
    print(format_result(result))
    if telemetry is not None:
        telemetry.log_game(state, mode="play")
    return 0


def _cmd_simulate(args: argparse.Namespace, settings: Settings, telemetry: TelemetryService | None) -> int:
    difficulty = args.difficulty if args.difficulty is not None else settings.auto_difficulty
    scores: list[int] = []
    wins = 0
    for i in range(max(0, args.games)):
        seed = args.seed + i
        state = new_game(seed=seed)
        result = play(state, AutoOracle(state, AISpec(difficulty=difficulty, seed=seed)))
        scores.append(result.score)
        if result.outcome is Outcome.WON:
            wins += 1
        if telemetry is not None:
            telemetry.log_game(state, mode="simulate")

    if not scores:
        print("No games played.")
        return 0
    print(f"games:      {len(scores)}")
    print(f"won:        {wins} ({wins / len(scores):.1%})")
    print(f"mean score: {sum(scores) / len(scores):.2f}")
    print(f"best:       {max(scores)}")
    print(f"worst:      {min(scores)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    paths = get_paths()
    service = SettingsService(data_dir=paths.data_dir, schema_dir=paths.schema_dir)
    try:
        settings = _load_settings(service, paths, args.config)
        telemetry = None
        if settings.telemetry:
            telemetry = TelemetryService(
                paths.userdata_dir / "telemetry.jsonl",
                result_schema=service.schema("telemetry"),
            )
    except ConfigError as e:
        print(e, file=sys.stderr)
        return 2

    setup_logging(settings.log_level)

    if args.command == "simulate":
        return _cmd_simulate(args, settings, telemetry)
    if args.command is None:
        args.seed = None
    return _cmd_play(args, settings, telemetry)


if __name__ == "__main__":
    raise SystemExit(main())
