from __future__ import annotations

import argparse

import pygame  # type: ignore[import-not-found]

from scoundrel.paths import get_paths
from scoundrel.services.config import SettingsService

from .app import App, GameContext, load_fonts
from .scenes.boot import BootScene


def main() -> int:
    parser = argparse.ArgumentParser(prog="scoundrel-gui")
    parser.add_argument("--width", type=int, default=720)
    parser.add_argument("--height", type=int, default=660)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Scoundrel")

    paths = get_paths()
    ctx = GameContext(
        screen=screen,
        clock=pygame.time.Clock(),
        paths=paths,
        fonts=load_fonts(),
        settings_service=SettingsService(data_dir=paths.data_dir, schema_dir=paths.schema_dir),
        seed=args.seed,
    )

    app = App(ctx, BootScene(ctx))
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
