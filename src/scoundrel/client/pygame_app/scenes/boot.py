from __future__ import annotations

import traceback

import pygame  # type: ignore[import-not-found]

from scoundrel.services.config import ConfigError
from scoundrel.services.telemetry import TelemetryService

from ..app import GameContext, SceneTransition
from ..ui import Button, draw_text
from .game import GameScene


class BootScene:
    def __init__(self, ctx: GameContext) -> None:
        self.ctx = ctx
        self._did_boot = False
        self._error: str | None = None
        self._quit_button: Button | None = None

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._quit_button is not None:
            self._quit_button.handle_event(event)

    def update(self, dt: float) -> SceneTransition | None:
        if self._did_boot:
            return None
        self._did_boot = True
        service = self.ctx.settings_service
        try:
            user_file = self.ctx.paths.userdata_dir / "settings.json"
            self.ctx.settings = service.load(user_file if user_file.exists() else None)
            if self.ctx.settings.telemetry:
                self.ctx.telemetry = TelemetryService(
                    self.ctx.paths.userdata_dir / "telemetry.jsonl",
                    result_schema=service.schema("telemetry"),
                )
            seed = self.ctx.seed if self.ctx.seed is not None else self.ctx.settings.seed
            return SceneTransition(GameScene(self.ctx, seed=seed))
        except ConfigError as e:
            tb = traceback.format_exc(limit=8)
            self._error = f"{e}\n\n{tb}"
            self._quit_button = Button(
                rect=pygame.Rect(20, 540, 140, 44),
                text="Quit",
                on_click=lambda: pygame.event.post(pygame.event.Event(pygame.QUIT)),
            )
            return None

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((10, 10, 10))
        draw_text(screen, self.ctx.fonts.big, "Scoundrel", (20, 20))
        if self._error is None:
            draw_text(screen, self.ctx.fonts.ui, "Loading settings...", (20, 80))
            return
        draw_text(screen, self.ctx.fonts.ui, "BOOT ERROR", (20, 80), color=(240, 80, 80))
        y = 120
        for line in self._error.splitlines()[:22]:
            draw_text(screen, self.ctx.fonts.small, line[:120], (20, y), color=(230, 230, 230))
            y += 18
        if self._quit_button is not None:
            self._quit_button.draw(screen, self.ctx.fonts.ui)
