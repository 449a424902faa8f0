from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from scoundrel.client.terminal import format_result
from scoundrel.engine.actions import AcceptRoomAction, AvoidRoomAction, PlayCardAction
from scoundrel.engine.game import StepResult, new_game, step
from scoundrel.engine.room import can_avoid
from scoundrel.engine.rules import can_use_weapon
from scoundrel.engine.state import GameState, Phase
from scoundrel.engine.status import render_status

from ..app import GameContext, SceneTransition
from ..ui import CARD_SIZE, Button, draw_card, draw_text


def next_seed(seed: int, seeded: bool) -> int | None:
    """A seeded session walks through consecutive seeds; otherwise stay random."""
    return seed + 1 if seeded else None


class GameScene:
    def __init__(self, ctx: GameContext, seed: int | None = None) -> None:
        self.ctx = ctx
        self.state: GameState = new_game(seed=seed)
        self._seeded = seed is not None
        self._next: SceneTransition | None = None
        self._message = ""
        self._pending_index: int | None = None  # room card waiting on the weapon question
        self._did_log_result = False

        self.btn_avoid = Button(pygame.Rect(40, 420, 160, 48), "Avoid (A)", self._on_avoid, hotkey=pygame.K_a)
        self.btn_enter = Button(pygame.Rect(220, 420, 160, 48), "Enter (E)", self._on_enter, hotkey=pygame.K_e)
        self.btn_yes = Button(pygame.Rect(40, 500, 160, 48), "Use weapon (Y)", lambda: self._on_weapon(True), hotkey=pygame.K_y)
        self.btn_no = Button(pygame.Rect(220, 500, 160, 48), "Bare hands (N)", lambda: self._on_weapon(False), hotkey=pygame.K_n)
        self.btn_new = Button(pygame.Rect(40, 580, 200, 48), "New game", self._on_new_game)

    def _card_rect(self, index: int) -> pygame.Rect:
        w, h = CARD_SIZE
        return pygame.Rect(40 + index * (w + 20), 200, w, h)

    def _apply(self, res: StepResult) -> None:
        self._message = "" if res.ok else (res.error or "Invalid action.")

    def _on_avoid(self) -> None:
        self._apply(step(self.state, AvoidRoomAction()))

    def _on_enter(self) -> None:
        self._apply(step(self.state, AcceptRoomAction()))

    def _on_weapon(self, use: bool) -> None:
        if self._pending_index is None:
            return
        index, self._pending_index = self._pending_index, None
        self._apply(step(self.state, PlayCardAction(room_index=index, use_weapon=use)))

    def _on_new_game(self) -> None:
        self._next = SceneTransition(GameScene(self.ctx, seed=next_seed(self.state.seed, self._seeded)))

    def _on_card_clicked(self, index: int) -> None:
        card = self.state.room[index]
        if card.is_monster() and can_use_weapon(self.state.player, card.weight):
            self._pending_index = index
            self._message = f"Fight {card} with your weapon?"
            return
        self._apply(step(self.state, PlayCardAction(room_index=index, use_weapon=False)))

    def _sync_buttons(self) -> None:
        awaiting = self.state.phase is Phase.AWAIT_AVOID_DECISION
        self.btn_avoid.enabled = awaiting and can_avoid(self.state)
        self.btn_enter.enabled = awaiting
        self.btn_yes.enabled = self._pending_index is not None
        self.btn_no.enabled = self._pending_index is not None

    def handle_event(self, event: pygame.event.Event) -> None:
        self._sync_buttons()
        if self.state.finished:
            self.btn_new.handle_event(event)
            return
        for btn in (self.btn_avoid, self.btn_enter, self.btn_yes, self.btn_no):
            if btn.handle_event(event):
                return
        if self._pending_index is not None or self.state.phase is not Phase.RESOLVING_ROOM:
            return
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for i in range(len(self.state.room)):
                if self._card_rect(i).collidepoint(event.pos):
                    self._on_card_clicked(i)
                    return

    def update(self, dt: float) -> SceneTransition | None:
        if self.state.finished and not self._did_log_result:
            self._did_log_result = True
            if self.ctx.telemetry is not None:
                self.ctx.telemetry.log_game(self.state, mode="gui")
        return self._next

    def render(self, screen: pygame.Surface) -> None:
        self._sync_buttons()
        screen.fill((14, 20, 16))
        fonts = self.ctx.fonts
        draw_text(screen, fonts.big, "Scoundrel", (40, 24))
        draw_text(screen, fonts.ui, render_status(self.state), (40, 90))
        draw_text(screen, fonts.small, f"Seed {self.state.seed}", (40, 120), color=(150, 150, 150))

        for i, card in enumerate(self.state.room):
            draw_card(screen, fonts.card, card, self._card_rect(i), highlight=i == self._pending_index)

        for btn in (self.btn_avoid, self.btn_enter, self.btn_yes, self.btn_no):
            btn.draw(screen, fonts.ui)

        if self._message:
            draw_text(screen, fonts.ui, self._message, (40, 390), color=(240, 200, 120))

        if self.state.result is not None:
            overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 170))
            screen.blit(overlay, (0, 0))
            draw_text(screen, fonts.big, format_result(self.state.result), (40, 480))
            self.btn_new.draw(screen, fonts.ui)
