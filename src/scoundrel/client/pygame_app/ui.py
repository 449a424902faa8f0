from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pygame  # type: ignore[import-not-found]

from scoundrel.engine.types import Card, Role

Color = tuple[int, int, int]

CARD_SIZE = (120, 168)

ROLE_COLORS: dict[Role, Color] = {
    Role.MONSTER: (30, 30, 36),
    Role.WEAPON: (150, 40, 40),
    Role.POTION: (170, 50, 90),
}


def draw_text(
    screen: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    pos: tuple[int, int],
    color: Color = (240, 240, 240),
) -> None:
    img = font.render(text, True, color)
    screen.blit(img, pos)


def draw_card(
    screen: pygame.Surface,
    font: pygame.font.Font,
    card: Card,
    rect: pygame.Rect,
    highlight: bool = False,
) -> None:
    pygame.draw.rect(screen, (235, 230, 215), rect, border_radius=10)
    border = (240, 210, 90) if highlight else ROLE_COLORS[card.role]
    pygame.draw.rect(screen, border, rect, width=4, border_radius=10)
    img = font.render(str(card), True, ROLE_COLORS[card.role])
    screen.blit(img, img.get_rect(center=rect.center).topleft)


@dataclass
class Button:
    rect: pygame.Rect
    text: str
    on_click: Callable[[], None]
    enabled: bool = True
    hotkey: int | None = None

    def handle_event(self, event: pygame.event.Event) -> bool:
        if not self.enabled:
            return False
        clicked = (
            event.type == pygame.MOUSEBUTTONDOWN
            and event.button == 1
            and self.rect.collidepoint(event.pos)
        )
        pressed = self.hotkey is not None and event.type == pygame.KEYDOWN and event.key == self.hotkey
        if clicked or pressed:
            self.on_click()
            return True
        return False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        bg = (60, 60, 60) if self.enabled else (30, 30, 30)
        fg = (240, 240, 240) if self.enabled else (120, 120, 120)
        pygame.draw.rect(screen, bg, self.rect, border_radius=8)
        pygame.draw.rect(screen, (0, 0, 0), self.rect, width=2, border_radius=8)
        img = font.render(self.text, True, fg)
        screen.blit(img, img.get_rect(center=self.rect.center).topleft)
