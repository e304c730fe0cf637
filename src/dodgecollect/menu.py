"""Title and game-over screens."""

from __future__ import annotations

from dataclasses import dataclass
import pygame

from .utils import BG_COLOR, TEXT_COLOR


@dataclass(slots=True)
class Menu:
    """Centered headline with a prompt underneath."""

    title: str
    prompt: str

    def render(self, surface: pygame.Surface, title_font: pygame.font.Font, body_font: pygame.font.Font) -> None:
        """Draw menu screen contents."""
        surface.fill(BG_COLOR)
        center_x = surface.get_width() // 2
        center_y = surface.get_height() // 2

        title = title_font.render(self.title, True, TEXT_COLOR)
        surface.blit(title, (center_x - title.get_width() // 2, center_y - 40 - title.get_height()))

        prompt = body_font.render(self.prompt, True, TEXT_COLOR)
        surface.blit(prompt, (center_x - prompt.get_width() // 2, center_y + 10 - prompt.get_height()))


MAIN_MENU = Menu("DODGE & COLLECT", "PRESS ENTER TO START")
GAME_OVER_MENU = Menu("GAME OVER", "PRESS ENTER TO RESTART")
