"""Drawing of engine snapshots and the HUD."""

from __future__ import annotations

import pygame

from .engine import EngineSnapshot, EntityView, GameState
from .entities import EntityKind
from .menu import GAME_OVER_MENU, MAIN_MENU
from .utils import BG_COLOR, BLUE, GOLD, HUD_COLOR, RED, SHADOW_COLOR


def hud_lines(snapshot: EngineSnapshot) -> list[str]:
    """Return the HUD text for a frame."""
    return [
        f"Score: {snapshot.score}",
        f"Life: {snapshot.life}",
        f"Record: {snapshot.record}",
        f"Level: {snapshot.level}",
    ]


class Renderer:
    """Paints a snapshot; never touches the engine itself."""

    def __init__(self) -> None:
        pygame.font.init()
        self.title_font = pygame.font.SysFont("arial", 40)
        self.body_font = pygame.font.SysFont("arial", 24)
        self.small_font = pygame.font.SysFont("arial", 20)

    def draw(self, surface: pygame.Surface, snapshot: EngineSnapshot) -> None:
        if snapshot.state == GameState.MENU:
            MAIN_MENU.render(surface, self.title_font, self.body_font)
            return
        if snapshot.state == GameState.GAME_OVER:
            GAME_OVER_MENU.render(surface, self.title_font, self.body_font)
            return

        surface.fill(BG_COLOR)
        for view in snapshot.entities:
            self._draw_entity(surface, view)
        self._render_hud(surface, snapshot)

    @staticmethod
    def _draw_entity(surface: pygame.Surface, view: EntityView) -> None:
        rect = view.rect
        if view.kind == EntityKind.COIN:
            pygame.draw.circle(surface, GOLD, rect.center, int(view.size) // 2)
        elif view.kind == EntityKind.ENEMY:
            pygame.draw.rect(surface, RED, rect)
        else:
            pygame.draw.rect(surface, BLUE, rect)

    def _render_hud(self, surface: pygame.Surface, snapshot: EngineSnapshot) -> None:
        for idx, line in enumerate(hud_lines(snapshot)):
            shadow = self.small_font.render(line, True, SHADOW_COLOR)
            text = self.small_font.render(line, True, HUD_COLOR)
            surface.blit(shadow, (22, 17 + idx * 24))
            surface.blit(text, (20, 15 + idx * 24))
