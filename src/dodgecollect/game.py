"""Host loop: window, events, frame driver and render fault boundary."""

from __future__ import annotations

import logging
import random
import pygame

from .controls import KeyTracker
from .engine import GameEngine
from .renderer import Renderer
from .settings import SettingsManager
from .storage import JsonRecordStore, RecordStore

logger = logging.getLogger(__name__)


class DodgeGame:
    """Composes the engine with pygame input, rendering and persistence."""

    def __init__(
        self,
        settings_manager: SettingsManager | None = None,
        store: RecordStore | None = None,
        rng: random.Random | None = None,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.settings_manager = settings_manager or SettingsManager()
        self.settings = self.settings_manager.settings
        display = self.settings.display

        flags = pygame.FULLSCREEN if display.fullscreen else pygame.RESIZABLE
        self.screen = pygame.display.set_mode((display.width, display.height), flags)
        pygame.display.set_caption("Dodge & Collect")
        self.clock = pygame.time.Clock()

        width, height = self.screen.get_size()
        self.engine = GameEngine(width, height, store or JsonRecordStore(), rng=rng)
        self.renderer = Renderer()
        self.keys = KeyTracker(self.settings.controls)
        self.render_failures = 0

    def run(self) -> None:
        """Main event/update/render loop."""
        logger.info("Starting at %dx%d", self.engine.board.width, self.engine.board.height)
        running = True
        while running:
            dt_ms = self.clock.tick(self.settings.display.fps)
            running = self._handle_events()
            if not running:
                break
            self.frame(dt_ms)

        pygame.quit()

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if event.type == pygame.VIDEORESIZE:
                self.engine.resize(event.w, event.h)
                continue
            if self.keys.handle_event(event):
                self.engine.confirm()
        return True

    def frame(self, dt_ms: float) -> None:
        """Tick once, then draw; a failed draw never stops the next tick."""
        self.engine.tick(dt_ms, self.keys.snapshot())
        self._render()

    def _render(self) -> None:
        try:
            self.renderer.draw(self.screen, self.engine.snapshot())
        except Exception:
            self.render_failures += 1
            logger.exception("Frame render failed")
            return
        pygame.display.flip()
