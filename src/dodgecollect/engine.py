"""Simulation engine: state machine, scoring, collisions and difficulty."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
import logging
import random
import pygame

from .collision import check_collision
from .controls import InputState
from .entities import Board, Coin, Enemy, Entity, EntityKind, Player
from .storage import GameRecord, RecordStore
from .utils import COIN_VALUE, LEVEL_UP_EVERY

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Finite states for the game."""

    MENU = auto()
    RUNNING = auto()
    GAME_OVER = auto()


@dataclass(frozen=True, slots=True)
class EntityView:
    """Read-only position and size of one entity."""

    kind: EntityKind
    x: float
    y: float
    size: float

    @classmethod
    def of(cls, entity: Entity) -> EntityView:
        return cls(entity.kind, entity.x, entity.y, entity.size)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.size), int(self.size))


@dataclass(frozen=True, slots=True)
class EngineSnapshot:
    """Everything the renderer and HUD may read for one frame."""

    state: GameState
    board_width: float
    board_height: float
    score: int
    level: int
    life: int
    record: int
    best_level: int
    player: EntityView
    coins: tuple[EntityView, ...]
    enemies: tuple[EntityView, ...]

    @property
    def entities(self) -> tuple[EntityView, ...]:
        return (self.player, *self.coins, *self.enemies)


class GameEngine:
    """Owns the authoritative game state and advances it once per frame."""

    def __init__(
        self,
        width: float,
        height: float,
        store: RecordStore,
        rng: random.Random | None = None,
    ) -> None:
        self.board = Board(width, height)
        self.store = store
        self.rng = rng or random.Random()

        self.player = Player(self.board)
        self.coins: list[Coin] = [self._new_coin()]
        self.enemies: list[Enemy] = []

        self.score = 0
        self.level = 1

        saved = GameRecord.from_payload(store.load())
        self.record = saved.record
        self.best_level = saved.best_level

        self.state = GameState.MENU

    def _new_coin(self) -> Coin:
        return Coin(self.board, rng=self.rng)

    def _new_enemy(self) -> Enemy:
        return Enemy(self.board, rng=self.rng)

    def resize(self, width: float, height: float) -> None:
        """Follow the viewport; the player is re-clamped on its next move."""
        self.board.width = width
        self.board.height = height

    def start_game(self) -> None:
        """Start or restart a run."""
        self.state = GameState.RUNNING
        self.score = 0
        self.level = 1
        self.player.reset()

        self.coins = [self._new_coin()]
        self.enemies = [self._new_enemy()]
        logger.debug("Run started (record=%d, best level=%d)", self.record, self.best_level)

    def confirm(self) -> bool:
        """Handle the confirm key: start a run from the menu or game-over screen."""
        if self.state not in (GameState.MENU, GameState.GAME_OVER):
            return False
        self.start_game()
        return True

    def game_over(self) -> None:
        """End the run and persist the record; no-op unless running.

        Several enemies can hit on the final tick; only the first call saves.
        """
        if self.state != GameState.RUNNING:
            return
        self.state = GameState.GAME_OVER
        if self.score > self.record:
            self.record = self.score
        if self.level > self.best_level:
            self.best_level = self.level

        logger.info("Game over: score=%d level=%d record=%d", self.score, self.level, self.record)
        self.store.save(GameRecord(record=self.record, best_level=self.best_level))

    def update_difficulty(self) -> None:
        """Add a level and an enemy every LEVEL_UP_EVERY points."""
        if self.score % LEVEL_UP_EVERY == 0 and self.score != 0:
            self.level += 1
            self.enemies.append(self._new_enemy())
            logger.debug("Level %d: %d enemies", self.level, len(self.enemies))
        if self.score > self.record:
            self.record = self.score

    def tick(self, elapsed_ms: float, input_state: InputState) -> None:
        """Advance the simulation by one frame.

        Movement is per frame; ``elapsed_ms`` is accepted from the host clock
        but does not scale speeds.
        """
        if self.state != GameState.RUNNING:
            return

        player = self.player
        player.update(input_state)

        for coin in self.coins:
            if check_collision(player, coin, player.width, coin.size):
                self.score += COIN_VALUE
                coin.reset()
                self.update_difficulty()

        # Every enemy still moves on the tick the run ends.
        for enemy in list(self.enemies):
            enemy.update(player)
            if check_collision(player, enemy, player.width, enemy.size):
                player.life = max(0, player.life - 1)
                player.respawn()
                if player.life <= 0:
                    self.game_over()

    def snapshot(self) -> EngineSnapshot:
        """Return an immutable view of the current frame."""
        return EngineSnapshot(
            state=self.state,
            board_width=self.board.width,
            board_height=self.board.height,
            score=self.score,
            level=self.level,
            life=self.player.life,
            record=self.record,
            best_level=self.best_level,
            player=EntityView.of(self.player),
            coins=tuple(EntityView.of(coin) for coin in self.coins),
            enemies=tuple(EntityView.of(enemy) for enemy in self.enemies),
        )
