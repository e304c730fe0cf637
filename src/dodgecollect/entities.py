"""Board and the movable, collidable entities: player, coins and enemies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar
import random

from .controls import Direction, InputState
from .utils import (
    COIN_SIZE,
    ENEMY_SIZE,
    ENEMY_SPEED,
    PLAYER_LIFE,
    PLAYER_SIZE,
    PLAYER_SPEED,
    SPAWN_POINT,
    Point,
    clamp,
    distance,
)


class EntityKind(str, Enum):
    """Entity variants known to the renderer."""

    PLAYER = "player"
    COIN = "coin"
    ENEMY = "enemy"


@dataclass(slots=True)
class Board:
    """Playable area, sized to the window."""

    width: float
    height: float

    def random_position(self, size: float, rng: random.Random) -> Point:
        """Draw a top-left corner uniformly inside the board."""
        return (rng.random() * (self.width - size), rng.random() * (self.height - size))


@dataclass(slots=True, eq=False)
class Entity(ABC):
    """Square footprint at a top-left position."""

    board: Board
    x: float = 0.0
    y: float = 0.0

    kind: ClassVar[EntityKind]

    @property
    @abstractmethod
    def size(self) -> float:
        """Side of the square collision footprint."""

    def center(self) -> Point:
        half = self.size / 2
        return (self.x + half, self.y + half)


@dataclass(slots=True, eq=False)
class Player(Entity):
    """The avatar steered by the keyboard."""

    width: int = PLAYER_SIZE
    height: int = PLAYER_SIZE
    speed: int = PLAYER_SPEED
    life: int = PLAYER_LIFE

    kind = EntityKind.PLAYER

    def __post_init__(self) -> None:
        self.respawn()

    @property
    def size(self) -> float:
        return self.width

    def respawn(self) -> None:
        """Move back to the spawn point."""
        self.x, self.y = SPAWN_POINT

    def reset(self) -> None:
        """Restore full life and respawn for a new run."""
        self.life = PLAYER_LIFE
        self.respawn()

    def update(self, input_state: InputState) -> None:
        """Apply held directions, then clamp both axes to the board.

        Opposite keys cancel out; diagonals are not normalised.
        """
        if input_state.is_pressed(Direction.UP):
            self.y -= self.speed
        if input_state.is_pressed(Direction.DOWN):
            self.y += self.speed
        if input_state.is_pressed(Direction.LEFT):
            self.x -= self.speed
        if input_state.is_pressed(Direction.RIGHT):
            self.x += self.speed

        self.x = clamp(self.x, 0, self.board.width - self.width)
        self.y = clamp(self.y, 0, self.board.height - self.height)


@dataclass(slots=True, eq=False)
class Coin(Entity):
    """Collectible that jumps elsewhere when picked up."""

    rng: random.Random = field(default_factory=random.Random)

    kind = EntityKind.COIN

    def __post_init__(self) -> None:
        self.reset()

    @property
    def size(self) -> float:
        return COIN_SIZE

    def reset(self) -> None:
        """Move to a fresh random position."""
        self.x, self.y = self.board.random_position(self.size, self.rng)


@dataclass(slots=True, eq=False)
class Enemy(Entity):
    """Chaser that walks straight toward the player."""

    rng: random.Random = field(default_factory=random.Random)
    speed: float = ENEMY_SPEED

    kind = EntityKind.ENEMY

    def __post_init__(self) -> None:
        self.x, self.y = self.board.random_position(self.size, self.rng)

    @property
    def size(self) -> float:
        return ENEMY_SIZE

    def update(self, player: Player) -> None:
        """Step toward the player's centre; stay put when already on it."""
        target = player.center()
        here = self.center()
        dist = distance(target, here)
        if dist == 0:
            return
        self.x += (target[0] - here[0]) / dist * self.speed
        self.y += (target[1] - here[1]) / dist * self.speed
