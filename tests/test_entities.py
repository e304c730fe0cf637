from __future__ import annotations

import math
import random

import pytest

from dodgecollect.controls import Direction, InputState
from dodgecollect.entities import Board, Coin, Enemy, Entity, EntityKind, Player


def _board() -> Board:
    return Board(1200, 760)


def test_player_starts_at_spawn_with_full_life() -> None:
    player = Player(_board())
    assert (player.x, player.y) == (200, 200)
    assert player.life == 3
    assert player.center() == (220, 220)


def test_player_moves_by_speed() -> None:
    player = Player(_board())
    player.update(InputState.of(Direction.RIGHT))
    assert (player.x, player.y) == (204, 200)
    player.update(InputState.of(Direction.DOWN))
    assert (player.x, player.y) == (204, 204)


def test_player_diagonal_is_not_normalised() -> None:
    player = Player(_board())
    player.update(InputState.of(Direction.UP, Direction.LEFT))
    assert (player.x, player.y) == (196, 196)
    moved = math.hypot(200 - player.x, 200 - player.y)
    assert moved == pytest.approx(4 * math.sqrt(2))


def test_opposite_keys_cancel() -> None:
    player = Player(_board())
    player.update(InputState.of(Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN))
    assert (player.x, player.y) == (200, 200)


def test_player_clamped_to_board_on_each_axis() -> None:
    board = _board()
    player = Player(board)
    player.x, player.y = 1158, 2
    player.update(InputState.of(Direction.RIGHT, Direction.UP))
    assert (player.x, player.y) == (1160, 0)

    player.x, player.y = 1, 718
    player.update(InputState.of(Direction.LEFT, Direction.DOWN))
    assert (player.x, player.y) == (0, 720)


def test_player_reset_restores_life_and_spawn() -> None:
    player = Player(_board())
    player.life = 1
    player.x, player.y = 10, 10
    player.reset()
    assert player.life == 3
    assert (player.x, player.y) == (200, 200)


def test_coin_reset_stays_in_bounds() -> None:
    board = _board()
    coin = Coin(board, rng=random.Random(7))
    for _ in range(200):
        coin.reset()
        assert 0 <= coin.x < board.width - coin.size
        assert 0 <= coin.y < board.height - coin.size


def test_enemy_spawns_in_bounds() -> None:
    board = _board()
    rng = random.Random(11)
    for _ in range(50):
        enemy = Enemy(board, rng=rng)
        assert 0 <= enemy.x < board.width - enemy.size
        assert 0 <= enemy.y < board.height - enemy.size


def test_enemy_steps_toward_player_center() -> None:
    player = Player(_board())
    enemy = Enemy(_board(), rng=random.Random(1))
    enemy.x, enemy.y = 0, 0

    enemy.update(player)

    step = 2 / math.sqrt(2)
    assert enemy.x == pytest.approx(step)
    assert enemy.y == pytest.approx(step)


def test_enemy_moves_exactly_its_speed() -> None:
    player = Player(_board())
    enemy = Enemy(_board(), rng=random.Random(2))
    enemy.x, enemy.y = 600, 500
    before = enemy.center()
    enemy.update(player)
    assert math.dist(before, enemy.center()) == pytest.approx(enemy.speed)


def test_enemy_on_player_center_does_not_move() -> None:
    player = Player(_board())
    enemy = Enemy(_board(), rng=random.Random(3))
    enemy.x, enemy.y = player.x, player.y
    enemy.update(player)
    assert (enemy.x, enemy.y) == (200, 200)


def test_bare_entity_cannot_be_built() -> None:
    with pytest.raises(TypeError):
        Entity(_board())


def test_each_entity_declares_kind_and_size() -> None:
    board = _board()
    rng = random.Random(4)
    entities = [Player(board), Coin(board, rng=rng), Enemy(board, rng=rng)]
    assert [e.kind for e in entities] == [EntityKind.PLAYER, EntityKind.COIN, EntityKind.ENEMY]
    assert [e.size for e in entities] == [40, 20, 40]
