from __future__ import annotations

import random

import pytest

from skyfire.constants import WIDTH, HEIGHT
from skyfire.entities import Enemy, Player, Projectile
from skyfire.models import Direction


def test_player_starts_centred_near_bottom() -> None:
    player = Player.centered()
    assert (player.x, player.y) == (WIDTH / 2 - 25, HEIGHT - 80)
    assert (player.width, player.height, player.speed) == (50, 50, 5)


def test_player_never_leaves_the_field() -> None:
    rng = random.Random(1234)
    player = Player.centered()
    for _ in range(5000):
        player.move(rng.choice(["left", "right", Direction.LEFT, Direction.RIGHT]))
        assert 0 <= player.x <= WIDTH - player.width


def test_player_clamps_instead_of_overshooting() -> None:
    player = Player(2, 520)
    player.move("left")
    assert player.x == 0
    player = Player(WIDTH - 52, 520)
    player.move("right")
    assert player.x == WIDTH - 50


@pytest.mark.parametrize("direction", ["up", "", None, "LEFT", 3])
def test_player_ignores_unknown_directions(direction) -> None:
    player = Player.centered()
    player.move(direction)
    assert player.x == WIDTH / 2 - 25


def test_enemy_moves_down_and_projectile_moves_up() -> None:
    enemy = Enemy(10, 50, 50, 50, 0.5)
    enemy.move()
    assert enemy.y == 50.5

    projectile = Projectile(10, 100)
    projectile.move()
    assert projectile.y == 94
    assert not projectile.off_field


def test_projectile_fired_from_player_centre() -> None:
    player = Player.centered()
    projectile = Projectile.fired_by(player)
    assert projectile.x == player.x + 25 - 2.5
    assert projectile.y == player.y
    assert (projectile.width, projectile.height, projectile.speed) == (5, 10, 6)


def test_overlap_is_strict_on_edges() -> None:
    enemy = Enemy(100, 100, 50, 50, 0.5)
    assert Projectile(120, 140).overlaps(enemy)
    assert not Projectile(150, 120).overlaps(enemy)  # touching the right edge
    assert not Projectile(95, 120).overlaps(enemy)   # touching the left edge
    assert not Projectile(120, 150).overlaps(enemy)  # touching the bottom edge


def test_draw_does_not_change_state(renderer) -> None:
    player = Player.centered()
    enemy = Enemy(1, 2, 50, 50, 0.5)
    projectile = Projectile(3, 4)
    for entity in (player, enemy, projectile):
        before = (entity.x, entity.y, entity.speed)
        entity.draw(renderer)
        assert (entity.x, entity.y, entity.speed) == before
    kinds = [(c[0], c[1]) for c in renderer.calls]
    assert kinds[:2] == [("image", "player"), ("image", "enemy")]
    assert renderer.calls[2][0] == "rect"
