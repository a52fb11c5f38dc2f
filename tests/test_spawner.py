from __future__ import annotations

import pytest

from skyfire.spawner import Spawner


def test_wave_is_seven_evenly_spaced_enemies() -> None:
    enemies = []
    wave = Spawner().spawn_enemies(enemies)

    assert wave == enemies
    assert len(enemies) == 7
    assert all(e.y == 50 and e.speed == 0.5 for e in enemies)
    assert all((e.width, e.height) == (50, 50) for e in enemies)

    spacing = (1000 - 7 * 50) / 8
    assert enemies[0].x == pytest.approx(spacing)
    gaps = [b.x - a.right for a, b in zip(enemies, enemies[1:])]
    assert gaps == pytest.approx([spacing] * 6)
    assert 1000 - enemies[-1].right == pytest.approx(spacing)


def test_new_waves_start_at_base_speed() -> None:
    spawner = Spawner()
    enemies = []
    spawner.spawn_enemies(enemies)
    for e in enemies:
        e.speed *= 1.32
    spawner.spawn_enemies(enemies)

    assert len(enemies) == 14
    assert [e.speed for e in enemies[7:]] == [0.5] * 7
    assert spawner.waves_spawned == 2
