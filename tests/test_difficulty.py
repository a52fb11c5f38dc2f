from __future__ import annotations

import pytest

from skyfire.difficulty import DifficultyScaler
from skyfire.entities import Enemy


def _enemies(n: int = 3) -> list[Enemy]:
    return [Enemy(i * 60, 50, 50, 50, 0.5) for i in range(n)]


def test_speed_steps_at_100_then_200() -> None:
    scaler = DifficultyScaler()
    enemies = _enemies()

    assert scaler.check_score_for_speed_increase(100, enemies) == 1.32
    assert [e.speed for e in enemies] == pytest.approx([0.5 * 1.32] * 3)
    assert scaler.threshold == 200

    # Still 100 on the next frame: nothing more happens.
    assert scaler.check_score_for_speed_increase(100, enemies) is None

    assert scaler.check_score_for_speed_increase(200, enemies) == 1.15
    assert [e.speed for e in enemies] == pytest.approx([0.5 * 1.32 * 1.15] * 3)
    assert scaler.threshold == 300


@pytest.mark.parametrize("score", [0, 5, 95, 105, 150])
def test_no_change_off_threshold(score: int) -> None:
    scaler = DifficultyScaler()
    enemies = _enemies()
    assert scaler.check_score_for_speed_increase(score, enemies) is None
    assert all(e.speed == 0.5 for e in enemies)
    assert scaler.threshold == 100


def test_only_enemies_alive_at_the_trigger_are_scaled() -> None:
    scaler = DifficultyScaler()
    enemies = _enemies(2)
    scaler.check_score_for_speed_increase(100, enemies)
    late = Enemy(500, 50, 50, 50, 0.5)
    enemies.append(late)
    assert late.speed == 0.5

    scaler.check_score_for_speed_increase(200, enemies)
    assert late.speed == pytest.approx(0.5 * 1.15)
    assert enemies[0].speed == pytest.approx(0.5 * 1.32 * 1.15)


def test_first_trigger_uses_the_larger_factor_even_if_100_was_skipped() -> None:
    scaler = DifficultyScaler()
    enemies = _enemies(1)
    assert scaler.check_score_for_speed_increase(200, enemies) == 1.32
    assert scaler.threshold == 200
