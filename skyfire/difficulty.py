"""Score-driven enemy speed scaling."""

from __future__ import annotations

from .constants import (
    SPEED_THRESHOLD_START, SPEED_THRESHOLD_STEP,
    FIRST_SPEED_INCREASE, SUBSEQUENT_SPEED_INCREASE,
)
from .entities import Enemy


class DifficultyScaler:
    """
    Speeds up the enemies currently on the field each time the score reaches a threshold.

    The first threshold multiplies speeds by ``FIRST_SPEED_INCREASE``; every later one
    by ``SUBSEQUENT_SPEED_INCREASE``. Enemies spawned afterwards keep the base speed.
    """

    def __init__(self, threshold: int = SPEED_THRESHOLD_START, step: int = SPEED_THRESHOLD_STEP) -> None:
        self.threshold = threshold
        self.step = step
        self.triggers = 0

    def factor(self) -> float:
        """Multiplier the next trigger will apply."""
        return FIRST_SPEED_INCREASE if self.triggers == 0 else SUBSEQUENT_SPEED_INCREASE

    def check_score_for_speed_increase(self, score: int, enemies: list[Enemy]) -> float | None:
        """
        Apply a speed increase if ``score`` is a positive multiple of the threshold.

        Returns
        -------
        float | None
            The factor applied, or None if nothing happened this frame.
        """
        if score <= 0 or score % self.threshold != 0:
            return None

        factor = self.factor()
        for enemy in enemies:
            enemy.speed *= factor
        self.triggers += 1
        self.threshold += self.step
        return factor
