from __future__ import annotations

from .constants import (
    WIDTH, ENEMY_COUNT, ENEMY_WIDTH, ENEMY_HEIGHT, ENEMY_SPAWN_Y, ENEMY_BASE_SPEED
)
from .entities import Enemy
from .models import SpawnPoint


class Spawner:
    """
    Responsible for laying out enemy waves.

    Notes
    - The layout is deterministic: ``ENEMY_COUNT`` enemies evenly spaced across the
      field at ``ENEMY_SPAWN_Y``.
    - Every wave starts at the base speed, whatever difficulty earlier waves reached.
    - Cadence is not handled here; the session owns the repeating spawn timer.
    """

    def __init__(self, field_width: float = WIDTH, count: int = ENEMY_COUNT) -> None:
        self.field_width = field_width
        self.count = count
        self.spawn_points: list[SpawnPoint] = self.make_spawn_points()
        self.waves_spawned = 0

    def make_spawn_points(self) -> list[SpawnPoint]:
        """
        One spawn point per enemy, with equal gaps between enemies and at both edges.
        """
        spacing = (self.field_width - self.count * ENEMY_WIDTH) / (self.count + 1)
        return [
            SpawnPoint((i + 1) * spacing + i * ENEMY_WIDTH, ENEMY_SPAWN_Y)
            for i in range(self.count)
        ]

    def spawn_enemies(self, enemies: list[Enemy]) -> list[Enemy]:
        """
        Append a fresh wave to ``enemies``.

        Parameters
        ----------
        enemies : list[Enemy]
            The live enemy collection of the session.

        Returns
        -------
        list[Enemy]
            The enemies created for this wave.
        """
        wave = [
            Enemy(sp.x, sp.y, ENEMY_WIDTH, ENEMY_HEIGHT, ENEMY_BASE_SPEED)
            for sp in self.spawn_points
        ]
        enemies.extend(wave)
        self.waves_spawned += 1
        return wave
