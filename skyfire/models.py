"""Lightweight data models used across the game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    """Horizontal direction for player movement."""
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: object) -> Direction | None:
        """Return the matching direction, or None for anything else."""
        try:
            return cls(value)
        except ValueError:
            return None


class TickResult(Enum):
    """Signal returned by every game-loop tick."""
    CONTINUE = "continue"
    HALT = "halt"


@dataclass(frozen=True)
class SpawnPoint:
    """
    A single, fixed spawn location for one enemy of a wave.

    Attributes
    ----------
    x : float
        Left edge of the enemy on the field.
    y : float
        Top edge of the enemy on the field.
    """
    x: float
    y: float
