"""Player, enemy and projectile entities: position, size, speed, movement and drawing.

All three share an axis-aligned bounding box. Movement is a plain position update;
drawing is a pure side effect on a ``Renderer``.
"""

from __future__ import annotations

from .constants import (
    WIDTH, HEIGHT,
    PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_SPEED, PLAYER_BOTTOM_OFFSET,
    PROJECTILE_WIDTH, PROJECTILE_HEIGHT, PROJECTILE_SPEED, PROJECTILE_COLOR,
)
from .models import Direction
from .surfaces import Renderer


class Entity:
    """Anything on the field with a position, a size and a speed."""

    def __init__(self, x: float, y: float, width: float, height: float, speed: float) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.speed = speed

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def overlaps(self, other: Entity) -> bool:
        """Axis-aligned bounding-box overlap; touching edges do not count."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x:.2f}, y={self.y:.2f}, speed={self.speed:.4f})"


class Player(Entity):
    """
    The ship at the bottom of the field.

    Only moves horizontally, and never leaves ``[0, field_width - width]``.
    """

    def __init__(self, x: float, y: float, field_width: float = WIDTH) -> None:
        super().__init__(x, y, PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_SPEED)
        self.field_width = field_width

    @classmethod
    def centered(cls, field_width: float = WIDTH, field_height: float = HEIGHT) -> Player:
        """Create a player centred horizontally near the bottom edge."""
        return cls(field_width / 2 - PLAYER_WIDTH / 2, field_height - PLAYER_BOTTOM_OFFSET, field_width)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    def move(self, direction: Direction | str) -> None:
        """
        Step one ``speed`` left or right, clamped to the field.

        Parameters
        ----------
        direction : Direction | str
            ``"left"`` or ``"right"``; anything else is ignored.
        """
        parsed = Direction.parse(direction)
        if parsed is Direction.LEFT:
            self.x = max(0, self.x - self.speed)
        elif parsed is Direction.RIGHT:
            self.x = min(self.field_width - self.width, self.x + self.speed)

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_image("player", self.x, self.y, self.width, self.height)


class Enemy(Entity):
    """A descending invader. ``speed`` is per instance and scaled by difficulty."""

    def move(self) -> None:
        self.y += self.speed

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_image("enemy", self.x, self.y, self.width, self.height)


class Projectile(Entity):
    """A shot travelling straight up."""

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x, y, PROJECTILE_WIDTH, PROJECTILE_HEIGHT, PROJECTILE_SPEED)

    @classmethod
    def fired_by(cls, player: Player) -> Projectile:
        """A projectile leaving the horizontal centre of the player's top edge."""
        return cls(player.center_x - PROJECTILE_WIDTH / 2, player.y)

    @property
    def off_field(self) -> bool:
        return self.y < 0

    def move(self) -> None:
        self.y -= self.speed

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_rect(PROJECTILE_COLOR, self.x, self.y, self.width, self.height)
