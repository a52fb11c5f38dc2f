"""Per-frame projectile movement, hit detection, off-field cleanup and the ground check.

Collections are never mutated while being scanned: the scan marks casualties and the
survivors are compacted back into the same list objects afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import HEIGHT, ENEMY_KILL_BONUS
from .entities import Enemy, Projectile
from .surfaces import Renderer


@dataclass
class CollisionReport:
    """
    What happened during one projectile pass.

    Attributes
    ----------
    destroyed : list[Enemy]
        Enemies hit this frame, in the order they were hit.
    expired : int
        Projectiles that left the top of the field.
    points : int
        Score earned this frame.
    """
    destroyed: list[Enemy] = field(default_factory=list)
    expired: int = 0
    points: int = 0


def reached_bottom(enemy: Enemy, field_height: float = HEIGHT) -> bool:
    """True once the enemy's bottom edge touches or passes the bottom of the field."""
    return enemy.bottom >= field_height


def resolve_projectiles(projectiles: list[Projectile], enemies: list[Enemy],
                        renderer: Renderer | None = None,
                        bonus: int = ENEMY_KILL_BONUS) -> CollisionReport:
    """
    Move every projectile, drop the ones off the top edge and resolve hits.

    Each projectile hits at most one enemy, and an enemy already hit earlier in the
    same pass cannot be hit again, so one winner is picked when several projectiles
    overlap the same enemy.

    Parameters
    ----------
    projectiles : list[Projectile]
        Live projectiles; compacted in place.
    enemies : list[Enemy]
        Live enemies; compacted in place.
    renderer : Renderer | None
        When given, each projectile is drawn before it moves.
    bonus : int
        Points per destroyed enemy.
    """
    report = CollisionReport()
    spent: set[int] = set()
    killed: set[int] = set()

    for projectile in list(projectiles):
        if renderer is not None:
            projectile.draw(renderer)
        projectile.move()

        if projectile.off_field:
            spent.add(id(projectile))
            report.expired += 1

        for enemy in enemies:
            if id(enemy) in killed:
                continue
            if projectile.overlaps(enemy):
                killed.add(id(enemy))
                spent.add(id(projectile))
                report.destroyed.append(enemy)
                report.points += bonus
                break

    if spent:
        projectiles[:] = [p for p in projectiles if id(p) not in spent]
    if killed:
        enemies[:] = [e for e in enemies if id(e) not in killed]
    return report
