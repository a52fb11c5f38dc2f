from __future__ import annotations

import pytest

from skyfire.entities import Enemy, Projectile
from skyfire.game_loop import GameLoop
from skyfire.logger import GameLogger
from skyfire.models import TickResult
from skyfire.scheduler import Scheduler
from skyfire.session import Session


def _running_session(logger: GameLogger | None = None, best_score: int = 0) -> Session:
    session = Session(Scheduler(), best_score=best_score, logger=logger)
    session.begin(0)
    return session


def _hit_first_enemy(session: Session) -> None:
    # The first enemy sits at (81.25, 50) and drops to 50.5 this tick;
    # the projectile rises from 60 to 54 and overlaps it.
    session.projectiles.append(Projectile(90, 60))


def test_tick_renders_background_player_enemies_then_score(renderer, display) -> None:
    session = _running_session()
    loop = GameLoop(session, renderer, display)

    assert loop.tick() is TickResult.CONTINUE

    calls = renderer.calls
    assert calls[0] == ("image", "background", 0, 0, 1000, 600)
    assert calls[1][:2] == ("image", "player")
    assert [c[1] for c in calls[2:9]] == ["enemy"] * 7
    assert calls[-1][:2] == ("text", "Score: 0")
    assert display.shown == [(0, 0)]
    assert all(e.y == 50.5 for e in session.enemies)


def test_held_directions_move_the_player_every_tick(renderer) -> None:
    session = _running_session()
    loop = GameLoop(session, renderer)
    start_x = session.player.x

    session.set_direction("left", True)
    loop.tick()
    loop.tick()
    assert session.player.x == start_x - 10

    session.set_direction("right", True)
    loop.tick()
    assert session.player.x == start_x - 10

    session.set_direction("left", False)
    loop.tick()
    assert session.player.x == start_x - 5


def test_kill_scores_five_and_updates_best_score(renderer, display, store) -> None:
    session = _running_session()
    loop = GameLoop(session, renderer, display, store)
    _hit_first_enemy(session)

    loop.tick()

    assert session.score == 5
    assert len(session.enemies) == 6
    assert session.projectiles == []
    assert session.best_score == 5
    assert store.load() == 5
    assert display.shown[-1] == (5, 5)


def test_best_score_is_not_lowered(renderer, store) -> None:
    session = _running_session(best_score=40)
    loop = GameLoop(session, renderer, store=store)
    _hit_first_enemy(session)
    loop.tick()
    assert session.best_score == 40
    assert store.load() == 0


def test_reaching_100_speeds_up_survivors(renderer) -> None:
    session = _running_session()
    loop = GameLoop(session, renderer)
    session.score = 95
    _hit_first_enemy(session)

    loop.tick()

    assert session.score == 100
    assert [e.speed for e in session.enemies] == pytest.approx([0.5 * 1.32] * 6)
    assert session.difficulty.threshold == 200


def test_enemy_on_the_ground_ends_the_session_once(renderer, tmp_path) -> None:
    logger = GameLogger(str(tmp_path / "log.md"))
    session = _running_session(logger=logger)
    loop = GameLoop(session, renderer, logger=logger)
    session.enemies[:] = [Enemy(0, 549.6, 50, 50, 0.5), Enemy(500, 100, 50, 50, 0.5)]
    # Would hit the second enemy if the projectile phase still ran.
    session.projectiles.append(Projectile(510, 150))

    assert loop.tick() is TickResult.CONTINUE
    assert session.game_over
    assert session.score == 0
    assert len(session.projectiles) == 1
    assert session.scheduler.pending == []

    renderer.clear()
    assert loop.tick() is TickResult.HALT
    assert renderer.texts() == ["Game Over!"]

    renderer.clear()
    assert loop.tick() is TickResult.HALT
    assert renderer.calls == []

    session.end("again")
    log = (tmp_path / "log.md").read_text(encoding="utf-8")
    assert log.count("GAME OVER") == 1


def test_no_mutation_after_game_over(renderer) -> None:
    session = _running_session()
    loop = GameLoop(session, renderer)
    session.end("Stopped by player")
    positions = [(e.x, e.y) for e in session.enemies]

    assert session.shoot() is None
    session.spawn_wave()
    loop.tick()
    loop.tick()

    assert [(e.x, e.y) for e in session.enemies] == positions
    assert session.projectiles == []
    assert session.score == 0
