"""Per-frame update of a session: movement, collisions, scoring and rendering.

The host calls ``GameLoop.tick`` once per presented frame and keeps calling it while
it returns ``TickResult.CONTINUE``.
"""

from __future__ import annotations

from .collision import reached_bottom, resolve_projectiles
from .constants import (
    TEXT_COLOR, GAME_OVER_COLOR, FONT_SIZE_SMALL, FONT_SIZE_LARGE, ENEMY_KILL_BONUS
)
from .highscore import BestScoreStore
from .logger import GameLogger
from .models import Direction, TickResult
from .session import Session
from .surfaces import Renderer, ScoreDisplay


class GameLoop:
    """
    Drives one session frame by frame.

    States
    - Running:  every tick updates and renders the field.
    - GameOver: the first tick renders "Game Over!" and halts; later ticks do nothing.
    """

    def __init__(self, session: Session, renderer: Renderer, display: ScoreDisplay | None = None,
                 store: BestScoreStore | None = None, logger: GameLogger | None = None) -> None:
        self.session = session
        self.renderer = renderer
        self.display = display
        self.store = store
        self.logger = logger
        self.halted = False
        self.ticks = 0

    def tick(self) -> TickResult:
        if self.halted:
            return TickResult.HALT

        session = self.session
        if session.game_over:
            self.draw_game_over()
            self.halted = True
            return TickResult.HALT

        self.ticks += 1
        self.renderer.draw_image("background", 0, 0, session.field_width, session.field_height)

        self.update_player()
        self.update_enemies()

        # The ground check ends the session before any hit can score this frame.
        if session.running:
            self.update_projectiles()
            self.update_difficulty()

        self.draw_score()
        self.update_best_score()
        if self.display is not None:
            self.display.show(session.score, session.best_score)
        return TickResult.CONTINUE

    # --------------------------------- Update ---------------------------------------

    def update_player(self) -> None:
        session = self.session
        session.player.draw(self.renderer)
        if Direction.LEFT in session.held:
            session.player.move(Direction.LEFT)
        if Direction.RIGHT in session.held:
            session.player.move(Direction.RIGHT)

    def update_enemies(self) -> None:
        session = self.session
        landed = False
        for enemy in session.enemies:
            enemy.draw(self.renderer)
            enemy.move()
            if reached_bottom(enemy, session.field_height):
                landed = True
        if landed:
            session.end("Enemy reached the ground")

    def update_projectiles(self) -> None:
        session = self.session
        report = resolve_projectiles(session.projectiles, session.enemies, self.renderer)
        for enemy in report.destroyed:
            session.add_points(ENEMY_KILL_BONUS)
            if self.logger:
                self.logger.log_enemy_destroyed((enemy.x, enemy.y), session.score)

    def update_difficulty(self) -> None:
        session = self.session
        factor = session.difficulty.check_score_for_speed_increase(session.score, session.enemies)
        if factor is not None and self.logger:
            self.logger.log_speed_increase(session.score, factor, session.difficulty.threshold)

    def update_best_score(self) -> None:
        session = self.session
        if session.record_best_score():
            if self.store is not None:
                self.store.save(session.best_score)
            if self.logger:
                self.logger.log_best_score(session.best_score)

    # --------------------------------- Rendering ------------------------------------

    def draw_score(self) -> None:
        self.renderer.draw_text(f"Score: {self.session.score}", 20, 30, TEXT_COLOR, FONT_SIZE_SMALL)

    def draw_game_over(self) -> None:
        width = self.session.field_width
        height = self.session.field_height
        self.renderer.draw_text("Game Over!", width / 2 - 100, height / 2, GAME_OVER_COLOR, FONT_SIZE_LARGE)
