"""One play-through: every piece of mutable game state plus the timers that feed it."""

from __future__ import annotations

from enum import Enum

from .constants import WIDTH, HEIGHT, SPAWN_INTERVAL_MS, RAPID_FIRE_INTERVAL_MS
from .difficulty import DifficultyScaler
from .entities import Player, Enemy, Projectile
from .logger import GameLogger
from .models import Direction
from .scheduler import Scheduler, Timer
from .spawner import Spawner


class SessionState(Enum):
    CREATED = "created"
    RUNNING = "running"
    GAME_OVER = "game_over"


class Session:
    """
    State of a single session, from ``start`` until game over or ``stop``.

    Lifecycle: ``CREATED -> RUNNING -> GAME_OVER``. A finished session is discarded
    by the controller; the next ``start`` builds a new one, so score, difficulty
    threshold and entity collections always begin fresh. Only ``best_score`` is
    carried over.

    The spawn cadence and rapid-fire timers are registered on the shared scheduler
    but owned here, and both are cancelled together when the session ends.
    """

    def __init__(self, scheduler: Scheduler, best_score: int = 0,
                 field_width: float = WIDTH, field_height: float = HEIGHT,
                 logger: GameLogger | None = None) -> None:
        self.scheduler = scheduler
        self.field_width = field_width
        self.field_height = field_height
        self.logger = logger

        self.player = Player.centered(field_width, field_height)
        self.enemies: list[Enemy] = []
        self.projectiles: list[Projectile] = []
        self.spawner = Spawner(field_width)
        self.difficulty = DifficultyScaler()

        self.score = 0
        self.best_score = best_score
        self.state = SessionState.CREATED
        self.held: set[Direction] = set()

        self.spawn_timer: Timer | None = None
        self.rapid_fire_timer: Timer | None = None

    # --------------------------------- Lifecycle ------------------------------------

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    @property
    def game_over(self) -> bool:
        return self.state is SessionState.GAME_OVER

    def begin(self, now_ms: int | None = None) -> None:
        """Spawn the first wave and start the spawn cadence."""
        if self.state is not SessionState.CREATED:
            return
        self.state = SessionState.RUNNING
        self.spawner.spawn_enemies(self.enemies)
        self.spawn_timer = self.scheduler.every("spawn", SPAWN_INTERVAL_MS, self.spawn_wave, now_ms)
        if self.logger:
            self.logger.log_session_start(self.best_score)

    def end(self, reason: str) -> bool:
        """
        Enter the terminal state and cancel every timer this session owns.

        Returns
        -------
        bool
            True on the transition, False if the session had already ended.
        """
        if self.state is SessionState.GAME_OVER:
            return False
        self.state = SessionState.GAME_OVER
        self.cancel_timers()
        if self.logger:
            self.logger.log_game_over(reason, self.score)
        return True

    def cancel_timers(self) -> None:
        for timer in (self.spawn_timer, self.rapid_fire_timer):
            if timer is not None:
                timer.cancel()
        self.spawn_timer = None
        self.rapid_fire_timer = None

    # --------------------------------- Commands -------------------------------------

    def spawn_wave(self) -> None:
        if self.running:
            self.spawner.spawn_enemies(self.enemies)

    def shoot(self) -> Projectile | None:
        """Fire one projectile from the player's centre, if the session is live."""
        if not self.running:
            return None
        projectile = Projectile.fired_by(self.player)
        self.projectiles.append(projectile)
        return projectile

    def start_rapid_fire(self) -> None:
        if not self.running or self.rapid_fire_timer is not None:
            return
        self.rapid_fire_timer = self.scheduler.every("rapid-fire", RAPID_FIRE_INTERVAL_MS, self.shoot)

    def stop_rapid_fire(self) -> None:
        if self.rapid_fire_timer is not None:
            self.rapid_fire_timer.cancel()
            self.rapid_fire_timer = None

    def set_direction(self, direction: Direction | str, pressed: bool) -> None:
        parsed = Direction.parse(direction)
        if parsed is None:
            return
        if pressed:
            self.held.add(parsed)
        else:
            self.held.discard(parsed)

    def move_player(self, direction: Direction | str) -> None:
        if self.running:
            self.player.move(direction)

    # --------------------------------- Scoring --------------------------------------

    def add_points(self, points: int) -> None:
        if points > 0:
            self.score += points

    def record_best_score(self) -> bool:
        """Raise ``best_score`` to ``score`` if exceeded; True when it changed."""
        if self.score > self.best_score:
            self.best_score = self.score
            return True
        return False
