"""Session controller: the commands the outside world can issue against the game."""

from __future__ import annotations

from typing import Callable

from .constants import WIDTH, HEIGHT
from .game_loop import GameLoop
from .highscore import BestScoreStore
from .logger import GameLogger
from .models import Direction, TickResult
from .scheduler import Scheduler
from .session import Session
from .surfaces import Renderer, ScoreDisplay


class SessionController:
    """
    Owns the current session, its game loop and the scheduler feeding both.

    Every command is safe to call in any state: ``start`` while running and ``stop``
    while stopped are no-ops, and movement or shooting without a live session is
    ignored.
    """

    def __init__(self, renderer: Renderer, display: ScoreDisplay | None = None,
                 store: BestScoreStore | None = None, logger: GameLogger | None = None,
                 clock: Callable[[], int] | None = None,
                 field_width: float = WIDTH, field_height: float = HEIGHT) -> None:
        self.renderer = renderer
        self.display = display
        self.store = store
        self.logger = logger
        self.scheduler = Scheduler(clock)
        self.field_width = field_width
        self.field_height = field_height
        self.best_score = store.load() if store is not None else 0
        self.session: Session | None = None
        self.loop: GameLoop | None = None

    @property
    def running(self) -> bool:
        return self.session is not None and self.session.running

    @property
    def start_visible(self) -> bool:
        return not self.running

    @property
    def stop_visible(self) -> bool:
        return self.running

    # --------------------------------- Lifecycle ------------------------------------

    def start(self, now_ms: int | None = None) -> bool:
        """Discard any finished session and begin a new one. Returns False if already running."""
        if self.running:
            return False
        if self.session is not None:
            self.best_score = max(self.best_score, self.session.best_score)
        self.session = Session(self.scheduler, self.best_score, self.field_width, self.field_height, self.logger)
        self.loop = GameLoop(self.session, self.renderer, self.display, self.store, self.logger)
        self.session.begin(now_ms)
        return True

    def stop(self) -> bool:
        """End the running session and cancel its timers. Returns False if nothing was running."""
        if not self.running:
            return False
        session = self.session
        if self.logger:
            self.logger.log_session_stop(session.score)
        session.end("Stopped by player")
        self.best_score = max(self.best_score, session.best_score)
        return True

    # --------------------------------- Input ----------------------------------------

    def set_direction(self, direction: Direction | str, pressed: bool) -> None:
        if self.session is not None:
            self.session.set_direction(direction, pressed)

    def shoot_once(self) -> None:
        if self.session is not None:
            self.session.shoot()

    def shoot_while_held(self, held: bool) -> None:
        if self.session is None:
            return
        if held:
            self.session.start_rapid_fire()
        else:
            self.session.stop_rapid_fire()

    def drag_move(self, delta_sign: float) -> None:
        """Translate a drag step into one player move; the sign picks the direction."""
        if self.session is None or delta_sign == 0:
            return
        self.session.move_player(Direction.LEFT if delta_sign < 0 else Direction.RIGHT)

    # --------------------------------- Frame ----------------------------------------

    def frame(self, now_ms: int | None = None) -> TickResult:
        """
        Host hook, called once per presented frame.

        Due timers fire first, so anything they enqueue is part of this frame's tick.
        """
        self.scheduler.advance(now_ms)
        if self.loop is None:
            return TickResult.HALT
        result = self.loop.tick()
        self.best_score = max(self.best_score, self.session.best_score)
        return result
