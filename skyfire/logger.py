"""Markdown logger for gameplay events (sessions, kills, speed-ups, game over)."""

import datetime


class GameLogger:
    """Handles logging of game events to markdown file."""

    def __init__(self, log_file: str):
        """
        Initialize the game logger.

        Parameters
        ----------
        log_file : str
            Path to the log file
        """
        self.log_file = log_file
        self.setup_log()

    def setup_log(self) -> None:
        """Initialize the log file with headers."""
        try:
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Skyfire Game Log\n\n")
                f.write(f"Log started at: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
                f.write("## Game Events\n\n")
                f.write("| Timestamp | Event | Score | Details |\n")
                f.write("|-----------|-------|-------|---------|\n")
        except Exception as e:
            print(f"Failed to initialize log file: {e}")

    def _write_row(self, event: str, score: int | str, details: str) -> None:
        try:
            timestamp = datetime.datetime.now().strftime('%H:%M:%S.%f')[:-3]  # Include milliseconds
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"| {timestamp} | {event} | {score} | {details} |\n")
        except Exception as e:
            print(f"Failed to log {event.lower()}: {e}")

    def log_session_start(self, best_score: int) -> None:
        self._write_row("START", 0, f"Best score so far: {best_score}")

    def log_session_stop(self, score: int) -> None:
        self._write_row("STOP", score, "Stopped by player")

    def log_enemy_destroyed(self, pos: tuple[float, float], score: int) -> None:
        """
        Log an enemy destroyed by a projectile.

        Parameters
        ----------
        pos : Tuple[float, float]
            Enemy position (x, y) at the moment of the hit
        score : int
            Score after the bonus was added
        """
        self._write_row("HIT", score, f"Enemy at ({pos[0]:.1f}, {pos[1]:.1f})")

    def log_speed_increase(self, score: int, factor: float, next_threshold: int) -> None:
        """
        Log a difficulty step.

        Parameters
        ----------
        score : int
            Score that triggered the step
        factor : float
            Speed multiplier applied to the enemies on the field
        next_threshold : int
            Score at which the next step can trigger
        """
        self._write_row("SPEED UP", score, f"x{factor:.2f}, next at {next_threshold}")

    def log_game_over(self, reason: str, score: int) -> None:
        self._write_row("GAME OVER", score, reason)

    def log_best_score(self, best_score: int) -> None:
        self._write_row("BEST", best_score, "New best score")
