"""Cancellable repeating timers on a host-supplied millisecond clock.

Nothing here reads the wall clock. The host passes ``now_ms`` in (pygame ticks in the
game, a plain integer in tests), which keeps timer firing deterministic and ordered
with respect to frame ticks.
"""

from __future__ import annotations

from typing import Callable


class Timer:
    """A repeating task created by ``Scheduler.every``."""

    def __init__(self, name: str, interval_ms: int, callback: Callable[[], None], first_due_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        self.name = name
        self.interval_ms = interval_ms
        self.callback = callback
        self.next_due_ms = first_due_ms
        self.fired = 0
        self.cancelled = False

    @property
    def active(self) -> bool:
        return not self.cancelled

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else f"due@{self.next_due_ms}"
        return f"Timer({self.name!r}, every {self.interval_ms}ms, {state})"


class Scheduler:
    """
    Owns a set of repeating timers and fires the due ones when advanced.

    A timer that has fallen several intervals behind fires once per missed interval,
    so a long frame does not lose spawns. A cancelled timer never fires again, even if
    it is cancelled by another callback during the same ``advance``.
    """

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self.clock = clock
        self.timers: list[Timer] = []
        self.now_ms = 0

    def _now(self, now_ms: int | None) -> int:
        if now_ms is None:
            now_ms = self.clock() if self.clock is not None else self.now_ms
        self.now_ms = max(self.now_ms, now_ms)
        return self.now_ms

    def every(self, name: str, interval_ms: int, callback: Callable[[], None], now_ms: int | None = None) -> Timer:
        """Schedule ``callback`` every ``interval_ms``, first firing one interval from now."""
        timer = Timer(name, interval_ms, callback, self._now(now_ms) + interval_ms)
        self.timers.append(timer)
        return timer

    def advance(self, now_ms: int | None = None) -> int:
        """
        Fire every timer due at or before ``now_ms``.

        Returns
        -------
        int
            Number of callbacks run.
        """
        now_ms = self._now(now_ms)
        fired = 0
        while True:
            due = [t for t in self.timers if t.active and t.next_due_ms <= now_ms]
            if not due:
                break
            timer = min(due, key=lambda t: t.next_due_ms)
            timer.next_due_ms += timer.interval_ms
            timer.fired += 1
            fired += 1
            timer.callback()
        self.timers = [t for t in self.timers if t.active]
        return fired

    def cancel_all(self) -> None:
        for timer in self.timers:
            timer.cancel()
        self.timers = []

    @property
    def pending(self) -> list[Timer]:
        return [t for t in self.timers if t.active]
