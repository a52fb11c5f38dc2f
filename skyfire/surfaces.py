"""Output sinks the core draws into. The pygame implementations live in ``ui``."""

from __future__ import annotations

from typing import Protocol

Color = tuple[int, int, int]


class Renderer(Protocol):
    """2D drawing surface sized to the play field."""

    def draw_image(self, name: str, x: float, y: float, width: float, height: float) -> None: ...

    def draw_rect(self, color: Color, x: float, y: float, width: float, height: float) -> None: ...

    def draw_text(self, text: str, x: float, y: float, color: Color, size: int) -> None: ...


class ScoreDisplay(Protocol):
    """Text sink for the current and best score."""

    def show(self, score: int, best_score: int) -> None: ...
