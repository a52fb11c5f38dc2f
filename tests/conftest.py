from __future__ import annotations

import pytest

from skyfire.controller import SessionController
from skyfire.highscore import BestScoreStore


class FakeRenderer:
    """Records every draw call as a tuple."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def draw_image(self, name, x, y, width, height) -> None:
        self.calls.append(("image", name, x, y, width, height))

    def draw_rect(self, color, x, y, width, height) -> None:
        self.calls.append(("rect", color, x, y, width, height))

    def draw_text(self, text, x, y, color, size) -> None:
        self.calls.append(("text", text, x, y, color, size))

    def texts(self) -> list[str]:
        return [c[1] for c in self.calls if c[0] == "text"]

    def clear(self) -> None:
        self.calls.clear()


class FakeDisplay:
    def __init__(self) -> None:
        self.shown: list[tuple[int, int]] = []

    def show(self, score: int, best_score: int) -> None:
        self.shown.append((score, best_score))


@pytest.fixture()
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture()
def display() -> FakeDisplay:
    return FakeDisplay()


@pytest.fixture()
def store(tmp_path) -> BestScoreStore:
    return BestScoreStore(str(tmp_path / "best_score.json"))


@pytest.fixture()
def controller(renderer: FakeRenderer, display: FakeDisplay, store: BestScoreStore) -> SessionController:
    return SessionController(renderer, display, store)
