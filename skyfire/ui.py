"""pygame render surface, HUD and start/stop buttons"""

from __future__ import annotations

import os

import pygame

from .constants import (
    HUD_PADDING, TEXT_COLOR, BG_COLOR, PLAYER_COLOR, ENEMY_COLOR,
    FONT_NAME, FONT_SIZE_MEDIUM,
    PLAYER_SPRITE_PATH, ENEMY_SPRITE_PATH, BACKGROUND_PATH,
)
from .surfaces import Color


def load_image(path: str) -> pygame.Surface | None:
    """Load an optional sprite; missing or broken files give None."""
    if os.path.exists(path):
        try:
            return pygame.image.load(path).convert_alpha()
        except Exception as e:
            print(f"Failed to load image {path}: {e}")
    return None


class PygameRenderer:
    """
    Draws the core's primitives onto a pygame surface.

    Named images come from ``assets/``; any that are missing are drawn as solid
    rectangles in a fallback color, so the game runs without art.
    """

    FALLBACK_COLORS: dict[str, Color] = {
        "background": BG_COLOR,
        "player": PLAYER_COLOR,
        "enemy": ENEMY_COLOR,
    }

    def __init__(self, surf: pygame.Surface, images: dict[str, pygame.Surface | None] | None = None) -> None:
        self.surf = surf
        if images is None:
            images = {
                "background": load_image(BACKGROUND_PATH),
                "player": load_image(PLAYER_SPRITE_PATH),
                "enemy": load_image(ENEMY_SPRITE_PATH),
            }
        self.images = images
        self.scaled: dict[tuple[str, int, int], pygame.Surface] = {}
        self.fonts: dict[int, pygame.font.Font] = {}

    def font(self, size: int) -> pygame.font.Font:
        if size not in self.fonts:
            self.fonts[size] = pygame.font.Font(FONT_NAME, size)
        return self.fonts[size]

    def image(self, name: str, width: int, height: int) -> pygame.Surface | None:
        """Return the named image scaled to (width, height), cached per size."""
        original = self.images.get(name)
        if original is None:
            return None
        key = (name, width, height)
        if key not in self.scaled:
            self.scaled[key] = pygame.transform.scale(original, (width, height))
        return self.scaled[key]

    def draw_image(self, name: str, x: float, y: float, width: float, height: float) -> None:
        img = self.image(name, int(width), int(height))
        if img is not None:
            self.surf.blit(img, (x, y))
        else:
            self.draw_rect(self.FALLBACK_COLORS.get(name, TEXT_COLOR), x, y, width, height)

    def draw_rect(self, color: Color, x: float, y: float, width: float, height: float) -> None:
        pygame.draw.rect(self.surf, color, pygame.Rect(int(x), int(y), int(width), int(height)))

    def draw_text(self, text: str, x: float, y: float, color: Color, size: int) -> None:
        # (x, y) is the baseline-left corner, like a canvas fillText.
        font = self.font(size)
        self.surf.blit(font.render(text, True, color), (x, y - font.get_ascent()))


class HUD:
    """Score display in the top-right corner: current score and best score."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.score = 0
        self.best_score = 0

    def show(self, score: int, best_score: int) -> None:
        self.score = score
        self.best_score = best_score

    def lines(self) -> list[str]:
        return [f"Score: {self.score}", f"Best Score: {self.best_score}"]

    def draw(self, surf: pygame.Surface) -> None:
        y = HUD_PADDING
        for line in self.lines():
            text_surf = self.font.render(line, True, TEXT_COLOR)
            surf.blit(text_surf, (surf.get_width() - text_surf.get_width() - HUD_PADDING, y))
            y += text_surf.get_height() + 4


class ControlButtons:
    """Start and Stop buttons; only the one matching the session state is shown."""

    WIDTH = 140
    HEIGHT = 40

    def __init__(self, font: pygame.font.Font, surf_width: int) -> None:
        self.font = font
        self.rect = pygame.Rect(0, 0, self.WIDTH, self.HEIGHT)
        self.rect.midtop = (surf_width // 2, HUD_PADDING)

    def label(self, running: bool) -> str:
        return "STOP" if running else "START"

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)

    def draw(self, surf: pygame.Surface, running: bool, hovered: bool = False) -> None:
        if running:
            color = (150, 70, 70) if hovered else (100, 50, 50)
        else:
            color = (100, 150, 100) if hovered else (60, 80, 60)
        pygame.draw.rect(surf, color, self.rect)
        pygame.draw.rect(surf, TEXT_COLOR, self.rect, 2)
        text = self.font.render(self.label(running), True, TEXT_COLOR)
        surf.blit(text, text.get_rect(center=self.rect.center))


def make_font(size: int = FONT_SIZE_MEDIUM) -> pygame.font.Font:
    return pygame.font.Font(FONT_NAME, size)
