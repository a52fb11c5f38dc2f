"""Game entry point"""

from __future__ import annotations

import pygame

from skyfire.constants import WIDTH, HEIGHT, FPS, BG_COLOR, LOG_FILE, BEST_SCORE_FILE
from skyfire.controller import SessionController
from skyfire.highscore import BestScoreStore
from skyfire.input import InputMapper, KEY_LEFT, KEY_RIGHT, KEY_SPACE
from skyfire.logger import GameLogger
from skyfire.models import TickResult
from skyfire.ui import PygameRenderer, HUD, ControlButtons, make_font

KEY_NAMES = {
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_SPACE: KEY_SPACE,
}


class Game:
    """
    pygame host: owns the window and clock, forwards input to the controller and
    presents one frame per controller tick.
    """

    def __init__(self) -> None:
        """Initialize pygame, the window, and the game controller."""
        pygame.init()
        pygame.display.set_caption("Skyfire")

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.font = make_font()

        self.renderer = PygameRenderer(self.screen)
        self.hud = HUD(self.font)
        self.buttons = ControlButtons(self.font, WIDTH)
        self.logger = GameLogger(LOG_FILE)
        self.controller = SessionController(
            self.renderer, self.hud, BestScoreStore(BEST_SCORE_FILE), self.logger,
            clock=pygame.time.get_ticks,
        )
        self.hud.show(0, self.controller.best_score)
        self.input = InputMapper(self.controller)
        self.halted = True           # no tick to present until START

    # --------------------------------- Loop -----------------------------------------

    def run(self) -> None:
        """Main loop: process events, tick the controller, present the frame."""
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        if self.controller.running:
                            self.stop()
                        else:
                            running = False
                    elif event.key == pygame.K_RETURN:
                        self.start()
                    elif event.key in KEY_NAMES:
                        self.input.key_down(KEY_NAMES[event.key])
                elif event.type == pygame.KEYUP and event.key in KEY_NAMES:
                    self.input.key_up(KEY_NAMES[event.key])
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not event.touch:
                    self.handle_click(event.pos)
                elif event.type == pygame.FINGERDOWN:
                    self.handle_touch_start(event.x * WIDTH, event.y * HEIGHT)
                elif event.type == pygame.FINGERMOTION:
                    self.input.touch_move(event.x * WIDTH)
                elif event.type == pygame.FINGERUP:
                    self.input.touch_end()

            if not self.halted:
                self.halted = self.controller.frame() is TickResult.HALT

            self.draw()
            self.clock.tick(FPS)

        self.controller.stop()
        pygame.quit()

    def start(self) -> None:
        if self.controller.start():
            self.halted = False

    def stop(self) -> None:
        self.controller.stop()

    # --------------------------------- Input ----------------------------------------

    def handle_click(self, pos: tuple[int, int]) -> None:
        """Left click: the visible button if it was hit, otherwise a single shot."""
        if self.buttons.hit(pos):
            if self.controller.running:
                self.stop()
            else:
                self.start()
            return
        self.input.click()

    def handle_touch_start(self, x: float, y: float) -> None:
        if self.buttons.hit((int(x), int(y))):
            self.handle_click((int(x), int(y)))
            return
        self.input.touch_start(x)

    # --------------------------------- Rendering ------------------------------------

    def draw(self) -> None:
        """Overlay the HUD and the control button on whatever the last tick drew."""
        if self.controller.loop is None:
            self.screen.fill(BG_COLOR)
        self.hud.draw(self.screen)
        mouse_pos = pygame.mouse.get_pos()
        self.buttons.draw(self.screen, self.controller.running, self.buttons.hit(mouse_pos))
        pygame.display.flip()


if __name__ == "__main__":
    Game().run()
