"""Maps raw key, pointer and touch events onto controller commands."""

from __future__ import annotations

from .controller import SessionController
from .models import Direction

KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_SPACE = "space"


class InputMapper:
    """
    Keyboard
    - left / right: held-key movement.
    - space: one shot on press, then rapid fire until release.

    Pointer and touch
    - click: one shot.
    - touch start: one shot, then rapid fire until the touch ends.
    - touch move: drag relative to where the touch started.

    Keys other than these are ignored.
    """

    def __init__(self, controller: SessionController) -> None:
        self.controller = controller
        self.touch_start_x: float | None = None

    def key_down(self, key: str) -> None:
        if key in (KEY_LEFT, KEY_RIGHT):
            self.controller.set_direction(Direction(key), True)
        elif key == KEY_SPACE:
            self.controller.shoot_once()
            self.controller.shoot_while_held(True)

    def key_up(self, key: str) -> None:
        if key in (KEY_LEFT, KEY_RIGHT):
            self.controller.set_direction(Direction(key), False)
        elif key == KEY_SPACE:
            self.controller.shoot_while_held(False)

    def click(self) -> None:
        self.controller.shoot_once()

    def touch_start(self, x: float) -> None:
        self.touch_start_x = x
        self.controller.shoot_once()
        self.controller.shoot_while_held(True)

    def touch_move(self, x: float) -> None:
        if self.touch_start_x is None:
            return
        self.controller.drag_move(x - self.touch_start_x)

    def touch_end(self) -> None:
        self.touch_start_x = None
        self.controller.shoot_while_held(False)
