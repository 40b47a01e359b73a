"""Interactive camera demo.

Controls:
    Arrow keys: move the target dot
    Q / E: rotate the camera
    Z: flash
    X: vertical noise shake
    C: spring shake toward the mouse

The camera uses a 60x60 deadzone around the dot, so small movements leave
the view still until the dot reaches an edge.
"""

from __future__ import annotations

import logging
import math

import arcade

from lente.backends import ArcadePointer, ArcadeRenderer
from lente.conf import settings
from lente.helpers import create_camera

logger = logging.getLogger(__name__)

MOVE_STEP = 1
ROTATE_SPEED = 1.0
DOT_RADIUS = 15
LANDMARK = (100, 100)


class DemoWindow(arcade.Window):
    """Window showing a followed dot, the mouse in world space and a landmark."""

    def __init__(self) -> None:
        """Create the window, camera and renderer."""
        super().__init__(settings.SCREEN_WIDTH, settings.SCREEN_HEIGHT, settings.WINDOW_TITLE)
        self.dot_x = 0.0
        self.dot_y = 0.0
        self.keys_down: set[int] = set()

        self.pointer = ArcadePointer()
        self.renderer = ArcadeRenderer()
        self.camera = create_camera(self.width, self.height, pointer=self.pointer)
        self.camera.set_deadzone(-30, -30, 60, 60)

    def on_key_press(self, symbol: int, modifiers: int) -> None:  # noqa: ARG002
        """Trigger camera effects and track held keys."""
        self.keys_down.add(symbol)
        if symbol == arcade.key.Z:
            self.camera.flash(1)
        elif symbol == arcade.key.X:
            self.camera.shake(1, 10, 100, "y")
        elif symbol == arcade.key.C:
            mx, my = self.camera.get_mouse_position()
            angle = math.atan2(my - self.camera.y, mx - self.camera.x)
            self.camera.spring_shake(angle, 100)
            logger.debug("Spring shake toward (%.1f, %.1f)", mx, my)

    def on_key_release(self, symbol: int, modifiers: int) -> None:  # noqa: ARG002
        """Forget released keys."""
        self.keys_down.discard(symbol)

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int) -> None:
        """Feed the pointer source."""
        self.pointer.on_mouse_motion(x, y, dx, dy)

    def on_update(self, delta_time: float) -> None:
        """Move the dot, steer the camera and advance it one frame."""
        keys = self.keys_down
        if arcade.key.LEFT in keys:
            self.dot_x -= MOVE_STEP
        elif arcade.key.RIGHT in keys:
            self.dot_x += MOVE_STEP
        if arcade.key.UP in keys:
            self.dot_y += MOVE_STEP
        elif arcade.key.DOWN in keys:
            self.dot_y -= MOVE_STEP

        if arcade.key.Q in keys:
            self.camera.rotate(-ROTATE_SPEED * delta_time)
        elif arcade.key.E in keys:
            self.camera.rotate(ROTATE_SPEED * delta_time)

        self.camera.follow(self.dot_x, self.dot_y)
        self.camera.update(delta_time)

    def on_draw(self) -> None:
        """Draw the world through the camera, then the flash."""
        self.clear()
        with self.camera.activate(self.renderer):
            mx, my = self.camera.get_mouse_position()
            arcade.draw_circle_filled(self.dot_x, self.dot_y, DOT_RADIUS, arcade.color.WHITE)
            arcade.draw_circle_filled(mx, my, DOT_RADIUS, arcade.color.WHITE)
            arcade.draw_circle_filled(*LANDMARK, DOT_RADIUS, arcade.color.WHITE)
            self.camera.draw_debug(self.renderer)
        self.camera.draw_flash(self.renderer)
