"""Arcade backend for the camera.

ArcadeRenderer implements the Renderer protocol on top of an
arcade.camera.Camera2D: pushing a ViewTransform positions, rotates and zooms
the Camera2D and activates it, popping switches back to a screen-space
camera. Overlays are drawn with arcade's shape primitives.

ArcadePointer records mouse motion so Camera.get_mouse_position() can read
the pointer without polling arcade.

Arcade uses a bottom-left origin with y pointing up. Coordinates are passed
through unchanged, so a y-up world pairs with y-up screen coordinates.

Usage Example:
    renderer = ArcadeRenderer()
    pointer = ArcadePointer()
    camera = Camera(window.width, window.height, pointer=pointer)

    def on_mouse_motion(self, x, y, dx, dy):
        pointer.on_mouse_motion(x, y, dx, dy)

    def on_draw(self):
        self.clear()
        with camera.activate(renderer):
            self.scene.draw()
            camera.draw_debug(renderer)
        camera.draw_flash(renderer)
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import arcade

if TYPE_CHECKING:
    from lente.camera.base import DebugOverlay, FlashOverlay, ViewTransform
    from lente.types import Color

logger = logging.getLogger(__name__)

DEADZONE_OUTLINE_COLOR = (255, 0, 0, 77)
DEADZONE_FILL_COLOR = (255, 0, 0, 26)
CROSSHAIR_COLOR = (0, 255, 0, 128)


def to_rgba255(color: Color) -> tuple[int, int, int, int]:
    """Convert an RGBA color in [0, 1] to arcade's 0-255 components."""
    return tuple(max(0, min(255, round(c * 255))) for c in color)  # type: ignore[return-value]


class ArcadeRenderer:
    """Renderer backed by arcade cameras and draw calls.

    Attributes:
        camera: Camera2D that receives the world transform.
        screen_camera: Camera2D activated when the transform is popped. When
            None a default Camera2D is created on each pop.
    """

    def __init__(
        self,
        camera: arcade.camera.Camera2D | None = None,
        screen_camera: arcade.camera.Camera2D | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            camera: World camera. Created on first use when None (requires an
                open window).
            screen_camera: Screen-space camera restored by pop_transform().
        """
        self.camera = camera
        self.screen_camera = screen_camera
        self._depth = 0

    def push_transform(self, transform: ViewTransform) -> None:
        """Position the world camera from the transform and activate it."""
        if self.camera is None:
            self.camera = arcade.camera.Camera2D()
        self.camera.position = (-transform.offset_x, -transform.offset_y)
        self.camera.zoom = transform.scale
        # Camera2D turns its view counter-clockwise by angle
        self.camera.angle = math.degrees(transform.rotation)
        self.camera.use()
        self._depth += 1

    def pop_transform(self) -> None:
        """Switch back to screen space."""
        if self._depth == 0:
            logger.warning("pop_transform() called without a matching push_transform()")
            return
        self._depth -= 1
        screen_camera = self.screen_camera if self.screen_camera is not None else arcade.camera.Camera2D()
        screen_camera.use()

    def draw_overlay(self, overlay: FlashOverlay) -> None:
        """Fill the viewport with the flash color."""
        arcade.draw_lrbt_rectangle_filled(0, overlay.width, 0, overlay.height, to_rgba255(overlay.color))

    def draw_debug(self, overlay: DebugOverlay) -> None:
        """Draw the deadzone rectangle and the camera crosshair."""
        if overlay.deadzone is not None:
            x, y, w, h = overlay.deadzone
            arcade.draw_lrbt_rectangle_outline(x, x + w, y, y + h, DEADZONE_OUTLINE_COLOR)
            arcade.draw_lrbt_rectangle_filled(x, x + w, y, y + h, DEADZONE_FILL_COLOR)
        for (x1, y1), (x2, y2) in overlay.lines:
            arcade.draw_line(x1, y1, x2, y2, CROSSHAIR_COLOR)


class ArcadePointer:
    """Pointer source fed by arcade mouse events.

    Call on_mouse_motion() from the window's handler; the instance itself is
    the callable a Camera expects as its pointer.
    """

    def __init__(self) -> None:
        """Start at the screen origin."""
        self.x = 0.0
        self.y = 0.0

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float) -> None:  # noqa: ARG002
        """Record the pointer position."""
        self.x = x
        self.y = y

    def __call__(self) -> tuple[float, float]:
        """Return the last recorded pointer position."""
        return self.x, self.y
