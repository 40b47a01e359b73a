"""2D camera with deadzone following, smoothing, bounds and screen shake.

This module provides the Camera, which turns a moving target into a view
transform once per frame.

Key Features:
    - Deadzone following: the camera only moves when the target leaves a
      rectangle anchored to the camera position
    - Lerp smoothing toward the desired position
    - World bounds that keep the whole viewport inside the map
    - Noise shake per axis and directional spring shake
    - Rotation and zoom, with exact screen-to-world conversion
    - Timed full-screen flash

Update Pipeline:
    update(dt) runs these steps in order, each reading what the previous
    ones produced:
    1. Cache cos/sin of the current angle
    2. Count down the flash timer
    3. Advance noise shakes and the spring, project the spring on its angle
    4. Resolve the target (followed object or explicit position)
    5. Apply the deadzone to get the desired position
    6. Smooth toward it with t = dt ** (1 - lerp), or snap when lerp >= 1
    7. Clamp to bounds
    8. Record the unrounded position, then round to whole pixels

Smoothing Note:
    The blend factor dt ** (1 - lerp) depends on the frame time in a
    non-linear way, so the same lerp feels slightly different at different
    frame rates. lerp = 1 always snaps.

Usage Example:
    camera = Camera(320, 180)
    camera.set_follow_style("platformer")
    camera.set_target(player)

    # Each frame
    camera.update(delta_time)
    with camera.activate(renderer):
        draw_world()
    camera.draw_flash(renderer)

    # Picking
    world_x, world_y = camera.get_mouse_position()
"""

from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from typing import TYPE_CHECKING

from lente.camera.base import (
    Bounds,
    DebugOverlay,
    Deadzone,
    ExplicitTarget,
    FlashOverlay,
    InvalidTargetError,
    ReferenceTarget,
    ViewTransform,
    has_position,
)
from lente.effects.shake import ShakeAggregator, monotonic_ms
from lente.effects.spring import Spring
from lente.types import FollowStyle

if TYPE_CHECKING:
    import random
    from collections.abc import Callable, Iterator, Sequence

    from lente.camera.base import Positioned, Renderer
    from lente.types import Color

logger = logging.getLogger(__name__)

DEBUG_LINE_LENGTH = 1000


def _round(v: float) -> float:
    # Ties round up
    return float(math.floor(v + 0.5))


def _lerp(a: float, b: float, t: float) -> float:
    return a * (1.0 - t) + b * t


class Camera:
    """A 2D camera for one view.

    Positions are the world point shown at the centre of the viewport.

    Attributes:
        x: Camera x, rounded to whole pixels after every update().
        y: Camera y, rounded to whole pixels after every update().
        width: Viewport width in pixels.
        height: Viewport height in pixels.
        scale: Zoom factor.
        angle: Rotation in radians.
        lerp: Smoothing factor in [0, 1]; 1 snaps to the target.
        deadzone: Follow deadzone relative to the camera position.
        bounds: World bounds, or None when unbounded.
        shaker: Noise shakes per axis.
        spring: Spring driving the directional shake.
        spring_shake_dir: Spring shake direction in radians.
        flash_timer: Seconds of flash left; zero or less means no flash.
        flash_duration: Length of the current flash in seconds.
        flash_color: RGBA flash color in [0, 1].
        target_x: Target x resolved by the last update() or follow().
        target_y: Target y resolved by the last update() or follow().
        last_x: Unrounded x of the last update().
        last_y: Unrounded y of the last update().
    """

    def __init__(
        self,
        width: float,
        height: float,
        *,
        lerp: float = 1.0,
        spring_damp: float = 20.0,
        spring_tension: float = 500.0,
        shake_intensity: float = 5.0,
        shake_frequency: float = 60.0,
        flash_color: Color = (1.0, 1.0, 1.0, 1.0),
        pointer: Callable[[], tuple[float, float]] | None = None,
        clock: Callable[[], float] = monotonic_ms,
        rng: random.Random | None = None,
    ) -> None:
        """Create a camera at the world origin.

        Args:
            width: Viewport width in pixels.
            height: Viewport height in pixels.
            lerp: Initial smoothing factor.
            spring_damp: Damping of the shake spring.
            spring_tension: Tension of the shake spring.
            shake_intensity: Default intensity for shake().
            shake_frequency: Default frequency (Hz) for shake().
            flash_color: Initial flash color.
            pointer: Callable returning the pointer position in screen
                coordinates, used by get_mouse_position().
            clock: Millisecond clock for noise shakes.
            rng: Random source for noise shakes.
        """
        self.width = width
        self.height = height
        self.x = 0.0
        self.y = 0.0
        self.scale = 1.0
        self.angle = 0.0
        self.cos_angle = 1.0
        self.sin_angle = 0.0

        self.lerp = lerp
        self.deadzone = Deadzone()
        self.bounds: Bounds | None = None

        self._target: ExplicitTarget | ReferenceTarget = ExplicitTarget(self.x, self.y)
        self.target_x = self.x
        self.target_y = self.y
        self.last_target_x = self.target_x
        self.last_target_y = self.target_y
        self.last_x = self.x
        self.last_y = self.y

        self.flash_timer = 0.0
        self.flash_duration = 0.0
        self.flash_color: Color = flash_color

        self.shake_intensity = shake_intensity
        self.shake_frequency = shake_frequency
        self.shaker = ShakeAggregator(clock=clock, rng=rng)
        self.spring = Spring(tension=spring_tension, damp=spring_damp)
        self.spring_shake_dir = 0.0
        self.spring_shake_x = 0.0
        self.spring_shake_y = 0.0

        self.pointer = pointer

    # Following

    @property
    def target(self) -> Positioned | None:
        """The followed object, or None when following an explicit position."""
        if isinstance(self._target, ReferenceTarget):
            return self._target.obj
        return None

    def set_target(self, target: Positioned) -> None:
        """Follow an object, reading its x and y every frame.

        Clears any position set with follow().

        Raises:
            InvalidTargetError: If the object lacks numeric x and y.
        """
        if not has_position(target):
            msg = f"Camera target {target!r} must expose numeric x and y"
            raise InvalidTargetError(msg)
        self._target = ReferenceTarget(target)
        logger.debug("Camera following object %r", target)

    def follow(self, x: float, y: float) -> None:
        """Follow a fixed position. Clears any object set with set_target()."""
        self._target = ExplicitTarget(x, y)
        self.target_x = x
        self.target_y = y

    def set_deadzone(self, x: float = 0.0, y: float = 0.0, w: float = 0.0, h: float = 0.0) -> None:
        """Set the deadzone rectangle relative to the camera position.

        A rectangle without positive width and height disables the deadzone
        and the camera hard-follows its target.
        """
        self.deadzone = Deadzone(x, y, w, h)

    def set_follow_style(self, style: str | FollowStyle) -> None:
        """Apply a named deadzone preset.

        Args:
            style: "platformer", "side_scroller", "center" or "wide", or a
                FollowStyle. Unknown names and non-string values fall back to
                "center".
        """
        if not isinstance(style, FollowStyle):
            try:
                style = FollowStyle[style.strip().upper()]
            except (KeyError, AttributeError):
                logger.warning("Unknown follow style '%s', using 'center'", style)
                style = FollowStyle.CENTER
        self.set_deadzone(*style.value)
        logger.debug("Camera follow style set to %s", style.name.lower())

    def set_lerp(self, lerp: float) -> None:
        """Set the smoothing factor in [0, 1]."""
        self.lerp = lerp

    def set_bounds(
        self,
        min_x: float | None,
        min_y: float | None,
        max_x: float | None,
        max_y: float | None,
    ) -> None:
        """Keep the viewport inside a world rectangle.

        Passing None for any value disables bounds.
        """
        if min_x is None or min_y is None or max_x is None or max_y is None:
            self.bounds = None
            return
        self.bounds = Bounds(min_x, min_y, max_x, max_y)

    def set_position(self, x: float | None = None, y: float | None = None) -> None:
        """Move the camera directly, bypassing following, smoothing and bounds."""
        if x is not None:
            self.x = x
        if y is not None:
            self.y = y

    def get_position(self) -> tuple[float, float]:
        """Return the camera position."""
        return self.x, self.y

    # Effects

    def flash(self, duration: float) -> None:
        """Start a flash lasting duration seconds."""
        self.flash_timer = duration
        self.flash_duration = duration

    @property
    def is_flashing(self) -> bool:
        """Whether a flash is still running."""
        return self.flash_timer > 0

    def set_flash_color(
        self,
        r: float | Sequence[float],
        g: float | None = None,
        b: float | None = None,
        a: float | None = None,
    ) -> None:
        """Set the flash color from components or an RGB(A) sequence in [0, 1].

        Components left as None keep their current value.
        """
        if not isinstance(r, (int, float)):
            components = tuple(r)
            if len(components) == 3:  # noqa: PLR2004
                components = (*components, 1.0)
            if len(components) != 4:  # noqa: PLR2004
                logger.warning("Ignoring flash color with %d components", len(components))
                return
            self.flash_color = components
            return

        current = self.flash_color
        self.flash_color = (
            r,
            current[1] if g is None else g,
            current[2] if b is None else b,
            current[3] if a is None else a,
        )

    def shake(
        self,
        duration: float,
        intensity: float | None = None,
        frequency: float | None = None,
        axes: str = "xy",
    ) -> None:
        """Start a noise shake.

        Args:
            duration: Duration in seconds.
            intensity: Peak displacement, defaults to the camera's
                shake_intensity.
            frequency: Noise frequency in Hz, defaults to the camera's
                shake_frequency.
            axes: "x", "y" or "xy".
        """
        if intensity is None:
            intensity = self.shake_intensity
        if frequency is None:
            frequency = self.shake_frequency
        self.shaker.shake(intensity, duration, frequency, axes)

    def spring_shake(
        self,
        angle: float,
        force: float,
        damp: float | None = None,
        tension: float | None = None,
    ) -> None:
        """Kick the camera along angle (radians) with a damped spring."""
        self.spring_shake_dir = angle
        self.spring.pull(force, damp, tension)

    def get_shake_offset(self) -> tuple[float, float]:
        """Return the total noise plus spring shake offset."""
        return (
            self.shaker.h_shake + self.spring_shake_x,
            self.shaker.v_shake + self.spring_shake_y,
        )

    # Rotation and zoom

    def set_angle(self, angle: float) -> None:
        """Set the rotation in radians."""
        self.angle = angle

    def get_angle(self) -> float:
        """Return the rotation in radians."""
        return self.angle

    def rotate(self, delta: float) -> None:
        """Rotate by delta radians."""
        self.angle += delta

    def set_rotation(self, rotation: float) -> None:
        """Set the rotation in degrees."""
        self.angle = math.radians(rotation)

    def set_zoom(self, scale: float) -> None:
        """Set the zoom factor."""
        self.scale = scale

    def get_zoom(self) -> float:
        """Return the zoom factor."""
        return self.scale

    # Frame update

    def update(self, dt: float) -> None:
        """Advance the camera by dt seconds."""
        self.cos_angle = math.cos(self.angle)
        self.sin_angle = math.sin(self.angle)

        if self.flash_timer > 0:
            self.flash_timer -= dt

        self.shaker.update(dt)
        self.spring.update(dt)
        self.spring_shake_x = self.spring.x * math.cos(self.spring_shake_dir)
        self.spring_shake_y = self.spring.x * math.sin(self.spring_shake_dir)

        tx, ty = self._resolve_target()
        move_x, move_y = self._apply_deadzone(tx, ty)

        if self.lerp < 1:
            t = dt ** (1 - self.lerp)
            self.x = _lerp(self.x, move_x, t)
            self.y = _lerp(self.y, move_y, t)
        else:
            self.x, self.y = move_x, move_y

        if self.bounds is not None:
            self.x, self.y = self.bounds.clamp(self.x, self.y, self.width / 2, self.height / 2)

        self.last_target_x = tx
        self.last_target_y = ty
        self.last_x = self.x
        self.last_y = self.y

        self.x = _round(self.x)
        self.y = _round(self.y)

    def _resolve_target(self) -> tuple[float, float]:
        target = self._target
        if isinstance(target, ReferenceTarget) and not has_position(target.obj):
            # Object lost its coordinates; keep heading for the last known spot
            return self.target_x, self.target_y
        self.target_x, self.target_y = target.position()
        return self.target_x, self.target_y

    def _apply_deadzone(self, tx: float, ty: float) -> tuple[float, float]:
        dz = self.deadzone
        if not dz.enabled:
            return tx, ty

        left = self.x + dz.x
        right = left + dz.w
        top = self.y + dz.y
        bottom = top + dz.h
        move_x, move_y = self.x, self.y

        if tx <= left:
            move_x = tx - dz.x
        if tx >= right:
            move_x = tx - (dz.x + dz.w)
        if ty <= top:
            move_y = ty - dz.y
        if ty >= bottom:
            move_y = ty - (dz.y + dz.h)
        return move_x, move_y

    # Coordinates

    def get_transform(self) -> ViewTransform:
        """Return the world-to-screen transform for the current frame."""
        shake_x, shake_y = self.get_shake_offset()
        return ViewTransform(
            center_x=self.width / 2,
            center_y=self.height / 2,
            rotation=-self.angle,
            scale=self.scale,
            offset_x=-math.floor(self.x + shake_x),
            offset_y=-math.floor(self.y + shake_y),
        )

    def to_world_pos(self, x: float, y: float) -> tuple[float, float]:
        """Convert a screen point to world coordinates.

        Inverse of get_transform(), except that the camera position plus
        shake is used as-is instead of floored. Rotation uses the angle
        cached by the last update(), so after set_angle() the two only agree
        again once update() has run.
        """
        x = (x - self.width / 2) / self.scale
        y = (y - self.height / 2) / self.scale

        rx = self.cos_angle * x - self.sin_angle * y
        ry = self.sin_angle * x + self.cos_angle * y

        shake_x, shake_y = self.get_shake_offset()
        return rx + self.x + shake_x, ry + self.y + shake_y

    def to_screen_pos(self, x: float, y: float) -> tuple[float, float]:
        """Convert a world point to screen coordinates.

        Uses the live angle, like the render transform.
        """
        return self.get_transform().apply(x, y)

    def get_mouse_position(self) -> tuple[float, float]:
        """Return the pointer position in world coordinates.

        Without a pointer source the viewport origin (0, 0) is converted.
        """
        mx, my = self.pointer() if self.pointer is not None else (0.0, 0.0)
        return self.to_world_pos(mx, my)

    # Rendering

    def attach(self, renderer: Renderer) -> None:
        """Push this camera's transform onto the renderer."""
        renderer.push_transform(self.get_transform())

    def detach(self, renderer: Renderer) -> None:
        """Pop the transform pushed by attach()."""
        renderer.pop_transform()

    @contextmanager
    def activate(self, renderer: Renderer) -> Iterator[None]:
        """Attach for the duration of a with block."""
        self.attach(renderer)
        try:
            yield
        finally:
            self.detach(renderer)

    def get_flash_overlay(self) -> FlashOverlay | None:
        """Return the flash overlay to draw this frame, or None."""
        if self.flash_timer <= 0 or self.flash_duration <= 0:
            return None
        alpha = self.flash_timer / self.flash_duration
        r, g, b, a = self.flash_color
        return FlashOverlay(self.width, self.height, (r, g, b, alpha * a))

    def draw_flash(self, renderer: Renderer) -> None:
        """Hand the flash overlay to the renderer while a flash runs."""
        overlay = self.get_flash_overlay()
        if overlay is not None:
            renderer.draw_overlay(overlay)

    def get_debug_overlay(self) -> DebugOverlay:
        """Return the deadzone and crosshair in world space."""
        deadzone = None
        if self.deadzone.enabled:
            dz = self.deadzone
            deadzone = (self.x + dz.x, self.y + dz.y, dz.w, dz.h)
        reach = DEBUG_LINE_LENGTH
        lines = [
            ((self.x - reach, self.y), (self.x + reach, self.y)),
            ((self.x, self.y - reach), (self.x, self.y + reach)),
        ]
        return DebugOverlay(deadzone, lines)

    def draw_debug(self, renderer: Renderer) -> None:
        """Hand the debug overlay to the renderer."""
        renderer.draw_debug(self.get_debug_overlay())
