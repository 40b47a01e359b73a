"""Helper functions for creating cameras and running the demo.

These functions read the global settings so a project can configure its
camera in settings.py instead of passing every argument by hand.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import arcade
from rich.logging import RichHandler

from lente.camera import Camera
from lente.conf import settings

if TYPE_CHECKING:
    from collections.abc import Callable


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging with rich output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    level = log_level if log_level is not None else settings.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def create_camera(
    width: float | None = None,
    height: float | None = None,
    *,
    pointer: Callable[[], tuple[float, float]] | None = None,
    **kwargs: Any,  # noqa: ANN401
) -> Camera:
    """Create a Camera configured from settings.

    Args:
        width: Viewport width, defaults to settings.SCREEN_WIDTH.
        height: Viewport height, defaults to settings.SCREEN_HEIGHT.
        pointer: Pointer source for get_mouse_position().
        **kwargs: Extra Camera keyword arguments (clock, rng) or overrides of
            the settings-derived ones.

    Returns:
        Camera with lerp, spring, shake, flash and follow style taken from
        settings.

    Example:
        >>> settings.configure(CAMERA_FOLLOW_STYLE="platformer")
        >>> camera = create_camera()
        >>> camera.deadzone.w
        20
    """
    options: dict[str, Any] = {
        "lerp": settings.CAMERA_LERP,
        "spring_damp": settings.CAMERA_SPRING_DAMP,
        "spring_tension": settings.CAMERA_SPRING_TENSION,
        "shake_intensity": settings.CAMERA_SHAKE_INTENSITY,
        "shake_frequency": settings.CAMERA_SHAKE_FREQUENCY,
        "flash_color": tuple(settings.CAMERA_FLASH_COLOR),
    }
    options.update(kwargs)
    camera = Camera(
        width if width is not None else settings.SCREEN_WIDTH,
        height if height is not None else settings.SCREEN_HEIGHT,
        pointer=pointer,
        **options,
    )
    camera.set_follow_style(settings.CAMERA_FOLLOW_STYLE)
    return camera


def run_demo() -> None:
    """Open the interactive demo window and run it until closed.

    Side effects:
        - Configures logging via setup_logging()
        - Creates a DemoWindow
        - Starts arcade.run() (blocks until the window closes)
    """
    from lente.demo import DemoWindow  # noqa: PLC0415

    setup_logging()
    DemoWindow()
    arcade.run()
