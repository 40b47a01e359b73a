"""Default settings for lente.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    SCREEN_WIDTH = 640
    SCREEN_HEIGHT = 360
    CAMERA_LERP = 0.5
    CAMERA_FOLLOW_STYLE = "platformer"
"""

# Window settings
SCREEN_WIDTH = 320
"""Width of the camera viewport in pixels."""

SCREEN_HEIGHT = 180
"""Height of the camera viewport in pixels."""

WINDOW_TITLE = "lente"
"""Title displayed in the demo window title bar."""

# Following
CAMERA_LERP = 1.0
"""Smoothing factor in [0, 1]; 1 snaps straight to the target."""

CAMERA_FOLLOW_STYLE = "center"
"""Deadzone preset: platformer, side_scroller, center or wide."""

# Spring shake
CAMERA_SPRING_DAMP = 20.0
"""Damping coefficient of the shake spring."""

CAMERA_SPRING_TENSION = 500.0
"""Tension coefficient of the shake spring."""

# Noise shake
CAMERA_SHAKE_INTENSITY = 5.0
"""Default peak displacement of a noise shake in pixels."""

CAMERA_SHAKE_FREQUENCY = 60.0
"""Default noise frequency of a shake in Hz."""

# Flash
CAMERA_FLASH_COLOR = (1.0, 1.0, 1.0, 1.0)
"""RGBA flash color with components in [0, 1]."""

# Logging
LOG_LEVEL = "INFO"
"""Level passed to setup_logging() by the helpers."""
