"""Custom types and enumerations."""

from enum import Enum

Color = tuple[float, float, float, float]
"""RGBA color with components in [0, 1]."""


class FollowStyle(Enum):
    """Named deadzone presets for Camera.set_follow_style().

    Values are (x, y, w, h) deadzone rectangles relative to the camera
    position.
    """

    PLATFORMER = (-10, -10, 20, 20)
    SIDE_SCROLLER = (-20, -30, 20, 60)
    CENTER = (0, 0, 0, 0)
    WIDE = (-100, -50, 200, 100)
