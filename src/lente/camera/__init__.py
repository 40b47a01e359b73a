"""Camera system for following, shaking and transforming the view.

This package provides:
- Camera: Per-view camera with deadzone following, smoothing, bounds,
  shake, flash, rotation and zoom
- Value types shared with renderers (ViewTransform, FlashOverlay,
  DebugOverlay) and the Renderer protocol
- Camera actions that drive the camera from data
"""

from lente.camera.actions import (
    FlashAction,
    FollowPositionAction,
    FollowStyleAction,
    RotateAction,
    ShakeAction,
    SpringShakeAction,
    WaitForFlashAction,
    WaitForShakeAction,
    ZoomAction,
)
from lente.camera.base import (
    Bounds,
    DebugOverlay,
    Deadzone,
    FlashOverlay,
    InvalidTargetError,
    Renderer,
    ViewTransform,
)
from lente.camera.camera import Camera

__all__ = [
    "Bounds",
    "Camera",
    "DebugOverlay",
    "Deadzone",
    "FlashAction",
    "FlashOverlay",
    "FollowPositionAction",
    "FollowStyleAction",
    "InvalidTargetError",
    "Renderer",
    "RotateAction",
    "ShakeAction",
    "SpringShakeAction",
    "ViewTransform",
    "WaitForFlashAction",
    "WaitForShakeAction",
    "ZoomAction",
]
