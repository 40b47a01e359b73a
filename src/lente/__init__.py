"""lente - a 2D camera controller for arcade games.

This package provides a camera that follows a target through a deadzone,
smooths and bounds its motion, and perturbs the view with noise and spring
shake. It exposes the view transform for a renderer and converts between
screen and world coordinates with rotation and zoom.

Quick start:
    from lente import Camera

    camera = Camera(320, 180)
    camera.set_follow_style("platformer")
    camera.set_target(player)

    # Each frame
    camera.update(delta_time)
    with camera.activate(renderer):
        draw_world()

Alternative usage:
    # Configure the camera in your project's settings.py
    # CAMERA_LERP = 0.5
    # CAMERA_FOLLOW_STYLE = "side_scroller"

    from lente import create_camera

    camera = create_camera()
"""

__version__ = "0.1.0"

from lente.actions import Action, ActionRegistry, ActionSequence
from lente.camera import Camera, InvalidTargetError, ViewTransform
from lente.conf import settings
from lente.effects import NoiseShakeInstance, ShakeAggregator, Spring
from lente.helpers import create_camera, run_demo, setup_logging
from lente.types import FollowStyle

__all__ = [
    "Action",
    "ActionRegistry",
    "ActionSequence",
    "Camera",
    "FollowStyle",
    "InvalidTargetError",
    "NoiseShakeInstance",
    "ShakeAggregator",
    "Spring",
    "ViewTransform",
    "__version__",
    "create_camera",
    "run_demo",
    "settings",
    "setup_logging",
]
