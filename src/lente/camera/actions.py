"""Actions for the camera.

These actions let scripts and data files trigger camera effects without
touching the Camera API directly. Every action is registered under a type
name and can be built with ActionRegistry.create().

Example script:
    [
        {"type": "flash", "duration": 0.3},
        {"type": "shake", "duration": 1, "intensity": 10, "frequency": 100, "axes": "y"},
        {"type": "wait_for_shake"},
        {"type": "follow_style", "style": "platformer"}
    ]
"""

from __future__ import annotations

import logging
import math
from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Self

from lente.actions import Action, ActionRegistry, WaitForConditionAction

if TYPE_CHECKING:
    from lente.camera.camera import Camera

logger = logging.getLogger(__name__)


class _InstantAction(Action):
    """Action that applies once and completes immediately."""

    def __init__(self) -> None:
        self.executed = False

    def execute(self, camera: Camera) -> bool:
        """Apply the action on first execution."""
        if not self.executed:
            self.apply(camera)
            self.executed = True
        return True

    @abstractmethod
    def apply(self, camera: Camera) -> None:
        """Change the camera."""

    def reset(self) -> None:
        """Reset the action."""
        self.executed = False


@ActionRegistry.register("shake")
class ShakeAction(_InstantAction):
    """Start a noise shake.

    Intensity and frequency left out use the camera's defaults.

    Example usage:
        {
            "type": "shake",
            "duration": 0.5,
            "intensity": 8,
            "axes": "x"
        }
    """

    def __init__(
        self,
        duration: float,
        intensity: float | None = None,
        frequency: float | None = None,
        axes: str = "xy",
    ) -> None:
        """Initialize shake action.

        Args:
            duration: Shake duration in seconds.
            intensity: Peak displacement, or None for the camera default.
            frequency: Noise frequency in Hz, or None for the camera default.
            axes: "x", "y" or "xy".
        """
        super().__init__()
        self.duration = duration
        self.intensity = intensity
        self.frequency = frequency
        self.axes = axes

    def apply(self, camera: Camera) -> None:
        """Start the shake."""
        camera.shake(self.duration, self.intensity, self.frequency, self.axes)
        logger.debug("ShakeAction: Shaking %s for %ss", self.axes, self.duration)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create ShakeAction from a dictionary."""
        return cls(
            duration=data.get("duration", 0.5),
            intensity=data.get("intensity"),
            frequency=data.get("frequency"),
            axes=data.get("axes", "xy"),
        )


@ActionRegistry.register("spring_shake")
class SpringShakeAction(_InstantAction):
    """Kick the camera in a direction.

    The angle is given in degrees, matching how directions are usually
    written in data files.

    Example usage:
        {
            "type": "spring_shake",
            "angle": 90,
            "force": 50
        }
    """

    def __init__(
        self,
        angle: float,
        force: float,
        damp: float | None = None,
        tension: float | None = None,
    ) -> None:
        """Initialize spring shake action.

        Args:
            angle: Kick direction in degrees.
            force: Impulse strength.
            damp: Optional spring damping override.
            tension: Optional spring tension override.
        """
        super().__init__()
        self.angle = angle
        self.force = force
        self.damp = damp
        self.tension = tension

    def apply(self, camera: Camera) -> None:
        """Pull the camera spring."""
        camera.spring_shake(math.radians(self.angle), self.force, self.damp, self.tension)
        logger.debug("SpringShakeAction: Kick at %s degrees (force=%s)", self.angle, self.force)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create SpringShakeAction from a dictionary."""
        return cls(
            angle=data.get("angle", 0.0),
            force=data.get("force", 10.0),
            damp=data.get("damp"),
            tension=data.get("tension"),
        )


@ActionRegistry.register("flash")
class FlashAction(_InstantAction):
    """Flash the screen, optionally changing the flash color first.

    Example usage:
        {
            "type": "flash",
            "duration": 0.25,
            "color": [1, 0, 0, 1]
        }
    """

    def __init__(self, duration: float, color: list[float] | None = None) -> None:
        """Initialize flash action.

        Args:
            duration: Flash duration in seconds.
            color: RGB or RGBA components in [0, 1], or None to keep the
                current color.
        """
        super().__init__()
        self.duration = duration
        self.color = color

    def apply(self, camera: Camera) -> None:
        """Start the flash."""
        if self.color is not None:
            camera.set_flash_color(self.color)
        camera.flash(self.duration)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create FlashAction from a dictionary."""
        return cls(duration=data.get("duration", 0.2), color=data.get("color"))


@ActionRegistry.register("follow_style")
class FollowStyleAction(_InstantAction):
    """Switch the deadzone preset.

    Example usage:
        {
            "type": "follow_style",
            "style": "side_scroller"
        }
    """

    def __init__(self, style: str) -> None:
        """Initialize follow style action.

        Args:
            style: Preset name (platformer, side_scroller, center, wide).
        """
        super().__init__()
        self.style = style

    def apply(self, camera: Camera) -> None:
        """Apply the preset."""
        camera.set_follow_style(self.style)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create FollowStyleAction from a dictionary."""
        return cls(style=data.get("style", "center"))


@ActionRegistry.register("follow_position")
class FollowPositionAction(_InstantAction):
    """Point the camera at a fixed world position.

    Example usage:
        {
            "type": "follow_position",
            "x": 512,
            "y": 384
        }
    """

    def __init__(self, x: float, y: float) -> None:
        """Initialize follow position action."""
        super().__init__()
        self.x = x
        self.y = y

    def apply(self, camera: Camera) -> None:
        """Follow the position."""
        camera.follow(self.x, self.y)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create FollowPositionAction from a dictionary."""
        return cls(x=data.get("x", 0.0), y=data.get("y", 0.0))


@ActionRegistry.register("zoom")
class ZoomAction(_InstantAction):
    """Set the camera zoom.

    Example usage:
        {"type": "zoom", "scale": 2}
    """

    def __init__(self, scale: float) -> None:
        """Initialize zoom action."""
        super().__init__()
        self.scale = scale

    def apply(self, camera: Camera) -> None:
        """Set the zoom."""
        camera.set_zoom(self.scale)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create ZoomAction from a dictionary."""
        return cls(scale=data.get("scale", 1.0))


@ActionRegistry.register("rotate")
class RotateAction(_InstantAction):
    """Set the camera rotation in degrees.

    Example usage:
        {"type": "rotate", "degrees": 15}
    """

    def __init__(self, degrees: float) -> None:
        """Initialize rotate action."""
        super().__init__()
        self.degrees = degrees

    def apply(self, camera: Camera) -> None:
        """Set the rotation."""
        camera.set_rotation(self.degrees)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create RotateAction from a dictionary."""
        return cls(degrees=data.get("degrees", 0.0))


@ActionRegistry.register("wait_for_shake")
class WaitForShakeAction(WaitForConditionAction):
    """Wait until every noise shake has finished.

    Example usage:
        {"type": "wait_for_shake"}
    """

    def __init__(self) -> None:
        """Initialize shake wait action."""
        super().__init__(lambda camera: not camera.shaker.is_shaking, "Camera shake finished")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:  # noqa: ARG003
        """Create WaitForShakeAction from a dictionary."""
        return cls()


@ActionRegistry.register("wait_for_flash")
class WaitForFlashAction(WaitForConditionAction):
    """Wait until the current flash has faded out.

    Example usage:
        {"type": "wait_for_flash"}
    """

    def __init__(self) -> None:
        """Initialize flash wait action."""
        super().__init__(lambda camera: not camera.is_flashing, "Camera flash finished")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:  # noqa: ARG003
        """Create WaitForFlashAction from a dictionary."""
        return cls()
