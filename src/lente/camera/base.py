"""Value types and collaborator contracts for the camera."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lente.types import Color


class InvalidTargetError(ValueError):
    """Raised when a follow target does not expose numeric x and y."""


class Positioned(Protocol):
    """Anything with numeric x and y attributes, such as a sprite."""

    x: float
    y: float


def has_position(obj: object) -> bool:
    """Check that obj currently exposes numeric x and y attributes."""
    x = getattr(obj, "x", None)
    y = getattr(obj, "y", None)
    # bool is a Real subclass but never a meaningful coordinate
    return all(isinstance(v, Real) and not isinstance(v, bool) for v in (x, y))


@dataclass
class ExplicitTarget:
    """Follow a fixed position set through Camera.follow()."""

    x: float
    y: float

    def position(self) -> tuple[float, float]:
        """Return the target position."""
        return self.x, self.y


@dataclass
class ReferenceTarget:
    """Follow an object, reading its x and y every frame."""

    obj: Positioned

    def position(self) -> tuple[float, float]:
        """Return the object's current position."""
        return self.obj.x, self.obj.y


@dataclass
class Deadzone:
    """Rectangle, relative to the camera position, the target may roam freely.

    The deadzone only takes effect when both w and h are positive.
    """

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    @property
    def enabled(self) -> bool:
        """Whether the deadzone has a positive area."""
        return self.w > 0 and self.h > 0


@dataclass
class Bounds:
    """World rectangle the viewport must stay inside."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def clamp(self, x: float, y: float, half_width: float, half_height: float) -> tuple[float, float]:
        """Clamp a camera centre so the viewport half-extents stay inside."""
        return (
            max(self.min_x + half_width, min(x, self.max_x - half_width)),
            max(self.min_y + half_height, min(y, self.max_y - half_height)),
        )


@dataclass(frozen=True)
class ViewTransform:
    """World-to-screen transform applied by a renderer around a draw batch.

    Composition, applied to a world point in this order:
        1. translate by (offset_x, offset_y)
        2. scale by scale
        3. rotate by rotation (radians)
        4. translate by (center_x, center_y)

    Attributes:
        center_x: Half the viewport width.
        center_y: Half the viewport height.
        rotation: Rotation in radians (the negated camera angle).
        scale: Zoom factor.
        offset_x: Negated, floored camera x including shake.
        offset_y: Negated, floored camera y including shake.
    """

    center_x: float
    center_y: float
    rotation: float
    scale: float
    offset_x: float
    offset_y: float

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Map a world point to screen coordinates."""
        px = (x + self.offset_x) * self.scale
        py = (y + self.offset_y) * self.scale
        cos_r = math.cos(self.rotation)
        sin_r = math.sin(self.rotation)
        return (
            cos_r * px - sin_r * py + self.center_x,
            sin_r * px + cos_r * py + self.center_y,
        )


@dataclass(frozen=True)
class FlashOverlay:
    """Full-viewport rectangle to draw over the frame while a flash runs."""

    width: float
    height: float
    color: Color


@dataclass(frozen=True)
class DebugOverlay:
    """World-space shapes describing the camera state.

    Attributes:
        deadzone: Deadzone rectangle (x, y, w, h) in world space, or None when
            the deadzone is disabled.
        lines: Crosshair through the camera position as pairs of points.
    """

    deadzone: tuple[float, float, float, float] | None
    lines: list[tuple[tuple[float, float], tuple[float, float]]] = field(default_factory=list)


class Renderer(Protocol):
    """Drawing backend the camera hands its transform and overlays to."""

    def push_transform(self, transform: ViewTransform) -> None:
        """Start drawing with the given world transform."""
        ...

    def pop_transform(self) -> None:
        """Restore the transform that was active before push_transform()."""
        ...

    def draw_overlay(self, overlay: FlashOverlay) -> None:
        """Draw a flash overlay in screen space."""
        ...

    def draw_debug(self, overlay: DebugOverlay) -> None:
        """Draw camera debug shapes in world space."""
        ...
