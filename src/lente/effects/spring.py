"""Damped spring used for directional camera shake.

The spring is a one-dimensional damped harmonic oscillator. A pull adds an
impulse to its velocity and every update integrates one explicit Euler step
back toward the rest value, producing a decaying oscillation. The camera
projects the spring value along a direction angle to get its spring-shake
offset.

Integration (target is the rest value, usually 0):
    a = -tension * (x - target) - damp * v
    v = v + a * dt
    x = x + v * dt
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class Spring:
    """One-dimensional damped spring.

    Attributes:
        x: Current value of the spring.
        v: Current velocity.
        target_x: Rest value, fixed at construction.
        damp: Damping coefficient.
        tension: Tension (stiffness) coefficient.
    """

    def __init__(self, x: float = 0.0, tension: float = 500.0, damp: float = 20.0) -> None:
        """Create a spring at rest.

        Args:
            x: Initial and rest value.
            tension: Tension coefficient. With tension and damp both 0 the
                spring keeps its velocity forever.
            damp: Damping coefficient.
        """
        self.x = x
        self.v = 0.0
        self.target_x = x
        self.damp = damp
        self.tension = tension

    def pull(self, force: float, damp: float | None = None, tension: float | None = None) -> None:
        """Apply an impulse, optionally overriding damp and tension.

        Overrides persist for later updates. Only the velocity changes here;
        the value moves on the next update().

        Args:
            force: Impulse strength, scaled by 100 into velocity.
            damp: New damping coefficient, or None to keep the current one.
            tension: New tension coefficient, or None to keep the current one.
        """
        if damp is not None:
            self.damp = damp
        if tension is not None:
            self.tension = tension
        self.v += force * 100
        logger.debug("Spring pulled (force=%s, damp=%s, tension=%s)", force, self.damp, self.tension)

    def update(self, dt: float) -> None:
        """Advance one Euler step of dt seconds."""
        a = -self.tension * (self.x - self.target_x) - self.damp * self.v
        self.v += a * dt
        self.x += self.v * dt
