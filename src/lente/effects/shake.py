"""Noise-based screen shake.

A noise shake is a short burst of band-limited random displacement that
decays linearly to zero. Each shake request becomes one NoiseShakeInstance
per affected axis; the ShakeAggregator owns the instances of both axes and
sums their contributions every frame.

Sampling:
    At creation an instance draws floor(duration_seconds * frequency) random
    samples in [-1, 1] (at least one). The displacement at time t (ms) is
    found by linearly interpolating between the two samples around
    s = t / 1000 * frequency, then multiplied by the base amplitude and the
    decay envelope (duration - t) / duration.

Timing:
    Elapsed time is read from a millisecond clock rather than accumulated
    from dt, so repeated updates within the same instant give the same
    result. Tests inject a fake clock.

Usage Example:
    shaker = ShakeAggregator()
    shaker.shake(intensity=10, duration=0.5, frequency=60, axes="x")

    # Each frame
    shaker.update(delta_time)
    offset_x, offset_y = shaker.h_shake, shaker.v_shake
"""

from __future__ import annotations

import logging
import math
import random
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def monotonic_ms() -> float:
    """Return a monotonic timestamp in milliseconds."""
    return time.monotonic() * 1000


class NoiseShakeInstance:
    """A single timed noise shake on one axis.

    Instances never remove themselves: once elapsed time passes the duration
    `active` turns False and the owner is expected to drop them.

    Attributes:
        amplitude: Peak displacement in world units.
        duration: Length of the shake in milliseconds.
        frequency: Sample rate of the noise in Hz.
        samples: Precomputed random samples in [-1, 1], fixed for the
            instance's lifetime.
        start_time: Clock reading (ms) at creation.
        t: Elapsed milliseconds as of the last update().
        active: Whether the shake is still running.
    """

    def __init__(
        self,
        amplitude: float = 0.0,
        duration: float = 0.0,
        frequency: float = 60.0,
        *,
        clock: Callable[[], float] = monotonic_ms,
        rng: random.Random | None = None,
    ) -> None:
        """Create the shake and draw its samples.

        Args:
            amplitude: Peak displacement.
            duration: Duration in milliseconds. A duration of zero or less
                gives an instance that is inactive from the start.
            frequency: Noise sample rate in Hz.
            clock: Millisecond clock used to measure elapsed time.
            rng: Random source for the samples. Defaults to the module-level
                generator of `random`.
        """
        self.amplitude = amplitude
        self.duration = duration
        self.frequency = frequency
        self._clock = clock
        self.start_time = clock()
        self.t = 0.0
        self.active = duration > 0

        source = rng if rng is not None else random
        sample_count = max(1, math.floor((duration / 1000) * frequency))
        self.samples = [source.uniform(-1.0, 1.0) for _ in range(sample_count)]

    def update(self, dt: float) -> None:  # noqa: ARG002
        """Refresh elapsed time from the clock and expire the shake when done."""
        self.t = self._clock() - self.start_time
        if self.t > self.duration:
            self.active = False

    def noise(self, s: float) -> float:
        """Return the sample at index floor(s), or 0 outside the sample range."""
        if s < 0 or s >= len(self.samples):
            return 0.0
        return self.samples[math.floor(s)]

    def decay(self, t: float) -> float:
        """Linear decay envelope: 1 at t=0, 0 at and after the duration."""
        if self.duration <= 0 or t > self.duration:
            return 0.0
        return (self.duration - t) / self.duration

    def get_amplitude(self, t: float | None = None) -> float:
        """Return the displacement at time t.

        Args:
            t: Time in milliseconds since the shake started. When omitted the
                elapsed time of the last update() is used, and an inactive
                shake returns 0.

        Returns:
            Interpolated noise scaled by amplitude and decay.
        """
        if t is None:
            if not self.active:
                return 0.0
            t = self.t

        s = (t / 1000) * self.frequency
        s0 = math.floor(s)
        s1 = s0 + 1
        n0 = self.noise(s0)
        n1 = self.noise(s1)
        return self.amplitude * (n0 + (s - s0) * (n1 - n0)) * self.decay(t)


class ShakeAggregator:
    """Tracks concurrent noise shakes on the horizontal and vertical axes.

    The offsets `h_shake` and `v_shake` are cached and refreshed only by
    update(), so reading them costs nothing. They are updated incrementally:
    the previous frame's sum is taken out and the current one added in.

    Attributes:
        horizontal_shakes: Active instances on the x axis, in creation order.
        vertical_shakes: Active instances on the y axis, in creation order.
        h_shake: Horizontal offset as of the last update().
        v_shake: Vertical offset as of the last update().
        last_horizontal_amount: Horizontal sum of the previous update().
        last_vertical_amount: Vertical sum of the previous update().
    """

    def __init__(
        self,
        *,
        clock: Callable[[], float] = monotonic_ms,
        rng: random.Random | None = None,
    ) -> None:
        """Create an empty aggregator.

        Args:
            clock: Millisecond clock handed to every new instance.
            rng: Random source handed to every new instance.
        """
        self.clock = clock
        self.rng = rng
        self.horizontal_shakes: list[NoiseShakeInstance] = []
        self.vertical_shakes: list[NoiseShakeInstance] = []
        self.last_horizontal_amount = 0.0
        self.last_vertical_amount = 0.0
        self.h_shake = 0.0
        self.v_shake = 0.0

    @property
    def is_shaking(self) -> bool:
        """Whether any shake is still queued on either axis."""
        return bool(self.horizontal_shakes or self.vertical_shakes)

    def shake(self, intensity: float, duration: float, frequency: float, axes: str = "xy") -> None:
        """Start a shake on the requested axes.

        Args:
            intensity: Peak displacement.
            duration: Duration in seconds.
            frequency: Noise sample rate in Hz.
            axes: Any string containing "x" and/or "y", case-insensitive.
        """
        axes = axes.upper()
        if "X" in axes:
            self.horizontal_shakes.append(self._new_instance(intensity, duration, frequency))
        if "Y" in axes:
            self.vertical_shakes.append(self._new_instance(intensity, duration, frequency))
        logger.debug(
            "Shake queued (intensity=%s, duration=%ss, frequency=%sHz, axes=%s)",
            intensity,
            duration,
            frequency,
            axes,
        )

    def _new_instance(self, intensity: float, duration: float, frequency: float) -> NoiseShakeInstance:
        return NoiseShakeInstance(intensity, duration * 1000, frequency, clock=self.clock, rng=self.rng)

    @staticmethod
    def _step(shakes: list[NoiseShakeInstance], dt: float) -> float:
        # Reverse scan so finished shakes can be removed in place
        amount = 0.0
        for i in range(len(shakes) - 1, -1, -1):
            instance = shakes[i]
            instance.update(dt)
            amount += instance.get_amplitude()
            if not instance.active:
                del shakes[i]
        return amount

    def update(self, dt: float) -> None:
        """Advance every shake and refresh the cached offsets."""
        horizontal_amount = self._step(self.horizontal_shakes, dt)
        vertical_amount = self._step(self.vertical_shakes, dt)

        self.h_shake = self.h_shake - self.last_horizontal_amount + horizontal_amount
        self.v_shake = self.v_shake - self.last_vertical_amount + vertical_amount
        self.last_horizontal_amount = horizontal_amount
        self.last_vertical_amount = vertical_amount

    def clear(self) -> None:
        """Drop every shake. Offsets fall back to 0 on the next update()."""
        dropped = len(self.horizontal_shakes) + len(self.vertical_shakes)
        self.horizontal_shakes.clear()
        self.vertical_shakes.clear()
        logger.debug("Cleared %d shake(s)", dropped)
