"""Shake effects that perturb the camera.

This package provides:
- Spring: Damped oscillator used for directional (spring) shake
- NoiseShakeInstance: One decaying, frequency-sampled noise shake
- ShakeAggregator: Per-axis collection of noise shakes summed each frame
"""

from lente.effects.shake import NoiseShakeInstance, ShakeAggregator
from lente.effects.spring import Spring

__all__ = ["NoiseShakeInstance", "ShakeAggregator", "Spring"]
