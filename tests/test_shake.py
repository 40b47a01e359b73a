"""Unit tests for noise shakes."""

import random
import unittest

import pytest

from lente.effects.shake import NoiseShakeInstance, ShakeAggregator


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class TestNoiseShakeInstance(unittest.TestCase):
    """Test a single noise shake."""

    def setUp(self) -> None:
        """Create a deterministic clock and random source."""
        self.clock = FakeClock()
        self.rng = random.Random(1234)

    def make(self, amplitude: float = 10.0, duration: float = 1000.0, frequency: float = 60.0) -> NoiseShakeInstance:
        """Create an instance bound to the test clock."""
        return NoiseShakeInstance(amplitude, duration, frequency, clock=self.clock, rng=self.rng)

    def test_sample_count(self) -> None:
        """Test one sample per period of the frequency over the duration."""
        assert len(self.make(duration=1000, frequency=60).samples) == 60
        assert len(self.make(duration=500, frequency=30).samples) == 15

    def test_sample_count_minimum_one(self) -> None:
        """Test very short shakes still get a sample."""
        assert len(self.make(duration=10, frequency=60).samples) == 1

    def test_samples_in_range(self) -> None:
        """Test samples lie in [-1, 1]."""
        instance = self.make()

        assert all(-1.0 <= s <= 1.0 for s in instance.samples)

    def test_samples_fixed_across_updates(self) -> None:
        """Test updating never regenerates samples."""
        instance = self.make()
        samples = list(instance.samples)
        self.clock.advance(100)
        instance.update(0.1)

        assert instance.samples == samples

    def test_amplitude_at_start(self) -> None:
        """Test t=0 gives amplitude * first sample with full decay factor."""
        instance = self.make(amplitude=7)

        assert instance.decay(0) == 1.0
        assert instance.get_amplitude(0) == 7 * instance.samples[0]

    def test_amplitude_zero_after_duration(self) -> None:
        """Test any time past the duration gives 0."""
        instance = self.make()

        for t in (1000.001, 1200, 5000):
            assert instance.get_amplitude(t) == 0

    def test_amplitude_interpolates_and_decays(self) -> None:
        """Test linear interpolation between samples times the decay."""
        instance = self.make(amplitude=4, duration=1000, frequency=10)
        n0, n1 = instance.samples[0], instance.samples[1]

        expected = 4 * (n0 + 0.5 * (n1 - n0)) * (950 / 1000)
        assert instance.get_amplitude(50) == pytest.approx(expected)

    def test_noise_out_of_range(self) -> None:
        """Test indices outside the samples give 0."""
        instance = self.make(duration=100, frequency=20)

        assert instance.noise(len(instance.samples)) == 0
        assert instance.noise(-1) == 0
        assert instance.noise(0) == instance.samples[0]

    def test_update_reads_clock(self) -> None:
        """Test elapsed time comes from the clock, not from dt."""
        instance = self.make()
        self.clock.advance(250)
        instance.update(10.0)

        assert instance.t == 250
        assert instance.active is True

    def test_update_same_instant_is_idempotent(self) -> None:
        """Test repeated updates at the same clock reading agree."""
        instance = self.make()
        self.clock.advance(100)
        instance.update(1 / 60)
        first = instance.get_amplitude()
        instance.update(1 / 60)

        assert instance.get_amplitude() == first

    def test_expires_after_duration(self) -> None:
        """Test the shake deactivates once elapsed time passes the duration."""
        instance = self.make()
        self.clock.advance(1000)
        instance.update(1.0)
        assert instance.active is True

        self.clock.advance(1)
        instance.update(0.001)
        assert instance.active is False
        assert instance.get_amplitude() == 0

    def test_zero_duration_is_inactive(self) -> None:
        """Test a zero-length shake never contributes."""
        instance = self.make(duration=0)

        assert instance.active is False
        assert instance.decay(0) == 0
        assert instance.get_amplitude(0) == 0
        assert instance.get_amplitude() == 0


class TestShakeAggregator(unittest.TestCase):
    """Test the per-axis shake aggregator."""

    def setUp(self) -> None:
        """Create an aggregator with a fake clock."""
        self.clock = FakeClock()
        self.shaker = ShakeAggregator(clock=self.clock, rng=random.Random(42))

    def test_axes_selection(self) -> None:
        """Test shakes are queued on the requested axes only."""
        self.shaker.shake(5, 1, 60, "x")
        self.shaker.shake(5, 1, 60, "Y")
        self.shaker.shake(5, 1, 60)

        assert len(self.shaker.horizontal_shakes) == 2
        assert len(self.shaker.vertical_shakes) == 2

    def test_unknown_axes_queue_nothing(self) -> None:
        """Test an axes string without x or y is a no-op."""
        self.shaker.shake(5, 1, 60, "z")

        assert self.shaker.is_shaking is False

    def test_duration_converted_to_ms(self) -> None:
        """Test durations in seconds become milliseconds on the instance."""
        self.shaker.shake(3, 0.5, 30, "x")
        instance = self.shaker.horizontal_shakes[0]

        assert instance.duration == 500
        assert instance.amplitude == 3
        assert instance.frequency == 30

    def test_x_only_leaves_vertical_still(self) -> None:
        """Test a horizontal shake never moves v_shake."""
        self.shaker.shake(10, 0.5, 60, "x")
        for _ in range(40):
            self.clock.advance(1000 / 60)
            self.shaker.update(1 / 60)
            assert self.shaker.v_shake == 0

    def test_vertical_shake_single_frame(self) -> None:
        """Test one frame of a y shake moves only v_shake, within its envelope."""
        self.shaker.shake(10, 1, 60, "y")
        self.clock.advance(1000 / 60)
        self.shaker.update(1 / 60)

        instance = self.shaker.vertical_shakes[0]
        assert self.shaker.h_shake == 0
        assert self.shaker.v_shake != 0
        assert abs(self.shaker.v_shake) <= 10 * instance.decay(instance.t)

    def test_offsets_sum_instances(self) -> None:
        """Test concurrent shakes on one axis add up."""
        self.shaker.shake(10, 1, 60, "x")
        self.shaker.shake(4, 1, 20, "x")
        self.clock.advance(100)
        self.shaker.update(0.1)

        expected = sum(i.get_amplitude() for i in self.shaker.horizontal_shakes)
        assert self.shaker.h_shake == pytest.approx(expected)

    def test_expired_instances_removed(self) -> None:
        """Test finished shakes are dropped and the offset returns to rest."""
        self.shaker.shake(10, 0.1, 60, "xy")
        self.clock.advance(50)
        self.shaker.update(0.05)
        assert self.shaker.is_shaking is True

        self.clock.advance(100)
        self.shaker.update(0.1)

        assert self.shaker.horizontal_shakes == []
        assert self.shaker.vertical_shakes == []
        assert self.shaker.h_shake == pytest.approx(0, abs=1e-9)
        assert self.shaker.v_shake == pytest.approx(0, abs=1e-9)

    def test_removal_keeps_remaining_order(self) -> None:
        """Test removing a finished shake keeps the others in creation order."""
        self.shaker.shake(1, 0.1, 60, "x")
        self.shaker.shake(2, 1, 60, "x")
        self.shaker.shake(3, 1, 60, "x")
        self.clock.advance(200)
        self.shaker.update(0.2)

        assert [i.amplitude for i in self.shaker.horizontal_shakes] == [2, 3]

    def test_clear(self) -> None:
        """Test clear drops all shakes and offsets settle on the next update."""
        self.shaker.shake(10, 1, 60)
        self.clock.advance(30)
        self.shaker.update(0.03)
        self.shaker.clear()
        self.shaker.update(0.0)

        assert self.shaker.is_shaking is False
        assert self.shaker.h_shake == pytest.approx(0, abs=1e-9)
        assert self.shaker.v_shake == pytest.approx(0, abs=1e-9)
