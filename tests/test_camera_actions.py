"""Unit tests for camera actions."""

import math
import unittest
from unittest.mock import MagicMock

import pytest

from lente.actions import ActionRegistry, ActionSequence
from lente.camera import Camera
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
    _InstantAction,
)


class TestShakeAction(unittest.TestCase):
    """Test ShakeAction."""

    def test_execute_starts_shake(self) -> None:
        """Test that action starts a shake on the camera."""
        action = ShakeAction(0.5, intensity=8, frequency=30, axes="x")
        camera = MagicMock()

        result = action.execute(camera)

        assert result is True
        camera.shake.assert_called_once_with(0.5, 8, 30, "x")

    def test_execute_only_once(self) -> None:
        """Test repeated execution does not queue another shake."""
        action = ShakeAction(0.5)
        camera = MagicMock()

        action.execute(camera)
        action.execute(camera)

        camera.shake.assert_called_once_with(0.5, None, None, "xy")

    def test_from_dict(self) -> None:
        """Test creating action from dictionary."""
        action = ShakeAction.from_dict({"duration": 1, "intensity": 10, "frequency": 100, "axes": "y"})

        assert action.duration == 1
        assert action.intensity == 10
        assert action.frequency == 100
        assert action.axes == "y"

    def test_from_dict_defaults(self) -> None:
        """Test defaults when creating from dict."""
        action = ShakeAction.from_dict({})

        assert action.duration == 0.5
        assert action.intensity is None
        assert action.frequency is None
        assert action.axes == "xy"

    def test_reset(self) -> None:
        """Test reset clears executed flag."""
        action = ShakeAction(0.5)
        action.execute(MagicMock())
        assert action.executed is True

        action.reset()
        assert action.executed is False


class TestSpringShakeAction(unittest.TestCase):
    """Test SpringShakeAction."""

    def test_execute_converts_degrees(self) -> None:
        """Test the angle is passed on in radians."""
        action = SpringShakeAction(90, 50, damp=5)
        camera = MagicMock()

        action.execute(camera)

        angle, force, damp, tension = camera.spring_shake.call_args[0]
        assert angle == pytest.approx(math.pi / 2)
        assert (force, damp, tension) == (50, 5, None)

    def test_from_dict(self) -> None:
        """Test creating action from dictionary."""
        action = SpringShakeAction.from_dict({"angle": 45, "force": 20, "tension": 300})

        assert action.angle == 45
        assert action.force == 20
        assert action.damp is None
        assert action.tension == 300


class TestFlashAction(unittest.TestCase):
    """Test FlashAction."""

    def test_execute_with_color(self) -> None:
        """Test the color is applied before the flash starts."""
        action = FlashAction(0.25, color=[1, 0, 0, 1])
        camera = MagicMock()

        action.execute(camera)

        camera.set_flash_color.assert_called_once_with([1, 0, 0, 1])
        camera.flash.assert_called_once_with(0.25)

    def test_execute_without_color(self) -> None:
        """Test the current color is kept when none is given."""
        action = FlashAction(0.25)
        camera = MagicMock()

        action.execute(camera)

        camera.set_flash_color.assert_not_called()
        camera.flash.assert_called_once_with(0.25)

    def test_from_dict_defaults(self) -> None:
        """Test defaults when creating from dict."""
        action = FlashAction.from_dict({})

        assert action.duration == 0.2
        assert action.color is None


class TestSimpleCameraActions(unittest.TestCase):
    """Test actions that forward a single setting."""

    def test_follow_style(self) -> None:
        """Test FollowStyleAction applies the preset."""
        camera = MagicMock()
        FollowStyleAction.from_dict({"style": "wide"}).execute(camera)

        camera.set_follow_style.assert_called_once_with("wide")

    def test_follow_position(self) -> None:
        """Test FollowPositionAction points the camera at a position."""
        camera = MagicMock()
        FollowPositionAction.from_dict({"x": 512, "y": 384}).execute(camera)

        camera.follow.assert_called_once_with(512, 384)

    def test_zoom(self) -> None:
        """Test ZoomAction sets the zoom."""
        camera = MagicMock()
        ZoomAction.from_dict({"scale": 2}).execute(camera)

        camera.set_zoom.assert_called_once_with(2)

    def test_rotate(self) -> None:
        """Test RotateAction sets the rotation in degrees."""
        camera = MagicMock()
        RotateAction.from_dict({"degrees": 15}).execute(camera)

        camera.set_rotation.assert_called_once_with(15)

    def test_instant_action_requires_apply(self) -> None:
        """Test an instant action without apply() cannot be created."""

        class NoOpAction(_InstantAction):
            pass

        with pytest.raises(TypeError):
            NoOpAction()  # type: ignore[abstract]


class TestWaitActions(unittest.TestCase):
    """Test waiting actions against a real camera."""

    def test_wait_for_shake(self) -> None:
        """Test the wait holds until every shake has been dropped."""
        now = [0.0]
        camera = Camera(320, 180, clock=lambda: now[0])
        action = WaitForShakeAction()

        assert action.execute(camera) is True

        camera.shake(0.1)
        assert action.execute(camera) is False

        now[0] = 200.0
        camera.update(0.2)
        assert action.execute(camera) is True

    def test_wait_for_flash(self) -> None:
        """Test the wait holds until the flash timer runs out."""
        camera = Camera(320, 180)
        camera.flash(0.5)
        action = WaitForFlashAction.from_dict({})

        assert action.execute(camera) is False
        camera.update(0.6)
        assert action.execute(camera) is True


class TestActionRegistry(unittest.TestCase):
    """Test building actions from dictionaries."""

    def test_camera_actions_registered(self) -> None:
        """Test every camera action type is registered."""
        for name in (
            "shake",
            "spring_shake",
            "flash",
            "follow_style",
            "follow_position",
            "zoom",
            "rotate",
            "wait_for_shake",
            "wait_for_flash",
            "sequence",
        ):
            assert ActionRegistry.is_registered(name)

    def test_create(self) -> None:
        """Test create() dispatches on the type key."""
        action = ActionRegistry.create({"type": "flash", "duration": 0.5})

        assert isinstance(action, FlashAction)
        assert action.duration == 0.5

    def test_create_unknown_type(self) -> None:
        """Test unknown or missing types raise ValueError."""
        with pytest.raises(ValueError, match="Unknown action type"):
            ActionRegistry.create({"type": "teleport"})
        with pytest.raises(ValueError, match="Unknown action type"):
            ActionRegistry.create({})

    def test_register_requires_name(self) -> None:
        """Test registering without a name is rejected."""
        with pytest.raises(ValueError, match="must not be empty"):
            ActionRegistry.register("")

    def test_sequence_drives_camera(self) -> None:
        """Test a sequence from data flashes, waits, then zooms."""
        camera = Camera(320, 180)
        sequence = ActionRegistry.create(
            {
                "type": "sequence",
                "actions": [
                    {"type": "flash", "duration": 0.5},
                    {"type": "wait_for_flash"},
                    {"type": "zoom", "scale": 2},
                ],
            }
        )
        assert isinstance(sequence, ActionSequence)

        assert sequence.execute(camera) is False
        assert camera.is_flashing is True
        assert sequence.execute(camera) is False

        camera.update(1.0)
        assert sequence.execute(camera) is False
        assert sequence.execute(camera) is True
        assert camera.get_zoom() == 2

    def test_sequence_reset(self) -> None:
        """Test reset rewinds the sequence and its actions."""
        flash = FlashAction(0.1)
        sequence = ActionSequence([flash])
        sequence.execute(MagicMock())

        sequence.reset()

        assert sequence.current_index == 0
        assert flash.executed is False
