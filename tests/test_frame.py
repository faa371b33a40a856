"""Basic tests for the RaceCam frame helpers."""

import pytest
import numpy as np

from racecam.camera.frame import (
    Frame,
    quat_from_axis_angle,
    quat_multiply,
    quat_rotate,
    wrap_angle,
)


class TestQuaternions:
    """Test quaternion helpers."""

    def test_rotate_about_z(self):
        """Test quarter turn about Z maps X onto Y."""
        q = quat_from_axis_angle(np.array([0.0, 0.0, 1.0]), np.pi / 2)
        v = quat_rotate(q, np.array([1.0, 0.0, 0.0]))

        assert np.allclose(v, [0.0, 1.0, 0.0])

    def test_multiply_composes_rotations(self):
        """Test two quarter turns make a half turn."""
        q = quat_from_axis_angle(np.array([0.0, 0.0, 1.0]), np.pi / 2)
        v = quat_rotate(quat_multiply(q, q), np.array([1.0, 0.0, 0.0]))

        assert np.allclose(v, [-1.0, 0.0, 0.0])

    def test_wrap_angle(self):
        """Test angles wrap into (-pi, pi]."""
        assert wrap_angle(1.5 * np.pi) == pytest.approx(-0.5 * np.pi)
        assert wrap_angle(-np.pi) == pytest.approx(np.pi)
        assert wrap_angle(0.25) == pytest.approx(0.25)


class TestFrame:
    """Test rigid frames."""

    def test_identity(self):
        """Test identity frame leaves points unchanged."""
        frame = Frame.identity()
        point = np.array([1.0, 2.0, 3.0])

        assert np.allclose(frame.point_to_world(point), point)
        assert frame.yaw == 0.0

    def test_yaw_frame(self):
        """Test frame built from yaw reports forward axis and yaw."""
        frame = Frame.from_yaw([1.0, 2.0, 0.0], np.pi / 2)

        assert np.allclose(frame.forward, [0.0, 1.0, 0.0])
        assert frame.yaw == pytest.approx(np.pi / 2)
        assert np.allclose(frame.point_to_world([1.0, 0.0, 0.0]), [1.0, 3.0, 0.0])

    def test_compose(self):
        """Test child frame is expressed in parent coordinates."""
        parent = Frame.from_yaw([1.0, 2.0, 0.0], np.pi / 2)
        child = Frame(position=np.array([1.0, 0.0, 0.5]))

        world = parent.compose(child)

        assert np.allclose(world.position, [1.0, 3.0, 0.5])
        assert np.allclose(world.forward, [0.0, 1.0, 0.0])

    def test_rotation_is_normalized(self):
        """Test rotation quaternion is normalized on construction."""
        frame = Frame(rotation=np.array([2.0, 0.0, 0.0, 0.0]))

        assert np.allclose(frame.rotation, [1.0, 0.0, 0.0, 0.0])

    def test_non_finite_rejected(self):
        """Test non-finite components are rejected."""
        with pytest.raises(ValueError):
            Frame(position=np.array([np.nan, 0.0, 0.0]))
        with pytest.raises(ValueError):
            Frame(rotation=np.array([np.inf, 0.0, 0.0, 0.0]))

    def test_zero_rotation_rejected(self):
        """Test zero quaternion cannot be normalized."""
        with pytest.raises(ValueError):
            Frame(rotation=np.zeros(4))
