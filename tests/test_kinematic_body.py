"""Basic tests for the RaceCam kinematic body."""

import pytest
import numpy as np

from racecam.body.kinematic_body import KinematicBody, KinematicBodyConfig


class TestKinematicBody:
    """Test kinematic chassis."""

    def test_body_at_rest(self):
        """Test body starts at rest at the origin."""
        body = KinematicBody()

        assert body.state.speed == 0.0
        assert np.allclose(body.frame.position, [0.0, 0.0, 0.0])

    def test_straight_line(self):
        """Test constant speed moves along the heading."""
        body = KinematicBody()
        body.reset(heading=np.pi / 2)
        body.set_commands(speed=10.0)

        for _ in range(10):
            body.step(0.1)

        assert body.state.x == pytest.approx(0.0, abs=1e-9)
        assert body.state.y == pytest.approx(10.0)

    def test_full_circle_returns_to_start(self):
        """Test constant yaw rate traces a closed circle."""
        body = KinematicBody()
        body.set_commands(speed=10.0, yaw_rate=0.5)

        dt = 0.01
        steps = int(round(2 * np.pi / 0.5 / dt))
        for _ in range(steps):
            body.step(dt)

        assert np.hypot(body.state.x, body.state.y) < 0.1

    def test_command_limits(self):
        """Test commands are clamped to configured limits."""
        config = KinematicBodyConfig(max_speed_mps=50.0, max_yaw_rate=1.0)
        body = KinematicBody(config)
        body.set_commands(speed=1000.0, yaw_rate=-10.0)

        assert body.state.speed == 50.0
        assert body.state.yaw_rate == -1.0

    def test_frame_follows_heading(self):
        """Test body frame matches position and heading."""
        body = KinematicBody()
        body.reset(x=3.0, y=-1.0, heading=0.7)

        frame = body.frame
        assert np.allclose(frame.position, [3.0, -1.0, 0.0])
        assert frame.yaw == pytest.approx(0.7)

    def test_driver_frame(self):
        """Test driver frame uses the configured eye point."""
        config = KinematicBodyConfig(driver_eye=(0.5, 0.3, 1.2))
        body = KinematicBody(config)

        assert np.allclose(body.driver_frame.position, [0.5, 0.3, 1.2])

    def test_body_state(self):
        """Test body state dictionary."""
        state = KinematicBody().get_state()

        assert "heading" in state
        assert "speed_mps" in state
