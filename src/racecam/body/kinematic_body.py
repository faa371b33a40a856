"""
Kinematic body - Minimal tracked chassis for driving a chase camera.

Defines:
- TrackedBody protocol consumed by the camera
- Planar kinematic chassis with speed and yaw-rate commands
- RK4 integration of position and heading
"""

from dataclasses import dataclass, field
from typing import Protocol
import numpy as np

from racecam.camera.frame import Frame


class TrackedBody(Protocol):
    """Read-only view of a body followed by a camera."""

    @property
    def frame(self) -> Frame:
        """Current body frame in world coordinates."""
        ...

    @property
    def driver_frame(self) -> Frame:
        """Driver eye frame relative to the body."""
        ...


@dataclass
class KinematicBodyConfig:
    """Configuration for the kinematic chassis."""
    # Driver eye point (relative to chassis reference, meters)
    driver_eye: tuple[float, float, float] = (0.3, 0.4, 1.1)

    # Command limits
    max_speed_mps: float = 80.0
    max_yaw_rate: float = 1.5  # rad/s


@dataclass
class BodyState:
    """Planar body state."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    heading: float = 0.0      # Yaw angle (0 = +X direction)
    speed: float = 0.0        # Forward speed, m/s
    yaw_rate: float = 0.0     # rad/s


class KinematicBody:
    """Planar kinematic chassis.

    Moves forward along its heading at a commanded speed and turns at a
    commanded yaw rate. Stands in for a full vehicle model when hosting
    a chase camera.

    Usage:
        body = KinematicBody()
        body.set_commands(speed=20.0, yaw_rate=0.2)
        body.step(0.01)
        frame = body.frame
    """

    def __init__(self, config: KinematicBodyConfig | None = None):
        """Initialize body with optional custom configuration.

        Args:
            config: Body configuration. Uses defaults if None.
        """
        self.config = config or KinematicBodyConfig()
        self.state = BodyState()
        self._driver_frame = Frame(position=np.array(self.config.driver_eye, dtype=float))

    @property
    def frame(self) -> Frame:
        """Current body frame in world coordinates."""
        return Frame.from_yaw(
            np.array([self.state.x, self.state.y, self.state.z]),
            self.state.heading,
        )

    @property
    def driver_frame(self) -> Frame:
        """Driver eye frame relative to the body."""
        return self._driver_frame

    def reset(
        self,
        x: float = 0.0,
        y: float = 0.0,
        heading: float = 0.0,
        z: float = 0.0,
    ) -> None:
        """Reset body to rest at given pose.

        Args:
            x: Starting X position
            y: Starting Y position
            heading: Starting heading in radians
            z: Starting height
        """
        self.state = BodyState(x=x, y=y, z=z, heading=heading)

    def set_commands(self, speed: float, yaw_rate: float = 0.0) -> None:
        """Set forward speed and yaw rate, clamped to configured limits.

        Args:
            speed: Forward speed in m/s (negative reverses)
            yaw_rate: Yaw rate in rad/s (positive turns left)
        """
        self.state.speed = float(np.clip(speed, -self.config.max_speed_mps, self.config.max_speed_mps))
        self.state.yaw_rate = float(np.clip(yaw_rate, -self.config.max_yaw_rate, self.config.max_yaw_rate))

    def step(self, dt: float) -> BodyState:
        """Advance body pose by one time step using RK4.

        Args:
            dt: Time step in seconds

        Returns:
            Updated body state
        """
        if dt <= 1e-9:
            return self.state

        speed = self.state.speed
        yaw_rate = self.state.yaw_rate

        def derivatives(pose: np.ndarray) -> np.ndarray:
            heading = pose[2]
            return np.array([
                speed * np.cos(heading),
                speed * np.sin(heading),
                yaw_rate,
            ])

        pose = np.array([self.state.x, self.state.y, self.state.heading])
        k1 = derivatives(pose)
        k2 = derivatives(pose + 0.5 * dt * k1)
        k3 = derivatives(pose + 0.5 * dt * k2)
        k4 = derivatives(pose + dt * k3)
        pose = pose + (dt / 6.0) * (k1 + 2 * k2 + 2 * k3 + k4)

        self.state.x = float(pose[0])
        self.state.y = float(pose[1])
        self.state.heading = float(np.arctan2(np.sin(pose[2]), np.cos(pose[2])))
        return self.state

    def get_state(self) -> dict:
        """Get current body state for telemetry.

        Returns:
            Dictionary containing body state values
        """
        return {
            "x": self.state.x,
            "y": self.state.y,
            "z": self.state.z,
            "heading": self.state.heading,
            "speed_mps": self.state.speed,
            "yaw_rate": self.state.yaw_rate,
        }
