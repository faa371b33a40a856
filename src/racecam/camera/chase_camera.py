"""
Chase camera - Smoothed camera tracking a moving vehicle chassis.

Provides:
- Four tracking modes (Chase, Follow, Track, Inside)
- Exponentially smoothed camera location with separate
  horizontal and vertical response
- Operator zoom and orbit commands
- Exact-time integration: closed-form relaxation, sub-stepped in Follow mode
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple
import logging
import numpy as np

from racecam.body.kinematic_body import TrackedBody
from racecam.camera.frame import Frame, wrap_angle
from racecam.camera.modes import CameraMode

logger = logging.getLogger(__name__)


@dataclass
class ChaseCameraConfig:
    """Chase camera tuning parameters.

    Gains are inverse time constants in 1/s. Default values give a
    soft trailing camera that settles within a couple of seconds.
    """
    # Integration
    max_substep: float = 0.01        # Largest smoothing sub-step (s)

    # Smoothing response
    horizontal_gain: float = 4.0     # Ground-plane location response
    vertical_gain: float = 2.0       # Height response
    follow_yaw_gain: float = 2.0     # Heading response in Follow mode

    # Operator commands
    zoom_factor: float = 1.01        # Distance scale per zoom unit
    min_zoom: float = 0.5            # Smallest fraction of nominal distance
    turn_increment: float = np.pi / 100  # Orbit angle per turn unit (rad)

    def __post_init__(self):
        """Validate tuning values."""
        positive = {
            "max_substep": self.max_substep,
            "horizontal_gain": self.horizontal_gain,
            "vertical_gain": self.vertical_gain,
            "follow_yaw_gain": self.follow_yaw_gain,
            "turn_increment": self.turn_increment,
        }
        for name, value in positive.items():
            if not np.isfinite(value) or value <= 0.0:
                raise ValueError(f"{name} must be positive and finite, got {value}")
        if not np.isfinite(self.zoom_factor) or self.zoom_factor <= 1.0:
            raise ValueError(f"zoom_factor must be greater than 1, got {self.zoom_factor}")
        if not 0.0 < self.min_zoom <= 1.0:
            raise ValueError(f"min_zoom must be in (0, 1], got {self.min_zoom}")


class ChaseCamera:
    """Chase camera controller for a tracked vehicle body.

    The camera location lags the ideal (raw) location implied by the
    body frame and the active mode. The look-at target is the anchor
    point on the body, except in Inside mode where the camera looks
    forward from the driver eye point.

    Z is up. Zoom and turn commands accumulate intent that is consumed
    by the next update.

    Usage:
        camera = ChaseCamera(body)
        camera.initialize(np.array([0.0, 0.0, 1.0]), Frame.identity(), 6.0, 0.5)

        camera.turn(1)
        camera.update(0.02)
        position, target = camera.camera_position, camera.target_position
    """

    def __init__(self, body: TrackedBody, config: ChaseCameraConfig | None = None):
        """Initialize camera bound to a tracked body.

        Args:
            body: Body to follow. Its frame is only read, never modified.
            config: Tuning parameters. Uses defaults if None.
        """
        self.config = config or ChaseCameraConfig()
        self.body = body

        self._mode = CameraMode.CHASE
        self._initialized: bool = False

        # Session parameters
        self._anchor_offset = np.zeros(3)
        self._driver_frame = Frame.identity()
        self._nominal_distance: float = 0.0
        self._nominal_height: float = 0.0

        # Smoothed state
        self._location = np.zeros(3)
        self._yaw: float = 0.0
        self._track_location = np.zeros(3)

        # Operator state
        self._zoom: float = 1.0
        self._angle: float = 0.0
        self._zoom_intent: int = 0
        self._turn_intent: int = 0

        # Outputs
        self._camera_pos = np.zeros(3)
        self._target_pos = np.zeros(3)
        self._time: float = 0.0

    @property
    def is_initialized(self) -> bool:
        """Whether initialize() has been called."""
        return self._initialized

    @property
    def mode(self) -> CameraMode:
        """Active tracking mode."""
        return self._mode

    @property
    def state_name(self) -> str:
        """Human-readable name of the active mode."""
        return self._mode.label

    @property
    def camera_position(self) -> np.ndarray:
        """Camera location in world coordinates."""
        self._require_initialized()
        return self._camera_pos.copy()

    @property
    def target_position(self) -> np.ndarray:
        """Look-at point in world coordinates."""
        self._require_initialized()
        return self._target_pos.copy()

    @property
    def anchor_offset(self) -> np.ndarray:
        """Anchor point in the body frame."""
        return self._anchor_offset.copy()

    @property
    def distance(self) -> float:
        """Effective chase distance including operator zoom."""
        return self._zoom * self._nominal_distance

    @property
    def height(self) -> float:
        """Effective chase height including operator zoom."""
        return self._zoom * self._nominal_height

    @property
    def min_distance(self) -> float:
        """Smallest chase distance reachable by zooming in."""
        return self.config.min_zoom * self._nominal_distance

    @property
    def orbit_angle(self) -> float:
        """Operator orbit angle around the body in radians, in (-pi, pi]."""
        return self._angle

    @property
    def zoom_intent(self) -> int:
        """Pending zoom units (positive zooms in)."""
        return self._zoom_intent

    @property
    def turn_intent(self) -> int:
        """Pending turn units."""
        return self._turn_intent

    @property
    def time(self) -> float:
        """Total time advanced by update()."""
        return self._time

    def initialize(
        self,
        anchor_offset: np.ndarray,
        driver_frame: Frame,
        distance: float,
        height: float,
    ) -> None:
        """Set session parameters and reset the smoothed state.

        The camera is placed directly at its Chase location for the
        current body frame, so outputs are valid immediately.

        Args:
            anchor_offset: Point on the body (local frame) to look at
            driver_frame: Driver eye frame relative to the body
            distance: Nominal chase distance in meters
            height: Nominal height above the anchor in meters
        """
        anchor = np.asarray(anchor_offset, dtype=float).reshape(3)
        if not np.all(np.isfinite(anchor)):
            raise ValueError(f"Anchor offset must be finite, got {anchor}")
        if not driver_frame.is_finite():
            raise ValueError("Driver frame must be finite")
        if not np.isfinite(distance) or distance <= 0.0:
            raise ValueError(f"Chase distance must be positive, got {distance}")
        if not np.isfinite(height):
            raise ValueError(f"Chase height must be finite, got {height}")

        self._anchor_offset = anchor
        self._driver_frame = driver_frame
        self._nominal_distance = float(distance)
        self._nominal_height = float(height)

        self._zoom = 1.0
        self._angle = 0.0
        self._zoom_intent = 0
        self._turn_intent = 0

        body_frame = self._sample_body_frame()
        self._yaw = body_frame.yaw
        anchor_world = body_frame.point_to_world(self._anchor_offset)
        self._location = self._chase_location(anchor_world, self._yaw)
        self._track_location = self._location.copy()
        self._initialized = True

        self._refresh_outputs(body_frame, anchor_world)

        logger.info(
            "Chase camera initialized: distance=%.2f height=%.2f mode=%s",
            self._nominal_distance, self._nominal_height, self.state_name,
        )

    def set_mode(self, mode: CameraMode) -> None:
        """Switch tracking mode.

        Entering Track freezes the camera at its current location.

        Args:
            mode: New tracking mode
        """
        mode = CameraMode(mode)
        if mode is CameraMode.TRACK and self._initialized:
            self._track_location = self._location.copy()
        if mode is not self._mode:
            logger.debug("Camera mode %s -> %s", self._mode.label, mode.label)
        self._mode = mode

    def zoom(self, direction: int) -> None:
        """Queue one zoom unit.

        Args:
            direction: +1 to zoom in (closer), -1 to zoom out
        """
        self._zoom_intent += self._unit(direction, "Zoom")

    def turn(self, direction: int) -> None:
        """Queue one orbit unit.

        Args:
            direction: +1 to orbit counter-clockwise, -1 clockwise
        """
        self._turn_intent += self._unit(direction, "Turn")

    def update(self, step: float) -> Tuple[np.ndarray, np.ndarray]:
        """Advance the camera dynamics by step seconds.

        The body frame is sampled once at the start of the call. In Follow
        mode the step is split into equal sub-steps no longer than
        max_substep. The other modes relax toward a raw location that is
        fixed for the whole call, so the relaxation is applied in closed
        form over the full step.

        Args:
            step: Elapsed time in seconds

        Returns:
            Tuple of (camera_position, target_position)
        """
        self._require_initialized()
        if not np.isfinite(step) or step < 0.0:
            raise ValueError(f"Update step must be finite and non-negative, got {step}")
        if step == 0.0:
            return self.camera_position, self.target_position

        body_frame = self._sample_body_frame()
        anchor_world = body_frame.point_to_world(self._anchor_offset)
        body_yaw = body_frame.yaw

        self._consume_intent()

        if self._mode is CameraMode.FOLLOW:
            self._integrate_follow(step, body_frame, anchor_world, body_yaw)
        else:
            self._yaw = body_yaw
            raw = self._raw_location(body_frame, anchor_world)
            if self._mode is CameraMode.INSIDE:
                self._location = raw
            else:
                self._relax(raw, step)

        self._time += step
        self._refresh_outputs(body_frame, anchor_world)
        return self.camera_position, self.target_position

    def get_state(self) -> Dict[str, Any]:
        """Get current camera state for telemetry.

        Returns:
            Dictionary containing camera state values
        """
        state: Dict[str, Any] = {
            "mode": self.state_name,
            "initialized": self._initialized,
            "time": self._time,
            "distance_m": self.distance,
            "height_m": self.height,
            "orbit_angle_rad": self._angle,
            "zoom_intent": self._zoom_intent,
            "turn_intent": self._turn_intent,
        }
        if self._initialized:
            state["camera_position"] = self._camera_pos.tolist()
            state["target_position"] = self._target_pos.tolist()
        return state

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("Chase camera not initialized. Call initialize() first.")

    @staticmethod
    def _unit(direction: int, command: str) -> int:
        if direction not in (1, -1):
            raise ValueError(f"{command} direction must be +1 or -1, got {direction}")
        return int(direction)

    def _sample_body_frame(self) -> Frame:
        frame = self.body.frame
        if not frame.is_finite():
            raise ValueError("Tracked body frame is not finite")
        return frame

    def _consume_intent(self) -> None:
        """Apply queued zoom and turn units, then clear them."""
        if self._zoom_intent:
            # Positive intent zooms in
            self._zoom *= self.config.zoom_factor ** (-self._zoom_intent)
            self._zoom = max(self._zoom, self.config.min_zoom)
            self._zoom_intent = 0
        if self._turn_intent:
            self._angle = wrap_angle(self._angle + self._turn_intent * self.config.turn_increment)
            self._turn_intent = 0

    def _relax(self, raw: np.ndarray, duration: float) -> None:
        """Exponentially pull the smoothed location toward a fixed raw location."""
        blend = 1.0 - np.exp(-np.array([
            self.config.horizontal_gain,
            self.config.horizontal_gain,
            self.config.vertical_gain,
        ]) * duration)
        self._location = self._location + blend * (raw - self._location)

    def _integrate_follow(
        self,
        step: float,
        body_frame: Frame,
        anchor_world: np.ndarray,
        body_yaw: float,
    ) -> None:
        """Sub-step the lagging yaw and the location it drags along.

        Once the yaw has settled on the body heading the raw location stops
        moving and the rest of the step is relaxed in closed form.
        """
        num_substeps = max(1, int(np.ceil(step / self.config.max_substep - 1e-9)))
        h = step / num_substeps
        yaw_alpha = 1.0 - np.exp(-self.config.follow_yaw_gain * h)

        for i in range(num_substeps):
            yaw_error = wrap_angle(body_yaw - self._yaw)
            if abs(yaw_error) < 1e-12:
                self._yaw = body_yaw
                self._relax(self._raw_location(body_frame, anchor_world), (num_substeps - i) * h)
                return
            self._yaw = wrap_angle(self._yaw + yaw_alpha * yaw_error)
            self._relax(self._raw_location(body_frame, anchor_world), h)

    def _chase_location(self, anchor_world: np.ndarray, yaw: float) -> np.ndarray:
        """Location behind the anchor along yaw, at chase height above it."""
        heading = yaw + self._angle
        back = np.array([np.cos(heading), np.sin(heading), 0.0])
        location = anchor_world - self.distance * back
        location[2] = anchor_world[2] + self.height
        return location

    def _eye_frame(self, body_frame: Frame) -> Frame:
        return body_frame.compose(self._driver_frame)

    def _raw_location(self, body_frame: Frame, anchor_world: np.ndarray) -> np.ndarray:
        if self._mode is CameraMode.TRACK:
            return self._track_location.copy()
        if self._mode is CameraMode.INSIDE:
            return self._eye_frame(body_frame).position
        return self._chase_location(anchor_world, self._yaw)

    def _refresh_outputs(self, body_frame: Frame, anchor_world: np.ndarray) -> None:
        if self._mode is CameraMode.INSIDE:
            eye = self._eye_frame(body_frame)
            self._camera_pos = eye.position
            self._target_pos = eye.point_to_world(np.array([1.0, 0.0, 0.0]))
        else:
            self._camera_pos = self._location.copy()
            self._target_pos = np.asarray(anchor_world, dtype=float).copy()
