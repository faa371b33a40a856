"""
Frame - Rigid coordinate frames for camera and body placement.

Provides:
- Frame: position plus unit quaternion orientation
- Quaternion helpers (w, x, y, z convention)
- Local/world point and direction transforms
"""

from dataclasses import dataclass, field
import numpy as np


def quat_normalize(q: np.ndarray) -> np.ndarray:
    """Normalize a quaternion.

    Args:
        q: Quaternion [w, x, y, z]

    Returns:
        Unit quaternion
    """
    norm = np.linalg.norm(q)
    if norm < 1e-12:
        raise ValueError("Cannot normalize a zero quaternion")
    return q / norm


def quat_from_axis_angle(axis: np.ndarray, angle: float) -> np.ndarray:
    """Build a quaternion rotating by angle about axis.

    Args:
        axis: Rotation axis (need not be unit length)
        angle: Rotation angle in radians

    Returns:
        Unit quaternion [w, x, y, z]
    """
    axis = np.asarray(axis, dtype=float)
    axis = axis / np.linalg.norm(axis)
    half = 0.5 * angle
    return np.concatenate(([np.cos(half)], np.sin(half) * axis))


def quat_from_yaw(yaw: float) -> np.ndarray:
    """Quaternion for a rotation about the vertical (Z) axis."""
    return quat_from_axis_angle(np.array([0.0, 0.0, 1.0]), yaw)


def quat_multiply(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Hamilton product a * b (apply b first, then a)."""
    aw, ax, ay, az = a
    bw, bx, by, bz = b
    return np.array([
        aw * bw - ax * bx - ay * by - az * bz,
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
    ])


def quat_rotate(q: np.ndarray, v: np.ndarray) -> np.ndarray:
    """Rotate a 3D vector by a unit quaternion.

    Args:
        q: Unit quaternion [w, x, y, z]
        v: Vector [x, y, z]

    Returns:
        Rotated vector
    """
    w = q[0]
    u = np.asarray(q[1:], dtype=float)
    v = np.asarray(v, dtype=float)
    t = 2.0 * np.cross(u, v)
    return v + w * t + np.cross(u, t)


def wrap_angle(angle: float) -> float:
    """Wrap an angle to the interval (-pi, pi]."""
    wrapped = float(np.arctan2(np.sin(angle), np.cos(angle)))
    if wrapped == -np.pi:
        return float(np.pi)
    return wrapped


def _vector3(value, name: str) -> np.ndarray:
    arr = np.asarray(value, dtype=float).reshape(3)
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} must be finite, got {arr}")
    return arr


@dataclass
class Frame:
    """Rigid frame: world (or parent) position and orientation.

    The rotation is a unit quaternion [w, x, y, z]. X is forward,
    Y is left and Z is up in the local frame.
    """
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0]))

    def __post_init__(self):
        """Validate and normalize frame components."""
        self.position = _vector3(self.position, "Frame position")
        rotation = np.asarray(self.rotation, dtype=float).reshape(4)
        if not np.all(np.isfinite(rotation)):
            raise ValueError(f"Frame rotation must be finite, got {rotation}")
        self.rotation = quat_normalize(rotation)

    @classmethod
    def identity(cls) -> "Frame":
        """Frame at the origin with no rotation."""
        return cls()

    @classmethod
    def from_yaw(cls, position, yaw: float) -> "Frame":
        """Frame at position, rotated by yaw about the vertical axis."""
        return cls(position=position, rotation=quat_from_yaw(yaw))

    def point_to_world(self, local_point) -> np.ndarray:
        """Transform a point from this frame into the parent frame."""
        return self.position + quat_rotate(self.rotation, local_point)

    def direction_to_world(self, local_dir) -> np.ndarray:
        """Rotate a direction from this frame into the parent frame."""
        return quat_rotate(self.rotation, local_dir)

    def compose(self, child: "Frame") -> "Frame":
        """Express a child frame, given relative to this one, in the parent frame.

        Args:
            child: Frame expressed in this frame's coordinates

        Returns:
            Child frame in parent coordinates
        """
        return Frame(
            position=self.point_to_world(child.position),
            rotation=quat_multiply(self.rotation, child.rotation),
        )

    @property
    def forward(self) -> np.ndarray:
        """Local X axis in parent coordinates."""
        return self.direction_to_world(np.array([1.0, 0.0, 0.0]))

    @property
    def yaw(self) -> float:
        """Heading of the forward axis projected on the horizontal plane.

        Returns 0.0 when the forward axis is vertical.
        """
        fwd = self.forward
        if np.hypot(fwd[0], fwd[1]) < 1e-9:
            return 0.0
        return float(np.arctan2(fwd[1], fwd[0]))

    def is_finite(self) -> bool:
        """Check that position and rotation hold only finite values."""
        return bool(np.all(np.isfinite(self.position)) and np.all(np.isfinite(self.rotation)))
