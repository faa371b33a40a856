"""Camera tracking modes."""

from enum import Enum


class CameraMode(Enum):
    """Chase camera tracking modes."""
    CHASE = "chase"     # Trails behind the heading, rigid yaw coupling
    FOLLOW = "follow"   # Trails behind with lagging yaw
    TRACK = "track"     # Fixed location, turns to keep the anchor centered
    INSIDE = "inside"   # Rigidly attached at the driver eye point

    @property
    def label(self) -> str:
        """Human-readable mode name for status displays."""
        return self.name.capitalize()
