"""
Body module - Tracked body interface and kinematic chassis.
"""

from racecam.body.kinematic_body import TrackedBody, KinematicBody, KinematicBodyConfig, BodyState

__all__ = [
    "TrackedBody",
    "KinematicBody",
    "KinematicBodyConfig",
    "BodyState",
]
