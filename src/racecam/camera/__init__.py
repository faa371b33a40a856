"""
Camera module - Chase camera controller.

This module contains:
- Frame: Rigid frames and quaternion helpers
- CameraMode: Tracking modes
- ChaseCamera: Smoothed camera state machine
"""

from racecam.camera.frame import Frame
from racecam.camera.modes import CameraMode
from racecam.camera.chase_camera import ChaseCamera, ChaseCameraConfig

__all__ = [
    "Frame",
    "CameraMode",
    "ChaseCamera",
    "ChaseCameraConfig",
]
