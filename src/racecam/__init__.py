"""
RaceCam - Chase camera control for vehicle visualization.

This package provides a smoothed camera that follows a moving chassis:
- Chase, Follow, Track and Inside tracking modes
- Framerate-independent exponential smoothing with exact sub-stepping
- Operator zoom and orbit commands with key bindings
- Host glue that pushes camera poses to any renderer
"""

__version__ = "0.1.0"

from racecam.camera.chase_camera import ChaseCamera, ChaseCameraConfig
from racecam.camera.frame import Frame
from racecam.camera.modes import CameraMode
from racecam.viewer.vehicle_view import VehicleView

__all__ = [
    "ChaseCamera",
    "ChaseCameraConfig",
    "CameraMode",
    "Frame",
    "VehicleView",
    "__version__",
]
