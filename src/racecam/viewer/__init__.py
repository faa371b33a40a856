"""
Viewer module - Vehicle visualization session glue.
"""

from racecam.viewer.vehicle_view import Renderer, VehicleView, VehicleViewConfig

__all__ = [
    "Renderer",
    "VehicleView",
    "VehicleViewConfig",
]
