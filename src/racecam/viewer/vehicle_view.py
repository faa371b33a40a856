"""
Vehicle view - Host glue between a tracked body, a chase camera and a renderer.

Provides:
- Renderer protocol for placing the view camera
- Chase camera setup with session defaults
- Per-frame advance that pushes the camera pose to the renderer
- HUD status lines
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol, Tuple
import logging
import numpy as np

from racecam.body.kinematic_body import TrackedBody
from racecam.camera.chase_camera import ChaseCamera, ChaseCameraConfig
from racecam.input.key_bindings import CameraKeyBindings, KeyEvent

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """Anything that can place a view camera."""

    def place_camera(self, position: np.ndarray, target: np.ndarray, up: np.ndarray) -> None:
        """Place the view camera for the next rendered frame."""
        ...


@dataclass
class VehicleViewConfig:
    """Vehicle view session defaults."""
    # Chase camera setup
    anchor: tuple[float, float, float] = (0.0, 0.0, 1.0)
    chase_distance: float = 6.0
    chase_height: float = 0.5

    # World up axis
    up: tuple[float, float, float] = (0.0, 0.0, 1.0)

    # HUD placement (pixels)
    hud_x: int = 740
    hud_y: int = 20


class VehicleView:
    """Drives a chase camera for one vehicle visualization session.

    Usage:
        view = VehicleView(body, renderer)
        for _ in range(steps):
            body.step(dt)
            view.advance(dt)
    """

    def __init__(
        self,
        body: TrackedBody,
        renderer: Renderer,
        config: VehicleViewConfig | None = None,
        camera_config: ChaseCameraConfig | None = None,
        on_diagnostics: Optional[Callable[[], None]] = None,
    ):
        """Initialize view and place the renderer camera.

        Args:
            body: Body followed by the camera
            renderer: Renderer receiving camera placements
            config: View configuration. Uses defaults if None.
            camera_config: Chase camera tuning. Uses defaults if None.
            on_diagnostics: Called when the diagnostics key is released
        """
        self.config = config or VehicleViewConfig()
        self.body = body
        self.renderer = renderer

        self.camera = ChaseCamera(body, camera_config)
        self.key_bindings = CameraKeyBindings(self.camera, on_diagnostics)

        self._up = np.array(self.config.up, dtype=float)
        self._frame: int = 0

        self.set_chase_camera(
            np.array(self.config.anchor, dtype=float),
            self.config.chase_distance,
            self.config.chase_height,
        )

    @property
    def frame(self) -> int:
        """Number of frames advanced."""
        return self._frame

    def set_chase_camera(
        self,
        anchor: np.ndarray,
        chase_distance: float,
        chase_height: float,
    ) -> None:
        """Re-initialize the chase camera and place the renderer camera.

        Args:
            anchor: Point on the chassis to look at (body frame)
            chase_distance: Nominal chase distance in meters
            chase_height: Nominal height above the anchor in meters
        """
        logger.debug("Setting chase camera: anchor=%s distance=%.2f height=%.2f",
                     np.asarray(anchor).tolist(), chase_distance, chase_height)
        self.camera.initialize(anchor, self.body.driver_frame, chase_distance, chase_height)
        self._place_camera()

    def handle_key(self, event: KeyEvent) -> bool:
        """Forward a key event to the camera bindings.

        Returns:
            True if the event was consumed
        """
        return self.key_bindings.handle(event)

    def advance(self, step: float) -> None:
        """Advance the camera by step seconds and update the renderer.

        Args:
            step: Elapsed time in seconds
        """
        self.camera.update(step)
        self._frame += 1
        self._place_camera()

    def hud_lines(self) -> List[Tuple[int, int, str]]:
        """Status lines for the HUD overlay.

        Returns:
            List of (x, y, text) entries in screen pixels
        """
        return [(self.config.hud_x, self.config.hud_y, f"Camera mode: {self.camera.state_name}")]

    def _place_camera(self) -> None:
        self.renderer.place_camera(
            self.camera.camera_position,
            self.camera.target_position,
            self._up.copy(),
        )
