"""
Key bindings - Map discrete key events to chase camera commands.

The camera never depends on a windowing library; hosts translate their
native key events into KeyEvent values and pass them to
CameraKeyBindings.handle().
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional
import logging

from racecam.camera.chase_camera import ChaseCamera
from racecam.camera.modes import CameraMode

logger = logging.getLogger(__name__)


class Key(Enum):
    """Keys understood by the camera bindings."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    KEY_1 = "1"
    KEY_2 = "2"
    KEY_3 = "3"
    KEY_4 = "4"
    KEY_V = "v"


@dataclass
class KeyEvent:
    """A single key transition."""
    key: Key
    pressed: bool = True  # True for key-down, False for key-up


# Arrow keys act on key-down so held keys repeat
_PRESS_ACTIONS = {
    Key.UP: ("zoom", -1),
    Key.DOWN: ("zoom", 1),
    Key.LEFT: ("turn", 1),
    Key.RIGHT: ("turn", -1),
}

# Mode keys act on key-up
_RELEASE_MODES = {
    Key.KEY_1: CameraMode.CHASE,
    Key.KEY_2: CameraMode.FOLLOW,
    Key.KEY_3: CameraMode.TRACK,
    Key.KEY_4: CameraMode.INSIDE,
}


class CameraKeyBindings:
    """Dispatches key events to a chase camera.

    - Up/Down (pressed): zoom out/in
    - Left/Right (pressed): orbit left/right
    - 1-4 (released): Chase, Follow, Track, Inside
    - V (released): diagnostics callback, if any
    """

    def __init__(
        self,
        camera: ChaseCamera,
        on_diagnostics: Optional[Callable[[], None]] = None,
    ):
        """Initialize bindings.

        Args:
            camera: Camera receiving commands
            on_diagnostics: Called when V is released
        """
        self.camera = camera
        self.on_diagnostics = on_diagnostics

    def handle(self, event: KeyEvent) -> bool:
        """Dispatch one key event.

        Args:
            event: Key transition

        Returns:
            True if the event was consumed
        """
        if event.pressed:
            action = _PRESS_ACTIONS.get(event.key)
            if action is None:
                return False
            command, direction = action
            if command == "zoom":
                self.camera.zoom(direction)
            else:
                self.camera.turn(direction)
            return True

        mode = _RELEASE_MODES.get(event.key)
        if mode is not None:
            self.camera.set_mode(mode)
            return True

        if event.key is Key.KEY_V and self.on_diagnostics is not None:
            logger.debug("Diagnostics requested")
            self.on_diagnostics()
            return True

        return False
