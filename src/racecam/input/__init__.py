"""
Input module - Key event mapping for camera commands.
"""

from racecam.input.key_bindings import Key, KeyEvent, CameraKeyBindings

__all__ = [
    "Key",
    "KeyEvent",
    "CameraKeyBindings",
]
