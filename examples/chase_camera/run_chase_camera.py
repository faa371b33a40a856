#!/usr/bin/env python3
"""
Chase Camera Example

This example demonstrates how to:
1. Drive a kinematic chassis around a circle
2. Follow it with a chase camera through a VehicleView
3. Switch camera modes and send zoom/turn keys
4. Read the camera pose the renderer receives

Run with: python run_chase_camera.py
"""

import logging
import sys

import numpy as np

from racecam import VehicleView
from racecam.body import KinematicBody
from racecam.input import Key, KeyEvent


class PrintRenderer:
    """Renderer stand-in that remembers the last camera placement."""

    def __init__(self):
        self.position = np.zeros(3)
        self.target = np.zeros(3)

    def place_camera(self, position, target, up):
        self.position = position
        self.target = target


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    print("=" * 60)
    print("RaceCam Chase Camera Example")
    print("=" * 60)

    # Step 1: Set up body, renderer and view
    body = KinematicBody()
    renderer = PrintRenderer()
    view = VehicleView(body, renderer)
    body.set_commands(speed=15.0, yaw_rate=0.3)

    # Step 2: Run through each mode for 2 seconds at 50 Hz
    dt = 0.02
    schedule = [Key.KEY_1, Key.KEY_2, Key.KEY_3, Key.KEY_4]
    for mode_key in schedule:
        view.handle_key(KeyEvent(mode_key, pressed=False))
        print(f"\n{view.hud_lines()[0][2]}")

        for step in range(100):
            # Orbit a little and pull back during the first half second
            if step < 25:
                view.handle_key(KeyEvent(Key.LEFT))
                view.handle_key(KeyEvent(Key.UP))

            body.step(dt)
            view.advance(dt)

            if (step + 1) % 50 == 0:
                lag = np.linalg.norm(renderer.position - renderer.target)
                print(f"   t = {view.camera.time:5.2f} s  "
                      f"camera = ({renderer.position[0]:7.2f}, {renderer.position[1]:7.2f}, "
                      f"{renderer.position[2]:5.2f})  range = {lag:5.2f} m")

    # Step 3: Final state snapshot
    print("\nFinal camera state:")
    for key, value in view.camera.get_state().items():
        print(f"   {key}: {value}")


if __name__ == "__main__":
    main()
