"""Tests for the RaceCam vehicle view."""

import pytest
import numpy as np

from racecam.body.kinematic_body import KinematicBody, KinematicBodyConfig
from racecam.camera.modes import CameraMode
from racecam.input.key_bindings import Key, KeyEvent
from racecam.viewer.vehicle_view import VehicleView, VehicleViewConfig


class RecordingRenderer:
    """Renderer that records every camera placement."""

    def __init__(self):
        self.placements = []

    def place_camera(self, position, target, up):
        self.placements.append((position, target, up))


class TestVehicleView:
    """Test vehicle view session glue."""

    def test_view_places_initial_camera(self):
        """Test construction initializes the camera and places it."""
        renderer = RecordingRenderer()
        view = VehicleView(KinematicBody(), renderer)

        assert len(renderer.placements) == 1
        position, target, up = renderer.placements[0]
        assert np.allclose(position, [-6.0, 0.0, 1.5])
        assert np.allclose(target, [0.0, 0.0, 1.0])
        assert np.allclose(up, [0.0, 0.0, 1.0])
        assert view.frame == 0

    def test_advance_updates_renderer(self):
        """Test advance pushes the new pose to the renderer."""
        body = KinematicBody()
        body.set_commands(speed=10.0)
        renderer = RecordingRenderer()
        view = VehicleView(body, renderer)

        for _ in range(10):
            body.step(0.01)
            view.advance(0.01)

        assert view.frame == 10
        assert len(renderer.placements) == 11
        _, target, _ = renderer.placements[-1]
        assert np.allclose(target, [body.state.x, 0.0, 1.0])

    def test_hud_lines(self):
        """Test HUD shows the active camera mode."""
        view = VehicleView(KinematicBody(), RecordingRenderer())

        assert view.hud_lines() == [(740, 20, "Camera mode: Chase")]

        view.handle_key(KeyEvent(Key.KEY_4, pressed=False))
        assert view.hud_lines()[0][2] == "Camera mode: Inside"
        assert view.camera.mode is CameraMode.INSIDE

    def test_inside_uses_body_driver_frame(self):
        """Test Inside mode uses the body's driver eye."""
        body = KinematicBody(KinematicBodyConfig(driver_eye=(0.5, 0.3, 1.2)))
        renderer = RecordingRenderer()
        view = VehicleView(body, renderer)

        view.handle_key(KeyEvent(Key.KEY_4, pressed=False))
        view.advance(0.01)

        position, target, _ = renderer.placements[-1]
        assert np.allclose(position, [0.5, 0.3, 1.2])
        assert np.allclose(target, [1.5, 0.3, 1.2])

    def test_set_chase_camera(self):
        """Test chase camera can be re-initialized with new parameters."""
        config = VehicleViewConfig(chase_distance=8.0, chase_height=1.0)
        renderer = RecordingRenderer()
        view = VehicleView(KinematicBody(), renderer, config)
        assert view.camera.distance == pytest.approx(8.0)

        view.set_chase_camera(np.array([0.0, 0.0, 0.5]), 4.0, 2.0)

        assert view.camera.distance == pytest.approx(4.0)
        position, target, _ = renderer.placements[-1]
        assert np.allclose(position, [-4.0, 0.0, 2.5])
        assert np.allclose(target, [0.0, 0.0, 0.5])

    def test_diagnostics_callback(self):
        """Test diagnostics key reaches the host callback."""
        calls = []
        view = VehicleView(
            KinematicBody(),
            RecordingRenderer(),
            on_diagnostics=lambda: calls.append("violations"),
        )

        assert view.handle_key(KeyEvent(Key.KEY_V, pressed=False))
        assert calls == ["violations"]
