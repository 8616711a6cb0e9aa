"""Tests for the zoom/pan camera and the camera-transformed canvas."""

import pytest

from treecycle.canvas import CameraCanvas, RecordingCanvas
from treecycle.config import CameraSettings
from treecycle.engine import Camera
from treecycle.models import Point


@pytest.fixture
def camera() -> Camera:
    return Camera(CameraSettings(max_zoom=2.0, easing=0.5), center=(400, 300))


def test_home_camera_is_identity(camera):
    assert camera.is_home
    assert camera.to_screen(123.0, 456.0) == (123.0, 456.0)
    assert camera.scale(10) == 10


def test_follow_eases_toward_target(camera):
    camera.follow(Point(500, 500))
    camera.update()
    assert camera.zoom == pytest.approx(1.5)
    assert camera.focus.x == pytest.approx(450)
    assert camera.focus.y == pytest.approx(400)

    for _ in range(30):
        camera.update()
    assert camera.zoom == 2.0
    assert camera.focus.as_tuple() == (500, 500)


def test_focus_point_lands_on_screen_center(camera):
    camera.follow(Point(500, 500))
    for _ in range(30):
        camera.update()
    assert camera.to_screen(500, 500) == (400, 300)
    assert camera.to_screen(510, 500) == (420, 300)
    assert camera.scale(3) == 6


def test_release_and_snap_home(camera):
    camera.follow(Point(100, 100))
    camera.update()
    camera.release()
    assert camera.target[0] == 1.0

    camera.follow(Point(100, 100))
    camera.update()
    camera.snap_home()
    assert camera.is_home
    assert camera.target[1].as_tuple() == (400, 300)


def test_disabled_camera_ignores_follow():
    camera = Camera(CameraSettings(enabled=False), center=(400, 300))
    camera.follow(Point(0, 0))
    camera.update()
    assert camera.is_home


def test_camera_canvas_transforms_world_geometry(camera):
    camera.follow(Point(400, 300))
    for _ in range(30):
        camera.update()
    target = RecordingCanvas()
    world = CameraCanvas(target, camera)

    world.line((400, 300), (410, 300), (1, 2, 3), width=2)
    world.fill_ellipse((400, 310), 5, 3, (1, 2, 3))
    world.fill_rect(390, 290, 410, 310, (1, 2, 3))
    world.present()

    line, ellipse, rect = target.presented
    assert line.args == ((400, 300), (420, 300), 4)
    assert ellipse.args == ((400, 320), 10, 6)
    assert rect.args == (380, 280, 420, 320)
    assert (world.width, world.height) == (target.width, target.height)
