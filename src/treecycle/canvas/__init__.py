"""Drawing surfaces: the Canvas protocol and its implementations."""

from treecycle.canvas.base import Canvas, Coord
from treecycle.canvas.pillow_canvas import PillowCanvas
from treecycle.canvas.recording import DrawCommand, RecordingCanvas
from treecycle.canvas.transform import CameraCanvas

__all__ = [
    "CameraCanvas",
    "Canvas",
    "Coord",
    "DrawCommand",
    "PillowCanvas",
    "RecordingCanvas",
]
