"""Canvas wrapper that applies a camera transform to world coordinates."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from treecycle.canvas.base import Canvas, Coord
    from treecycle.engine.camera import Camera
    from treecycle.models.palette import Color


class CameraCanvas:
    """Draw in world space; forward to *target* in screen space.

    Positions go through :meth:`Camera.to_screen`; radii and stroke widths
    scale with the zoom.  ``clear`` and ``present`` are passed through
    untouched.
    """

    def __init__(self, target: Canvas, camera: Camera) -> None:
        self.target = target
        self.camera = camera

    @property
    def width(self) -> int:
        return self.target.width

    @property
    def height(self) -> int:
        return self.target.height

    def clear(self, color: Color) -> None:
        self.target.clear(color)

    def line(self, start: Coord, end: Coord, color: Color, width: int = 1) -> None:
        self.target.line(
            self.camera.to_screen(*start),
            self.camera.to_screen(*end),
            color,
            max(1, round(self.camera.scale(width))),
        )

    def fill_ellipse(self, center: Coord, rx: float, ry: float, color: Color) -> None:
        self.target.fill_ellipse(
            self.camera.to_screen(*center),
            self.camera.scale(rx),
            self.camera.scale(ry),
            color,
        )

    def fill_rect(
        self, left: float, top: float, right: float, bottom: float, color: Color,
    ) -> None:
        x0, y0 = self.camera.to_screen(left, top)
        x1, y1 = self.camera.to_screen(right, bottom)
        self.target.fill_rect(x0, y0, x1, y1, color)

    def text(self, position: Coord, text: str, color: Color, size: int = 1) -> None:
        self.target.text(self.camera.to_screen(*position), text, color, size)

    def present(self) -> None:
        self.target.present()
