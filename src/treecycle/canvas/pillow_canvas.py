"""Double-buffered canvas backed by two Pillow images."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw, ImageFont

if TYPE_CHECKING:
    from treecycle.canvas.base import Coord
    from treecycle.models.palette import Color

logger = logging.getLogger(__name__)

_FONT_PATH = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"
# Pixel height of size-1 text; larger sizes are multiples of it.
_BASE_FONT_PX = 10


class PillowCanvas:
    """Immediate-mode canvas drawing into an off-screen back buffer.

    ``front`` always holds the most recently presented frame, so a consumer
    running on another tick (a TUI widget, a WebSocket broadcaster) never
    observes a half-drawn image.
    """

    def __init__(self, width: int, height: int, background: Color = (0, 0, 0)) -> None:
        self.width = width
        self.height = height
        self._front = Image.new("RGB", (width, height), background)
        self._back = Image.new("RGB", (width, height), background)
        self._draw = ImageDraw.Draw(self._back)
        self._fonts: dict[int, ImageFont.FreeTypeFont | ImageFont.ImageFont] = {}
        self.frames_presented = 0

    @property
    def front(self) -> Image.Image:
        """The last presented frame."""
        return self._front

    def clear(self, color: Color) -> None:
        self._draw.rectangle([0, 0, self.width, self.height], fill=color)

    def line(self, start: Coord, end: Coord, color: Color, width: int = 1) -> None:
        self._draw.line([start, end], fill=color, width=max(1, int(width)))

    def fill_ellipse(self, center: Coord, rx: float, ry: float, color: Color) -> None:
        cx, cy = center
        rx, ry = abs(rx), abs(ry)
        self._draw.ellipse([cx - rx, cy - ry, cx + rx, cy + ry], fill=color)

    def fill_rect(
        self, left: float, top: float, right: float, bottom: float, color: Color,
    ) -> None:
        x0, x1 = sorted((left, right))
        y0, y1 = sorted((top, bottom))
        self._draw.rectangle([x0, y0, x1, y1], fill=color)

    def text(self, position: Coord, text: str, color: Color, size: int = 1) -> None:
        self._draw.text(position, text, fill=color, font=self._font(size))

    def present(self) -> None:
        self._front, self._back = self._back, self._front
        self._draw = ImageDraw.Draw(self._back)
        self.frames_presented += 1

    def snapshot(self) -> Image.Image:
        """Return an independent copy of the front buffer."""
        return self._front.copy()

    def _font(self, size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        size = max(1, size)
        font = self._fonts.get(size)
        if font is None:
            px = _BASE_FONT_PX * size
            try:
                font = ImageFont.truetype(_FONT_PATH, px)
            except OSError:
                logger.debug("DejaVuSans not found, using Pillow's default font")
                font = ImageFont.load_default(size=px)
            self._fonts[size] = font
        return font
