"""Canvas view widget - show a Pillow frame as half-block terminal cells."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from PIL import Image
from rich.color import Color
from rich.style import Style
from rich.text import Text
from textual.widgets import Static

if TYPE_CHECKING:
    from treecycle.models.palette import Color as RGB

# Upper half block: foreground paints the top pixel, background the bottom one.
HALF_BLOCK = "▀"


@lru_cache(maxsize=4096)
def _cell_style(top: RGB, bottom: RGB) -> Style:
    return Style(color=Color.from_rgb(*top), bgcolor=Color.from_rgb(*bottom))


def fit_cells(image_size: tuple[int, int], columns: int, rows: int) -> tuple[int, int]:
    """Largest ``(columns, rows)`` that fits the area and keeps the aspect ratio.

    A terminal cell holds two vertically stacked pixels.
    """
    width, height = image_size
    if columns <= 0 or rows <= 0:
        return 0, 0
    scale = min(columns / width, (rows * 2) / height)
    return max(1, int(width * scale)), max(1, int(height * scale / 2))


def image_to_text(image: Image.Image, columns: int, rows: int) -> Text:
    """Downsample *image* to ``columns x rows`` half-block cells."""
    small = image.convert("RGB").resize((columns, rows * 2), Image.Resampling.BILINEAR)
    pixels = small.load()
    text = Text(no_wrap=True, overflow="crop")
    for row in range(rows):
        for col in range(columns):
            text.append(HALF_BLOCK, _cell_style(pixels[col, 2 * row], pixels[col, 2 * row + 1]))
        if row < rows - 1:
            text.append("\n")
    return text


class CanvasView(Static):
    """Displays the most recently presented animation frame."""

    DEFAULT_CSS = """
    CanvasView {
        width: 1fr;
        height: 1fr;
        content-align: center middle;
        background: #0c0a1a;
    }
    """

    def show(self, image: Image.Image) -> None:
        columns, rows = fit_cells(image.size, self.size.width, self.size.height)
        if columns == 0:
            return
        self.update(image_to_text(image, columns, rows))
