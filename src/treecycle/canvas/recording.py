"""Canvas that records draw calls instead of rasterising them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from treecycle.canvas.base import Coord
    from treecycle.models.palette import Color


@dataclass
class DrawCommand:
    """A single recorded primitive."""

    kind: str
    args: tuple[Any, ...]
    color: Color


@dataclass
class RecordingCanvas:
    """Headless canvas for tests and frame inspection.

    Commands accumulate in ``pending`` until :meth:`present`, which moves
    them to ``presented`` (the "front buffer").
    """

    width: int = 800
    height: int = 600
    pending: list[DrawCommand] = field(default_factory=list)
    presented: list[DrawCommand] = field(default_factory=list)
    frames_presented: int = 0

    def clear(self, color: Color) -> None:
        self.pending.clear()
        self.pending.append(DrawCommand("clear", (), color))

    def line(self, start: Coord, end: Coord, color: Color, width: int = 1) -> None:
        self.pending.append(DrawCommand("line", (start, end, width), color))

    def fill_ellipse(self, center: Coord, rx: float, ry: float, color: Color) -> None:
        self.pending.append(DrawCommand("ellipse", (center, rx, ry), color))

    def fill_rect(
        self, left: float, top: float, right: float, bottom: float, color: Color,
    ) -> None:
        self.pending.append(DrawCommand("rect", (left, top, right, bottom), color))

    def text(self, position: Coord, text: str, color: Color, size: int = 1) -> None:
        self.pending.append(DrawCommand("text", (position, text, size), color))

    def present(self) -> None:
        self.presented = self.pending
        self.pending = []
        self.frames_presented += 1

    # -- inspection helpers -------------------------------------------------

    def of_kind(self, kind: str) -> list[DrawCommand]:
        return [c for c in self.presented if c.kind == kind]

    def texts(self) -> list[str]:
        return [c.args[1] for c in self.of_kind("text")]

    def count(self, kind: str, color: Color | None = None) -> int:
        return sum(
            1 for c in self.presented if c.kind == kind and (color is None or c.color == color)
        )
