"""Canvas protocol - the immediate-mode 2D drawing surface the renderer targets."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeAlias, runtime_checkable

if TYPE_CHECKING:
    from treecycle.models.palette import Color

Coord: TypeAlias = tuple[float, float]


@runtime_checkable
class Canvas(Protocol):
    """Protocol for immediate-mode drawing backends.

    Every primitive carries its own colour and stroke width; there is no
    hidden "current colour" state.  Drawing targets the back buffer until
    :meth:`present` swaps it to the front.
    """

    width: int
    height: int

    def clear(self, color: Color) -> None:
        """Fill the whole back buffer with *color*."""
        ...

    def line(self, start: Coord, end: Coord, color: Color, width: int = 1) -> None:
        """Draw a straight stroke from *start* to *end*."""
        ...

    def fill_ellipse(self, center: Coord, rx: float, ry: float, color: Color) -> None:
        """Draw a filled axis-aligned ellipse with radii *rx*, *ry*."""
        ...

    def fill_rect(
        self, left: float, top: float, right: float, bottom: float, color: Color,
    ) -> None:
        """Draw a filled rectangle."""
        ...

    def text(self, position: Coord, text: str, color: Color, size: int = 1) -> None:
        """Draw *text* with its top-left corner at *position*."""
        ...

    def present(self) -> None:
        """Swap front and back buffers."""
        ...
