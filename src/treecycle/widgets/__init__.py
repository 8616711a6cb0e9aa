"""treecycle TUI custom widgets."""

from treecycle.widgets.canvas_view import CanvasView
from treecycle.widgets.phase_strip import PhaseStrip

__all__ = [
    "CanvasView",
    "PhaseStrip",
]
