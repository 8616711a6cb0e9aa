"""Zoom/pan camera used to follow the falling seed."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from treecycle.models.state import Point

if TYPE_CHECKING:
    from treecycle.config import CameraSettings

logger = logging.getLogger(__name__)

_SETTLE_EPSILON = 1e-3


class Camera:
    """2D camera mapping world coordinates to screen coordinates.

    ``screen = (world - focus) * zoom + center``, so a camera at zoom 1 whose
    focus sits on the screen centre is the identity transform.  ``update``
    eases zoom and focus a fixed fraction toward the current target each
    frame.
    """

    def __init__(self, settings: CameraSettings, center: tuple[float, float]) -> None:
        self.settings = settings
        self.center = Point(*center)
        self.zoom = 1.0
        self.focus = Point(*center)
        self._target_zoom = 1.0
        self._target_focus = Point(*center)

    @property
    def is_home(self) -> bool:
        return (
            abs(self.zoom - 1.0) < _SETTLE_EPSILON
            and abs(self.focus.x - self.center.x) < _SETTLE_EPSILON
            and abs(self.focus.y - self.center.y) < _SETTLE_EPSILON
        )

    @property
    def target(self) -> tuple[float, Point]:
        return self._target_zoom, Point(self._target_focus.x, self._target_focus.y)

    def follow(self, point: Point) -> None:
        """Zoom in on *point* over the next frames."""
        if not self.settings.enabled:
            return
        self._target_zoom = self.settings.max_zoom
        self._target_focus = Point(point.x, point.y)

    def release(self) -> None:
        """Ease back to the identity view."""
        self._target_zoom = 1.0
        self._target_focus = Point(self.center.x, self.center.y)

    def snap_home(self) -> None:
        """Jump to the identity view immediately."""
        self.release()
        self.zoom = 1.0
        self.focus = Point(self.center.x, self.center.y)

    def update(self) -> None:
        k = self.settings.easing
        self.zoom = _approach(self.zoom, self._target_zoom, k)
        self.focus = Point(
            _approach(self.focus.x, self._target_focus.x, k),
            _approach(self.focus.y, self._target_focus.y, k),
        )

    def to_screen(self, x: float, y: float) -> tuple[float, float]:
        return (
            (x - self.focus.x) * self.zoom + self.center.x,
            (y - self.focus.y) * self.zoom + self.center.y,
        )

    def scale(self, length: float) -> float:
        return length * self.zoom


def _approach(value: float, target: float, k: float) -> float:
    value += (target - value) * k
    if abs(target - value) < _SETTLE_EPSILON:
        return target
    return value
