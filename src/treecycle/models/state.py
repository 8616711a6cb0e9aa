"""Runtime animation state - plain mutable dataclasses, stepped per frame."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Point:
    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y


@dataclass
class Seed:
    """A seed falling from a flower toward the soil."""

    x: float
    y: float
    angle: float = 0.0
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    active: bool = True

    def fall(self, gravity: float, spin: float) -> None:
        """Advance one frame of ballistic fall and rotation."""
        self.velocity_y += gravity
        self.y += self.velocity_y
        self.x += self.velocity_x
        self.angle = (self.angle + spin) % math.tau

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)
