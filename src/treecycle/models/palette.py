"""Named RGB colours used by the renderer."""

from __future__ import annotations

from typing import TypeAlias

Color: TypeAlias = tuple[int, int, int]

SKY_BLUE: Color = (135, 206, 235)
BROWN: Color = (139, 69, 19)
DARK_BROWN: Color = (101, 67, 33)
SOIL_BROWN: Color = (90, 50, 20)
SEED_BROWN: Color = (160, 82, 45)
LEAF_GREEN: Color = (34, 139, 34)
LIGHT_GREEN: Color = (50, 205, 50)
GRASS_GREEN: Color = (0, 128, 0)
MAGENTA: Color = (255, 0, 255)
YELLOW: Color = (255, 255, 0)
WHITE: Color = (255, 255, 255)
