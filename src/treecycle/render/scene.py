"""Procedural scene drawing: sky, soil, seed, recursive tree, flowers, HUD."""

from __future__ import annotations

import logging
import math
import random
from typing import TYPE_CHECKING

from treecycle.canvas.transform import CameraCanvas
from treecycle.models import palette
from treecycle.models.enums import Phase
from treecycle.models.state import Point

if TYPE_CHECKING:
    from treecycle.canvas.base import Canvas
    from treecycle.config import AppConfig
    from treecycle.engine.animation import AnimationEngine

logger = logging.getLogger(__name__)

HELP_TEXT = "Press ESC to exit, SPACE to restart"

# Below this growth scale nothing of the tree is drawn.
_MIN_VISIBLE_GROWTH = 0.01
# Recursion stops once branches are scaled below this.
_MIN_BRANCH_SCALE = 0.1
# Branches deeper than this are wood; shallower ones are green twigs.
_WOOD_DEPTH = 4
_LEAF_DEPTH = 3
_FLOWER_DEPTH = 2
# The trunk starts this far above the buried seed.
_TRUNK_OFFSET = 20.0
_SEED_LENGTH = 8.0
_SEED_ASPECT = 0.6
_SPROUT_PER_SWELL = 20.0


class SceneRenderer:
    """Draws one frame of the animation onto a :class:`Canvas`.

    World geometry goes through the engine's camera; the HUD is drawn in
    screen space on top.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self._grass: list[Point] | None = None

    def render(self, engine: AnimationEngine, canvas: Canvas) -> None:
        world = CameraCanvas(canvas, engine.camera)
        canvas.clear(palette.SKY_BLUE)

        self.draw_sun(world)
        self.draw_clouds(world)
        self.draw_soil(world)

        swell = engine.seed_swell
        if swell is not None:
            self.draw_seed(world, engine.seed_position, 0.0, swell)
            if engine.phase is Phase.LEAF:
                self.draw_seedling_leaves(world, engine.seed_position, swell, engine.leaf_opening)

        if engine.growth_scale > _MIN_VISIBLE_GROWTH:
            self.draw_tree(world, engine)

        # Landed seeds stay visible in the soil until the next cycle clears them.
        for seed in engine.seeds:
            self.draw_seed(world, seed.position, seed.angle, 1.0)

        self.draw_hud(canvas, engine.phase)

    # ------------------------------------------------------------------
    # Background
    # ------------------------------------------------------------------

    def draw_sun(self, canvas: Canvas) -> None:
        cx, cy = self.config.canvas.width - 100, 100
        canvas.fill_ellipse((cx, cy), 30, 30, palette.YELLOW)
        for i in range(12):
            angle = math.radians(i * 30)
            canvas.line(
                (cx + 35 * math.cos(angle), cy + 35 * math.sin(angle)),
                (cx + 50 * math.cos(angle), cy + 50 * math.sin(angle)),
                palette.YELLOW,
            )

    def draw_clouds(self, canvas: Canvas) -> None:
        for cloud in range(3):
            cloud_x = 100 + cloud * 200
            cloud_y = 80 + (cloud * 17) % 50
            for i in range(5):
                radius = 20 + (i * 7) % 10
                canvas.fill_ellipse(
                    (cloud_x + i * 25, cloud_y + ((i * 13) % 20 - 10)),
                    radius, radius, palette.WHITE,
                )

    def draw_soil(self, canvas: Canvas) -> None:
        width = self.config.canvas.width
        height = self.config.canvas.height
        ground = self.config.canvas.ground_level
        # Soil extends past the frame so a zoomed-in camera never shows sky below it.
        canvas.fill_rect(-width, ground, 2 * width, ground + 50, palette.DARK_BROWN)
        canvas.fill_rect(-width, ground + 50, 2 * width, 3 * height, palette.SOIL_BROWN)

        for blade in self.grass:
            canvas.line((blade.x, ground), (blade.x, blade.y), palette.GRASS_GREEN)

    @property
    def grass(self) -> list[Point]:
        """Grass blade tips, generated once per renderer."""
        if self._grass is None:
            rng = random.Random(self.config.seed)  # noqa: S311
            ground = self.config.canvas.ground_level
            self._grass = [
                Point(x + rng.randint(-5, 4), ground - (rng.randint(0, 14) + 5))
                for x in range(0, self.config.canvas.width, 10)
            ]
        return self._grass

    # ------------------------------------------------------------------
    # Seed
    # ------------------------------------------------------------------

    def draw_seed(self, canvas: Canvas, at: Point, angle: float, scale: float) -> None:
        """Draw a seed; a swell above 1.0 adds a sprout growing upward."""
        size = _SEED_LENGTH * scale
        if angle == 0.0:
            canvas.fill_ellipse(at.as_tuple(), size, size * _SEED_ASPECT, palette.SEED_BROWN)
        else:
            _draw_rotated_oval(canvas, at, size, angle)

        if scale > 1.0:
            sprout = (scale - 1.0) * _SPROUT_PER_SWELL
            canvas.line(at.as_tuple(), (at.x, at.y - sprout), palette.LIGHT_GREEN)

    def draw_seedling_leaves(
        self, canvas: Canvas, at: Point, swell: float, opening: float,
    ) -> None:
        """Two cotyledons unfolding on either side of the sprout tip."""
        tip_y = at.y - (swell - 1.0) * _SPROUT_PER_SWELL
        rx = 1.0 + 6.0 * opening
        ry = 1.0 + 3.0 * opening
        canvas.fill_ellipse((at.x - rx, tip_y), rx, ry, palette.LIGHT_GREEN)
        canvas.fill_ellipse((at.x + rx, tip_y), rx, ry, palette.LIGHT_GREEN)

    # ------------------------------------------------------------------
    # Tree
    # ------------------------------------------------------------------

    def draw_tree(self, canvas: Canvas, engine: AnimationEngine) -> None:
        tree = self.config.tree
        scale = engine.growth_scale
        start_x = engine.seed_position.x
        start_y = engine.seed_position.y - _TRUNK_OFFSET

        # Reseeded every frame so leaf jitter stays put between frames.
        rng = random.Random(self.config.seed)  # noqa: S311
        flower_scale = engine.flower_scale if engine.show_flowers else None
        self.draw_branch(
            canvas, rng, start_x, start_y, tree.trunk_length, math.pi / 2,
            tree.depth, scale, flower_scale,
        )

        if scale > 0.2:
            half = int(30 * scale)
            canvas.fill_rect(
                start_x - half, start_y - 10, start_x + half, start_y + 20, palette.DARK_BROWN,
            )

    def draw_branch(
        self,
        canvas: Canvas,
        rng: random.Random,
        x1: float,
        y1: float,
        length: float,
        angle: float,
        depth: int,
        scale: float,
        flower_scale: float | None,
    ) -> None:
        """Draw one branch and recurse into its three children.

        ``flower_scale`` is ``None`` until the tree is flowering.
        """
        if depth <= 0 or scale <= _MIN_BRANCH_SCALE:
            return

        scaled = length * scale
        x2 = x1 + scaled * math.cos(angle)
        y2 = y1 - scaled * math.sin(angle)

        if depth > _WOOD_DEPTH:
            canvas.line((x1, y1), (x2, y2), palette.BROWN, int(depth * scale) + 1)
        else:
            canvas.line((x1, y1), (x2, y2), palette.LEAF_GREEN, max(1, int(depth * scale)))

        if depth <= _LEAF_DEPTH and scale > 0.5:
            leaf = int(3 * scale)
            for _ in range(3):
                canvas.fill_ellipse(
                    (x2 + rng.randint(-5, 4), y2 + rng.randint(-5, 4)),
                    leaf, leaf, palette.LIGHT_GREEN,
                )

        if depth <= _FLOWER_DEPTH and flower_scale is not None and scale > 0.8:
            self.draw_flower(canvas, x2, y2, flower_scale)

        tree = self.config.tree
        child = length * tree.length_ratio
        self.draw_branch(
            canvas, rng, x2, y2, child, angle - tree.branch_angle, depth - 1, scale, flower_scale,
        )
        self.draw_branch(
            canvas, rng, x2, y2, child, angle + tree.branch_angle, depth - 1, scale, flower_scale,
        )
        self.draw_branch(
            canvas, rng, x2, y2, child * tree.middle_ratio, angle, depth - 1, scale, flower_scale,
        )

    def draw_flower(self, canvas: Canvas, x: float, y: float, scale: float) -> None:
        if scale <= 0:
            return
        petal = int(5 * scale)
        for i in range(5):
            angle = i * math.tau / 5
            canvas.fill_ellipse(
                (x + petal * math.cos(angle), y + petal * math.sin(angle)),
                petal, petal, palette.MAGENTA,
            )
        canvas.fill_ellipse((x, y), petal, petal, palette.YELLOW)

    # ------------------------------------------------------------------
    # HUD
    # ------------------------------------------------------------------

    def draw_hud(self, canvas: Canvas, phase: Phase) -> None:
        canvas.text((10, 10), phase.title, palette.WHITE, size=2)
        canvas.text((10, self.config.canvas.height - 20), HELP_TEXT, palette.WHITE, size=1)


def _draw_rotated_oval(canvas: Canvas, at: Point, size: float, angle: float) -> None:
    """Approximate a rotated oval with discs strung along its major axis."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    minor = size * _SEED_ASPECT
    for k in range(-3, 4):
        t = k / 3.5
        r = minor * math.sqrt(1.0 - t * t)
        canvas.fill_ellipse(
            (at.x + t * size * cos_a, at.y + t * size * sin_a), r, r, palette.SEED_BROWN,
        )
    # Dark tip marks which way the seed is pointing.
    canvas.fill_ellipse(
        (at.x + size * 0.8 * cos_a, at.y + size * 0.8 * sin_a),
        minor * 0.35, minor * 0.35, palette.DARK_BROWN,
    )
