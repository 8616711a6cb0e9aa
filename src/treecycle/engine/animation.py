"""Animation state machine for the tree life cycle."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from treecycle.engine.camera import Camera
from treecycle.models.enums import Phase
from treecycle.models.state import Point, Seed

if TYPE_CHECKING:
    from collections.abc import Callable

    from treecycle.config import AppConfig

logger = logging.getLogger(__name__)

# The buried seed swells by 1.0 every this many frames while germinating.
SWELL_FRAMES = 50
# Fixed swell of the seed (and its sprout) once leafing starts.
LEAF_SWELL = 3.0
# A ripe seed drops from this far above ground, this far right of the trunk.
DROP_HEIGHT = 150.0
DROP_OFFSET = 50.0


class AnimationEngine:
    """Mutable per-frame animation state, advanced by :meth:`update`.

    The engine never draws; it only moves scalars (``growth_scale``,
    ``flower_scale``), the falling seeds and the camera.  Rendering reads
    those values back each frame.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self.camera = Camera(config.camera, config.canvas.center)
        self.cycle = 0
        self.frame = 0

        self.phase = Phase.GERMINATION
        self.phase_timer = 0
        self.growth_scale = 0.0
        self.flower_scale = 0.0
        self.show_flowers = False
        self.seeds: list[Seed] = []
        self.seed_position = Point(*config.seed_home)
        self.landing: Point | None = None

        self._handlers: dict[Phase, Callable[[], None]] = {
            Phase.GERMINATION: self._germinate,
            Phase.LEAF: self._leaf,
            Phase.GROWTH: self._grow,
            Phase.FLOWERING: self._flower,
            Phase.DISPERSAL: self._disperse,
            Phase.RESET: self._fade_out,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def reset_animation(self) -> None:
        """Restart from a freshly buried seed at the centre of the ground."""
        logger.info("Animation restarted")
        self.camera.snap_home()
        self._start_cycle(Point(*self.config.seed_home))

    def update(self) -> None:
        """Advance the animation by one frame."""
        self.phase_timer += 1
        self.frame += 1
        self._handlers[self.phase]()
        self._aim_camera()
        self.camera.update()

    @property
    def seed_swell(self) -> float | None:
        """Scale of the buried seed, or ``None`` once it is no longer drawn."""
        if self.phase is Phase.GERMINATION:
            return 1.0 + self.phase_timer / SWELL_FRAMES
        if self.phase is Phase.LEAF:
            return LEAF_SWELL
        return None

    @property
    def leaf_opening(self) -> float:
        """Fraction (0..1) the two seedling leaves have unfolded."""
        if self.phase is not Phase.LEAF:
            return 0.0
        return min(1.0, self.phase_timer / self.config.timing.leaf_frames)

    @property
    def falling(self) -> list[Seed]:
        return [s for s in self.seeds if s.active]

    # ------------------------------------------------------------------
    # Phase handlers
    # ------------------------------------------------------------------

    def _germinate(self) -> None:
        if self.phase_timer < self.config.timing.germination_frames:
            self.growth_scale = 0.0
        else:
            self._enter(Phase.LEAF)

    def _leaf(self) -> None:
        if self.phase_timer < self.config.timing.leaf_frames:
            self.growth_scale = self.config.tree.seedling_scale
        else:
            self._enter(Phase.GROWTH)

    def _grow(self) -> None:
        frames = self.config.timing.growth_frames
        if self.phase_timer < frames:
            start = self.config.tree.seedling_scale
            self.growth_scale = start + (self.phase_timer / frames) * (1.0 - start)
        else:
            self.growth_scale = 1.0
            self.show_flowers = True
            self._enter(Phase.FLOWERING)

    def _flower(self) -> None:
        frames = self.config.timing.flowering_frames
        if self.phase_timer < frames:
            self.flower_scale = self.phase_timer / frames
        else:
            self.flower_scale = 1.0
            self._enter(Phase.DISPERSAL)
            self.seeds = [self._ripe_seed()]

    def _disperse(self) -> None:
        settings = self.config.seeds
        floor = self.config.canvas.ground_level + settings.burial_depth
        for seed in self.falling:
            seed.fall(settings.gravity, settings.spin)
            if seed.y >= floor:
                seed.active = False
                seed.y = floor
                self.landing = Point(seed.x, floor)
                logger.debug("Seed landed at x=%.1f", seed.x)

        if not self.falling and self.phase_timer > self.config.timing.dispersal_min_frames:
            self._enter(Phase.RESET)

    def _fade_out(self) -> None:
        frames = self.config.timing.reset_frames
        if self.phase_timer < frames:
            remaining = 1.0 - self.phase_timer / frames
            self.growth_scale = remaining
            self.flower_scale = remaining
        else:
            self.cycle += 1
            logger.info("Cycle %d complete after %d frames", self.cycle, self.frame)
            self._start_cycle(Point(*self.config.seed_home))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _enter(self, phase: Phase) -> None:
        logger.debug("Phase %s -> %s at frame %d", self.phase, phase, self.frame)
        self.phase = phase
        self.phase_timer = 0

    def _start_cycle(self, site: Point) -> None:
        self._enter(Phase.GERMINATION)
        self.growth_scale = 0.0
        self.flower_scale = 0.0
        self.show_flowers = False
        self.seeds = []
        self.landing = None
        self.seed_position = site

    def _ripe_seed(self) -> Seed:
        """Detach one seed from a flower on the crown."""
        return Seed(
            x=self.seed_position.x + DROP_OFFSET,
            y=self.config.canvas.ground_level - DROP_HEIGHT,
        )

    def _aim_camera(self) -> None:
        if self.phase is not Phase.DISPERSAL:
            self.camera.release()
            return
        falling = self.falling
        if falling:
            self.camera.follow(falling[0].position)
        elif self.landing is not None:
            self.camera.follow(self.landing)
