"""Frame driver: keyboard handling plus update -> render -> present."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from treecycle.canvas.pillow_canvas import PillowCanvas
from treecycle.engine.animation import AnimationEngine
from treecycle.models import palette
from treecycle.models.enums import Action, Key
from treecycle.render.scene import SceneRenderer

if TYPE_CHECKING:
    from collections.abc import Iterator

    from treecycle.canvas.base import Canvas
    from treecycle.config import AppConfig

logger = logging.getLogger(__name__)

# Key names as reported by Textual, browsers and raw terminals.
_KEY_ALIASES: dict[str, Key] = {
    "escape": Key.ESCAPE,
    "esc": Key.ESCAPE,
    "\x1b": Key.ESCAPE,
    "space": Key.SPACE,
    " ": Key.SPACE,
}

_KEY_ACTIONS: dict[Key, Action] = {
    Key.ESCAPE: Action.QUIT,
    Key.SPACE: Action.RESTART,
}

# Safety stop for cycle_length() with pathological settings.
MAX_CYCLE_FRAMES = 100_000


def parse_key(name: str) -> Key | None:
    """Normalise a key name from any front-end, or ``None`` if unbound."""
    return _KEY_ALIASES.get(name if name in _KEY_ALIASES else name.lower())


class AnimationLoop:
    """Owns the engine, renderer and canvas, and steps them together."""

    def __init__(
        self,
        config: AppConfig,
        canvas: Canvas | None = None,
        *,
        engine: AnimationEngine | None = None,
        renderer: SceneRenderer | None = None,
    ) -> None:
        self.config = config
        self.canvas: Canvas = canvas or PillowCanvas(
            config.canvas.width, config.canvas.height, palette.SKY_BLUE,
        )
        self.engine = engine or AnimationEngine(config)
        self.renderer = renderer or SceneRenderer(config)

    def handle_key(self, name: str) -> Action:
        """Apply a key press.  The caller exits on :attr:`Action.QUIT`."""
        key = parse_key(name)
        action = _KEY_ACTIONS.get(key, Action.NONE) if key is not None else Action.NONE
        if action is Action.RESTART:
            self.engine.reset_animation()
        elif action is Action.QUIT:
            logger.info("Exit requested")
        return action

    def step(self) -> None:
        """Advance one frame and present it."""
        self.engine.update()
        self.renderer.render(self.engine, self.canvas)
        self.canvas.present()

    def frames(self, count: int) -> Iterator[int]:
        """Step *count* frames, yielding the frame number after each."""
        for _ in range(count):
            self.step()
            yield self.engine.frame

    def cycle_length(self) -> int:
        """Number of frames one full life cycle takes with this config.

        Runs a throwaway engine, so the loop's own state is untouched.
        """
        probe = AnimationEngine(self.config)
        while probe.cycle == 0:
            probe.update()
            if probe.frame > MAX_CYCLE_FRAMES:
                msg = f"life cycle did not complete within {MAX_CYCLE_FRAMES} frames"
                raise RuntimeError(msg)
        return probe.frame
