"""treecycle - Textual TUI window that plays the animation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from treecycle.canvas.pillow_canvas import PillowCanvas
from treecycle.config import load_config
from treecycle.engine.loop import AnimationLoop
from treecycle.models import palette
from treecycle.models.enums import Action
from treecycle.widgets import CanvasView, PhaseStrip

if TYPE_CHECKING:
    from textual.binding import BindingType
    from textual.timer import Timer

    from treecycle.config import AppConfig

logger = logging.getLogger(__name__)


class TreeCycleApp(App[None]):
    """Plays the life cycle in the terminal.  ESC exits, SPACE restarts."""

    TITLE = "treecycle"

    CSS = """
    Screen {
        background: #0f0b1e;
    }

    Header {
        background: #7c3aed;
        color: #f5f3ff;
        dock: top;
        height: 1;
    }

    Footer {
        background: #1e1b4b;
        color: #c4b5fd;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("escape", "exit_animation", "Exit", show=True),
        Binding("space", "restart", "Restart", show=True),
    ]

    def __init__(self, config: AppConfig | None = None) -> None:
        super().__init__()
        self.config = config or load_config()
        self.canvas = PillowCanvas(
            self.config.canvas.width, self.config.canvas.height, palette.SKY_BLUE,
        )
        self.loop = AnimationLoop(self.config, self.canvas)
        self._ticker: Timer | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield CanvasView(id="canvas")
        yield PhaseStrip(id="phases")
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = self.config.canvas.title
        self._ticker = self.set_interval(self.config.timing.frame_delay, self.tick)

    def tick(self) -> None:
        """Advance one frame and push it to the widgets."""
        self.loop.step()
        engine = self.loop.engine
        self.query_one(CanvasView).show(self.canvas.front)
        self.query_one(PhaseStrip).set_state(
            engine.phase, engine.growth_scale, engine.flower_scale, engine.cycle,
        )

    # ── Actions ──────────────────────────────────────────────
    def action_restart(self) -> None:
        self.loop.handle_key("space")

    def action_exit_animation(self) -> None:
        if self.loop.handle_key("escape") is Action.QUIT:
            if self._ticker is not None:
                self._ticker.stop()
            self.exit()


def run(config: AppConfig | None = None) -> None:
    """CLI entry point."""
    app = TreeCycleApp(config)
    app.run()


if __name__ == "__main__":
    run()
