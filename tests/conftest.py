"""Shared fixtures for treecycle tests."""

import pytest

from treecycle.canvas import RecordingCanvas
from treecycle.config import AppConfig, CanvasSettings, TimingSettings, TreeSettings
from treecycle.engine import AnimationEngine
from treecycle.render import SceneRenderer


@pytest.fixture
def config() -> AppConfig:
    """Stock configuration: 800x600, 30 fps, depth-8 tree."""
    return AppConfig()


@pytest.fixture
def small_config() -> AppConfig:
    """Tiny canvas, shallow tree and short phases, for fast rendering."""
    return AppConfig(
        canvas=CanvasSettings(width=240, height=180, ground_level=130),
        timing=TimingSettings(
            germination_frames=3,
            leaf_frames=3,
            growth_frames=4,
            flowering_frames=3,
            dispersal_min_frames=2,
            reset_frames=3,
        ),
        tree=TreeSettings(depth=3, trunk_length=40.0),
    )


@pytest.fixture
def engine(config: AppConfig) -> AnimationEngine:
    return AnimationEngine(config)


@pytest.fixture
def renderer(config: AppConfig) -> SceneRenderer:
    return SceneRenderer(config)


@pytest.fixture
def recording(config: AppConfig) -> RecordingCanvas:
    return RecordingCanvas(width=config.canvas.width, height=config.canvas.height)


@pytest.fixture
def advance():
    """Return a helper that steps an engine forward by N updates."""

    def _advance(engine: AnimationEngine, frames: int) -> None:
        for _ in range(frames):
            engine.update()

    return _advance
