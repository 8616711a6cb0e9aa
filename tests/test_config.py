"""Tests for configuration system."""

import pytest
from pydantic import ValidationError

from treecycle.config import (
    AppConfig,
    CameraSettings,
    CanvasSettings,
    SeedSettings,
    TimingSettings,
    TreeSettings,
    load_config,
)
from treecycle.models import LogLevel


def test_canvas_settings_defaults():
    c = CanvasSettings()
    assert (c.width, c.height) == (800, 600)
    assert c.ground_level == 450
    assert c.center == (400, 300)


def test_timing_settings_defaults():
    t = TimingSettings()
    assert t.fps == 30
    assert t.frame_delay == pytest.approx(1 / 30)
    assert (
        t.germination_frames,
        t.leaf_frames,
        t.growth_frames,
        t.flowering_frames,
        t.dispersal_min_frames,
        t.reset_frames,
    ) == (60, 80, 150, 80, 50, 50)


def test_tree_settings_defaults():
    tree = TreeSettings()
    assert tree.trunk_length == 150
    assert tree.depth == 8
    assert tree.branch_angle == 0.3
    assert tree.length_ratio == 0.7


def test_seed_and_camera_defaults():
    assert SeedSettings().gravity == 0.5
    assert SeedSettings().burial_depth == 80
    camera = CameraSettings()
    assert camera.enabled
    assert camera.max_zoom == 2.0


def test_app_config_defaults():
    config = AppConfig()
    assert config.config_dir.name == ".treecycle"
    assert config.seed == 42
    assert config.seed_home == (400, 530)


def test_load_config_overrides():
    config = load_config(seed=7, tree=TreeSettings(depth=3))
    assert config.seed == 7
    assert config.tree.depth == 3


def test_ground_must_be_inside_frame():
    with pytest.raises(ValidationError, match="ground_level"):
        CanvasSettings(height=400, ground_level=400)


@pytest.mark.parametrize("bad", [0, 11, -1])
def test_tree_depth_rejected(bad: int) -> None:
    with pytest.raises(ValidationError):
        TreeSettings(depth=bad)


@pytest.mark.parametrize("bad", [0, -30, 500])
def test_fps_rejected(bad: int) -> None:
    with pytest.raises(ValidationError):
        TimingSettings(fps=bad)


def test_camera_zoom_cannot_shrink():
    with pytest.raises(ValidationError):
        CameraSettings(max_zoom=0.5)


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TREECYCLE_SEED", "1234")
    monkeypatch.setenv("TREECYCLE_TREE__DEPTH", "5")
    config = AppConfig()
    assert config.seed == 1234
    assert config.tree.depth == 5
    assert config.tree.trunk_length == 150


def test_log_level_validated(monkeypatch: pytest.MonkeyPatch) -> None:
    assert AppConfig(log_level="info").log_level is LogLevel.INFO
    monkeypatch.setenv("TREECYCLE_LOG_LEVEL", "loud")
    with pytest.raises(ValidationError, match="log_level"):
        AppConfig()
