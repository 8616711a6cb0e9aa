"""Tests for the headless export pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from PIL import Image

from treecycle.engine.loop import AnimationLoop
from treecycle.models import ExportFormat, palette
from treecycle.pipeline.export import (
    DEFAULT_GIF_NAME,
    DEFAULT_SHEET_NAME,
    ExportError,
    export_animation,
)

if TYPE_CHECKING:
    from pathlib import Path

    from treecycle.config import AppConfig


def test_export_gif_to_file(small_config: AppConfig, tmp_path: Path):
    output = tmp_path / "cycle.gif"
    result = export_animation(small_config, output, "gif", frames=5)

    assert result.format is ExportFormat.GIF
    assert result.output == output
    assert result.frame_count == 5
    assert result.frame_size == (240, 180)
    gif = Image.open(output)
    assert gif.format == "GIF"
    assert gif.size == (240, 180)


def test_export_gif_into_directory(small_config: AppConfig, tmp_path: Path):
    result = export_animation(small_config, tmp_path / "out", frames=2)
    assert result.output == tmp_path / "out" / DEFAULT_GIF_NAME
    assert result.output.exists()


def test_export_png_frames(small_config: AppConfig, tmp_path: Path):
    out_dir = tmp_path / "frames"
    result = export_animation(small_config, out_dir, ExportFormat.PNG, frames=4)

    assert result.frame_count == 4
    assert [p.name for p in result.files] == [f"frame_{i:04d}.png" for i in range(4)]
    first = Image.open(result.files[0]).convert("RGB")
    assert first.size == (240, 180)
    # Top-left corner is open sky.
    assert first.getpixel((0, 0)) == palette.SKY_BLUE


def test_export_png_refuses_file_target(small_config: AppConfig, tmp_path: Path):
    target = tmp_path / "taken.png"
    target.write_bytes(b"")
    with pytest.raises(ExportError, match="directory"):
        export_animation(small_config, target, "png", frames=1)


def test_export_sheet_with_stride_and_scale(small_config: AppConfig, tmp_path: Path):
    result = export_animation(
        small_config, tmp_path, "sheet", frames=6, stride=2, scale=0.5,
    )
    assert result.output == tmp_path / DEFAULT_SHEET_NAME
    assert result.frame_count == 3
    assert result.frame_size == (120, 90)
    assert Image.open(result.output).size == (120 * 3, 90)


def test_export_defaults_to_one_cycle(small_config: AppConfig, tmp_path: Path):
    cycle = AnimationLoop(small_config).cycle_length()
    result = export_animation(small_config, tmp_path, "png", stride=cycle)
    assert result.frame_count == 1


def test_export_reports_progress(small_config: AppConfig, tmp_path: Path):
    calls: list[tuple[int, int]] = []
    export_animation(
        small_config, tmp_path, "png", frames=3,
        progress_callback=lambda n, total: calls.append((n, total)),
    )
    assert calls == [(1, 3), (2, 3), (3, 3)]


@pytest.mark.parametrize(
    ("kwargs", "match"),
    [
        ({"fmt": "mp4"}, "unknown export format"),
        ({"frames": 0}, "frames must be positive"),
        ({"stride": 0}, "stride"),
        ({"scale": 0.0}, "scale"),
        ({"scale": 1.5}, "scale"),
    ],
)
def test_export_rejects_bad_arguments(
    small_config: AppConfig, tmp_path: Path, kwargs: dict, match: str,
):
    with pytest.raises(ExportError, match=match):
        export_animation(small_config, tmp_path, **kwargs)


def test_export_error_is_value_error():
    assert issubclass(ExportError, ValueError)


def test_oversized_sheet_rejected_before_rendering(config: AppConfig, tmp_path: Path):
    with pytest.raises(ExportError, match="too large"):
        export_animation(config, tmp_path, "sheet")
    assert not (tmp_path / DEFAULT_SHEET_NAME).exists()
