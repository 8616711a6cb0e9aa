"""Render the animation headlessly and write it to disk."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, TypeAlias

from PIL import Image

from treecycle.canvas.pillow_canvas import PillowCanvas
from treecycle.engine.loop import AnimationLoop
from treecycle.models import palette
from treecycle.models.enums import ExportFormat
from treecycle.pipeline.assembly import assemble_sprite_sheet, save_gif

if TYPE_CHECKING:
    from treecycle.config import AppConfig

logger = logging.getLogger(__name__)

# Callback type for export progress updates
ProgressCallback: TypeAlias = Callable[[int, int], None]  # (frame, total)

DEFAULT_GIF_NAME = "treecycle.gif"
DEFAULT_SHEET_NAME = "treecycle_sheet.png"
# Sheets bigger than this are refused; use a stride or scale instead.
MAX_SHEET_PIXELS = 64_000_000


class ExportError(ValueError):
    """Raised when export arguments are invalid."""


@dataclass
class ExportResult:
    """What an export wrote."""

    format: ExportFormat
    output: Path
    frame_count: int
    frame_size: tuple[int, int]
    files: list[Path] = field(default_factory=list)


def export_animation(
    config: AppConfig,
    output: Path,
    fmt: ExportFormat | str = ExportFormat.GIF,
    *,
    frames: int | None = None,
    stride: int = 1,
    scale: float = 1.0,
    progress_callback: ProgressCallback | None = None,
) -> ExportResult:
    """Render *frames* frames (default: one full life cycle) and save them.

    Parameters
    ----------
    config:
        Application config; canvas size, timings and tree shape come from it.
    output:
        For ``gif`` and ``sheet`` a file path, or a directory to place the
        default file name in.  For ``png`` the directory that receives
        ``frame_0000.png`` and onward.
    fmt:
        One of :class:`ExportFormat`.
    frames:
        Number of frames to simulate.  ``None`` means exactly one cycle.
    stride:
        Keep every *stride*-th simulated frame.
    scale:
        Downscale factor in ``(0, 1]`` applied to each kept frame.
    """
    try:
        fmt = ExportFormat(fmt)
    except ValueError:
        choices = ", ".join(f.value for f in ExportFormat)
        msg = f"unknown export format {fmt!r} (choose from {choices})"
        raise ExportError(msg) from None
    if frames is not None and frames <= 0:
        msg = "frames must be positive"
        raise ExportError(msg)
    if stride < 1:
        msg = "stride must be at least 1"
        raise ExportError(msg)
    if not 0.0 < scale <= 1.0:
        msg = "scale must be in (0, 1]"
        raise ExportError(msg)

    size = (
        max(1, round(config.canvas.width * scale)),
        max(1, round(config.canvas.height * scale)),
    )
    canvas = PillowCanvas(config.canvas.width, config.canvas.height, palette.SKY_BLUE)
    loop = AnimationLoop(config, canvas)
    total = frames if frames is not None else loop.cycle_length()

    kept_count = (total + stride - 1) // stride
    if fmt is ExportFormat.SHEET and kept_count * size[0] * size[1] > MAX_SHEET_PIXELS:
        msg = (
            f"sprite sheet of {kept_count} frames at {size[0]}x{size[1]} is too large; "
            "raise --stride or lower --scale"
        )
        raise ExportError(msg)

    logger.info("Rendering %d frames (%s, stride %d, scale %.2f)", total, fmt, stride, scale)
    captured: list[Image.Image] = []
    for n in loop.frames(total):
        if (n - 1) % stride == 0:
            frame = canvas.snapshot()
            if frame.size != size:
                frame = frame.resize(size, Image.Resampling.LANCZOS)
            captured.append(frame)
        if progress_callback:
            progress_callback(n, total)

    if fmt is ExportFormat.GIF:
        target = _as_file(output, ".gif", DEFAULT_GIF_NAME)
        duration = round(1000 * stride / config.timing.fps)
        files = [save_gif(captured, target, duration_ms=duration)]
    elif fmt is ExportFormat.SHEET:
        target = _as_file(output, ".png", DEFAULT_SHEET_NAME)
        files = [assemble_sprite_sheet(captured, target, size)]
    else:
        target = output
        files = _write_png_frames(captured, output)

    logger.info("Export complete -> %s", target)
    return ExportResult(
        format=fmt, output=target, frame_count=len(captured), frame_size=size, files=files,
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _as_file(output: Path, suffix: str, default_name: str) -> Path:
    """Treat *output* as a file if it has *suffix*, else as a directory."""
    if output.suffix.lower() == suffix:
        return output
    return output / default_name


def _write_png_frames(frames: list[Image.Image], directory: Path) -> list[Path]:
    if directory.exists() and not directory.is_dir():
        msg = f"PNG export needs a directory, but {directory} is a file"
        raise ExportError(msg)
    directory.mkdir(parents=True, exist_ok=True)
    paths: list[Path] = []
    for idx, frame in enumerate(frames):
        path = directory / f"frame_{idx:04d}.png"
        frame.save(path, "PNG")
        paths.append(path)
    logger.info("Wrote %d PNG frames to %s", len(paths), directory)
    return paths
