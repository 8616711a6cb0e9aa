"""Sprite sheet and animated GIF assembly with Pillow."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PIL import Image

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def assemble_sprite_sheet(
    frames: list[Image.Image],
    output: Path,
    frame_size: tuple[int, int],
) -> Path:
    """Combine rendered frames into a single-row sprite sheet.

    Parameters
    ----------
    frames:
        Ordered list of frame images.
    output:
        Path where the assembled sheet will be saved.
    frame_size:
        ``(width, height)`` of each cell.  Frames are resized to this size if
        they do not already match.

    Returns
    -------
    Path
        The *output* path, for chaining convenience.
    """
    if not frames:
        msg = "No frames provided for sprite sheet assembly"
        raise ValueError(msg)

    fw, fh = frame_size
    n = len(frames)
    sheet_w, sheet_h = fw * n, fh
    sheet = Image.new("RGBA", (sheet_w, sheet_h), (0, 0, 0, 0))

    for idx, frame in enumerate(frames):
        img = frame.convert("RGBA")
        if img.size != (fw, fh):
            img = img.resize((fw, fh), Image.Resampling.LANCZOS)

        sheet.paste(img, (idx * fw, 0), img)

    output.parent.mkdir(parents=True, exist_ok=True)
    sheet.save(output, "PNG")
    logger.info(
        "Assembled sprite sheet: %s (%d frames, %dx%d)",
        output, n, sheet_w, sheet_h,
    )
    return output


def save_gif(
    frames: list[Image.Image], output: Path, *, duration_ms: int, loop: int = 0,
) -> Path:
    """Write *frames* as an animated GIF, *duration_ms* per frame (``loop=0`` repeats forever)."""
    if not frames:
        msg = "No frames provided for GIF assembly"
        raise ValueError(msg)

    output.parent.mkdir(parents=True, exist_ok=True)
    first, *rest = frames
    first.save(
        output,
        "GIF",
        save_all=True,
        append_images=rest,
        duration=duration_ms,
        loop=loop,
        optimize=False,
    )
    logger.info("Wrote GIF: %s (%d frames, %d ms each)", output, len(frames), duration_ms)
    return output
