"""Offline rendering pipeline - headless frames to GIF, PNG or sprite sheet."""

from treecycle.pipeline.assembly import assemble_sprite_sheet, save_gif
from treecycle.pipeline.export import ExportError, ExportResult, export_animation

__all__ = [
    "ExportError",
    "ExportResult",
    "assemble_sprite_sheet",
    "export_animation",
    "save_gif",
]
