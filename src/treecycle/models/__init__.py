"""treecycle data models - enums, palette and per-frame state, no I/O."""

from treecycle.models.enums import Action, ExportFormat, Key, LogLevel, Phase
from treecycle.models.palette import Color
from treecycle.models.state import Point, Seed

__all__ = [
    "Action",
    "Color",
    "ExportFormat",
    "Key",
    "LogLevel",
    "Phase",
    "Point",
    "Seed",
]
