"""Enumerations used throughout treecycle."""

from __future__ import annotations

from enum import StrEnum


class Phase(StrEnum):
    """Stages of the tree life cycle, in playback order."""

    GERMINATION = "germination"
    LEAF = "leaf"
    GROWTH = "growth"
    FLOWERING = "flowering"
    DISPERSAL = "dispersal"
    RESET = "reset"

    @property
    def index(self) -> int:
        return list(Phase).index(self)

    @property
    def label(self) -> str:
        return _PHASE_LABELS[self]

    @property
    def title(self) -> str:
        """HUD caption, e.g. ``"Phase 3: Tree Growth"``."""
        return f"Phase {self.index + 1}: {self.label}"

    def next(self) -> Phase:
        phases = list(Phase)
        return phases[(self.index + 1) % len(phases)]


_PHASE_LABELS: dict[Phase, str] = {
    Phase.GERMINATION: "Seed Germination",
    Phase.LEAF: "Seedling (Leaves)",
    Phase.GROWTH: "Tree Growth",
    Phase.FLOWERING: "Flowering",
    Phase.DISPERSAL: "Seed Dispersal",
    Phase.RESET: "Cycle Reset",
}


class Key(StrEnum):
    ESCAPE = "escape"
    SPACE = "space"


class Action(StrEnum):
    QUIT = "quit"
    RESTART = "restart"
    NONE = "none"


class ExportFormat(StrEnum):
    GIF = "gif"
    PNG = "png"
    SHEET = "sheet"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
