"""Phase strip widget - the life-cycle state machine with the active phase lit."""

from __future__ import annotations

from textual.widgets import Static

from treecycle.models.enums import Phase


class PhaseStrip(Static):
    """One-line strip of all phases plus growth and bloom gauges."""

    DEFAULT_CSS = """
    PhaseStrip {
        height: 1;
        background: #1e1b4b;
        color: #c4b5fd;
        padding: 0 1;
    }
    """

    def __init__(self, *, id: str | None = None) -> None:  # noqa: A002
        super().__init__("", id=id)

    def set_state(self, phase: Phase, growth: float, bloom: float, cycle: int) -> None:
        self.update(render_strip(phase, growth, bloom, cycle))


def render_strip(phase: Phase, growth: float, bloom: float, cycle: int) -> str:
    """Build the console-markup line shown by :class:`PhaseStrip`."""
    nodes = []
    for p in Phase:
        label = p.label.split(" (")[0]
        nodes.append(f"[bold reverse] {label} [/]" if p is phase else f" {label} ")
    chain = "->".join(nodes)
    return f"{chain}  growth {_gauge(growth)}  bloom {_gauge(bloom)}  cycle {cycle}"


def _gauge(value: float, width: int = 8) -> str:
    filled = round(max(0.0, min(1.0, value)) * width)
    return "#" * filled + "." * (width - filled)
