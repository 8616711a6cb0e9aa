"""CLI entry point using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from treecycle.models.enums import LogLevel

if TYPE_CHECKING:
    from treecycle.config import AppConfig

app = typer.Typer(
    name="treecycle",
    help="Looping procedural animation of a tree's life cycle.",
    no_args_is_help=False,
)


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )


@app.command()
def tui(
    depth: Annotated[
        int | None, typer.Option("--depth", help="Branch recursion depth (1-10)"),
    ] = None,
    seed: Annotated[int | None, typer.Option("--seed", help="Random seed")] = None,
) -> None:
    """Play the animation in the terminal (ESC exits, SPACE restarts)."""
    from treecycle.app import TreeCycleApp

    app_instance = TreeCycleApp(_build_config(depth=depth, seed=seed))
    app_instance.run()


@app.command()
def preview(
    port: Annotated[int, typer.Option("--port", "-p", help="HTTP port")] = 8765,
    ws_port: Annotated[int, typer.Option("--ws-port", help="WebSocket port")] = 8766,
    no_browser: Annotated[
        bool, typer.Option("--no-browser", help="Don't auto-open browser")
    ] = False,
    depth: Annotated[
        int | None, typer.Option("--depth", help="Branch recursion depth (1-10)"),
    ] = None,
) -> None:
    """Play the animation in a browser tab (ESC exits, SPACE restarts)."""
    import asyncio

    from treecycle.preview_server import PreviewServer

    server = PreviewServer(_build_config(depth=depth), http_port=port, ws_port=ws_port)
    typer.echo(f"Preview server at http://localhost:{port}")
    typer.echo("Press ESC in the browser or Ctrl+C here to stop")
    try:
        asyncio.run(server.run(open_browser=not no_browser))
    except KeyboardInterrupt:
        typer.echo("\nStopped.")


@app.command()
def export(
    output: Annotated[
        Path | None,
        typer.Argument(help="Output file (gif/sheet) or directory (png)"),
    ] = None,
    fmt: Annotated[
        str, typer.Option("--format", "-f", help="gif, png or sheet"),
    ] = "gif",
    frames: Annotated[
        int | None,
        typer.Option("--frames", "-n", help="Frames to render (default: one full cycle)"),
    ] = None,
    stride: Annotated[int, typer.Option("--stride", help="Keep every Nth frame")] = 1,
    scale: Annotated[float, typer.Option("--scale", help="Downscale factor (0, 1]")] = 1.0,
    depth: Annotated[
        int | None, typer.Option("--depth", help="Branch recursion depth (1-10)"),
    ] = None,
    seed: Annotated[int | None, typer.Option("--seed", help="Random seed")] = None,
) -> None:
    """Render the animation offline to a GIF, PNG frames or a sprite sheet."""
    from treecycle.pipeline.export import ExportError, export_animation

    config = _build_config(depth=depth, seed=seed)
    target = output or config.output_dir
    try:
        result = export_animation(
            config, target, fmt, frames=frames, stride=stride, scale=scale,
        )
    except ExportError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    w, h = result.frame_size
    typer.echo(f"Exported {result.frame_count} frames ({w}x{h}, {result.format}) to {result.output}")


@app.command()
def phases() -> None:
    """Print the life-cycle phases and their frame budgets."""
    from treecycle.engine.loop import AnimationLoop
    from treecycle.models.enums import Phase

    config = _build_config()
    timing = config.timing
    budgets = {
        Phase.GERMINATION: str(timing.germination_frames),
        Phase.LEAF: str(timing.leaf_frames),
        Phase.GROWTH: str(timing.growth_frames),
        Phase.FLOWERING: str(timing.flowering_frames),
        Phase.DISPERSAL: f">{timing.dispersal_min_frames} (until the seed lands)",
        Phase.RESET: str(timing.reset_frames),
    }
    for phase in Phase:
        typer.echo(f"{phase.title:<30} {budgets[phase]}")

    total = AnimationLoop(config).cycle_length()
    typer.echo(f"Full cycle: {total} frames ({total / timing.fps:.1f}s at {timing.fps} fps)")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool, typer.Option("--version", "-v", help="Show version")
    ] = False,
    log_level: Annotated[
        LogLevel | None,
        typer.Option("--log-level", case_sensitive=False, help="Logging verbosity"),
    ] = None,
) -> None:
    """treecycle - looping procedural animation of a tree's life cycle."""
    if version:
        from treecycle import __version__

        typer.echo(f"treecycle {__version__}")
        raise typer.Exit()

    _configure_logging(log_level or _build_config().log_level)
    if ctx.invoked_subcommand is None:
        # Default to TUI when no subcommand
        from treecycle.app import TreeCycleApp

        app_instance = TreeCycleApp(_build_config())
        app_instance.run()


def _build_config(*, depth: int | None = None, seed: int | None = None) -> AppConfig:
    """Load config and apply command-line overrides, exiting on invalid values."""
    from pydantic import ValidationError

    from treecycle.config import TreeSettings, load_config

    try:
        config = load_config()
        if depth is not None:
            config.tree = TreeSettings(**{**config.tree.model_dump(), "depth": depth})
        if seed is not None:
            config.seed = seed
    except ValidationError as e:
        typer.echo(f"Error: invalid configuration\n{e}", err=True)
        raise typer.Exit(1) from None
    return config

