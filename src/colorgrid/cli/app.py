"""Typer CLI application."""

from __future__ import annotations

import logging
from typing import Annotated, Optional, TextIO

import typer

from colorgrid.cli.core.input import InputReader
from colorgrid.cli.core.terminal import Terminal, TerminalError
from colorgrid.cli.decode import decode_colors
from colorgrid.cli.log import setup_logging
from colorgrid.config import DEFAULT_FPS, DEFAULT_LOG_LEVEL, DEFAULT_ROUNDING, Settings
from colorgrid.explore.selection import SavedColors
from colorgrid.explore.session import ExplorerSession
from colorgrid.explore.state import InteractionState

logger = logging.getLogger(__name__)


def run_explorer(settings: Settings) -> int:
    """Run the interactive explorer, then list saved colors. Returns the exit status."""
    terminal = Terminal(truecolor=settings.truecolor)
    state = InteractionState(rounding=settings.rounding)
    try:
        with terminal.session() as wake_fd:
            session = ExplorerSession(terminal, InputReader(wake_fd=wake_fd), state, fps=settings.fps)
            try:
                session.run()
            except KeyboardInterrupt:
                logger.debug("Interrupted")
    except TerminalError as e:
        logger.error("Terminal error: %s", e)
        return 1
    return report_saved(session.saved)


def report_saved(saved: SavedColors, out: Optional[TextIO] = None) -> int:
    """List saved colors in the order they were clicked. Returns the exit status."""
    if not saved:
        logger.info("Exiting, no colors saved.")
        return 0
    print("Exiting. Saved colors:", file=out)
    for description in saved:
        print(f"  {description}", file=out)
    print(file=out)
    return 0


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="colorgrid",
        help="Explore terminal colors interactively, or decode color strings.",
        add_completion=False,
        rich_markup_mode="rich",
    )

    @app.command()
    def explore(
        colors: Annotated[
            Optional[list[str]],
            typer.Argument(help="Colors to decode; none starts the interactive explorer"),
        ] = None,
        fps: Annotated[float, typer.Option("--fps", help="Maximum full repaints per second")] = DEFAULT_FPS,
        truecolor: Annotated[
            Optional[bool],
            typer.Option(
                "--truecolor/--no-truecolor",
                help="Use 24-bit color instead of 256 colors (default: on if COLORTERM says so)",
            ),
        ] = None,
        rounding: Annotated[
            int,
            typer.Option("--rounding", help="Digits to round HSL/OKLCH values to (negative for full precision)"),
        ] = DEFAULT_ROUNDING,
        log_level: Annotated[str, typer.Option("--log-level", help="Logging level")] = DEFAULT_LOG_LEVEL,
    ) -> None:
        """Explore or decode colors."""
        settings = Settings.from_options(fps=fps, truecolor=truecolor, rounding=rounding, log_level=log_level)
        setup_logging(settings.log_level)
        if settings.truecolor:
            logger.info("Using 24 bits true color")
        else:
            logger.info("Using 256 colors")

        if colors:
            raise typer.Exit(decode_colors(colors, settings.rounding, settings.truecolor))
        raise typer.Exit(run_explorer(settings))

    return app
