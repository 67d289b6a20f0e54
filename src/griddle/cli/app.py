"""Typer CLI application with demo commands."""

from __future__ import annotations

import logging
import random
import sys
import time
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from typing import Annotated, Iterator, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from griddle.cli.demos import GameOfLife, draw_coordinate_grid, draw_wave_text
from griddle.cli.terminal import Terminal, TerminalSize
from griddle.config import LOG_LEVELS, Settings
from griddle.core.errors import GriddleError
from griddle.display import AnsiTerminalDisplay, TextDisplay
from griddle.frames import FrameLoop
from griddle.screen import Screen

logger = logging.getLogger(__name__)


@dataclass
class CliState:
    """Options shared by all commands."""
    settings: Settings
    plain: bool
    console: Console


def configure_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@contextmanager
def reporting_errors(console: Console) -> Iterator[None]:
    """Turn library errors into a red message and exit status 1."""
    try:
        yield
    except GriddleError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


def _terminal_size(settings: Settings) -> TerminalSize:
    return Terminal.size(TerminalSize(settings.height, settings.width))


@contextmanager
def open_screen(state: CliState) -> Iterator[Screen]:
    """Open a screen on the terminal, or on a text display with ``--plain``.

    In plain mode the final frame is echoed to stdout when the screen closes.
    """
    settings = state.settings
    if state.plain:
        display = TextDisplay(width=settings.width, height=settings.height)
        with Screen(display) as screen:
            yield screen
            text = display.text
        typer.echo(text)
        return

    with ExitStack() as stack:
        stack.enter_context(Terminal.managed_mode())
        display = AnsiTerminalDisplay(
            sys.stdout,
            width=lambda: _terminal_size(settings).cols,
            height=lambda: _terminal_size(settings).rows,
            hide_cursor=settings.hide_cursor,
        )
        screen = stack.enter_context(Screen(display))
        yield screen


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="griddle",
        help="Draw character grids in the terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def main_options(
        ctx: typer.Context,
        log_level: Annotated[Optional[str], typer.Option("--log-level", "-l", help="Logging level (default from GRIDDLE_LOG_LEVEL)")] = None,
        plain: Annotated[bool, typer.Option("--plain", "-p", help="Render plain text to stdout instead of the terminal")] = False,
    ) -> None:
        """Draw character grids in the terminal."""
        try:
            settings = Settings.from_env()
        except GriddleError as e:
            console.print(f"[red]Invalid settings: {e}[/]")
            raise typer.Exit(1)
        level = (log_level or settings.log_level).upper()
        if level not in LOG_LEVELS:
            console.print(f"[red]Unknown log level: {level}[/]")
            raise typer.Exit(1)
        configure_logging(level)
        ctx.obj = CliState(settings=settings, plain=plain, console=console)

    @app.command("fill-grid")
    def fill_grid(ctx: typer.Context) -> None:
        """Fill the screen edges with coordinate digits."""
        state: CliState = ctx.obj
        with reporting_errors(state.console), open_screen(state) as screen:
            draw_coordinate_grid(screen)
            screen.update()
            if not state.plain:
                time.sleep(1)

    @app.command()
    def text(
        ctx: typer.Context,
        message: Annotated[str, typer.Argument(help="Text to animate")] = "Hello World, from griddle!",
        frames: Annotated[int, typer.Option("--frames", "-n", help="Frames to draw (0 = until Ctrl+C)")] = 0,
        fps: Annotated[Optional[int], typer.Option("--fps", help="Frames per second")] = None,
    ) -> None:
        """Animate text as a rainbow wave."""
        state: CliState = ctx.obj

        def draw(screen: Screen, index: int, elapsed: float) -> None:
            draw_wave_text(screen, message, elapsed)

        with reporting_errors(state.console), open_screen(state) as screen:
            loop = FrameLoop(screen, fps if fps is not None else state.settings.fps)
            try:
                loop.run(draw, frames=frames)
            except KeyboardInterrupt:
                logger.info("stopped after %d frames", loop.count)

    @app.command()
    def life(
        ctx: typer.Context,
        seed: Annotated[Optional[int], typer.Option("--seed", "-s", help="Random seed")] = None,
        generations: Annotated[int, typer.Option("--generations", "-g", help="Generations to run (0 = until Ctrl+C)")] = 0,
        fps: Annotated[int, typer.Option("--fps", help="Generations per second")] = 10,
    ) -> None:
        """Run Conway's Game of Life."""
        state: CliState = ctx.obj
        with reporting_errors(state.console), open_screen(state) as screen:
            loop = FrameLoop(screen, fps)
            game = GameOfLife(screen.width, screen.height, random.Random(seed))

            def draw(screen: Screen, index: int, elapsed: float) -> None:
                if index:
                    game.step()
                game.resize(screen.width, screen.height)
                game.draw(screen)

            try:
                loop.run(draw, frames=generations)
            except KeyboardInterrupt:
                logger.info("stopped at generation %d", game.generation)

    @app.command()
    def info(ctx: typer.Context) -> None:
        """Show the detected terminal size and effective settings."""
        state: CliState = ctx.obj
        settings = state.settings
        size = _terminal_size(settings)

        table = Table(title="griddle", show_header=False)
        table.add_column("Setting", style="bold")
        table.add_column("Value")
        table.add_row("Terminal size", f"{size.cols}x{size.rows}")
        table.add_row("Text display size", f"{settings.width}x{settings.height}")
        table.add_row("FPS", str(settings.fps))
        table.add_row("Hide cursor", str(settings.hide_cursor))
        table.add_row("Log level", settings.log_level)
        state.console.print(table)

    return app
