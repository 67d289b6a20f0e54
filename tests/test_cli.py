"""Tests for the CLI demos (plain-text mode)."""

import random

import pytest
from typer.testing import CliRunner

from griddle.cli.app import create_app
from griddle.cli.demos import GameOfLife, draw_coordinate_grid, draw_wave_text
from griddle.core.buffer import WritableBuffer


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    monkeypatch.setenv("GRIDDLE_WIDTH", "12")
    monkeypatch.setenv("GRIDDLE_HEIGHT", "4")
    monkeypatch.delenv("GRIDDLE_LOG_LEVEL", raising=False)
    return CliRunner()


class TestCommands:
    """Tests for CLI commands."""

    def test_fill_grid(self, runner: CliRunner) -> None:
        result = runner.invoke(create_app(), ["--plain", "fill-grid"])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "012345678901",
            "1           ",
            "2           ",
            "3           ",
        ]

    def test_text(self, runner: CliRunner) -> None:
        result = runner.invoke(
            create_app(), ["--plain", "text", "hey", "--frames", "2", "--fps", "1000"]
        )
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert len(lines) == 4
        assert all(len(line) == 12 for line in lines)
        assert "h" in result.output

    def test_life(self, runner: CliRunner) -> None:
        result = runner.invoke(
            create_app(),
            ["--plain", "life", "--seed", "7", "--generations", "3", "--fps", "1000"],
        )
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert len(lines) == 4
        assert all(len(line) == 12 for line in lines)
        assert set("".join(lines)) <= {" ", "█"}

    def test_life_zero_fps_is_reported(self, runner: CliRunner) -> None:
        result = runner.invoke(
            create_app(), ["--plain", "life", "--fps", "0", "--generations", "1"]
        )
        assert result.exit_code == 1
        assert "fps must be > 0" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_text_negative_fps_is_reported(self, runner: CliRunner) -> None:
        result = runner.invoke(
            create_app(), ["--plain", "text", "--fps", "-5", "--frames", "1"]
        )
        assert result.exit_code == 1
        assert "fps must be > 0" in result.output

    def test_negative_generations_is_reported(self, runner: CliRunner) -> None:
        result = runner.invoke(
            create_app(), ["--plain", "life", "--generations", "-2"]
        )
        assert result.exit_code == 1
        assert "frames must be >= 0" in result.output

    def test_info(self, runner: CliRunner) -> None:
        result = runner.invoke(create_app(), ["info"])
        assert result.exit_code == 0, result.output
        assert "12x4" in result.output

    def test_invalid_settings(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GRIDDLE_FPS", "fast")
        result = runner.invoke(create_app(), ["info"])
        assert result.exit_code == 1
        assert "GRIDDLE_FPS" in result.output

    def test_invalid_log_level(self, runner: CliRunner) -> None:
        result = runner.invoke(create_app(), ["--log-level", "loud", "info"])
        assert result.exit_code == 1


class TestDemos:
    """Tests for the demo drawing functions."""

    def test_coordinate_grid(self) -> None:
        buffer = WritableBuffer(3, 2)
        draw_coordinate_grid(buffer)
        assert buffer.to_debug_string() == "012\n1  \n"

    def test_wave_text_places_every_character(self) -> None:
        buffer = WritableBuffer(20, 9)
        draw_wave_text(buffer, "abc", 0.0)
        text = buffer.to_debug_string()
        assert all(c in text for c in "abc")
        assert all(cell.foreground is not None for _, _, cell in buffer.cells() if cell.char != " ")

    def test_life_blinker(self) -> None:
        game = GameOfLife(5, 5, random.Random(0))
        game.living = [False] * 25
        for x in (1, 2, 3):
            game.living[2 * 5 + x] = True
        game.step()
        alive = {(x, y) for y in range(5) for x in range(5) if game.is_alive(x, y)}
        assert alive == {(2, 1), (2, 2), (2, 3)}
        assert game.generation == 1

    def test_life_wraps_around(self) -> None:
        game = GameOfLife(4, 4, random.Random(0))
        game.living = [False] * 16
        game.living[0] = True
        assert game.live_neighbors(3, 3) == 1

    def test_life_draw_and_resize(self) -> None:
        game = GameOfLife(2, 2, random.Random(0))
        game.living = [True, False, False, True]
        game.resize(3, 2)
        buffer = WritableBuffer(3, 2)
        game.draw(buffer)
        assert buffer.get(0, 0) == GameOfLife.ALIVE
        assert buffer.get(2, 0) == GameOfLife.EMPTY
        assert buffer.get(1, 1) == GameOfLife.ALIVE
