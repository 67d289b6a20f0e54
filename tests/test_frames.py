"""Tests for the frame loop."""

import pytest

from griddle.core.errors import InvalidArgumentError
from griddle.display.recording import RecordingDisplay
from griddle.frames import FrameLoop
from griddle.screen import Screen


class FakeClock:
    """A clock that only moves when slept on or advanced."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def screen() -> Screen:
    return Screen(RecordingDisplay(4, 2))


def make_loop(screen: Screen, clock: FakeClock, fps: float = 10) -> FrameLoop:
    return FrameLoop(screen, fps, clock=clock, sleep=clock.sleep)


class TestFrameLoop:
    """Tests for FrameLoop."""

    @pytest.mark.parametrize("fps", [0, -5])
    def test_rejects_non_positive_fps(self, screen: Screen, fps: int) -> None:
        with pytest.raises(InvalidArgumentError):
            FrameLoop(screen, fps)

    def test_rejects_negative_frames(self, screen: Screen, clock: FakeClock) -> None:
        with pytest.raises(InvalidArgumentError):
            make_loop(screen, clock).run(lambda s, i, t: None, frames=-1)

    def test_renders_each_frame(self, screen: Screen, clock: FakeClock) -> None:
        drawn = []

        def draw(s: Screen, index: int, elapsed: float) -> None:
            s.print_text(str(index), 0, 0)
            drawn.append((index, elapsed))

        assert make_loop(screen, clock).run(draw, frames=3) == 3
        assert [i for i, _ in drawn] == [0, 1, 2]
        assert [t for _, t in drawn] == pytest.approx([0.0, 0.1, 0.2])
        display = screen.display
        assert display.count("flush") == 3
        assert display.text().endswith("2   \n    ")

    def test_sleeps_between_frames_only(self, screen: Screen, clock: FakeClock) -> None:
        make_loop(screen, clock, fps=20).run(lambda s, i, t: None, frames=3)
        assert clock.sleeps == pytest.approx([0.05, 0.05])

    def test_sleep_accounts_for_draw_time(self, screen: Screen, clock: FakeClock) -> None:
        def slow(s: Screen, index: int, elapsed: float) -> None:
            clock.now += 0.03

        make_loop(screen, clock).run(slow, frames=3)
        assert clock.sleeps == pytest.approx([0.07, 0.07])

    def test_late_frames_resync(self, screen: Screen, clock: FakeClock) -> None:
        def too_slow(s: Screen, index: int, elapsed: float) -> None:
            clock.now += 0.25

        make_loop(screen, clock).run(too_slow, frames=4)
        assert clock.sleeps == []

    def test_follows_display_size(self, clock: FakeClock) -> None:
        display = RecordingDisplay(4, 2)
        screen = Screen(display)
        sizes = []

        def draw(s: Screen, index: int, elapsed: float) -> None:
            sizes.append((s.width, s.height))
            display.width_value = 6

        make_loop(screen, clock).run(draw, frames=2)
        assert sizes == [(4, 2), (6, 2)]

    def test_count_survives_interrupt(self, screen: Screen, clock: FakeClock) -> None:
        def draw(s: Screen, index: int, elapsed: float) -> None:
            if index == 2:
                raise KeyboardInterrupt

        loop = make_loop(screen, clock)
        with pytest.raises(KeyboardInterrupt):
            loop.run(draw)
        assert loop.count == 2
