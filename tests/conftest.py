import random
from typing import Callable, List

import pytest

from udaan_puzzles.core import SessionController
from udaan_puzzles.puzzle import PuzzleCatalog, PuzzleGenerator


class ManualTickTimer:
    """Stand-in for QtTickTimer that only fires when the test says so."""

    def __init__(self, callback: Callable[[], None]):
        self.callback = callback
        self.running = False
        self.cancelled = False

    def start(self):
        self.running = True

    def stop(self):
        self.running = False

    def cancel(self):
        self.running = False
        self.cancelled = True

    def is_active(self):
        return self.running and not self.cancelled

    def fire(self, times: int = 1):
        for _ in range(times):
            self.callback()


class HostRecorder:
    """Collects the two outbound host notifications."""

    def __init__(self):
        self.scores: List[int] = []
        self.completions: List[int] = []

    def on_score_update(self, score: int):
        self.scores.append(score)

    def on_game_complete(self, final_score: int):
        self.completions.append(final_score)


@pytest.fixture(scope="session")
def catalog():
    return PuzzleCatalog()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def generator(catalog, rng):
    return PuzzleGenerator(catalog=catalog, rng=rng)


@pytest.fixture
def timers():
    return []


@pytest.fixture
def timer_factory(timers):
    def factory(callback):
        timer = ManualTickTimer(callback)
        timers.append(timer)
        return timer
    return factory


@pytest.fixture
def make_session(generator, timer_factory):
    """
    Builds a started SessionController wired to a HostRecorder.

    Pass instance=... to replace generation with a fixed puzzle.
    """
    def _make(kind, instance=None, start=True):
        host = HostRecorder()
        if instance is not None:
            generator.generate = lambda requested_kind: instance
        controller = SessionController(
            kind,
            on_score_update=host.on_score_update,
            on_game_complete=host.on_game_complete,
            generator=generator,
            timer_factory=timer_factory,
        )
        if start:
            controller.start()
        return controller, host
    return _make
