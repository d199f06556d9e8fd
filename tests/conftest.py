"""
- Provide a fake clock so countdown tests do not wait for real seconds.
- Provide a digit queue, a stop flag and a renderer writing into memory.
- Provide a make_loop factory that wires them into a RoundLoop.
"""
import io
import queue
import threading

import pytest

from hitblow.round import RoundLoop
from hitblow.terminal import Renderer


class FakeClock:
    """Time only moves when the loop sleeps (or when a test says so)."""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps = 0

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps += 1
        self.now += seconds

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def digits():
    return queue.Queue()


@pytest.fixture
def stop():
    return threading.Event()


@pytest.fixture
def screen():
    return io.StringIO()


@pytest.fixture
def make_loop(clock, digits, stop, screen):
    def _make(secret, keys=""):
        # Pretend the player already typed these keys
        for key in keys:
            digits.put(key)
        return RoundLoop(secret, digits, stop, Renderer(screen), clock=clock, sleep=clock.sleep)
    return _make
