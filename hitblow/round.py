"""
The interactive round.

One RoundLoop owns everything that changes while the player types: the
clock anchor, the entry buffer, the attempt counter. Each tick it
1) checks the per-guess countdown, 2) pulls digits the input thread queued,
3) redraws the status line, 4) scores a complete guess, 5) sleeps a little.
"""

import logging
import queue
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .config import COUNTDOWN_SECONDS, TICK_SECONDS
from .engine import is_win, score_guess
from .schemas import GuessFeedback, RoundResult
from .terminal import Renderer
from .types import Code, Digit

logger = logging.getLogger(__name__)


@dataclass
class RoundState:
    secret: Code
    anchor: float
    attempts: int = 0
    entered: List[Digit] = field(default_factory=list)

    @property
    def level(self) -> int:
        return len(self.secret)

    @property
    def missing(self) -> int:
        return self.level - len(self.entered)


class RoundLoop:
    def __init__(
        self,
        secret: Code,
        digits: "queue.Queue[str]",
        stop: threading.Event,
        renderer: Renderer,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        budget: int = COUNTDOWN_SECONDS,
        tick: float = TICK_SECONDS,
    ) -> None:
        self.digits = digits
        self.stop = stop
        self.renderer = renderer
        self.clock = clock
        self.sleep = sleep
        self.budget = budget
        self.tick_seconds = tick
        self.state = RoundState(secret=list(secret), anchor=clock())

    def remaining(self, now: float) -> int:
        # whole seconds, like a wall clock countdown: 10, 09, ... 01, then out
        elapsed = int(now - self.state.anchor)
        return max(0, self.budget - elapsed)

    def drain(self) -> None:
        """Move queued digits into the buffer, never past the level."""
        while self.state.missing > 0:
            try:
                key = self.digits.get_nowait()
            except queue.Empty:
                return
            self.state.entered.append(int(key))

    def step(self) -> Optional[RoundResult]:
        """Run one tick. Returns the result once the round is over."""
        state = self.state
        now = self.clock()
        remaining = self.remaining(now)
        if remaining == 0:
            self.renderer.flush()
            self.stop.set()
            logger.debug("time is up after %d incorrect guesses", state.attempts)
            return RoundResult.lost()

        self.drain()
        self.renderer.status(remaining, state.missing, state.entered)

        if state.missing == 0:
            if is_win(state.secret, state.entered):
                self.renderer.win(state.attempts)
                self.stop.set()
                logger.debug("won after %d incorrect guesses", state.attempts)
                return RoundResult.won(state.attempts)

            hits, blows = score_guess(state.secret, state.entered)
            state.attempts += 1
            logger.debug("guess %d scored %d hits, %d blows", state.attempts, hits, blows)
            self.renderer.feedback(GuessFeedback(hits=hits, blows=blows))

            # fresh countdown for the next guess
            state.anchor = now
            state.entered.clear()
        return None

    def run(self) -> RoundResult:
        try:
            while True:
                result = self.step()
                if result is not None:
                    return result
                self.sleep(self.tick_seconds)
        finally:
            # also covers a render failure half way through a tick
            self.stop.set()
