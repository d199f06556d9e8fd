"""
One-shot entry point used by the CLI: play(level) runs exactly one round.

play() never raises for the error kinds of a round; it turns them into a
RoundResult with status "error". Whatever happens, the terminal is back in
cooked mode and the input thread was asked to stop when it returns.
"""

import logging
import queue
import sys
import threading
from typing import Optional, TextIO

from .config import JOIN_TIMEOUT_SECONDS
from .errors import HitBlowError, TerminalUnavailable
from .input_source import InputSource
from .round import RoundLoop
from .schemas import RoundResult
from .secret import generate_secret
from .terminal import Renderer, raw_mode
from .types import Level

logger = logging.getLogger(__name__)


def play(level: Level, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> RoundResult:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    try:
        secret = generate_secret(level)
    except HitBlowError as exc:
        logger.info("round not started: %s", exc)
        return RoundResult.failed(exc)

    digits: "queue.Queue[str]" = queue.Queue()
    stop = threading.Event()

    try:
        fd = stdin.fileno()
    except (OSError, ValueError) as exc:
        # io.UnsupportedOperation for streams without a descriptor
        return RoundResult.failed(TerminalUnavailable(details=str(exc)))

    try:
        with raw_mode(fd):
            reader = InputSource.from_fd(fd, digits, stop)
            reader.start()
            logger.debug("round started at level %d", level)
            try:
                return RoundLoop(secret, digits, stop, Renderer(stdout)).run()
            finally:
                stop.set()
                reader.join(JOIN_TIMEOUT_SECONDS)
                if reader.is_alive():
                    logger.warning("input thread did not stop within %.1fs", JOIN_TIMEOUT_SECONDS)
                if reader.closed:
                    logger.debug("stdin closed before the round ended")
    except HitBlowError as exc:
        logger.warning("round aborted: %s", exc)
        return RoundResult.failed(exc)
