"""
Terminal helpers
- raw_mode(): put the tty behind a file descriptor into raw mode and always
  put it back, whatever happens inside the block.
- Renderer: everything the round writes on screen.

Raw mode also turns off output post-processing, so every line break written
while it is active is an explicit "\\r\\n".
"""

import logging
import termios
import tty
from contextlib import contextmanager
from typing import Iterator, Sequence, TextIO

from .errors import TerminalUnavailable
from .schemas import GuessFeedback
from .types import Digit

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[2J\033[H"


@contextmanager
def raw_mode(fd: int) -> Iterator[None]:
    try:
        old_settings = termios.tcgetattr(fd)
        tty.setraw(fd)
    except (termios.error, OSError) as exc:
        raise TerminalUnavailable(details=str(exc)) from exc

    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
        logger.debug("terminal restored to cooked mode")


class Renderer:
    """Writes the status line and round messages to a text stream."""

    def __init__(self, out: TextIO) -> None:
        self.out = out

    def _write(self, text: str) -> None:
        try:
            self.out.write(text)
            self.out.flush()
        except (OSError, ValueError) as exc:
            # ValueError: write to a closed file
            raise TerminalUnavailable(details=str(exc)) from exc

    def flush(self) -> None:
        self._write("")

    def status(self, remaining: int, missing: int, entered: Sequence[Digit]) -> None:
        # "\r" brings us back to the start of the same line
        typed = "-".join(str(d) for d in entered)
        self._write(f"\r[{remaining:02d}s] Insert {missing} characters {typed}")

    def feedback(self, result: GuessFeedback) -> None:
        self._write(f"\r\n✅ HIT: {result.hits}, ❓ BLOW: {result.blows}\r\n\r\n")

    def win(self, attempts: int) -> None:
        self._write(f"\r\n = You won in {attempts} attempts = \r\n")
