"""
Background keystroke reader.

The round loop never blocks on the keyboard. Instead a daemon thread reads
keys, keeps only the digits and hands them over through a FIFO queue.
The thread watches a stop event: it quits as soon as the round is over,
even when nobody is typing, because the read waits in select() for at most
`poll_interval` seconds at a time.
"""

import codecs
import logging
import os
import queue
import select
import threading
from typing import Iterable, Iterator, List, Tuple

from .config import READ_POLL_SECONDS
from .errors import InputClosed

logger = logging.getLogger(__name__)

ESC = "\x1b"
DIGIT_KEYS = "0123456789"


def split_keys(text: str) -> Tuple[List[str], str]:
    """
    Split terminal text into keys.
    Printable characters are one key each. An escape sequence is one key as a
    whole, so the "1;5" inside Ctrl+Right ("\\x1b[1;5C") never shows up as digits.
    Returns the keys and the unfinished escape sequence at the end, if any,
    so the caller can prepend it to the next chunk it reads.
    """
    keys = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch != ESC:
            keys.append(ch)
            i += 1
            continue

        # ESC is the last thing we got: more may follow
        if i + 1 >= n:
            return keys, text[i:]

        nxt = text[i + 1]
        if nxt == "[":
            # CSI: parameters and intermediates, then one final byte in 0x40..0x7e
            j = i + 2
            while j < n and not ("\x40" <= text[j] <= "\x7e"):
                j += 1
            if j >= n:
                return keys, text[i:]
            end = j + 1
        elif nxt == "O":
            # SS3: F1-F4 and application-mode arrows
            if i + 2 >= n:
                return keys, text[i:]
            end = i + 3
        else:
            # Alt+key
            end = i + 2
        keys.append(text[i:end])
        i = end
    return keys, ""


def decode_keys(text: str) -> List[str]:
    """Like split_keys, but an unfinished sequence at the end counts as one key."""
    keys, rest = split_keys(text)
    if rest:
        keys.append(rest)
    return keys


def is_digit_key(key: str) -> bool:
    return len(key) == 1 and key in DIGIT_KEYS


def read_keys(fd: int, stop: threading.Event, poll_interval: float = READ_POLL_SECONDS) -> Iterator[str]:
    """
    Lazily yield keys typed on `fd` until `stop` is set.
    An escape sequence cut in two by the reads is held back until the rest
    arrives. If a whole poll passes with nothing more, what was held back
    (usually the Esc key itself) is yielded as one key.
    Raises InputClosed on end of stream. OSError from the read propagates.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    pending = ""
    while not stop.is_set():
        ready, _, _ = select.select([fd], [], [], poll_interval)
        if not ready:
            if pending:
                yield pending
                pending = ""
            continue
        chunk = os.read(fd, 64)
        if not chunk:
            raise InputClosed(details=f"end of stream on fd {fd}")
        keys, pending = split_keys(pending + decoder.decode(chunk))
        for key in keys:
            yield key


class InputSource(threading.Thread):
    """Forwards digit keys from `keys` to the `digits` queue."""

    def __init__(self, keys: Iterable[str], digits: "queue.Queue[str]", stop: threading.Event) -> None:
        super().__init__(name="hitblow-input", daemon=True)
        self.keys = keys
        self.digits = digits
        self.stop = stop
        # True when the keys ran out (EOF or read error) before the round ended
        self.closed = False

    @classmethod
    def from_fd(cls, fd: int, digits: "queue.Queue[str]", stop: threading.Event) -> "InputSource":
        return cls(read_keys(fd, stop), digits, stop)

    def run(self) -> None:
        try:
            for key in self.keys:
                if self.stop.is_set():
                    break
                if is_digit_key(key):
                    self.digits.put(key)
            else:
                self.closed = not self.stop.is_set()
        except InputClosed as exc:
            self.closed = True
            logger.info("%s", exc)
        except OSError as exc:
            self.closed = True
            logger.warning("keystroke reader failed: %s", exc)
        logger.debug("input source stopped")
