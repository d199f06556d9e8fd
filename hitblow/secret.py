"""
Secret generation.
Digits 1..9 are shuffled, then 0 is dropped in at a random spot (any of the
10 positions, both ends included). The first `level` digits are the secret.
A leading zero is therefore possible (1 in 10) but less likely than with a
plain shuffle of 0..9, and the secret stays a digit list so it survives.
"""

import logging
import random
from secrets import SystemRandom
from typing import Optional

from .config import MAX_LEVEL, MIN_LEVEL
from .errors import InvalidLevel
from .types import Code, Level

logger = logging.getLogger(__name__)


def check_level(level: Level) -> Level:
    # bool is an int subclass; reject it along with everything non-integer
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidLevel(level, details=f"got {level!r}")
    if level < MIN_LEVEL or level > MAX_LEVEL:
        raise InvalidLevel(level, details=f"got {level}")
    return level


def generate_secret(level: Level, rng: Optional[random.Random] = None) -> Code:
    check_level(level)
    if rng is None:
        rng = SystemRandom()

    digits = list(range(1, 10))
    rng.shuffle(digits)

    # 0 can land before the first digit or after the last one
    zero_index = rng.randint(0, len(digits))
    digits.insert(zero_index, 0)

    logger.debug("generated a %d-digit secret", level)
    return digits[:level]
