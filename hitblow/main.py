'''
Hits & Blows in the terminal

Usage:
  hitblow            -> show the rules, ask for a level, play one round
  hitblow <level>    -> skip the prompt and play at that level (3..9)

Exit codes:
  0 -> round won or lost, or the player quit
  1 -> invalid level
  2 -> the terminal could not be used
'''

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import COUNTDOWN_SECONDS, MAX_LEVEL, MIN_LEVEL, configure_logging
from .errors import InvalidLevel
from .schemas import LevelChoice
from .session import play
from .terminal import CLEAR_SCREEN

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_LEVEL = 1
EXIT_TERMINAL_ERROR = 2

BANNER = f"""
Try to guess the mystery number!
=================================

        Choose the level and start typing your guess, but be aware that you only have {COUNTDOWN_SECONDS}s.

        What are "hits" and "blows"?
        - hits means that you've correctly guessed a digit in the correct position
        - blows means that you've guessed a digit correctly but in the wrong position.

        Keep guessing until you get it right before time runs out!"""

PROMPT = f"\n Choose a level between {MIN_LEVEL} and {MAX_LEVEL}, or enter 'q' to quit: "


def parse_level(text: str) -> int:
    """Turn what the player typed into a level, or raise InvalidLevel."""
    try:
        return LevelChoice(level=text.strip()).level
    except ValidationError as exc:
        raise InvalidLevel(text, details=str(exc.errors()[0]["msg"])) from exc


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hitblow",
        description="Guess the mystery number: hits and blows against the clock.",
    )
    parser.add_argument(
        "level",
        nargs="?",
        help=f"Number of digits to guess ({MIN_LEVEL}-{MAX_LEVEL}). Asked interactively when omitted.",
    )
    args = parser.parse_args(argv)
    configure_logging()

    if args.level is None:
        print(CLEAR_SCREEN, end="")
        print(BANNER)
        try:
            answer = input(PROMPT)
        except EOFError:
            answer = "q"
    else:
        answer = args.level

    if answer.strip().lower() == "q":
        print("Thanks for playing!")
        return EXIT_OK

    try:
        level = parse_level(answer)
    except InvalidLevel as exc:
        logger.debug("rejected level %r: %s", answer, exc)
        print(f"Invalid input. Please enter a number between {MIN_LEVEL} and {MAX_LEVEL}, or 'q' to quit.")
        return EXIT_INVALID_LEVEL

    result = play(level)

    if result.status == "won":
        print("\r\n🎉 Congratulations! \r")
        return EXIT_OK
    if result.status == "lost":
        print("\r\n You Lose 💣 \r")
        return EXIT_OK

    print(f"\r\nError: {result.message}")
    if result.error == "InvalidLevel":
        return EXIT_INVALID_LEVEL
    return EXIT_TERMINAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
