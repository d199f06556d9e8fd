"""
Error kinds of a round.
Every error carries a short sentence that is safe to show to the player,
plus optional details for the logs.
"""


class HitBlowError(Exception):
    """Base class for all game errors."""

    kind = "HitBlowError"

    def __init__(self, message: str, details: str = ""):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class InvalidLevel(HitBlowError):
    """Level outside the playable range; no round is started."""

    kind = "InvalidLevel"

    def __init__(self, level, details: str = ""):
        super().__init__("Invalid level. The level should be between 3 and 9.", details)
        self.level = level


class TerminalUnavailable(HitBlowError):
    """Raw mode could not be entered, or writing to the terminal failed."""

    kind = "TerminalUnavailable"

    def __init__(self, details: str = ""):
        super().__init__("The terminal is not available for playing.", details)


class InputClosed(HitBlowError):
    """Stdin reached end of stream before the round ended."""

    kind = "InputClosed"

    def __init__(self, details: str = ""):
        super().__init__("No more keystrokes can be read.", details)
