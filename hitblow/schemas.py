"""
Explicit validation & Pydantic models
- LevelChoice validates what the player typed at the menu prompt.
- GuessFeedback and RoundResult describe what a round produced.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .config import MAX_LEVEL, MIN_LEVEL
from .types import RoundStatus


# 1. Validates the level picked at the prompt
class LevelChoice(BaseModel):
    level: int = Field(..., description="Length of the secret, between 3 and 9 inclusive")

    @field_validator("level")
    @classmethod
    def validate_level(cls, level: int) -> int:
        if level < MIN_LEVEL or level > MAX_LEVEL:
            raise ValueError(f"Level must be between {MIN_LEVEL} and {MAX_LEVEL} inclusive.")
        return level


# 2. Describes the feedback for a single complete guess
class GuessFeedback(BaseModel):
    hits: int = Field(..., ge=0, description="Digits in the correct position")
    blows: int = Field(..., ge=0, description="Digits in the secret but at another position")


# 3. Outcome of one round, returned by the session facade
class RoundResult(BaseModel):
    status: RoundStatus = Field(..., description="How the round ended")
    attempts: Optional[int] = Field(None, description="Incorrect guesses before the win (won only)")
    error: Optional[Literal["InvalidLevel", "TerminalUnavailable", "InputClosed"]] = Field(
        None, description="Error kind (error only)"
    )
    message: Optional[str] = Field(None, description="One human-readable sentence (error only)")

    @classmethod
    def won(cls, attempts: int) -> "RoundResult":
        return cls(status="won", attempts=attempts)

    @classmethod
    def lost(cls) -> "RoundResult":
        return cls(status="lost")

    @classmethod
    def failed(cls, exc) -> "RoundResult":
        return cls(status="error", error=exc.kind, message=exc.message)
