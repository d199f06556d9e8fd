"""
Labels for clarity.
"""

from typing import List, Literal

Digit = int  # 0 -> 9
Code = List[Digit]  # secret or guess, one digit per position
Level = int  # 3 -> 9, length of the secret
RoundStatus = Literal["won", "lost", "error"]
