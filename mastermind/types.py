"""
Labels for clarity.
"""

from typing import List, Literal

Digit = int  # lo -> hi, single character each
Code = List[Digit]  # secret or guess, same length within a game
GameStatus = Literal["in_progress", "won", "lost"]
