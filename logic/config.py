"""
Game configuration for TicTacToe.
Who plays which side, the computer's thinking delay, and game modes.
"""

from enum import Enum
from typing import Optional
from .ai_player import Difficulty
from .board import Player


class GameMode(Enum):
    """How the second player is controlled."""
    PVP = "pvp"              # Player vs Player (local)
    PVC_EASY = "pvc-easy"    # Player vs Computer (random moves)
    PVC_HARD = "pvc-hard"    # Player vs Computer (minimax)

    @property
    def difficulty(self) -> Optional[Difficulty]:
        """AI difficulty for this mode, or None if no computer plays."""
        if self == GameMode.PVC_EASY:
            return Difficulty.EASY
        if self == GameMode.PVC_HARD:
            return Difficulty.HARD
        return None

    @property
    def label(self) -> str:
        return {
            GameMode.PVP: "Player vs Player",
            GameMode.PVC_EASY: "vs Computer (Easy)",
            GameMode.PVC_HARD: "vs Computer (Hard)",
        }[self]

    @classmethod
    def from_string(cls, value: str) -> "GameMode":
        """Parse a mode name such as "pvc-hard" (case-insensitive)."""
        for mode in cls:
            if mode.value == value.lower() or mode.name == value.upper():
                return mode
        raise ValueError(f"Unknown game mode: {value}")


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== PLAYERS ====================
    FIRST_PLAYER = Player.X      # X always moves first
    COMPUTER_PLAYER = Player.O   # The computer answers as O

    # ==================== MODE ====================
    DEFAULT_MODE = GameMode.PVP

    # ==================== TIMING ====================
    # Delay before the computer moves, so it looks like it's "thinking"
    COMPUTER_DELAY_MS = 400

    # ==================== DEBUG SETTINGS ====================
    VERBOSE_AI = True
