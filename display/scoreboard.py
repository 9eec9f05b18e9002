"""
Scoreboard for TicTacToe.
Counts wins and draws across rounds. Survives resets; nothing is saved to disk.
"""

from dataclasses import dataclass
from typing import Optional

from logic.board import GameOutcome, GameStatus, Move, Player
from logic.game_state import GameState


@dataclass
class Scoreboard:
    """Running totals for the current session."""
    x: int = 0
    o: int = 0
    draws: int = 0

    def record(self, outcome: GameOutcome):
        """Add a finished game. In-progress outcomes are ignored."""
        if outcome.status == GameStatus.WIN:
            if outcome.winner == Player.X:
                self.x += 1
            else:
                self.o += 1
        elif outcome.status == GameStatus.DRAW:
            self.draws += 1

    def on_game_event(self, state: GameState, move: Optional[Move]):
        """
        Game state listener.

        Only the move that ends a game is counted, so a finished game
        is recorded exactly once.
        """
        if move is not None and state.is_game_over:
            self.record(state.outcome)

    def reset(self):
        self.x = 0
        self.o = 0
        self.draws = 0

    def summary(self) -> str:
        return f"X: {self.x}  O: {self.o}  Draws: {self.draws}"
