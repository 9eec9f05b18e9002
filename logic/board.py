"""
Board definitions for TicTacToe.
The board, players, moves and game outcomes shared by the rules and the AI.
"""

from enum import Enum
from typing import List, Optional, Tuple
from dataclasses import dataclass


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


# A cell is either empty (None) or holds a player's mark
Cell = Optional[Player]

# The board is 9 cells, row-major over the 3x3 grid:
#   0 | 1 | 2
#   3 | 4 | 5
#   6 | 7 | 8
Board = Tuple[Cell, ...]

BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

EMPTY_BOARD: Board = (None,) * NUM_CELLS


def new_board() -> Board:
    """Create an empty board."""
    return EMPTY_BOARD


def board_from_string(text: str) -> Board:
    """
    Build a board from a 9-character string such as "XX.OO....".

    Any character other than X or O is treated as an empty cell.
    """
    if len(text) != NUM_CELLS:
        raise ValueError(f"Board string must have {NUM_CELLS} cells, got {len(text)}")
    return tuple(
        Player.X if ch.upper() == "X" else Player.O if ch.upper() == "O" else None
        for ch in text
    )


def get_empty_cells(board: Board) -> List[int]:
    """
    Get all empty cells on the board.

    Returns:
        List of cell indices, in ascending order.
    """
    return [index for index, cell in enumerate(board) if cell is None]


def player_to_move(board: Board) -> Player:
    """Work out whose turn it is from the mark counts (X always starts)."""
    x_count = sum(1 for cell in board if cell == Player.X)
    o_count = sum(1 for cell in board if cell == Player.O)
    return Player.X if x_count == o_count else Player.O


class GameStatus(Enum):
    """Where a game stands."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameOutcome:
    """
    Result of evaluating a board.

    winner and line are only set for a WIN.
    """
    status: GameStatus
    winner: Optional[Player] = None
    line: Optional[Tuple[int, int, int]] = None

    @classmethod
    def in_progress(cls) -> "GameOutcome":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def win(cls, player: Player, line: Tuple[int, int, int]) -> "GameOutcome":
        return cls(GameStatus.WIN, winner=player, line=line)

    @classmethod
    def draw(cls) -> "GameOutcome":
        return cls(GameStatus.DRAW)

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def describe(self) -> str:
        """Short human-readable result."""
        if self.status == GameStatus.WIN:
            return f"{self.winner.value} Wins!"
        if self.status == GameStatus.DRAW:
            return "It's a Draw!"
        return "In progress"


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Which move of the game this is (0-8)


# Quick test
if __name__ == "__main__":
    print("Testing board...")

    board = board_from_string("XO..X....")
    print(f"Board: {board}")
    print(f"Empty cells: {get_empty_cells(board)}")
    print(f"Player to move: {player_to_move(board).value}")

    assert get_empty_cells(board) == [2, 3, 5, 6, 7, 8]
    assert player_to_move(board) == Player.O
    assert Player.X.opposite() == Player.O
    print("✓ Board helpers OK")

    print("\nBoard test done!")
