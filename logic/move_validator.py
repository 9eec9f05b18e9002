"""
Move validator for TicTacToe.
Validates that moves follow the rules and applies legal ones.
"""

from typing import Optional, List
from dataclasses import dataclass
from .board import Board, NUM_CELLS, Player, get_empty_cells
from .win_checker import evaluate


class IllegalMove(Exception):
    """Raised when a move breaks the rules. The board is never changed."""

    def __init__(self, index: int, message: str):
        super().__init__(message)
        self.index = index
        self.message = message


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Cell index must be 0-8
    2. Can only place on empty cells
    3. Game must not be over
    """

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place a mark in (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if evaluate(board).is_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        if not (0 <= index < NUM_CELLS):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{NUM_CELLS - 1}."
            )

        # Check if cell is empty
        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board[index].value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves on the board.

        Returns:
            List of cell indices, empty if the game is over.
        """
        if evaluate(board).is_over:
            return []
        return get_empty_cells(board)


_validator = MoveValidator()


def apply_move(board: Board, index: int, player: Player) -> Board:
    """
    Place a player's mark on the board.

    Args:
        board: Current board. Not modified.
        index: Cell index (0-8).
        player: Who is moving.

    Returns:
        A new board with the mark placed.

    Raises:
        IllegalMove: if the cell is taken, out of range, or the game is over.
    """
    result = _validator.validate_move(board, index)
    if not result.is_valid:
        raise IllegalMove(index, result.error_message)

    cells = list(board)
    cells[index] = player
    return tuple(cells)


# Quick test
if __name__ == "__main__":
    from .board import board_from_string, new_board

    print("Testing MoveValidator...")

    validator = MoveValidator()
    board = new_board()

    # Test valid move
    result = validator.validate_move(board, 4)
    print(f"Move 4: valid={result.is_valid}, error={result.error_message}")

    # Make the move
    board = apply_move(board, 4, Player.X)

    # Test invalid move (same cell)
    result = validator.validate_move(board, 4)
    print(f"Move 4 again: valid={result.is_valid}, error={result.error_message}")
    assert not result.is_valid

    # Test out of range
    result = validator.validate_move(board, 9)
    print(f"Move 9: valid={result.is_valid}, error={result.error_message}")
    assert not result.is_valid

    # Test move after the game is over
    try:
        apply_move(board_from_string("XXXOO...."), 8, Player.O)
        raise AssertionError("Expected IllegalMove")
    except IllegalMove as e:
        print(f"Move after win: {e.message}")

    print(f"Valid moves: {validator.get_valid_moves(board)}")

    print("\nMoveValidator test done!")
