"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Sequence, Tuple
from .board import Board, Cell, GameOutcome, Player


# All possible winning lines (as cell index triples)
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def has_won(board: Sequence[Cell], player: Player) -> bool:
    """True if the player holds all three cells of any winning line."""
    for a, b, c in WINNING_LINES:
        if board[a] == player and board[b] == player and board[c] == player:
            return True
    return False


def get_winning_line(board: Sequence[Cell]) -> Optional[Tuple[int, int, int]]:
    """
    Get the winning line if there is one.

    Returns:
        The first completed line (in WINNING_LINES order), or None.
    """
    for line in WINNING_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return line
    return None


def check_winner(board: Sequence[Cell]) -> Optional[Player]:
    """
    Check if there's a winner.

    Returns:
        The winning Player, or None if no winner yet.
    """
    line = get_winning_line(board)
    if line is None:
        return None
    return board[line[0]]


def is_full(board: Sequence[Cell]) -> bool:
    """True if no empty cells remain."""
    return all(cell is not None for cell in board)


def check_draw(board: Sequence[Cell]) -> bool:
    """
    Check if the game is a draw.

    A draw occurs when all cells are filled AND there is no winner.
    """
    if check_winner(board) is not None:
        return False
    return is_full(board)


def evaluate(board: Board) -> GameOutcome:
    """
    Evaluate a board.

    A win is checked before a draw, so a full board with a completed
    line is always a win.

    Args:
        board: The board to evaluate.

    Returns:
        GameOutcome (in progress, win with player and line, or draw).
    """
    line = get_winning_line(board)
    if line is not None:
        return GameOutcome.win(board[line[0]], line)

    if is_full(board):
        return GameOutcome.draw()

    return GameOutcome.in_progress()


# Quick test
if __name__ == "__main__":
    from .board import board_from_string

    print("Testing win checker...")

    # Test 1: Horizontal win
    outcome = evaluate(board_from_string("XXXOO...."))
    print(f"Test 1 (horizontal): {outcome.describe()} line={outcome.line}")
    assert outcome.winner == Player.X and outcome.line == (0, 1, 2)

    # Test 2: Diagonal win
    outcome = evaluate(board_from_string("OX.XO...O"))
    print(f"Test 2 (diagonal): {outcome.describe()} line={outcome.line}")
    assert outcome.winner == Player.O and outcome.line == (0, 4, 8)

    # Test 3: Full board with a line is a win, not a draw
    outcome = evaluate(board_from_string("XXXOOXOXO"))
    print(f"Test 3 (full board win): {outcome.describe()}")
    assert outcome.winner == Player.X

    # Test 4: Draw (full board, no winner)
    outcome = evaluate(board_from_string("XOXXOOOXX"))
    print(f"Test 4 (draw): {outcome.describe()}")
    assert check_draw(board_from_string("XOXXOOOXX"))

    print("\nWin checker test done!")
