"""
AI player for TicTacToe.
Picks moves either uniformly at random or with the Minimax algorithm.
"""

import random
from enum import Enum
from typing import List, Optional
from .board import Board, Cell, Player, get_empty_cells, player_to_move
from .win_checker import has_won, is_full


# Score for a win found at depth 0. Depth is subtracted so faster wins
# and slower losses score better.
WIN_SCORE = 10


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = 1      # Random moves
    HARD = 2      # Full minimax


def choose_random_move(board: Board, rng: Optional[random.Random] = None) -> Optional[int]:
    """
    Pick an empty cell uniformly at random.

    Args:
        board: Current board.
        rng: Random source (defaults to the random module).

    Returns:
        Cell index, or None if the board is full.
    """
    empty_cells = get_empty_cells(board)
    if not empty_cells:
        return None
    return (rng or random).choice(empty_cells)


class MinimaxSearch:
    """
    Exhaustive minimax search for one player.

    The search works on a private list copy of the board, placing and
    removing marks in place. The board handed in is never modified.
    No pruning: the 3x3 tree is small enough to search in full.
    """

    def __init__(self, player: Player):
        self.player = player
        self.opponent = player.opposite()

        # How many positions the last search visited (for debugging)
        self.positions_evaluated = 0

    def best_move(self, board: Board) -> Optional[int]:
        """
        Find the best move for self.player.

        Ties go to the lowest cell index.

        Returns:
            Cell index, or None if the board is full.
        """
        self.positions_evaluated = 0
        cells = list(board)

        best_score = None
        best_move = None

        for index in range(len(cells)):
            if cells[index] is not None:
                continue

            # Try this move
            cells[index] = self.player
            score = self.score(cells, depth=0, is_maximizing=False)
            cells[index] = None

            if best_score is None or score > best_score:
                best_score = score
                best_move = index

        return best_move

    def score(self, cells: List[Cell], depth: int, is_maximizing: bool) -> int:
        """
        Minimax score of a position.

        Args:
            cells: Board as a mutable list. Restored before returning.
            depth: Moves made since the search started.
            is_maximizing: True if it's self.player's turn.

        Returns:
            WIN_SCORE - depth if self.player has won, depth - WIN_SCORE if
            the opponent has won, 0 for a draw, otherwise the best score
            reachable with both sides playing perfectly.
        """
        self.positions_evaluated += 1

        # Check terminal states
        if has_won(cells, self.player):
            return WIN_SCORE - depth
        if has_won(cells, self.opponent):
            return depth - WIN_SCORE
        if is_full(cells):
            return 0

        mark = self.player if is_maximizing else self.opponent
        best_score = None

        for index in range(len(cells)):
            if cells[index] is not None:
                continue

            cells[index] = mark
            score = self.score(cells, depth + 1, not is_maximizing)
            cells[index] = None

            if best_score is None:
                best_score = score
            elif is_maximizing:
                best_score = max(best_score, score)
            else:
                best_score = min(best_score, score)

        return best_score


def choose_optimal_move(board: Board, player: Player) -> Optional[int]:
    """
    Pick the minimax-optimal move for a player.

    Returns:
        Cell index (lowest index among equally good moves), or None if
        the board is full.
    """
    return MinimaxSearch(player).best_move(board)


def minimax_score(board: Board, depth: int, is_maximizing: bool, player: Player) -> int:
    """
    Minimax score of a board from the point of view of `player`.

    Args:
        board: The board to score. Not modified.
        depth: Depth to start counting from (usually 0).
        is_maximizing: True if `player` is on turn.
        player: The maximizing player.
    """
    return MinimaxSearch(player).score(list(board), depth, is_maximizing)


class AIPlayer:
    """
    A computer opponent for TicTacToe.

    EASY picks any empty cell at random. HARD uses Minimax and will always
    play optimally - it will win if possible, block the opponent if needed,
    and never lose (at worst, draw).
    """

    def __init__(
        self,
        player: Player = Player.O,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[random.Random] = None,
        verbose: bool = True
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            difficulty: EASY (random) or HARD (minimax)
            rng: Random source for EASY moves
            verbose: Print a line for every move chosen
        """
        self.player = player
        self.difficulty = difficulty
        self.rng = rng
        self.verbose = verbose

        # Positions visited by the last HARD search (for debugging)
        self.moves_evaluated = 0

    def get_move(self, board: Board) -> Optional[int]:
        """
        Get a move for the current position.

        Args:
            board: Current board.

        Returns:
            Cell index, or None if no moves available or it's not our turn.
        """
        self.moves_evaluated = 0

        # Check if it's our turn
        if player_to_move(board) != self.player:
            print(f"Warning: It's not {self.player.value}'s turn!")
            return None

        if self.difficulty == Difficulty.EASY:
            move = choose_random_move(board, self.rng)
            if self.verbose and move is not None:
                print(f"AI ({self.player.value}) picked random move: {move}")
            return move

        search = MinimaxSearch(self.player)
        move = search.best_move(board)
        self.moves_evaluated = search.positions_evaluated

        if self.verbose and move is not None:
            print(f"AI ({self.player.value}) evaluated {self.moves_evaluated} positions. Best move: {move}")

        return move


# Quick test
if __name__ == "__main__":
    from .board import board_from_string

    print("Testing AIPlayer...")

    ai = AIPlayer(Player.O, Difficulty.HARD)

    # Test 1: AI should block a winning move
    # . O .
    # X X .
    # . . .
    print("\nAI is O. X is about to win with 5!")
    move = ai.get_move(board_from_string(".O.XX...."))
    print(f"AI's move: {move}")
    assert move == 5, f"Expected 5, got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    # O X X
    # X O O
    # X . .
    print("\nAI is O. Can win with 8!")
    move = ai.get_move(board_from_string("OXXXOOX.."))
    print(f"AI's move: {move}")
    assert move == 8, f"Expected 8, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
