"""
Game state management for TicTacToe.
The session object that tracks a single game from the first move to the result.
"""

from typing import Callable, List, Optional
from dataclasses import dataclass, field
from .board import Board, EMPTY_BOARD, GameOutcome, Move, Player, get_empty_cells
from .move_validator import apply_move
from .win_checker import evaluate


# Listener signature: (state, move). move is None after a reset.
GameListener = Callable[["GameState", Optional[Move]], None]


@dataclass
class GameState:
    """
    The complete state of one TicTacToe session.

    Tracks:
    - The board (as an immutable tuple, replaced on every move)
    - Current player
    - Move history
    - Game outcome (in progress, won, draw)

    Front-ends subscribe to be told about every applied move and reset,
    instead of the rules updating the screen themselves.
    """

    board: Board = EMPTY_BOARD

    # X always moves first
    current_player: Player = Player.X

    moves: List[Move] = field(default_factory=list)

    outcome: GameOutcome = field(default_factory=GameOutcome.in_progress)

    _listeners: List[GameListener] = field(default_factory=list, repr=False, compare=False)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_over

    @property
    def winner(self) -> Optional[Player]:
        return self.outcome.winner

    def subscribe(self, listener: GameListener):
        """Register a listener for moves and resets."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: GameListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, move: Optional[Move]):
        for listener in list(self._listeners):
            listener(self, move)

    def make_move(self, index: int) -> Move:
        """
        Place the current player's mark at the given cell.

        Args:
            index: Cell index (0-8).

        Returns:
            The Move that was applied.

        Raises:
            IllegalMove: if the cell is taken, out of range, or the game is over.
                The state is left untouched.
        """
        player = self.current_player
        self.board = apply_move(self.board, index, player)

        move = Move(player=player, index=index, move_number=len(self.moves))
        self.moves.append(move)

        self.outcome = evaluate(self.board)
        if not self.outcome.is_over:
            self.current_player = player.opposite()

        self._notify(move)
        return move

    def reset(self):
        """Start a new game. Listeners stay subscribed."""
        self.board = EMPTY_BOARD
        self.current_player = Player.X
        self.moves = []
        self.outcome = GameOutcome.in_progress()
        self._notify(None)

    def get_empty_cells(self) -> List[int]:
        return get_empty_cells(self.board)

    def copy(self) -> "GameState":
        """Copy the game state. Listeners are not copied."""
        return GameState(
            board=self.board,
            current_player=self.current_player,
            moves=list(self.moves),
            outcome=self.outcome,
        )


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()
    game.subscribe(lambda state, move: print(f"{move.player.value} moves to {move.index}") if move else None)

    # X takes the top row
    for index in [0, 3, 1, 4, 2]:
        game.make_move(index)

    print(f"\nResult: {game.outcome.describe()}")
    assert game.winner == Player.X

    print("\nGame state test done!")
