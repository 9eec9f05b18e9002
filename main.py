"""
Main entry point for TicTacToe.

This script ties together:
- Logic (game state, move validation, AI)
- Display (board rendering, scoreboard)

Run this script to play TicTacToe in a window, or in the console with --no-ui.
"""

import random
import time
from typing import Callable, Optional

# Logic imports
from logic.board import Move
from logic.game_state import GameState
from logic.move_validator import IllegalMove
from logic.ai_player import AIPlayer
from logic.config import GameConfig, GameMode

# Display imports
from display.board_renderer import render_text
from display.scoreboard import Scoreboard


class ConsoleGame:
    """
    Console controller for TicTacToe.

    Game flow:
    1. Human (X) types a cell number
    2. The move is applied through the game state
    3. In a computer mode, the computer (O) answers after a short delay
    4. Repeat until someone wins or it's a draw; 'r' starts a new round
    """

    PROMPT = "Cell (0-8), r=restart, s=reset score, q=quit: "

    def __init__(
        self,
        mode: GameMode = GameConfig.DEFAULT_MODE,
        rng: Optional[random.Random] = None,
        delay_ms: int = GameConfig.COMPUTER_DELAY_MS,
        verbose_ai: bool = GameConfig.VERBOSE_AI
    ):
        """
        Initialize the console game.

        Args:
            mode: Game mode.
            rng: Random source for the easy computer.
            delay_ms: Computer "thinking" delay.
            verbose_ai: Let the AI print what it evaluated.
        """
        print("\n" + "="*60)
        print("   TicTacToe - Console")
        print(f"   Mode: {mode.label}")
        print("="*60 + "\n")

        self.mode = mode
        self.delay_ms = delay_ms

        self.game_state = GameState()
        self.scoreboard = Scoreboard()
        self.ai: Optional[AIPlayer] = None
        if mode.difficulty is not None:
            self.ai = AIPlayer(GameConfig.COMPUTER_PLAYER, mode.difficulty, rng=rng, verbose=verbose_ai)

        self.game_state.subscribe(self.scoreboard.on_game_event)
        self.game_state.subscribe(self._on_game_event)

        self.is_running = False

    def start(self, input_fn: Callable[[str], str] = input):
        """Run the game loop until the player quits."""
        self.is_running = True
        self._show_board()

        while self.is_running:
            try:
                text = input_fn(self.PROMPT)
            except EOFError:
                break
            self.handle_command(text)

        print(f"\nFinal score: {self.scoreboard.summary()}")

    def handle_command(self, text: str):
        """Process one line of input."""
        text = text.strip().lower()

        if text in ("q", "quit"):
            self.is_running = False
            return

        if text in ("r", "restart"):
            self._reset_game()
            return

        if text in ("s", "score"):
            self.scoreboard.reset()
            print("Score reset!")
            self._reset_game()
            return

        if self.game_state.is_game_over:
            print("Game is over! Type 'r' to play again or 'q' to quit.")
            return

        try:
            index = int(text)
        except ValueError:
            print(f"  ⚠ Didn't understand '{text}'. Type a cell number 0-8.")
            return

        try:
            self.game_state.make_move(index)
        except IllegalMove as e:
            print(f"  ✗ {e.message}")
            return

        if self._is_computer_turn():
            self._computer_move()

    def _is_computer_turn(self) -> bool:
        return (
            self.ai is not None
            and not self.game_state.is_game_over
            and self.game_state.current_player == self.ai.player
        )

    def _computer_move(self):
        """Let the computer play."""
        if self.delay_ms > 0:
            time.sleep(self.delay_ms / 1000)

        move = self.ai.get_move(self.game_state.board)
        if move is None:
            return

        self.game_state.make_move(move)

    def _on_game_event(self, state: GameState, move: Optional[Move]):
        """Game state listener: print the board after every move."""
        if move is None:
            return

        print(f"\n{move.player.value} plays cell {move.index}")
        self._show_board()

        if state.is_game_over:
            self._show_game_result()

    def _show_board(self):
        print("\n" + render_text(self.game_state.board) + "\n")

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        print(f"\n{self.game_state.outcome.describe()}")
        print(f"Score: {self.scoreboard.summary()}")

        print("\n" + "="*60)

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.game_state.reset()
        self._show_board()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        default=GameConfig.DEFAULT_MODE.value,
        help="pvp, pvc-easy (random computer) or pvc-hard (minimax computer)"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the easy computer's random moves"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print AI search details"
    )

    args = parser.parse_args()

    mode = GameMode.from_string(args.mode)
    rng = random.Random(args.seed) if args.seed is not None else None
    verbose_ai = GameConfig.VERBOSE_AI and not args.quiet

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(mode=mode, rng=rng, verbose_ai=verbose_ai)
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame(mode=mode, rng=rng, verbose_ai=verbose_ai)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
