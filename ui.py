"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The board (click a cell to move)
- Game status and whose turn it is
- Scoreboard
- Game mode selection (Player vs Player, vs Computer easy/hard)
"""

import random
import tkinter as tk
from tkinter import ttk
from PIL import ImageTk
from typing import Optional

# Logic imports
from logic.board import Move
from logic.game_state import GameState
from logic.move_validator import IllegalMove
from logic.ai_player import AIPlayer
from logic.config import GameConfig, GameMode

# Display imports
from display.config import DisplayConfig
from display.board_renderer import BoardRenderer
from display.scoreboard import Scoreboard


MODE_COLORS = {
    GameMode.PVP: '#60a5fa',
    GameMode.PVC_EASY: '#4ade80',
    GameMode.PVC_HARD: '#f87171',
}


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    The window never changes the game directly: it applies moves through
    GameState and redraws when the state tells it something happened.
    """

    def __init__(
        self,
        mode: GameMode = GameConfig.DEFAULT_MODE,
        rng: Optional[random.Random] = None,
        verbose_ai: bool = GameConfig.VERBOSE_AI
    ):
        """
        Initialize the UI.

        Args:
            mode: Starting game mode.
            rng: Random source for the easy computer.
            verbose_ai: Let the AI print what it evaluated.
        """
        self.mode = mode
        self.rng = rng
        self.verbose_ai = verbose_ai
        self.display_config = DisplayConfig()

        # Game
        self.game_state = GameState()
        self.scoreboard = Scoreboard()
        self.renderer = BoardRenderer(self.display_config)
        self.ai: Optional[AIPlayer] = self._create_ai(mode)

        # Pending computer move (Tk after() id)
        self._computer_job: Optional[str] = None

        # Create UI
        self._create_ui()

        # Scoreboard first so the labels see the new totals
        self.game_state.subscribe(self.scoreboard.on_game_event)
        self.game_state.subscribe(self._on_game_event)

        self._refresh()

    def _create_ai(self, mode: GameMode) -> Optional[AIPlayer]:
        if mode.difficulty is None:
            return None
        return AIPlayer(
            GameConfig.COMPUTER_PLAYER,
            mode.difficulty,
            rng=self.rng,
            verbose=self.verbose_ai
        )

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.display_config

        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg=cfg.BACKGROUND_COLOR)
        self.root.resizable(False, False)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.BACKGROUND_COLOR)
        style.configure('TLabel', background=cfg.BACKGROUND_COLOR, foreground='white', font=cfg.FONT)
        style.configure('Title.TLabel', font=cfg.TITLE_FONT, foreground=cfg.GRID_COLOR)
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground=cfg.WIN_LINE_COLOR)
        style.configure('Score.TLabel', font=('Segoe UI', 11, 'bold'), foreground='#00ff88')

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, padx=(0, 10))

        ttk.Label(left_frame, text="🎮 Game Board", style='Title.TLabel').pack(pady=(0, 5))

        self.board_canvas = tk.Canvas(
            left_frame,
            width=cfg.IMAGE_SIZE,
            height=cfg.IMAGE_SIZE,
            bg=cfg.BACKGROUND_COLOR,
            highlightthickness=2,
            highlightbackground=cfg.GRID_COLOR
        )
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_canvas_click)

        # Right panel
        right_frame = ttk.Frame(main_frame, width=320)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        # Game status section
        ttk.Label(right_frame, text="📊 Game Status", style='Title.TLabel').pack()

        self.status_label = ttk.Label(right_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.turn_label = ttk.Label(right_frame, text="Turn: -")
        self.turn_label.pack()

        # Score section
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(right_frame, text="🏆 Score", style='Title.TLabel').pack()

        self.score_label = ttk.Label(right_frame, text="", style='Score.TLabel')
        self.score_label.pack(pady=5)

        # Mode section
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(right_frame, text="⚙️ Game Mode", style='Title.TLabel').pack()

        mode_frame = ttk.Frame(right_frame)
        mode_frame.pack(pady=10)

        self.mode_buttons = {}
        for mode in GameMode:
            btn = tk.Button(
                mode_frame,
                text=mode.label,
                font=('Segoe UI', 10, 'bold'),
                width=20,
                activebackground=MODE_COLORS[mode],
                command=lambda m=mode: self._set_mode(m)
            )
            btn.pack(pady=2)
            self.mode_buttons[mode] = btn
        self._update_mode_buttons()

        # Control buttons
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        control_frame = ttk.Frame(right_frame)
        control_frame.pack(pady=5)

        tk.Button(
            control_frame,
            text="🔄 Restart",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Reset Score",
            font=('Segoe UI', 11, 'bold'),
            bg='#f59e0b',
            fg='black',
            width=12,
            command=self._reset_score
        ).pack(side=tk.LEFT, padx=5)

        # Quit button
        tk.Button(
            right_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _set_mode(self, mode: GameMode):
        """Switch game mode. Starts a new round."""
        self.mode = mode
        self.ai = self._create_ai(mode)
        self._update_mode_buttons()

        print(f"Game mode set to: {mode.value}")
        self._reset_game()

    def _update_mode_buttons(self):
        for mode, btn in self.mode_buttons.items():
            if mode == self.mode:
                btn.configure(bg=MODE_COLORS[mode], fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def _is_computer_turn(self) -> bool:
        return (
            self.ai is not None
            and not self.game_state.is_game_over
            and self.game_state.current_player == self.ai.player
        )

    def _on_canvas_click(self, event):
        """Handle a click on the board."""
        # Ignore clicks after the game ends or while the computer is thinking
        if self.game_state.is_game_over or self._is_computer_turn():
            return

        index = self.renderer.cell_at(event.x, event.y)
        if index is None:
            return

        try:
            self.game_state.make_move(index)
        except IllegalMove as e:
            print(f"Ignored click: {e.message}")
            return

        if self._is_computer_turn():
            self._computer_job = self.root.after(GameConfig.COMPUTER_DELAY_MS, self._computer_move)

    def _computer_move(self):
        """Let the computer play (runs on the UI thread after the delay)."""
        self._computer_job = None
        if not self._is_computer_turn():
            return

        move = self.ai.get_move(self.game_state.board)
        if move is None:
            return

        self.game_state.make_move(move)

    def _on_game_event(self, state: GameState, move: Optional[Move]):
        """Game state listener: redraw after every move and reset."""
        if move is not None and state.is_game_over:
            print(f"Game over: {state.outcome.describe()}  ({self.scoreboard.summary()})")
        self._refresh()

    def _refresh(self):
        """Redraw the board and update all labels."""
        image = self.renderer.render(self.game_state.board, self.game_state.outcome)
        photo = ImageTk.PhotoImage(image)
        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

        if self.game_state.is_game_over:
            self.status_label.configure(text=self.game_state.outcome.describe())
            self.turn_label.configure(text="Game Over")
        else:
            self.status_label.configure(text=f"Player {self.game_state.current_player.value}'s Turn")
            if self._is_computer_turn():
                self.turn_label.configure(text="Computer is thinking...")
            else:
                self.turn_label.configure(text=f"Mode: {self.mode.label}")

        self.score_label.configure(text=self.scoreboard.summary())

    def _cancel_computer_move(self):
        if self._computer_job is not None:
            self.root.after_cancel(self._computer_job)
            self._computer_job = None

    def _reset_game(self):
        """Reset the board for a new round. Scores are kept."""
        print("Resetting game...")
        self._cancel_computer_move()
        self.game_state.reset()

    def _reset_score(self):
        """Reset both the scores and the board."""
        self.scoreboard.reset()
        self._reset_game()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_computer_move()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        default=GameConfig.DEFAULT_MODE.value,
        help="Starting game mode"
    )

    args = parser.parse_args()

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI(mode=GameMode.from_string(args.mode))
    ui.run()


if __name__ == "__main__":
    main()
