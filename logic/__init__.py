"""
Logic module for TicTacToe.
Handles game state, rules, and AI opponent.
"""

from .board import GameOutcome, GameStatus, Move, Player
from .game_state import GameState
from .move_validator import IllegalMove, MoveValidator, apply_move
from .win_checker import WINNING_LINES, evaluate
from .ai_player import AIPlayer, Difficulty, choose_optimal_move, choose_random_move, minimax_score
from .config import GameConfig, GameMode
