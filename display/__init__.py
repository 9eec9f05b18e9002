"""
Display module for TicTacToe.
Handles board rendering and the scoreboard.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer, render_text
from .scoreboard import Scoreboard
