"""
Board renderer for TicTacToe.
Draws the board as an image (for the window) or as text (for the console).
"""

from typing import Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw

from logic.board import Board, GameOutcome, GameStatus, NUM_CELLS, Player
from .config import DisplayConfig


class BoardRenderer:
    """
    Renders a board and its outcome.

    The renderer only reads the board; it is driven by the game
    state's listeners and never changes the game.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses default if None.
        """
        self.config = config or DisplayConfig()

    def render(self, board: Board, outcome: Optional[GameOutcome] = None) -> Image.Image:
        """
        Draw the board as an RGB image.

        Args:
            board: The board to draw.
            outcome: If this is a win, a line is drawn through the winning cells.

        Returns:
            PIL image of size IMAGE_SIZE x IMAGE_SIZE.
        """
        cfg = self.config
        image = Image.new("RGB", (cfg.IMAGE_SIZE, cfg.IMAGE_SIZE), cfg.BACKGROUND_COLOR)
        draw = ImageDraw.Draw(image)

        self._draw_grid(draw)

        for index, cell in enumerate(board):
            if cell == Player.X:
                self._draw_x(draw, index)
            elif cell == Player.O:
                self._draw_o(draw, index)

        if outcome is not None and outcome.status == GameStatus.WIN:
            self._draw_winning_line(draw, outcome.line)

        return image

    def cell_at(self, x: float, y: float) -> Optional[int]:
        """Which cell was clicked, or None if outside the grid."""
        return self.config.cell_at(x, y)

    def _draw_grid(self, draw: ImageDraw.ImageDraw):
        cfg = self.config
        start = cfg.MARGIN
        end = cfg.MARGIN + cfg.BOARD_SIZE * cfg.CELL_SIZE

        for i in range(1, cfg.BOARD_SIZE):
            pos = cfg.MARGIN + i * cfg.CELL_SIZE
            draw.line([(pos, start), (pos, end)], fill=cfg.GRID_COLOR, width=cfg.GRID_WIDTH)
            draw.line([(start, pos), (end, pos)], fill=cfg.GRID_COLOR, width=cfg.GRID_WIDTH)

    def _mark_box(self, index: int) -> Tuple[np.ndarray, np.ndarray]:
        """Top-left and bottom-right of the area a mark is drawn in."""
        cfg = self.config
        origin = cfg.cell_origin(index)
        return origin + cfg.MARK_PADDING, origin + cfg.CELL_SIZE - cfg.MARK_PADDING

    def _draw_x(self, draw: ImageDraw.ImageDraw, index: int):
        cfg = self.config
        (x0, y0), (x1, y1) = self._mark_box(index)
        draw.line([(x0, y0), (x1, y1)], fill=cfg.X_COLOR, width=cfg.MARK_WIDTH)
        draw.line([(x0, y1), (x1, y0)], fill=cfg.X_COLOR, width=cfg.MARK_WIDTH)

    def _draw_o(self, draw: ImageDraw.ImageDraw, index: int):
        cfg = self.config
        (x0, y0), (x1, y1) = self._mark_box(index)
        draw.ellipse([x0, y0, x1, y1], outline=cfg.O_COLOR, width=cfg.MARK_WIDTH)

    def _draw_winning_line(self, draw: ImageDraw.ImageDraw, line: Tuple[int, int, int]):
        """Draw a line from the first to the last cell of the winning line."""
        cfg = self.config
        start = cfg.cell_center(line[0])
        end = cfg.cell_center(line[-1])

        # Extend a little past both end cells
        direction = end - start
        direction = direction / np.linalg.norm(direction)
        start = start - direction * cfg.WIN_LINE_OVERSHOOT
        end = end + direction * cfg.WIN_LINE_OVERSHOOT

        draw.line(
            [tuple(start.tolist()), tuple(end.tolist())],
            fill=cfg.WIN_LINE_COLOR,
            width=cfg.WIN_LINE_WIDTH
        )


def render_text(board: Board, outcome: Optional[GameOutcome] = None) -> str:
    """
    Draw the board as text for the console.

    Empty cells show their index so the player knows what to type.

    Example:
         X | 1 | O
        ---+---+---
         3 | X | 5
        ---+---+---
         6 | 7 | 8
    """
    symbols = [
        cell.value if cell is not None else str(index)
        for index, cell in enumerate(board)
    ]

    rows = []
    for row in range(0, NUM_CELLS, 3):
        rows.append(" " + " | ".join(symbols[row:row + 3]))
    text = "\n---+---+---\n".join(rows)

    if outcome is not None and outcome.is_over:
        text += "\n\n" + outcome.describe()

    return text
