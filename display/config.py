"""
Display configuration for TicTacToe.
Sizes, colours and board geometry for the rendered board.
"""

from typing import Optional

import numpy as np


class DisplayConfig:
    """
    Configuration class for display settings.
    All distances are in pixels.
    """

    # ==================== BOARD GEOMETRY ====================
    BOARD_SIZE = 3
    CELL_SIZE = 120
    MARGIN = 20

    # Total image size (square)
    IMAGE_SIZE = CELL_SIZE * BOARD_SIZE + 2 * MARGIN  # 400 pixels

    # ==================== LINE WIDTHS ====================
    GRID_WIDTH = 4
    MARK_WIDTH = 10
    MARK_PADDING = 28       # Gap between a mark and its cell border
    WIN_LINE_WIDTH = 8
    WIN_LINE_OVERSHOOT = 30  # How far the winning line extends past the end cells

    # ==================== COLOURS ====================
    BACKGROUND_COLOR = '#1a1a2e'
    GRID_COLOR = '#00d4ff'
    X_COLOR = '#f87171'
    O_COLOR = '#10b981'
    WIN_LINE_COLOR = '#ffd700'

    # ==================== TEXT ====================
    FONT = ('Segoe UI', 11)
    TITLE_FONT = ('Segoe UI', 16, 'bold')

    @classmethod
    def cell_origin(cls, index: int) -> np.ndarray:
        """
        Top-left corner of a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            (x, y) in pixels.
        """
        row, col = divmod(index, cls.BOARD_SIZE)
        return cls.MARGIN + np.array([col, row], dtype=float) * cls.CELL_SIZE

    @classmethod
    def cell_center(cls, index: int) -> np.ndarray:
        """Centre of a cell as (x, y) in pixels."""
        return cls.cell_origin(index) + cls.CELL_SIZE / 2

    @classmethod
    def cell_at(cls, x: float, y: float) -> Optional[int]:
        """
        Convert a pixel position to a cell index.

        Returns:
            Cell index (0-8), or None if the point is outside the grid.
        """
        col, row = np.floor_divide(np.array([x, y], dtype=float) - cls.MARGIN, cls.CELL_SIZE).astype(int)
        if not (0 <= row < cls.BOARD_SIZE and 0 <= col < cls.BOARD_SIZE):
            return None
        return int(row * cls.BOARD_SIZE + col)
