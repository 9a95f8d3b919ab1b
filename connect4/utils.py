"""
utils.py - Utility functions and constants for the Connect Four grid engine

This module provides common constants, enumerations, and helper functions
used throughout the Connect Four implementation.
"""

from enum import Enum, auto
from typing import Dict, Tuple
import numpy as np

# Default game constants
DEFAULT_WIDTH = 7
DEFAULT_HEIGHT = 6
CONNECT_N = 4  # Number of tokens in a row to win

class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    A = 1    # First player
    B = 2    # Second player

    def other(self):
        """Get the other player."""
        if self == Player.A:
            return Player.B
        elif self == Player.B:
            return Player.A
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.A:
            return "X"
        else:
            return "O"


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_A_WIN = auto()
    PLAYER_B_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()  # Bottom-left to top-right
    DIAGONAL_DOWN = auto()  # Top-left to bottom-right


# Direction vectors (row, col) for each direction, row 0 being the bottom
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (1, 1),
    Direction.DIAGONAL_DOWN: (-1, 1)
}


def is_valid_position(grid: np.ndarray, row: int, col: int) -> bool:
    """
    Check if a position is within the grid boundaries.

    Args:
        grid: The game grid
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    height, width = grid.shape
    return 0 <= row < height and 0 <= col < width


def render_grid_ascii(grid: np.ndarray) -> str:
    """
    Render the grid as ASCII art, top row first.

    Args:
        grid: The game grid

    Returns:
        ASCII representation of the grid
    """
    height, width = grid.shape
    border = "|" + "-" * max(width * 2 - 1, 0) + "|"

    result = [border]
    for row in range(height - 1, -1, -1):
        cells = [str(Player(int(grid[row, col]))) for col in range(width)]
        result.append("|" + " ".join(cells) + "|")
    result.append(border)

    # Column numbers wrap past 9 so the labels stay aligned
    result.append("|" + " ".join(str(col % 10) for col in range(width)) + "|")

    return "\n".join(result)
