"""
grid.py - Grid representation and core rules for Connect Four

This module implements the pure functions at the heart of the game: creating
an empty grid, dropping a token into a column, and checking whether the last
token played completed a winning run.

Grids are 2D numpy arrays of shape (height, width) holding Player values, with
row 0 at the bottom. Every grid returned here is read-only; playing a token
produces a new grid and never modifies the one passed in.
"""

import numpy as np
from typing import List, Optional, Tuple

from connect4.debug import debug
from connect4.utils import Player, DIRECTION_VECTORS, is_valid_position

Grid = np.ndarray
Position = Tuple[int, int]


class InvalidMove(ValueError):
    """Raised when a token cannot be played in the requested column."""


def _freeze(grid: np.ndarray) -> Grid:
    grid.flags.writeable = False
    return grid


def empty_grid(width: int, height: int) -> Grid:
    """
    Create an empty grid.

    Args:
        width: Number of columns (may be 0)
        height: Number of rows (may be 0)

    Returns:
        A read-only grid of shape (height, width) filled with Player.EMPTY
    """
    if width < 0 or height < 0:
        raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")

    debug.trace(f"Creating empty {width}x{height} grid", "grid")
    return _freeze(np.full((height, width), Player.EMPTY.value, dtype=np.int8))


def column_height(grid: Grid, column: int) -> int:
    """
    Get the number of tokens stacked in a column.

    Args:
        grid: The game grid
        column: The column to check

    Returns:
        Height of the filled run starting at row 0
    """
    empty_rows = np.flatnonzero(grid[:, column] == Player.EMPTY.value)
    return int(empty_rows[0]) if empty_rows.size else grid.shape[0]


def last_move_row(grid: Grid, column: int) -> Optional[int]:
    """Return the row of the uppermost token in a column, or None if it is empty."""
    filled_rows = np.flatnonzero(grid[:, column] != Player.EMPTY.value)
    return int(filled_rows[-1]) if filled_rows.size else None


def playable_columns(grid: Grid) -> List[int]:
    """Get the columns that can still receive a token."""
    height = grid.shape[0]
    return [col for col in range(grid.shape[1]) if column_height(grid, col) < height]


def is_full(grid: Grid) -> bool:
    """Check whether no column can receive another token."""
    return not playable_columns(grid)


def play_token(grid: Grid, column: int, player: Player) -> Grid:
    """
    Drop a token into a column.

    Args:
        grid: The current grid, left untouched
        column: The column to play in (0-indexed)
        player: The player dropping the token

    Returns:
        A new read-only grid with the token at the lowest empty row of the column

    Raises:
        InvalidMove: If the column is out of range or full, or player is EMPTY
    """
    grid = np.asarray(grid)
    height, width = grid.shape

    if player == Player.EMPTY:
        debug.debug(f"Invalid move: cannot play an empty token in column {column}", "grid")
        raise InvalidMove("Cannot play an empty token")

    if not (0 <= column < width):
        debug.debug(f"Invalid move: column {column} out of bounds", "grid")
        raise InvalidMove(f"Column {column} is outside the grid (width {width})")

    row = column_height(grid, column)
    if row >= height:
        debug.debug(f"Invalid move: column {column} is full", "grid")
        raise InvalidMove(f"Column {column} is full")

    debug.trace(f"Placing {player.name} at position ({row}, {column})", "grid")
    next_grid = grid.copy()
    next_grid[row, column] = player.value
    return _freeze(next_grid)


def _run_through(grid: Grid, row: int, col: int, dr: int, dc: int) -> List[Position]:
    """Collect the contiguous run of the token at (row, col) along (dr, dc), both ways."""
    player_value = grid[row, col]
    positions = [(row, col)]

    r, c = row + dr, col + dc
    while is_valid_position(grid, r, c) and grid[r, c] == player_value:
        positions.append((r, c))
        r += dr
        c += dc

    r, c = row - dr, col - dc
    while is_valid_position(grid, r, c) and grid[r, c] == player_value:
        positions.insert(0, (r, c))
        r -= dr
        c -= dc

    return positions


def winning_line(grid: Grid, column: int, win_length: int) -> List[Position]:
    """
    Get the winning run completed by the last token played in a column.

    Args:
        grid: The grid after the move
        column: The column of the last move
        win_length: Number of aligned tokens needed to win

    Returns:
        List of (row, col) positions of the first winning run found through the
        last move, or an empty list if that move did not win
    """
    grid = np.asarray(grid)
    if not (0 <= column < grid.shape[1]):
        return []

    row = last_move_row(grid, column)
    if row is None:
        return []

    for direction, (dr, dc) in DIRECTION_VECTORS.items():
        positions = _run_through(grid, row, column, dr, dc)
        if len(positions) >= win_length:
            debug.trace(f"{direction.name} run of {len(positions)} through ({row}, {column})", "grid")
            return positions

    return []


def check_last_move_on(grid: Grid, column: int, win_length: int) -> bool:
    """
    Check if the last token played in a column completed a winning run.

    The last move is taken to be the uppermost token of the column. Runs are
    counted horizontally, vertically and along both diagonals, on both sides
    of that token.

    Args:
        grid: The grid after the move
        column: The column of the last move
        win_length: Number of aligned tokens needed to win

    Returns:
        True if the move made a run of at least win_length tokens
    """
    return bool(winning_line(grid, column, win_length))
