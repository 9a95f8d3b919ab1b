"""
Grid builders shared by the Connect Four tests.

Random grids are generated column by column as stacks of tokens, so every
generated grid respects gravity (no floating tokens).
"""

import numpy as np

from connect4.utils import Player
from connect4.game.grid import empty_grid, play_token

GRID_WIDTH = 7
GRID_HEIGHT = 6
GRID_VICTORY = 4
SEEDS = range(40)


def random_grid(rng: np.random.Generator, width: int = GRID_WIDTH,
                height: int = GRID_HEIGHT) -> np.ndarray:
    """Build a random valid grid: each column gets a random stack of tokens."""
    grid = np.full((height, width), Player.EMPTY.value, dtype=np.int8)
    for col in range(width):
        stack = int(rng.integers(0, height + 1))
        grid[:stack, col] = rng.choice([Player.A.value, Player.B.value], size=stack)
    return grid


def random_playable(rng: np.random.Generator):
    """Return a random grid with at least one playable column, and one such column."""
    while True:
        grid = random_grid(rng)
        playable = [col for col in range(grid.shape[1]) if grid[-1, col] == Player.EMPTY.value]
        if playable:
            return grid, int(rng.choice(playable))


def build_grid(width: int, height: int, moves) -> np.ndarray:
    """Play a sequence of (column, player) moves on an empty grid."""
    grid = empty_grid(width, height)
    for column, player in moves:
        grid = play_token(grid, column, player)
    return grid
