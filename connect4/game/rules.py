"""
rules.py - Game state management for Connect Four

This module provides ConnectFourGame, which tracks whose turn it is and how the
game stands. It holds the current grid as an immutable snapshot and replaces it
with the grid returned by play_token on every move.
"""

from typing import List, Optional, Tuple

from connect4.debug import debug
from connect4.utils import DEFAULT_WIDTH, DEFAULT_HEIGHT, CONNECT_N, Player, GameResult, render_grid_ascii
from connect4.game.grid import (Grid, InvalidMove, empty_grid, play_token, check_last_move_on,
                                last_move_row, playable_columns, is_full, winning_line)


class ConnectFourGame:
    """
    High-level Connect Four game manager.

    The grid is never modified in place: after each move `grid` refers to a new
    snapshot, so references to earlier grids stay valid and unchanged.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 connect_n: int = CONNECT_N):
        """
        Initialize a new Connect Four game.

        Args:
            width: Number of columns
            height: Number of rows
            connect_n: Number of aligned tokens needed to win
        """
        if connect_n < 1:
            raise ValueError(f"connect_n must be at least 1, got {connect_n}")

        debug.debug(f"Initializing ConnectFourGame {width}x{height}, connect {connect_n}", "game")
        self.width = width
        self.height = height
        self.connect_n = connect_n
        self.reset()

    def reset(self) -> None:
        """Reset the game to initial state."""
        debug.debug("Resetting game", "game")
        self.grid: Grid = empty_grid(self.width, self.height)
        self.current_player = Player.A
        self.game_result = GameResult.IN_PROGRESS
        self.last_move: Optional[Tuple[int, int]] = None
        self.moves_played = 0

    def make_move(self, column: int) -> Grid:
        """
        Play the current player's token in a column.

        Args:
            column: Column to play in (0-indexed)

        Returns:
            The new grid snapshot

        Raises:
            InvalidMove: If the game is over or the column cannot be played
        """
        if self.game_result.is_game_over():
            debug.debug(f"Invalid move: game is over (result: {self.game_result.name})", "game")
            raise InvalidMove("The game is already over")

        debug.debug(f"Player {self.current_player.name} plays column {column}", "game")
        self.grid = play_token(self.grid, column, self.current_player)
        self.last_move = (last_move_row(self.grid, column), column)
        self.moves_played += 1

        debug.start_timer("win_check")
        if check_last_move_on(self.grid, column, self.connect_n):
            if self.current_player == Player.A:
                self.game_result = GameResult.PLAYER_A_WIN
            else:
                self.game_result = GameResult.PLAYER_B_WIN
            debug.info(f"Player {self.current_player.name} wins after move at {self.last_move}", "game")
        elif is_full(self.grid):
            self.game_result = GameResult.DRAW
            debug.info("Game ends in a draw", "game")
        debug.end_timer("win_check", "game")

        if not self.game_result.is_game_over():
            self.current_player = self.current_player.other()

        return self.grid

    def is_game_over(self) -> bool:
        return self.game_result.is_game_over()

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The winning player, or None if no winner yet or draw
        """
        if self.game_result == GameResult.PLAYER_A_WIN:
            return Player.A
        elif self.game_result == GameResult.PLAYER_B_WIN:
            return Player.B
        return None

    def get_current_player(self) -> Player:
        return self.current_player

    def get_valid_moves(self) -> List[int]:
        """Get the columns the current player may play, empty once the game is over."""
        if self.is_game_over():
            return []
        return playable_columns(self.grid)

    def get_winning_line(self) -> List[Tuple[int, int]]:
        """
        Get the positions of the winning run if the game is won.

        Returns:
            List of (row, col) positions, or empty list if no win
        """
        if self.get_winner() is None or self.last_move is None:
            return []
        return winning_line(self.grid, self.last_move[1], self.connect_n)

    def render(self) -> str:
        return render_grid_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
