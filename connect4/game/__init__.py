"""
connect4.game - Core game mechanics for Connect Four

This package contains the grid engine (empty grids, token drops and win
detection) and the game state manager built on top of it.
"""

from connect4.game.grid import (InvalidMove, empty_grid, play_token, check_last_move_on,
                                column_height, last_move_row, playable_columns, is_full,
                                winning_line)
from connect4.game.rules import ConnectFourGame

__all__ = ['InvalidMove', 'empty_grid', 'play_token', 'check_last_move_on',
           'column_height', 'last_move_row', 'playable_columns', 'is_full',
           'winning_line', 'ConnectFourGame']
