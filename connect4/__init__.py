"""
connect4 - Connect Four grid engine

This package provides the rules of a Connect Four style game on a grid of any
size: creating grids, dropping tokens under gravity and detecting N-in-a-row,
plus a small game manager and terminal interface built on those rules.
"""

# Version number
__version__ = '0.1.0'
