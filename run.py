#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four terminal game
"""

from connect4.interfaces.cli import main


if __name__ == "__main__":
    main()
