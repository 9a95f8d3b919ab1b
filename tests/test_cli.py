"""
Tests for the terminal interface, driven with scripted input.
"""

import pytest

from connect4.debug import debug, DebugLevel
from connect4.interfaces.cli import SimpleCLI, main


@pytest.fixture
def scripted_input(monkeypatch):
    def feed(*answers):
        answers = iter(answers)
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    return feed


class TestArguments:

    def test_play_options(self):
        cli = SimpleCLI()
        cli.parse_args(["play", "--width", "5", "--height", "4", "--connect", "3"])
        assert cli.args.command == "play"
        assert (cli.args.width, cli.args.height, cli.args.connect) == (5, 4, 3)

    def test_debug_flag_sets_level(self):
        SimpleCLI().parse_args(["play", "--debug"])
        assert debug.level == DebugLevel.DEBUG

    def test_debug_level_option(self):
        SimpleCLI().parse_args(["play", "--debug_level", "error"])
        assert debug.level == DebugLevel.ERROR

    def test_missing_command_exits(self):
        cli = SimpleCLI()
        cli.parse_args([])
        with pytest.raises(SystemExit):
            cli.run()


class TestPlay:

    def test_vertical_win(self, scripted_input, capsys):
        scripted_input("0", "1", "0", "1", "0", "1", "0")
        main(["play", "--width", "4", "--height", "4"])
        out = capsys.readouterr().out
        assert "Game over!" in out
        assert "Player A (X) wins!" in out

    def test_bad_input_and_quit(self, scripted_input, capsys):
        scripted_input("x", "9", "q")
        main(["play"])
        out = capsys.readouterr().out
        assert "Invalid input" in out
        assert "Invalid move: Column 9 is outside the grid" in out
        assert "Quitting game." in out

    def test_full_column_reported(self, scripted_input, capsys):
        scripted_input("0", "0", "q")
        main(["play", "--width", "3", "--height", "1", "--connect", "3"])
        out = capsys.readouterr().out
        assert "Invalid move: Column 0 is full" in out

    def test_restart(self, scripted_input, capsys):
        scripted_input("0", "r", "q")
        cli = SimpleCLI()
        cli.parse_args(["play"])
        cli.run()
        assert "Game restarted." in capsys.readouterr().out
        assert cli.game.moves_played == 0

    def test_draw(self, scripted_input, capsys):
        scripted_input("0", "1")
        main(["play", "--width", "2", "--height", "1", "--connect", "3"])
        assert "It's a draw!" in capsys.readouterr().out

    def test_negative_column_is_a_move_not_a_command(self, scripted_input, capsys):
        scripted_input("-1", "q")
        main(["play"])
        out = capsys.readouterr().out
        assert "Invalid move: Column -1 is outside the grid" in out
        assert "Quitting game." in out
