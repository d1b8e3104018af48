"""
Tests for the block_algebra command line.
"""

import json

import pytest

from block_algebra.block import Block
from block_algebra.block_set import BlockSet
from block_algebra.cli import main, parse_block, render


class TestParsing:
    def test_parse_block(self):
        assert parse_block("3,8") == Block(3, 8)
        assert parse_block("8, 3") == Block(3, 8)
        assert parse_block("0.5,1.5") == Block(0.5, 1.5)

    def test_parse_block_rejects_bad_shape(self):
        import argparse

        with pytest.raises(argparse.ArgumentTypeError):
            parse_block("1,2,3")
        with pytest.raises(argparse.ArgumentTypeError):
            parse_block("one,two")
        with pytest.raises(argparse.ArgumentTypeError):
            parse_block("1,nan")

    def test_render(self):
        assert render(Block(3, 8)) == "3 8"
        assert render(BlockSet([Block(0, 1), Block(2, 3)])) == "0 1\n2 3"
        assert render(BlockSet.empty()) == ""
        assert render(Block(3, 8), as_json=True) == "[[3, 8]]"


class TestCommands:
    def test_merge(self, capsys):
        assert main(["merge", "1,5", "3,8", "10,12"]) == 0
        assert capsys.readouterr().out == "1 8\n10 12\n"

    def test_union_disjoint(self, capsys):
        assert main(["union", "10,15", "0,5"]) == 0
        assert capsys.readouterr().out == "0 5\n10 15\n"

    def test_subtract_json(self, capsys):
        assert main(["--json", "subtract", "5,25", "10,20"]) == 0
        assert json.loads(capsys.readouterr().out) == [[5, 10], [20, 25]]

    def test_subtract_many(self, capsys):
        assert main(["subtract", "0,10", "6,8", "2,4"]) == 0
        assert capsys.readouterr().out == "0 2\n4 6\n8 10\n"

    def test_subtract_everything_prints_nothing(self, capsys):
        assert main(["subtract", "5,10", "0,20"]) == 0
        assert capsys.readouterr().out == ""

    def test_free(self, capsys):
        assert main(["free", "--window", "540,1260", "--busy", "600,660", "--busy", "900,960"]) == 0
        assert capsys.readouterr().out == "540 600\n660 900\n960 1260\n"

    def test_free_flags(self, capsys):
        args = ["--json", "free", "--window", "0,100", "--busy", "40,60", "--pad-before", "5", "--min-length", "36"]
        assert main(args) == 0
        assert json.loads(capsys.readouterr().out) == [[60, 100]]

    def test_free_with_profile(self, tmp_path, capsys):
        path = tmp_path / "availability.yaml"
        path.write_text("profiles:\n  focus:\n    pad_before: 10\n    pad_after: 10\n    min_length: 60\n")
        args = ["--json", "free", "--window", "540,1260", "--busy", "600,660", "--profile", "focus", "--config", str(path)]
        assert main(args) == 0
        assert json.loads(capsys.readouterr().out) == [[670, 1260]]


class TestErrors:
    def test_invalid_block_exits_2(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["merge", "1,nan"])
        assert exc.value.code == 2
        assert "invalid block" in capsys.readouterr().err

    def test_unknown_profile_returns_2(self, capsys):
        assert main(["free", "--window", "0,10", "--profile", "nope"]) == 2
        assert "Unknown availability profile" in capsys.readouterr().err

    def test_unknown_log_level_exits_2(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--log-level", "loud", "merge", "1,2"])
        assert exc.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_log_level_case_insensitive(self, capsys):
        assert main(["--log-level", "debug", "merge", "1,2"]) == 0
        assert capsys.readouterr().out == "1 2\n"

    def test_missing_command(self):
        with pytest.raises(SystemExit):
            main([])
