"""Tests for scripts/analyze_config.py."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from analyze_config import print_analysis, print_sweep, self_play

from dontsay.models.state import Player


class TestSelfPlay:
    """Tests for optimal-vs-optimal games."""

    def test_classic_first_player_loses(self):
        assert self_play(13, "1,2", False) == Player.PLAYER_1

    def test_last_move_wins_first_player_wins(self):
        assert self_play(13, "1,2", True) == Player.PLAYER_2

    def test_no_step_fits_stalls(self):
        assert self_play(5, "7", False) is None


class TestReports:
    """Tests for the printed reports."""

    def test_analysis_shows_opening_move(self, capsys):
        print_analysis("13", "1,2", True)
        out = capsys.readouterr().out
        assert "Losing positions: [1, 4, 7, 10]" in out
        assert "Computer opening move: +1" in out

    def test_analysis_without_legal_move(self, capsys):
        print_analysis("5", "7", False)
        out = capsys.readouterr().out
        assert "Computer opening move: none (no step fits)" in out
        assert "+None" not in out

    def test_sweep_reports_stalled_targets(self, capsys):
        print_sweep(1, 3, "7", False)
        out = capsys.readouterr().out
        assert out.count("stalled") == 3
        assert "First player wins 0/3 targets" in out
