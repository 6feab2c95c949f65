"""Tests for the command line entry point."""
import json
import pytest
from unittest.mock import patch

import main
from kanatype.schema import Score


class TestReplay:
    """Test replaying keystrokes."""

    def test_complete_line(self):
        """A fully typed line is finished."""
        score = main.replay('かっと', 'katto')
        assert isinstance(score, Score)
        assert score.finished == 1
        assert score.hit == 5

    def test_incomplete_line(self):
        """A partially typed line leaves kana missed."""
        score = main.replay('かっと', 'ka')
        assert score.finished == 0
        assert score.missed == 2

    def test_keys_after_completion_ignored(self):
        """Replay stops once the line is complete."""
        score = main.replay('か', 'kaqqq')
        assert score.missed == 0


class TestMain:
    """Test main()."""

    def test_json_output(self, capsys):
        """--json prints the score as JSON."""
        assert main.main(['かっと', 'katto', '--json']) == 0
        out = capsys.readouterr().out
        line = [l for l in out.splitlines() if l.startswith('{')][-1]
        assert json.loads(line)['finished'] == 1

    def test_check_table(self):
        """The shipped table passes validation."""
        assert main.main(['--check-table']) == 0

    def test_check_table_failure(self):
        """Table problems make the check fail."""
        with patch('main.validate_mapping', return_value=["'か': broken"]):
            assert main.main(['--check-table']) == 1

    def test_line_required(self):
        """LINE is mandatory without --check-table."""
        with pytest.raises(SystemExit):
            main.main([])

    def test_reading(self):
        """--reading converts the line before typing."""
        with patch('kanatype.kana.reading.to_kana_reading', return_value='にほん') as mock_reading:
            with patch('main.replay', return_value=Score()) as mock_replay:
                assert main.main(['日本', 'nihonn', '--reading']) == 0
        mock_reading.assert_called_once_with('日本')
        mock_replay.assert_called_once_with('にほん', 'nihonn')
