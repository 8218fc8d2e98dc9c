"""
Tests for the command line interface.
"""

import os

import pytest

from paceband import cli


class TestCliTable:
    """Split table output."""

    def test_marathon_table(self, capsys):
        assert cli.main(["03:00:00"]) == 0

        out = capsys.readouterr().out
        assert "0:04:15" in out
        assert "42.195" in out
        assert "3:00:00" in out

    def test_unparsable_goal(self, capsys):
        assert cli.main(["abc"]) == 2
        assert "cannot parse goal time" in capsys.readouterr().err

    def test_switch_to_miles(self, capsys):
        assert cli.main(["01:45:00", "--distance", "21.0975", "--to-unit", "mi"]) == 0
        assert "13.1094" in capsys.readouterr().out

    def test_switch_non_standard_refused(self, capsys):
        assert cli.main(["01:00:00", "--distance", "10", "--to-unit", "mi"]) == 2
        assert "not a standard distance" in capsys.readouterr().err

    def test_non_positive_distance(self):
        with pytest.raises(SystemExit):
            cli.main(["01:00:00", "--distance", "0"])


class TestCliPdf:
    """PDF output."""

    def test_writes_pdf(self, tmp_path):
        assert cli.main(["03:00:00", "--pdf", str(tmp_path)]) == 0

        path = tmp_path / "pace-band-03:00:00.pdf"
        assert path.read_bytes().startswith(b"%PDF")
        assert sorted(p.name for p in tmp_path.iterdir()) == [path.name]

    def test_separator_in_goal_stays_in_dir(self, tmp_path):
        out_dir = tmp_path / "bands"

        assert cli.main(["3:00/00", "--distance", "10", "--pdf", str(out_dir)]) == 0

        assert [p.name for p in out_dir.iterdir()] == ["pace-band-3:00_00.pdf"]
        assert sorted(p.name for p in tmp_path.iterdir()) == ["bands"]

    def test_atomic_write_leaves_nothing_on_failure(self, tmp_path, monkeypatch):
        def fail_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(cli.os, "replace", fail_replace)

        with pytest.raises(OSError):
            cli.write_atomic(tmp_path / "band.pdf", b"%PDF-partial")
        assert os.listdir(tmp_path) == []
