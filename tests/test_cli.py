"""
Tests for the minigrep command line

Calls cli.main in-process with an explicit argument vector.
"""
from unittest.mock import patch

import pytest

from minigrep.cli import get_log_level, main

POEM = "Rust:\nsafe, fast, productive.\nPick three.\nTrust me.\n"


@pytest.fixture
def poem(tmp_path):
    path = tmp_path / "poem.txt"
    path.write_text(POEM, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def no_ignore_case(monkeypatch):
    monkeypatch.delenv("IGNORE_CASE", raising=False)


class TestMain:
    """Test exit codes and output streams."""

    def test_case_sensitive(self, poem, capsys):
        code = main(["minigrep", "Pick", str(poem)])

        out, err = capsys.readouterr()
        assert code == 0
        assert out == "Pick three.\n"
        assert err == ""

    def test_ignore_case_env(self, poem, capsys, monkeypatch):
        monkeypatch.setenv("IGNORE_CASE", "")

        code = main(["minigrep", "rUsT", str(poem)])

        assert code == 0
        assert capsys.readouterr().out == "Rust:\nTrust me.\n"

    def test_no_matches_is_success(self, poem, capsys):
        code = main(["minigrep", "zzz", str(poem)])

        assert code == 0
        assert capsys.readouterr().out == ""

    def test_missing_file_path(self, capsys):
        code = main(["minigrep", "foo"])

        out, err = capsys.readouterr()
        assert code == 1
        assert out == ""
        assert "Problem parsing arguments: Didn't get a file path" in err

    def test_missing_query(self, capsys):
        code = main(["minigrep"])

        out, err = capsys.readouterr()
        assert code == 1
        assert "Didn't get a query string" in err

    def test_unreadable_file(self, tmp_path, capsys):
        code = main(["minigrep", "foo", str(tmp_path / "missing.txt")])

        out, err = capsys.readouterr()
        assert code == 1
        assert out == ""
        assert err.startswith("Application error:")

    def test_invalid_utf8(self, tmp_path, capsys):
        path = tmp_path / "bad.bin"
        path.write_bytes(b"ok\n\xff\xff\n")

        code = main(["minigrep", "ok", str(path)])

        out, err = capsys.readouterr()
        assert code == 1
        assert out == ""
        assert "Application error:" in err

    def test_defaults_to_sys_argv(self, poem, capsys, monkeypatch):
        monkeypatch.setattr("sys.argv", ["minigrep", "safe", str(poem)])

        assert main() == 0
        assert capsys.readouterr().out == "safe, fast, productive.\n"


    def test_unknown_log_level_still_searches(self, poem, capsys, monkeypatch):
        monkeypatch.setenv("MINIGREP_LOG_LEVEL", "verbose")

        code = main(["minigrep", "Pick", str(poem)])

        out, err = capsys.readouterr()
        assert code == 0
        assert out == "Pick three.\n"
        assert "Traceback" not in err

    @patch("minigrep.adapters.output.StreamWriter.write_line", side_effect=BrokenPipeError)
    def test_closed_stdout_exits_quietly(self, mock_write, poem, capsys):
        code = main(["minigrep", "Pick", str(poem)])

        out, err = capsys.readouterr()
        assert code == 0
        assert "Application error" not in err
        mock_write.assert_called_once_with("Pick three.")


class TestLogLevel:
    """Test MINIGREP_LOG_LEVEL."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("MINIGREP_LOG_LEVEL", raising=False)
        assert get_log_level() == "WARNING"

    def test_override(self, monkeypatch):
        monkeypatch.setenv("MINIGREP_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    def test_unknown_name_falls_back(self, monkeypatch):
        monkeypatch.setenv("MINIGREP_LOG_LEVEL", "verbose")
        assert get_log_level() == "WARNING"

    def test_numeric_name_is_unknown(self, monkeypatch):
        monkeypatch.setenv("MINIGREP_LOG_LEVEL", "10")
        assert get_log_level() == "WARNING"
