"""
Tests for the stdin host in main.py: output, stderr and exit status.
"""

from __future__ import annotations

import io

import main
import pytest


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    """Keep a developer's .env file out of the tests."""
    monkeypatch.setattr(main, "load_dotenv", lambda: None)


def _run(monkeypatch, text: str) -> int:
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    with pytest.raises(SystemExit) as exc:
        main.main()
    return exc.value.code


class TestHost:
    def test_prints_value(self, monkeypatch, capsys):
        assert _run(monkeypatch, "negative forty two\n") == main.EXIT_OK
        out, err = capsys.readouterr()
        assert out == "-42\n"
        assert err == ""

    def test_reads_to_end_of_stream(self, monkeypatch, capsys):
        assert _run(monkeypatch, "nine\nhundred\n") == 0
        assert capsys.readouterr().out == "900\n"

    def test_malformed_number(self, monkeypatch, capsys):
        assert _run(monkeypatch, "one two") == main.EXIT_INVALID_NUMBER == 7
        out, err = capsys.readouterr()
        assert out == ""
        assert "'two' cannot follow 'one'" in err

    def test_empty_stdin(self, monkeypatch, capsys):
        assert _run(monkeypatch, "") == 7
        assert "Empty input" in capsys.readouterr().err

    def test_unrelated_failure(self, monkeypatch, capsys):
        def _boom(text):
            raise RuntimeError("boom")

        monkeypatch.setattr(main, "parse_number", _boom)
        assert _run(monkeypatch, "five") == 7
        assert "Error unrelated to number format: boom" in capsys.readouterr().err

    def test_bad_configuration_is_unrelated_failure(self, monkeypatch, capsys):
        monkeypatch.setenv("NUMBER_WORDS_INT_BITS", "-1")
        assert _run(monkeypatch, "five") == 7
        assert "Error unrelated to number format" in capsys.readouterr().err
