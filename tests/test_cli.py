# tests/test_cli.py
import pytest

from koine import cli


@pytest.fixture(autouse=True)
def _no_cgi(monkeypatch):
    monkeypatch.delenv("QUERY_STRING", raising=False)


def _stdout_lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_resolve_count():
    assert cli.resolve_count(0, None) == 1
    assert cli.resolve_count(3, None) == 3
    assert cli.resolve_count(2, "n=5") == 5
    assert cli.resolve_count(7, "3") == 7
    assert cli.resolve_count(0, "") == 1


def test_plain_sentences(capsys):
    assert cli.run(["4", "--seed", "5"]) == 0
    lines = _stdout_lines(capsys)
    assert len(lines) == 4
    assert all(line[-1] in ".;·" and "[" not in line for line in lines)


def test_show_parsing(capsys):
    assert cli.run(["2", "--seed", "5", "--show-parsing"]) == 0
    lines = _stdout_lines(capsys)

    assert lines[-1] == cli.PARSING_NOTE
    assert cli.SEPARATOR in lines
    plain, parsed = lines[:2], lines[5:7]
    assert all("[" in line for line in parsed)
    assert [cli.strip_annotations(line) for line in parsed] == plain


def test_annotate_only(capsys):
    assert cli.run(["--seed", "1", "--annotate"]) == 0
    lines = _stdout_lines(capsys)
    assert len(lines) == 1
    assert "[" in lines[0]


def test_cgi_header_and_query_count(capsys, monkeypatch):
    monkeypatch.setenv("QUERY_STRING", "3")
    assert cli.run(["--seed", "9"]) == 0
    lines = _stdout_lines(capsys)
    assert lines[0] == "Content-Type: text/plain; charset=utf-8"
    assert lines[1] == ""
    assert len(lines[2:]) == 3


def test_main_exits_with_status(capsys):
    with pytest.raises(SystemExit) as info:
        cli.main(["1", "--seed", "2"])
    assert info.value.code == 0
