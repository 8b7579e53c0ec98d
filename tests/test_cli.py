import io

import pytest
from loguru import logger

from automaton import cli


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger.remove()
    logger.disable("automaton")


def test_demo():
    out = io.StringIO()
    assert cli.main(["demo"], out=out) == 0
    text = out.getvalue()
    assert "START: 0" in text
    assert "  (t,0) => 1" in text
    assert "'toto': True" in text
    assert "'': True" in text
    assert "'tot': False" in text
    assert "'totototo': True" in text


def test_demo_automaton():
    dfa = cli.demo_automaton()
    results = [dfa.test(word) for word in cli.DEMO_WORDS]
    assert results == [True, True, False, False, False, False, True]


def test_words_from_file(tmp_path):
    path = tmp_path / "abc.txt"
    path.write_text("0\n0\na 0 1\nb 1 2\nc 2 0\n", encoding="utf-8")
    out = io.StringIO()
    assert cli.main([str(path), "abc", "ab"], out=out) == 0
    assert out.getvalue().splitlines() == ["'abc': True", "'ab': False"]


def test_kind_and_print(tmp_path):
    path = tmp_path / "enfa.txt"
    path.write_text("0\n2\na 0 1\n1 2\n", encoding="utf-8")
    out = io.StringIO()
    argv = ["--kind", "enfa", "--print", "--empty", str(path), "a"]
    assert cli.main(argv, out=out) == 0
    lines = out.getvalue().splitlines()
    assert lines[0] == "START: 0"
    assert "  1 => {2}" in lines
    assert lines[-2:] == ["'': False", "'a': True"]


def test_empty_word_only(tmp_path):
    path = tmp_path / "zero.txt"
    path.write_text("0\n0\n", encoding="utf-8")
    out = io.StringIO()
    assert cli.main(["-e", str(path)], out=out) == 0
    assert out.getvalue() == "'': True\n"


def test_reader_error(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("0\n0\na 0 1\na 0 2\n", encoding="utf-8")
    assert cli.main([str(path), "a"], out=io.StringIO()) == 1
    err = capsys.readouterr().err
    assert "error: Line 4" in err
    assert "DuplicatedTransition" in err


def test_missing_file(tmp_path, capsys):
    assert cli.main([str(tmp_path / "nope.txt"), "a"], out=io.StringIO()) == 1
    assert "error: IO error" in capsys.readouterr().err


def test_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2
    with pytest.raises(SystemExit):
        cli.main(["--kind", "pda", "file.txt", "a"])


def test_verbose_logging(tmp_path, capsys):
    path = tmp_path / "abc.txt"
    path.write_text("0\n0\na 0 1\nb 1 2\nc 2 0\n", encoding="utf-8")
    assert cli.main(["-vvv", str(path), "ab"], out=io.StringIO()) == 0
    err = capsys.readouterr().err
    assert "DEBUG: Finalized DFA" in err
    assert "TRACE:" in err


def test_log_level_from_environment(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("AUTOMATON_LOG_LEVEL", "debug")
    path = tmp_path / "abc.txt"
    path.write_text("0\n0\na 0 1\n", encoding="utf-8")
    assert cli.main([str(path), "a"], out=io.StringIO()) == 0
    err = capsys.readouterr().err
    assert "DEBUG: Finalized DFA" in err
    assert "TRACE:" not in err


def test_invalid_utf8_file(tmp_path, capsys):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"0\n0\n\xff 0 1\n")
    assert cli.main([str(path), "a"], out=io.StringIO()) == 1
    assert "error: IO error" in capsys.readouterr().err


def test_unknown_log_level(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("AUTOMATON_LOG_LEVEL", "loud")
    path = tmp_path / "abc.txt"
    path.write_text("0\n0\na 0 1\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(path), "a"], out=io.StringIO())
    assert excinfo.value.code == 2
    assert "AUTOMATON_LOG_LEVEL" in capsys.readouterr().err


def test_render_has_no_blank_line():
    out = io.StringIO()
    assert cli.main(["demo"], out=out) == 0
    lines = out.getvalue().splitlines()
    assert "" not in lines
    index = lines.index("TRANSITIONS:")
    assert lines[index + 5] == "'toto': True"
