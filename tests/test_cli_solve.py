import logging
from pathlib import Path

import pytest
from apps.cli.solve import main, print_results

WORDS = ["abort", "aorta", "alarm", "crane", "trace",
         "react", "caret", "slate", "abbey", "board"]


@pytest.fixture
def dict_path(tmp_path: Path) -> Path:
    p = tmp_path / "words.txt"
    p.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return p


def test_solve_prints_matches(dict_path, capsys):
    assert main(["-d", str(dict_path), "aargh=G-Y--"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["1 word found", "ABORT"]


def test_solve_without_rows_lists_everything(dict_path, capsys):
    assert main(["-d", str(dict_path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("10 words found")


def test_solve_missing_dictionary(tmp_path, capsys):
    assert main(["-d", str(tmp_path / "missing.txt")]) == 1
    assert "not found" in capsys.readouterr().err


@pytest.mark.parametrize("row", ["crane", "cran=-----", "crane=--X--", "crane=---"])
def test_solve_rejects_bad_rows(dict_path, row):
    with pytest.raises(SystemExit):
        main(["-d", str(dict_path), row])


def test_solve_rejects_too_many_rows(dict_path):
    with pytest.raises(SystemExit):
        main(["-d", str(dict_path)] + ["crane=-----"] * 7)


def test_print_results_columns(capsys):
    print_results(["SLATE", "ABORT", "CRANE"], width=14)
    out = capsys.readouterr().out.splitlines()
    assert out == ["3 words found", "ABORT  CRANE", "SLATE"]

    print_results([f"W{i:04d}" for i in range(1200)], width=0)
    assert capsys.readouterr().out.startswith("1,200 words found")


@pytest.mark.parametrize("args,expected", [
    (["--board", "a...."], {"ABORT", "AORTA", "ALARM", "ABBEY"}),
    (["--board", "a....", "--unused", "l"], {"ABORT", "AORTA", "ABBEY"}),
    (["-b", "..a..", "-p", "c"], {"CRANE", "TRACE", "REACT"}),
    (["--unused", "e", "--board", "....t"], {"ABORT"}),
    (["--unplaced", "y"], {"ABBEY"}),
    (["aargh=G-Y--", "--unused", "o"], set()),
])
def test_solve_summary_mode(dict_path, capsys, args, expected):
    assert main(["-d", str(dict_path)] + args) == 0
    out = capsys.readouterr().out.splitlines()
    n = len(expected)
    assert out[0] == f"{n} {'word' if n == 1 else 'words'} found"
    assert set(" ".join(out[1:]).split()) == expected


@pytest.mark.parametrize("args", [
    ["--board", "a..."],
    ["--board", "a.1.."],
    ["--unused", "a1"],
    ["--unplaced", "r?"],
])
def test_solve_rejects_bad_summary(dict_path, args):
    with pytest.raises(SystemExit):
        main(["-d", str(dict_path)] + args)


def test_solve_debug_logs_rules(dict_path, capsys, caplog):
    caplog.set_level(logging.DEBUG, logger="wordlehelp.engine.matcher")
    assert main(["-d", str(dict_path), "--debug", "--board", "a....", "--unused", "l"]) == 0
    assert "candidates" in caplog.text
    assert capsys.readouterr().out.startswith("3 words found")
