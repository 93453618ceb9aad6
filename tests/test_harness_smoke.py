import csv
import json
from wordlehelp.dictionary import Dictionary
from wordlehelp.harness import replay_case, replay_batch, write_csv, write_manifest

WORDS = ["abort", "aorta", "alarm", "crane", "trace",
         "react", "caret", "slate", "abbey", "board"]


def test_replay_case_smoke():
    d = Dictionary(WORDS)
    r = replay_case(d, "react", ["crane", "react"])
    assert r["solved"] is True
    assert r["rows"] == 2
    assert r["answer_kept"] is True
    assert r["final_count"] == 1
    assert r["history"][0] == ("CRANE", "YYG-Y", 1)


def test_replay_answer_outside_dictionary():
    d = Dictionary(WORDS)
    r = replay_case(d, "zebra", ["crane"])
    assert r["answer_kept"] is None
    assert r["solved"] is False


def test_replay_batch_never_loses_answer():
    d = Dictionary(WORDS)
    results = replay_batch(d, d, ["slate", "crane", "abbey"])
    assert len(results) == len(WORDS)
    assert all(r["answer_kept"] is True for r in results)

    assert len(replay_batch(d, d, ["slate"], sample=3)) == 3


def test_write_outputs(tmp_path):
    d = Dictionary(WORDS)
    results = replay_batch(d, ["react", "slate"], ["crane"])
    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["answer"] for r in rows] == ["REACT", "SLATE"]
    assert rows[0]["patt_1"] == "'YYG-Y"
    assert rows[0]["guess_2"] == ""

    m_path = write_manifest({"num_cases": 2}, str(tmp_path / "out" / "m.json"))
    with open(m_path, encoding="utf-8") as f:
        assert json.load(f) == {"num_cases": 2}


def test_replay_batch_with_propagation_never_loses_answer():
    d = Dictionary(WORDS)
    results = replay_batch(d, d, ["crane", "trace", "caret"], propagate=True)
    assert all(r["answer_kept"] is True for r in results)


def test_replay_case_with_propagation_repeated_letter_in_column():
    d = Dictionary(["tlsoo", "aatoo", "ianca", "innas", "nslio"])
    r = replay_case(d, "nslio", ["tlsoo", "aatoo", "ianca", "innas"], propagate=True)
    assert r["answer_kept"] is True
    assert r["final_count"] >= 1
