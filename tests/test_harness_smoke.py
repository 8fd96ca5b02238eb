import csv

from mastermind.engine import DEFAULT_RULES, Feedback, Rules
from mastermind.game import run_batch, run_case, summarize, write_csv, write_manifest
from mastermind.game.harness import pretty_summary
from mastermind.game.io import format_feedback

SMALL = Rules(palette=("red", "yellow", "green"), code_length=3)


def test_run_case_smoke():
    rules = DEFAULT_RULES.with_overrides(max_turns=DEFAULT_RULES.space_size)
    r = run_case(("red", "red", "green", "blue"), rules=rules, seed=42)
    assert "success" in r and "history" in r
    assert r["success"] is True
    assert r["history"][-1] == (("red", "red", "green", "blue"), Feedback(4, 0))
    assert r["candidates_left"] == 1


def test_run_batch_is_reproducible():
    a = run_batch(5, rules=SMALL, seed=3)
    b = run_batch(5, rules=SMALL, seed=3)
    assert len(a) == 5
    assert [r["history"] for r in a] == [r["history"] for r in b]


def test_summarize():
    results = [
        {"success": True, "guesses": 3, "time_ms": 1.0},
        {"success": False, "guesses": 12, "time_ms": 3.0},
    ]
    s = summarize(results)
    assert s["games"] == 2 and s["wins"] == 1
    assert s["win_rate"] == 0.5
    assert s["mean_guesses"] == 3.0
    assert s["max_guesses"] == 3
    assert s["mean_time_ms"] == 2.0
    assert "wins=1 (50.0%)" in pretty_summary(s)


def test_summarize_empty():
    assert summarize([])["games"] == 0


def test_write_csv_and_manifest(tmp_path):
    results = run_batch(2, rules=SMALL, seed=1)
    path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_turns=SMALL.max_turns)
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert rows[0]["game"] == "1"
    assert rows[0]["fb_1"].startswith("E")
    assert rows[0]["guess_12"] == "" or rows[0]["guesses"] == "12"

    m = write_manifest({"run_id": "x", "summary": summarize(results)}, str(tmp_path / "m.json"))
    assert (tmp_path / "m.json").read_text(encoding="utf-8").startswith("{")
    assert m.endswith("m.json")


def test_format_feedback():
    assert format_feedback(Feedback(2, 1)) == "E2P1"
