import csv
import json

from apps.cli.run import main
from infowordle.dictionary import Dictionary
from infowordle.guesser import SolverOptions
from infowordle.harness import run_batch, run_case, write_csv

ANSWERS = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone"]
VALIDS = ["slate", "salet", "roate"]


def _dictionary():
    return Dictionary.from_pairs([(w, 1) for w in ANSWERS], valids=VALIDS)


def test_run_case_smoke():
    r = run_case(_dictionary(), "crane")
    assert "success" in r and "history" in r
    # Should solve within 6 in this tiny set
    assert r["success"] is True
    assert r["answer"] == "crane" and r["history"][-1] == ("crane", "GGGGG")
    assert r["guesses"] == len(r["history"])


def test_run_batch_solves_every_answer():
    results = run_batch(_dictionary(), options=SolverOptions(workers=2))
    assert [r["answer"] for r in results] == ANSWERS
    assert all(r["success"] for r in results)


def test_run_batch_sample():
    assert len(run_batch(_dictionary(), sample=3)) == 3


def test_write_csv(tmp_path):
    results = run_batch(_dictionary(), ["stare"])
    path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_rounds=2)
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["policy", "answer", "outcome", "success", "guesses", "pool_size",
                       "time_ms", "guess_1", "patt_1", "guess_2", "patt_2"]
    assert rows[1][1] == "stare" and rows[1][2] == "won"


def test_cli_batch_and_single_game(tmp_path, capsys):
    answers = tmp_path / "answers.txt"
    answers.write_text("".join(f"{w} 1\n" for w in ANSWERS), encoding="utf-8")
    valids = tmp_path / "valids.txt"
    valids.write_text("\n".join(VALIDS) + "\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    code = main(["--dictionary", str(answers), "--valids", str(valids),
                 "--outdir", str(outdir), "--progress", "off", "--sample", "4"])
    assert code == 0
    manifests = list(outdir.glob("*_manifest.json"))
    assert len(manifests) == 1
    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["num_cases"] == 4
    assert manifest["dictionary"]["answers"] == len(ANSWERS)
    assert manifest["options"]["policy"] == "entropy"

    assert main(["--dictionary", str(answers), "--secret", "alone"]) == 0
    assert "Solved 'alone'" in capsys.readouterr().out


def test_cli_reports_bad_input(tmp_path):
    bad = tmp_path / "answers.txt"
    bad.write_text("crane 1\ncran 2\n", encoding="utf-8")
    assert main(["--dictionary", str(bad)]) == 2
    assert main(["--dictionary", str(tmp_path / "missing.txt")]) == 2
