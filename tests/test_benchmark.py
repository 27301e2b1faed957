import pandas as pd
import pytest

from bkspell import benchmark
from bkspell.spell_checker import SpellChecker


@pytest.fixture
def checker():
    spell = SpellChecker(tolerance=1, algorithm="levenshtein")
    spell.add_words(["cat", "cot", "dog"])
    return spell


def test_evaluate_builds_report(checker):
    df = benchmark.evaluate(checker, ["Cat", "cut", "xyz"])

    assert list(df.columns) == benchmark.REPORT_COLUMNS
    assert df["query"].tolist() == ["cat", "cut", "xyz"]
    assert df["exact_match"].tolist() == [True, False, False]
    assert df["candidates"].tolist() == ["", "cat, cot", ""]
    assert df["candidate_count"].tolist() == [0, 2, 0]
    assert (df["elapsed_seconds"] >= 0).all()


def test_evaluate_tolerance_override(checker):
    df = benchmark.evaluate(checker, ["cut"], tolerance=0)
    assert df["candidate_count"].tolist() == [0]


def test_main_writes_csv(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("cat\ncot\ndog\n", encoding="utf-8")
    queries = tmp_path / "queries.txt"
    queries.write_text("cut\ndog\n", encoding="utf-8")
    output = tmp_path / "report.csv"

    code = benchmark.main([
        "--words", str(words),
        "--queries", str(queries),
        "--tolerance", "1",
        "--algorithm", "rapidfuzz",
        "--output", str(output),
    ])

    assert code == 0
    report = pd.read_csv(output)
    assert report["query"].tolist() == ["cut", "dog"]
    assert report["exact_match"].tolist() == [False, True]


def test_main_missing_queries(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("cat\n", encoding="utf-8")
    code = benchmark.main([
        "--words", str(words),
        "--queries", str(tmp_path / "missing.txt"),
        "--output", str(tmp_path / "report.csv"),
    ])
    assert code == 1
