"""Tests for bulk token feeding."""

import math

import pandas as pd

from column_summaries import ChainedSummaries, NumRange, StringCounter, TimeRange, capture_all


def test_capture_all_counts_accepted_tokens() -> None:
    r = NumRange(int)
    assert capture_all(r, ["1", "x", "-4", "2.5"], progress=False) == 2
    assert r.extrema() == (-4, 1)


def test_capture_all_skips_missing_values() -> None:
    s = StringCounter()
    accepted = capture_all(s, ["a", None, math.nan, "a", 7], progress=False)
    assert accepted == 3
    assert s.ranked() == [("a", 2), ("7", 1)]


def test_capture_all_from_series() -> None:
    column = pd.Series(["2000-01-01", None, "1999-05-05", "junk"])
    chain = ChainedSummaries(TimeRange('date'), StringCounter())
    assert capture_all(chain, column, progress=False) == 3
    assert chain[0].count() == 2
    assert chain[1].ranked() == [("junk", 1)]


def test_capture_all_with_progress_bar(capsys) -> None:
    s = StringCounter()
    assert capture_all(s, ["a", "b"], progress=True, desc="column a") == 2
    assert "column a" in capsys.readouterr().err


def test_capture_all_reads_progress_from_config(isolated_config) -> None:
    (isolated_config / 'column_summaries.yaml').write_text('stream:\n  progress: false\n')
    s = StringCounter()
    assert capture_all(s, iter(["x", "y", "x"])) == 3
    assert s.ranked() == [("x", 2), ("y", 1)]
