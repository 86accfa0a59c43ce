"""Tests for formatting helpers and summary rendering."""

import datetime
import logging
import os

from column_summaries import ChainedSummaries, NumRange, StringCounter, TimeRange, get_config, render
from column_summaries.config import loaded_config
from column_summaries.display import bits_annotation, padded_count_percentages, percentage_string
from column_summaries.display.formatting import format_value, span


# ---------------------------------------------------------------------------
# Formatting helpers


def test_percentage_string() -> None:
    assert percentage_string(0, 10) == ' ∅ '
    assert percentage_string(10, 10) == 'all'
    assert percentage_string(1, 1000) == '<1%'
    assert percentage_string(1, 20) == ' 5%'
    assert percentage_string(1, 2) == '50%'
    assert all(len(percentage_string(c, 7)) == 3 for c in range(8))


def test_padded_count_percentages() -> None:
    assert padded_count_percentages([]) == []
    assert padded_count_percentages([120, 5]) == ['120 (96%)', '  5 ( 4%)']
    assert padded_count_percentages([1, 1], total=4) == ['1 (25%)', '1 (25%)']


def test_bits_annotation() -> None:
    assert bits_annotation(0) == ' [≤1 bits]'
    assert bits_annotation(1) == ' [≤1 bits]'
    assert bits_annotation(2) == ' [≤2 bits]'
    assert bits_annotation(255) == ' [≤8 bits]'
    assert bits_annotation(256) == ' [≤9 bits]'


def test_span() -> None:
    assert span(-9, 1) == 11
    assert span(datetime.date(2000, 1, 1), datetime.date(2000, 1, 31)) == 31
    assert span(datetime.time(0, 0), datetime.time(0, 0, 1)) == 1_000_000_001
    assert span(datetime.datetime(2000, 1, 1), datetime.datetime(2000, 1, 1, 0, 0, 1)) == 1_000_000_001
    assert span(datetime.time(9, 0), datetime.time(9, 0)) == 1


def test_format_value() -> None:
    r = NumRange(int)
    r.capture("-9")
    assert format_value(r.min()) == '-9'
    assert format_value(datetime.date(1980, 2, 9)) == '1980-02-09'
    assert format_value(2.5) == '2.5'


# ---------------------------------------------------------------------------
# Rendering


def test_render_chain() -> None:
    c = ChainedSummaries(NumRange(int), StringCounter())
    for token in ["1", "-9", "NaN", "NaN", "a fish"]:
        c.capture(token)

    assert render(c) == '\n'.join([
        'ChainedSummaries captured 5',
        '    2 (40%) NumRange(int64) in (-9, 1) [≤4 bits]',
        '    3 (60%) StringCounter, 2 distinct [≤2 bits]',
        '        2 (67%) "NaN"',
        '        1 (33%) "a fish"',
    ])
    assert str(c) == render(c)


def test_render_counter() -> None:
    s = StringCounter()
    for token in ["foo", "bar", "foo"]:
        s.capture(token)

    assert render(s) == '\n'.join([
        'StringCounter captured 3, 2 distinct [≤2 bits]',
        '    2 (67%) "foo"',
        '    1 (33%) "bar"',
    ])


def test_render_truncates_long_counters() -> None:
    s = StringCounter()
    for i in range(12):
        s.capture(f"v{i:02d}")

    lines = render(s, limit=10).splitlines()
    assert len(lines) == 12
    assert lines[-1] == '    …'
    assert lines[1] == '    1 ( 8%) "v00"'

    assert len(render(s, limit=0).splitlines()) == 13


def test_render_empty_summaries() -> None:
    assert render(NumRange(int)) == 'NumRange(int64) (empty)'
    assert render(TimeRange('date')) == 'TimeRange(date) (empty)'
    assert render(StringCounter()) == 'StringCounter (empty), 0 distinct [≤1 bits]'


def test_render_ranges() -> None:
    r = NumRange(float)
    r.capture("-1.5")
    r.capture("2")
    assert render(r) == 'NumRange(float64) captured 2 in (-1.5, 2.0)'

    t = TimeRange('date')
    t.capture("2000-01-01")
    t.capture("2000-01-31")
    assert render(t) == 'TimeRange(date) captured 2 in (2000-01-01, 2000-01-31) [≤5 bits]'


def test_render_uses_loaded_config_limit(isolated_config, monkeypatch) -> None:
    monkeypatch.setenv('COLUMN_SUMMARIES_DISPLAY_LIMIT', '1')
    get_config()
    s = StringCounter()
    for token in ["a", "a", "b"]:
        s.capture(token)

    assert render(s).splitlines()[1:] == ['    2 (67%) "a"', '    …']


def test_render_without_loaded_config_uses_default_limit(isolated_config, monkeypatch) -> None:
    (isolated_config / 'column_summaries.yaml').write_text('display:\n  limit: 1\n')
    monkeypatch.setenv('COLUMN_SUMMARIES_DISPLAY_LIMIT', '1')
    s = StringCounter()
    for i in range(12):
        s.capture(f"v{i:02d}")

    assert len(render(s).splitlines()) == 12
    assert loaded_config() is None


def test_str_leaves_logging_and_environment_alone(isolated_config, monkeypatch) -> None:
    (isolated_config / '.env').write_text('COLUMN_SUMMARIES_DISPLAY_LIMIT=3\n')
    package_logger = logging.getLogger('column_summaries')
    monkeypatch.setattr(package_logger, 'level', logging.ERROR)
    handlers = list(package_logger.handlers)

    str(StringCounter())
    str(ChainedSummaries(NumRange(int), StringCounter()))

    assert package_logger.level == logging.ERROR
    assert package_logger.handlers == handlers
    assert 'COLUMN_SUMMARIES_DISPLAY_LIMIT' not in os.environ
