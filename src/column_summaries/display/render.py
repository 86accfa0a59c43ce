"""
Human readable rendering of summaries.

Rendering only reads ``count``, ``extrema``, ``ranked`` and the chain
members, so it can be called at any point while tokens are still streaming.

Example output::

    ChainedSummaries captured 5
        2 (40%) NumRange(int64) in (-9, 1) [≤4 bits]
        3 (60%) StringCounter, 2 distinct [≤2 bits]
            2 (67%) "NaN"
            1 (33%) "a fish"
"""

from typing import List, Optional

from .formatting import bits_annotation, format_value, padded_count_percentages, span
from ..core.base import AbstractCounter, AbstractRange, AbstractSummary
from ..core.chain import ChainedSummaries
from ..core.counter import StringCounter
from ..core.ranges import NumRange, TimeRange

INDENT = '    '
ELLIPSIS = '…'


def type_name(summary: AbstractSummary) -> str:
    """Short display name of a summary, including what it is parameterized by."""
    if isinstance(summary, NumRange):
        return f"NumRange({summary.dtype})"
    if isinstance(summary, TimeRange):
        return f"TimeRange({summary.eltype.__name__})"
    if isinstance(summary, StringCounter) and summary.eltype is not str:
        return f"StringCounter({summary.eltype.__name__})"
    return type(summary).__name__


def _header(summary: AbstractSummary, in_chain: bool) -> str:
    text = type_name(summary)
    if not in_chain:
        text += ' (empty)' if summary.is_empty() else f' captured {summary.count()}'
    return text


def _shows_bits(summary: AbstractRange) -> bool:
    if isinstance(summary, TimeRange):
        return True
    return isinstance(summary, NumRange) and summary.dtype.kind in 'iu'


def _counter_lines(summary: AbstractCounter, depth: int, in_chain: bool, limit: Optional[int]) -> List[str]:
    distinct = summary.distinct_count()
    lines = [f"{_header(summary, in_chain)}, {distinct} distinct{bits_annotation(distinct)}"]

    ranked = summary.ranked()
    truncated = bool(limit) and len(ranked) > limit
    if truncated:
        ranked = ranked[:limit]

    prefix = INDENT * (depth + 1)
    counts = padded_count_percentages([value for _, value in ranked], total=summary.count())
    for count_text, (key, _) in zip(counts, ranked):
        lines.append(f'{prefix}{count_text} "{key}"')
    if truncated:
        lines.append(prefix + ELLIPSIS)
    return lines


def _range_lines(summary: AbstractRange, in_chain: bool) -> List[str]:
    text = _header(summary, in_chain)
    extrema = summary.extrema()
    if extrema is not None:
        lowest, highest = extrema
        text += f" in ({format_value(lowest)}, {format_value(highest)})"
        if _shows_bits(summary):
            text += bits_annotation(span(lowest, highest))
    return [text]


def _chain_lines(chain: ChainedSummaries, depth: int, in_chain: bool, limit: Optional[int]) -> List[str]:
    lines = [_header(chain, in_chain)]
    prefix = INDENT * (depth + 1)
    counts = padded_count_percentages([member.count() for member in chain])
    for count_text, member in zip(counts, chain):
        member_lines = _lines(member, depth + 1, True, limit)
        lines.append(f"{prefix}{count_text} {member_lines[0]}")
        lines.extend(member_lines[1:])
    return lines


def _lines(summary: AbstractSummary, depth: int, in_chain: bool, limit: Optional[int]) -> List[str]:
    if isinstance(summary, ChainedSummaries):
        return _chain_lines(summary, depth, in_chain, limit)
    if isinstance(summary, AbstractCounter):
        return _counter_lines(summary, depth, in_chain, limit)
    if isinstance(summary, AbstractRange):
        return _range_lines(summary, in_chain)
    return [_header(summary, in_chain)]


def render(summary: AbstractSummary, limit: Optional[int] = None) -> str:
    """
    Render a summary as indented, multi-line text.

    Args:
        summary: Any summary
        limit: Maximum number of counter rows to list. ``None`` uses
            ``display.limit`` of the loaded configuration, or the default
            when none was loaded; ``0`` lists every row. Rendering never
            loads configuration itself.

    Returns:
        The rendered text, without a trailing newline

    Example:
        >>> s = StringCounter()
        >>> for token in ["foo", "bar", "foo"]:
        ...     s.capture(token)
        >>> print(render(s))
        StringCounter captured 3, 2 distinct [≤2 bits]
            2 (67%) "foo"
            1 (33%) "bar"
    """
    if limit is None:
        from ..config import DEFAULTS, loaded_config
        config = loaded_config()
        if config is None:
            limit = DEFAULTS['display']['limit']
        else:
            limit = config.get('display.limit')
    return '\n'.join(_lines(summary, 0, False, limit))
